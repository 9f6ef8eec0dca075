# TRANSBOOK/backend/transbook/routes/dashboard.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from transbook.database import get_db
from transbook.auth import get_current_user
from transbook.models import models as db_models
from transbook.schemas import schemas
from transbook.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

@router.get("/stats", response_model=schemas.DashboardStats)
def dashboard_stats(
    db: Session = Depends(get_db),
    current_user: db_models.User = Depends(get_current_user)
):
    """Chiffre d'affaires, trajets en cours, paiements en attente et disponibilité de la flotte"""
    return DashboardService(db, current_user.id).get_stats()

@router.get("/expenses-by-category", response_model=schemas.ExpenseBreakdownResponse)
def expenses_by_category(
    db: Session = Depends(get_db),
    current_user: db_models.User = Depends(get_current_user)
):
    """Dépenses par catégorie avec pourcentages"""
    return DashboardService(db, current_user.id).get_expenses_by_category()
