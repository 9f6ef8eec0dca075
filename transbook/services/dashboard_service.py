# TRANSBOOK/backend/transbook/services/dashboard_service.py : agrégats du tableau de bord

from sqlalchemy.orm import Session
from sqlalchemy import func, case
from decimal import Decimal
from typing import Dict
from transbook.models import models
from transbook.constants import (
    EXPENSE_CATEGORIES,
    INVOICE_SENT,
    TRIP_COMPLETED,
    TRIP_IN_PROGRESS,
    VEHICLE_AVAILABLE,
)


class DashboardService:
    """
    Statistiques d'un compte, recalculées à chaque appel.
    Chaque agrégat est une requête indépendante, sans instantané commun.
    """

    def __init__(self, db: Session, user_id: str):
        self.db = db
        self.user_id = user_id

    def get_total_revenue(self) -> Decimal:
        """Somme du fret des trajets terminés"""
        total = self.db.query(
            func.coalesce(func.sum(models.Trip.freight), 0)
        ).filter(
            models.Trip.user_id == self.user_id,
            models.Trip.status == TRIP_COMPLETED
        ).scalar()
        return Decimal(str(total or 0))

    def get_active_trips(self) -> int:
        return self.db.query(
            func.count(models.Trip.id)
        ).filter(
            models.Trip.user_id == self.user_id,
            models.Trip.status == TRIP_IN_PROGRESS
        ).scalar() or 0

    def get_pending_payments(self) -> Decimal:
        """Reste à encaisser sur les factures envoyées"""
        total = self.db.query(
            func.coalesce(
                func.sum(models.Invoice.total_amount - func.coalesce(models.Invoice.paid_amount, 0)),
                0
            )
        ).filter(
            models.Invoice.user_id == self.user_id,
            models.Invoice.status == INVOICE_SENT
        ).scalar()
        return Decimal(str(total or 0))

    def get_vehicle_counts(self) -> Dict[str, int]:
        total, available = self.db.query(
            func.count(models.Vehicle.id),
            func.sum(case(
                (models.Vehicle.status == VEHICLE_AVAILABLE, 1),
                else_=0
            ))
        ).filter(
            models.Vehicle.user_id == self.user_id
        ).one()
        return {"available": int(available or 0), "total": int(total or 0)}

    def get_stats(self) -> Dict:
        vehicles = self.get_vehicle_counts()
        return {
            "total_revenue": self.get_total_revenue(),
            "active_trips": self.get_active_trips(),
            "pending_payments": self.get_pending_payments(),
            "available_vehicles": vehicles["available"],
            "total_vehicles": vehicles["total"],
        }

    def get_expenses_by_category(self) -> Dict:
        """Dépenses groupées par catégorie avec pourcentages"""
        total_expenses = self.db.query(
            func.sum(models.Expense.amount)
        ).filter(
            models.Expense.user_id == self.user_id
        ).scalar() or 0
        total_expenses = Decimal(str(total_expenses))

        results = self.db.query(
            models.Expense.category,
            func.sum(models.Expense.amount).label('total'),
            func.count(models.Expense.id).label('count')
        ).filter(
            models.Expense.user_id == self.user_id
        ).group_by(
            models.Expense.category
        ).order_by(
            func.sum(models.Expense.amount).desc()
        ).all()

        return {
            "total": total_expenses,
            "categories": [
                {
                    "category": r[0],
                    "category_name": EXPENSE_CATEGORIES.get(r[0], r[0]),
                    "total": Decimal(str(r[1] or 0)),
                    "count": r[2],
                    "percentage": round(float(r[1] or 0) / float(total_expenses) * 100, 2) if total_expenses > 0 else 0
                }
                for r in results
            ]
        }
