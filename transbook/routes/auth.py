# TRANSBOOK/backend/transbook/routes/auth.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from transbook import auth
from transbook.models import models as db_models
from transbook.schemas.schemas import UserOut, UserCreate, UserLogin, Token
from transbook.database import get_db
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    email = user.email
    db_user = db.query(db_models.User).filter(db_models.User.email == email).first()
    if db_user:
        raise HTTPException(status_code=400, detail="Email déjà utilisé")
    new_user = db_models.User(
        email=email,
        first_name=user.first_name,
        last_name=user.last_name,
        password_hash=auth.hash_password(user.password)
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Inscription concurrente avec le même email
        db.rollback()
        raise HTTPException(status_code=400, detail="Email déjà utilisé")
    db.refresh(new_user)
    logger.info(f"Nouveau compte: {new_user.id}")
    return new_user

@router.post("/login", response_model=Token)
def login(user: UserLogin, db: Session = Depends(get_db)):
    email = user.email
    db_user = db.query(db_models.User).filter(db_models.User.email == email).first()
    if not db_user or not auth.verify_password(user.password, db_user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou mot de passe incorrect"
        )
    token = auth.create_access_token({"sub": db_user.id})
    return {"access_token": token, "token_type": "bearer"}

@router.post("/logout")
def logout(current_user: db_models.User = Depends(auth.get_current_user)):
    """Les tokens sont sans état : le client supprime simplement le sien"""
    return {"message": "Déconnecté"}

@router.get("/user", response_model=UserOut)
def current_account(current_user: db_models.User = Depends(auth.get_current_user)):
    return current_user
