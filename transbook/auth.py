# TRANSBOOK/backend/transbook/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from transbook.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from transbook.database import get_db
from transbook.models import models as db_models

logger = logging.getLogger(__name__)

# auto_error=False : on renvoie nous-mêmes un 401 quand l'en-tête manque
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Hash corrompu en base ou mot de passe de plus de 72 octets
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Crée un JWT signé; `sub` doit contenir l'identifiant du compte"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info(f"Token refusé: {e}")
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> db_models.User:
    """
    Résout le compte appelant à partir du token Bearer.
    Lève un 401 si le token est absent, invalide, expiré ou si le compte n'existe plus.
    """
    if credentials is None:
        raise _unauthorized("Non authentifié")

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise _unauthorized("Token invalide")

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Token invalide")

    user = db.query(db_models.User).filter(db_models.User.id == user_id).first()
    if not user:
        raise _unauthorized("Compte introuvable")

    return user
