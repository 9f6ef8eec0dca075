# TRANSBOOK/backend/transbook/routes/resources.py : routes CRUD communes aux six types d'entités

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from transbook.models import models as db_models
from transbook.database import get_db
from transbook.auth import get_current_user
from transbook.services.repository import Kind, KINDS, OwnedRepository


def build_router(kind: Kind) -> APIRouter:
    """Construit /api/{kind} ; chaque appel passe l'id du compte connecté au dépôt"""
    router = APIRouter(prefix=f"/api/{kind.name}", tags=[kind.name])
    CreateSchema = kind.create_schema
    UpdateSchema = kind.update_schema

    @router.get("", response_model=List[kind.out_schema])
    def list_records(
        db: Session = Depends(get_db),
        current_user: db_models.User = Depends(get_current_user)
    ):
        return OwnedRepository(db, kind).list(current_user.id)

    @router.get("/{record_id}", response_model=kind.out_schema)
    def get_record(
        record_id: str,
        db: Session = Depends(get_db),
        current_user: db_models.User = Depends(get_current_user)
    ):
        return OwnedRepository(db, kind).get(record_id, current_user.id)

    @router.post("", response_model=kind.out_schema, status_code=status.HTTP_201_CREATED)
    def create_record(
        payload: CreateSchema,
        db: Session = Depends(get_db),
        current_user: db_models.User = Depends(get_current_user)
    ):
        return OwnedRepository(db, kind).create(payload, current_user.id)

    @router.put("/{record_id}", response_model=kind.out_schema)
    def update_record(
        record_id: str,
        payload: UpdateSchema,
        db: Session = Depends(get_db),
        current_user: db_models.User = Depends(get_current_user)
    ):
        return OwnedRepository(db, kind).update(record_id, payload, current_user.id)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_record(
        record_id: str,
        db: Session = Depends(get_db),
        current_user: db_models.User = Depends(get_current_user)
    ):
        OwnedRepository(db, kind).delete(record_id, current_user.id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


routers = [build_router(kind) for kind in KINDS]
