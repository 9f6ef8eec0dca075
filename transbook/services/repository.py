# TRANSBOOK/backend/transbook/services/repository.py : accès aux données filtré par compte

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type, Union
import logging

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from transbook.errors import ConflictError, NotFoundError, PersistenceError, ValidationError
from transbook.models import models
from transbook.schemas import schemas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kind:
    """
    Description d'un type d'entité possédée par un compte.

    `references` associe un champ clé étrangère au modèle visé : la cible
    doit appartenir au même compte. `check` reçoit l'enregistrement après
    fusion des champs et lève ValidationError si l'état est incohérent.
    """
    name: str
    label: str
    model: Type[Any]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    out_schema: Type[BaseModel]
    owner_column: str = "user_id"
    references: Dict[str, Type[Any]] = field(default_factory=dict)
    check: Optional[Callable[[Any], None]] = None


def check_invoice_amounts(invoice):
    total = invoice.total_amount
    paid = invoice.paid_amount or 0
    if total is not None and paid > total:
        raise ValidationError("paidAmount ne peut pas dépasser totalAmount")


CUSTOMERS = Kind(
    name="customers",
    label="Client",
    model=models.Customer,
    create_schema=schemas.CustomerCreate,
    update_schema=schemas.CustomerUpdate,
    out_schema=schemas.CustomerOut,
)

VEHICLES = Kind(
    name="vehicles",
    label="Véhicule",
    model=models.Vehicle,
    create_schema=schemas.VehicleCreate,
    update_schema=schemas.VehicleUpdate,
    out_schema=schemas.VehicleOut,
)

DRIVERS = Kind(
    name="drivers",
    label="Chauffeur",
    model=models.Driver,
    create_schema=schemas.DriverCreate,
    update_schema=schemas.DriverUpdate,
    out_schema=schemas.DriverOut,
)

TRIPS = Kind(
    name="trips",
    label="Trajet",
    model=models.Trip,
    create_schema=schemas.TripCreate,
    update_schema=schemas.TripUpdate,
    out_schema=schemas.TripOut,
    references={
        "customer_id": models.Customer,
        "vehicle_id": models.Vehicle,
        "driver_id": models.Driver,
    },
)

INVOICES = Kind(
    name="invoices",
    label="Facture",
    model=models.Invoice,
    create_schema=schemas.InvoiceCreate,
    update_schema=schemas.InvoiceUpdate,
    out_schema=schemas.InvoiceOut,
    references={
        "customer_id": models.Customer,
        "trip_id": models.Trip,
    },
    check=check_invoice_amounts,
)

EXPENSES = Kind(
    name="expenses",
    label="Dépense",
    model=models.Expense,
    create_schema=schemas.ExpenseCreate,
    update_schema=schemas.ExpenseUpdate,
    out_schema=schemas.ExpenseOut,
    references={
        "trip_id": models.Trip,
        "vehicle_id": models.Vehicle,
    },
)

KINDS = [CUSTOMERS, VEHICLES, DRIVERS, TRIPS, INVOICES, EXPENSES]


class OwnedRepository:
    """
    CRUD générique pour un type d'entité.

    Chaque méthode exige `owner_id` : toutes les requêtes, mises à jour et
    suppressions filtrent sur la colonne propriétaire. Un enregistrement
    d'un autre compte est traité exactement comme un enregistrement absent.
    """

    def __init__(self, db: Session, kind: Kind):
        self.db = db
        self.kind = kind
        self.model = kind.model

    def _scoped(self, owner_id: str, model=None):
        model = model or self.model
        owner_column = getattr(model, self.kind.owner_column)
        return self.db.query(model).filter(owner_column == owner_id)

    def _validate(self, schema: Type[BaseModel], fields: Union[BaseModel, dict]) -> BaseModel:
        if isinstance(fields, schema):
            return fields
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError([
                {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
            ])

    def _check_references(self, values: dict, owner_id: str):
        for column, target in self.kind.references.items():
            ref_id = values.get(column)
            if ref_id is None:
                continue
            exists = self._scoped(owner_id, target).filter(target.id == ref_id).first()
            if not exists:
                raise ValidationError(f"{column}: référence introuvable")

    def _commit(self, action: str):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Conflit lors de {action} ({self.kind.name}): {e.orig}")
            raise ConflictError(f"{self.kind.label}: contrainte d'unicité ou de référence violée")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Erreur base de données lors de {action} ({self.kind.name})")
            raise PersistenceError(f"Échec de {action}")

    def list(self, owner_id: str) -> List[Any]:
        """Tous les enregistrements du compte, du plus récent au plus ancien"""
        try:
            return self._scoped(owner_id).order_by(self.model.created_at.desc()).all()
        except SQLAlchemyError:
            logger.exception(f"Erreur de lecture ({self.kind.name})")
            raise PersistenceError("Échec de la lecture")

    def find(self, record_id: str, owner_id: str) -> Optional[Any]:
        try:
            return self._scoped(owner_id).filter(self.model.id == record_id).first()
        except SQLAlchemyError:
            logger.exception(f"Erreur de lecture ({self.kind.name})")
            raise PersistenceError("Échec de la lecture")

    def get(self, record_id: str, owner_id: str) -> Any:
        record = self.find(record_id, owner_id)
        if not record:
            raise NotFoundError(f"{self.kind.label} non trouvé")
        return record

    def create(self, fields: Union[BaseModel, dict], owner_id: str) -> Any:
        payload = self._validate(self.kind.create_schema, fields)
        values = payload.model_dump()
        self._check_references(values, owner_id)

        # Le propriétaire vient toujours du compte authentifié
        values[self.kind.owner_column] = owner_id
        record = self.model(**values)
        if self.kind.check:
            self.kind.check(record)

        self.db.add(record)
        self._commit("la création")
        self.db.refresh(record)
        logger.info(f"{self.kind.name} créé: {record.id} (compte {owner_id})")
        return record

    def update(self, record_id: str, fields: Union[BaseModel, dict], owner_id: str) -> Any:
        """Fusionne uniquement les champs fournis dans l'enregistrement existant"""
        payload = self._validate(self.kind.update_schema, fields)
        changes = payload.model_dump(exclude_unset=True)

        record = self.get(record_id, owner_id)
        self._check_references(changes, owner_id)

        for name, value in changes.items():
            setattr(record, name, value)
        record.updated_at = datetime.utcnow()
        if self.kind.check:
            try:
                self.kind.check(record)
            except ValidationError:
                self.db.rollback()
                raise

        self._commit("la mise à jour")
        self.db.refresh(record)
        logger.info(f"{self.kind.name} mis à jour: {record.id} (compte {owner_id})")
        return record

    def delete(self, record_id: str, owner_id: str) -> bool:
        """
        Supprime l'enregistrement s'il appartient au compte.
        Ne lève rien s'il n'existe pas (suppression idempotente).
        """
        try:
            deleted = self._scoped(owner_id).filter(
                self.model.id == record_id
            ).delete(synchronize_session=False)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Suppression refusée ({self.kind.name}): {e.orig}")
            raise ConflictError(f"{self.kind.label} encore référencé par d'autres enregistrements")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Erreur base de données lors de la suppression ({self.kind.name})")
            raise PersistenceError("Échec de la suppression")

        self._commit("la suppression")
        if deleted:
            logger.info(f"{self.kind.name} supprimé: {record_id} (compte {owner_id})")
        return bool(deleted)
