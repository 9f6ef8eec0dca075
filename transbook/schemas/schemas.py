# TRANSBOOK/backend/transbook/schemas/schemas.py

import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, ClassVar, Optional, List, Tuple
from transbook.constants import (
    CustomerStatus,
    VehicleStatus,
    DriverStatus,
    TripStatus,
    InvoiceStatus,
    ExpenseCategory,
)

# Montants en NUMERIC(12,2) / mesures en NUMERIC(8,2)
NonNegativeMoney = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]
Measure = Annotated[Decimal, Field(ge=0, max_digits=8, decimal_places=2)]
RequiredText = Annotated[str, Field(min_length=1)]
EmailText = Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1)]

# bcrypt ne hache que les 72 premiers octets
MAX_PASSWORD_BYTES = 72


class CamelModel(BaseModel):
    """Les clés JSON sont en camelCase, le snake_case reste accepté en entrée."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(CamelModel):
    """
    Corps de mise à jour partielle : seuls les champs envoyés sont appliqués.
    Un champ obligatoire en base ne peut pas être remis à null.
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} ne peut pas être null")
        return self


class RecordOut(CamelModel):
    """Champs communs à toutes les entités possédées par un compte"""
    id: str
    user_id: str
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_serializer('created_at', 'updated_at')
    def serialize_datetime(self, value: Optional[dt.datetime]) -> Optional[str]:
        """Sérialise un datetime en chaîne ISO 8601 pour JSON."""
        return value.isoformat() if value else None

# ---------- USER SCHEMAS ----------
class UserCreate(CamelModel):
    email: EmailText
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"le mot de passe ne doit pas dépasser {MAX_PASSWORD_BYTES} octets")
        return value

class UserLogin(CamelModel):
    email: EmailText
    password: RequiredText

class UserOut(CamelModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

# ---------- TOKEN SCHEMA ----------
class Token(BaseModel):
    access_token: str
    token_type: str

# ---------- CUSTOMER SCHEMAS ----------
class CustomerCreate(CamelModel):
    name: RequiredText
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    gstin: Optional[str] = None
    credit_limit: NonNegativeMoney = Decimal("0")
    outstanding_amount: NonNegativeMoney = Decimal("0")
    status: CustomerStatus = "active"

class CustomerUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = ("name", "credit_limit", "outstanding_amount", "status")

    name: Optional[RequiredText] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    gstin: Optional[str] = None
    credit_limit: Optional[NonNegativeMoney] = None
    outstanding_amount: Optional[NonNegativeMoney] = None
    status: Optional[CustomerStatus] = None

class CustomerOut(RecordOut):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    gstin: Optional[str] = None
    credit_limit: Optional[Decimal] = None
    outstanding_amount: Optional[Decimal] = None
    status: str

# ---------- VEHICLE SCHEMAS ----------
class VehicleCreate(CamelModel):
    registration_number: RequiredText
    type: RequiredText
    capacity: Optional[Measure] = None
    capacity_unit: Optional[str] = "tons"
    model: Optional[str] = None
    year: Optional[int] = Field(None, ge=1900, le=2100)
    insurance_number: Optional[str] = None
    insurance_expiry: Optional[dt.date] = None
    permit_number: Optional[str] = None
    permit_expiry: Optional[dt.date] = None
    fitness_expiry: Optional[dt.date] = None
    status: VehicleStatus = "available"

class VehicleUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = ("registration_number", "type", "status")

    registration_number: Optional[RequiredText] = None
    type: Optional[RequiredText] = None
    capacity: Optional[Measure] = None
    capacity_unit: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = Field(None, ge=1900, le=2100)
    insurance_number: Optional[str] = None
    insurance_expiry: Optional[dt.date] = None
    permit_number: Optional[str] = None
    permit_expiry: Optional[dt.date] = None
    fitness_expiry: Optional[dt.date] = None
    status: Optional[VehicleStatus] = None

class VehicleOut(RecordOut):
    registration_number: str
    type: str
    capacity: Optional[Decimal] = None
    capacity_unit: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    insurance_number: Optional[str] = None
    insurance_expiry: Optional[dt.date] = None
    permit_number: Optional[str] = None
    permit_expiry: Optional[dt.date] = None
    fitness_expiry: Optional[dt.date] = None
    status: str

# ---------- DRIVER SCHEMAS ----------
class DriverCreate(CamelModel):
    name: RequiredText
    phone: RequiredText
    email: Optional[str] = None
    license_number: RequiredText
    license_expiry: Optional[dt.date] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    status: DriverStatus = "available"

class DriverUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = ("name", "phone", "license_number", "status")

    name: Optional[RequiredText] = None
    phone: Optional[RequiredText] = None
    email: Optional[str] = None
    license_number: Optional[RequiredText] = None
    license_expiry: Optional[dt.date] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    status: Optional[DriverStatus] = None

class DriverOut(RecordOut):
    name: str
    phone: str
    email: Optional[str] = None
    license_number: str
    license_expiry: Optional[dt.date] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    status: str

# ---------- TRIP SCHEMAS ----------
class TripCreate(CamelModel):
    customer_id: RequiredText
    vehicle_id: RequiredText
    driver_id: RequiredText
    trip_number: RequiredText
    origin: RequiredText
    destination: RequiredText
    distance: Optional[Measure] = None
    freight: NonNegativeMoney
    advance: NonNegativeMoney = Decimal("0")
    start_date: Optional[dt.datetime] = None
    end_date: Optional[dt.datetime] = None
    status: TripStatus = "scheduled"
    notes: Optional[str] = None

class TripUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = (
        "customer_id", "vehicle_id", "driver_id", "trip_number",
        "origin", "destination", "freight", "status",
    )

    customer_id: Optional[RequiredText] = None
    vehicle_id: Optional[RequiredText] = None
    driver_id: Optional[RequiredText] = None
    trip_number: Optional[RequiredText] = None
    origin: Optional[RequiredText] = None
    destination: Optional[RequiredText] = None
    distance: Optional[Measure] = None
    freight: Optional[NonNegativeMoney] = None
    advance: Optional[NonNegativeMoney] = None
    start_date: Optional[dt.datetime] = None
    end_date: Optional[dt.datetime] = None
    status: Optional[TripStatus] = None
    notes: Optional[str] = None

class TripOut(RecordOut):
    customer_id: str
    vehicle_id: str
    driver_id: str
    trip_number: str
    origin: str
    destination: str
    distance: Optional[Decimal] = None
    freight: Decimal
    advance: Optional[Decimal] = None
    start_date: Optional[dt.datetime] = None
    end_date: Optional[dt.datetime] = None
    status: str
    notes: Optional[str] = None

# ---------- INVOICE SCHEMAS ----------
class InvoiceCreate(CamelModel):
    customer_id: RequiredText
    trip_id: Optional[str] = None
    invoice_number: RequiredText
    amount: NonNegativeMoney
    gst_amount: NonNegativeMoney = Decimal("0")
    total_amount: NonNegativeMoney
    due_date: Optional[dt.date] = None
    status: InvoiceStatus = "draft"
    paid_amount: NonNegativeMoney = Decimal("0")
    paid_date: Optional[dt.datetime] = None

class InvoiceUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = ("customer_id", "invoice_number", "amount", "total_amount", "status")

    customer_id: Optional[RequiredText] = None
    trip_id: Optional[str] = None
    invoice_number: Optional[RequiredText] = None
    amount: Optional[NonNegativeMoney] = None
    gst_amount: Optional[NonNegativeMoney] = None
    total_amount: Optional[NonNegativeMoney] = None
    due_date: Optional[dt.date] = None
    status: Optional[InvoiceStatus] = None
    paid_amount: Optional[NonNegativeMoney] = None
    paid_date: Optional[dt.datetime] = None

class InvoiceOut(RecordOut):
    customer_id: str
    trip_id: Optional[str] = None
    invoice_number: str
    amount: Decimal
    gst_amount: Optional[Decimal] = None
    total_amount: Decimal
    due_date: Optional[dt.date] = None
    status: str
    paid_amount: Optional[Decimal] = None
    paid_date: Optional[dt.datetime] = None

# ---------- EXPENSE SCHEMAS ----------
class ExpenseCreate(CamelModel):
    category: ExpenseCategory
    description: Optional[str] = None
    amount: PositiveMoney
    date: dt.date
    bill_number: Optional[str] = None
    trip_id: Optional[str] = None
    vehicle_id: Optional[str] = None

class ExpenseUpdate(PartialUpdate):
    not_nullable: ClassVar[Tuple[str, ...]] = ("category", "amount", "date")

    category: Optional[ExpenseCategory] = None
    description: Optional[str] = None
    amount: Optional[PositiveMoney] = None
    date: Optional[dt.date] = None
    bill_number: Optional[str] = None
    trip_id: Optional[str] = None
    vehicle_id: Optional[str] = None

class ExpenseOut(RecordOut):
    category: str
    description: Optional[str] = None
    amount: Decimal
    date: dt.date
    bill_number: Optional[str] = None
    trip_id: Optional[str] = None
    vehicle_id: Optional[str] = None

# ---------- DASHBOARD SCHEMAS ----------
class DashboardStats(CamelModel):
    total_revenue: Decimal
    active_trips: int
    pending_payments: Decimal
    available_vehicles: int
    total_vehicles: int

class ExpenseCategoryBreakdown(CamelModel):
    category: str
    category_name: str
    total: Decimal
    count: int
    percentage: float

class ExpenseBreakdownResponse(CamelModel):
    total: Decimal
    categories: List[ExpenseCategoryBreakdown]
