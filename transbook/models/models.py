# TRANSBOOK/backend/transbook/models/models.py

import uuid
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from transbook.database import Base


def generate_id():
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"
    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    password_hash = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    customers = relationship("Customer", back_populates="owner", cascade="all, delete-orphan")
    vehicles = relationship("Vehicle", back_populates="owner", cascade="all, delete-orphan")
    drivers = relationship("Driver", back_populates="owner", cascade="all, delete-orphan")
    trips = relationship("Trip", back_populates="owner", cascade="all, delete-orphan")
    invoices = relationship("Invoice", back_populates="owner", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="owner", cascade="all, delete-orphan")

    @property
    def display_name(self):
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full_name or self.email


class Customer(Base):
    __tablename__ = "customers"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String)
    phone = Column(String)
    address = Column(Text)
    gstin = Column(String)
    credit_limit = Column(Numeric(12, 2), default=0)
    outstanding_amount = Column(Numeric(12, 2), default=0)
    status = Column(String, nullable=False, default="active")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="customers")


class Vehicle(Base):
    __tablename__ = "vehicles"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    registration_number = Column(String, nullable=False, unique=True)
    type = Column(String, nullable=False)  # truck, trailer, container
    capacity = Column(Numeric(8, 2))
    capacity_unit = Column(String, default="tons")
    model = Column(String)
    year = Column(Integer)
    insurance_number = Column(String)
    insurance_expiry = Column(Date)
    permit_number = Column(String)
    permit_expiry = Column(Date)
    fitness_expiry = Column(Date)
    status = Column(String, nullable=False, default="available")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="vehicles")


class Driver(Base):
    __tablename__ = "drivers"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String)
    license_number = Column(String, nullable=False, unique=True)
    license_expiry = Column(Date)
    address = Column(Text)
    emergency_contact = Column(String)
    status = Column(String, nullable=False, default="available")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="drivers")


class Trip(Base):
    __tablename__ = "trips"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    vehicle_id = Column(String(36), ForeignKey("vehicles.id"), nullable=False)
    driver_id = Column(String(36), ForeignKey("drivers.id"), nullable=False)
    trip_number = Column(String, nullable=False, unique=True)
    origin = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    distance = Column(Numeric(8, 2))
    freight = Column(Numeric(12, 2), nullable=False)
    advance = Column(Numeric(12, 2), default=0)
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    status = Column(String, nullable=False, default="scheduled")
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="trips")


class Invoice(Base):
    __tablename__ = "invoices"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False)
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=True)
    invoice_number = Column(String, nullable=False, unique=True)
    amount = Column(Numeric(12, 2), nullable=False)
    gst_amount = Column(Numeric(12, 2), default=0)
    total_amount = Column(Numeric(12, 2), nullable=False)
    due_date = Column(Date)
    status = Column(String, nullable=False, default="draft")
    paid_amount = Column(Numeric(12, 2), default=0)
    paid_date = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="invoices")


class Expense(Base):
    __tablename__ = "expenses"
    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=True)
    vehicle_id = Column(String(36), ForeignKey("vehicles.id"), nullable=True)
    category = Column(String, nullable=False)  # fuel, maintenance, toll, insurance, other
    description = Column(Text)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)
    bill_number = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="expenses")
