# TRANSBOOK/backend/scripts/seed_data.py : script pour générer des données de démonstration

#!/usr/bin/env python
"""
Script pour générer un compte de démonstration et des données réalistes.
Les données sont écrites dans la base configurée (DATABASE_URL) : c'est le
seul mode démo, l'API ne sert jamais de données fictives.
"""

import random
import sys
import os
from datetime import date, datetime, timedelta
from decimal import Decimal
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from transbook.database import SessionLocal, create_tables
from transbook.models import models
from transbook.auth import hash_password

DEMO_EMAIL = "demo@transbook.app"
DEMO_PASSWORD = "demo1234"

CITIES = ["Mumbai", "Pune", "Delhi", "Jaipur", "Ahmedabad", "Surat", "Nagpur", "Indore"]

def generate_test_data():
    """Génère des données de test pour la démo"""
    create_tables()
    db = SessionLocal()

    try:
        if db.query(models.User).filter(models.User.email == DEMO_EMAIL).first():
            print(f"ℹ️  Le compte {DEMO_EMAIL} existe déjà, rien à faire")
            return

        # Créer un utilisateur de démo
        demo_user = models.User(
            email=DEMO_EMAIL,
            first_name="Demo",
            last_name="Transport",
            password_hash=hash_password(DEMO_PASSWORD)
        )
        db.add(demo_user)
        db.commit()
        db.refresh(demo_user)
        suffix = demo_user.id[:8].upper()

        customers = []
        for i in range(4):
            customer = models.Customer(
                user_id=demo_user.id,
                name=f"Client {i+1}",
                phone=f"98{random.randint(10000000, 99999999)}",
                credit_limit=Decimal(random.choice([50000, 100000, 250000])),
                outstanding_amount=Decimal(random.randint(0, 40000)),
                status="active"
            )
            db.add(customer)
            customers.append(customer)

        vehicles = []
        for i in range(5):
            vehicle = models.Vehicle(
                user_id=demo_user.id,
                registration_number=f"MH12-{suffix}-{i+1:02d}",
                type=random.choice(["truck", "trailer", "container"]),
                capacity=Decimal(random.choice([10, 16, 25])),
                status=random.choice(["available", "available", "in_transit", "maintenance"])
            )
            db.add(vehicle)
            vehicles.append(vehicle)

        drivers = []
        for i in range(4):
            driver = models.Driver(
                user_id=demo_user.id,
                name=f"Chauffeur {i+1}",
                phone=f"97{random.randint(10000000, 99999999)}",
                license_number=f"DL-{suffix}-{i+1:03d}",
                status="available"
            )
            db.add(driver)
            drivers.append(driver)
        db.commit()

        # Trajets sur 3 mois, avec factures et dépenses associées
        for n in range(30):
            started = datetime.utcnow() - timedelta(days=random.randint(0, 90))
            origin, destination = random.sample(CITIES, 2)
            freight = Decimal(random.randint(8000, 60000))
            trip = models.Trip(
                user_id=demo_user.id,
                customer_id=random.choice(customers).id,
                vehicle_id=random.choice(vehicles).id,
                driver_id=random.choice(drivers).id,
                trip_number=f"TRP-{suffix}-{n+1:04d}",
                origin=origin,
                destination=destination,
                freight=freight,
                advance=Decimal(random.choice([0, 2000, 5000])),
                start_date=started,
                status=random.choice(["scheduled", "in_progress", "completed", "completed", "cancelled"])
            )
            db.add(trip)
            db.flush()

            if trip.status == "completed":
                gst = (freight * Decimal("0.18")).quantize(Decimal("0.01"))
                total = freight + gst
                status = random.choice(["sent", "paid", "overdue"])
                db.add(models.Invoice(
                    user_id=demo_user.id,
                    customer_id=trip.customer_id,
                    trip_id=trip.id,
                    invoice_number=f"INV-{suffix}-{n+1:04d}",
                    amount=freight,
                    gst_amount=gst,
                    total_amount=total,
                    due_date=date.today() + timedelta(days=30),
                    status=status,
                    paid_amount=total if status == "paid" else Decimal("0")
                ))

            # Carburant et péages sur la plupart des trajets
            if random.random() < 0.7:
                db.add(models.Expense(
                    user_id=demo_user.id,
                    trip_id=trip.id,
                    vehicle_id=trip.vehicle_id,
                    category=random.choice(["fuel", "toll"]),
                    amount=Decimal(random.randint(1000, 9000)),
                    date=started.date()
                ))

        db.commit()
        print("✅ Données de démonstration générées avec succès!")
        print(f"👤 Utilisateur de démo: {DEMO_EMAIL} / {DEMO_PASSWORD}")
    finally:
        db.close()

if __name__ == "__main__":
    generate_test_data()
