# TRANSBOOK/backend/tests/conftest.py : configuration pour les tests

import os
import sys
from pathlib import Path

# Ajoute le dossier parent au PYTHONPATH
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))

# Base de données de test (doit être définie avant l'import de l'application)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from transbook.main import app
from transbook.database import create_tables, drop_tables, engine, get_db
from transbook.models import models  # noqa: F401

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def tables():
    """Créer les tables avant chaque test, les supprimer après"""
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def db_session(tables):
    """Session de base de données pour tester les services sans HTTP"""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(tables):
    """Client de test avec la base de données de test"""
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, email, password="Test123!"):
    """Inscrit un compte et renvoie les en-têtes d'authentification"""
    client.post("/api/auth/register", json={"email": email, "password": password})
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client, "owner@transbook.test")


@pytest.fixture
def other_headers(client):
    return register_and_login(client, "other@transbook.test")


@pytest.fixture
def login(client):
    def _login(email, password="Test123!"):
        return register_and_login(client, email, password)
    return _login


@pytest.fixture
def fleet(client, auth_headers):
    """Un client, un véhicule et un chauffeur appartenant au compte principal"""
    customer = client.post("/api/customers", json={"name": "Sharma Logistics"}, headers=auth_headers)
    vehicle = client.post("/api/vehicles", json={
        "registrationNumber": "MH12-AB-1234",
        "type": "truck"
    }, headers=auth_headers)
    driver = client.post("/api/drivers", json={
        "name": "Ravi Kumar",
        "phone": "9876543210",
        "licenseNumber": "DL-0420110012345"
    }, headers=auth_headers)
    assert customer.status_code == 201
    assert vehicle.status_code == 201
    assert driver.status_code == 201
    return {
        "customerId": customer.json()["id"],
        "vehicleId": vehicle.json()["id"],
        "driverId": driver.json()["id"],
    }
