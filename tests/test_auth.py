# TRANSBOOK/backend/tests/test_auth.py : tests pour l'authentification

import uuid
from datetime import timedelta
from transbook.auth import create_access_token


class TestAuth:
    test_email = "test@example.com"
    test_password = "Test123!"

    def test_register_user(self, client):
        """Test d'inscription utilisateur"""
        response = client.post("/api/auth/register", json={
            "email": self.test_email,
            "password": self.test_password,
            "firstName": "Asha",
            "lastName": "Patil"
        })
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == self.test_email
        assert data["displayName"] == "Asha Patil"
        assert "id" in data
        assert "passwordHash" not in data

    def test_register_duplicate_email(self, client):
        """Test d'inscription avec email déjà utilisé"""
        unique_email = f"test_{uuid.uuid4()}@test.com"

        response1 = client.post("/api/auth/register", json={
            "email": unique_email,
            "password": "password123"
        })
        assert response1.status_code == 201

        response2 = client.post("/api/auth/register", json={
            "email": unique_email.upper(),
            "password": "password123"
        })
        assert response2.status_code == 400
        assert "Email déjà utilisé" in response2.json()["detail"]

    def test_register_short_password(self, client):
        """Test d'inscription avec mot de passe trop court"""
        response = client.post("/api/auth/register", json={
            "email": "new@test.com",
            "password": "123"
        })
        assert response.status_code == 422

    def test_register_password_over_72_bytes(self, client):
        """bcrypt refuse plus de 72 octets : réponse 422, pas 500"""
        response = client.post("/api/auth/register", json={
            "email": "long@test.com",
            "password": "x" * 100
        })
        assert response.status_code == 422

        # 36 caractères mais 72 octets en UTF-8 : accepté
        response = client.post("/api/auth/register", json={
            "email": "accents@test.com",
            "password": "é" * 36
        })
        assert response.status_code == 201

        # 37 caractères, 74 octets : refusé
        response = client.post("/api/auth/register", json={
            "email": "accents2@test.com",
            "password": "é" * 37
        })
        assert response.status_code == 422

    def test_login_with_long_password(self, client, auth_headers):
        response = client.post("/api/auth/login", json={
            "email": "owner@transbook.test",
            "password": "x" * 100
        })
        assert response.status_code == 401

    def test_register_blank_email(self, client):
        response = client.post("/api/auth/register", json={
            "email": "   ",
            "password": "password123"
        })
        assert response.status_code == 422

    def test_register_email_is_normalised(self, client):
        response = client.post("/api/auth/register", json={
            "email": "  Mixed.Case@Test.com ",
            "password": "password123"
        })
        assert response.status_code == 201
        assert response.json()["email"] == "mixed.case@test.com"

        response = client.post("/api/auth/login", json={
            "email": "mixed.case@test.com",
            "password": "password123"
        })
        assert response.status_code == 200

    def test_login_success(self, client):
        """Test de connexion réussie"""
        client.post("/api/auth/register", json={
            "email": self.test_email,
            "password": self.test_password
        })

        response = client.post("/api/auth/login", json={
            "email": self.test_email,
            "password": self.test_password
        })
        assert response.status_code == 200
        data = response.json()
        assert "access_token" in data
        assert data["token_type"] == "bearer"

    def test_login_wrong_password(self, client):
        """Test de connexion avec mauvais mot de passe"""
        client.post("/api/auth/register", json={
            "email": self.test_email,
            "password": self.test_password
        })

        response = client.post("/api/auth/login", json={
            "email": self.test_email,
            "password": "wrongpassword"
        })
        assert response.status_code == 401
        assert "Email ou mot de passe incorrect" in response.json()["detail"]

    def test_login_nonexistent_user(self, client):
        """Test de connexion avec un utilisateur qui n'existe pas"""
        response = client.post("/api/auth/login", json={
            "email": "nonexistent@test.com",
            "password": "password123"
        })
        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"email": self.test_email})
        assert response.status_code == 422

    def test_current_user(self, client, auth_headers):
        response = client.get("/api/auth/user", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == "owner@transbook.test"

    def test_logout(self, client, auth_headers):
        response = client.post("/api/auth/logout", headers=auth_headers)
        assert response.status_code == 200

    def test_protected_route_without_token(self, client):
        """Test d'accès à une route protégée sans token"""
        for path in ["/api/customers", "/api/trips", "/api/dashboard/stats", "/api/auth/user"]:
            response = client.get(path)
            assert response.status_code == 401, path

    def test_protected_route_with_invalid_token(self, client):
        """Test d'accès à une route protégée avec token invalide"""
        headers = {"Authorization": "Bearer invalid_token"}
        response = client.get("/api/customers", headers=headers)
        assert response.status_code == 401

    def test_expired_token(self, client, auth_headers):
        user_id = client.get("/api/auth/user", headers=auth_headers).json()["id"]
        token = create_access_token({"sub": user_id}, expires_delta=timedelta(minutes=-5))
        response = client.get("/api/customers", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_for_unknown_account(self, client):
        token = create_access_token({"sub": str(uuid.uuid4())})
        response = client.get("/api/customers", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_protected_route_with_valid_token(self, client, auth_headers):
        """Test d'accès à une route protégée avec token valide"""
        response = client.get("/api/customers", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []


class TestHealth:
    def test_health_without_auth(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health_check"] == "/api/health"
