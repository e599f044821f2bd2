"""
API tests for /auth endpoints and the authorization guards.
"""

from movielist.api.auth import check_admin, check_correct_user_or_admin


class TestTokenEndpoint:
    """Tests for POST /auth/token."""

    def test_login(self, client, tokens):
        r = client.post("/auth/token", json={"username": "u1", "password": "password1"})
        assert r.status_code == 200
        token = r.json()["token"]

        r = client.get("/users/u1", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 200

    def test_login_wrong_password(self, client, tokens):
        r = client.post("/auth/token", json={"username": "u1", "password": "wrong"})
        assert r.status_code == 401
        assert r.json()["detail"] == "Invalid username/password"

    def test_login_unknown_user(self, client, tokens):
        r = client.post("/auth/token", json={"username": "ghost", "password": "password1"})
        assert r.status_code == 401

    def test_login_bad_body(self, client):
        r = client.post("/auth/token", json={"username": "u1"})
        assert r.status_code == 400


class TestRegisterEndpoint:
    """Tests for POST /auth/register."""

    PAYLOAD = {
        "username": "new",
        "password": "password1",
        "firstName": "New",
        "lastName": "User",
        "email": "new@example.com",
    }

    def test_register(self, client):
        r = client.post("/auth/register", json=self.PAYLOAD)
        assert r.status_code == 201
        token = r.json()["token"]

        r = client.get("/users/new", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 200
        assert r.json()["user"]["isAdmin"] is False

    def test_register_cannot_claim_admin(self, client):
        r = client.post("/auth/register", json={**self.PAYLOAD, "isAdmin": True})
        assert r.status_code == 400

    def test_register_duplicate(self, client, tokens):
        r = client.post("/auth/register", json={**self.PAYLOAD, "username": "u1"})
        assert r.status_code == 409


class TestGuards:
    """Unit tests for the verdict functions behind the guards."""

    def test_check_admin(self):
        assert check_admin({"username": "a", "isAdmin": True}).allowed
        assert not check_admin({"username": "u", "isAdmin": False}).allowed
        assert check_admin(None).reason == "not logged in"

    def test_check_correct_user_or_admin(self):
        assert check_correct_user_or_admin({"username": "u1", "isAdmin": False}, "u1").allowed
        assert check_correct_user_or_admin({"username": "a", "isAdmin": True}, "u1").allowed
        verdict = check_correct_user_or_admin({"username": "u2", "isAdmin": False}, "u1")
        assert not verdict.allowed
        assert "u2" in verdict.reason
        assert not check_correct_user_or_admin(None, "u1").allowed


class TestSystemEndpoints:

    def test_health(self, client, tokens):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "database": "connected", "users": 3}

    def test_root(self, client):
        assert client.get("/").json()["message"] == "Movie List API"
