# tests/test_api_auth.py
"""Login / logout / admin gate over HTTP."""

from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.services.auth_service import create_access_token, hash_password

COOKIE = "park.sid"
CREDENTIALS = {"email": "admin@example.com", "password": "admin123"}


class TestLogin:
    def test_success_sets_session_cookie(self, app, client):
        resp = client.post("/api/auth/login", json=CREDENTIALS)
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login successful"
        assert body["user"] == {"id": 1, "username": "admin", "email": "admin@example.com", "isAdmin": True}
        assert "password" not in body["user"]
        assert COOKIE in resp.cookies
        assert len(app.state.sessions) == 1

    def test_wrong_password(self, app, client):
        resp = client.post("/api/auth/login", json={**CREDENTIALS, "password": "wrong-pass"})
        assert resp.status_code == 401
        assert COOKIE not in resp.cookies
        assert len(app.state.sessions) == 0

    def test_unknown_email(self, client):
        resp = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "admin123"})
        assert resp.status_code == 401

    def test_invalid_body_is_400(self, client):
        resp = client.post("/api/auth/login", json={"email": "not-an-email", "password": "123"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["detail"] == "Validation failed"
        assert {tuple(e["loc"]) for e in body["errors"]} == {("body", "email"), ("body", "password")}

    def test_mixed_case_email_logs_in_as_stored(self):
        cfg = Settings(STORAGE_BACKEND="memory", LOG_TO_FILE=False, BCRYPT_ROUNDS=4, ADMIN_EMAIL="Ops@Park.GOV.ng")
        client = TestClient(create_app(cfg))
        resp = client.post("/api/auth/login", json={"email": "Ops@Park.GOV.ng", "password": "admin123"})
        assert resp.status_code == 200
        assert resp.json()["user"]["email"] == "Ops@Park.GOV.ng"

        # lookup stays exact
        resp = client.post("/api/auth/login", json={"email": "ops@park.gov.ng", "password": "admin123"})
        assert resp.status_code == 401

    def test_relogin_replaces_session(self, app, admin_client):
        admin_client.post("/api/auth/login", json=CREDENTIALS)
        assert len(app.state.sessions) == 1


class TestAdminGate:
    def test_me_without_login(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json() == {"detail": "Unauthorized"}

    def test_me_after_login(self, admin_client):
        resp = admin_client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json()["user"]["email"] == "admin@example.com"

    def test_unknown_session_id(self, client):
        client.cookies.set(COOKIE, "forged-session-id")
        assert client.get("/api/auth/me").status_code == 401

    def test_tampered_token(self, app, client):
        sid = app.state.sessions.create({"token": create_access_token(1, secret="someone-else")})
        client.cookies.set(COOKIE, sid)
        resp = client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json() == {"detail": "Unauthorized"}

    def test_expired_token(self, app, client):
        sid = app.state.sessions.create({"token": create_access_token(1, ttl_seconds=-5)})
        client.cookies.set(COOKIE, sid)
        assert client.get("/api/auth/me").status_code == 401

    def test_token_for_deleted_user(self, app, client):
        sid = app.state.sessions.create({"token": create_access_token(999)})
        client.cookies.set(COOKIE, sid)
        assert client.get("/api/auth/me").status_code == 401

    def test_non_admin_user_rejected(self, app, client):
        app.state.storage.create_user({
            "username": "clerk", "email": "clerk@example.com",
            "password": hash_password("clerk123"), "is_admin": False,
        })
        resp = client.post("/api/auth/login", json={"email": "clerk@example.com", "password": "clerk123"})
        assert resp.status_code == 200

        resp = client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json() == {"detail": "Unauthorized"}

    def test_admin_routes_require_login(self, client):
        for method, path in [
            ("get", "/api/drivers"), ("post", "/api/drivers"), ("put", "/api/drivers/1"),
            ("get", "/api/vehicles"), ("post", "/api/vehicles"), ("put", "/api/vehicles/1"),
            ("delete", "/api/vehicles/1"), ("get", "/api/feedbacks"), ("put", "/api/feedbacks/1/resolve"),
            ("get", "/api/stats"), ("get", "/api/activities"),
        ]:
            resp = getattr(client, method)(path)
            assert resp.status_code == 401, f"{method.upper()} {path}"


class TestLogout:
    def test_logout_destroys_session(self, app, admin_client):
        resp = admin_client.post("/api/auth/logout")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Logout successful"}
        assert len(app.state.sessions) == 0
        assert admin_client.get("/api/auth/me").status_code == 401

    def test_logout_expires_cookie(self, admin_client):
        assert COOKIE in admin_client.cookies
        resp = admin_client.post("/api/auth/logout")
        set_cookie = resp.headers["set-cookie"]
        assert set_cookie.startswith(f"{COOKIE}=")
        assert "max-age=0" in set_cookie.lower()
        assert COOKIE not in admin_client.cookies

    def test_logout_without_session(self, client):
        assert client.post("/api/auth/logout").status_code == 200
