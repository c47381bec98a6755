# tests/test_auth.py
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from sqlmodel import select

from app.core.errors import AuthError, ConflictError, ValidationError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import RegisterRequest
from app.services.auth_service import AuthService
from tests.conftest import register_payload

service = AuthService(UserRepository())


# -------- register --------


def test_register_stores_hashed_password(session):
    user = service.register(session, RegisterRequest(**register_payload()))

    stored = session.get(User, user.id)
    assert stored.email == "alice@example.com"
    assert stored.password != "s3cret-pass"
    assert verify_password("s3cret-pass", stored.password)
    assert stored.is_active is True
    assert len(stored.id) == 24


def test_register_mismatched_confirmation_persists_nothing(session):
    payload = RegisterRequest(**register_payload(confirm_password="other"))

    with pytest.raises(ValidationError) as exc:
        service.register(session, payload)

    assert exc.value.detail == "Passwords do not match"
    assert session.exec(select(User)).all() == []


@pytest.mark.parametrize("missing", ["username", "street", "phone", "confirm_password"])
def test_register_requires_every_field(session, missing):
    with pytest.raises(ValidationError):
        service.register(session, RegisterRequest(**register_payload(**{missing: None})))


def test_register_blank_field_counts_as_missing(session):
    with pytest.raises(ValidationError):
        service.register(session, RegisterRequest(**register_payload(city="   ")))


def test_register_twice_same_email_conflicts(session):
    service.register(session, RegisterRequest(**register_payload()))

    with pytest.raises(ConflictError):
        service.register(
            session, RegisterRequest(**register_payload(username="alice2"))
        )
    assert len(session.exec(select(User)).all()) == 1


def test_register_endpoint(client):
    resp = client.post("/register", json=register_payload())
    assert resp.status_code == 201
    assert resp.json() == {"msg": "User registered successfully"}
    assert "password" not in resp.text

    again = client.post("/register", json=register_payload())
    assert again.status_code == 409


def test_register_endpoint_missing_field_is_400(client):
    payload = register_payload()
    del payload["country"]
    resp = client.post("/register", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please fill in all fields"


# -------- login --------


def test_login_token_carries_identity(client, user):
    resp = client.post(
        "/login", json={"email": "alice@example.com", "password": "s3cret-pass"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["login"] is True
    assert body["user"] == {"id": user.id, "username": "alice", "email": user.email}

    claims = jwt.decode(body["token"], "test-secret", algorithms=["HS256"])
    assert claims["user"] == body["user"]
    assert claims["scope"] == "user"

    lifetime = claims["exp"] - datetime.now(timezone.utc).timestamp()
    assert 3500 < lifetime <= 3600


def test_login_wrong_password(session, user):
    with pytest.raises(AuthError) as exc:
        service.login(session, "alice@example.com", "nope")
    assert exc.value.status_code == 401


def test_login_unknown_email_endpoint(client):
    resp = client.post("/login", json={"email": "ghost@example.com", "password": "x"})
    assert resp.status_code == 401
    assert "token" not in resp.json()


def test_login_missing_fields(client):
    resp = client.post("/login", json={"email": "alice@example.com"})
    assert resp.status_code == 400


# -------- admin --------


def test_admin_login_and_is_auth(client):
    resp = client.post(
        "/adminlogin", json={"username": "admin", "password": "admin-pass"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["user"] == {"username": "admin"}

    check = client.get("/isAuth", headers={"x-access-token": body["token"]})
    assert check.status_code == 200
    assert check.json()["login"] is True
    assert check.json()["user"]["username"] == "admin"


def test_admin_login_bad_password(client):
    resp = client.post("/adminlogin", json={"username": "admin", "password": "guess"})
    assert resp.status_code == 401


def test_admin_login_missing_fields(client):
    resp = client.post("/adminlogin", json={"username": "admin"})
    assert resp.status_code == 400


def test_is_auth_without_token_is_403(client):
    assert client.get("/isAuth").status_code == 403


def test_is_auth_rejects_garbage_token(client):
    resp = client.get("/isAuth", headers={"x-access-token": "not-a-jwt"})
    assert resp.status_code == 401


def test_is_auth_rejects_user_token(client, user):
    login = client.post(
        "/login", json={"email": "alice@example.com", "password": "s3cret-pass"}
    )
    token = login.json()["token"]
    resp = client.get("/isAuth", headers={"x-access-token": token})
    assert resp.status_code == 401


def test_is_auth_rejects_expired_token(client):
    expired = jwt.encode(
        {
            "username": "admin",
            "scope": "admin",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        "test-secret",
        algorithm="HS256",
    )
    resp = client.get("/isAuth", headers={"x-access-token": expired})
    assert resp.status_code == 401


def test_verify_admin_token_returns_claims():
    token = create_access_token({"username": "admin"}, scope="admin")
    claims = service.verify_admin_token(token)
    assert claims["username"] == "admin"


# -------- password hashing --------


def test_hash_is_salted():
    assert hash_password("pw") != hash_password("pw")


def test_verify_password_rejects_non_bcrypt_value():
    assert verify_password("pw", "plain-text") is False


# -------- profile --------


def test_my_profile(client, user):
    resp = client.get(f"/myprofile/{user.id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "alice"
    assert body["city"] == "London"
    assert body["houseNo"] == "12"
    assert body["isActive"] is True
    assert "password" not in body


def test_my_profile_unknown_user(client):
    assert client.get("/myprofile/" + "a" * 24).status_code == 404
    assert client.get("/myprofile/not-an-id").status_code == 404


# -------- email handling and field spelling --------


def test_login_with_mixed_case_email(client):
    resp = client.post("/register", json=register_payload(email="Alice@Example.COM"))
    assert resp.status_code == 201

    for spelling in ("Alice@Example.COM", "alice@example.com", " ALICE@example.com "):
        login = client.post(
            "/login", json={"email": spelling, "password": "s3cret-pass"}
        )
        assert login.status_code == 200, spelling
        assert login.json()["user"]["email"] == "alice@example.com"


def test_register_same_email_different_case_conflicts(client):
    client.post("/register", json=register_payload(email="alice@example.com"))
    resp = client.post("/register", json=register_payload(email="ALICE@EXAMPLE.COM"))
    assert resp.status_code == 409


def test_register_empty_email_is_400(client):
    resp = client.post("/register", json=register_payload(email=""))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please fill in all fields"


def test_register_malformed_email_is_400(client):
    resp = client.post("/register", json=register_payload(email="not-an-email"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid email address"


def test_login_malformed_email_is_401(client, user):
    resp = client.post("/login", json={"email": "nope", "password": "s3cret-pass"})
    assert resp.status_code == 401


def test_register_accepts_camel_case_keys(client, session):
    payload = register_payload()
    payload["confirmPassword"] = payload.pop("confirm_password")
    payload["houseNo"] = payload.pop("house_no")

    resp = client.post("/register", json=payload)
    assert resp.status_code == 201

    stored = session.exec(select(User)).one()
    assert stored.house_no == "12"
