import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from accounts_service.config import Settings
from accounts_service.infrastructure.db import get_db
from accounts_service.main import create_app
from conftest import register_payload


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_success(client):
    response = client.post("/api/auth/register", json=register_payload(role="TEACHER"))
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user"] == {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@x.com",
        "role": "teacher",
    }
    assert "pw123" not in response.text


def test_register_defaults_role_to_student(client):
    response = client.post("/api/auth/register", json=register_payload())
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "student"


def test_register_missing_field(client):
    response = client.post("/api/auth/register", json=register_payload(password="  "))
    assert response.status_code == 400
    assert response.json() == {"error": "missing required field", "fields": ["password"]}


def test_register_empty_body(client):
    response = client.post("/api/auth/register", json={})
    assert response.status_code == 400
    assert response.json()["fields"] == ["firstName", "lastName", "email", "password"]


def test_register_invalid_role(client):
    response = client.post("/api/auth/register", json=register_payload(role="admin"))
    assert response.status_code == 400
    assert response.json() == {"error": "invalid role", "allowedValues": ["teacher", "student"]}


def test_register_duplicate_email(client):
    assert client.post("/api/auth/register", json=register_payload()).status_code == 200
    response = client.post("/api/auth/register", json=register_payload(firstName="Other"))
    assert response.status_code == 400
    assert response.json() == {"error": "email already taken"}


def test_register_wrong_field_type_is_bad_request(client):
    response = client.post("/api/auth/register", json=register_payload(firstName=["Ann"]))
    assert response.status_code == 400
    assert response.json()["error"] == "invalid request"
    assert "firstName" in response.json()["fields"]


def test_login_returns_account_fields(client):
    client.post("/api/auth/register", json=register_payload(role="teacher"))
    response = client.post("/api/users/login", json={"userName": "ann@x.com", "password": "pw123"})
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "ann@x.com"
    assert data["firstName"] == "Ann"
    assert data["lastName"] == "Lee"
    assert data["role"] == "teacher"
    assert isinstance(data["id"], int)
    assert "password" not in data


@pytest.mark.parametrize("body", [
    {"UserName": "ann@x.com", "Password": "pw123"},
    {"username": "ann@x.com", "password": "pw123"},
])
def test_login_accepts_legacy_field_names(client, body):
    client.post("/api/auth/register", json=register_payload())
    response = client.post("/api/users/login", json=body)
    assert response.status_code == 200


@pytest.mark.parametrize("body", [
    {"userName": "ann@x.com"},
    {"password": "pw123"},
    {"userName": "", "password": "pw123"},
    {},
])
def test_login_missing_credentials(client, body):
    response = client.post("/api/users/login", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "missing credentials"}


def test_login_unknown_account(client):
    response = client.post("/api/users/login", json={"userName": "unknown@x.com", "password": "anything"})
    assert response.status_code == 401
    assert response.json() == {"error": "invalid credentials"}


def test_list_accounts(client):
    for i in range(3):
        client.post("/api/auth/register", json=register_payload(email=f"user{i}@x.com"))
    response = client.get("/api/users")
    assert response.status_code == 200
    data = response.json()
    assert [a["email"] for a in data] == ["user0@x.com", "user1@x.com", "user2@x.com"]
    assert all("password" not in a for a in data)


def test_add_account(client):
    response = client.post(
        "/api/users",
        json={"firstName": "Bob", "lastName": "Ray", "email": "bob@x.com", "role": "teacher"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "User added successfully."}
    assert client.get("/api/users").json()[0]["email"] == "bob@x.com"


def test_add_account_null_body(client):
    response = client.post("/api/users", content="null", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "invalid account data"}


def test_add_account_missing_column_is_database_error(client):
    response = client.post("/api/users", json={"lastName": "Ray", "email": "bob@x.com"})
    assert response.status_code == 500
    assert response.json()["error"] == "Database error"
    assert "first_name" in response.json()["details"]


def test_metrics_endpoint(client):
    client.post("/api/auth/register", json=register_payload())
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "account_registrations_total" in response.text


def test_datastore_failure_is_reported_as_server_error(app):
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT ...", {}, Exception("connection refused"))

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        register = client.post("/api/auth/register", json=register_payload())
        login = client.post("/api/users/login", json={"userName": "ann@x.com", "password": "pw123"})
        listing = client.get("/api/users")

    for response in (register, login, listing):
        assert response.status_code == 500
        assert response.json() == {"error": "Database error", "details": "connection refused"}
    db.add.assert_not_called()


def test_login_with_password_verification_enabled():
    app = create_app(Settings(VERIFY_PASSWORD_ON_LOGIN=True))
    with TestClient(app) as client:
        client.post("/api/auth/register", json=register_payload())
        wrong = client.post("/api/users/login", json={"userName": "ann@x.com", "password": "wrong"})
        right = client.post("/api/users/login", json={"userName": "ann@x.com", "password": "pw123"})

    assert wrong.status_code == 401
    assert wrong.json() == {"error": "invalid credentials"}
    assert right.status_code == 200


@pytest.mark.parametrize("role", ["   ", " Teacher "])
def test_register_role_with_whitespace_is_invalid(client, role):
    response = client.post("/api/auth/register", json=register_payload(role=role))
    assert response.status_code == 400
    assert response.json() == {"error": "invalid role", "allowedValues": ["teacher", "student"]}
    assert client.get("/api/users").json() == []


def test_register_oversized_password(client):
    response = client.post("/api/auth/register", json=register_payload(password="a" * 5000))
    assert response.status_code == 400
    assert response.json() == {"error": "password too long", "fields": ["password"]}
    assert client.get("/api/users").json() == []


def test_add_account_with_taken_email(client):
    client.post("/api/auth/register", json=register_payload())
    response = client.post(
        "/api/users",
        json={"firstName": "Bob", "lastName": "Ray", "email": "ann@x.com", "role": "student"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "email already taken"}
    listed = client.get("/api/users").json()
    assert len(listed) == 1
    assert listed[0]["firstName"] == "Ann"
