"""
Tests for user registration, login and lookup endpoints.
"""
import time
from unittest import mock

from fabudget.core.security import verify_password
from fabudget.services.user_service import normalize_email, normalize_name, validate_registration


def test_register(client):
    """Test user registration."""
    response = client.post(
        "/api/users/register",
        json={"name": "Test User", "email": "test@example.com", "password": "Password123"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert set(body["data"]) == {"id", "name", "email"}
    assert body["data"]["email"] == "test@example.com"


def test_register_normalizes_name_and_email(client):
    response = client.post(
        "/api/users/register",
        json={"name": "  jANE   doe ", "email": "  Jane.Doe@Example.COM ", "password": "Password123"}
    )
    data = response.json()["data"]
    assert data["name"] == "Jane Doe"
    assert data["email"] == "jane.doe@example.com"


def test_register_duplicate_email(client, user):
    """Emails are unique regardless of case."""
    response = client.post(
        "/api/users/register",
        json={"name": "Other User", "email": "TEST@example.com", "password": "Password123"}
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "User already exists"}


def test_register_short_password_is_rejected(client):
    response = client.post(
        "/api/users/register",
        json={"name": "Test User", "email": "short@example.com", "password": "short"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "at least 8 characters" in body["message"]


def test_login(client, user):
    """Test user login."""
    response = client.post(
        "/api/users/login",
        json={"email": "test@example.com", "password": "Password123"}
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"id": user["id"], "name": "Test User", "email": "test@example.com"}


def test_login_invalid_credentials_are_indistinguishable(client, user):
    """Unknown email and wrong password produce the same response."""
    wrong_password = client.post(
        "/api/users/login",
        json={"email": "test@example.com", "password": "Wrongpass1"}
    )
    unknown_email = client.post(
        "/api/users/login",
        json={"email": "nobody@example.com", "password": "Password123"}
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"success": False, "message": "Invalid credentials"}


def test_list_users_hides_password(client, user):
    response = client.get("/api/users")
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    item = body["data"][0]
    assert set(item) == {"_id", "name", "email", "createdAt", "__v"}
    assert item["_id"] == user["id"]


def test_get_user_by_email(client, user):
    response = client.get("/api/users/email/TEST@example.com")
    assert response.status_code == 200
    assert response.json()["data"]["_id"] == user["id"]

    missing = client.get("/api/users/email/missing@example.com")
    assert missing.status_code == 404
    assert missing.json()["message"] == "User not found"


def test_validate_registration_collects_every_problem():
    result = validate_registration("A", "not-an-email", "alllowercase")

    assert not result.is_valid
    assert "Name must be at least 2 characters" in result.errors
    assert "Please provide a valid email address" in result.errors
    assert any("uppercase" in error for error in result.errors)


def test_validate_registration_accepts_good_input():
    result = validate_registration("Ana Lopez", "ana@example.com", "Secret123")
    assert result.is_valid
    assert result.errors == []


def test_validate_registration_rejects_long_password():
    result = validate_registration("Ana Lopez", "ana@example.com", "Abcdefgh12345678X")
    assert result.errors == ["Password cannot be more than 16 characters"]


def test_normalizers():
    assert normalize_email("  MiXeD@Example.com ") == "mixed@example.com"
    assert normalize_name("maría   de la  CRUZ") == "María De La Cruz"


def test_login_unknown_email_still_checks_a_password_hash(client, user):
    with mock.patch("fabudget.services.user_service.verify_password", wraps=verify_password) as verify:
        response = client.post(
            "/api/users/login",
            json={"email": "nobody@example.com", "password": "Password123"}
        )
    assert response.status_code == 401
    verify.assert_called_once()


def test_validate_registration_long_invalid_email_returns_quickly():
    started = time.perf_counter()
    result = validate_registration("Test User", "a" * 240 + "!", "Password123")
    elapsed = time.perf_counter() - started

    assert elapsed < 1
    assert result.errors == ["Please provide a valid email address"]


def test_email_pattern_handles_long_dotted_local_part():
    local = ".".join(["ab"] * 40)
    started = time.perf_counter()
    result = validate_registration("Test User", local + "@example.co", "Password123")
    elapsed = time.perf_counter() - started

    assert elapsed < 1
    assert result.is_valid


def test_email_pattern_accepts_common_shapes():
    for email in ("ana@example.com", "ana.lopez@mail.example.co", "a-b@x-y.org", "first_last@corp.io"):
        assert validate_registration("Ana Lopez", email, "Secret123").is_valid, email
    for email in ("ana@example", "ana@@example.com", ".ana@example.com", "ana@example.c"):
        assert not validate_registration("Ana Lopez", email, "Secret123").is_valid, email
