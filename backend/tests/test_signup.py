"""
Tests for the signup package: live field rules, server rules, password
hashing and register_user() against the in-memory SQLite database.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from db.models import User, UserSession
from schemas.signup import SignupForm
from signup.passwords import ALGORITHM, ITERATIONS, hash_password, password_digest
from signup.service import DUPLICATE_USER_MESSAGE, SignupError, register_user
from signup.validation import (
    password_score,
    password_strength,
    validate_email,
    validate_form,
    validate_fullname,
    validate_password,
    validate_submission,
    validate_username,
)


def _form(**overrides):
    data = {
        "fullname": "Ada Lovelace",
        "username": "ada_l",
        "email": "ada@example.org",
        "password": "Engine#1843",
    }
    data.update(overrides)
    return SignupForm(**data)


# ---------------------------------------------------------------------------
# Password strength
# ---------------------------------------------------------------------------

class TestPasswordStrength:

    @pytest.mark.parametrize("password,score", [
        ("", 0),
        ("abc", 1),
        ("abcdefgh", 1),
        ("Abcdefgh", 2),
        ("Abcdefg1", 3),
        ("Abcdef1!", 4),
        ("abcdef1!", 3),
    ])
    def test_score(self, password, score):
        assert password_score(password) == score

    def test_meter(self):
        meter = password_strength("Abcdef1!")
        assert (meter.label, meter.color, meter.percent) == ("Very Strong", "#3a3", 100)
        assert password_strength("").label == "Weak"


# ---------------------------------------------------------------------------
# Live field rules
# ---------------------------------------------------------------------------

class TestFieldRules:

    def test_fullname(self):
        assert validate_fullname("   ") == "Full name is required"
        assert validate_fullname("Al") == "Name must be at least 3 characters"
        assert validate_fullname(" Ada ") is None

    def test_username(self):
        assert validate_username("") == "Username is required"
        assert validate_username("ada") == "Username must be at least 4 characters"
        assert validate_username("ada lovelace") == "Username can only contain letters, numbers, and underscores"
        assert validate_username("ada_1815") is None

    def test_email(self):
        assert validate_email("") == "Email is required"
        assert validate_email("ada@example") == "Please enter a valid email address"
        assert validate_email("ada @example.org") == "Please enter a valid email address"
        assert validate_email("ada@example.org") is None

    def test_password(self):
        assert validate_password("") == "Password is required"
        assert validate_password("Ab1!") == "Password must be at least 8 characters"
        assert validate_password("abcdefgh") == "Password should include uppercase, numbers, and symbols"
        assert validate_password("Abcdefg1") is None

    def test_validate_form_all_fields(self):
        result = validate_form(_form(username="ab", password="short"))
        assert result.valid is False
        assert set(result.errors) == {"username", "password"}
        assert result.message == "Please fix the errors in the form"
        assert result.password_strength.score == 1

    def test_validate_form_single_field(self):
        result = validate_form(_form(username="ab", password="short"), ["password"])
        assert list(result.errors) == ["password"]

    def test_validate_form_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="pasword"):
            validate_form(_form(), ["pasword"])

    def test_validate_form_ok(self):
        result = validate_form(_form())
        assert result.valid is True
        assert result.errors == {}
        assert result.message == ""


# ---------------------------------------------------------------------------
# Server rules
# ---------------------------------------------------------------------------

class TestServerRules:

    def test_all_errors_in_order(self):
        assert validate_submission(SignupForm(password="12345")) == [
            "Full name is required",
            "Username is required",
            "Valid email is required",
            "Password must be at least 6 characters",
        ]

    def test_server_is_more_lenient_than_page(self):
        form = _form(username="ab", password="abcdef")
        assert validate_submission(form) == []
        assert validate_form(form).valid is False


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

class TestPasswords:

    def test_format_and_salt(self):
        first, second = hash_password("Engine#1843"), hash_password("Engine#1843")
        assert first != second

        algorithm, iterations, salt, digest = first.split("$")
        assert (algorithm, int(iterations)) == (ALGORITHM, ITERATIONS)
        assert len(salt) == 32
        assert digest == password_digest("Engine#1843", salt)
        assert digest != password_digest("engine#1843", salt)


# ---------------------------------------------------------------------------
# register_user
# ---------------------------------------------------------------------------

class TestRegisterUser:

    def test_creates_user_and_session(self, db_session):
        user, session = register_user(db_session, _form(fullname="  Ada Lovelace  "))

        assert user.id is not None
        assert user.fullname == "Ada Lovelace"
        assert user.password_hash != "Engine#1843"
        _, _, salt, digest = user.password_hash.split("$")
        assert digest == password_digest("Engine#1843", salt)
        assert session.user_id == user.id
        assert len(session.id) >= 32
        assert db_session.query(UserSession).count() == 1

    def test_validation_errors_touch_nothing(self, db_session):
        with pytest.raises(SignupError) as exc_info:
            register_user(db_session, _form(email="not-an-email"))
        assert exc_info.value.errors == ["Valid email is required"]
        assert db_session.query(User).count() == 0

    @pytest.mark.parametrize("overrides", [
        {"email": "other@example.org"},      # same username
        {"username": "someone_else"},        # same email
    ])
    def test_duplicate_username_or_email(self, db_session, overrides):
        register_user(db_session, _form())
        with pytest.raises(SignupError) as exc_info:
            register_user(db_session, _form(**overrides))
        assert exc_info.value.errors == [DUPLICATE_USER_MESSAGE]
        assert db_session.query(User).count() == 1

    def test_database_failure_is_reported(self):
        db = MagicMock()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with pytest.raises(SignupError) as exc_info:
            register_user(db, _form())
        assert exc_info.value.errors[0].startswith("Registration failed")
        db.rollback.assert_called_once()
