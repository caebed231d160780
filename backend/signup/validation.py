"""signup/validation.py — Signup field rules.

Two rule sets live here:

  * the registration page's live rules (validate_form and the per-field
    validators), stricter, with a 0-4 password strength meter;
  * the server's minimal rules (validate_submission) applied to a posted
    form before anything touches the database.

Validators return an error message, or None when the value passes.
"""

from __future__ import annotations

import re
from typing import Optional

from schemas.signup import PasswordStrength, SignupField, SignupForm, SignupValidationResponse

USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_FULLNAME_LENGTH = 3
MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 8
MIN_PASSWORD_STRENGTH = 3
SERVER_MIN_PASSWORD_LENGTH = 6

STRENGTH_LABELS = ("Weak", "Fair", "Good", "Strong", "Very Strong")
STRENGTH_COLORS = ("#d33", "#f80", "#fc0", "#9c0", "#3a3")

FORM_ERROR_MESSAGE = "Please fix the errors in the form"


# ---------------------------------------------------------------------------
# Password strength
# ---------------------------------------------------------------------------

def password_score(password: str) -> int:
    """0 for empty, 1 for anything shorter than 8, else +1 per satisfied class."""
    if not password:
        return 0
    if len(password) < MIN_PASSWORD_LENGTH:
        return 1
    score = 1
    if re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"[0-9]", password):
        score += 1
    if re.search(r"[^A-Za-z0-9]", password):
        score += 1
    return score


def password_strength(password: str) -> PasswordStrength:
    score = password_score(password)
    return PasswordStrength(
        score=score,
        label=STRENGTH_LABELS[score],
        color=STRENGTH_COLORS[score],
        percent=score * 25,
    )


# ---------------------------------------------------------------------------
# Live (registration page) rules
# ---------------------------------------------------------------------------

def validate_fullname(value: str) -> Optional[str]:
    value = value.strip()
    if not value:
        return "Full name is required"
    if len(value) < MIN_FULLNAME_LENGTH:
        return "Name must be at least 3 characters"
    return None


def validate_username(value: str) -> Optional[str]:
    value = value.strip()
    if not value:
        return "Username is required"
    if len(value) < MIN_USERNAME_LENGTH:
        return "Username must be at least 4 characters"
    if not USERNAME_RE.match(value):
        return "Username can only contain letters, numbers, and underscores"
    return None


def validate_email(value: str) -> Optional[str]:
    value = value.strip()
    if not value:
        return "Email is required"
    if not EMAIL_RE.match(value):
        return "Please enter a valid email address"
    return None


def validate_password(value: str) -> Optional[str]:
    if not value:
        return "Password is required"
    if len(value) < MIN_PASSWORD_LENGTH:
        return "Password must be at least 8 characters"
    if password_score(value) < MIN_PASSWORD_STRENGTH:
        return "Password should include uppercase, numbers, and symbols"
    return None


FIELD_VALIDATORS = {
    "fullname": validate_fullname,
    "username": validate_username,
    "email": validate_email,
    "password": validate_password,
}


def validate_form(
    form: SignupForm, fields: Optional[list[SignupField]] = None
) -> SignupValidationResponse:
    """Run the live rules over `fields` (all four by default).

    Passing a single field mirrors per-keystroke validation, where only the
    input being edited is checked. Raises ValueError for an unknown field
    name rather than reporting it as valid.
    """
    unknown = [name for name in fields or () if name not in FIELD_VALIDATORS]
    if unknown:
        raise ValueError(f"unknown signup field(s): {', '.join(unknown)}")

    errors: dict[str, str] = {}
    for name in fields or list(FIELD_VALIDATORS):
        message = FIELD_VALIDATORS[name](getattr(form, name))
        if message:
            errors[name] = message
    return SignupValidationResponse(
        valid=not errors,
        errors=errors,
        password_strength=password_strength(form.password),
        message=FORM_ERROR_MESSAGE if errors else "",
    )


# ---------------------------------------------------------------------------
# Server rules
# ---------------------------------------------------------------------------

def validate_submission(form: SignupForm) -> list[str]:
    """Minimal server-side checks; returns every failing rule, in order."""
    errors: list[str] = []
    if not form.fullname.strip():
        errors.append("Full name is required")
    if not form.username.strip():
        errors.append("Username is required")
    email = form.email.strip()
    if not email or not EMAIL_RE.match(email):
        errors.append("Valid email is required")
    if len(form.password) < SERVER_MIN_PASSWORD_LENGTH:
        errors.append("Password must be at least 6 characters")
    return errors
