"""schemas/signup.py — Signup form request/response schemas.

Used by POST /signup (form post) and POST /api/v1/signup/validate (live,
per-keystroke validation from the registration page).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Fields the live rules can check one at a time (?field=...).
SignupField = Literal["fullname", "username", "email", "password"]


class SignupForm(BaseModel):
    fullname: str = ""
    username: str = ""
    email: str = ""
    password: str = ""

    def trimmed(self) -> "SignupForm":
        """Copy with surrounding whitespace removed from every field but the password."""
        return SignupForm(
            fullname=self.fullname.strip(),
            username=self.username.strip(),
            email=self.email.strip(),
            password=self.password,
        )


class PasswordStrength(BaseModel):
    score: int = Field(..., ge=0, le=4)
    label: str
    color: str
    percent: int = Field(..., ge=0, le=100)   # meter fill width


class SignupValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str] = {}   # field name → first failing rule's message
    password_strength: PasswordStrength
    message: str = ""
