"""signup/passwords.py — Salted PBKDF2 password hashes.

Stored format: pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>
"""

from __future__ import annotations

import hashlib
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 390_000
SALT_BYTES = 16


def password_digest(password: str, salt: str, iterations: int = ITERATIONS) -> str:
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), iterations)
    return digest.hex()


def hash_password(password: str, iterations: int = ITERATIONS) -> str:
    salt = secrets.token_hex(SALT_BYTES)
    return f"{ALGORITHM}${iterations}${salt}${password_digest(password, salt, iterations)}"
