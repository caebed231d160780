"""signup/service.py — Create a user account and its first session.

register_user() is the whole server-side flow for a posted signup form:

    trim → validate_submission → username/email existence check
         → hash password → INSERT user → INSERT session → commit

Any failure raises SignupError carrying the user-facing error list; the
route turns that into the error page.
"""

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from db.models import User, UserSession
from schemas.signup import SignupForm
from signup.passwords import hash_password
from signup.validation import validate_submission

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "Username or email already exists"
REGISTRATION_FAILED_MESSAGE = "Registration failed"


class SignupError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def user_exists(db: Session, username: str, email: str) -> bool:
    stmt = select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
    return db.execute(stmt).first() is not None


def register_user(db: Session, form: SignupForm) -> tuple[User, UserSession]:
    form = form.trimmed()
    errors = validate_submission(form)
    if errors:
        raise SignupError(errors)

    try:
        if user_exists(db, form.username, form.email):
            raise SignupError([DUPLICATE_USER_MESSAGE])

        user = User(
            fullname=form.fullname,
            username=form.username,
            email=form.email,
            password_hash=hash_password(form.password),
        )
        db.add(user)
        db.flush()   # assigns user.id

        session = UserSession(user_id=user.id)
        db.add(session)
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same username/email
        db.rollback()
        raise SignupError([DUPLICATE_USER_MESSAGE])
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("signup insert failed", extra={"username": form.username}, exc_info=True)
        raise SignupError([f"{REGISTRATION_FAILED_MESSAGE}: {exc.__class__.__name__}"]) from exc

    db.refresh(user)
    logger.info("user registered", extra={"user_id": user.id, "username": user.username})
    return user, session
