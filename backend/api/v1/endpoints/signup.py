"""api/v1/endpoints/signup.py — Live signup validation.

Routes:
    POST /signup/validate      Registration page rules + password strength meter

The form post itself (POST /signup) lives in api/routers/pages.py since it
answers with a redirect or an HTML error page rather than JSON.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from schemas.signup import SignupField, SignupForm, SignupValidationResponse
from signup.validation import FIELD_VALIDATORS, validate_form

router = APIRouter()


@router.post("/validate", response_model=SignupValidationResponse, summary="Validate signup fields")
def validate_signup(
    form: SignupForm,
    field: Optional[SignupField] = Query(
        None,
        description=f"Only check this field ({', '.join(FIELD_VALIDATORS)}); all fields when omitted",
    ),
):
    return validate_form(form, [field] if field else None)
