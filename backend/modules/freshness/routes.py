"""
Authentication freshness API endpoints.

check-auth answers "is this email's login still fresh?" and is safe to
call unauthenticated: a denial is a normal 200 response. record-auth
requires the bearer token of the session that just completed.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies import get_freshness_checker, get_freshness_recorder
from api.middleware.auth import bearer_scheme
from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError
from shared.models import EmailRequest

from .interfaces import IFreshnessChecker, IFreshnessRecorder
from .models import FreshnessCheckResult, RecordResult

router = APIRouter()


@router.post("/check-auth", response_model=FreshnessCheckResult)
async def check_auth(
    request: EmailRequest,
    checker: IFreshnessChecker = Depends(get_freshness_checker),
):
    """
    Check whether an email holds a fresh login.

    A successful check also updates the email's last use time.
    """
    try:
        return await checker.check(request.email)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("/check-auth")
async def describe_check_auth() -> dict:
    """Describe how to call the check endpoint."""
    return {
        "message": "Check authentication endpoint",
        "method": "POST",
        "required_fields": ["email"],
    }


@router.post("/record-auth", response_model=RecordResult)
async def record_auth(
    request: EmailRequest,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    recorder: IFreshnessRecorder = Depends(get_freshness_recorder),
):
    """
    Record a completed magic link login for an email.

    Requires `Authorization: Bearer <access token>` issued for that email.
    """
    token = credentials.credentials if credentials else None
    try:
        return await recorder.record(request.email, token)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
