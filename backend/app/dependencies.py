from fastapi import Depends, Header, HTTPException

from app.config import settings
from app.database import get_db
from app.errors import AuthError
from app.services.identity import AuthenticatedUser, IdentityVerifier, extract_bearer_token
from app.services.report_service import ReportService

# Re-export get_db for use in Depends()
get_db = get_db


def get_identity_verifier() -> IdentityVerifier:
    return IdentityVerifier(settings)


def get_report_service() -> ReportService:
    return ReportService(settings)


def get_current_user(
    authorization: str | None = Header(None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> AuthenticatedUser:
    try:
        return verifier.verify(extract_bearer_token(authorization))
    except AuthError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
