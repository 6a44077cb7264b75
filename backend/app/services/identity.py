"""Bearer token verification for report endpoints.

Access tokens are Supabase-style HS256 JWTs, verified locally against the
project's JWT secret. `sub` is the user id; `email` is carried through to
saved reports.
"""

import logging
from dataclasses import dataclass

from jose import JWTError, jwt

from app.config import Settings
from app.errors import AuthError

logger = logging.getLogger("readiness.auth")

MISSING_TOKEN = "Missing Authorization token"
INVALID_TOKEN = "Invalid or expired token"


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: str
    email: str | None = None


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an `Authorization: Bearer <token>` header value."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None


class IdentityVerifier:
    """Validates access tokens and returns the caller's identity."""

    def __init__(self, settings: Settings):
        self.secret = settings.auth_jwt_secret
        self.algorithm = settings.auth_jwt_algorithm
        self.audience = settings.auth_jwt_audience or None

    def verify(self, token: str | None) -> AuthenticatedUser:
        """Verify a bearer token.

        Raises:
            AuthError: if the token is missing, malformed, expired, badly
                signed or carries no subject.
        """
        if not token:
            raise AuthError(MISSING_TOKEN)
        if not self.secret:
            logger.error("auth_jwt_secret is not configured; rejecting token")
            raise AuthError(INVALID_TOKEN)

        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as e:
            logger.info("Token rejected: %s", e)
            raise AuthError(INVALID_TOKEN)

        user_id = claims.get("sub")
        if not user_id:
            raise AuthError(INVALID_TOKEN)

        return AuthenticatedUser(user_id=str(user_id), email=claims.get("email"))
