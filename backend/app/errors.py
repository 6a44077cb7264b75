"""Domain error types.

Routers translate these into HTTP responses; services and the readiness
engine never raise HTTPException themselves.

- InvalidQuery: a required export-check input is missing or malformed (400)
- AuthError: missing, invalid or expired bearer token (401)
- NotFoundError: report does not exist or belongs to another user (404)
- PersistenceError: the report store failed (500)
"""


class ExportReadinessError(Exception):
    """Base class for all domain errors."""


class InvalidQuery(ExportReadinessError):
    """Raised before classification when the query is incomplete.

    Attributes:
        missing_fields: Names of required fields that were empty or absent
    """

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        self.missing_fields = missing_fields or []
        super().__init__(message)


class AuthError(ExportReadinessError):
    """Raised by the identity verifier."""


class NotFoundError(ExportReadinessError):
    """Raised when a report is absent or not visible to the caller."""


class PersistenceError(ExportReadinessError):
    """Raised when the report store fails."""
