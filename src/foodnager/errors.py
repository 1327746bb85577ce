"""Application errors raised by services."""


class FoodnagerError(Exception):
    """Base error carrying an HTTP status and a machine-readable code."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FoodnagerError):
    """Requested resource does not exist for the user."""

    status_code = 404
    code = "NOT_FOUND"


class ValidationError(FoodnagerError):
    """Request is well-formed but cannot be served as asked."""

    status_code = 422
    code = "VALIDATION_ERROR"
