"""Domain errors raised by stores and translated to HTTP responses in main.py.

Every error carries the HTTP status it maps to and a user-facing message.
The response body is always `{"error": <message>}`.
"""


class TastingError(RuntimeError):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TastingError):
    """Missing or out-of-range required field."""

    status_code = 400


class NotFoundError(TastingError):
    """Unknown identifier on update/delete."""

    status_code = 404


class StoreError(TastingError):
    """Underlying persistence failure (connectivity, constraint, driver)."""

    status_code = 500
