"""
Trip Planner Errors

Every failure a ledger operation can report. Each error is scoped to the
single operation that raised it; none of them is fatal to the process.
"""


class TripError(Exception):
    """Base class for all trip planner errors."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    @property
    def error_code(self):
        # DuplicateItem -> duplicate_item
        name = type(self).__name__
        return ''.join('_' + c.lower() if c.isupper() else c for c in name).lstrip('_')


class ValidationError(TripError):
    """Raised when a required field is missing or malformed."""
    status_code = 400

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class DuplicateItem(TripError):
    """Raised when a name collides case-insensitively with an existing one."""
    status_code = 409


class UnsupportedOperation(TripError):
    """Raised when adding ingredients to a meal that uses an external menu."""
    status_code = 422


class NotFound(TripError):
    """Raised when an operation references a record that does not exist."""
    status_code = 404


class Forbidden(TripError):
    """Raised when someone other than the owner tries to change a record."""
    status_code = 403


class AuthFailure(TripError):
    """Raised on bad credentials or a missing/expired session."""
    status_code = 401


class StoreError(TripError):
    """Raised when the backing store fails; carries the backend message."""
    status_code = 503


class ConflictError(StoreError):
    """Raised when a write violates a uniqueness or integrity constraint."""
    status_code = 409
