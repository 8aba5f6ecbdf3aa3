"""Errors surfaced to API callers.

Each error carries the fixed message returned in the `{"error": ...}` body
and the HTTP status it maps to. Handlers are registered in `trackfit.main`.
"""


class TrackFitError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DatabaseUnavailable(TrackFitError):
    """No database connection is configured."""

    message = "Database connection failed"


class InvalidPayload(TrackFitError):
    status_code = 400
    message = "Invalid data format"


class StorageError(TrackFitError):
    """A query against the weights table failed."""

    message = "Storage operation failed"
