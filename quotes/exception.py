class AppException(Exception):
    """Base class for application-specific exceptions."""


class APIFailure(AppException):
    """Raised when a quote could not be fetched or decoded.

    Transport errors, non-success statuses and malformed payloads all end up
    here; the original error is kept as ``__cause__`` for logging.
    """
