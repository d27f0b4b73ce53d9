"""Custom exceptions for Tracker."""

__all__ = ["TrackerError", "TitleValidationError", "LockError"]


class TrackerError(Exception):
    """Base class for Tracker errors."""

    pass


class TitleValidationError(TrackerError, ValueError):
    """Raised when a new issue's title is rejected."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LockError(TrackerError):
    """Raised when unable to acquire file lock."""

    pass
