"""Custom exception hierarchy for the Media Atlas domain."""

from __future__ import annotations


class ProcessingError(RuntimeError):
    """Raised when loading or summarising a resource library fails."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class RequestError(ProcessingError):
    """Raised when an API request cannot be served.

    ``status_code`` is the HTTP status the blueprint answers with; malformed
    payloads keep the default 400, lookups of unknown jobs use 404.
    """

    def __init__(self, message: str, *, details: dict | None = None, status_code: int = 400):
        super().__init__(message, details=details)
        self.status_code = status_code
