"""Exception types raised by the discovery pipeline.

Every error carries an HTTP-like ``status`` so the API layer can map it to a
response without inspecting the exception type.
"""

from __future__ import annotations


class HomeFurGoodError(Exception):
    """Base class for all errors raised by this package."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"


class ProviderError(HomeFurGoodError):
    """The upstream registry call failed or returned a non-success status.

    ``status`` is the upstream status code when the provider reported one,
    otherwise 500.
    """


class NotFoundError(HomeFurGoodError):
    """The requested animal has no corresponding record."""

    status = 404


class ConfigurationError(HomeFurGoodError):
    """A required setting (such as the API credential) is missing."""
