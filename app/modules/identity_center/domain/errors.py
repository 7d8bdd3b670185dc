"""Errors for the identity_center module."""

from typing import Any, Optional, Sequence


class IdentityCenterError(Exception):
    """Base class for failures that end a command with a non-zero exit."""


class ConfigurationError(IdentityCenterError):
    """Raised when the identity store cannot be determined."""


class UpstreamError(IdentityCenterError):
    """Raised when a directory API call fails.

    Attributes:
        message: human-friendly message
        response: the failed OperationResult returned by the client
    """

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response

    @property
    def error_code(self) -> Optional[str]:
        return getattr(self.response, "error_code", None)


class ProtocolError(IdentityCenterError):
    """Raised when the server misbehaves: endless cursors or malformed pages."""


class NotFoundError(IdentityCenterError):
    """Raised when an identifier or search term matched nothing."""

    def __init__(self, message: str, identifier: Optional[str] = None):
        super().__init__(message)
        self.identifier = identifier


class PartialEnrichmentWarning(UserWarning):
    """One or more items of a batch could not be enriched.

    The batch still completed; the listed indices carry no derived value.
    """

    def __init__(self, failed_indices: Sequence[int], total: int):
        self.failed_indices = tuple(failed_indices)
        self.total = total
        super().__init__(
            f"{len(self.failed_indices)} of {total} item(s) could not be enriched"
        )
