"""Operation status enumeration.

Classifies the outcome of a single directory API call so callers can decide
between retrying, reporting and degrading.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Call completed and returned a usable payload
        TRANSIENT_ERROR: Retryable failure (throttling, timeouts)
        PERMANENT_ERROR: Failure that will not succeed on retry
        UNAUTHORIZED: Credentials missing or lacking permission
        NOT_FOUND: The addressed resource does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
