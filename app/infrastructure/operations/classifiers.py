"""Error classifiers for AWS SDK exceptions.

Converts botocore exceptions into standardized OperationResult objects so
that every client method reports failures the same way.

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        response = client.list_group_memberships(
            IdentityStoreId=store_id, GroupId=group_id
        )
    except (ClientError, BotoCoreError) as exc:
        return classify_aws_error(exc)
"""

from typing import Iterable, Optional

from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_THROTTLING_CODES = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
)

UNAUTHORIZED_CODES = (
    "AccessDeniedException",
    "UnauthorizedOperation",
    "UnrecognizedClientException",
    "ExpiredTokenException",
)

NOT_FOUND_CODES = ("ResourceNotFoundException", "NoSuchEntity")

VALIDATION_CODES = (
    "ValidationException",
    "InvalidParameterException",
    "BadRequestException",
)


def _retry_after(exc: ClientError) -> Optional[int]:
    raw = exc.response.get("RetryAfter")
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def classify_aws_error(
    exc: Exception,
    throttling_codes: Optional[Iterable[str]] = None,
) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - Throttling codes: TRANSIENT_ERROR (retried by the executor)
    - Access denied / bad credentials: UNAUTHORIZED
    - ResourceNotFoundException: NOT_FOUND
    - Validation errors: PERMANENT_ERROR with INVALID_REQUEST
    - Other ClientError: PERMANENT_ERROR carrying the AWS code
    - Anything else (BotoCoreError: connection, timeout, no credentials):
      PERMANENT_ERROR with CONNECTION_ERROR

    Args:
        exc: Exception raised by boto3/botocore
        throttling_codes: Error codes treated as throttling; defaults to
            DEFAULT_THROTTLING_CODES

    Returns:
        OperationResult with status, message and error_code set
    """
    if not isinstance(exc, ClientError):
        return OperationResult.permanent_error(
            f"AWS connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    error = exc.response.get("Error", {})
    error_code = error.get("Code", "Unknown")
    message = error.get("Message", str(exc))
    throttling = tuple(throttling_codes or DEFAULT_THROTTLING_CODES)

    if error_code in throttling:
        return OperationResult.transient_error(
            message, error_code=error_code, retry_after=_retry_after(exc)
        )

    if error_code in UNAUTHORIZED_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code=error_code
        )

    if error_code in NOT_FOUND_CODES:
        return OperationResult.not_found(message, error_code=error_code)

    if error_code in VALIDATION_CODES:
        return OperationResult.permanent_error(
            f"AWS validation error: {message}", error_code="INVALID_REQUEST"
        )

    return OperationResult.permanent_error(message, error_code=error_code)
