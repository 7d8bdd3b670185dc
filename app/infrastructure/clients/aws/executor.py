"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. Every API call is issued as a method call with
keyword parameters; nothing is assembled from strings. This module avoids
reading settings at import time and accepts configuration via parameters.
"""

import time
from typing import Any, Dict, Iterable, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'identitystore')
        session_config: Optional boto3 session kwargs (profile_name, region_name)
        client_config: Optional client kwargs (endpoint_url, config)

    Returns:
        botocore client instance
    """
    session = boto3.Session(**(session_config or {}))
    return session.client(service_name, **(client_config or {}))


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def execute_aws_api_call(
    service_name: str,
    method: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 3,
    backoff_factor: float = 0.5,
    throttling_codes: Optional[Iterable[str]] = None,
    **kwargs,
) -> OperationResult:
    """Execute one AWS API call with retries and standardized results.

    Only throttling errors are retried, with exponential backoff. The
    remaining keyword arguments are the API request parameters and are
    passed to the boto3 method unchanged.

    Returns:
        OperationResult whose data is the raw response dict (without
        ResponseMetadata) on success
    """
    log = logger.bind(service=service_name, method=method)

    for attempt in range(max_retries + 1):
        try:
            client = get_boto3_client(
                service_name,
                session_config=session_config,
                client_config=client_config,
            )
            response = getattr(client, method)(**kwargs)
            if isinstance(response, dict):
                response = {
                    k: v for k, v in response.items() if k != "ResponseMetadata"
                }
            return OperationResult.success(
                data=response, message=f"{service_name}.{method} succeeded"
            )

        except (ClientError, BotoCoreError) as e:
            mapped = classify_aws_error(e, throttling_codes=throttling_codes)

            if mapped.is_transient and attempt < max_retries:
                delay = mapped.retry_after or _calculate_retry_delay(
                    attempt, backoff_factor
                )
                log.warning(
                    "aws_api_retry",
                    attempt=attempt + 1,
                    error=str(e),
                    delay=delay,
                )
                time.sleep(delay)
                continue

            log.error(
                "aws_api_error_final",
                error=str(e),
                error_code=mapped.error_code,
                status=mapped.status.value,
            )
            return mapped

    # max_retries < 0 never enters the loop
    return OperationResult.permanent_error(
        message=f"{service_name}.{method} was not attempted",
        error_code="NOT_ATTEMPTED",
    )
