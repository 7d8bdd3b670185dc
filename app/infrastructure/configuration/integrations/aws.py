"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_PROFILE: Named profile from the shared credentials file
        AWS_REGION: AWS region of the Identity Center instance
        AWS_ENDPOINT_URL: Custom endpoint (local stacks, testing)
        IDENTITY_STORE_ID: Identity Store ID; resolved from the first
            Identity Center instance when empty
        AWS_MAX_RETRIES: Retries for throttled calls (default: 3)
        AWS_CONNECT_TIMEOUT: Per-call connect deadline in seconds (default: 10)
        AWS_READ_TIMEOUT: Per-call read deadline in seconds (default: 30)

    Example:
        ```python
        from infrastructure.configuration import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        store_id = settings.aws.IDENTITY_STORE_ID
        ```
    """

    AWS_PROFILE: Optional[str] = Field(default=None, alias="AWS_PROFILE")
    AWS_REGION: Optional[str] = Field(default=None, alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    IDENTITY_STORE_ID: Optional[str] = Field(default=None, alias="IDENTITY_STORE_ID")
    MAX_RETRIES: int = Field(default=3, ge=0, alias="AWS_MAX_RETRIES")
    CONNECT_TIMEOUT: float = Field(default=10.0, gt=0, alias="AWS_CONNECT_TIMEOUT")
    READ_TIMEOUT: float = Field(default=30.0, gt=0, alias="AWS_READ_TIMEOUT")

    THROTTLING_ERRS: tuple[str, ...] = (
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "TooManyRequestsException",
    )
