"""Session provider for AWS client operations.

Centralizes boto3 session and client configuration for all AWS service
clients: named profile, region, endpoint override, per-call deadlines and
retry policy.
"""

from typing import Any, Dict, Optional

import structlog
from botocore.config import Config  # type: ignore

from infrastructure.configuration.integrations.aws import AwsSettings

logger = structlog.get_logger()


class SessionProvider:
    """Centralized provider for AWS session configuration.

    Manages profile, region, endpoint URL and timeouts so per-service
    clients don't need to duplicate this code.

    Args:
        region: AWS region for all clients (e.g., 'us-east-1')
        profile_name: Named profile from the shared AWS config
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        connect_timeout: Seconds allowed to establish a connection
        read_timeout: Seconds allowed to wait for a response
        max_retries: Retries for throttled calls, applied by the executor
        throttling_codes: Error codes treated as throttling
    """

    def __init__(
        self,
        region: Optional[str] = None,
        profile_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        max_retries: int = 3,
        throttling_codes: Optional[tuple[str, ...]] = None,
    ) -> None:
        self.region = region
        self.profile_name = profile_name
        self.endpoint_url = endpoint_url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_retries = max_retries
        self.throttling_codes = throttling_codes

    @classmethod
    def from_settings(cls, aws_settings: AwsSettings) -> "SessionProvider":
        """Build a provider from the AWS settings section."""
        return cls(
            region=aws_settings.AWS_REGION,
            profile_name=aws_settings.AWS_PROFILE,
            endpoint_url=aws_settings.ENDPOINT_URL,
            connect_timeout=aws_settings.CONNECT_TIMEOUT,
            read_timeout=aws_settings.READ_TIMEOUT,
            max_retries=aws_settings.MAX_RETRIES,
            throttling_codes=tuple(aws_settings.THROTTLING_ERRS),
        )

    def build_client_kwargs(self) -> Dict[str, Any]:
        """Build session, client and retry kwargs for execute_aws_api_call.

        botocore's own retries are disabled; throttling retries happen in
        the executor so every attempt is logged the same way.

        Returns:
            Dict with session_config, client_config, max_retries and
            throttling_codes
        """
        session_config: Dict[str, Any] = {}
        client_config: Dict[str, Any] = {}

        if self.profile_name:
            session_config["profile_name"] = self.profile_name

        if self.region:
            session_config["region_name"] = self.region
            client_config["region_name"] = self.region

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        config_kwargs: Dict[str, Any] = {"retries": {"max_attempts": 1}}
        if self.connect_timeout is not None:
            config_kwargs["connect_timeout"] = self.connect_timeout
        if self.read_timeout is not None:
            config_kwargs["read_timeout"] = self.read_timeout
        client_config["config"] = Config(**config_kwargs)

        logger.debug(
            "built_client_kwargs",
            session_config=session_config,
            endpoint_url=self.endpoint_url,
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config,
            "max_retries": self.max_retries,
            "throttling_codes": self.throttling_codes,
        }
