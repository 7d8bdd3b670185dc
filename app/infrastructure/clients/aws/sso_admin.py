"""SSO Admin client for AWS operations.

Only instance discovery is needed: the Identity Store backing the first
IAM Identity Center instance is used when no store ID is configured.
"""

from typing import Optional

import structlog

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class SsoAdminClient:
    """Client for AWS SSO Admin operations.

    Args:
        session_provider: SessionProvider instance for credential/config management
    """

    def __init__(self, session_provider: SessionProvider) -> None:
        self._service_name = "sso-admin"
        self._session_provider = session_provider
        self._logger = logger.bind(component="sso_admin_client")

    def list_instances(self, next_token: Optional[str] = None) -> OperationResult:
        """List one page of IAM Identity Center instances.

        Returns:
            OperationResult whose data is {"Instances": [...], "NextToken": ...}
        """
        params = {"NextToken": next_token} if next_token else {}
        client_kwargs = self._session_provider.build_client_kwargs()
        return executor.execute_aws_api_call(
            self._service_name,
            "list_instances",
            **client_kwargs,
            **params,
        )

    def get_first_identity_store_id(self) -> OperationResult:
        """Return the IdentityStoreId of the first Identity Center instance.

        Returns:
            OperationResult with the store id as data, NOT_FOUND when the
            account has no instance, or the underlying call error
        """
        result = self.list_instances()
        if not result.is_success:
            return result

        instances = (result.data or {}).get("Instances") or []
        store_id = instances[0].get("IdentityStoreId") if instances else None
        if not store_id or store_id == "None":
            self._logger.warning("identity_store_not_found", instances=len(instances))
            return OperationResult.not_found(
                "No IAM Identity Center instance with an identity store was found",
                error_code="IDENTITY_STORE_NOT_FOUND",
            )
        return OperationResult.success(data=store_id, message="identity store resolved")
