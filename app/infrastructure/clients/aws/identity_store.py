"""Identity Store client for AWS operations.

Provides single-page access to the Identity Store listing operations and
single-record describe calls. Pagination is left to the caller: every list
method accepts the opaque `next_token` returned by the previous page and
returns the raw response, NextToken included.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class IdentityStoreClient:
    """Client for AWS Identity Store operations.

    All methods return OperationResult for consistent error handling and
    downstream processing.

    Args:
        session_provider: SessionProvider instance for credential/config management
        default_identity_store_id: Default Identity Store ID for this client
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_identity_store_id: Optional[str] = None,
    ) -> None:
        self._session_provider = session_provider
        self._service_name = "identitystore"
        self._default_identity_store_id = default_identity_store_id
        self._logger = logger.bind(component="identity_store_client")

    def _execute(
        self,
        method: str,
        identity_store_id: Optional[str],
        **params: Any,
    ) -> OperationResult:
        store_id = identity_store_id or self._default_identity_store_id
        if not store_id:
            return OperationResult.permanent_error(
                message="identity_store_id is required",
                error_code="MISSING_IDENTITY_STORE_ID",
            )

        request: Dict[str, Any] = {
            key: value for key, value in params.items() if value is not None
        }
        client_kwargs = self._session_provider.build_client_kwargs()
        self._logger.debug(
            "identity_store_call",
            method=method,
            has_cursor="NextToken" in request,
        )
        return executor.execute_aws_api_call(
            self._service_name,
            method,
            IdentityStoreId=store_id,
            **client_kwargs,
            **request,
        )

    def list_groups(
        self,
        next_token: Optional[str] = None,
        identity_store_id: Optional[str] = None,
    ) -> OperationResult:
        """List one page of groups.

        Args:
            next_token: Cursor returned by the previous page, if any
            identity_store_id: Optional override for Identity Store ID

        Returns:
            OperationResult whose data is {"Groups": [...], "NextToken": ...}
        """
        return self._execute(
            "list_groups",
            identity_store_id,
            NextToken=next_token,
        )

    def list_users(
        self,
        next_token: Optional[str] = None,
        identity_store_id: Optional[str] = None,
    ) -> OperationResult:
        """List one page of users.

        Returns:
            OperationResult whose data is {"Users": [...], "NextToken": ...}
        """
        return self._execute(
            "list_users",
            identity_store_id,
            NextToken=next_token,
        )

    def list_group_memberships(
        self,
        group_id: str,
        next_token: Optional[str] = None,
        identity_store_id: Optional[str] = None,
    ) -> OperationResult:
        """List one page of memberships for a group.

        Args:
            group_id: ID of the group to list memberships for
            next_token: Cursor returned by the previous page, if any
            identity_store_id: Optional override for Identity Store ID

        Returns:
            OperationResult whose data is
            {"GroupMemberships": [...], "NextToken": ...}
        """
        return self._execute(
            "list_group_memberships",
            identity_store_id,
            GroupId=group_id,
            NextToken=next_token,
        )

    def describe_user(
        self,
        user_id: str,
        identity_store_id: Optional[str] = None,
    ) -> OperationResult:
        """Describe a single user.

        Returns:
            OperationResult with the user's attributes or an error
        """
        return self._execute("describe_user", identity_store_id, UserId=user_id)
