"""AWS Clients facade for the directory operations.

Composition-based design: each service has a focused client class, composed
together in a lightweight facade sharing one SessionProvider.
"""

import structlog

from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sso_admin import SsoAdminClient
from infrastructure.configuration.integrations.aws import AwsSettings

logger = structlog.get_logger()


class AWSClients:
    """Facade for the AWS service clients used by iam-idc.

    Args:
        aws_settings: AWS configuration from settings.aws

    Usage:
        aws = AWSClients(settings.aws)
        page = aws.identitystore.list_groups(identity_store_id=store_id)
        if page.is_success:
            groups = page.data["Groups"]
    """

    def __init__(self, aws_settings: AwsSettings) -> None:
        self._session_provider = SessionProvider.from_settings(aws_settings)

        self.identitystore: IdentityStoreClient = IdentityStoreClient(
            self._session_provider,
            default_identity_store_id=aws_settings.IDENTITY_STORE_ID,
        )
        self.sso_admin: SsoAdminClient = SsoAdminClient(self._session_provider)
        self._logger = logger.bind(component="aws_clients")
        self._logger.debug(
            "aws_clients_initialized",
            region=aws_settings.AWS_REGION,
            profile=aws_settings.AWS_PROFILE,
        )
