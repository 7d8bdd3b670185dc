"""Infrastructure AWS clients public API.

DI-friendly AWS clients with per-service class decomposition. The facade,
AWSClients, composes the Identity Store and SSO Admin clients:

    from infrastructure.clients.aws import AWSClients

    aws = AWSClients(settings.aws)
    result = aws.identitystore.list_users(identity_store_id=store_id)
    if result.is_success:
        users = result.data["Users"]
"""

from infrastructure.clients.aws.facade import AWSClients
from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sso_admin import SsoAdminClient

__all__ = [
    "AWSClients",
    "SessionProvider",
    "IdentityStoreClient",
    "SsoAdminClient",
]
