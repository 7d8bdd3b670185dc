"""Fixtures for AWS client tests.

Provides factory-as-fixture pattern for creating configurable fake boto3 clients
used across AWS client unit tests.
"""

from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from infrastructure.clients.aws import AWSClients
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.configuration.integrations.aws import AwsSettings


class FakeClient:
    """Configurable fake boto3 client for unit tests.

    Supports:
    - API method responses via `__getattr__` lookup
    - Both static and callable response configurations
    - Recording of every call as (method, kwargs) in `calls`
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls = []

    def __getattr__(self, name: str):
        """Provide callable for API methods that returns configured responses."""
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)

        resp = self._api_responses[name]

        def _call(*_args, **kwargs):
            self.calls.append((name, kwargs))
            if isinstance(resp, Exception):
                raise resp
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call


def make_client_error(code: str, message: str = "boom", operation: str = "Op"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def client_error():
    """Factory fixture building botocore ClientError instances."""
    return make_client_error


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating configurable fake boto3 clients.

    Usage:
        def test_something(monkeypatch, make_fake_client):
            client = make_fake_client(api_responses={"list_groups": {...}})
            monkeypatch.setattr(executor, "get_boto3_client", lambda *a, **k: client)
    """

    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def mock_aws_settings():
    """Fixture providing a mock AwsSettings instance for testing AWSClients.

    Returns a MagicMock configured with standard AWS settings properties:
    - AWS_REGION: us-east-1
    - IDENTITY_STORE_ID: store-1234567890
    - ENDPOINT_URL: None (for local/test endpoints)
    """
    settings = MagicMock(spec=AwsSettings)
    settings.AWS_REGION = "us-east-1"
    settings.AWS_PROFILE = None
    settings.ENDPOINT_URL = None
    settings.IDENTITY_STORE_ID = "store-1234567890"
    settings.MAX_RETRIES = 2
    settings.CONNECT_TIMEOUT = 5.0
    settings.READ_TIMEOUT = 15.0
    settings.THROTTLING_ERRS = ("ThrottlingException",)
    return settings


@pytest.fixture
def aws_factory(mock_aws_settings):
    """Provide an AWSClients instance for unit tests.

    Tests that need to customize boto3 behavior should still monkeypatch
    `infrastructure.clients.aws.executor.get_boto3_client` to return fake
    clients.
    """
    return AWSClients(aws_settings=mock_aws_settings)


@pytest.fixture
def identity_store_client():
    """Fixture for IdentityStoreClient with a default store id."""
    from infrastructure.clients.aws.identity_store import IdentityStoreClient

    session_provider = SessionProvider(region="us-east-1")
    return IdentityStoreClient(
        session_provider=session_provider,
        default_identity_store_id="store-1234567890",
    )


@pytest.fixture
def sso_admin_client():
    """Fixture for SsoAdminClient."""
    from infrastructure.clients.aws.sso_admin import SsoAdminClient

    return SsoAdminClient(session_provider=SessionProvider(region="us-east-1"))
