import pytest
from botocore.config import Config

from infrastructure.clients.aws.session_provider import SessionProvider


@pytest.mark.unit
class TestSessionProvider:
    def test_minimal_kwargs(self):
        kwargs = SessionProvider().build_client_kwargs()

        assert kwargs["session_config"] is None
        assert isinstance(kwargs["client_config"]["config"], Config)
        assert kwargs["max_retries"] == 3

    def test_profile_region_and_endpoint(self):
        provider = SessionProvider(
            region="ap-northeast-1",
            profile_name="admin",
            endpoint_url="http://localhost:4566",
        )

        kwargs = provider.build_client_kwargs()

        assert kwargs["session_config"] == {
            "profile_name": "admin",
            "region_name": "ap-northeast-1",
        }
        assert kwargs["client_config"]["region_name"] == "ap-northeast-1"
        assert kwargs["client_config"]["endpoint_url"] == "http://localhost:4566"

    def test_timeouts_applied_and_botocore_retries_disabled(self):
        provider = SessionProvider(connect_timeout=2.0, read_timeout=7.0)

        config = provider.build_client_kwargs()["client_config"]["config"]

        assert config.connect_timeout == 2.0
        assert config.read_timeout == 7.0
        assert config.retries == {"max_attempts": 1}

    def test_from_settings(self, mock_aws_settings):
        provider = SessionProvider.from_settings(mock_aws_settings)

        assert provider.region == "us-east-1"
        assert provider.profile_name is None
        assert provider.connect_timeout == 5.0
        assert provider.read_timeout == 15.0
        assert provider.max_retries == 2
        assert provider.throttling_codes == ("ThrottlingException",)
