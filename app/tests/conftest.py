"""Shared fixtures for the iam-idc test suite."""

import pytest

from infrastructure.configuration import AwsSettings, DirectorySettings, Settings
from infrastructure.configuration.settings import get_settings


@pytest.fixture
def make_settings():
    """Factory fixture building an explicit Settings value.

    Usage:
        def test_something(make_settings):
            settings = make_settings(max_concurrency=2, scheduling="batch")
    """

    def _factory(
        identity_store_id="d-123412341234",
        region="us-east-1",
        max_concurrency=4,
        scheduling="pool",
        max_pages=100,
        output_format="text",
        column_align=True,
    ) -> Settings:
        return Settings(
            aws=AwsSettings(
                AWS_REGION=region,
                IDENTITY_STORE_ID=identity_store_id,
                AWS_MAX_RETRIES=0,
            ),
            directory=DirectorySettings(
                IDC_MAX_CONCURRENCY=max_concurrency,
                IDC_SCHEDULING=scheduling,
                IDC_MAX_PAGES=max_pages,
                IDC_OUTPUT_FORMAT=output_format,
                IDC_COLUMN_ALIGN=column_align,
            ),
        )

    return _factory


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Ensure cached settings never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Route structlog through the silenced test configuration."""
    from infrastructure.logging import configure_logging

    configure_logging()
