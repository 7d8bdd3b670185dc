"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- AwsSettings and DirectorySettings defaults and environment loading
- Settings aggregation and immutability
- Command-line overrides producing new values
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import (
    AwsSettings,
    DirectorySettings,
    Settings,
    get_settings,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "AWS_PROFILE",
        "AWS_REGION",
        "AWS_ENDPOINT_URL",
        "IDENTITY_STORE_ID",
        "AWS_MAX_RETRIES",
        "IDC_MAX_CONCURRENCY",
        "IDC_SCHEDULING",
        "IDC_OUTPUT_FORMAT",
        "IDC_COLUMN_ALIGN",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")


@pytest.mark.unit
class TestAwsSettings:
    def test_defaults(self, clean_env):
        aws = AwsSettings()

        assert aws.AWS_PROFILE is None
        assert aws.IDENTITY_STORE_ID is None
        assert aws.MAX_RETRIES == 3
        assert aws.CONNECT_TIMEOUT == 10.0
        assert aws.READ_TIMEOUT == 30.0
        assert "ThrottlingException" in aws.THROTTLING_ERRS

    def test_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "admin")
        monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.setenv("IDENTITY_STORE_ID", "d-9999")

        aws = AwsSettings()

        assert aws.AWS_PROFILE == "admin"
        assert aws.ENDPOINT_URL == "http://localhost:4566"
        assert aws.IDENTITY_STORE_ID == "d-9999"


@pytest.mark.unit
class TestDirectorySettings:
    def test_defaults(self, clean_env):
        directory = DirectorySettings()

        assert directory.max_concurrency == 30
        assert directory.scheduling == "pool"
        assert directory.max_pages == 10000
        assert directory.output_format == "text"
        assert directory.column_align is True

    def test_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("IDC_MAX_CONCURRENCY", "5")
        monkeypatch.setenv("IDC_SCHEDULING", "batch")
        monkeypatch.setenv("IDC_COLUMN_ALIGN", "false")

        directory = DirectorySettings()

        assert directory.max_concurrency == 5
        assert directory.scheduling == "batch"
        assert directory.column_align is False

    @pytest.mark.parametrize(
        "name,value",
        [
            ("IDC_MAX_CONCURRENCY", "0"),
            ("IDC_SCHEDULING", "random"),
            ("IDC_OUTPUT_FORMAT", "yaml"),
        ],
    )
    def test_invalid_values_rejected(self, clean_env, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            DirectorySettings()


@pytest.mark.unit
class TestSettings:
    def test_subsettings_instantiated(self, clean_env):
        settings = Settings()

        assert isinstance(settings.aws, AwsSettings)
        assert isinstance(settings.directory, DirectorySettings)
        assert settings.LOG_LEVEL == "ERROR"

    def test_settings_are_frozen(self, clean_env):
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.LOG_LEVEL = "DEBUG"

    def test_with_overrides_returns_new_value(self, clean_env):
        settings = Settings()

        updated = settings.with_overrides(
            profile="dev",
            region="eu-west-1",
            identity_store_id="d-1",
            output_format="json",
            column_align=False,
            max_concurrency=8,
            log_level="DEBUG",
        )

        assert updated.aws.AWS_PROFILE == "dev"
        assert updated.aws.AWS_REGION == "eu-west-1"
        assert updated.aws.IDENTITY_STORE_ID == "d-1"
        assert updated.directory.output_format == "json"
        assert updated.directory.column_align is False
        assert updated.directory.max_concurrency == 8
        assert updated.LOG_LEVEL == "DEBUG"
        assert settings.aws.AWS_PROFILE is None
        assert settings.directory.max_concurrency == 30

    def test_with_overrides_none_keeps_values(self, clean_env):
        settings = Settings()

        updated = settings.with_overrides()

        assert updated.aws == settings.aws
        assert updated.directory == settings.directory

    def test_with_overrides_rejects_zero_concurrency(self, clean_env):
        with pytest.raises(ValueError):
            Settings().with_overrides(max_concurrency=0)

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()
