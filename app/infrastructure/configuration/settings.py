"""iam-idc configuration settings - main aggregator."""

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import DirectorySettings
from infrastructure.configuration.integrations import AwsSettings


class Settings(BaseSettings):
    """iam-idc configuration settings - main aggregator.

    Aggregates the domain-specific settings into one immutable value that is
    passed explicitly to every component that needs it:

    - **aws**: credentials profile, region, identity store and call deadlines
    - **directory**: concurrency, scheduling, page cap and output defaults

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: 'console' for human-readable lines, 'json' for JSON lines

    Example:
        ```python
        from infrastructure.configuration import get_settings

        settings = get_settings().with_overrides(region="eu-west-1")
        settings.aws.AWS_REGION  # "eu-west-1"
        settings.directory.max_concurrency  # 30
        ```
    """

    LOG_LEVEL: str = "ERROR"
    LOG_FORMAT: Literal["console", "json"] = "console"

    aws: AwsSettings
    directory: DirectorySettings

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "aws": AwsSettings,
            "directory": DirectorySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    def with_overrides(
        self,
        profile: Optional[str] = None,
        region: Optional[str] = None,
        identity_store_id: Optional[str] = None,
        output_format: Optional[str] = None,
        column_align: Optional[bool] = None,
        max_concurrency: Optional[int] = None,
        scheduling: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "Settings":
        """Return a new Settings value with command-line overrides applied.

        Arguments left as None keep the current value. The receiver is never
        modified.
        """
        aws_updates = _present(
            AWS_PROFILE=profile,
            AWS_REGION=region,
            IDENTITY_STORE_ID=identity_store_id,
        )
        directory_updates = _present(
            output_format=output_format,
            column_align=column_align,
            max_concurrency=max_concurrency,
            scheduling=scheduling,
        )
        if max_concurrency is not None and max_concurrency <= 0:
            raise ValueError("max_concurrency must be greater than zero")

        updates: dict[str, Any] = _present(LOG_LEVEL=log_level)
        if aws_updates:
            updates["aws"] = self.aws.model_copy(update=aws_updates)
        if directory_updates:
            updates["directory"] = self.directory.model_copy(update=directory_updates)
        return self.model_copy(update=updates)


def _present(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings loaded from the environment (cached)."""
    return Settings()
