"""Infrastructure configuration module - public API.

Centralized configuration management for iam-idc using Pydantic
BaseSettings with domain-based organization.

Exports:
    get_settings: Cached Settings loaded from the environment
    Settings: Main settings class (for testing/overrides)
    AwsSettings: AWS integration settings
    DirectorySettings: Listing/enrichment feature settings

Example:
    ```python
    from infrastructure.configuration import get_settings

    settings = get_settings()

    region = settings.aws.AWS_REGION
    ceiling = settings.directory.max_concurrency
    ```
"""

from infrastructure.configuration.features import DirectorySettings
from infrastructure.configuration.integrations import AwsSettings
from infrastructure.configuration.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "AwsSettings", "DirectorySettings"]
