"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.directory import DirectorySettings

__all__ = [
    "DirectorySettings",
]
