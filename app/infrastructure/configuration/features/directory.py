"""Identity Center directory feature settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class DirectorySettings(FeatureSettings):
    """Configuration for listing and enriching directory records.

    Environment Variables:
        IDC_MAX_CONCURRENCY: Ceiling on concurrently running enrichment
            units (default: 30)
        IDC_SCHEDULING: 'pool' (continuously refilled worker pool) or
            'batch' (group barrier) scheduling (default: pool)
        IDC_MAX_PAGES: Maximum pages followed for one listing before the
            server is considered misbehaving (default: 10000)
        IDC_OUTPUT_FORMAT: Default output format: text, json or table
        IDC_COLUMN_ALIGN: Align text output into columns (default: True)

    Scheduling:
        Both strategies never exceed max_concurrency in-flight units and
        always emit results in listing order. 'batch' waits for a whole
        group before starting the next one, so one slow item delays the
        rest of the batch.
    """

    max_concurrency: int = Field(
        default=30,
        gt=0,
        alias="IDC_MAX_CONCURRENCY",
        description="Maximum concurrently running enrichment units",
    )
    scheduling: Literal["pool", "batch"] = Field(
        default="pool",
        alias="IDC_SCHEDULING",
        description="Enrichment scheduling strategy",
    )
    max_pages: int = Field(
        default=10000,
        gt=0,
        alias="IDC_MAX_PAGES",
        description="Page cap for a single paginated listing",
    )
    output_format: Literal["text", "json", "table"] = Field(
        default="text",
        alias="IDC_OUTPUT_FORMAT",
        description="Default output format",
    )
    column_align: bool = Field(
        default=True,
        alias="IDC_COLUMN_ALIGN",
        description="Align text output into columns",
    )
