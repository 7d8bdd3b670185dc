"""Domain layer - data models and errors."""

from modules.identity_center.domain.errors import (
    ConfigurationError,
    IdentityCenterError,
    NotFoundError,
    PartialEnrichmentWarning,
    ProtocolError,
    UpstreamError,
)
from modules.identity_center.domain.models import (
    CANCELLED,
    GROUP_COLUMNS,
    PENDING,
    USER_COLUMNS,
    Cancelled,
    EnrichedResult,
    EnrichmentTask,
    Failure,
    FetchPage,
    GroupRow,
    Listing,
    MatchKind,
    Record,
    ResolvedIdentifier,
    Success,
    UserRow,
    group_record,
    membership_record,
    user_record,
)

__all__ = [
    "CANCELLED",
    "Cancelled",
    "ConfigurationError",
    "EnrichedResult",
    "EnrichmentTask",
    "Failure",
    "FetchPage",
    "GROUP_COLUMNS",
    "GroupRow",
    "IdentityCenterError",
    "Listing",
    "MatchKind",
    "NotFoundError",
    "PENDING",
    "PartialEnrichmentWarning",
    "ProtocolError",
    "Record",
    "ResolvedIdentifier",
    "Success",
    "USER_COLUMNS",
    "UpstreamError",
    "UserRow",
    "group_record",
    "membership_record",
    "user_record",
]
