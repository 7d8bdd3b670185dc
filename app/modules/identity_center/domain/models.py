"""Data models for the identity_center module.

Lightweight frozen dataclasses (not Pydantic) used internally to represent
directory records, pages and enrichment outcomes. Raw API dictionaries are
normalized into `Record` by the `*_record` helpers at the client boundary
and never leak further.

Key structures:
  - Record: one directory entry (group, user or membership)
  - FetchPage: one page of a cursor-paginated listing
  - EnrichmentTask / Outcome: per-item unit of a batch
  - EnrichedResult: a record plus its derived value, in listing order
  - ResolvedIdentifier: canonical id produced from a free-form string
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from modules.identity_center.domain.errors import PartialEnrichmentWarning, ProtocolError

# Cursor values that mean "no more pages"
NO_MORE_PAGES = frozenset({"", "null", "None"})


@dataclass(frozen=True)
class Record:
    """Canonical unit returned by the directory API.

    Attributes:
        id: Server-assigned identifier (GroupId, UserId, member's UserId)
        display_name: Human-readable name, empty when the shape has none
        fields: Remaining attributes used for output
    """

    id: str
    display_name: str = ""
    fields: Mapping[str, Optional[str]] = field(default_factory=dict)

    def __post_init__(self):
        # records are read-only once fetched
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, key: str) -> Optional[str]:
        return self.fields.get(key)


@dataclass(frozen=True)
class FetchPage:
    """One page of a paginated call."""

    items: Tuple[Record, ...]
    next_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.next_token is not None and self.next_token not in NO_MORE_PAGES

    @classmethod
    def from_response(
        cls,
        response: Mapping[str, Any],
        items_key: str,
        to_record: Callable[[Mapping[str, Any]], Record],
    ) -> "FetchPage":
        """Build a page from a raw list response.

        Raises:
            ProtocolError: if the response has no list under items_key
        """
        raw_items = response.get(items_key) if isinstance(response, Mapping) else None
        if not isinstance(raw_items, list):
            raise ProtocolError(
                f"Malformed page: '{items_key}' is missing or not a list"
            )
        return cls(
            items=tuple(to_record(item) for item in raw_items),
            next_token=response.get("NextToken"),
        )


class MatchKind(Enum):
    """How an identifier was resolved."""

    EXACT = "exact"
    CANONICAL = "canonical"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class ResolvedIdentifier:
    id: str
    match_kind: MatchKind


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class Failure:
    """A failed enrichment; partial holds any best-effort value."""

    reason: str
    partial: Any = None


@dataclass(frozen=True)
class Pending:
    pass


PENDING = Pending()

Outcome = Union[Success, Failure, Pending]


@dataclass
class EnrichmentTask:
    """A unit of work inside one batch.

    `index` is the position in the original listing and only addresses the
    result slot; it never influences the enrichment itself.
    """

    index: int
    input: Record
    outcome: Outcome = PENDING


@dataclass(frozen=True)
class EnrichedResult:
    """A record with its derived value.

    derived is None when enrichment failed; error then holds the reason and
    partial any best-effort value the enrichment produced before failing.
    """

    index: int
    base_record: Record
    derived: Any = None
    error: Optional[str] = None
    partial: Any = None

    @property
    def is_enriched(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Cancelled:
    """Returned when the user dismisses an interactive selection.

    Not an error: the command stops cleanly with exit status 0.
    """


CANCELLED = Cancelled()


def _primary_email(raw: Mapping[str, Any]) -> Optional[str]:
    emails = raw.get("Emails") or []
    for email in emails:
        if email.get("Primary"):
            return email.get("Value")
    return emails[0].get("Value") if emails else None


def group_record(raw: Mapping[str, Any]) -> Record:
    """Normalize a Group{GroupId, DisplayName} response item."""
    return Record(
        id=str(raw.get("GroupId", "")),
        display_name=raw.get("DisplayName") or "",
        fields={"Description": raw.get("Description")},
    )


def user_record(raw: Mapping[str, Any]) -> Record:
    """Normalize a User{UserId, UserName, DisplayName, Emails} item."""
    fields: Dict[str, Optional[str]] = {
        "UserName": raw.get("UserName"),
        "DisplayName": raw.get("DisplayName"),
        "Email": _primary_email(raw),
    }
    return Record(
        id=str(raw.get("UserId", "")),
        display_name=raw.get("DisplayName") or "",
        fields=fields,
    )


def membership_record(raw: Mapping[str, Any]) -> Record:
    """Normalize a GroupMembership item; the record id is the member's UserId."""
    member = raw.get("MemberId") or {}
    return Record(
        id=str(member.get("UserId", "")),
        fields={
            "MembershipId": raw.get("MembershipId"),
            "GroupId": raw.get("GroupId"),
        },
    )


GROUP_COLUMNS = ("GroupId", "DisplayName", "UserCount")
USER_COLUMNS = ("UserId", "UserName", "DisplayName", "Email")


@dataclass(frozen=True)
class GroupRow:
    group_id: str
    display_name: str
    user_count: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "GroupId": self.group_id,
            "DisplayName": self.display_name,
            "UserCount": self.user_count,
        }


@dataclass(frozen=True)
class UserRow:
    user_id: str
    user_name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_record(cls, record: Record) -> "UserRow":
        return cls(
            user_id=record.id,
            user_name=record.get("UserName"),
            display_name=record.get("DisplayName"),
            email=record.get("Email"),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "UserId": self.user_id,
            "UserName": self.user_name,
            "DisplayName": self.display_name,
            "Email": self.email,
        }


@dataclass(frozen=True)
class Listing:
    """Command output: rows in listing order plus user-facing notices.

    Attributes:
        kind: "groups" or "users", used for the total line
        columns: Column names in output order
        rows: GroupRow or UserRow values
        notices: Messages always shown to the user (e.g. search had no match)
        partial: Set when some rows could not be enriched
    """

    kind: str
    columns: Tuple[str, ...]
    rows: Tuple[Any, ...] = ()
    notices: Tuple[str, ...] = ()
    partial: Optional[PartialEnrichmentWarning] = None

    @property
    def total(self) -> int:
        return len(self.rows)

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [row.as_dict() for row in self.rows]
