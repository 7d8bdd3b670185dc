"""Identifier resolution.

Turns a user-supplied group reference into a canonical id: a value already
shaped like an Identity Store id is used as is, otherwise the display names
of the listing are matched exactly, then as a case-insensitive substring.
"""

import re
from typing import List, Sequence

from infrastructure.logging import get_module_logger
from modules.identity_center.domain.errors import NotFoundError
from modules.identity_center.domain.models import (
    MatchKind,
    Record,
    ResolvedIdentifier,
)

logger = get_module_logger()

# 8-4-4-4-12 hexadecimal groups
AWS_UUID_REGEX = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_canonical_id(identifier: str) -> bool:
    return bool(AWS_UUID_REGEX.match(identifier))


class IdentifierResolver:
    """Resolves free-form identifiers against a listing."""

    def resolve(self, identifier: str, listing: Sequence[Record]) -> ResolvedIdentifier:
        """Resolve identifier to a record id.

        Precedence: canonical id shape, then the first exact display-name
        match, then the first case-insensitive substring match. An exact
        match wins even when a substring match appears earlier.

        Raises:
            NotFoundError: identifier is blank or matched nothing
        """
        if not identifier or not identifier.strip():
            raise NotFoundError("Empty identifier", identifier=identifier)

        if is_canonical_id(identifier):
            logger.debug("identifier_resolved", match_kind="canonical")
            return ResolvedIdentifier(id=identifier, match_kind=MatchKind.CANONICAL)

        for record in listing:
            if record.display_name == identifier:
                logger.debug(
                    "identifier_resolved", match_kind="exact", record_id=record.id
                )
                return ResolvedIdentifier(id=record.id, match_kind=MatchKind.EXACT)

        needle = identifier.lower()
        for record in listing:
            if needle in record.display_name.lower():
                logger.debug(
                    "identifier_resolved", match_kind="fuzzy", record_id=record.id
                )
                return ResolvedIdentifier(id=record.id, match_kind=MatchKind.FUZZY)

        logger.warning("identifier_not_found", identifier=identifier)
        raise NotFoundError(
            f"No group matches '{identifier}'", identifier=identifier
        )

    def search(self, term: str, listing: Sequence[Record]) -> List[Record]:
        """Return every record whose display name contains term.

        Matching is a case-insensitive substring test; listing order is kept.

        Raises:
            NotFoundError: no record matched
        """
        needle = term.lower()
        matches = [r for r in listing if needle in r.display_name.lower()]
        if not matches:
            raise NotFoundError(f"No groups match '{term}'", identifier=term)
        return matches
