"""Identity Center command service.

Wires identity store resolution, paginated listing, identifier resolution
and batch enrichment together for each command. The service receives one
immutable `Settings` value and never reads configuration on its own.
"""

from typing import List, Optional, Sequence, Tuple, Union

from infrastructure.clients.aws import AWSClients
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from modules.identity_center.domain.errors import ConfigurationError, NotFoundError
from modules.identity_center.domain.models import (
    GROUP_COLUMNS,
    USER_COLUMNS,
    Cancelled,
    EnrichedResult,
    GroupRow,
    Listing,
    Record,
    UserRow,
    group_record,
    membership_record,
    user_record,
)
from modules.identity_center.enrichment import (
    BoundedBatchEnricher,
    partial_enrichment_warning,
)
from modules.identity_center.pagination import (
    CountAggregator,
    ListCall,
    PaginatedFetcher,
    as_list_call,
)
from modules.identity_center.resolver import IdentifierResolver, is_canonical_id
from modules.identity_center.selector import InteractiveSelector

logger = get_module_logger()


class IdentityCenterService:
    """Directory queries behind the iam-idc commands.

    Args:
        settings: Immutable settings for this invocation
        clients: AWS clients; built from settings.aws when omitted
        resolver: Identifier resolver
    """

    def __init__(
        self,
        settings: Settings,
        clients: Optional[AWSClients] = None,
        resolver: Optional[IdentifierResolver] = None,
    ) -> None:
        self.settings = settings
        self.clients = clients or AWSClients(settings.aws)
        self.resolver = resolver or IdentifierResolver()
        self.fetcher = PaginatedFetcher(max_pages=settings.directory.max_pages)
        self.enricher = BoundedBatchEnricher(
            max_concurrency=settings.directory.max_concurrency,
            scheduling=settings.directory.scheduling,
        )
        self._identity_store_id: Optional[str] = None

    def resolve_identity_store_id(self) -> str:
        """Return the configured identity store, else the first instance's.

        Raises:
            ConfigurationError: no store configured and none discoverable
        """
        if self._identity_store_id:
            return self._identity_store_id

        configured = self.settings.aws.IDENTITY_STORE_ID
        if configured:
            self._identity_store_id = configured
            return configured

        result = self.clients.sso_admin.get_first_identity_store_id()
        if not result.is_success:
            logger.error(
                "identity_store_resolution_failed",
                error=result.message,
                error_code=result.error_code,
            )
            raise ConfigurationError(
                f"Could not determine the identity store ID: {result.message}"
            )

        self._identity_store_id = result.data
        logger.debug("identity_store_resolved", identity_store_id=result.data)
        return result.data

    def _groups_call(self) -> ListCall:
        return as_list_call(
            self.clients.identitystore.list_groups,
            "Groups",
            group_record,
            identity_store_id=self.resolve_identity_store_id(),
        )

    def _memberships_call(self, group_id: str) -> ListCall:
        return as_list_call(
            self.clients.identitystore.list_group_memberships,
            "GroupMemberships",
            membership_record,
            group_id=group_id,
            identity_store_id=self.resolve_identity_store_id(),
        )

    def fetch_groups(self) -> List[Record]:
        """Return every group in listing order."""
        return self.fetcher.fetch_all(self._groups_call())

    def list_groups(self, search_term: Optional[str] = None) -> Listing:
        """List groups with their member counts.

        A search term keeps only groups whose display name contains it
        (case-insensitive). When nothing matches the listing is empty and
        carries a notice instead of failing.
        """
        groups = self.fetch_groups()
        if search_term:
            try:
                groups = self.resolver.search(search_term, groups)
            except NotFoundError as exc:
                logger.warning("group_search_no_match", search_term=search_term)
                return Listing(kind="groups", columns=GROUP_COLUMNS, notices=(str(exc),))

        counter = CountAggregator(self._memberships_call, self.fetcher)
        results = self.enricher.enrich(groups, lambda group: counter.count(group.id))

        rows = tuple(
            GroupRow(
                group_id=result.base_record.id,
                display_name=result.base_record.display_name,
                user_count=result.derived,
            )
            for result in results
        )
        return Listing(
            kind="groups",
            columns=GROUP_COLUMNS,
            rows=rows,
            partial=partial_enrichment_warning(results),
        )

    def list_users(self) -> Listing:
        """List every user of the identity store."""
        call = as_list_call(
            self.clients.identitystore.list_users,
            "Users",
            user_record,
            identity_store_id=self.resolve_identity_store_id(),
        )
        users = self.fetcher.fetch_all(call)
        return Listing(
            kind="users",
            columns=USER_COLUMNS,
            rows=tuple(UserRow.from_record(user) for user in users),
        )

    def list_users_in_group(self, identifier: str) -> Listing:
        """List the members of the group named or identified by identifier.

        Raises:
            NotFoundError: identifier matched no group
        """
        # canonical ids resolve without the group listing
        listing: Sequence[Record] = (
            () if is_canonical_id(identifier) else self.fetch_groups()
        )
        resolved = self.resolver.resolve(identifier, listing)
        logger.info(
            "group_resolved",
            group_id=resolved.id,
            match_kind=resolved.match_kind.value,
        )
        return self.list_group_members(resolved.id)

    def list_group_members(self, group_id: str) -> Listing:
        """List the members of group_id, described in membership order.

        A member whose details cannot be fetched keeps a row with its id.
        """
        members = self.fetcher.fetch_all(self._memberships_call(group_id))
        store_id = self.resolve_identity_store_id()

        def describe(member: Record) -> OperationResult:
            return self.clients.identitystore.describe_user(
                member.id, identity_store_id=store_id
            )

        results = self.enricher.enrich(members, describe)
        return Listing(
            kind="users",
            columns=USER_COLUMNS,
            rows=tuple(_member_row(result) for result in results),
            partial=partial_enrichment_warning(results),
        )

    def group_options(self) -> List[Tuple[str, str]]:
        return [(group.id, group.display_name) for group in self.fetch_groups()]

    def select_group(
        self,
        selector: InteractiveSelector,
        options: Optional[Sequence[Tuple[str, str]]] = None,
    ) -> Union[str, Cancelled]:
        """Let the user pick a group; returns its id or CANCELLED.

        options defaults to the full group listing.
        """
        if options is None:
            options = self.group_options()
        return selector.select(options)


def _member_row(result: EnrichedResult) -> UserRow:
    if result.is_enriched and result.derived:
        return UserRow.from_record(user_record(result.derived))
    return UserRow(user_id=result.base_record.id)
