"""Cursor pagination over the directory API.

`PaginatedFetcher` exhausts a cursor-paginated listing into one ordered
sequence of records, hiding the server's per-call item cap.
`CountAggregator` walks the same cursor loop over a nested relationship but
only keeps a running count, so counting a large group costs one integer of
memory instead of the full member list.

A list call is any callable taking the previous page's cursor (None for the
first page) and returning a `FetchPage`. `as_list_call` adapts a client
method returning `OperationResult` to that shape.
"""

from typing import Any, Callable, Iterator, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from modules.identity_center.domain.errors import ProtocolError, UpstreamError
from modules.identity_center.domain.models import FetchPage, Record

logger = get_module_logger()

ListCall = Callable[[Optional[str]], FetchPage]

DEFAULT_MAX_PAGES = 10000


def as_list_call(
    call: Callable[..., OperationResult],
    items_key: str,
    to_record: Callable[[Any], Record],
    **params: Any,
) -> ListCall:
    """Adapt a single-page client method into a ListCall.

    Args:
        call: Client method accepting next_token plus params
        items_key: Response key holding the page items (e.g. "Groups")
        to_record: Normalizer from raw item to Record
        **params: Fixed request parameters (e.g. group_id)

    Raises (from the returned callable):
        UpstreamError: the page request failed
        ProtocolError: the page had no items list
    """

    def _list_call(cursor: Optional[str]) -> FetchPage:
        result = call(next_token=cursor, **params)
        if not result.is_success:
            raise UpstreamError(
                f"Failed to fetch {items_key}: {result.message}", response=result
            )
        return FetchPage.from_response(result.data or {}, items_key, to_record)

    return _list_call


class PaginatedFetcher:
    """Exhausts cursor-paginated listings.

    Args:
        max_pages: Pages followed before the server is considered to be
            looping; exceeding it raises ProtocolError
    """

    def __init__(self, max_pages: int = DEFAULT_MAX_PAGES) -> None:
        if max_pages <= 0:
            raise ValueError("max_pages must be greater than zero")
        self.max_pages = max_pages

    def pages(self, list_call: ListCall) -> Iterator[FetchPage]:
        """Yield pages in server order until the cursor runs out.

        Raises:
            UpstreamError: a page call failed; no retry of the partial page
            ProtocolError: more than max_pages pages were returned
        """
        cursor: Optional[str] = None
        for page_number in range(1, self.max_pages + 1):
            page = list_call(cursor)
            logger.debug(
                "page_fetched",
                page_number=page_number,
                items=len(page.items),
                has_more=page.has_more,
            )
            yield page
            if not page.has_more:
                return
            cursor = page.next_token

        logger.error("page_cap_exceeded", max_pages=self.max_pages)
        raise ProtocolError(
            f"Listing did not terminate after {self.max_pages} pages"
        )

    def fetch_all(self, list_call: ListCall) -> List[Record]:
        """Return every record of the listing, in page and in-page order."""
        records: List[Record] = []
        for page in self.pages(list_call):
            records.extend(page.items)
        return records


class CountAggregator:
    """Counts the members of a nested paginated relationship.

    Args:
        list_call_for: Builds the ListCall for a parent id
        fetcher: PaginatedFetcher supplying the cursor loop

    Example:
        counter = CountAggregator(
            lambda gid: as_list_call(
                client.list_group_memberships,
                "GroupMemberships",
                membership_record,
                group_id=gid,
            ),
            PaginatedFetcher(),
        )
        result = counter.count("group-id")
        result.data  # exact total when result.is_success
    """

    def __init__(
        self,
        list_call_for: Callable[[str], ListCall],
        fetcher: Optional[PaginatedFetcher] = None,
    ) -> None:
        self._list_call_for = list_call_for
        self._fetcher = fetcher or PaginatedFetcher()

    def count(self, parent_id: str) -> OperationResult:
        """Count all records under parent_id.

        Returns:
            OperationResult.success(data=total) when every page was read.
            On a failure mid-pagination, an error result whose data is the
            partial sum accumulated before the failure.
        """
        total = 0
        try:
            for page in self._fetcher.pages(self._list_call_for(parent_id)):
                total += len(page.items)
        except UpstreamError as exc:
            logger.warning(
                "count_incomplete",
                parent_id=parent_id,
                partial_total=total,
                error=str(exc),
            )
            response = exc.response
            if isinstance(response, OperationResult):
                return response.with_data(total)
            return OperationResult.permanent_error(
                str(exc), error_code="UPSTREAM_ERROR", data=total
            )
        except ProtocolError as exc:
            logger.warning(
                "count_incomplete",
                parent_id=parent_id,
                partial_total=total,
                error=str(exc),
            )
            return OperationResult.permanent_error(
                str(exc), error_code="PROTOCOL_ERROR", data=total
            )

        return OperationResult.success(data=total, message=f"counted {total}")
