"""
Cursor-following aggregation over the API's paged list endpoints.

A page is a JSON object holding its items under a collection key together
with ``nextId``, the cursor to pass as ``startFrom`` for the following page.
The last page carries no ``nextId``. Short pages are not treated as final.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..errors import TransportError
from ..types.pagination import ListFilterType
from .validation import validate_list_filter

logger = logging.getLogger(__name__)

FetchPage = Callable[[ListFilterType], Dict[str, Any]]


def page_items(page: Any, items_key: str) -> List[Any]:
    """Return the items a page holds under ``items_key``.

    A page without the key holds no items.

    Raises:
        TransportError: If the page is not an object or its items are not a list
    """
    if not isinstance(page, dict):
        raise TransportError(f'Malformed list response: expected an object, got {type(page).__name__}')
    items = page.get(items_key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise TransportError(f'Malformed list response: {items_key!r} is a {type(items).__name__}, not a list')
    return items


def iter_pages(fetch_page: FetchPage, list_filter: Optional[ListFilterType] = None) -> Iterator[Dict[str, Any]]:
    """Return an iterator over pages from ``fetch_page``, ending at the page without a cursor.

    The filter is validated here, before any page is requested. Each page is
    fetched only after the previous one has been consumed.

    Args:
        fetch_page: Single-page list operation taking a list filter
        list_filter: Page size bound, starting cursor and name filter

    Raises:
        ValidationError: If max_items is outside 1-100
    """
    page_filter: ListFilterType = dict(list_filter or {})
    validate_list_filter(page_filter)
    return _follow(fetch_page, page_filter)


def _follow(fetch_page: FetchPage, page_filter: ListFilterType) -> Iterator[Dict[str, Any]]:
    page_number = 1
    while True:
        start_from = page_filter.get('start_from')
        logger.debug(
            "fetching page %d (startFrom=%s, maxItems=%s)",
            page_number, start_from, page_filter.get('max_items'),
        )
        page = fetch_page(page_filter)
        if not isinstance(page, dict):
            raise TransportError(f'Malformed list response: expected an object, got {type(page).__name__}')
        yield page

        next_id = page.get('nextId')
        if not next_id:
            return
        if next_id == start_from:
            raise TransportError(f'Server repeated cursor {next_id!r}; refusing to fetch the same page again')
        page_filter = {**page_filter, 'start_from': next_id}
        page_number += 1


def list_all(fetch_page: FetchPage, list_filter: Optional[ListFilterType], items_key: str) -> List[Any]:
    """Fetch every page and return the concatenated items in server order.

    Any failure aborts the whole listing; items from earlier pages are not
    returned. An empty collection yields an empty list.

    Args:
        fetch_page: Single-page list operation taking a list filter
        list_filter: Page size bound, starting cursor and name filter
        items_key: Key holding the items in each page, e.g. 'zones'

    Returns:
        All items across all pages
    """
    items: List[Any] = []
    for page in iter_pages(fetch_page, list_filter):
        items.extend(page_items(page, items_key))
    logger.debug("listed %d %s", len(items), items_key)
    return items
