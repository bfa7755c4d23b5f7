"""Record sets service for the VinylDNS Python client."""

from typing import TYPE_CHECKING, List, Optional

from ..errors import TransportError
from ..types.pagination import ListFilterType
from ..types.recordset import RecordSetType
from ..types.responses import RecordSetsListResponseType
from ..utils.pagination import list_all, page_items
from ..utils.validation import build_list_query

if TYPE_CHECKING:
    from ..http import HTTPClient


class RecordSetsService:
    """Service for record set operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    def record_sets_list(
        self,
        zone_id: str,
        list_filter: Optional[ListFilterType] = None,
    ) -> RecordSetsListResponseType:
        """Fetch a single page of record sets in a zone.

        Args:
            zone_id: Zone id
            list_filter: Optional filter (max_items, start_from, name_filter)

        Returns:
            The page, including its nextId cursor when more record sets exist
        """
        query_string = build_list_query(list_filter or {})
        encoded_id = self.http_client.encode_url_component(zone_id)
        url = f"/zones/{encoded_id}/recordsets{f'?{query_string}' if query_string else ''}"
        return self.http_client.request(url, "GET")

    def record_sets(self, zone_id: str, list_filter: Optional[ListFilterType] = None) -> List[RecordSetType]:
        """List the record sets on a single page."""
        return page_items(self.record_sets_list(zone_id, list_filter), "recordSets")

    def record_sets_list_all(
        self,
        zone_id: str,
        list_filter: Optional[ListFilterType] = None,
    ) -> List[RecordSetType]:
        """List every record set in a zone, following nextId cursors."""
        return list_all(
            lambda page_filter: self.record_sets_list(zone_id, page_filter),
            list_filter,
            "recordSets",
        )

    def record_set(self, zone_id: str, record_set_id: str) -> RecordSetType:
        """Retrieve a record set by id."""
        encoded_zone_id = self.http_client.encode_url_component(zone_id)
        encoded_rs_id = self.http_client.encode_url_component(record_set_id)
        response = self.http_client.request(f"/zones/{encoded_zone_id}/recordsets/{encoded_rs_id}", "GET")
        if not isinstance(response, dict) or "recordSet" not in response:
            raise TransportError(f'Malformed response for record set {record_set_id}')
        return response["recordSet"]
