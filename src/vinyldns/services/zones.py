"""Zones service for the VinylDNS Python client."""

import logging
from typing import TYPE_CHECKING, List, Optional

from ..errors import ApiError, NotFoundError, TransportError
from ..types.changes import ZoneChangeType
from ..types.pagination import ListFilterType
from ..types.responses import (
    ZoneHistoryResponseType,
    ZonesListResponseType,
    ZoneUpdateResponseType,
)
from ..types.zone import ZoneType
from ..utils.pagination import list_all, page_items
from ..utils.validation import build_list_query

if TYPE_CHECKING:
    from ..http import HTTPClient

logger = logging.getLogger(__name__)


class ZonesService:
    """Service for zone operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize zones service.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    def zones_list(self, list_filter: Optional[ListFilterType] = None) -> ZonesListResponseType:
        """Fetch a single page of zones.

        Args:
            list_filter: Optional filter (max_items, start_from, name_filter)

        Returns:
            The page, including its nextId cursor when more zones exist
        """
        query_string = build_list_query(list_filter or {})
        url = f"/zones{f'?{query_string}' if query_string else ''}"
        return self.http_client.request(url, "GET")

    def zones(self, list_filter: Optional[ListFilterType] = None) -> List[ZoneType]:
        """List the zones on a single page."""
        return page_items(self.zones_list(list_filter), "zones")

    def zones_list_all(self, list_filter: Optional[ListFilterType] = None) -> List[ZoneType]:
        """List every zone, following nextId cursors across pages.

        Args:
            list_filter: Optional filter; max_items must be between 1 and 100

        Returns:
            All zones in the order the server returned them
        """
        return list_all(self.zones_list, list_filter, "zones")

    def zone(self, zone_id: str) -> ZoneType:
        """Retrieve a zone by id."""
        encoded_id = self.http_client.encode_url_component(zone_id)
        response = self.http_client.request(f"/zones/{encoded_id}", "GET")
        if not isinstance(response, dict) or "zone" not in response:
            raise TransportError(f'Malformed response for zone {zone_id}')
        return response["zone"]

    def zone_create(self, zone: ZoneType) -> ZoneUpdateResponseType:
        """Create a zone.

        Args:
            zone: Zone payload; name, email and adminGroupId are required

        Returns:
            The queued zone change
        """
        return self.http_client.request("/zones", "POST", zone)

    def zone_update(self, zone_id: str, zone: ZoneType) -> ZoneUpdateResponseType:
        """Update a zone."""
        encoded_id = self.http_client.encode_url_component(zone_id)
        return self.http_client.request(f"/zones/{encoded_id}", "PUT", zone)

    def zone_delete(self, zone_id: str) -> ZoneUpdateResponseType:
        """Delete a zone."""
        encoded_id = self.http_client.encode_url_component(zone_id)
        return self.http_client.request(f"/zones/{encoded_id}", "DELETE")

    def zone_exists(self, zone_id: str) -> bool:
        """Report whether a zone exists.

        Only a 404 means the zone does not exist; other failures are raised.
        """
        encoded_id = self.http_client.encode_url_component(zone_id)
        try:
            self.http_client.request(f"/zones/{encoded_id}", "GET")
        except ApiError as e:
            if e.status_code == 404:
                logger.debug("zone %s not found", zone_id)
                return False
            raise
        return True

    def zone_history(self, zone_id: str) -> ZoneHistoryResponseType:
        """Retrieve the zone and record set change history of a zone."""
        encoded_id = self.http_client.encode_url_component(zone_id)
        return self.http_client.request(f"/zones/{encoded_id}/history", "GET")

    def zone_change(self, zone_id: str, change_id: str) -> ZoneChangeType:
        """Find a zone change by id in the zone's history.

        Raises:
            NotFoundError: If the history holds no change with that id
        """
        history = self.zone_history(zone_id)
        if not isinstance(history, dict):
            raise TransportError(f'Malformed history response for zone {zone_id}')
        for change in history.get("zoneChanges") or []:
            if change.get("id") == change_id:
                return change
        raise NotFoundError(f'zone change {change_id} not found in zone {zone_id}')
