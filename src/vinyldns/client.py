"""
VinylDNS Python client.

Synchronous client for the VinylDNS REST API: zones, record sets and
change history.
"""

from typing import List, Mapping, Optional

from .config import options_from_env
from .http import HTTPClient
from .services.recordsets import RecordSetsService
from .services.zones import ZonesService
from .types import (
    ClientOptionsType,
    ListFilterType,
    RecordSetType,
    RecordSetsListResponseType,
    ZoneChangeType,
    ZoneHistoryResponseType,
    ZonesListResponseType,
    ZoneType,
    ZoneUpdateResponseType,
)


class VinylDNSClient:
    """VinylDNS API client.

    All methods are synchronous and issue one request each, except the
    ``*_list_all`` methods which issue one request per page.
    """

    def __init__(self, opts: Optional[ClientOptionsType] = None):
        """Initialize VinylDNS client.

        Args:
            opts: Client configuration including baseUrl, apiKey, timeout and userAgent
        """
        if opts is None:
            opts = {}

        self.http = HTTPClient(opts)
        self.zones_service = ZonesService(self.http)
        self.record_sets_service = RecordSetsService(self.http)

        self.base_url = self.http.base_url
        self.api_key = self.http.api_key

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VinylDNSClient":
        """Create a client configured from VINYLDNS_* environment variables."""
        return cls(options_from_env(environ))

    # Zone operations
    def zones(self, list_filter: Optional[ListFilterType] = None) -> List[ZoneType]:
        """List zones on a single page."""
        return self.zones_service.zones(list_filter)

    def zones_list(self, list_filter: Optional[ListFilterType] = None) -> ZonesListResponseType:
        """Fetch a single page of zones with its pagination fields."""
        return self.zones_service.zones_list(list_filter)

    def zones_list_all(self, list_filter: Optional[ListFilterType] = None) -> List[ZoneType]:
        """List every zone across all pages.

        Args:
            list_filter: Optional filter; max_items must be between 1 and 100

        Returns:
            All zones, in server order; empty list when there are none

        Raises:
            ValidationError: If max_items is out of range (no request is sent)
            TransportError: If any page fetch fails (no partial result)
        """
        return self.zones_service.zones_list_all(list_filter)

    def zone(self, zone_id: str) -> ZoneType:
        """Get a specific zone."""
        return self.zones_service.zone(zone_id)

    def zone_create(self, zone: ZoneType) -> ZoneUpdateResponseType:
        """Create a zone."""
        return self.zones_service.zone_create(zone)

    def zone_update(self, zone_id: str, zone: ZoneType) -> ZoneUpdateResponseType:
        """Update a zone."""
        return self.zones_service.zone_update(zone_id, zone)

    def zone_delete(self, zone_id: str) -> ZoneUpdateResponseType:
        """Delete a zone."""
        return self.zones_service.zone_delete(zone_id)

    def zone_exists(self, zone_id: str) -> bool:
        """Check whether a zone exists."""
        return self.zones_service.zone_exists(zone_id)

    def zone_history(self, zone_id: str) -> ZoneHistoryResponseType:
        """Get the change history of a zone."""
        return self.zones_service.zone_history(zone_id)

    def zone_change(self, zone_id: str, change_id: str) -> ZoneChangeType:
        """Get a specific zone change from the zone's history."""
        return self.zones_service.zone_change(zone_id, change_id)

    # Record set operations
    def record_sets(self, zone_id: str, list_filter: Optional[ListFilterType] = None) -> List[RecordSetType]:
        """List record sets in a zone on a single page."""
        return self.record_sets_service.record_sets(zone_id, list_filter)

    def record_sets_list(
        self,
        zone_id: str,
        list_filter: Optional[ListFilterType] = None,
    ) -> RecordSetsListResponseType:
        """Fetch a single page of record sets with its pagination fields."""
        return self.record_sets_service.record_sets_list(zone_id, list_filter)

    def record_sets_list_all(
        self,
        zone_id: str,
        list_filter: Optional[ListFilterType] = None,
    ) -> List[RecordSetType]:
        """List every record set in a zone across all pages."""
        return self.record_sets_service.record_sets_list_all(zone_id, list_filter)

    def record_set(self, zone_id: str, record_set_id: str) -> RecordSetType:
        """Get a specific record set."""
        return self.record_sets_service.record_set(zone_id, record_set_id)
