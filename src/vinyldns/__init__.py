"""
VinylDNS Python client

Typed, synchronous access to the VinylDNS REST API.
- Zones: list (single page or all pages), get, create, update, delete
- Record sets: list (single page or all pages), get
- Zone and record set change history
"""

from .client import VinylDNSClient
from .config import options_from_env
from .errors import (
    VinylDNSError,
    TransportError,
    ApiError,
    NetworkError,
    ValidationError,
    NotFoundError,
)
from .types import (
    ClientOptionsType,
    ZoneType,
    ZoneConnectionType,
    ZoneACLType,
    ACLRuleType,
    RecordSetType,
    ZoneChangeType,
    RecordSetChangeType,
    ZoneHistoryType,
    ListFilterType,
    PageType,
    ZonesListResponseType,
    RecordSetsListResponseType,
    ZoneUpdateResponseType,
    ZoneHistoryResponseType,
)
from .utils.pagination import iter_pages, list_all

__version__ = "0.1.0"

__all__ = [
    # Main client
    "VinylDNSClient",
    "options_from_env",

    # Pagination
    "iter_pages",
    "list_all",

    # Errors
    "VinylDNSError",
    "TransportError",
    "ApiError",
    "NetworkError",
    "ValidationError",
    "NotFoundError",

    # Types
    "ClientOptionsType",
    "ZoneType",
    "ZoneConnectionType",
    "ZoneACLType",
    "ACLRuleType",
    "RecordSetType",
    "ZoneChangeType",
    "RecordSetChangeType",
    "ZoneHistoryType",
    "ListFilterType",
    "PageType",
    "ZonesListResponseType",
    "RecordSetsListResponseType",
    "ZoneUpdateResponseType",
    "ZoneHistoryResponseType",
]
