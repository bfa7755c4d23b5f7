"""Services module for the VinylDNS Python client."""

from .zones import ZonesService
from .recordsets import RecordSetsService

__all__ = ["ZonesService", "RecordSetsService"]
