from typing import List

from .changes import ZoneChangeType, ZoneHistoryType
from .pagination import PageType
from .recordset import RecordSetType
from .zone import ZoneType


class ZonesListResponseType(PageType):
    zones: List[ZoneType]


class RecordSetsListResponseType(PageType):
    recordSets: List[RecordSetType]


# Create/Update/Delete all answer with the queued zone change
ZoneUpdateResponseType = ZoneChangeType

ZoneHistoryResponseType = ZoneHistoryType
