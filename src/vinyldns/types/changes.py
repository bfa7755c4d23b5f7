from typing import List, NotRequired, TypedDict

from .recordset import RecordSetType
from .zone import ZoneType


class ZoneChangeType(TypedDict):
    zone: ZoneType
    userId: str
    changeType: str  # 'Create' | 'Update' | 'Delete' | 'Sync'
    status: str  # 'Pending' | 'Complete' | 'Failed' | 'Synced'
    created: str
    id: str


class RecordSetChangeType(TypedDict):
    zone: ZoneType
    recordSet: RecordSetType
    userId: str
    changeType: str
    status: str
    created: str
    id: str
    updates: NotRequired[RecordSetType]


class ZoneHistoryType(TypedDict):
    zoneId: str
    zoneChanges: List[ZoneChangeType]
    recordSetChanges: List[RecordSetChangeType]
