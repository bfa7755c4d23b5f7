# Export all types
from .common import ClientOptionsType
from .zone import ZoneType, ZoneConnectionType, ZoneACLType, ACLRuleType
from .recordset import RecordSetType
from .changes import ZoneChangeType, RecordSetChangeType, ZoneHistoryType
from .pagination import ListFilterType, PageType
from .responses import (
    ZonesListResponseType, RecordSetsListResponseType,
    ZoneUpdateResponseType, ZoneHistoryResponseType
)
