from typing import Any, Dict, List, NotRequired, TypedDict


class RecordSetType(TypedDict):
    zoneId: str
    name: str
    type: str  # 'A' | 'AAAA' | 'CNAME' | 'MX' | 'NS' | 'PTR' | 'SOA' | 'SRV' | 'TXT' ...
    ttl: int
    records: List[Dict[str, Any]]  # record data, e.g. {"address": "127.0.0.1"}
    id: NotRequired[str]
    status: NotRequired[str]
    created: NotRequired[str]
    updated: NotRequired[str]
    account: NotRequired[str]
