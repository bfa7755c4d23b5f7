from typing import List, NotRequired, TypedDict


class ZoneConnectionType(TypedDict):
    name: str
    keyName: str
    key: str
    primaryServer: str


class ACLRuleType(TypedDict, total=False):
    accessLevel: str  # 'NoAccess' | 'Read' | 'Write' | 'Delete'
    description: str
    userId: str
    groupId: str
    recordMask: str
    recordTypes: List[str]


class ZoneACLType(TypedDict):
    rules: List[ACLRuleType]


class ZoneType(TypedDict):
    name: str
    email: str
    adminGroupId: str
    id: NotRequired[str]
    status: NotRequired[str]
    created: NotRequired[str]
    updated: NotRequired[str]
    latestSync: NotRequired[str]
    account: NotRequired[str]
    shared: NotRequired[bool]
    connection: NotRequired[ZoneConnectionType]
    transferConnection: NotRequired[ZoneConnectionType]
    acl: NotRequired[ZoneACLType]
