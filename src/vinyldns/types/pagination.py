from typing import Optional, TypedDict


class ListFilterType(TypedDict, total=False):
    max_items: Optional[int]  # 1-100 (client enforced); omitted lets the server choose
    start_from: Optional[str]  # continuation cursor from a previous page's nextId
    name_filter: Optional[str]


class PageType(TypedDict, total=False):
    startFrom: str
    nextId: str  # absent on the last page
    maxItems: int
    nameFilter: str
