from typing import Dict, Any
from urllib.parse import urlencode

from ..errors import ValidationError

MIN_MAX_ITEMS = 1
MAX_MAX_ITEMS = 100


def validate_list_filter(list_filter: Dict[str, Any]) -> None:
    """Validate that max_items, when given, is an integer between 1 and 100."""
    max_items = list_filter.get('max_items')
    if max_items is None:
        return
    if isinstance(max_items, bool) or not isinstance(max_items, int):
        raise ValidationError(f'max_items must be an integer; got {max_items!r}')
    if not MIN_MAX_ITEMS <= max_items <= MAX_MAX_ITEMS:
        raise ValidationError(
            f'max_items must be between {MIN_MAX_ITEMS} and {MAX_MAX_ITEMS}; got {max_items}'
        )


def build_list_query(list_filter: Dict[str, Any]) -> str:
    """Validate a list filter and render it as a query string (without '?')."""
    validate_list_filter(list_filter)

    qs_params = {}
    if list_filter.get('name_filter'):
        qs_params['nameFilter'] = list_filter['name_filter']
    if list_filter.get('start_from'):
        qs_params['startFrom'] = list_filter['start_from']
    if list_filter.get('max_items') is not None:
        qs_params['maxItems'] = str(list_filter['max_items'])

    return urlencode(qs_params)
