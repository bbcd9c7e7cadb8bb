"""
Query string normalization for API Gateway multi-value query parameters.
"""

import urllib.parse
from typing import List, Mapping, Optional, Sequence, Tuple


def create_query_string(
    multi_value_params: Optional[Mapping[str, Optional[Sequence[str]]]],
) -> str:
    """
    Build a percent-encoded query string from multiValueQueryStringParameters.

    Pairs are emitted in mapping order, values in sequence order. Keys with a null
    or empty value sequence contribute nothing. The result carries a leading "?"
    only when at least one pair was emitted; otherwise it is "".
    """
    if multi_value_params is None:
        return ""

    pairs: List[Tuple[str, str]] = []
    for param, values in multi_value_params.items():
        if not values:
            continue
        for value in values:
            pairs.append((param, value))

    encoded = urllib.parse.urlencode(pairs)
    return f"?{encoded}" if encoded else ""
