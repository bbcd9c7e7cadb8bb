"""
Header helpers shared by the request builder and the response encoder.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import httpx

from ..models.aws_v1 import APIGatewayProxyEvent


def create_headers(
    multi_value_headers: Optional[Mapping[str, Optional[Sequence[str]]]],
) -> httpx.Headers:
    """
    Build an httpx.Headers multimap from multiValueHeaders.

    Every value is appended under its key in order; duplicates are kept and
    keys with a null or empty value sequence are skipped.
    """
    pairs: List[Tuple[str, str]] = []

    if multi_value_headers:
        for name, values in multi_value_headers.items():
            if not values:
                continue
            for value in values:
                pairs.append((name, value))

    return httpx.Headers(pairs)


def get_event_header(event: APIGatewayProxyEvent, name: str) -> Optional[str]:
    """
    Look up a single header value by exact key.

    The legacy single-value map wins; otherwise the last value of the key in
    multiValueHeaders is used. Empty strings count as absent.
    """
    if event.headers:
        value = event.headers.get(name)
        if value:
            return value

    if event.multiValueHeaders:
        values = event.multiValueHeaders.get(name)
        if values and values[-1]:
            return values[-1]

    return None


def partition_headers(
    pairs: Iterable[Tuple[str, str]],
) -> Tuple[Dict[str, str], Dict[str, List[str]]]:
    """
    Split response header pairs into API Gateway headers / multiValueHeaders.

    Pairs are grouped by name compared case-insensitively, the first spelling seen
    naming the group. A name seen once goes to the single-value map, a name seen
    more than once goes to the multi-value map with all of its values in order.
    """
    grouped: Dict[str, List[str]] = {}
    spelling: Dict[str, str] = {}

    for name, value in pairs:
        key = spelling.setdefault(name.lower(), name)
        grouped.setdefault(key, []).append(value)

    headers = {name: values[0] for name, values in grouped.items() if len(values) == 1}
    multi_value_headers = {name: values for name, values in grouped.items() if len(values) > 1}
    return headers, multi_value_headers
