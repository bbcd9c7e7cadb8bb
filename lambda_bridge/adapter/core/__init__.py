"""
Core logic package.

Provides the request/response translation between API Gateway and httpx.
"""

from .content_types import BodyEncodingPolicy
from .headers import create_headers, partition_headers
from .query import create_query_string
from .request_builder import create_request, decode_event_body
from .response_encoder import create_gateway_result

__all__ = [
    "BodyEncodingPolicy",
    "create_headers",
    "partition_headers",
    "create_query_string",
    "create_request",
    "decode_event_body",
    "create_gateway_result",
]
