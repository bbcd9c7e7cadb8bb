"""
Request builder: API Gateway proxy event -> httpx.Request.
"""

import base64
import logging
from typing import Optional, Union

import httpx

from ..models.aws_v1 import APIGatewayProxyEvent
from .content_types import DEFAULT_POLICY, BodyEncodingPolicy
from .exceptions import MissingHostError
from .headers import create_headers, get_event_header
from .query import create_query_string

logger = logging.getLogger("adapter.request_builder")


def resolve_host(event: APIGatewayProxyEvent) -> str:
    """requestContext.domainName, then X-Forwarded-Host, then Host."""
    domain_name = event.requestContext.domainName if event.requestContext else None
    host = (
        domain_name
        or get_event_header(event, "X-Forwarded-Host")
        or get_event_header(event, "Host")
    )
    if not host:
        raise MissingHostError(event.path)
    return host


def resolve_scheme(event: APIGatewayProxyEvent) -> str:
    return get_event_header(event, "X-Forwarded-Proto") or "https"


def build_url(event: APIGatewayProxyEvent) -> httpx.URL:
    """
    Assemble scheme://host + path + query.

    The path is used verbatim; httpx.InvalidURL propagates for malformed input.
    """
    search = create_query_string(event.multiValueQueryStringParameters)
    return httpx.URL(f"{resolve_scheme(event)}://{resolve_host(event)}{event.path}{search}")


def decode_event_body(
    event: APIGatewayProxyEvent, policy: BodyEncodingPolicy = DEFAULT_POLICY
) -> Optional[Union[bytes, str]]:
    """
    Decode the event body.

    Returns None when there is no body, the body verbatim when it is not base64
    encoded, raw bytes for base64 multipart/form-data (boundaries preserved),
    and UTF-8 text for any other base64 body.
    """
    if event.body is None:
        return None

    if not event.isBase64Encoded:
        return event.body

    raw = base64.b64decode(event.body)
    if policy.is_form_data(get_event_header(event, "Content-Type")):
        return raw
    return raw.decode("utf-8", errors="replace")


def create_request(
    event: APIGatewayProxyEvent, policy: BodyEncodingPolicy = DEFAULT_POLICY
) -> httpx.Request:
    """
    Build the httpx.Request handed to the application.

    Headers come only from multiValueHeaders: the body is passed as an explicit
    stream so httpx does not add Host or Content-Length.
    """
    url = build_url(event)
    body = decode_event_body(event, policy)

    if body is None:
        content = b""
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = body

    request = httpx.Request(
        event.httpMethod,
        url,
        headers=create_headers(event.multiValueHeaders),
        stream=httpx.ByteStream(content),
    )
    request.read()
    # httpx upper-cases the method
    request.method = event.httpMethod

    logger.debug(
        f"Built request {request.method} {request.url}",
        extra={"body_bytes": len(content), "is_base64_encoded": event.isBase64Encoded},
    )
    return request
