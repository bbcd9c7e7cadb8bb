import base64
from typing import Any, Dict, Optional

import pytest

from lambda_bridge.common.core import request_context


@pytest.fixture(autouse=True)
def _clear_request_context():
    request_context.clear_request_context()
    yield
    request_context.clear_request_context()


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def make_event(
    *,
    method: str = "GET",
    path: str = "/",
    headers: Optional[Dict[str, str]] = None,
    multi_headers: Optional[Dict[str, Any]] = None,
    multi_query: Optional[Dict[str, Any]] = None,
    body: Optional[str] = None,
    is_base64: bool = False,
    domain_name: Optional[str] = "example.com",
    request_id: Optional[str] = "req-123",
) -> Dict[str, Any]:
    """Build a raw API Gateway v1 proxy event dict."""
    headers = dict(headers or {})
    if multi_headers is None:
        multi_headers = {name: [value] for name, value in headers.items()}

    request_ctx: Dict[str, Any] = {"stage": "prod"}
    if domain_name is not None:
        request_ctx["domainName"] = domain_name
    if request_id is not None:
        request_ctx["requestId"] = request_id

    return {
        "resource": "/{proxy+}",
        "httpMethod": method,
        "path": path,
        "headers": headers,
        "multiValueHeaders": multi_headers,
        "queryStringParameters": None,
        "multiValueQueryStringParameters": multi_query,
        "requestContext": request_ctx,
        "body": body,
        "isBase64Encoded": is_base64,
    }


@pytest.fixture
def event_factory():
    return make_event
