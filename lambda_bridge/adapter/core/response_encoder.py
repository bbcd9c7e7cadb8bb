"""
Response encoder: httpx.Response -> API Gateway proxy result.
"""

import base64
import logging

import httpx

from ..models.aws_v1 import APIGatewayProxyResult
from .content_types import DEFAULT_POLICY, BodyEncodingPolicy
from .headers import partition_headers

logger = logging.getLogger("adapter.response_encoder")


async def read_body(response: httpx.Response) -> bytes:
    """
    Drain the response body exactly once.

    Streams are read raw so the bytes match any Content-Encoding header the
    application set. Responses built from in-memory content were already read
    (and content-decoded) by httpx, but keep their raw bytes in the ByteStream.
    """
    stream = response.stream
    if response.is_stream_consumed:
        if isinstance(stream, httpx.ByteStream):
            return b"".join(stream)
        return response.content
    if isinstance(stream, httpx.AsyncByteStream):
        return b"".join([chunk async for chunk in response.aiter_raw()])
    return b"".join(response.iter_raw())


async def create_gateway_result(
    response: httpx.Response, policy: BodyEncodingPolicy = DEFAULT_POLICY
) -> APIGatewayProxyResult:
    content_type = response.headers.get("Content-Type")
    is_base64_encoded = policy.is_binary(content_type)

    encoding = response.headers.encoding
    headers, multi_value_headers = partition_headers(
        (name.decode(encoding), value.decode(encoding)) for name, value in response.headers.raw
    )

    payload = await read_body(response)
    if is_base64_encoded:
        body = base64.b64encode(payload).decode("ascii")
    else:
        body = payload.decode(response.encoding or "utf-8", errors="replace")

    logger.debug(
        f"Encoded response {response.status_code}",
        extra={
            "content_type": content_type,
            "is_base64_encoded": is_base64_encoded,
            "body_bytes": len(payload),
        },
    )

    return APIGatewayProxyResult(
        statusCode=response.status_code,
        headers=headers,
        multiValueHeaders=multi_value_headers,
        body=body,
        isBase64Encoded=is_base64_encoded,
    )
