# lambda_bridge/adapter/models/aws_v1.py

"""
Pydantic models for AWS API Gateway v1 (REST API) proxy integration payloads.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format

APIGatewayProxyEvent is the invocation payload received by the Lambda function,
APIGatewayProxyResult is the payload handed back to API Gateway.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ApiGatewayRequestContext(BaseModel):
    """API Gateway Request Context object (only the fields the adapter reads)."""

    domainName: Optional[str] = None
    requestId: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class APIGatewayProxyEvent(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) Event Structure

    Only httpMethod and path are required. Header and query maps may be null,
    and a multi-value map may carry null for an individual key.
    Key spelling and iteration order are kept as received.
    """

    httpMethod: str
    path: str
    headers: Optional[Dict[str, Optional[str]]] = None
    multiValueHeaders: Optional[Dict[str, Optional[List[str]]]] = None
    queryStringParameters: Optional[Dict[str, Optional[str]]] = None
    multiValueQueryStringParameters: Optional[Dict[str, Optional[List[str]]]] = None
    requestContext: Optional[ApiGatewayRequestContext] = None
    body: Optional[str] = None
    isBase64Encoded: bool = False

    model_config = ConfigDict(extra="allow")


class APIGatewayProxyResult(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) Result Structure

    Use model_dump() to convert to the dict returned from the Lambda handler.
    """

    statusCode: int
    headers: Dict[str, str] = Field(default_factory=dict)
    multiValueHeaders: Dict[str, List[str]] = Field(default_factory=dict)
    body: str = ""
    isBase64Encoded: bool = False
