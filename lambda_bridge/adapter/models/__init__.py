"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import APIGatewayProxyEvent, APIGatewayProxyResult, ApiGatewayRequestContext

__all__ = [
    "APIGatewayProxyEvent",
    "APIGatewayProxyResult",
    "ApiGatewayRequestContext",
]
