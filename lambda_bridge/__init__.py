"""
lambda_bridge - run an async httpx-speaking application behind API Gateway and Lambda.
"""

from .adapter import LambdaRequestHandler, create_lambda_handler, create_request_handler
from .adapter.config import AdapterConfig
from .adapter.core.content_types import BodyEncodingPolicy
from .adapter.hooks import logging_debug_hook

__all__ = [
    "AdapterConfig",
    "BodyEncodingPolicy",
    "LambdaRequestHandler",
    "create_lambda_handler",
    "create_request_handler",
    "logging_debug_hook",
]
