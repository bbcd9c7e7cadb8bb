"""
API Gateway (REST API, v1 proxy integration) adapter.
"""

from .handler import LambdaRequestHandler, create_lambda_handler, create_request_handler

__all__ = [
    "LambdaRequestHandler",
    "create_lambda_handler",
    "create_request_handler",
]
