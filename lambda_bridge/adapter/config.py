"""
Adapter configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults. Only the Lambda entrypoint
factory reads it; LambdaRequestHandler receives plain values.
"""

from typing import List

from pydantic import Field

from lambda_bridge.common.core.config import BaseAppConfig

from .core.content_types import (
    DEFAULT_FORM_DATA_PREFIX,
    DEFAULT_TEXT_MARKERS,
    DEFAULT_TEXT_PREFIXES,
    BodyEncodingPolicy,
)


class AdapterConfig(BaseAppConfig):
    """
    Configuration management for the API Gateway adapter.
    """

    APP_MODE: str = Field(
        default="production", description="Execution mode passed through to the application"
    )
    DEBUG_PAYLOAD_LOGGING: bool = Field(
        default=False, description="Log raw event, request and response at DEBUG level"
    )

    # Body encoding policy (JSON lists in the environment)
    TEXT_CONTENT_TYPE_PREFIXES: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TEXT_PREFIXES),
        description="Content types starting with one of these are text",
    )
    TEXT_CONTENT_TYPE_MARKERS: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TEXT_MARKERS),
        description="Content types containing one of these are text",
    )
    FORM_DATA_CONTENT_TYPE: str = Field(
        default=DEFAULT_FORM_DATA_PREFIX,
        description="Request content type prefix whose base64 body stays binary",
    )

    def body_policy(self) -> BodyEncodingPolicy:
        return BodyEncodingPolicy(
            text_prefixes=tuple(self.TEXT_CONTENT_TYPE_PREFIXES),
            text_markers=tuple(self.TEXT_CONTENT_TYPE_MARKERS),
            form_data_prefix=self.FORM_DATA_CONTENT_TYPE,
        )
