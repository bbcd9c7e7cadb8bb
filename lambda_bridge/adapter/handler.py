"""
API Gateway adapter - invocation orchestrator

Standardizes the flow: API Gateway event -> httpx.Request -> application
-> httpx.Response -> API Gateway proxy result.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
from pydantic import ValidationError

from lambda_bridge.common.core.lambda_logging import flush_logs
from lambda_bridge.common.core.request_context import bind_request_context

from .config import AdapterConfig
from .core.content_types import DEFAULT_POLICY, BodyEncodingPolicy
from .core.exceptions import UnsupportedResponseError
from .core.headers import get_event_header
from .core.logging_config import setup_logging
from .core.request_builder import create_request
from .core.response_encoder import create_gateway_result
from .hooks import DebugHook, logging_debug_hook
from .models.aws_v1 import APIGatewayProxyEvent

logger = logging.getLogger("adapter.handler")

# (request, load_context, mode) -> response
AppHandler = Callable[[httpx.Request, Any, Optional[str]], Awaitable[httpx.Response]]
GetLoadContextFunction = Callable[[Dict[str, Any]], Any]


class LambdaRequestHandler:
    """
    Runs one application request per API Gateway invocation.

    Per-invocation state stays local to handle(). Failures are logged and
    re-raised to the Lambda runtime.
    """

    def __init__(
        self,
        app: AppHandler,
        *,
        get_load_context: Optional[GetLoadContextFunction] = None,
        mode: Optional[str] = None,
        policy: BodyEncodingPolicy = DEFAULT_POLICY,
        debug_hook: Optional[DebugHook] = None,
    ):
        self.app = app
        self.get_load_context = get_load_context
        self.mode = mode
        self.policy = policy
        self.debug_hook = debug_hook

    @classmethod
    def from_config(
        cls,
        app: AppHandler,
        config: AdapterConfig,
        get_load_context: Optional[GetLoadContextFunction] = None,
    ) -> "LambdaRequestHandler":
        return cls(
            app,
            get_load_context=get_load_context,
            mode=config.APP_MODE,
            policy=config.body_policy(),
            debug_hook=logging_debug_hook() if config.DEBUG_PAYLOAD_LOGGING else None,
        )

    async def __call__(self, event: Dict[str, Any], lambda_context: Any = None) -> Dict[str, Any]:
        return await self.handle(event)

    async def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process one API Gateway event and return the proxy result as a dict.
        """
        self._debug("event", event)

        try:
            gateway_event = APIGatewayProxyEvent.model_validate(event)
        except ValidationError:
            logger.exception("Rejected malformed API Gateway event")
            raise

        request_context = gateway_event.requestContext
        request_id = request_context.requestId if request_context else None
        trace_header = get_event_header(gateway_event, "X-Amzn-Trace-Id")

        with bind_request_context(request_id, trace_header):
            try:
                return await self._invoke(event, gateway_event)
            except Exception:
                logger.exception(
                    f"Invocation failed for {gateway_event.httpMethod} {gateway_event.path}"
                )
                raise

    async def _invoke(
        self, event: Dict[str, Any], gateway_event: APIGatewayProxyEvent
    ) -> Dict[str, Any]:
        # 1. Build request
        request = create_request(gateway_event, self.policy)
        self._debug("request", request)

        # 2. Application context
        load_context = self.get_load_context(event) if self.get_load_context else None

        # 3. Invoke application
        logger.info(f"Handling {request.method} {gateway_event.path}")
        response = await self.app(request, load_context, self.mode)
        if not isinstance(response, httpx.Response):
            raise UnsupportedResponseError(response)
        self._debug("response", response)

        # 4. Encode result
        result = await create_gateway_result(response, self.policy)
        logger.info(
            f"Completed {request.method} {gateway_event.path}",
            extra={"status_code": result.statusCode, "is_base64_encoded": result.isBase64Encoded},
        )
        return result.model_dump()

    @flush_logs
    def lambda_handler(self, event: Dict[str, Any], lambda_context: Any = None) -> Dict[str, Any]:
        """Synchronous entrypoint for the Lambda Python runtime."""
        return asyncio.run(self.handle(event))

    def _debug(self, stage: str, payload: Any) -> None:
        if self.debug_hook is not None:
            self.debug_hook(stage, payload)


def create_request_handler(
    app: AppHandler,
    *,
    get_load_context: Optional[GetLoadContextFunction] = None,
    mode: Optional[str] = None,
    policy: BodyEncodingPolicy = DEFAULT_POLICY,
    debug_hook: Optional[DebugHook] = None,
) -> LambdaRequestHandler:
    """Create the async handler: await handler(event) -> API Gateway result."""
    return LambdaRequestHandler(
        app,
        get_load_context=get_load_context,
        mode=mode,
        policy=policy,
        debug_hook=debug_hook,
    )


def create_lambda_handler(
    app: AppHandler,
    config: Optional[AdapterConfig] = None,
    *,
    get_load_context: Optional[GetLoadContextFunction] = None,
) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """
    Set up logging once and return the synchronous Lambda entrypoint.

    Usage (module level of the deployed function):
        handler = create_lambda_handler(app)
    """
    config = config or AdapterConfig()
    setup_logging(config.LOG_CONFIG_PATH or None)
    logging.getLogger("adapter").setLevel(config.LOG_LEVEL)

    request_handler = LambdaRequestHandler.from_config(app, config, get_load_context)
    logger.info(f"Lambda handler ready (mode={config.APP_MODE})")
    return request_handler.lambda_handler
