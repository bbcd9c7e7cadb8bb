"""
Injectable observability hook for the invocation pipeline.

A hook receives a stage name ("event", "request" or "response") and the object
seen at that stage. Nothing is attached unless the caller passes a hook.
"""

import logging
from typing import Any, Callable, Optional

import httpx

DebugHook = Callable[[str, Any], None]


def _describe(payload: Any) -> Any:
    if isinstance(payload, httpx.Request):
        return {
            "method": payload.method,
            "url": str(payload.url),
            "headers": payload.headers.multi_items(),
        }
    if isinstance(payload, httpx.Response):
        return {"status_code": payload.status_code, "headers": payload.headers.multi_items()}
    return payload


def logging_debug_hook(logger: Optional[logging.Logger] = None) -> DebugHook:
    """Return a hook that logs every stage at DEBUG level."""
    target = logger or logging.getLogger("adapter.debug")

    def hook(stage: str, payload: Any) -> None:
        if target.isEnabledFor(logging.DEBUG):
            target.debug(stage, extra={"stage": stage, "payload": _describe(payload)})

    return hook
