"""
RequestContext management.
Use ContextVar to share the invocation's request and trace ids with the log formatter.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from .trace import TraceId


# Context variable for Trace ID (full header format).
_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)
# Context variable for Request ID.
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_trace_id() -> Optional[str]:
    """Get the current Trace ID."""
    return _trace_id_var.get()


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def clear_request_context() -> None:
    """Clear both the Trace ID and the Request ID."""
    _trace_id_var.set(None)
    _request_id_var.set(None)


@contextmanager
def bind_request_context(
    request_id: Optional[str], trace_header: Optional[str] = None
) -> Iterator[str]:
    """
    Bind ids for the duration of one invocation and restore the previous values on exit.

    A missing request id is replaced by a generated UUID.
    """
    request_token = _request_id_var.set(request_id or str(uuid.uuid4()))
    trace_token = _trace_id_var.set(str(TraceId.parse(trace_header)) if trace_header else None)
    try:
        yield _request_id_var.get()
    finally:
        _trace_id_var.reset(trace_token)
        _request_id_var.reset(request_token)
