"""
Custom exception classes.

Represent errors raised by the adapter itself. Failures from pydantic, httpx and
the application handler are not wrapped and propagate as raised.
"""


class AdapterError(Exception):
    """Base exception class for the API Gateway adapter."""

    pass


class InvalidEventError(AdapterError):
    """Raised when a gateway event cannot be turned into an HTTP request."""

    pass


class MissingHostError(InvalidEventError):
    """Raised when neither requestContext.domainName nor a host header is present."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Cannot resolve host for {path!r}: "
            "requestContext.domainName, X-Forwarded-Host and Host are all missing"
        )


class UnsupportedResponseError(AdapterError):
    """Raised when the application handler returns something other than an httpx.Response."""

    def __init__(self, response: object):
        self.response = response
        super().__init__(
            f"Application handler must return httpx.Response, got {type(response).__name__}"
        )
