"""
Lambda Logging Utilities

Ensures logs are flushed before the Lambda execution context freezes.
"""

import functools
import logging


def flush_logs(func):
    """
    Decorator for synchronous Lambda handlers: flush all root log handlers in a finally block.

    Usage:
        @flush_logs
        def lambda_handler(event, context):
            return {"statusCode": 200}
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        finally:
            for h in logging.getLogger().handlers:
                h.flush()

    return wrapper
