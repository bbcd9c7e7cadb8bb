import logging

import httpx

from lambda_bridge.adapter.hooks import logging_debug_hook


def test_logging_hook_describes_request_and_response(caplog):
    caplog.set_level(logging.DEBUG, logger="adapter.debug")
    hook = logging_debug_hook()

    hook("request", httpx.Request("GET", "https://example.com/a", headers={"Accept": "*/*"}))
    hook("response", httpx.Response(404))

    request_record, response_record = caplog.records
    assert request_record.stage == "request"
    assert request_record.payload["method"] == "GET"
    assert request_record.payload["url"] == "https://example.com/a"
    assert ("accept", "*/*") in request_record.payload["headers"]
    assert response_record.payload["status_code"] == 404


def test_logging_hook_passes_raw_event_through(caplog):
    caplog.set_level(logging.DEBUG, logger="custom")
    hook = logging_debug_hook(logging.getLogger("custom"))

    hook("event", {"path": "/"})

    assert caplog.records[0].payload == {"path": "/"}


def test_logging_hook_is_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="adapter.debug")
    hook = logging_debug_hook()

    hook("event", {"path": "/"})

    assert caplog.records == []
