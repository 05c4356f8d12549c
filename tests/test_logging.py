"""Tests for request log context helpers."""

import structlog

from quicklearn.core.logging import bind_request_context, clear_request_context


class TestRequestContext:
    """Context bound per request and merged into every log line."""

    def teardown_method(self):
        clear_request_context()

    def test_bind_with_user(self):
        bind_request_context("POST", "/api/courses", 1)
        assert structlog.contextvars.get_contextvars() == {
            "method": "POST",
            "path": "/api/courses",
            "user_id": 1,
        }

    def test_bind_replaces_previous_request(self):
        bind_request_context("POST", "/api/courses", 1)
        bind_request_context("GET", "/ping")
        assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/ping"}

    def test_clear(self):
        bind_request_context("GET", "/health", 1)
        clear_request_context()
        assert structlog.contextvars.get_contextvars() == {}
