"""Tests for API request logger."""

import logging

import pytest

from trans_planner.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given TRANS_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("TRANS_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given TRANS_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("TRANS_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given TRANS_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("TRANS_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_disabled_then_nothing_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        monkeypatch.delenv("TRANS_LOG_REQUESTS", raising=False)

        with caplog.at_level(logging.INFO):
            log_api_request("GET", "https://example.org/locations", params={"query": "x"})

        assert caplog.records == []

    def test_when_enabled_then_url_with_sorted_params_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging enabled, when logging a request, then the full URL is logged."""
        monkeypatch.setenv("TRANS_LOG_REQUESTS", "true")

        with caplog.at_level(logging.INFO):
            log_api_request(
                "GET",
                "https://example.org/locations",
                params={"results": "5", "query": "Berlin"},
            )

        assert "GET https://example.org/locations?query=Berlin&results=5" in caplog.text

    def test_when_enabled_then_sensitive_headers_are_redacted(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given an authorization header, when logging, then its value is redacted."""
        monkeypatch.setenv("TRANS_LOG_REQUESTS", "true")

        with caplog.at_level(logging.INFO):
            log_api_request(
                "GET",
                "https://example.org/journeys",
                headers={"Authorization": "Bearer secret", "Accept": "application/json"},
            )

        assert "secret" not in caplog.text
        assert "***REDACTED***" in caplog.text
        assert "application/json" in caplog.text
