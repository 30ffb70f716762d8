"""Tests for the Sentry event filters."""

from knowindia.i18n.errors import UnsupportedLanguage, UpstreamError
from knowindia.integrations.sentry import filter_events, filter_transactions, init_sentry


class TestFilterEvents:
    def test_drops_validation_errors(self):
        exc = UnsupportedLanguage("xx")
        assert filter_events({}, {"exc_info": (type(exc), exc, None)}) is None

    def test_keeps_upstream_errors(self):
        exc = UpstreamError(500, "boom")
        event = {"message": "boom"}
        assert filter_events(event, {"exc_info": (type(exc), exc, None)}) is event

    def test_masks_credential_headers(self):
        event = {
            "request": {
                "headers": {"Authorization": "Bearer hf_secret", "Accept": "application/json"},
            },
        }

        filtered = filter_events(event, {})

        assert filtered["request"]["headers"] == {
            "Authorization": "[Filtered]",
            "Accept": "application/json",
        }


class TestFilterTransactions:
    def test_drops_polled_endpoints(self):
        assert filter_transactions({"transaction": "/health"}, {}) is None
        assert filter_transactions({"transaction": "/api/translate/stats"}, {}) is None

    def test_keeps_translation_requests(self):
        event = {"transaction": "/api/translate"}
        assert filter_transactions(event, {}) is event


def test_init_is_skipped_without_dsn(settings):
    assert init_sentry(settings) is False
