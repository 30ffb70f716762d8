"""
Sentry reporting for the translation API.

Enabled only when ``SENTRY_DSN`` is set; ``init_sentry()`` runs from the
app lifespan.
"""

import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from knowindia.config import Settings, get_settings
from knowindia.i18n.errors import ValidationError

logger = logging.getLogger(__name__)

# Request headers that carry credentials
SECRET_HEADERS = ("authorization", "cookie", "x-api-key")

# Polled endpoints that would drown real traffic
QUIET_TRANSACTIONS = ("/health", "/api/translate/stats")


def init_sentry(settings: Settings | None = None) -> bool:
    """Start the Sentry SDK. Returns False when no DSN is configured."""
    settings = settings or get_settings()

    if not settings.sentry_dsn:
        logger.info("SENTRY_DSN not set - error tracking disabled")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        # Upstream calls dominate latency; a tenth of them is enough in prod
        traces_sample_rate=0.1 if settings.is_production else 1.0,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            StarletteIntegration(transaction_style="endpoint"),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        # Texts sent for translation stay out of reports
        send_default_pii=False,
        before_send=filter_events,
        before_send_transaction=filter_transactions,
    )

    logger.info(f"Sentry initialized for {settings.environment}")
    return True


def filter_events(event: dict, hint: dict) -> dict | None:
    """Drop client-side validation failures and mask credential headers."""
    exc_info = hint.get("exc_info")
    if exc_info and isinstance(exc_info[1], ValidationError):
        return None

    headers = event.get("request", {}).get("headers")
    if headers:
        for name in list(headers):
            if name.lower() in SECRET_HEADERS:
                headers[name] = "[Filtered]"

    return event


def filter_transactions(event: dict, hint: dict) -> dict | None:
    if event.get("transaction", "") in QUIET_TRANSACTIONS:
        return None
    return event
