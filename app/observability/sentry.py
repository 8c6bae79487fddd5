# File: app/observability/sentry.py | Version: 1.1 | Title: Optional Sentry initialization
import logging
import os

log = logging.getLogger(__name__)


def init_sentry_if_configured() -> bool:
    """Initialise sentry-sdk when SENTRY_DSN is set. Returns True if it was."""
    dsn = os.getenv("SENTRY_DSN", "").strip()
    if not dsn:
        log.info("Sentry disabled (no SENTRY_DSN).")
        return False

    try:
        import sentry_sdk

        traces = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))
        sentry_sdk.init(
            dsn=dsn,
            traces_sample_rate=traces,
            environment=os.getenv("SENTRY_ENVIRONMENT", "development"),
            # never ship passwords or tokens from request bodies/headers
            send_default_pii=False,
        )
    except Exception as e:  # pragma: no cover (best-effort)
        log.warning("Sentry init failed: %s", e)
        return False
    log.info("Sentry initialized.")
    return True
