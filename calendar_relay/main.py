from __future__ import annotations

import argparse
import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import boto3

from calendar_relay.config import Settings
from calendar_relay.errors import RelayError
from calendar_relay.forwarder import NotificationForwarder
from calendar_relay.models.calendar_models import ScheduledEvent
from calendar_relay.providers.google_auth import CodeSupplier, StaticCodeSupplier, TokenProvider, console_code_supplier
from calendar_relay.providers.google_client import CalendarClient
from calendar_relay.providers.lambda_client import LambdaInvoker
from calendar_relay.providers.parameter_store import ParameterStore
from calendar_relay.tracing import configure_tracing, trace_phase
from calendar_relay.utils.dates import upcoming_window


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("calendar-relay")


def run(
    settings: Settings,
    store: ParameterStore,
    invoker: LambdaInvoker,
    code_supplier: Optional[CodeSupplier] = None,
    calendar_service=None,
    now: Optional[datetime] = None,
) -> int:
    """Fetch tomorrow's events in the configured window and forward them.

    Returns the number of events forwarded to the downstream function.
    """
    if code_supplier is None:
        code_supplier = StaticCodeSupplier(settings.auth_code) if settings.auth_code else console_code_supplier

    with trace_phase("startup", settings.xray_tracing):
        creds = TokenProvider(store, settings, code_supplier).acquire()
        calendar = CalendarClient(creds, settings.google_calendar_id, service=calendar_service)

        time_min, time_max = upcoming_window(now or datetime.now(timezone.utc), settings.interval_minutes)
        logger.info("We will get calendar entries between %s and %s", time_min, time_max)
        events = calendar.list_upcoming(time_min, time_max)

    if not events:
        logger.warning("No upcoming events found.")
        return 0

    forwarder = NotificationForwarder(invoker, settings.downstream_function, settings.display_tz)
    with trace_phase("lambda", settings.xray_tracing):
        return forwarder.forward(events)


def _request_id(event: Any) -> Optional[str]:
    return event.get("id") if isinstance(event, dict) else None


def handler(event: Optional[Dict[str, Any]], context: Any = None, code_supplier: Optional[CodeSupplier] = None) -> None:
    request_id = _request_id(event)
    try:
        request = ScheduledEvent.model_validate(event or {})
        logger.info("Processing Lambda request [%s]", request.id)
        settings = Settings.load()
        logging.getLogger().setLevel(settings.log_level)
        configure_tracing(settings.xray_tracing)
        session = boto3.session.Session(region_name=settings.aws_region)
        store = ParameterStore(session.client("ssm"))
        invoker = LambdaInvoker(session.client("lambda"))
        forwarded = run(settings, store, invoker, code_supplier=code_supplier)
    except RelayError as exc:
        logger.error("Lambda request [%s] failed: %s", request_id, exc)
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Lambda request [%s] failed unexpectedly: %s", request_id, exc)
        raise
    logger.info("Lambda request [%s] done, forwarded %d events", request_id, forwarded)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="calendar-relay", description="Forward upcoming calendar events once, from this machine.")
    parser.add_argument("--event-id", default=None, help="request id to log (default: local-<uuid>)")
    args = parser.parse_args(argv)

    event = {
        "id": args.event_id or f"local-{uuid.uuid4()}",
        "source": "calendar-relay.cli",
        "time": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "detail-type": "Scheduled Event",
    }
    try:
        handler(event)
    except Exception:  # noqa: BLE001
        # handler has already logged the failure with the request id
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
