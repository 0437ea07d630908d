from __future__ import annotations

import logging
from typing import Iterable, Optional

from calendar_relay.errors import TransportError
from calendar_relay.models.calendar_models import CalendarEvent
from calendar_relay.models.notification_models import NotificationPayload, TrelloCard
from calendar_relay.providers.lambda_client import LambdaInvoker
from calendar_relay.utils.dates import format_start


logger = logging.getLogger(__name__)


def card_title(when: str, summary: str) -> str:
    return f"M: ({when}) {summary}"


class NotificationForwarder:
    def __init__(self, invoker: LambdaInvoker, function_name: str, display_tz: Optional[str] = None):
        self.invoker = invoker
        self.function_name = function_name
        self.display_tz = display_tz

    def build_payload(self, event: CalendarEvent) -> Optional[NotificationPayload]:
        # All-day events only carry a date and are not turned into cards
        if event.all_day:
            return None
        when = format_start(event.start_datetime, self.display_tz)
        return NotificationPayload(
            trello=TrelloCard(title=card_title(when, event.summary), description=event.description),
        )

    def forward(self, events: Iterable[CalendarEvent]) -> int:
        """Send one card per timed event, stopping at the first failed invocation."""
        forwarded = 0
        for event in events:
            payload = self.build_payload(event)
            if payload is None:
                logger.debug("Skipping all-day event %s (%s)", event.id, event.summary)
                continue
            try:
                self.invoker.invoke(self.function_name, payload.to_bytes())
            except TransportError as exc:
                logger.error("Forwarding event %s to %s failed: %s", event.id, self.function_name, exc)
                raise
            forwarded += 1
            logger.info("%s\n%s", payload.trello.title, event.description)
        return forwarded
