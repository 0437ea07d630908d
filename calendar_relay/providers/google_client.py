from __future__ import annotations

import logging
from typing import List

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from calendar_relay.errors import TransportError
from calendar_relay.models.calendar_models import CalendarEvent


logger = logging.getLogger(__name__)


class CalendarClient:
    def __init__(self, credentials=None, calendar_id: str = "primary", service=None):
        self.calendar_id = calendar_id
        self.service = service or build("calendar", "v3", credentials=credentials, cache_discovery=False)

    def list_upcoming(self, time_min: str, time_max: str) -> List[CalendarEvent]:
        events_api = self.service.events()
        request = events_api.list(
            calendarId=self.calendar_id,
            timeMin=time_min,
            timeMax=time_max,
            showDeleted=False,
            singleEvents=True,
            orderBy="startTime",
        )
        items = []
        try:
            while request is not None:
                response = request.execute()
                items.extend(response.get("items", []))
                request = events_api.list_next(request, response)
        except HttpError as exc:
            logger.error("Unable to retrieve events for calendar %s: %s", self.calendar_id, exc)
            raise TransportError(f"Calendar list failed with HTTP {exc.resp.status}") from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Unable to retrieve events for calendar %s: %s", self.calendar_id, exc)
            raise TransportError(f"Calendar list failed: {exc}") from exc

        logger.info("Calendar fetched %d events between %s and %s for calendar %s", len(items), time_min, time_max, self.calendar_id)
        return [CalendarEvent.from_api(e) for e in items]
