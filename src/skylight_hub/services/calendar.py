"""Calendar event operations."""

import logging
from dataclasses import dataclass
from datetime import date

from skylight_hub.adapters import endpoints
from skylight_hub.adapters.endpoints import (
    CreateCalendarEventRequest,
    UpdateCalendarEventRequest,
)
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.domain.calendar import CalendarEvent
from skylight_hub.jsonapi.document import parse_document
from skylight_hub.mappers.common import map_primary
from skylight_hub.mappers.events import event_from_resource, map_events

_logger = logging.getLogger(__name__)


@dataclass
class CalendarService:
    """Fetches and mutates calendar events for a frame."""

    transport: SkylightTransport

    async def get_events(
        self, frame_id: str, start: date, end: date, timezone: str
    ) -> list[CalendarEvent]:
        """Return events starting in `[start, end)` for the frame."""
        payload = await self.transport.request(
            endpoints.get_calendar_events(frame_id, start, end, timezone)
        )
        index = parse_document(payload)
        events = map_events(index.primary, index)
        _logger.debug(
            "Received %s raw events, mapped %s", len(index.primary), len(events)
        )
        if index.primary and not events:
            _logger.warning("No events could be mapped; check the date attributes")
        return events

    async def create_event(
        self, frame_id: str, event: CreateCalendarEventRequest
    ) -> CalendarEvent:
        payload = await self.transport.request(
            endpoints.create_calendar_event(frame_id, event)
        )
        return map_primary(parse_document(payload), event_from_resource)

    async def update_event(
        self, frame_id: str, event_id: str, updates: UpdateCalendarEventRequest
    ) -> CalendarEvent:
        payload = await self.transport.request(
            endpoints.update_calendar_event(frame_id, event_id, updates)
        )
        return map_primary(parse_document(payload), event_from_resource)

    async def delete_event(self, frame_id: str, event_id: str) -> None:
        await self.transport.request_without_body(
            endpoints.delete_calendar_event(frame_id, event_id)
        )
