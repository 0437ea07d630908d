from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CalendarEvent(BaseModel):
    id: str = ""
    summary: str = ""
    description: str = ""
    start_datetime: Optional[str] = None
    start_date: Optional[str] = None

    @property
    def all_day(self) -> bool:
        return not self.start_datetime

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "CalendarEvent":
        start = item.get("start") or {}
        return cls(
            id=item.get("id", ""),
            summary=item.get("summary") or "",
            description=item.get("description") or "",
            start_datetime=start.get("dateTime") or None,
            start_date=start.get("date"),
        )


class ScheduledEvent(BaseModel):
    """EventBridge scheduled event that triggers a run."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    source: Optional[str] = None
    account: Optional[str] = None
    time: Optional[str] = None
    region: Optional[str] = None
    detail: Dict[str, Any] = Field(default_factory=dict)
    resources: List[str] = Field(default_factory=list)
    detail_type: Optional[str] = Field(default=None, alias="detail-type")
