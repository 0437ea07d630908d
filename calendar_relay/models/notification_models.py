from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


EVENT_VERSION = "1.0"
EVENT_SOURCE = "aws:lambda"


class TrelloCard(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="Title")
    description: str = Field(default="", alias="Description")


class NotificationPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_version: str = Field(default=EVENT_VERSION, alias="EventVersion")
    event_source: str = Field(default=EVENT_SOURCE, alias="EventSource")
    trello: TrelloCard = Field(alias="Trello")

    def to_bytes(self) -> bytes:
        # Compact JSON with the wire field names the card function expects
        return self.model_dump_json(by_alias=True).encode("utf-8")
