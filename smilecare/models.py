"""Domain models shared by the extraction, response and API layers.

Everything here is immutable: the appointment record is round-tripped
through the browser and every extraction pass returns a *new* record.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class Role(StrEnum):
    """Who authored a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat turn."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


# Order in which the receptionist asks for the booking details.
COLLECTION_ORDER: tuple[str, ...] = ("name", "phone", "email", "reason", "date", "time")


class Appointment(BaseModel):
    """The booking details gathered so far.  Every field is optional."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    date: str | None = None
    time: str | None = None
    reason: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing_fields(self) -> tuple[str, ...]:
        """Return the unset fields, in collection order."""
        return tuple(f for f in COLLECTION_ORDER if getattr(self, f) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def with_fields(self, **found: str | None) -> Appointment:
        """Return a copy with *found* values filled in.

        Fields that are already set keep their value; ``None`` values in
        *found* are ignored.
        """
        update = {
            field: value
            for field, value in found.items()
            if value is not None and getattr(self, field) is None
        }
        if not update:
            return self
        return self.model_copy(update=update)


class Stage(StrEnum):
    """Where the booking conversation currently stands."""

    GREETING = "greeting"
    COLLECTING_NAME = "collecting_name"
    COLLECTING_PHONE = "collecting_phone"
    COLLECTING_EMAIL = "collecting_email"
    COLLECTING_REASON = "collecting_reason"
    COLLECTING_DATE = "collecting_date"
    COLLECTING_TIME = "collecting_time"
    COMPLETE = "complete"


def conversation_stage(appointment: Appointment) -> Stage:
    """Derive the booking stage from which fields are present.

    An empty record is still at the greeting.  Otherwise the stage is
    the first missing field in collection order.
    """
    missing = appointment.missing_fields()
    if not missing:
        return Stage.COMPLETE
    if len(missing) == len(COLLECTION_ORDER):
        return Stage.GREETING
    return Stage(f"collecting_{missing[0]}")
