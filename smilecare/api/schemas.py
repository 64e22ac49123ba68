"""Pydantic schemas for the FastAPI endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from smilecare.models import Appointment, Message, Stage


class ChatRequest(BaseModel):
    """Conversation so far plus the appointment details gathered on earlier turns."""

    messages: list[Message] = Field(
        ...,
        description="Full chat history, oldest first; the last entry is the new user message",
    )
    appointment: Appointment | None = Field(
        default=None,
        description="Partial appointment returned by the previous response",
    )


class ChatResponse(BaseModel):
    """The receptionist's reply and the updated appointment."""

    message: str = Field(..., description="The receptionist's reply")
    appointment: Appointment = Field(..., description="Appointment to send back on the next turn")
    stage: Stage = Field(..., description="Booking progress derived from the appointment")


class ErrorResponse(BaseModel):
    """Body returned for any failed chat request."""

    message: str


class GreetingResponse(BaseModel):
    """Opening line for a new conversation."""

    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    service: str = "smilecare-receptionist"
