"""FastAPI route definitions for the SmileCare receptionist API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from smilecare import replies
from smilecare.api.schemas import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    GreetingResponse,
    HealthResponse,
)
from smilecare.receptionist import handle_turn

logger = logging.getLogger(__name__)

router = APIRouter()


def apology_response(status_code: int) -> JSONResponse:
    """The fixed apology body returned for every failed chat request."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=replies.APOLOGY).model_dump(),
    )


# ── Endpoints ────────────────────────────────────────────────────────


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse()


@router.get("/greeting", response_model=GreetingResponse)
async def greeting():
    """Opening message the widget shows before the patient types anything."""
    return GreetingResponse(message=replies.greeting())


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(request: ChatRequest, http_request: Request):
    """Process the latest patient message and return the receptionist's reply.

    The handler is stateless: the appointment gathered so far arrives in
    the request and the updated one goes back in the response, for the
    client to send again next turn.
    """
    request_id = getattr(http_request.state, "request_id", "?")

    try:
        turn = handle_turn(request.messages, request.appointment)
    except Exception:
        # Full traceback stays in the server log; the client only gets
        # the fixed apology.
        logger.exception("[%s] Error processing chat request", request_id)
        return apology_response(500)

    logger.info(
        "[%s] Chat turn: rule=%s stage=%s", request_id, turn.rule, turn.stage,
    )
    return ChatResponse(
        message=turn.message,
        appointment=turn.appointment,
        stage=turn.stage,
    )
