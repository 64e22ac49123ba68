"""One receptionist turn: extract booking details, then pick a reply.

    messages + appointment
        → extract_appointment_fields   (fill what the patient just told us)
        → select_rule                  (decide what to say next)
        → Turn(message, appointment, stage, rule)

No state is kept between calls.  The caller (browser or CLI) owns the
conversation and sends the appointment back on the next turn.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from smilecare.extraction import extract_appointment_fields
from smilecare.models import Appointment, Message, Stage, conversation_stage
from smilecare.responses import select_rule
from smilecare.services.metrics import metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Turn:
    """Result of handling a single patient message."""

    message: str
    appointment: Appointment
    stage: Stage
    rule: str


def handle_turn(
    messages: Sequence[Message],
    appointment: Appointment | None = None,
) -> Turn:
    """Run extraction and reply selection for the latest message."""
    current = appointment or Appointment()
    t0 = time.perf_counter()
    try:
        updated = extract_appointment_fields(messages, current)
        rule = select_rule(messages, updated)
        reply = rule.reply(updated)
    except Exception as exc:
        metrics.record_failure(
            "receptionist", "chat_turn", error_type=type(exc).__name__,
        )
        raise

    elapsed = (time.perf_counter() - t0) * 1000
    metrics.record_success("receptionist", "chat_turn", latency_ms=elapsed)
    metrics.record_count("Chat/ReplyRule", {"Rule": rule.name})

    new_fields = [f for f in current.missing_fields() if getattr(updated, f) is not None]
    for field in new_fields:
        metrics.record_count("Chat/FieldExtracted", {"Field": field})

    stage = conversation_stage(updated)
    logger.debug(
        "Turn handled: rule=%s stage=%s new_fields=%s (%.2fms)",
        rule.name, stage, new_fields, elapsed,
    )
    return Turn(message=reply, appointment=updated, stage=stage, rule=rule.name)
