"""Heuristic appointment-field extraction.

Each field has an ordered list of patterns; the first one that matches the
latest user message wins.  Fields already present on the appointment are
never touched, so a value captured early in the conversation sticks.

The patterns are deliberately simple and will misfire on ambiguous input
("I'm in pain" yields the name "in pain").  Collecting the details in a
fixed order keeps that manageable in practice.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from smilecare.models import Appointment, Message, Role

logger = logging.getLogger(__name__)

# ── Patterns ─────────────────────────────────────────────────────────

_NAME_INTRO = re.compile(
    r"(?:name is|i'm|i am|my name's|this is)\s+([a-z]+(?:\s+[a-z]+)*)",
    re.IGNORECASE | re.ASCII,
)
# A whole message made of two or more capitalised words, e.g. "Jane Doe".
_BARE_NAME = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+", re.ASCII)

_PHONE = re.compile(
    r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}|\(\d{3}\)\s?\d{3}[-.\s]?\d{4}",
    re.ASCII,
)

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.ASCII)

_MONTHS = (
    "january|february|march|april|may|june|july|"
    "august|september|october|november|december"
)
_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:on\s+)?(\d{1,2}/\d{1,2}/\d{2,4})", re.ASCII),
    re.compile(
        rf"(?:on\s+)?((?:{_MONTHS})\s+\d{{1,2}}(?:st|nd|rd|th)?)",
        re.IGNORECASE | re.ASCII,
    ),
    re.compile(
        r"(tomorrow|next\s+(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday))",
        re.IGNORECASE | re.ASCII,
    ),
)

_TIME = re.compile(
    r"\d{1,2}:\d{2}\s*(?:am|pm)|\d{1,2}\s*(?:am|pm)|morning|afternoon|evening",
    re.IGNORECASE | re.ASCII,
)

# Matches longer than this are discarded rather than stored.
MAX_FIELD_LENGTH = 100

REASON_KEYWORDS: tuple[str, ...] = (
    "cleaning",
    "checkup",
    "check-up",
    "emergency",
    "pain",
    "toothache",
    "filling",
    "crown",
    "root canal",
    "whitening",
    "cosmetic",
    "implant",
    "extraction",
    "braces",
    "orthodontic",
)


# ── Per-field finders ────────────────────────────────────────────────


def find_name(text: str) -> str | None:
    """Return the patient's name from an introduction or a bare full name."""
    match = _NAME_INTRO.search(text)
    if match:
        return match.group(1).strip()
    match = _BARE_NAME.fullmatch(text)
    if match:
        return match.group(0).strip()
    return None


def find_phone(text: str) -> str | None:
    match = _PHONE.search(text)
    return match.group(0) if match else None


def find_email(text: str) -> str | None:
    match = _EMAIL.search(text)
    return match.group(0) if match else None


def find_date(text: str) -> str | None:
    """Return a date expression: ``MM/DD/YYYY``, ``March 5th``, ``tomorrow``…

    A leading "on" is not part of the stored value.
    """
    for pattern in _DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def find_time(text: str) -> str | None:
    match = _TIME.search(text)
    return match.group(0) if match else None


def find_reason(text: str) -> str | None:
    """Return the first vocabulary keyword contained in *text*."""
    lowered = text.lower()
    for keyword in REASON_KEYWORDS:
        if keyword in lowered:
            return keyword
    return None


FIELD_FINDERS: dict[str, Callable[[str], str | None]] = {
    "name": find_name,
    "phone": find_phone,
    "email": find_email,
    "date": find_date,
    "time": find_time,
    "reason": find_reason,
}


# ── Public API ───────────────────────────────────────────────────────


def latest_user_text(messages: Sequence[Message]) -> str:
    """Content of the final message if the patient wrote it, else ``""``."""
    if not messages:
        return ""
    last = messages[-1]
    if last.role != Role.USER:
        return ""
    return last.content


def extract_appointment_fields(
    messages: Sequence[Message],
    appointment: Appointment,
) -> Appointment:
    """Fill unset appointment fields from the latest user message.

    Pure function: the input appointment is not modified and the same
    inputs always give the same result.
    """
    text = latest_user_text(messages)
    if not text:
        return appointment

    found: dict[str, str] = {}
    for field in appointment.missing_fields():
        value = FIELD_FINDERS[field](text)
        if value is None:
            continue
        if len(value) > MAX_FIELD_LENGTH:
            logger.debug("Ignoring %s match of %d characters", field, len(value))
            continue
        found[field] = value
        logger.debug("Extracted %s=%r", field, value)

    return appointment.with_fields(**found)
