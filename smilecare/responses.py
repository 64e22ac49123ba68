"""Rule-based reply selection.

The receptionist's behaviour is a single ordered decision table.  Each
:class:`Rule` pairs a predicate over ``(latest message, appointment)`` with
the reply to send; rules are evaluated top to bottom and the first match
wins.  Nothing is remembered between calls: the booking "state" is
re-derived from whichever appointment fields are present.

Precedence:
  1. clinic questions (services → hours → insurance), whatever the state
  2. a booking request from a patient we have no name for
  3. progressive collection: ask for the field after the last one we have
  4. confirmation once all six fields are known
  5. the default menu
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from smilecare import replies
from smilecare.models import Appointment, Message

Predicate = Callable[[str, Appointment], bool]
Reply = Callable[[Appointment], str]


@dataclass(frozen=True)
class Rule:
    """One row of the decision table."""

    name: str
    predicate: Predicate
    reply: Reply

    def matches(self, text: str, appointment: Appointment) -> bool:
        return self.predicate(text, appointment)


def _mentions(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(k in text for k in keywords)


def _collected(previous: str, wanted: str) -> Predicate:
    """True when *previous* is set and *wanted* is still missing."""

    def predicate(_text: str, appointment: Appointment) -> bool:
        return (
            getattr(appointment, previous) is not None
            and getattr(appointment, wanted) is None
        )

    return predicate


def _fixed(text: str) -> Reply:
    return lambda _appointment: text


_asks_services = _mentions("service", "what do you", "what can")
_asks_hours = _mentions("hours", "open", "when")
_asks_insurance = _mentions("insurance", "accept")
_wants_booking = _mentions("book", "appointment", "schedule")


RULES: tuple[Rule, ...] = (
    Rule("services", lambda t, _a: _asks_services(t), _fixed(replies.SERVICES)),
    Rule("hours", lambda t, _a: _asks_hours(t), _fixed(replies.HOURS)),
    Rule("insurance", lambda t, _a: _asks_insurance(t), _fixed(replies.INSURANCE)),
    Rule(
        "booking_start",
        lambda t, a: _wants_booking(t) and a.name is None,
        _fixed(replies.ASK_NAME),
    ),
    Rule("ask_phone", _collected("name", "phone"), replies.ask_phone),
    Rule("ask_email", _collected("phone", "email"), _fixed(replies.ASK_EMAIL)),
    Rule("ask_reason", _collected("email", "reason"), _fixed(replies.ASK_REASON)),
    Rule("ask_date", _collected("reason", "date"), _fixed(replies.ASK_DATE)),
    Rule("ask_time", _collected("date", "time"), _fixed(replies.ASK_TIME)),
    Rule("confirmation", lambda _t, a: a.is_complete, replies.confirmation),
)

FALLBACK = Rule("fallback", lambda _t, _a: True, _fixed(replies.MENU))


def latest_text(messages: Sequence[Message]) -> str:
    """Lowercased content of the last message in the history."""
    if not messages:
        return ""
    return messages[-1].content.lower()


def select_rule(messages: Sequence[Message], appointment: Appointment) -> Rule:
    """Return the first rule that applies to this turn."""
    text = latest_text(messages)
    for rule in RULES:
        if rule.matches(text, appointment):
            return rule
    return FALLBACK


def select_response(messages: Sequence[Message], appointment: Appointment) -> str:
    """Pick the canned reply for the latest message and appointment state."""
    return select_rule(messages, appointment).reply(appointment)
