"""Tests for the reply decision table."""

from __future__ import annotations

import pytest

from smilecare import replies
from smilecare.models import Appointment
from smilecare.responses import FALLBACK, RULES, select_response, select_rule

FULL = Appointment(
    name="Jane Doe",
    phone="555-123-4567",
    email="jane@example.com",
    date="03/15/2025",
    time="10:30 am",
    reason="cleaning",
)


class TestTopicQuestions:
    def test_hours_regardless_of_appointment_state(self, make_messages):
        messages = make_messages("what are your hours?")
        for appointment in (Appointment(), Appointment(name="Jane"), FULL):
            assert select_response(messages, appointment) == replies.HOURS

    @pytest.mark.parametrize(
        "text", ["What services do you offer?", "what do you treat", "What can you help with"],
    )
    def test_services(self, make_messages, text: str):
        assert select_response(make_messages(text), Appointment()) == replies.SERVICES

    def test_insurance(self, make_messages):
        assert select_response(make_messages("Do you accept Cigna?"), Appointment()) == (
            replies.INSURANCE
        )

    def test_services_outranks_hours(self, make_messages):
        text = "what services are open on saturday?"
        assert select_response(make_messages(text), Appointment()) == replies.SERVICES

    def test_hours_outranks_insurance(self, make_messages):
        text = "when can I bring my insurance card?"
        assert select_response(make_messages(text), Appointment()) == replies.HOURS

    def test_topic_outranks_collection(self, make_messages):
        messages = make_messages("do you take insurance")
        assert select_response(messages, Appointment(name="Jane Doe")) == replies.INSURANCE


class TestBookingFlow:
    def test_booking_without_name_asks_for_name(self, make_messages):
        messages = make_messages("I'd like to book an appointment")
        assert select_response(messages, Appointment()) == replies.ASK_NAME

    def test_booking_with_name_moves_on_to_phone(self, make_messages):
        messages = make_messages("I want to schedule a visit")
        reply = select_response(messages, Appointment(name="Jane Doe"))
        assert reply == "Thank you, Jane Doe! What's the best phone number to reach you at?"

    def test_name_set_asks_for_phone(self, make_messages):
        reply = select_response(make_messages("Jane Doe"), Appointment(name="Jane Doe"))
        assert "Jane Doe" in reply
        assert "phone number" in reply

    def test_name_and_phone_set_asks_for_email(self, make_messages):
        appointment = Appointment(name="Jane Doe", phone="555-123-4567")
        assert select_response(make_messages("555-123-4567"), appointment) == replies.ASK_EMAIL

    def test_email_set_asks_for_reason(self, make_messages):
        appointment = FULL.model_copy(update={"reason": None, "date": None, "time": None})
        assert select_response(make_messages("ok"), appointment) == replies.ASK_REASON

    def test_reason_set_asks_for_date(self, make_messages):
        appointment = FULL.model_copy(update={"date": None, "time": None})
        assert select_response(make_messages("a cleaning"), appointment) == replies.ASK_DATE

    def test_date_set_asks_for_time(self, make_messages):
        appointment = FULL.model_copy(update={"time": None})
        assert select_response(make_messages("tomorrow"), appointment) == replies.ASK_TIME

    def test_missing_predecessor_follows_first_set_pair(self, make_messages):
        # Phone without a name still leads to the email prompt.
        appointment = Appointment(phone="555-123-4567")
        assert select_response(make_messages("555-123-4567"), appointment) == replies.ASK_EMAIL


class TestConfirmation:
    def test_summary_contains_every_field(self, make_messages):
        reply = select_response(make_messages("10:30 am"), FULL)
        for value in FULL.model_dump().values():
            assert value in reply
        assert "within 24 hours" in reply

    def test_confirmation_rule_selected(self, make_messages):
        assert select_rule(make_messages("thanks"), FULL).name == "confirmation"


class TestFallback:
    def test_menu_for_unrecognised_message(self, make_messages):
        assert select_response(make_messages("hello"), Appointment()) == replies.MENU

    def test_empty_history_gets_menu(self):
        assert select_rule([], Appointment()) is FALLBACK


class TestRuleTable:
    def test_rule_order(self):
        assert [r.name for r in RULES] == [
            "services",
            "hours",
            "insurance",
            "booking_start",
            "ask_phone",
            "ask_email",
            "ask_reason",
            "ask_date",
            "ask_time",
            "confirmation",
        ]

    def test_rule_names_are_unique(self):
        names = [r.name for r in RULES] + [FALLBACK.name]
        assert len(names) == len(set(names))
