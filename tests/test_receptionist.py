"""Tests for a full receptionist turn (extraction + reply + metrics)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from smilecare import replies
from smilecare.models import Appointment, Message, Role, Stage
from smilecare.receptionist import handle_turn


class TestHandleTurn:
    @patch("smilecare.receptionist.metrics")
    def test_extracts_then_replies(self, mock_metrics, make_messages):
        turn = handle_turn(make_messages("My name is Jane Doe"), Appointment())
        assert turn.appointment.name == "Jane Doe"
        assert turn.message == replies.ask_phone(turn.appointment)
        assert turn.stage == Stage.COLLECTING_PHONE
        assert turn.rule == "ask_phone"

    @patch("smilecare.receptionist.metrics")
    def test_missing_appointment_treated_as_empty(self, mock_metrics, make_messages):
        turn = handle_turn(make_messages("hello"), None)
        assert turn.appointment == Appointment()
        assert turn.message == replies.MENU
        assert turn.stage == Stage.GREETING

    @patch("smilecare.receptionist.metrics")
    def test_records_success_and_new_fields(self, mock_metrics, make_messages):
        handle_turn(make_messages("555-123-4567 jane@example.com"), Appointment(name="Jane"))
        mock_metrics.record_success.assert_called_once()
        counted = [c.args for c in mock_metrics.record_count.call_args_list]
        assert ("Chat/FieldExtracted", {"Field": "phone"}) in counted
        assert ("Chat/FieldExtracted", {"Field": "email"}) in counted
        assert ("Chat/ReplyRule", {"Rule": "ask_reason"}) in counted

    @patch("smilecare.receptionist.metrics")
    def test_failure_is_recorded_and_reraised(self, mock_metrics, make_messages):
        with patch(
            "smilecare.receptionist.select_rule", side_effect=RuntimeError("boom"),
        ), pytest.raises(RuntimeError):
            handle_turn(make_messages("hello"), Appointment())
        mock_metrics.record_failure.assert_called_once()
        assert mock_metrics.record_failure.call_args.kwargs["error_type"] == "RuntimeError"


class TestFullConversation:
    """Drive a whole booking the way the widget does, round-tripping the record."""

    @patch("smilecare.receptionist.metrics")
    def test_booking_from_greeting_to_confirmation(self, mock_metrics):
        history = [Message(role=Role.ASSISTANT, content=replies.greeting())]
        appointment = Appointment()
        script = [
            ("I'd like to book an appointment", "booking_start"),
            ("Jane Doe", "ask_phone"),
            ("555-123-4567", "ask_email"),
            ("jane@example.com", "ask_reason"),
            ("I need a cleaning", "ask_date"),
            ("next Tuesday", "ask_time"),
            ("10:30 am", "confirmation"),
        ]
        for text, expected_rule in script:
            history.append(Message(role=Role.USER, content=text))
            turn = handle_turn(history, appointment)
            assert turn.rule == expected_rule, text
            history.append(Message(role=Role.ASSISTANT, content=turn.message))
            appointment = turn.appointment

        assert appointment == Appointment(
            name="Jane Doe",
            phone="555-123-4567",
            email="jane@example.com",
            date="next Tuesday",
            time="10:30 am",
            reason="cleaning",
        )
        assert "within 24 hours" in history[-1].content
