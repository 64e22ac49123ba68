"""Shared test fixtures for the SmileCare test suite."""

from __future__ import annotations

import os

import pytest


def pytest_configure(config):
    """Set test environment variables BEFORE collection starts.

    Keeps the metrics client in buffer-only mode so no test ever reaches
    CloudWatch.
    """
    os.environ.setdefault("METRICS_ENABLED", "false")


@pytest.fixture
def make_messages():
    """Factory fixture: build a chat history ending with the given user text."""
    from smilecare.models import Message, Role

    def _make(*user_texts: str) -> list[Message]:
        history = [Message(role=Role.ASSISTANT, content="Hello! How can I help you today?")]
        for text in user_texts:
            history.append(Message(role=Role.USER, content=text))
            history.append(Message(role=Role.ASSISTANT, content="Noted."))
        if user_texts:
            history.pop()
        return history

    return _make
