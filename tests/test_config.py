"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from smilecare.config import _int_env


class TestIntEnv:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("SMILECARE_TEST_PORT", raising=False)
        assert _int_env("SMILECARE_TEST_PORT", 8000) == 8000

    def test_default_when_blank(self, monkeypatch):
        monkeypatch.setenv("SMILECARE_TEST_PORT", "  ")
        assert _int_env("SMILECARE_TEST_PORT", 8000) == 8000

    def test_parses_value(self, monkeypatch):
        monkeypatch.setenv("SMILECARE_TEST_PORT", "9001")
        assert _int_env("SMILECARE_TEST_PORT", 8000) == 9001

    def test_rejects_non_integer(self, monkeypatch):
        monkeypatch.setenv("SMILECARE_TEST_PORT", "eighty")
        with pytest.raises(OSError, match="SMILECARE_TEST_PORT"):
            _int_env("SMILECARE_TEST_PORT", 8000)
