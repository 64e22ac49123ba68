"""Centralized configuration for the SmileCare receptionist.

Values come from environment variables, with a ``.env`` file loaded first
for local development.  Nothing here is secret: the service talks to no
external API on the request path.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Return an integer setting, or raise a clear error if it is malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise OSError(
            f"Invalid configuration: {name}={raw!r} is not an integer."
        ) from None


# ── Clinic ──────────────────────────────────────────────────────────
CLINIC_NAME: str = os.getenv("CLINIC_NAME", "SmileCare Dental Clinic")

# ── Server ──────────────────────────────────────────────────────────
SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT: int = _int_env("SERVER_PORT", 8000)
CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173",
    ).split(",")
    if origin.strip()
]

# ── Logging ─────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
