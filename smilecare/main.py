"""CLI entry point for the SmileCare receptionist.

This provides a simple terminal-based chat interface for testing and
development. For production, use the FastAPI server (smilecare/server.py).

Usage:
    uv run python -m smilecare.main            # normal mode (quiet)
    uv run python -m smilecare.main --debug    # debug mode (shows each turn)
"""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from smilecare import replies
from smilecare.models import Appointment, Message, Role
from smilecare.receptionist import handle_turn

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool = False) -> None:
    """Set up logging: WARNING by default, DEBUG when --debug is passed."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    )
    logging.getLogger("smilecare").setLevel(logging.DEBUG if debug else logging.WARNING)


def _new_conversation() -> tuple[list[Message], Appointment]:
    greeting = replies.greeting()
    print(f"Receptionist: {greeting}\n")
    return [Message(role=Role.ASSISTANT, content=greeting)], Appointment()


def main():
    """Run the interactive CLI chat loop."""
    parser = argparse.ArgumentParser(description="SmileCare receptionist CLI")
    parser.add_argument(
        "--debug", action="store_true",
        help="Show extraction and rule-selection log messages",
    )
    args = parser.parse_args()

    load_dotenv()
    _configure_logging(debug=args.debug)

    print("\n" + "=" * 60)
    print("  SmileCare Dental Receptionist - CLI Chat")
    print("=" * 60)
    print("  Type your message and press Enter.")
    print("  Commands: 'quit' to exit, 'new' for a new conversation.")
    print("=" * 60 + "\n")

    messages, appointment = _new_conversation()

    while True:
        try:
            user_input = input("You: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye!")
            break

        if not user_input:
            continue

        if user_input.lower() in ("exit", "quit", "q"):
            print("\nGoodbye! Have a great day!")
            break

        if user_input.lower() == "new":
            print("\n>> New conversation started.\n")
            messages, appointment = _new_conversation()
            continue

        try:
            user_message = Message(role=Role.USER, content=user_input)
            turn = handle_turn([*messages, user_message], appointment)
        except Exception:
            logger.exception("Error processing message")
            print(f"\nReceptionist: {replies.APOLOGY}\n")
            continue

        appointment = turn.appointment
        messages.append(user_message)
        messages.append(Message(role=Role.ASSISTANT, content=turn.message))
        print(f"\nReceptionist: {turn.message}\n")


if __name__ == "__main__":
    main()
