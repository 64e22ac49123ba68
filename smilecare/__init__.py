"""SmileCare Dental receptionist — a rule-based chat widget backend.

Architecture Overview
=====================

Every ``POST /api/chat`` runs two pure steps over the conversation and the
appointment record the browser sends along:

1. **extraction** — regex/keyword heuristics lift name, phone, email,
   date, time and reason out of the latest patient message.  Fields that
   are already known are never overwritten.

2. **responses** — an ordered decision table picks one canned reply:
   clinic questions first, then the next missing booking detail, then a
   confirmation summary once everything is known.

The updated appointment goes back to the browser, which sends it again on
the next turn.  The server keeps no conversation state.

Package Structure
-----------------
- ``smilecare/models.py`` — Message, Appointment and the booking Stage
- ``smilecare/extraction.py`` — field extraction patterns
- ``smilecare/responses.py`` — reply decision table
- ``smilecare/replies.py`` — canned reply texts
- ``smilecare/receptionist.py`` — one chat turn (extraction + reply + metrics)
- ``smilecare/config.py`` — configuration from environment variables
- ``smilecare/server.py`` — FastAPI application and the widget page
- ``smilecare/main.py`` — CLI chat interface for local testing
- ``smilecare/services/`` — CloudWatch metrics
- ``smilecare/api/`` — FastAPI routes and Pydantic schemas
"""

__version__ = "1.0.0"
