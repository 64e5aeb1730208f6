"""
booking_platform.api

API package for the Booking Platform.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.
