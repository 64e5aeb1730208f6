"""
booking_platform

Top-level package for the Booking Platform modular monolith.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; module registration happens in `booking_platform.modules`.
