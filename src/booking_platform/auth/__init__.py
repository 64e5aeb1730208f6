"""
booking_platform.auth

Bearer-token authentication.

Responsibilities:
- Issue and validate JWTs carrying the identity module's user id.
"""

# Package marker.
