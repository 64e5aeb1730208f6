"""
booking_platform.modules.booking

Booking module: reservations with a snapshot of passenger and trip details.
"""
