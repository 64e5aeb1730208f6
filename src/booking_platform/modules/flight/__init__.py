"""
booking_platform.modules.flight

Flight module: airports, aircraft, scheduled flights and their seats.
"""
