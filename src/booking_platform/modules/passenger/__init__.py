"""
booking_platform.modules.passenger

Passenger module: registered travellers.
"""
