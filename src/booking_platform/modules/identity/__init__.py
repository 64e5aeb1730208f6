"""
booking_platform.modules.identity

Identity module: users and roles.
"""
