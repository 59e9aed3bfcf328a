"""
security/ - Access Control
==========================
Decorators that gate shell commands on the session's user identity.
"""
