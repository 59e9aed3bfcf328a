"""
utils/ - Shared Helpers
=======================
Logging setup used by every layer.
"""
