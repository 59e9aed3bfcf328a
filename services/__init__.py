"""
services/ - Domain Operations
=============================
One method per menu action. Services validate scalars, compose repository
calls and raise HotelDeskError subclasses for recoverable domain failures.
They never read input or print.
"""
