"""
db/ - Database Layer
====================
Owns the single PostgreSQL connection, the statement executor that every
query goes through, the per-process session, and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
