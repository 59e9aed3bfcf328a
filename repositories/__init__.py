"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific table.
Repositories run their statements through the session's StatementExecutor;
writes return domain model objects, reads return ResultTables for display.
"""
