"""
models/ - Domain Models
=======================
Plain dataclasses for the rows this program writes, and the ResultTable
that read queries hand back to the shell.
"""
