"""
The repository tests run against the SQLite copy of the schema in conftest.
These checks keep that copy and the PostgreSQL DDL in step.
"""

import re

from db.init_db import SCHEMA_SQL

_CONSTRAINT_WORDS = {"primary", "foreign", "unique", "check", "constraint"}


def postgres_tables():
    """{table: [columns]} parsed from the CREATE TABLE blocks of SCHEMA_SQL."""
    tables = {}
    for name, body in re.findall(r"CREATE TABLE IF NOT EXISTS (\w+) \((.*?)\n\);", SCHEMA_SQL, re.S):
        columns = []
        for line in body.strip().splitlines():
            first = line.strip().split()[0]
            if first.lower() not in _CONSTRAINT_WORDS:
                columns.append(first.lower())
        tables[name.lower()] = columns
    return tables


def sqlite_tables(db):
    names = [
        r[0] for r in db.raw.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        )
    ]
    return {
        name.lower(): [r[1].lower() for r in db.raw.execute(f"PRAGMA table_info({name})")]
        for name in names
    }


def test_schema_declares_every_table():
    assert set(postgres_tables()) == {
        "users", "hotel", "rooms", "maintenancecompany",
        "roombookings", "roomrepairs", "roomupdateslog",
    }


def test_sqlite_fixture_matches_postgres_schema(db):
    assert sqlite_tables(db) == postgres_tables()


def test_distance_function_is_plain_euclidean():
    assert "sqrt((lat1 - lat2) ^ 2 + (lon1 - lon2) ^ 2)" in SCHEMA_SQL
    assert "RETURNS DOUBLE PRECISION" in SCHEMA_SQL
