"""
Shared fixtures.

Repository and service tests run against an in-memory SQLite database
wrapped so it looks like a psycopg2 connection to the code under test:
``%s`` placeholders, cursors usable as context managers, and the
``calculate_distance`` function registered server-side.
"""

import io
import math
import sqlite3
from datetime import date

import pytest

from db.session import Session
from handlers.console import Console

SQLITE_SCHEMA = """
CREATE TABLE Users (
    userID      INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL,
    password    TEXT NOT NULL,
    userType    TEXT NOT NULL DEFAULT 'Customer'
);
CREATE TABLE Hotel (
    hotelID         INTEGER PRIMARY KEY,
    hotelName       TEXT NOT NULL,
    latitude        REAL NOT NULL,
    longitude       REAL NOT NULL,
    dateEstablished TEXT,
    managerUserID   INTEGER NOT NULL REFERENCES Users(userID)
);
CREATE TABLE Rooms (
    hotelID     INTEGER NOT NULL REFERENCES Hotel(hotelID),
    roomNumber  INTEGER NOT NULL,
    price       REAL NOT NULL,
    imageURL    TEXT,
    PRIMARY KEY (hotelID, roomNumber)
);
CREATE TABLE MaintenanceCompany (
    companyID   INTEGER PRIMARY KEY,
    name        TEXT NOT NULL,
    address     TEXT,
    isCertified INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE RoomBookings (
    bookingID   INTEGER PRIMARY KEY AUTOINCREMENT,
    customerID  INTEGER NOT NULL REFERENCES Users(userID),
    hotelID     INTEGER NOT NULL,
    roomNumber  INTEGER NOT NULL,
    bookingDate TEXT NOT NULL,
    UNIQUE (hotelID, roomNumber, bookingDate)
);
CREATE TABLE RoomRepairs (
    repairID    INTEGER PRIMARY KEY AUTOINCREMENT,
    companyID   INTEGER NOT NULL,
    hotelID     INTEGER NOT NULL,
    roomNumber  INTEGER NOT NULL,
    repairDate  TEXT NOT NULL
);
CREATE TABLE RoomUpdatesLog (
    updateNumber INTEGER PRIMARY KEY AUTOINCREMENT,
    managerID    INTEGER NOT NULL,
    hotelID      INTEGER NOT NULL,
    roomNumber   INTEGER NOT NULL,
    updateDate   TEXT NOT NULL
);
"""

# userID: name, password, type
USERS = [
    (1, "Mona", "mgrpw", "Manager"),
    (2, "Carl", "cpw", "Customer"),
    (3, "Dana", "dpw", "Customer"),
    (4, "Eli", "epw", "Customer"),
    (5, "Fay", "fpw", "Manager"),
]

# hotelID, name, lat, lon, manager
HOTELS = [
    (1, "Harbor Inn", 0.0, 0.0, 1),
    (2, "Edge Lodge", 30.0, 0.0, 1),       # exactly 30 from the origin
    (3, "Corner Suites", 18.0, 24.0, 5),   # exactly 30 from the origin
    (4, "Near Motel", 17.9, 24.0, 5),      # just inside 30
    (5, "Far Resort", 50.0, 50.0, 5),
]

# hotelID, roomNumber, price, imageURL
ROOMS = [
    (1, 101, 100.0, "http://img/1-101.jpg"),
    (1, 102, 150.0, "http://img/1-102.jpg"),
    (1, 103, 200.0, "http://img/1-103.jpg"),
    (2, 101, 90.0, "http://img/2-101.jpg"),
    (3, 1, 80.0, None),
    (4, 1, 70.0, None),
]


def _calculate_distance(lat1, lon1, lat2, lon2):
    return math.sqrt((lat1 - lat2) ** 2 + (lon1 - lon2) ** 2)


def _adapt(value):
    if isinstance(value, date):
        return value.isoformat()
    return value


class PgStyleCursor:
    """sqlite3 cursor that accepts psycopg2-style ``%s`` placeholders."""

    def __init__(self, raw: sqlite3.Connection):
        self._cur = raw.cursor()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._cur.close()
        return False

    def execute(self, sql, params=()):
        self._cur.execute(sql.replace("%s", "?"), tuple(_adapt(p) for p in params))

    @property
    def description(self):
        return self._cur.description

    @property
    def rowcount(self):
        return self._cur.rowcount

    def fetchone(self):
        return self._cur.fetchone()

    def fetchall(self):
        return self._cur.fetchall()


class PgStyleConnection:
    """The slice of the psycopg2 connection API the application uses."""

    def __init__(self):
        self.raw = sqlite3.connect(":memory:", isolation_level=None)
        self.raw.create_function("calculate_distance", 4, _calculate_distance, deterministic=True)
        self.closed = 0
        self.autocommit = True

    def cursor(self):
        return PgStyleCursor(self.raw)

    def close(self):
        self.raw.close()
        self.closed = 1


@pytest.fixture
def db():
    """Seeded in-memory database."""
    conn = PgStyleConnection()
    conn.raw.executescript(SQLITE_SCHEMA)
    conn.raw.executemany(
        "INSERT INTO Users (userID, name, password, userType) VALUES (?, ?, ?, ?)", USERS
    )
    conn.raw.executemany(
        "INSERT INTO Hotel (hotelID, hotelName, latitude, longitude, managerUserID) VALUES (?, ?, ?, ?, ?)",
        HOTELS,
    )
    conn.raw.executemany(
        "INSERT INTO Rooms (hotelID, roomNumber, price, imageURL) VALUES (?, ?, ?, ?)", ROOMS
    )
    conn.raw.execute("INSERT INTO MaintenanceCompany (companyID, name) VALUES (1, 'FixIt')")
    yield conn
    if not conn.closed:
        conn.close()


@pytest.fixture
def session(db):
    return Session.from_connection(db)


@pytest.fixture
def executor(session):
    return session.executor


@pytest.fixture
def add_booking(db):
    """Insert a booking directly, bypassing the services."""

    def _add(customer_id, hotel_id, room_number, day):
        db.raw.execute(
            "INSERT INTO RoomBookings (customerID, hotelID, roomNumber, bookingDate) VALUES (?, ?, ?, ?)",
            (customer_id, hotel_id, room_number, day.isoformat()),
        )

    return _add


@pytest.fixture
def make_console():
    """Build a Console fed with the given input lines; output goes to console.stdout."""

    def _make(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return Console(stdin=stdin, stdout=io.StringIO())

    return _make
