"""
db/init_db.py
-------------
Creates the hotel schema (tables and the distance function) if they do not
already exist. Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.executor import StatementExecutor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users: customers, managers and admins. userID comes from users_userID_seq.
CREATE TABLE IF NOT EXISTS Users (
    userID          SERIAL PRIMARY KEY,
    name            VARCHAR(50) NOT NULL,
    password        VARCHAR(30) NOT NULL,
    userType        VARCHAR(10) NOT NULL DEFAULT 'Customer'
                    CHECK (userType IN ('Customer', 'Manager', 'Admin'))
);

CREATE TABLE IF NOT EXISTS Hotel (
    hotelID         INTEGER PRIMARY KEY,
    hotelName       VARCHAR(50) NOT NULL,
    latitude        NUMERIC(8,6) NOT NULL,
    longitude       NUMERIC(9,6) NOT NULL,
    dateEstablished DATE,
    managerUserID   INTEGER NOT NULL REFERENCES Users(userID)
);

CREATE TABLE IF NOT EXISTS Rooms (
    hotelID         INTEGER NOT NULL REFERENCES Hotel(hotelID),
    roomNumber      INTEGER NOT NULL,
    price           NUMERIC(10,2) NOT NULL,
    imageURL        TEXT,
    PRIMARY KEY (hotelID, roomNumber)
);

CREATE TABLE IF NOT EXISTS MaintenanceCompany (
    companyID       INTEGER PRIMARY KEY,
    name            VARCHAR(50) NOT NULL,
    address         TEXT,
    isCertified     BOOLEAN NOT NULL DEFAULT FALSE
);

-- One booking per room per day.
CREATE TABLE IF NOT EXISTS RoomBookings (
    bookingID       SERIAL PRIMARY KEY,
    customerID      INTEGER NOT NULL REFERENCES Users(userID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    bookingDate     DATE NOT NULL,
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber),
    UNIQUE (hotelID, roomNumber, bookingDate)
);

CREATE TABLE IF NOT EXISTS RoomRepairs (
    repairID        SERIAL PRIMARY KEY,
    companyID       INTEGER NOT NULL REFERENCES MaintenanceCompany(companyID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    repairDate      DATE NOT NULL,
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber)
);

-- Audit trail of price/image changes.
CREATE TABLE IF NOT EXISTS RoomUpdatesLog (
    updateNumber    SERIAL PRIMARY KEY,
    managerID       INTEGER NOT NULL REFERENCES Users(userID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    updateDate      TIMESTAMP NOT NULL DEFAULT NOW(),
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber)
);

-- Plain Euclidean distance, no geodesic correction.
CREATE OR REPLACE FUNCTION calculate_distance(
    lat1 DOUBLE PRECISION, lon1 DOUBLE PRECISION,
    lat2 DOUBLE PRECISION, lon2 DOUBLE PRECISION
) RETURNS DOUBLE PRECISION AS $$
    SELECT sqrt((lat1 - lat2) ^ 2 + (lon1 - lon2) ^ 2);
$$ LANGUAGE SQL IMMUTABLE;

CREATE INDEX IF NOT EXISTS idx_bookings_customer_date ON RoomBookings(customerID, bookingDate);
CREATE INDEX IF NOT EXISTS idx_updates_manager ON RoomUpdatesLog(managerID, updateNumber);
CREATE INDEX IF NOT EXISTS idx_repairs_hotel ON RoomRepairs(hotelID);
"""


def create_tables(executor: StatementExecutor) -> None:
    """
    Execute the schema SQL to create all tables and the distance function.
    Safe to call multiple times (uses IF NOT EXISTS / OR REPLACE).
    """
    try:
        executor.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    import config
    from db.session import Session

    session = Session.open(config.DB_HOST, config.DB_PORT, config.DB_NAME, config.DB_USER, config.DB_PASS)
    try:
        create_tables(session.executor)
    finally:
        session.close()
    print("Database schema created successfully.")
