from datetime import date
from unittest.mock import MagicMock

import pytest
from psycopg2 import errors

from services.booking_service import BookingService
from services.exceptions import RoomNotFound, RoomUnavailable


def count_bookings(db, hotel_id, room_number, day):
    return db.raw.execute(
        "SELECT COUNT(*) FROM RoomBookings WHERE hotelID = ? AND roomNumber = ? AND bookingDate = ?",
        (hotel_id, room_number, day.isoformat()),
    ).fetchone()[0]


def test_book_free_room_shows_up_as_most_recent(executor, add_booking):
    add_booking(2, 1, 102, date(2026, 3, 1))
    service = BookingService(executor)

    booking = service.book_room(2, 1, 101, date(2026, 5, 17))

    assert booking.id is not None
    recent = service.recent_bookings(2)
    assert recent.rows[0] == ["1", "101", "100.0", "2026-05-17"]


def test_double_booking_is_rejected(executor, db):
    service = BookingService(executor)
    day = date(2026, 5, 17)
    service.book_room(2, 1, 101, day)

    with pytest.raises(RoomUnavailable):
        service.book_room(3, 1, 101, day)

    assert count_bookings(db, 1, 101, day) == 1


def test_same_room_number_in_another_hotel_is_independent(executor):
    service = BookingService(executor)
    day = date(2026, 5, 17)
    service.book_room(2, 1, 101, day)

    assert service.book_room(3, 2, 101, day).hotel_id == 2


def test_booking_ids_increase(executor):
    service = BookingService(executor)
    a = service.book_room(2, 1, 101, date(2026, 1, 1))
    b = service.book_room(2, 1, 101, date(2026, 1, 2))

    assert b.id > a.id


def test_booking_missing_room_raises(executor):
    with pytest.raises(RoomNotFound):
        BookingService(executor).book_room(2, 1, 999, date(2026, 1, 1))


def test_is_booked_and_room_exists(executor, add_booking):
    add_booking(2, 1, 101, date(2026, 1, 1))
    service = BookingService(executor)

    assert service.room_exists(1, 101)
    assert not service.room_exists(1, 104)
    assert service.is_booked(1, 101, date(2026, 1, 1))
    assert not service.is_booked(1, 101, date(2026, 1, 2))


def test_recent_bookings_capped_at_five_newest_first(executor, add_booking):
    for day in range(1, 9):
        add_booking(3, 1, 101, date(2026, 2, day))

    recent = BookingService(executor).recent_bookings(3)

    assert len(recent) == 5
    assert recent.column("bookingDate") == [
        "2026-02-08", "2026-02-07", "2026-02-06", "2026-02-05", "2026-02-04",
    ]


def test_recent_bookings_only_for_that_customer(executor, add_booking):
    add_booking(2, 1, 101, date(2026, 2, 1))
    add_booking(3, 1, 102, date(2026, 2, 2))

    recent = BookingService(executor).recent_bookings(2)

    assert recent.rows == [["1", "101", "100.0", "2026-02-01"]]


def test_lost_race_on_unique_constraint_is_reported_as_unavailable():
    executor = MagicMock()
    executor.query_count.side_effect = [1, 0]  # room exists, not booked yet
    executor.execute_returning.side_effect = errors.UniqueViolation("duplicate key")

    with pytest.raises(RoomUnavailable):
        BookingService(executor).book_room(2, 1, 101, date(2026, 1, 1))
