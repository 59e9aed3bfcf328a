from services.hotel_service import HotelService


def test_hotels_near_excludes_exact_radius(executor):
    hotels = HotelService(executor).hotels_near(0.0, 0.0)

    names = hotels.column("hotelName")
    assert names == ["Harbor Inn", "Near Motel"]
    assert "Edge Lodge" not in names
    assert "Corner Suites" not in names


def test_hotels_near_projects_name_and_position(executor):
    hotels = HotelService(executor).hotels_near(50.0, 50.0)

    assert [c.lower() for c in hotels.columns] == ["hotelname", "latitude", "longitude"]
    assert hotels.rows == [["Far Resort", "50.0", "50.0"]]


def test_hotels_near_uses_configured_radius(executor):
    hotels = HotelService(executor, radius=31.0).hotels_near(0.0, 0.0)

    assert len(hotels) == 4


def test_hotels_near_nothing_in_range(executor):
    assert len(HotelService(executor).hotels_near(-500.0, -500.0)) == 0


def test_rooms_of_lists_all_rooms_of_hotel(executor):
    rooms = HotelService(executor).rooms_of(1)

    assert [c.lower() for c in rooms.columns] == ["hotelname", "roomnumber", "price", "imageurl"]
    assert rooms.column("roomNumber") == ["101", "102", "103"]
    assert set(rooms.column("hotelName")) == {"Harbor Inn"}


def test_rooms_of_unknown_hotel_is_empty(executor):
    assert len(HotelService(executor).rooms_of(42)) == 0
