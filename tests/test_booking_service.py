"""
Booking and travel agent booking service tests

Covers:
- create attaches the owning customer
- missing customer reference
- one booking per flight per order date, on create and update
- update does not move the booking to another owner
"""

import pytest
from datetime import date, timedelta

from travel_booking.exceptions import (
    ConstraintViolationError,
    ReferenceNotFoundError,
    UniqueBookingError,
    UniqueTravelAgentBookingError,
)


@pytest.fixture
def customer(customer_service, make_customer):
    return customer_service.create(make_customer())


class TestBookingService:

    def test_create_attaches_owner(self, booking_service, customer, make_booking):
        booking = booking_service.create(make_booking(customer_id=customer.id))

        assert booking.id is not None
        assert booking.owner_id == customer.id
        assert booking.customer.email == customer.email

    def test_missing_customer_rejected(self, booking_service, make_booking):
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            booking_service.create(make_booking(customer_id=404))

        assert exc_info.value.reasons == {"customer_id": "No customer with the id 404 was found"}
        assert booking_service.find_all_ordered() == []

    def test_same_flight_and_date_rejected(self, booking_service, customer, make_booking):
        booking_service.create(make_booking(customer_id=customer.id))

        with pytest.raises(UniqueBookingError):
            booking_service.create(make_booking(customer_id=customer.id))

    def test_same_flight_other_date_allowed(self, booking_service, customer, make_booking):
        first = booking_service.create(make_booking(customer_id=customer.id))
        later = first.order_date + timedelta(days=1)

        second = booking_service.create(make_booking(customer_id=customer.id, order_date=later))

        assert second.id != first.id

    def test_past_order_date_rejected(self, booking_service, customer, make_booking):
        with pytest.raises(ConstraintViolationError) as exc_info:
            booking_service.create(
                make_booking(customer_id=customer.id, order_date=date.today() - timedelta(days=1))
            )

        assert set(exc_info.value.reasons) == {"order_date"}

    def test_update_keeps_owner(self, booking_service, customer_service, customer, make_booking, make_customer):
        other = customer_service.create(make_customer(email="other@mail.com"))
        booking = booking_service.create(make_booking(customer_id=customer.id))

        updated = booking_service.update(
            make_booking(id=booking.id, customer_id=other.id, flight_id=2)
        )

        assert updated.flight_id == 2
        assert updated.customer_id == other.id
        assert updated.owner_id == customer.id

    def test_update_keeping_own_flight_and_date(self, booking_service, customer, make_booking):
        booking = booking_service.create(make_booking(customer_id=customer.id, flight_id=1))
        order_date = booking.order_date

        updated = booking_service.update(
            make_booking(id=booking.id, customer_id=customer.id, flight_id=1, order_date=order_date)
        )

        assert updated.id == booking.id
        assert updated.natural_key == (1, order_date)
        assert len(booking_service.find_all_ordered()) == 1

    def test_update_onto_taken_flight_and_date_rejected(self, booking_service, customer, make_booking):
        booking_service.create(make_booking(customer_id=customer.id, flight_id=1))
        second = booking_service.create(make_booking(customer_id=customer.id, flight_id=2))

        with pytest.raises(UniqueBookingError):
            booking_service.update(
                make_booking(id=second.id, customer_id=customer.id, flight_id=1)
            )

    def test_find_by_flight_and_order_date(self, booking_service, customer, make_booking):
        booking = booking_service.create(make_booking(customer_id=customer.id, flight_id=3))

        found = booking_service.find_by_flight_and_order_date(3, booking.order_date)

        assert found.id == booking.id
        assert booking_service.find_by_flight_and_order_date(4, booking.order_date) is None

    def test_find_all_by_customer_id(self, booking_service, customer, make_booking):
        booking_service.create(make_booking(customer_id=customer.id, flight_id=1))
        booking_service.create(make_booking(customer_id=customer.id, flight_id=2))

        assert len(booking_service.find_all_by_customer_id(customer.id)) == 2
        assert booking_service.find_all_by_customer_id(customer.id + 1) == []


class TestTravelAgentBookingService:

    def test_round_trip(self, travel_agent_booking_service, customer, make_travel_agent_booking):
        booking = travel_agent_booking_service.create(
            make_travel_agent_booking(customer_id=customer.id)
        )

        found = travel_agent_booking_service.find_by_id(booking.id)

        assert (found.taxi_id, found.hotel_id) == (7, 9)
        assert found.owner_id == customer.id

    def test_same_flight_and_date_rejected(self, travel_agent_booking_service, customer, make_travel_agent_booking):
        travel_agent_booking_service.create(make_travel_agent_booking(customer_id=customer.id))

        with pytest.raises(UniqueTravelAgentBookingError) as exc_info:
            travel_agent_booking_service.create(
                make_travel_agent_booking(customer_id=customer.id, taxi_id=8)
            )

        assert "travel agent booking" in exc_info.value.reasons

    def test_missing_customer_rejected(self, travel_agent_booking_service, make_travel_agent_booking):
        with pytest.raises(ReferenceNotFoundError):
            travel_agent_booking_service.create(make_travel_agent_booking(customer_id=404))

    def test_delete(self, travel_agent_booking_service, customer, make_travel_agent_booking):
        booking = travel_agent_booking_service.create(
            make_travel_agent_booking(customer_id=customer.id)
        )
        booking_id = booking.id

        travel_agent_booking_service.delete(booking)

        assert travel_agent_booking_service.find_by_id(booking_id) is None
