"""
Customer service tests against an in-memory SQLite database

Covers:
- create / read round trip
- duplicate email on create and on update
- update keeping its own email
- delete cascades to the customer's bookings
- delete of an unsaved customer is a no-op
- unique constraint errors from the store map to UniqueEmailError
"""

import pytest
from datetime import date, timedelta

from travel_booking.exceptions import ConstraintViolationError, UniqueEmailError
from travel_booking.models import Booking, Customer, TravelAgentBooking
from travel_booking.repositories import CustomerRepository
from travel_booking.repositories.base import Repository


class TestCustomerCreate:

    def test_round_trip(self, customer_service, make_customer):
        created = customer_service.create(make_customer())

        assert created.id is not None
        found = customer_service.find_by_id(created.id)
        assert found.email == "jane.doe@mail.com"
        assert customer_service.find_by_email("jane.doe@mail.com").id == created.id

    def test_duplicate_email_rejected(self, customer_service, make_customer):
        customer_service.create(make_customer())

        with pytest.raises(UniqueEmailError) as exc_info:
            customer_service.create(make_customer(first_name="John"))

        assert exc_info.value.reasons == {
            "email": "That email is already used, please use a unique email"
        }
        assert len(customer_service.find_all_ordered()) == 1

    def test_invalid_customer_not_stored(self, customer_service, make_customer):
        with pytest.raises(ConstraintViolationError) as exc_info:
            customer_service.create(make_customer(first_name="J0hn", phone_number="1"))

        assert set(exc_info.value.reasons) == {"first_name", "phone_number"}
        assert customer_service.find_all_ordered() == []

    def test_find_missing_returns_none(self, customer_service):
        assert customer_service.find_by_id(404) is None
        assert customer_service.find_by_id(None) is None
        assert customer_service.find_by_email("nobody@mail.com") is None

    def test_list_ordered_by_last_then_first_name(self, customer_service, make_customer):
        customer_service.create(make_customer(first_name="Zoe", last_name="Adams", email="zoe@mail.com"))
        customer_service.create(make_customer(first_name="Amy", last_name="Brown", email="amy@mail.com"))
        customer_service.create(make_customer(first_name="Ann", last_name="Adams", email="ann@mail.com"))

        names = [(c.last_name, c.first_name) for c in customer_service.find_all_ordered()]

        assert names == [("Adams", "Ann"), ("Adams", "Zoe"), ("Brown", "Amy")]


class TestCustomerUpdate:

    def test_update_keeping_own_email(self, customer_service, make_customer):
        created = customer_service.create(make_customer())

        updated = customer_service.update(
            make_customer(id=created.id, first_name="Janet")
        )

        assert updated.id == created.id
        assert updated.first_name == "Janet"
        assert updated.email == "jane.doe@mail.com"

    def test_update_to_another_customers_email_rejected(self, customer_service, make_customer):
        customer_service.create(make_customer(email="first@mail.com"))
        second = customer_service.create(make_customer(email="second@mail.com"))

        with pytest.raises(UniqueEmailError):
            customer_service.update(make_customer(id=second.id, email="first@mail.com"))

        assert customer_service.find_by_id(second.id).email == "second@mail.com"


class TestCustomerDelete:

    def test_delete_cascades_to_bookings(
        self, db, customer_service, booking_service, travel_agent_booking_service,
        make_customer, make_booking, make_travel_agent_booking
    ):
        customer = customer_service.create(make_customer())
        booking_service.create(make_booking(customer_id=customer.id))
        travel_agent_booking_service.create(make_travel_agent_booking(customer_id=customer.id))

        customer_id = customer.id

        customer_service.delete(customer)

        assert customer_service.find_by_id(customer_id) is None
        assert db.query(Booking).count() == 0
        assert db.query(TravelAgentBooking).count() == 0

    def test_delete_without_id_is_noop(self, customer_service, make_customer):
        customer_service.create(make_customer())

        assert customer_service.delete(make_customer(email="other@mail.com")) is None
        assert len(customer_service.find_all_ordered()) == 1


class TestRepositoryBase:

    def test_base_repository_needs_a_natural_key_lookup(self, db):
        with pytest.raises(TypeError):
            Repository(db)


class TestStoreLevelConflict:

    def test_unique_constraint_maps_to_unique_email_error(self, db, make_customer):
        """Two writers can both pass the pre-check; the database still wins."""
        repository = CustomerRepository(db)
        repository.create(make_customer())
        db.commit()

        with pytest.raises(UniqueEmailError):
            repository.create(make_customer(first_name="John"))
        db.rollback()

        assert db.query(Customer).count() == 1
