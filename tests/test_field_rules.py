"""
Field rule tests

Covers:
- every violation is reported, not just the first
- null fields get the "must not be null" message
- order dates must be strictly after today
- departure and destination must differ (checked after the field rules)
"""

import pytest
from datetime import date, timedelta
from unittest.mock import MagicMock

from travel_booking.exceptions import ConstraintViolationError
from travel_booking.validators.field_rules import (
    BookingRules,
    CustomerRules,
    FlightRules,
    TravelAgentBookingRules,
    EMAIL_MESSAGE,
    NAME_MESSAGE,
    NULL_MESSAGE,
    ORDER_DATE_MESSAGE,
    PHONE_MESSAGE,
    check_field_rules,
)
from travel_booking.validators.flight_validator import FlightValidator, SAME_AIRPORT_MESSAGE


class TestCustomerRules:

    def test_valid_customer_has_no_violations(self, make_customer):
        assert check_field_rules(CustomerRules, make_customer()) == []

    def test_all_violations_reported(self, make_customer):
        customer = make_customer(first_name="J0hn", email="not-an-email", phone_number="12345")

        violations = check_field_rules(CustomerRules, customer)

        fields = {v.field for v in violations}
        assert fields == {"first_name", "email", "phone_number"}

    @pytest.mark.parametrize("email", ["Jane Doe <jane.doe@mail.com>", "<jane.doe@mail.com>", "jane.doe@"])
    def test_email_must_be_a_bare_address(self, make_customer, email):
        violations = check_field_rules(CustomerRules, make_customer(email=email))

        assert [(v.field, v.message) for v in violations] == [("email", EMAIL_MESSAGE)]

    def test_name_messages(self, make_customer):
        violations = check_field_rules(CustomerRules, make_customer(last_name="Smith!"))

        assert len(violations) == 1
        assert violations[0].field == "last_name"
        assert violations[0].message == NAME_MESSAGE

    @pytest.mark.parametrize("name", ["O'Neil", "Smith-Jones", "A"])
    def test_names_with_hyphen_and_apostrophe_allowed(self, make_customer, name):
        assert check_field_rules(CustomerRules, make_customer(last_name=name)) == []

    def test_name_longer_than_25_rejected(self, make_customer):
        violations = check_field_rules(CustomerRules, make_customer(first_name="A" * 26))

        assert [v.field for v in violations] == ["first_name"]

    @pytest.mark.parametrize("phone", ["07123456789", "7123456789"])
    def test_phone_with_optional_leading_zero(self, make_customer, phone):
        assert check_field_rules(CustomerRules, make_customer(phone_number=phone)) == []

    def test_phone_with_letters_rejected(self, make_customer):
        violations = check_field_rules(CustomerRules, make_customer(phone_number="07123abc789"))

        assert violations[0].message == PHONE_MESSAGE

    def test_null_fields_reported_as_null(self, make_customer):
        customer = make_customer(first_name=None, last_name=None, email=None, phone_number=None)

        violations = check_field_rules(CustomerRules, customer)

        assert len(violations) == 4
        assert all(v.message == NULL_MESSAGE for v in violations)


class TestFlightRules:

    def test_valid_flight(self, make_flight):
        assert check_field_rules(FlightRules, make_flight()) == []

    @pytest.mark.parametrize("number", ["ba123", "BA12", "BA1234", "BA-12"])
    def test_bad_flight_numbers(self, make_flight, number):
        violations = check_field_rules(FlightRules, make_flight(flight_number=number))

        assert [v.field for v in violations] == ["flight_number"]

    def test_airport_codes_must_be_three_upper_case_letters(self, make_flight):
        violations = check_field_rules(FlightRules, make_flight(departure="lhr", destination="JF1"))

        assert {v.field for v in violations} == {"departure", "destination"}

    def test_same_departure_and_destination_rejected(self, make_flight):
        repository = MagicMock()
        repository.find_by_natural_key.return_value = None
        validator = FlightValidator(repository)

        with pytest.raises(ConstraintViolationError) as exc_info:
            validator.validate(make_flight(departure="LHR", destination="LHR"))

        assert exc_info.value.reasons == {"destination": SAME_AIRPORT_MESSAGE}
        repository.find_by_natural_key.assert_not_called()

    def test_same_airport_not_checked_while_fields_invalid(self, make_flight):
        repository = MagicMock()
        validator = FlightValidator(repository)

        with pytest.raises(ConstraintViolationError) as exc_info:
            validator.validate(make_flight(flight_number="bad", departure="LHR", destination="LHR"))

        assert set(exc_info.value.reasons) == {"flight_number"}


class TestOrderDate:

    def test_future_date_accepted(self, make_booking):
        assert check_field_rules(BookingRules, make_booking()) == []

    def test_today_rejected(self, make_booking):
        violations = check_field_rules(BookingRules, make_booking(order_date=date.today()))

        assert len(violations) == 1
        assert violations[0].field == "order_date"
        assert violations[0].message == ORDER_DATE_MESSAGE

    def test_past_date_rejected(self, make_booking):
        yesterday = date.today() - timedelta(days=1)

        violations = check_field_rules(BookingRules, make_booking(order_date=yesterday))

        assert [v.field for v in violations] == ["order_date"]

    def test_travel_agent_booking_requires_taxi_and_hotel(self, make_travel_agent_booking):
        booking = make_travel_agent_booking(taxi_id=None, hotel_id=None)

        violations = check_field_rules(TravelAgentBookingRules, booking)

        assert {v.field: v.message for v in violations} == {
            "taxi_id": NULL_MESSAGE,
            "hotel_id": NULL_MESSAGE,
        }
