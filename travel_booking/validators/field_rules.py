"""
Declarative field rules for every entity, expressed as pydantic models.

Entities are checked with ``model_validate(entity, from_attributes=True)``;
pydantic collects the failures of every field in one pass, which gives the
exhaustive violation report the API promises.
"""

import re
from datetime import date
from typing import Annotated, List, Type

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, StringConstraints, ValidationError
from pydantic_core import PydanticCustomError

from ..exceptions import Violation

NAME_PATTERN = re.compile(r"[A-Za-z'-]+")
PHONE_PATTERN = re.compile(r"0?[0-9]{10}")
FLIGHT_NUMBER_PATTERN = re.compile(r"[A-Z0-9]+")
AIRPORT_PATTERN = re.compile(r"[A-Z]+")

NAME_MESSAGE = "Please use a name without numbers or specials, check your spell and retry!"
EMAIL_MESSAGE = "The email address must be in the format of name@domain.com"
PHONE_MESSAGE = "Please use a phone number of 10 digits, optionally starting with 0"
FLIGHT_NUMBER_MESSAGE = "Please use a flight number without specials and low cases"
DEPARTURE_MESSAGE = "Please set a departure without low cases, numbers or specials"
DESTINATION_MESSAGE = "Please set a destination without low cases, numbers or specials"
ORDER_DATE_MESSAGE = "Order dates can not be in the past. Please choose one from the future"
NULL_MESSAGE = "must not be null"


def matches(pattern: re.Pattern, message: str) -> AfterValidator:
    """Whole-string regex check with a readable message."""
    def check(value: str) -> str:
        if not pattern.fullmatch(value):
            raise PydanticCustomError("pattern_mismatch", message)
        return value
    return AfterValidator(check)


def _check_email(value: str) -> str:
    # The whole value must be the address: no "Name <addr>" form
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_format", EMAIL_MESSAGE)
    return value


def _check_future(value: date) -> date:
    # Evaluated at validation time, not at creation time
    if value <= date.today():
        raise PydanticCustomError("future_date", ORDER_DATE_MESSAGE)
    return value


PersonName = Annotated[
    str, StringConstraints(min_length=1, max_length=25), matches(NAME_PATTERN, NAME_MESSAGE)
]
Email = Annotated[str, StringConstraints(min_length=1), AfterValidator(_check_email)]
PhoneNumber = Annotated[str, matches(PHONE_PATTERN, PHONE_MESSAGE)]
FlightNumber = Annotated[
    str, StringConstraints(min_length=5, max_length=5), matches(FLIGHT_NUMBER_PATTERN, FLIGHT_NUMBER_MESSAGE)
]
Departure = Annotated[
    str, StringConstraints(min_length=3, max_length=3), matches(AIRPORT_PATTERN, DEPARTURE_MESSAGE)
]
Destination = Annotated[
    str, StringConstraints(min_length=3, max_length=3), matches(AIRPORT_PATTERN, DESTINATION_MESSAGE)
]
FutureDate = Annotated[date, AfterValidator(_check_future)]


class CustomerRules(BaseModel):
    first_name: PersonName
    last_name: PersonName
    email: Email
    phone_number: PhoneNumber


class FlightRules(BaseModel):
    flight_number: FlightNumber
    departure: Departure
    destination: Destination


class BookingRules(BaseModel):
    flight_id: int
    customer_id: int
    order_date: FutureDate


class TravelAgentBookingRules(BaseModel):
    flight_id: int
    taxi_id: int
    hotel_id: int
    customer_id: int
    order_date: FutureDate


def check_field_rules(rules: Type[BaseModel], entity) -> List[Violation]:
    """
    Run ``rules`` against the attributes of ``entity``.

    Returns every violation found, an empty list when the entity is valid.
    """
    try:
        rules.model_validate(entity, from_attributes=True)
    except ValidationError as e:
        return [_to_violation(error) for error in e.errors()]
    return []


def _to_violation(error: dict) -> Violation:
    field = ".".join(str(part) for part in error["loc"])
    if error["type"] == "missing" or error.get("input", "") is None:
        return Violation(field=field, message=NULL_MESSAGE)
    return Violation(field=field, message=error["msg"])
