from datetime import date
from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ReferenceNotFoundError
from ..repositories.booking_repository import BookingRepository
from ..repositories.customer_repository import CustomerRepository
from ..validators.booking_validator import BookingValidator
from .base import EntityService, filter_by_two


class CustomerOwnedService(EntityService):
    """
    Service for bookings that belong to a customer.

    The owning Customer is looked up and attached when the booking is created.
    Updates leave the relationship as it is.
    """

    def __init__(self, db: Session, repository, validator, customer_repository: CustomerRepository):
        super().__init__(db, repository, validator)
        self.customer_repository = customer_repository

    def find_by_flight_and_order_date(self, flight_id: int, order_date: date):
        return self.repository.find_by_flight_and_order_date(flight_id, order_date)

    def find_all_by_flight_id(self, flight_id: int) -> list:
        return self.repository.find_all_by_flight_id(flight_id)

    def find_all_by_order_date(self, order_date: date) -> list:
        return self.repository.find_all_by_order_date(order_date)

    def find_all_by_customer_id(self, customer_id: int) -> list:
        return self.repository.find_all_by_customer_id(customer_id)

    def search(self, flight_id: Optional[int] = None, order_date: Optional[date] = None) -> list:
        return filter_by_two(
            self.find_all_ordered,
            self.find_all_by_flight_id,
            self.find_all_by_order_date,
            flight_id,
            order_date,
        )

    def _insert(self, booking):
        customer = self.customer_repository.find_by_id(booking.customer_id)
        if customer is None:
            raise ReferenceNotFoundError(
                "customer_id", f"No customer with the id {booking.customer_id} was found"
            )
        return self.repository.create(booking, customer)


class BookingService(CustomerOwnedService):
    entity_type = "booking"


def build_booking_service(db: Session) -> BookingService:
    repository = BookingRepository(db)
    return BookingService(db, repository, BookingValidator(repository), CustomerRepository(db))


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """FastAPI dependency"""
    return build_booking_service(db)
