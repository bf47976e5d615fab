from datetime import date
from typing import List, Optional

from ..exceptions import UniqueBookingError
from ..models.booking import Booking
from ..models.customer import Customer
from .base import Repository


class BookingRepository(Repository[Booking]):
    model = Booking
    conflict_error = UniqueBookingError

    def default_order(self) -> list:
        return [Booking.flight_id.asc()]

    def find_by_flight_and_order_date(self, flight_id: int, order_date: date) -> Optional[Booking]:
        return self.db.query(Booking).filter(
            Booking.flight_id == flight_id,
            Booking.order_date == order_date
        ).first()

    def find_by_natural_key(self, flight_id: int, order_date: date) -> Optional[Booking]:
        return self.find_by_flight_and_order_date(flight_id, order_date)

    def find_all_by_flight_id(self, flight_id: int) -> List[Booking]:
        return self._find_all_by(Booking.flight_id, flight_id)

    def find_all_by_order_date(self, order_date: date) -> List[Booking]:
        return self._find_all_by(Booking.order_date, order_date)

    def find_all_by_customer_id(self, customer_id: int) -> List[Booking]:
        return self._find_all_by(Booking.customer_id, customer_id)

    def create(self, booking: Booking, customer: Customer = None) -> Booking:
        """Attach the owning customer, then persist."""
        if customer is not None:
            booking.customer = customer
        return super().create(booking)
