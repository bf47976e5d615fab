from datetime import date
from typing import List, Optional

from ..exceptions import UniqueTravelAgentBookingError
from ..models.customer import Customer
from ..models.travel_agent_booking import TravelAgentBooking
from .base import Repository


class TravelAgentBookingRepository(Repository[TravelAgentBooking]):
    model = TravelAgentBooking
    conflict_error = UniqueTravelAgentBookingError

    def default_order(self) -> list:
        return [TravelAgentBooking.flight_id.asc()]

    def find_by_flight_and_order_date(self, flight_id: int, order_date: date) -> Optional[TravelAgentBooking]:
        return self.db.query(TravelAgentBooking).filter(
            TravelAgentBooking.flight_id == flight_id,
            TravelAgentBooking.order_date == order_date
        ).first()

    def find_by_natural_key(self, flight_id: int, order_date: date) -> Optional[TravelAgentBooking]:
        return self.find_by_flight_and_order_date(flight_id, order_date)

    def find_all_by_flight_id(self, flight_id: int) -> List[TravelAgentBooking]:
        return self._find_all_by(TravelAgentBooking.flight_id, flight_id)

    def find_all_by_order_date(self, order_date: date) -> List[TravelAgentBooking]:
        return self._find_all_by(TravelAgentBooking.order_date, order_date)

    def find_all_by_customer_id(self, customer_id: int) -> List[TravelAgentBooking]:
        return self._find_all_by(TravelAgentBooking.customer_id, customer_id)

    def create(self, booking: TravelAgentBooking, customer: Customer = None) -> TravelAgentBooking:
        if customer is not None:
            booking.customer = customer
        return super().create(booking)
