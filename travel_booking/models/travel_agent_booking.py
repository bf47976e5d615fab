from sqlalchemy import Column, Integer, Date, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from ..database import Base


class TravelAgentBooking(Base):
    """
    A package booking bundling a flight, a taxi and a hotel.

    Taxi and hotel ids point at resources owned by other services and are
    stored as plain values. The owning Customer is linked the same way as
    for ``Booking``.
    """
    __tablename__ = "travel_agent_booking"

    id = Column(Integer, primary_key=True, autoincrement=True)

    flight_id = Column(Integer, nullable=False)
    taxi_id = Column(Integer, nullable=False)
    hotel_id = Column(Integer, nullable=False)
    customer_id = Column(Integer, nullable=False)
    order_date = Column(Date, nullable=False)

    owner_id = Column(Integer, ForeignKey("customer.id", ondelete="CASCADE"), nullable=True)
    customer = relationship("Customer", back_populates="travel_agent_bookings")

    __table_args__ = (
        UniqueConstraint("flight_id", "order_date", name="uq_travel_agent_booking_flight_order_date"),
        Index("ix_travel_agent_booking_customer_id", "customer_id"),
    )

    @property
    def natural_key(self) -> tuple:
        return (self.flight_id, self.order_date)

    def __repr__(self):
        return f"<TravelAgentBooking flight={self.flight_id} taxi={self.taxi_id} hotel={self.hotel_id} date={self.order_date}>"
