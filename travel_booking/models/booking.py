from sqlalchemy import Column, Integer, Date, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from ..database import Base


class Booking(Base):
    """
    A flight booking.

    ``customer_id`` is the id the client sent; ``owner_id`` is the foreign key
    to the Customer row, attached by the service when the booking is created
    and left alone by updates.
    """
    __tablename__ = "booking"

    id = Column(Integer, primary_key=True, autoincrement=True)

    flight_id = Column(Integer, nullable=False)
    customer_id = Column(Integer, nullable=False)
    order_date = Column(Date, nullable=False)

    owner_id = Column(Integer, ForeignKey("customer.id", ondelete="CASCADE"), nullable=True)
    customer = relationship("Customer", back_populates="bookings")

    __table_args__ = (
        UniqueConstraint("flight_id", "order_date", name="uq_booking_flight_order_date"),
        Index("ix_booking_customer_id", "customer_id"),
    )

    @property
    def natural_key(self) -> tuple:
        return (self.flight_id, self.order_date)

    def __repr__(self):
        return f"<Booking flight={self.flight_id} date={self.order_date}>"
