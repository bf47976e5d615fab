from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base


class Customer(Base):
    """A traveller. Email is the natural key."""
    __tablename__ = "customer"

    id = Column(Integer, primary_key=True, autoincrement=True)

    first_name = Column(String(25), nullable=False)
    last_name = Column(String(25), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(11), nullable=False)

    # Deleting a customer removes every booking it owns
    bookings = relationship(
        "Booking",
        back_populates="customer",
        cascade="all, delete-orphan",
    )
    travel_agent_bookings = relationship(
        "TravelAgentBooking",
        back_populates="customer",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_customer_email"),
    )

    @property
    def natural_key(self) -> tuple:
        return (self.email,)

    def __repr__(self):
        return f"<Customer {self.first_name} {self.last_name} - {self.email}>"
