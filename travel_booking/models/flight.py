from sqlalchemy import Column, Integer, String, UniqueConstraint

from ..database import Base


class Flight(Base):
    """A scheduled flight. Bookings refer to it by id only (no foreign key)."""
    __tablename__ = "flight"

    id = Column(Integer, primary_key=True, autoincrement=True)

    flight_number = Column(String(5), nullable=False)
    departure = Column(String(3), nullable=False)
    destination = Column(String(3), nullable=False)

    __table_args__ = (
        UniqueConstraint("flight_number", name="uq_flight_flight_number"),
    )

    @property
    def natural_key(self) -> tuple:
        return (self.flight_number,)

    def __repr__(self):
        return f"<Flight {self.flight_number} {self.departure}->{self.destination}>"
