from pydantic import BaseModel, Field
from typing import Optional

from ..models.flight import Flight


class FlightBase(BaseModel):
    flight_number: Optional[str] = Field(None, description="5 upper case letters or digits")
    departure: Optional[str] = Field(None, description="3 letter airport code")
    destination: Optional[str] = Field(None, description="3 letter airport code, not the departure")

    class Config:
        coerce_numbers_to_str = True

    def to_entity(self, id: Optional[int] = None) -> Flight:
        return Flight(id=id, **self.model_dump(exclude={"id"}))


class FlightCreate(FlightBase):
    id: Optional[int] = None


class FlightUpdate(FlightBase):
    id: Optional[int] = None


class FlightResponse(BaseModel):
    id: int
    flight_number: str
    departure: str
    destination: str

    class Config:
        from_attributes = True
