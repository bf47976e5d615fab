from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

from ..models.booking import Booking


class BookingBase(BaseModel):
    flight_id: Optional[int] = Field(None, description="Id of an existing flight")
    customer_id: Optional[int] = Field(None, description="Id of an existing customer")
    order_date: Optional[date] = Field(None, description="Travel date, must be in the future")

    def to_entity(self, id: Optional[int] = None) -> Booking:
        return Booking(id=id, **self.model_dump(exclude={"id"}))


class BookingCreate(BookingBase):
    id: Optional[int] = None


class BookingUpdate(BookingBase):
    id: Optional[int] = None


class BookingResponse(BaseModel):
    id: int
    flight_id: int
    customer_id: int
    order_date: date

    class Config:
        from_attributes = True
