from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

from ..models.travel_agent_booking import TravelAgentBooking


class TravelAgentBookingBase(BaseModel):
    flight_id: Optional[int] = Field(None, description="Id of an existing flight")
    taxi_id: Optional[int] = Field(None, description="Taxi booking id from the taxi service")
    hotel_id: Optional[int] = Field(None, description="Hotel booking id from the hotel service")
    customer_id: Optional[int] = Field(None, description="Id of an existing customer")
    order_date: Optional[date] = Field(None, description="Travel date, must be in the future")

    def to_entity(self, id: Optional[int] = None) -> TravelAgentBooking:
        return TravelAgentBooking(id=id, **self.model_dump(exclude={"id"}))


class TravelAgentBookingCreate(TravelAgentBookingBase):
    id: Optional[int] = None


class TravelAgentBookingUpdate(TravelAgentBookingBase):
    id: Optional[int] = None


class TravelAgentBookingResponse(BaseModel):
    id: int
    flight_id: int
    taxi_id: int
    hotel_id: int
    customer_id: int
    order_date: date

    class Config:
        from_attributes = True
