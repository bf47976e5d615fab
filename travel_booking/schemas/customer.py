from pydantic import BaseModel, Field
from typing import Optional

from ..models.customer import Customer


class CustomerBase(BaseModel):
    """
    Request body for a customer.

    Fields are loosely typed on purpose: the field rules (pattern, length,
    email format) are checked by ``CustomerValidator`` so every violation is
    reported together with its field name.
    """
    first_name: Optional[str] = Field(None, description="First name, letters, hyphen or apostrophe")
    last_name: Optional[str] = Field(None, description="Last name, letters, hyphen or apostrophe")
    email: Optional[str] = Field(None, description="Unique email address")
    phone_number: Optional[str] = Field(None, description="10 digits, optional leading 0")

    class Config:
        # 123 becomes "123" and is then judged by the name and phone rules
        coerce_numbers_to_str = True

    def to_entity(self, id: Optional[int] = None) -> Customer:
        return Customer(id=id, **self.model_dump(exclude={"id"}))


class CustomerCreate(CustomerBase):
    # Ignored: the server assigns ids
    id: Optional[int] = None


class CustomerUpdate(CustomerBase):
    id: Optional[int] = None


class CustomerResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str

    class Config:
        from_attributes = True
