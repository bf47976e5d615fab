from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.customer import Customer
from ..repositories.customer_repository import CustomerRepository
from ..validators.customer_validator import CustomerValidator
from .base import EntityService, filter_by_two


class CustomerService(EntityService[Customer]):
    entity_type = "customer"

    def find_by_email(self, email: str) -> Optional[Customer]:
        return self.repository.find_by_email(email)

    def find_all_by_first_name(self, first_name: str) -> List[Customer]:
        return self.repository.find_all_by_first_name(first_name)

    def find_all_by_last_name(self, last_name: str) -> List[Customer]:
        return self.repository.find_all_by_last_name(last_name)

    def search(self, first_name: Optional[str] = None, last_name: Optional[str] = None) -> List[Customer]:
        """All customers by last then first name, or those matching the given names."""
        return filter_by_two(
            self.find_all_ordered,
            self.find_all_by_first_name,
            self.find_all_by_last_name,
            first_name,
            last_name,
        )


def build_customer_service(db: Session) -> CustomerService:
    repository = CustomerRepository(db)
    return CustomerService(db, repository, CustomerValidator(repository))


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """FastAPI dependency"""
    return build_customer_service(db)
