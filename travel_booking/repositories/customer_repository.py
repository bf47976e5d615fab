from typing import List, Optional

from ..exceptions import UniqueEmailError
from ..models.customer import Customer
from .base import Repository


class CustomerRepository(Repository[Customer]):
    model = Customer
    conflict_error = UniqueEmailError

    def default_order(self) -> list:
        return [Customer.last_name.asc(), Customer.first_name.asc()]

    def find_by_email(self, email: str) -> Optional[Customer]:
        """If more than one customer has ``email`` only the first is returned."""
        return self.db.query(Customer).filter(Customer.email == email).first()

    def find_by_natural_key(self, email: str) -> Optional[Customer]:
        return self.find_by_email(email)

    def find_all_by_first_name(self, first_name: str) -> List[Customer]:
        return self._find_all_by(Customer.first_name, first_name)

    def find_all_by_last_name(self, last_name: str) -> List[Customer]:
        return self._find_all_by(Customer.last_name, last_name)
