from ..exceptions import UniqueEmailError
from .base import EntityValidator
from .field_rules import CustomerRules


class CustomerValidator(EntityValidator):
    """Field rules for a customer plus a unique email."""

    rules = CustomerRules
    conflict_error = UniqueEmailError
