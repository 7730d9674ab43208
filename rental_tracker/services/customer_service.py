from __future__ import annotations

import logging
from typing import List, Optional

from ..exceptions import InvalidArgumentError
from ..models.customer import Customer
from ..models.store import Store
from ..utils.constants import CustomerType

logger = logging.getLogger(__name__)


class CustomerService:
    """Customer admin operations (add/remove) and lookups."""

    @staticmethod
    def add_customer(store: Store, customer: Optional[Customer]) -> None:
        if customer is None:
            raise InvalidArgumentError("Customer cannot be null.")
        if customer.customer_id in store.customers:
            raise InvalidArgumentError("Customer with this ID already exists.")
        store.customers[customer.customer_id] = customer
        logger.debug("Added customer %s", customer.customer_id)

    @staticmethod
    def remove_customer(store: Store, customer_id: str) -> None:
        if store.customer_has_rentals(customer_id):
            raise InvalidArgumentError("Cannot remove customer who has active rentals.")
        if customer_id not in store.customers:
            raise InvalidArgumentError("Customer not found.")
        del store.customers[customer_id]
        logger.debug("Removed customer %s", customer_id)

    @staticmethod
    def get_customer(store: Store, customer_id: str) -> Optional[Customer]:
        return store.get_customer(customer_id)

    @staticmethod
    def list_customers(store: Store, customer_type: Optional[CustomerType] = None) -> List[Customer]:
        res = list(store.customers.values())
        if customer_type is not None:
            res = [c for c in res if c.get_type() == customer_type]
        return res
