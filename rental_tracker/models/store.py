from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..utils.constants import DEFAULT_DATA_FILE
from .customer import Customer
from .rental import Rental
from .vehicle import Vehicle

# ---- Paths ----
DEFAULT_DATA_PATH = Path(DEFAULT_DATA_FILE)


class Store:
    """
    In-memory owner of every record.

    - vehicles: registration number -> Vehicle
    - customers: customer id -> Customer
    - rentals: registration number -> active Rental (one per vehicle)
    - history: archived rental lines, append-only

    Dicts keep insertion order, so listings come back in the order records
    were added. Rules (uniqueness, removal guards) live in the services.
    """

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path or DEFAULT_DATA_PATH)
        self.vehicles: dict[str, Vehicle] = {}
        self.customers: dict[str, Customer] = {}
        self.rentals: dict[str, Rental] = {}
        self.history: list[str] = []

    def reset(self) -> None:
        """Drop all records (used before loading a file)."""
        self.rentals.clear()
        self.vehicles.clear()
        self.customers.clear()
        self.history.clear()

    # ---------- Lookups ----------
    def get_vehicle(self, reg_number: str) -> Optional[Vehicle]:
        return self.vehicles.get(reg_number)

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.customers.get(customer_id)

    def get_rental(self, reg_number: str) -> Optional[Rental]:
        """Active rental for a vehicle, if any."""
        return self.rentals.get(reg_number)

    def is_rented(self, reg_number: str) -> bool:
        return reg_number in self.rentals

    def customer_has_rentals(self, customer_id: str) -> bool:
        return any(r.customer_id == customer_id for r in self.rentals.values())

    def summary(self) -> str:
        return (f"vehicles={len(self.vehicles)}, customers={len(self.customers)}, "
                f"rentals={len(self.rentals)}, history={len(self.history)}")
