from __future__ import annotations

import logging
from typing import List, Optional

from ..exceptions import InvalidArgumentError
from ..models.store import Store
from ..models.vehicle import Vehicle
from ..utils.constants import MainVehicleType

logger = logging.getLogger(__name__)


class VehicleService:
    """Vehicle catalogue: add, remove, lookup and linear-scan filters."""

    @staticmethod
    def add_vehicle(store: Store, vehicle: Optional[Vehicle]) -> None:
        if vehicle is None:
            raise InvalidArgumentError("Vehicle cannot be null.")
        if vehicle.reg_number in store.vehicles:
            raise InvalidArgumentError("Vehicle with this registration number already exists.")
        store.vehicles[vehicle.reg_number] = vehicle
        logger.debug("Added vehicle %s", vehicle.reg_number)

    @staticmethod
    def remove_vehicle(store: Store, reg_number: str) -> None:
        """
        Remove a vehicle if and only if:
        - it is not referenced by an active rental,
        - it exists.
        """
        if store.is_rented(reg_number):
            raise InvalidArgumentError("Cannot remove vehicle that is currently rented.")
        if reg_number not in store.vehicles:
            raise InvalidArgumentError("Vehicle not found.")
        del store.vehicles[reg_number]
        logger.debug("Removed vehicle %s", reg_number)

    @staticmethod
    def get_vehicle(store: Store, reg_number: str) -> Optional[Vehicle]:
        """Exact lookup by registration number; None on a miss."""
        return store.get_vehicle(reg_number)

    @staticmethod
    def find_by_brand(store: Store, brand: str) -> List[Vehicle]:
        return [v for v in store.vehicles.values() if v.brand == brand]

    @staticmethod
    def find_by_price(store: Store, max_price: float) -> List[Vehicle]:
        """Vehicles whose base daily cost is at most `max_price`."""
        return [v for v in store.vehicles.values() if v.base_cost <= max_price]

    @staticmethod
    def find_available(store: Store) -> List[Vehicle]:
        """Vehicles with no active rental."""
        return [v for v in store.vehicles.values() if not store.is_rented(v.reg_number)]

    @staticmethod
    def list_vehicles(store: Store, kind: Optional[str] = None,
                      main_type: Optional[MainVehicleType] = None) -> List[Vehicle]:
        """
        Enumerate vehicles, optionally narrowed to one variant tag
        (e.g. 'ElectricCar') and/or one main type (e.g. all cars).
        """
        res = list(store.vehicles.values())
        if kind:
            res = [v for v in res if v.kind == kind]
        if main_type is not None:
            res = [v for v in res if v.main_type() == main_type]
        return res
