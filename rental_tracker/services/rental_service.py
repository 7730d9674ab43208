"""Rental-related service layer utilities."""

import logging
from typing import List

from ..exceptions import InvalidArgumentError
from ..models.rental import HistoryEntry, Rental
from ..models.store import Store

logger = logging.getLogger(__name__)


class RentalService:
    """
    Rent, return and history operations.
    Cost is delegated to the vehicle's own rule (Vehicle.calculate_rent_cost).
    """

    @staticmethod
    def rent_vehicle(store: Store, reg_number: str, customer_id: str,
                     start_date: str, end_date: str) -> Rental:
        """
        Create an active rental if the vehicle and customer exist and the
        vehicle is not rented already. Date checks happen in Rental itself.
        """
        vehicle = store.get_vehicle(reg_number)
        if vehicle is None:
            raise InvalidArgumentError("Vehicle not found.")
        customer = store.get_customer(customer_id)
        if customer is None:
            raise InvalidArgumentError("Customer not found.")
        if store.is_rented(reg_number):
            raise InvalidArgumentError("Vehicle is already rented.")

        rental = Rental(vehicle, customer, start_date, end_date)
        store.rentals[reg_number] = rental
        logger.debug("Rented %s to %s (%s -> %s)", reg_number, customer_id, start_date, end_date)
        return rental

    @staticmethod
    def return_vehicle(store: Store, reg_number: str, new_mileage: float) -> float:
        """
        Close the active rental of a vehicle and archive it.
        - mileage is updated first; a lower reading raises and the rental stays open
        - the final cost is computed, appended to history and returned
        """
        rental = store.get_rental(reg_number)
        if rental is None:
            raise InvalidArgumentError("Rental not found for this vehicle.")

        rental.vehicle.set_mileage(new_mileage)
        cost = rental.calculate_total_cost()

        store.history.append(rental.history_line(cost))
        del store.rentals[reg_number]
        logger.debug("Returned %s, cost %s", reg_number, cost)
        return cost

    @staticmethod
    def change_end_date(store: Store, reg_number: str, end_date: str) -> Rental:
        rental = store.get_rental(reg_number)
        if rental is None:
            raise InvalidArgumentError("Rental not found for this vehicle.")
        rental.set_end_date(end_date)
        return rental

    @staticmethod
    def active_rentals(store: Store) -> List[Rental]:
        return list(store.rentals.values())

    @staticmethod
    def history(store: Store) -> List[str]:
        return list(store.history)

    @staticmethod
    def history_entries(store: Store) -> List[HistoryEntry]:
        """Archived rentals split for display; malformed lines are left out."""
        out = []
        for line in store.history:
            entry = HistoryEntry.from_line(line)
            if entry is not None:
                out.append(entry)
        return out
