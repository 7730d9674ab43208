from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidArgumentError
from ..utils.constants import CURRENCY, FIELD_SEP
from ..utils.dates import days_between, is_valid_date
from ..utils.filters import fmt_money
from .customer import Customer
from .vehicle import Vehicle


class Rental:
    """
    One vehicle rented by one customer between two 'YYYY-MM-DD' dates.

    The rental only points at the vehicle and customer; the Store owns them
    and refuses to remove either while the rental is active. Day count and
    cost are computed on demand, never stored.
    """

    def __init__(self, vehicle: Optional[Vehicle], customer: Optional[Customer],
                 start_date: str, end_date: str):
        if vehicle is None:
            raise InvalidArgumentError("Vehicle cannot be null.")
        if customer is None:
            raise InvalidArgumentError("Customer cannot be null.")
        if not is_valid_date(start_date):
            raise InvalidArgumentError("Start date must be in format YYYY-MM-DD.")
        if not is_valid_date(end_date):
            raise InvalidArgumentError("End date must be in format YYYY-MM-DD.")
        # fixed-width zero-padded dates compare chronologically as strings
        if end_date <= start_date:
            raise InvalidArgumentError("End date must be later than start date.")

        self.vehicle = vehicle
        self.customer = customer
        self.start_date = start_date
        self.end_date = end_date

    @property
    def reg_number(self) -> str:
        return self.vehicle.reg_number

    @property
    def customer_id(self) -> str:
        return self.customer.customer_id

    def set_end_date(self, end_date: str) -> None:
        if not is_valid_date(end_date):
            raise InvalidArgumentError("End date must be in format YYYY-MM-DD.")
        if end_date <= self.start_date:
            raise InvalidArgumentError("End date must be later than start date.")
        self.end_date = end_date

    def get_rental_days(self) -> int:
        return days_between(self.start_date, self.end_date)

    def calculate_total_cost(self) -> float:
        return self.vehicle.calculate_rent_cost(self.get_rental_days())

    def history_line(self, cost: float) -> str:
        """Archive text written on return: vehicle;customer;start;end;cost."""
        v, c = self.vehicle, self.customer
        return FIELD_SEP.join([
            f"{v.brand} {v.model} ({v.reg_number})",
            f"{c.name} ({c.customer_id})",
            self.start_date,
            self.end_date,
            fmt_money(cost),
        ])

    def to_fields(self) -> list:
        return [self.reg_number, self.customer_id, self.start_date, self.end_date]

    def get_info(self) -> str:
        return (
            f"Rental Details [{self.start_date} - {self.end_date}]:\n"
            f"  Duration: {self.get_rental_days()} days\n"
            f"  Total Cost: {fmt_money(self.calculate_total_cost())} {CURRENCY}\n"
            f"--- Vehicle Info ---\n{self.vehicle.get_info()}\n"
            f"--- Customer Info ---\n{self.customer.get_info()}"
        )

    def __str__(self) -> str:
        return self.get_info()

    def __repr__(self) -> str:
        return (f"Rental(reg_number={self.reg_number!r}, customer_id={self.customer_id!r}, "
                f"start_date={self.start_date!r}, end_date={self.end_date!r})")


@dataclass(frozen=True)
class HistoryEntry:
    """A returned rental as shown to the user, split from its archived line."""
    vehicle: str
    customer: str
    start_date: str
    end_date: str
    cost: str

    @classmethod
    def from_line(cls, line: str) -> Optional[HistoryEntry]:
        """Split an archived line; None when it has fewer than five fields."""
        parts = line.split(FIELD_SEP)
        if len(parts) < 5:
            return None
        return cls(*parts[:5])
