from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError
from ..utils.constants import (
    CURRENCY,
    MAX_REG_LEN,
    FuelType,
    LicenceCategory,
    MainVehicleType,
    VehicleKind,
)
from ..utils.filters import fmt_money, fmt_number


def check_text(value, label: str) -> str:
    """
    Reject empty text and text that would break a data-file line
    (the ';' separator or line breaks).
    """
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{label} cannot be empty.")
    if ";" in value or "\n" in value or "\r" in value:
        raise InvalidArgumentError(f"{label} cannot contain ';' or line breaks.")
    return value


def check_number(value, label: str):
    """Reject NaN and infinities; they cannot be written to the data file."""
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{label} must be a finite number.")
    return value


def to_fuel_type(value) -> FuelType:
    try:
        return FuelType(value)
    except ValueError:
        raise InvalidArgumentError("Invalid fuel type.") from None


def to_licence_category(value) -> LicenceCategory:
    try:
        return LicenceCategory(value)
    except ValueError:
        raise InvalidArgumentError("Invalid licence category.") from None


@dataclass(eq=False)
class Vehicle:
    """
    Base vehicle model. Subclasses define the per-day cost rule, the info
    text and the `kind` tag used by the data file and the display filters.
    Vehicles are identified by registration number only.
    """
    reg_number: str
    brand: str
    model: str
    mileage: float  # km
    base_cost: float  # zl per day
    licence: LicenceCategory

    kind = ""
    label = "Vehicle"

    def __post_init__(self):
        check_text(self.reg_number, "Registration number")
        if len(self.reg_number) > MAX_REG_LEN:
            raise InvalidArgumentError(
                f"Registration number cannot exceed {MAX_REG_LEN} characters.")
        check_text(self.brand, "Brand")
        check_text(self.model, "Model")
        if check_number(self.mileage, "Mileage") < 0:
            raise InvalidArgumentError("Mileage cannot be negative.")
        if check_number(self.base_cost, "Base cost") <= 0:
            raise InvalidArgumentError("Base cost must be positive.")
        self.mileage = float(self.mileage)
        self.base_cost = float(self.base_cost)
        self.licence = to_licence_category(self.licence)

    # ---------- contract ----------
    def calculate_rent_cost(self, days: int) -> float:
        raise NotImplementedError

    def main_type(self) -> MainVehicleType:
        raise NotImplementedError

    def get_info(self) -> str:
        lines = [f"{self.label}: {self.brand} {self.model} [{self.reg_number}]"]
        lines += [f"  {name}: {value}" for name, value in self.info_fields()]
        return "\n".join(lines)

    def info_fields(self) -> list[tuple[str, str]]:
        return [
            ("Mileage", f"{fmt_number(self.mileage)} km"),
            ("Base Cost", f"{fmt_money(self.base_cost)} {CURRENCY}/day"),
            ("Licence", self.licence.label),
        ]

    def to_fields(self) -> list:
        """Field values after the type tag, in data-file order."""
        raise NotImplementedError

    # ---------- setters ----------
    def set_mileage(self, new_mileage: float) -> None:
        if check_number(new_mileage, "Mileage") < 0:
            raise InvalidArgumentError("Mileage cannot be negative.")
        if new_mileage < self.mileage:
            raise InvalidArgumentError("New mileage cannot be lower than current mileage.")
        self.mileage = float(new_mileage)

    def set_base_cost(self, new_cost: float) -> None:
        if check_number(new_cost, "Base cost") <= 0:
            raise InvalidArgumentError("Base cost must be positive.")
        self.base_cost = float(new_cost)

    def __eq__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.reg_number == other.reg_number

    def __hash__(self):
        return hash(self.reg_number)

    def __str__(self) -> str:
        return self.get_info()


@dataclass(eq=False)
class CombustionVehicle(Vehicle):
    """Vehicles with an internal combustion engine."""
    engine_size: int = 0  # cm3
    fuel_consumption: float = 0.0  # L/100km
    fuel_type: FuelType = FuelType.GASOLINE

    def __post_init__(self):
        super().__post_init__()
        if check_number(self.engine_size, "Engine size") <= 0:
            raise InvalidArgumentError("Engine size must be positive.")
        if check_number(self.fuel_consumption, "Fuel consumption") <= 0:
            raise InvalidArgumentError("Fuel consumption must be positive.")
        self.engine_size = int(self.engine_size)
        self.fuel_consumption = float(self.fuel_consumption)
        self.fuel_type = to_fuel_type(self.fuel_type)

    def info_fields(self) -> list[tuple[str, str]]:
        return super().info_fields() + [
            ("Engine", f"{self.engine_size} cm3"),
            ("Fuel", f"{self.fuel_type.label} ({fmt_number(self.fuel_consumption)} L/100km)"),
        ]

    def base_fields(self) -> list:
        return [
            self.brand, self.model, self.reg_number, self.base_cost,
            self.engine_size, self.fuel_consumption, int(self.fuel_type),
            int(self.licence), self.mileage,
        ]

    def set_engine_size(self, size: int) -> None:
        if check_number(size, "Engine size") <= 0:
            raise InvalidArgumentError("Engine size must be positive.")
        self.engine_size = int(size)

    def set_fuel_consumption(self, consumption: float) -> None:
        if check_number(consumption, "Fuel consumption") <= 0:
            raise InvalidArgumentError("Fuel consumption must be positive.")
        self.fuel_consumption = float(consumption)

    def set_fuel_type(self, fuel_type) -> None:
        self.fuel_type = to_fuel_type(fuel_type)


@dataclass(eq=False)
class CombustionCar(CombustionVehicle):
    """Combustion cars bill the base rate and reject non-positive durations."""
    doors: int = 0

    kind = VehicleKind.COMBUSTION_CAR
    label = "Car"

    def __post_init__(self):
        super().__post_init__()
        if self.doors <= 0:
            raise InvalidArgumentError("Number of doors must be positive.")

    def calculate_rent_cost(self, days: int) -> float:
        if days <= 0:
            raise InvalidArgumentError("Rental duration must be positive.")
        return self.base_cost * days

    def main_type(self) -> MainVehicleType:
        return MainVehicleType.CAR

    def info_fields(self) -> list[tuple[str, str]]:
        return super().info_fields() + [("Doors", str(self.doors))]

    def to_fields(self) -> list:
        return self.base_fields() + [self.doors]

    def set_doors(self, num: int) -> None:
        if num <= 0:
            raise InvalidArgumentError("Doors must be positive.")
        self.doors = num


@dataclass(eq=False)
class ElectricCar(Vehicle):
    """
    Electric cars bill the base rate. A non-positive duration costs 0
    instead of raising, unlike combustion cars.
    """
    battery_capacity: float = 0.0  # kWh
    doors: int = 0

    kind = VehicleKind.ELECTRIC_CAR
    label = "Electric Car"

    def __post_init__(self):
        super().__post_init__()
        if check_number(self.battery_capacity, "Battery capacity") <= 0:
            raise InvalidArgumentError("Battery capacity must be positive.")
        if self.doors <= 0:
            raise InvalidArgumentError("Number of doors must be positive.")
        self.battery_capacity = float(self.battery_capacity)

    def calculate_rent_cost(self, days: int) -> float:
        if days <= 0:
            return 0.0
        return self.base_cost * days

    def main_type(self) -> MainVehicleType:
        return MainVehicleType.CAR

    def info_fields(self) -> list[tuple[str, str]]:
        return [("Battery", f"{fmt_number(self.battery_capacity)} kWh")] \
            + super().info_fields() + [("Doors", str(self.doors))]

    def to_fields(self) -> list:
        return [
            self.brand, self.model, self.reg_number, self.base_cost,
            self.battery_capacity, int(self.licence), self.mileage, self.doors,
        ]

    def set_battery_capacity(self, capacity: float) -> None:
        if check_number(capacity, "Battery capacity") <= 0:
            raise InvalidArgumentError("Battery capacity must be positive.")
        self.battery_capacity = float(capacity)

    def set_doors(self, num: int) -> None:
        if num <= 0:
            raise InvalidArgumentError("Doors must be positive.")
        self.doors = num


@dataclass(eq=False)
class Truck(CombustionVehicle):
    """
    Trucks add a cargo surcharge: base * days + cargo * 0.1 * days.
    A non-positive duration costs 0.
    """
    cargo_capacity: int = 0  # kg

    kind = VehicleKind.TRUCK
    label = "Truck"

    def __post_init__(self):
        super().__post_init__()
        if check_number(self.cargo_capacity, "Cargo capacity") <= 0:
            raise InvalidArgumentError("Cargo capacity must be positive.")

    def calculate_rent_cost(self, days: int) -> float:
        if days <= 0:
            return 0.0
        return (self.base_cost * days) + (self.cargo_capacity * 0.1 * days)

    def main_type(self) -> MainVehicleType:
        return MainVehicleType.TRUCK

    def info_fields(self) -> list[tuple[str, str]]:
        return super().info_fields() + [("Cargo Capacity", f"{self.cargo_capacity} kg")]

    def to_fields(self) -> list:
        return self.base_fields() + [self.cargo_capacity]

    def set_cargo_capacity(self, capacity: int) -> None:
        if check_number(capacity, "Cargo capacity") <= 0:
            raise InvalidArgumentError("Cargo capacity must be positive.")
        self.cargo_capacity = capacity


@dataclass(eq=False)
class Motorcycle(CombustionVehicle):
    """Motorcycles follow the combustion car rule."""

    kind = VehicleKind.MOTORCYCLE
    label = "Motorcycle"

    def calculate_rent_cost(self, days: int) -> float:
        if days <= 0:
            raise InvalidArgumentError("Rental duration must be positive.")
        return self.base_cost * days

    def main_type(self) -> MainVehicleType:
        return MainVehicleType.MOTORCYCLE

    def to_fields(self) -> list:
        return self.base_fields()
