"""
Line codec for the data file.

Each record is one ';'-separated line starting with a type tag:

  CombustionCar;brand;model;reg;baseCost;engine;fuelCons;fuelCode;licenceCode;mileage;doors
  ElectricCar;brand;model;reg;baseCost;battery;licenceCode;mileage;doors
  Truck;brand;model;reg;baseCost;engine;fuelCons;fuelCode;licenceCode;mileage;cargo
  Motorcycle;brand;model;reg;baseCost;engine;fuelCons;fuelCode;licenceCode;mileage
  PrivateCustomer;name;address;idCard
  BusinessCustomer;name;address;nip

Rental lines carry no tag: reg;customerId;start;end.
Decoders raise InvalidArgumentError for anything they cannot rebuild.
"""

from __future__ import annotations

import math

from ..exceptions import InvalidArgumentError
from ..utils.constants import FIELD_SEP, CustomerKind, VehicleKind
from ..utils.filters import fmt_number
from .customer import BusinessCustomer, Customer, PrivateCustomer
from .vehicle import CombustionCar, ElectricCar, Motorcycle, Truck, Vehicle

# number of fields per tag, tag included
VEHICLE_FIELD_COUNTS = {
    VehicleKind.COMBUSTION_CAR: 11,
    VehicleKind.ELECTRIC_CAR: 9,
    VehicleKind.TRUCK: 11,
    VehicleKind.MOTORCYCLE: 10,
}
CUSTOMER_FIELD_COUNT = 4
RENTAL_FIELD_COUNT = 4


def _join(tag, fields) -> str:
    parts = [tag] if tag else []
    parts += [fmt_number(f) for f in fields]
    return FIELD_SEP.join(parts)


def _to_int(value: str, label: str) -> int:
    """Integers written as decimals ('1598.0') are truncated."""
    try:
        return int(value)
    except ValueError:
        return int(_to_float(value, label))


def _to_float(value: str, label: str) -> float:
    try:
        num = float(value)
    except ValueError:
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}.") from None
    if not math.isfinite(num):
        raise InvalidArgumentError(f"{label} must be a finite number.")
    return num


# -------- encoders --------
def encode_vehicle(vehicle: Vehicle) -> str:
    return _join(vehicle.kind, vehicle.to_fields())


def encode_customer(customer: Customer) -> str:
    return _join(customer.kind, customer.to_fields())


def encode_rental(rental) -> str:
    return _join(None, rental.to_fields())


# -------- decoders --------
def decode_vehicle(line: str) -> Vehicle:
    parts = line.split(FIELD_SEP)
    tag = parts[0]
    expected = VEHICLE_FIELD_COUNTS.get(tag)
    if expected is None:
        raise InvalidArgumentError(f"Unknown vehicle type {tag!r}.")
    if len(parts) < expected:
        raise InvalidArgumentError(f"{tag} record needs {expected} fields, got {len(parts)}.")

    common = dict(
        brand=parts[1],
        model=parts[2],
        reg_number=parts[3],
        base_cost=_to_float(parts[4], "Base cost"),
    )

    if tag == VehicleKind.ELECTRIC_CAR:
        return ElectricCar(
            **common,
            battery_capacity=_to_float(parts[5], "Battery capacity"),
            licence=_to_int(parts[6], "Licence category"),
            mileage=_to_float(parts[7], "Mileage"),
            doors=_to_int(parts[8], "Doors"),
        )

    combustion = dict(
        common,
        engine_size=_to_int(parts[5], "Engine size"),
        fuel_consumption=_to_float(parts[6], "Fuel consumption"),
        fuel_type=_to_int(parts[7], "Fuel type"),
        licence=_to_int(parts[8], "Licence category"),
        mileage=_to_float(parts[9], "Mileage"),
    )
    if tag == VehicleKind.COMBUSTION_CAR:
        return CombustionCar(**combustion, doors=_to_int(parts[10], "Doors"))
    if tag == VehicleKind.TRUCK:
        return Truck(**combustion, cargo_capacity=_to_int(parts[10], "Cargo capacity"))
    return Motorcycle(**combustion)


def decode_customer(line: str) -> Customer:
    parts = line.split(FIELD_SEP)
    tag = parts[0]
    if tag not in (CustomerKind.PRIVATE, CustomerKind.BUSINESS):
        raise InvalidArgumentError(f"Unknown customer type {tag!r}.")
    if len(parts) < CUSTOMER_FIELD_COUNT:
        raise InvalidArgumentError(
            f"{tag} record needs {CUSTOMER_FIELD_COUNT} fields, got {len(parts)}.")
    if tag == CustomerKind.PRIVATE:
        return PrivateCustomer(parts[1], parts[2], parts[3])
    return BusinessCustomer(parts[1], parts[2], parts[3])


def decode_rental(line: str) -> tuple[str, str, str, str]:
    """Split a rental line into (reg, customer_id, start, end)."""
    parts = line.split(FIELD_SEP)
    if len(parts) < RENTAL_FIELD_COUNT:
        raise InvalidArgumentError(
            f"Rental record needs {RENTAL_FIELD_COUNT} fields, got {len(parts)}.")
    reg, customer_id, start, end = parts[:RENTAL_FIELD_COUNT]
    return reg, customer_id, start, end
