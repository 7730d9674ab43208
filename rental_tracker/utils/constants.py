# rental_tracker/utils/constants.py

"""
Global constants for record tags, enumerations and file defaults.
These constants are imported by models, services and the shell.
"""

from enum import Enum, IntEnum

# Date format (used for rental start/end)
DATE_FMT = "%Y-%m-%d"
DATE_LEN = 10

DEFAULT_DATA_FILE = "data.txt"
DEFAULT_TIMEZONE = "Europe/Warsaw"
CURRENCY = "zl"

FIELD_SEP = ";"
MAX_REG_LEN = 9
NIP_LEN = 10


class VehicleKind:
    COMBUSTION_CAR = "CombustionCar"
    ELECTRIC_CAR = "ElectricCar"
    TRUCK = "Truck"
    MOTORCYCLE = "Motorcycle"


class CustomerKind:
    PRIVATE = "PrivateCustomer"
    BUSINESS = "BusinessCustomer"


class MainVehicleType(Enum):
    CAR = "Car"
    TRUCK = "Truck"
    MOTORCYCLE = "Motorcycle"


class CustomerType(Enum):
    PRIVATE = "Private"
    BUSINESS = "Business"


# Integer values are the codes written to the data file.
class FuelType(IntEnum):
    GASOLINE = 0
    DIESEL = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


class LicenceCategory(IntEnum):
    A = 0
    B = 1
    C = 2

    @property
    def label(self) -> str:
        return self.name


# --- Misc ---
SEPARATOR_LINE = "-----------------"
RENTAL_SEPARATOR_LINE = "================="
