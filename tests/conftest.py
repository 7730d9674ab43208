import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from rental_tracker import create_app
from rental_tracker.models.customer import BusinessCustomer, PrivateCustomer
from rental_tracker.models.store import Store
from rental_tracker.models.vehicle import CombustionCar, ElectricCar, Motorcycle, Truck
from rental_tracker.utils.constants import FuelType, LicenceCategory


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.txt"


@pytest.fixture
def store(data_file):
    """A fresh, empty Store writing to a temporary data file."""
    return Store(data_file)


@pytest.fixture
def app(data_file):
    app = create_app({"TESTING": True, "DATA_FILE": str(data_file), "TIMEZONE": "UTC"})
    yield app


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


class ScriptedConsole:
    """
    Console that answers prompts from a fixed list and records all output.
    Running out of answers fails the test instead of blocking.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self.answers.pop(0)

    def say(self, text=""):
        self.lines.append(text)

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def console_factory():
    return ScriptedConsole


# -------- entity factories --------
def make_car(reg="WA001", brand="Toyota", model="Corolla", base_cost=100.0, **kw):
    fields = dict(mileage=1000.0, licence=LicenceCategory.B, engine_size=1600,
                  fuel_consumption=6.5, fuel_type=FuelType.GASOLINE, doors=5)
    fields.update(kw)
    return CombustionCar(reg_number=reg, brand=brand, model=model, base_cost=base_cost, **fields)


def make_ecar(reg="WA002", brand="Tesla", model="Model 3", base_cost=200.0, **kw):
    fields = dict(mileage=500.0, licence=LicenceCategory.B, battery_capacity=75.0, doors=4)
    fields.update(kw)
    return ElectricCar(reg_number=reg, brand=brand, model=model, base_cost=base_cost, **fields)


def make_truck(reg="WA003", brand="MAN", model="TGL", base_cost=100.0, **kw):
    fields = dict(mileage=20000.0, licence=LicenceCategory.C, engine_size=6900,
                  fuel_consumption=18.5, fuel_type=FuelType.DIESEL, cargo_capacity=500)
    fields.update(kw)
    return Truck(reg_number=reg, brand=brand, model=model, base_cost=base_cost, **fields)


def make_bike(reg="WA004", brand="Yamaha", model="MT-07", base_cost=80.0, **kw):
    fields = dict(mileage=300.0, licence=LicenceCategory.A, engine_size=689,
                  fuel_consumption=4.3, fuel_type=FuelType.GASOLINE)
    fields.update(kw)
    return Motorcycle(reg_number=reg, brand=brand, model=model, base_cost=base_cost, **fields)


def make_private(id_card="ABC123456", name="Jan Kowalski", address="Warszawa, Prosta 1"):
    return PrivateCustomer(name, address, id_card)


def make_business(nip="1234567890", name="Transbud", address="Poznan, Dluga 2"):
    return BusinessCustomer(name, address, nip)
