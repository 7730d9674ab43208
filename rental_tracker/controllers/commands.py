from __future__ import annotations

import click
from flask import Blueprint, current_app

from ..exceptions import PersistenceError
from ..models.customer import BusinessCustomer, PrivateCustomer
from ..models.store import Store
from ..models.vehicle import CombustionCar, ElectricCar, Motorcycle, Truck
from ..services import CustomerService, PersistenceService, VehicleService
from ..services.common import _store
from ..utils.constants import FuelType, LicenceCategory
from .menu import ClickConsole, Shell

bp = Blueprint("commands", __name__, cli_group=None)


def _save_or_fail(store: Store) -> None:
    try:
        PersistenceService.save(store)
    except PersistenceError as e:
        raise click.ClickException(str(e)) from e


@bp.cli.command("menu")
def menu_command():
    """Load the data file and open the interactive menu."""
    store = _store()
    click.echo("Loading data...")
    PersistenceService.load(store)
    click.echo("Data loaded.")

    shell = Shell(store, ClickConsole(), data_file=store.path,
                  tz_name=current_app.config["TIMEZONE"])
    shell.run()


def seed_store(store: Store) -> None:
    """Add a small demo fleet and two customers."""
    VehicleService.add_vehicle(store, CombustionCar(
        reg_number="WA12345", brand="Toyota", model="Corolla", mileage=45000,
        base_cost=150, licence=LicenceCategory.B, engine_size=1598,
        fuel_consumption=6.5, fuel_type=FuelType.GASOLINE, doors=5,
    ))
    VehicleService.add_vehicle(store, ElectricCar(
        reg_number="KR5E001", brand="Tesla", model="Model 3", mileage=12000,
        base_cost=300, licence=LicenceCategory.B, battery_capacity=75, doors=4,
    ))
    VehicleService.add_vehicle(store, Truck(
        reg_number="PO77TR1", brand="MAN", model="TGL", mileage=180000,
        base_cost=400, licence=LicenceCategory.C, engine_size=6871,
        fuel_consumption=18.5, fuel_type=FuelType.DIESEL, cargo_capacity=8000,
    ))
    VehicleService.add_vehicle(store, Motorcycle(
        reg_number="GD9M42", brand="Yamaha", model="MT-07", mileage=8000,
        base_cost=120, licence=LicenceCategory.A, engine_size=689,
        fuel_consumption=4.3, fuel_type=FuelType.GASOLINE,
    ))
    CustomerService.add_customer(store, PrivateCustomer(
        "Jan Kowalski", "Warszawa, Marszalkowska 1", "ABC123456"))
    CustomerService.add_customer(store, BusinessCustomer(
        "Transbud Sp. z o.o.", "Poznan, Glogowska 10", "7791234567"))


@bp.cli.command("seed")
def seed_command():
    """Fill an empty data file with demo vehicles and customers."""
    store = _store()
    PersistenceService.load(store)
    if store.vehicles or store.customers:
        click.echo("Data file already has records; nothing to seed.")
        return

    seed_store(store)
    _save_or_fail(store)
    click.echo(f"Seed complete: {store.summary()}")


@bp.cli.command("reset-data")
def reset_data_command():
    """Clear all vehicles, customers, rentals and history from the data file."""
    store = _store()
    store.reset()
    _save_or_fail(store)
    click.echo(f"{store.path} has been cleared.")
