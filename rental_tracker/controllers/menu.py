"""
Interactive text menu.

The shell only talks to a Console (ask/say), so tests can drive it with a
scripted console and the real command uses ClickConsole. Every numeric,
date and yes/no answer is asked again until it is valid; record errors are
reported and the loop carries on.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import click

from ..exceptions import InvalidArgumentError, PersistenceError
from ..models.customer import BusinessCustomer, PrivateCustomer, is_valid_nip
from ..models.store import Store
from ..models.vehicle import CombustionCar, ElectricCar, Motorcycle, Truck
from ..services import CustomerService, PersistenceService, RentalService, VehicleService
from ..utils.constants import (
    CURRENCY,
    DEFAULT_TIMEZONE,
    NIP_LEN,
    RENTAL_SEPARATOR_LINE,
    SEPARATOR_LINE,
    CustomerType,
    FuelType,
    LicenceCategory,
    MainVehicleType,
    VehicleKind,
)
from ..utils.dates import is_valid_date
from ..utils.filters import fmt_money, fmt_number, today_local

MAIN_MENU = """
=== VEHICLE RENTAL SYSTEM ===
1. Add Vehicle
2. Remove Vehicle
3. Show Vehicles
4. Add Customer
5. Remove Customer
6. Show Customers
7. Rent Vehicle
8. Return Vehicle
9. Show Active Rentals
10. Show Rental History
11. Search
12. Save Data
13. Change Rental End Date
0. Exit"""


class Console:
    """Input/output boundary of the shell."""

    def ask(self, prompt: str) -> str:
        raise NotImplementedError

    def say(self, text: str = "") -> None:
        raise NotImplementedError


class ClickConsole(Console):
    """Terminal console; end of input raises click.Abort."""

    def ask(self, prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False, prompt_suffix="")

    def say(self, text: str = "") -> None:
        click.echo(text)


class Shell:
    def __init__(self, store: Store, console: Console, data_file: Optional[str] = None,
                 tz_name: str = DEFAULT_TIMEZONE, today: Optional[Callable[[], str]] = None):
        self.store = store
        self.console = console
        self.data_file = data_file or store.path
        self.today = today or (lambda: today_local(tz_name))
        self.actions: dict[int, Callable[[], None]] = {
            1: self.add_vehicle,
            2: self.remove_vehicle,
            3: self.show_vehicles,
            4: self.add_customer,
            5: self.remove_customer,
            6: self.show_customers,
            7: self.rent_vehicle,
            8: self.return_vehicle,
            9: self.show_rentals,
            10: self.show_history,
            11: self.search,
            12: self.save,
            13: self.change_end_date,
        }

    # ---------- loop ----------
    def run(self) -> None:
        while True:
            self.say(MAIN_MENU)
            choice = self.ask_int("Select option: ")
            if choice == 0:
                self.exit()
                return
            action = self.actions.get(choice)
            if action is None:
                self.say("Invalid option.")
                continue
            try:
                action()
            except (InvalidArgumentError, PersistenceError) as e:
                self.say(f"Operation failed: {e}")

    def say(self, text: str = "") -> None:
        self.console.say(text)

    # ---------- input helpers ----------
    def ask_text(self, prompt: str) -> str:
        while True:
            value = self.console.ask(prompt).strip()
            if value:
                return value
            self.say("Input cannot be empty. Please try again.")

    def ask_int(self, prompt: str, min_value: Optional[int] = None) -> int:
        while True:
            raw = self.console.ask(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self.say("Invalid input. Please enter a valid integer number.")
                continue
            if min_value is not None and value < min_value:
                self.say(f"Invalid input. Value must be at least {min_value}.")
                continue
            return value

    def ask_float(self, prompt: str, min_value: Optional[float] = None) -> float:
        while True:
            raw = self.console.ask(prompt).strip()
            try:
                value = float(raw)
            except ValueError:
                value = math.nan
            if not math.isfinite(value):
                self.say("Invalid input. Please enter a valid decimal number.")
                continue
            if min_value is not None and value < min_value:
                self.say(f"Invalid input. Value must be at least {fmt_number(min_value)}.")
                continue
            return value

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            value = self.console.ask(prompt).strip().lower()
            if value == "y":
                return True
            if value == "n":
                return False
            self.say("Invalid input. Please enter 'y' or 'n'.")

    def ask_date(self, prompt: str, default: Optional[str] = None) -> str:
        while True:
            value = self.console.ask(prompt).strip()
            if not value and default:
                return default
            if is_valid_date(value):
                return value
            self.say("Invalid date format or value. Please use YYYY-MM-DD.")

    def ask_nip(self, prompt: str) -> str:
        while True:
            value = self.console.ask(prompt).strip()
            if is_valid_nip(value):
                return value
            self.say(f"Invalid NIP. It must consist of exactly {NIP_LEN} digits.")

    def ask_fuel_type(self) -> FuelType:
        while True:
            value = self.console.ask("Fuel Type (d - Diesel, p - Petrol): ").strip().lower()
            if value == "d":
                return FuelType.DIESEL
            if value == "p":
                return FuelType.GASOLINE
            self.say("Invalid fuel type.")

    def ask_doors(self) -> int:
        while True:
            doors = self.ask_int("Number of Doors (2-5): ", 2)
            if 2 <= doors <= 5:
                return doors
            self.say("Doors must be between 2 and 5.")

    # ---------- output helpers ----------
    def show_list(self, items, empty_message: str, separator: str = SEPARATOR_LINE) -> None:
        if not items:
            self.say(empty_message)
            return
        for item in items:
            self.say(item.get_info())
            self.say(separator)

    # ---------- vehicles ----------
    def add_vehicle(self) -> None:
        kind = self.ask_int(
            "Select Type:    1.CombustionCar    2.ElectricCar    3.Truck    4.Motorcycle: ", 1)
        if kind > 4:
            self.say("Invalid vehicle type selected.")
            return

        common = dict(
            brand=self.ask_text("Brand: "),
            model=self.ask_text("Model: "),
            reg_number=self.ask_text("Reg Number: "),
            base_cost=self.ask_float(f"Base Price ({CURRENCY}/day): ", 0),
            mileage=self.ask_float("Initial Mileage (km): ", 0),
        )
        try:
            if kind == 1:
                vehicle = CombustionCar(
                    **common,
                    licence=LicenceCategory.B,
                    engine_size=self.ask_int("Engine Displacement (cm^3): ", 0),
                    fuel_consumption=self.ask_float("Fuel Consumption (L/100km): ", 0),
                    fuel_type=self.ask_fuel_type(),
                    doors=self.ask_doors(),
                )
            elif kind == 2:
                vehicle = ElectricCar(
                    **common,
                    licence=LicenceCategory.B,
                    battery_capacity=self.ask_float("Battery Capacity (kWh): ", 0),
                    doors=self.ask_doors(),
                )
            elif kind == 3:
                engine = self.ask_int("Engine Displacement (cm^3): ", 0)
                cargo = self.ask_float("Cargo Capacity (kg): ", 0)
                vehicle = Truck(
                    **common,
                    licence=LicenceCategory.C,
                    engine_size=engine,
                    fuel_consumption=self.ask_float("Fuel Consumption (L/100km): ", 0),
                    fuel_type=self.ask_fuel_type(),
                    cargo_capacity=int(cargo),
                )
            else:
                vehicle = Motorcycle(
                    **common,
                    licence=LicenceCategory.A,
                    engine_size=self.ask_int("Engine Displacement (cm^3): ", 0),
                    fuel_consumption=self.ask_float("Fuel Consumption (L/100km): ", 0),
                    fuel_type=FuelType.GASOLINE,
                )
            VehicleService.add_vehicle(self.store, vehicle)
        except InvalidArgumentError as e:
            self.say(f"Error: {e}")
            return
        self.say("Vehicle added successfully.")

    def remove_vehicle(self) -> None:
        VehicleService.remove_vehicle(self.store, self.ask_text("Reg Number: "))
        self.say("Vehicle removed successfully.")

    def show_vehicles(self) -> None:
        self.say("\nChoose display option:\n1. All Vehicles\n2. Cars\n3. Motorcycles\n4. Trucks")
        choice = self.ask_int("")
        if choice == 1:
            self.say()
            self.show_list(VehicleService.list_vehicles(self.store), "No vehicles in the system.")
        elif choice == 2:
            self.say("\nChoose Car Type:\n1. All Cars\n2. Combustion Cars\n3. Electric Cars")
            car_choice = self.ask_int("")
            self.say()
            if car_choice == 1:
                cars = VehicleService.list_vehicles(self.store, main_type=MainVehicleType.CAR)
                self.show_list(cars, "No cars found.")
            elif car_choice == 2:
                cars = VehicleService.list_vehicles(self.store, kind=VehicleKind.COMBUSTION_CAR)
                self.show_list(cars, "No combustion cars found.")
            elif car_choice == 3:
                cars = VehicleService.list_vehicles(self.store, kind=VehicleKind.ELECTRIC_CAR)
                self.show_list(cars, "No electric cars found.")
            else:
                self.say("Invalid car type.")
        elif choice == 3:
            self.say()
            bikes = VehicleService.list_vehicles(self.store, main_type=MainVehicleType.MOTORCYCLE)
            self.show_list(bikes, "No motorcycles found.")
        elif choice == 4:
            self.say()
            trucks = VehicleService.list_vehicles(self.store, main_type=MainVehicleType.TRUCK)
            self.show_list(trucks, "No trucks found.")
        else:
            self.say("Invalid option.")

    # ---------- customers ----------
    def add_customer(self) -> None:
        kind = self.ask_int("Select Type:   1.Private    2.Business: ")
        if kind not in (1, 2):
            self.say("Invalid customer type selected.")
            return

        name = self.ask_text("Name and Surname: " if kind == 1 else "Company Name: ")
        address = self.ask_text("Address (City, street, house number): ")
        try:
            if kind == 1:
                customer = PrivateCustomer(name, address, self.ask_text("ID Card Number: "))
            else:
                customer = BusinessCustomer(name, address, self.ask_nip("NIP: "))
            CustomerService.add_customer(self.store, customer)
        except InvalidArgumentError as e:
            self.say(f"Error: {e}")
            return
        self.say("Customer added successfully.")

    def remove_customer(self) -> None:
        CustomerService.remove_customer(self.store, self.ask_text("ID: "))
        self.say("Customer removed successfully.")

    def show_customers(self) -> None:
        self.say("\nChoose display option:\n1. All Customers\n2. Private Customers\n"
                 "3. Business Customers")
        choice = self.ask_int("")
        if choice == 1:
            self.say()
            self.show_list(CustomerService.list_customers(self.store),
                           "No customers in the system.")
        elif choice == 2:
            self.say()
            self.show_list(CustomerService.list_customers(self.store, CustomerType.PRIVATE),
                           "No private customers found.")
        elif choice == 3:
            self.say()
            self.show_list(CustomerService.list_customers(self.store, CustomerType.BUSINESS),
                           "No business customers found.")
        else:
            self.say("Invalid option.")

    # ---------- rentals ----------
    def rent_vehicle(self) -> None:
        reg = self.ask_text("Vehicle Reg: ")
        customer_id = self.ask_text("Customer ID: ")
        today = self.today()
        start = self.ask_date(f"Start (YYYY-MM-DD) [{today}]: ", default=today)
        end = self.ask_date("End (YYYY-MM-DD): ")
        RentalService.rent_vehicle(self.store, reg, customer_id, start, end)
        self.say("Vehicle rented successfully.")

    def return_vehicle(self) -> None:
        reg = self.ask_text("Vehicle Reg: ")
        mileage = self.ask_float("New Mileage (km): ", 0)
        cost = RentalService.return_vehicle(self.store, reg, mileage)
        self.say(f"Vehicle returned. Total Cost: {fmt_money(cost)} {CURRENCY}")

    def change_end_date(self) -> None:
        reg = self.ask_text("Vehicle Reg: ")
        end = self.ask_date("New End (YYYY-MM-DD): ")
        rental = RentalService.change_end_date(self.store, reg, end)
        self.say(f"Rental end date updated. Duration: {rental.get_rental_days()} days")

    def show_rentals(self) -> None:
        self.say()
        self.show_list(RentalService.active_rentals(self.store), "No active rentals.",
                       separator=RENTAL_SEPARATOR_LINE)

    def show_history(self) -> None:
        if not self.store.history:
            self.say("No rental history.")
            return
        self.say("=== Rental History ===")
        for entry in RentalService.history_entries(self.store):
            self.say(f"Vehicle: {entry.vehicle}\n"
                     f"Customer: {entry.customer}\n"
                     f"Period: {entry.start_date} - {entry.end_date}\n"
                     f"Cost: {entry.cost} {CURRENCY}")
            self.say(SEPARATOR_LINE)

    # ---------- search ----------
    def search(self) -> None:
        self.say("\n=== SEARCH ===\n1. Vehicle by Registration\n2. Vehicles by Brand\n"
                 "3. Customer by ID\n4. Vehicles by Max Price\n5. Available Vehicles")
        choice = self.ask_int("Select option: ")
        if choice == 1:
            vehicle = VehicleService.get_vehicle(self.store, self.ask_text("Enter Registration: "))
            if vehicle:
                self.say(f"\n{vehicle.get_info()}")
            else:
                self.say("Vehicle not found.")
        elif choice == 2:
            brand = self.ask_text("Enter Brand: ")
            results = VehicleService.find_by_brand(self.store, brand)
            if results:
                self.say()
            self.show_list(results, f"No vehicles found for brand: {brand}")
        elif choice == 3:
            customer = CustomerService.get_customer(
                self.store, self.ask_text("Enter Customer ID (NIP/ID Card): "))
            if customer:
                self.say(customer.get_info())
            else:
                self.say("Customer not found.")
        elif choice == 4:
            max_price = self.ask_float("Enter Max Price: ", 0)
            results = VehicleService.find_by_price(self.store, max_price)
            if results:
                self.say()
            self.show_list(results, "No vehicles found within this price range.")
        elif choice == 5:
            results = VehicleService.find_available(self.store)
            if results:
                self.say()
            self.show_list(results, "No available vehicles at the moment.")
        else:
            self.say("Invalid option.")

    # ---------- persistence ----------
    def save(self) -> None:
        PersistenceService.save(self.store, self.data_file)
        self.say("Saved.")

    def exit(self) -> None:
        if self.ask_yes_no("Do you want to save data before exiting? (y/n): "):
            try:
                PersistenceService.save(self.store, self.data_file)
                self.say("Data saved.")
            except PersistenceError as e:
                self.say(f"Operation failed: {e}")
        self.say("Exiting...")
