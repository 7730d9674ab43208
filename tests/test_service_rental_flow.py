"""
Rent/return flow: lookups, one active rental per vehicle, mileage update
on return, cost and history archiving.
"""

import pytest

from conftest import make_car, make_private, make_truck
from rental_tracker.exceptions import InvalidArgumentError
from rental_tracker.services import CustomerService, RentalService, VehicleService


@pytest.fixture
def ready(store):
    VehicleService.add_vehicle(store, make_car(reg="CAR1", base_cost=100, mileage=1000))
    VehicleService.add_vehicle(store, make_truck(reg="TRK1", base_cost=100, cargo_capacity=500))
    CustomerService.add_customer(store, make_private(id_card="ABC123456"))
    return store


def test_rent_and_return_bills_three_days(ready):
    rental = RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-01", "2024-01-04")
    assert rental.calculate_total_cost() == pytest.approx(300)
    assert ready.is_rented("CAR1")

    cost = RentalService.return_vehicle(ready, "CAR1", 1350)
    assert cost == pytest.approx(300)
    assert not ready.is_rented("CAR1")
    assert ready.vehicles["CAR1"].mileage == 1350
    assert RentalService.history(ready) == [
        "Toyota Corolla (CAR1);Jan Kowalski (ABC123456);2024-01-01;2024-01-04;300"
    ]


def test_truck_return_includes_cargo_surcharge(ready):
    RentalService.rent_vehicle(ready, "TRK1", "ABC123456", "2024-01-01", "2024-01-04")
    assert RentalService.return_vehicle(ready, "TRK1", 20000) == pytest.approx(450)
    assert RentalService.history_entries(ready)[0].cost == "450"


def test_rent_requires_existing_vehicle_and_customer(ready):
    with pytest.raises(InvalidArgumentError, match="Vehicle not found"):
        RentalService.rent_vehicle(ready, "NOPE", "ABC123456", "2024-01-01", "2024-01-02")
    with pytest.raises(InvalidArgumentError, match="Customer not found"):
        RentalService.rent_vehicle(ready, "CAR1", "NOPE", "2024-01-01", "2024-01-02")
    assert not ready.rentals


def test_vehicle_can_only_be_rented_once(ready):
    RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-01", "2024-01-02")
    with pytest.raises(InvalidArgumentError, match="already rented"):
        RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-03-01", "2024-03-02")
    assert len(ready.rentals) == 1


def test_rent_propagates_date_errors(ready):
    with pytest.raises(InvalidArgumentError, match="later than start"):
        RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-05", "2024-01-05")
    assert not ready.rentals


def test_return_without_rental_fails(ready):
    with pytest.raises(InvalidArgumentError, match="Rental not found"):
        RentalService.return_vehicle(ready, "CAR1", 2000)


def test_lower_mileage_on_return_keeps_rental_open(ready):
    RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-01", "2024-01-02")
    with pytest.raises(InvalidArgumentError, match="lower than current"):
        RentalService.return_vehicle(ready, "CAR1", 999)
    assert ready.is_rented("CAR1")
    assert ready.history == []


def test_change_end_date(ready):
    RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-01", "2024-01-02")
    rental = RentalService.change_end_date(ready, "CAR1", "2024-01-11")
    assert rental.get_rental_days() == 10
    with pytest.raises(InvalidArgumentError):
        RentalService.change_end_date(ready, "TRK1", "2024-01-11")


def test_active_rentals_in_rent_order(ready):
    RentalService.rent_vehicle(ready, "TRK1", "ABC123456", "2024-01-01", "2024-01-02")
    RentalService.rent_vehicle(ready, "CAR1", "ABC123456", "2024-01-01", "2024-01-02")
    assert [r.reg_number for r in RentalService.active_rentals(ready)] == ["TRK1", "CAR1"]
