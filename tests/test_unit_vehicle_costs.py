"""
Per-category cost rules and field validation of the vehicle models.
Combustion cars and motorcycles reject non-positive durations, while
electric cars and trucks bill 0 for them.
"""

import pytest

from conftest import make_bike, make_car, make_ecar, make_truck
from rental_tracker.exceptions import InvalidArgumentError
from rental_tracker.utils.constants import MainVehicleType, VehicleKind


def test_base_rate_vehicles_bill_rate_times_days():
    assert make_car(base_cost=100).calculate_rent_cost(3) == pytest.approx(300)
    assert make_ecar(base_cost=100).calculate_rent_cost(3) == pytest.approx(300)
    assert make_bike(base_cost=100).calculate_rent_cost(3) == pytest.approx(300)


def test_truck_adds_cargo_surcharge():
    truck = make_truck(base_cost=100, cargo_capacity=500)
    assert truck.calculate_rent_cost(3) == pytest.approx(100 * 3 + 500 * 0.1 * 3)


@pytest.mark.parametrize("factory", [make_car, make_ecar, make_truck, make_bike])
def test_cost_is_non_negative_and_non_decreasing(factory):
    vehicle = factory()
    costs = [vehicle.calculate_rent_cost(d) for d in range(1, 15)]
    assert all(c >= 0 for c in costs)
    assert costs == sorted(costs)


@pytest.mark.parametrize("factory", [make_car, make_bike])
@pytest.mark.parametrize("days", [0, -1])
def test_combustion_car_and_motorcycle_reject_non_positive_days(factory, days):
    with pytest.raises(InvalidArgumentError):
        factory().calculate_rent_cost(days)


@pytest.mark.parametrize("factory", [make_ecar, make_truck])
@pytest.mark.parametrize("days", [0, -1])
def test_electric_car_and_truck_bill_zero_for_non_positive_days(factory, days):
    assert factory().calculate_rent_cost(days) == 0


@pytest.mark.parametrize("kwargs", [
    {"reg": ""},
    {"reg": "TOOLONG123"},
    {"brand": ""},
    {"model": ""},
    {"base_cost": 0},
    {"mileage": -1},
    {"engine_size": 0},
    {"fuel_consumption": 0},
    {"doors": 0},
    {"fuel_type": 7},
    {"licence": 9},
    {"brand": "Bad;Brand"},
])
def test_combustion_car_constructor_validates(kwargs):
    with pytest.raises(InvalidArgumentError):
        make_car(**kwargs)


def test_other_variants_validate_their_own_fields():
    with pytest.raises(InvalidArgumentError):
        make_ecar(battery_capacity=0)
    with pytest.raises(InvalidArgumentError):
        make_truck(cargo_capacity=0)
    with pytest.raises(InvalidArgumentError):
        make_bike(engine_size=-5)


def test_registration_of_nine_characters_is_accepted():
    assert make_car(reg="ABCDEFGHI").reg_number == "ABCDEFGHI"


def test_set_mileage_never_decreases():
    car = make_car(mileage=1000)
    car.set_mileage(1500)
    assert car.mileage == 1500
    with pytest.raises(InvalidArgumentError):
        car.set_mileage(1499)
    with pytest.raises(InvalidArgumentError):
        car.set_mileage(-1)
    assert car.mileage == 1500


def test_setters_revalidate():
    car, ecar, truck = make_car(), make_ecar(), make_truck()
    for call in (
        lambda: car.set_base_cost(0),
        lambda: car.set_engine_size(0),
        lambda: car.set_fuel_consumption(-2),
        lambda: car.set_doors(0),
        lambda: car.set_fuel_type(5),
        lambda: ecar.set_battery_capacity(0),
        lambda: ecar.set_doors(-1),
        lambda: truck.set_cargo_capacity(0),
    ):
        with pytest.raises(InvalidArgumentError):
            call()

    car.set_base_cost(120)
    truck.set_cargo_capacity(1000)
    ecar.set_battery_capacity(90)
    assert (car.base_cost, truck.cargo_capacity, ecar.battery_capacity) == (120, 1000, 90)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_numbers_must_be_finite(value):
    with pytest.raises(InvalidArgumentError, match="finite"):
        make_car(mileage=value)
    with pytest.raises(InvalidArgumentError, match="finite"):
        make_ecar(base_cost=value)
    with pytest.raises(InvalidArgumentError, match="finite"):
        make_truck(cargo_capacity=value)

    car = make_car(mileage=1000)
    for call in (car.set_mileage, car.set_base_cost, car.set_fuel_consumption):
        with pytest.raises(InvalidArgumentError, match="finite"):
            call(value)
    assert car.mileage == 1000


def test_kind_and_main_type_tags():
    assert (make_car().kind, make_car().main_type()) == (VehicleKind.COMBUSTION_CAR, MainVehicleType.CAR)
    assert (make_ecar().kind, make_ecar().main_type()) == (VehicleKind.ELECTRIC_CAR, MainVehicleType.CAR)
    assert make_truck().main_type() == MainVehicleType.TRUCK
    assert make_bike().main_type() == MainVehicleType.MOTORCYCLE


def test_vehicles_are_equal_by_registration():
    assert make_car(reg="SAME1") == make_ecar(reg="SAME1")
    assert make_car(reg="A1") != make_car(reg="A2")
    assert len({make_car(reg="SAME1"), make_bike(reg="SAME1")}) == 1


def test_info_text():
    info = make_truck(base_cost=100, cargo_capacity=500).get_info()
    assert info.splitlines()[0] == "Truck: MAN TGL [WA003]"
    assert "  Base Cost: 100 zl/day" in info
    assert "  Fuel: Diesel (18.5 L/100km)" in info
    assert info.endswith("  Cargo Capacity: 500 kg")

    ecar = make_ecar().get_info().splitlines()
    assert ecar[0] == "Electric Car: Tesla Model 3 [WA002]"
    assert ecar[1] == "  Battery: 75 kWh"
    assert str(make_bike()) == make_bike().get_info()
    assert "Doors" not in make_bike().get_info()
