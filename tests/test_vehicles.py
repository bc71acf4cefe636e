"""Tests for protocol and inheritance based vehicles."""

from media_shelf.vehicles import Direction
from media_shelf.vehicles import FamilyCar
from media_shelf.vehicles import FamilyCarInheritance
from media_shelf.vehicles import Truck
from media_shelf.vehicles import Vehicle
from media_shelf.vehicles import VehicleType


def test_family_car_clamps_speed():
    """Test speed above max is clamped."""
    car = FamilyCar()

    assert car.move(Direction.FORWARD, 15, 30) == 450
    assert car.move(Direction.FORWARD, 15, 60) == 750
    assert car.total_distance_traveled == 1200
    assert car.show_details() == "I am a family car"


def test_negative_speed_is_zero():
    """Test negative speeds do not move the vehicle."""
    truck = Truck()

    assert truck.move(Direction.FORWARD, 10, -5) == 0
    assert truck.total_distance_traveled == 0


def test_backwards_subtracts():
    """Test moving backwards reduces total distance."""
    truck = Truck()

    assert truck.move(Direction.BACKWARDS, 2, 100) == -60
    assert truck.total_distance_traveled == -60
    assert truck.number_of_wheels == 6


def test_inheritance_pins_max_speed():
    """Test subclass max speed ignores assignment."""
    car = FamilyCarInheritance()
    car.max_speed = 200

    assert car.max_speed == 50
    assert car.move(Direction.FORWARD, 15, 60) == 750
    assert car.show_details() == "I am a family car"


def test_base_vehicle_type():
    """Test base class defaults."""
    vehicle = VehicleType()

    assert vehicle.max_speed == 100
    assert vehicle.number_of_wheels == 4
    assert vehicle.move(Direction.FORWARD, 1, 150) == 100
    assert vehicle.show_details() == "I am a vehicle"


def test_all_vehicles_satisfy_protocol():
    """Test protocol conformance with and without inheritance."""
    for vehicle in (FamilyCar(), Truck(), VehicleType(), FamilyCarInheritance()):
        assert isinstance(vehicle, Vehicle)
