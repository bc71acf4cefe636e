"""Vehicles: the same behavior modelled with a protocol and with inheritance.

FamilyCar and Truck satisfy the Vehicle protocol without sharing a base class.
VehicleType and FamilyCarInheritance get there by subclassing instead, which
forces the subclass to fight the base class's mutable max_speed.
"""

import logging
from enum import Enum
from typing import Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = "forward"
    BACKWARDS = "backwards"


@runtime_checkable
class Vehicle(Protocol):
    """Something with wheels that can move."""

    number_of_wheels: int
    max_speed: float
    total_distance_traveled: float

    def show_details(self) -> str: ...

    def move(self, direction: Direction, duration: float, speed: float) -> float: ...


def travel(vehicle: Vehicle, direction: Direction, duration: float, speed: float) -> float:
    """
    Move a vehicle and update its total distance.

    Speed is clamped to [0, max_speed]. Moving backwards subtracts from the total.

    Args:
        vehicle: Vehicle to move
        direction: Forward or backwards
        duration: Time spent moving
        speed: Requested speed

    Returns:
        Signed distance traveled (negative when moving backwards)
    """
    traveling_speed = float(min(max(speed, 0.0), vehicle.max_speed))
    distance = traveling_speed * duration
    if direction is Direction.BACKWARDS:
        distance = -distance

    vehicle.total_distance_traveled += distance
    logger.info(f"Traveled {distance}")
    return distance


class FamilyCar:
    def __init__(self):
        self.number_of_wheels = 4
        self.max_speed = 50.0
        self.total_distance_traveled = 0.0

    def show_details(self) -> str:
        return "I am a family car"

    def move(self, direction: Direction, duration: float, speed: float) -> float:
        return travel(self, direction, duration, speed)


class Truck:
    def __init__(self):
        self.number_of_wheels = 6
        self.max_speed = 30.0
        self.total_distance_traveled = 0.0

    def show_details(self) -> str:
        return "I am a truck"

    def move(self, direction: Direction, duration: float, speed: float) -> float:
        return travel(self, direction, duration, speed)


class VehicleType:
    """Base class for the inheritance approach."""

    def __init__(self):
        self.number_of_wheels = 4
        self.max_speed = 100.0
        self.total_distance_traveled = 0.0

    def show_details(self) -> str:
        return "I am a vehicle"

    def move(self, direction: Direction, duration: float, speed: float) -> float:
        return travel(self, direction, duration, speed)


class FamilyCarInheritance(VehicleType):
    """Family car built by subclassing; max_speed is pinned to 50."""

    CAR_MAX_SPEED = 50.0

    @property
    def max_speed(self) -> float:
        return self.CAR_MAX_SPEED

    @max_speed.setter
    def max_speed(self, value: float) -> None:
        # Base __init__ assigns 100; ignore it.
        pass

    def show_details(self) -> str:
        return "I am a family car"

    def move(self, direction: Direction, duration: float, speed: float) -> float:
        distance = super().move(direction, duration, speed)
        logger.info(f"Current distance is {self.total_distance_traveled}")
        return distance
