"""Events in an elevator system."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    """A direction of travel."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class LobbyCall:
    """A button in the elevator lobby on the given floor."""

    direction: Direction
    floor: int


@dataclass(frozen=True)
class CarFloor:
    """A floor button within the car."""

    floor: int


Button = Union[LobbyCall, CarFloor]


@dataclass(frozen=True)
class ButtonPressed:
    """A button was pressed."""

    button: Button


@dataclass(frozen=True)
class CarArrived:
    """The car has arrived at the given floor."""

    floor: int


@dataclass(frozen=True)
class CarDoorOpened:
    """The car's doors have opened."""


@dataclass(frozen=True)
class CarDoorClosed:
    """The car's doors have closed."""


Event = Union[ButtonPressed, CarArrived, CarDoorOpened, CarDoorClosed]


def car_arrived(floor: int) -> Event:
    """The car has arrived on the given floor."""
    return CarArrived(floor)


def car_door_opened() -> Event:
    """The car doors have opened."""
    return CarDoorOpened()


def car_door_closed() -> Event:
    """The car doors have closed."""
    return CarDoorClosed()


def lobby_call_button_pressed(floor: int, direction: Direction) -> Event:
    """A directional button was pressed in a lobby on the given floor."""
    return ButtonPressed(LobbyCall(direction, floor))


def car_floor_button_pressed(floor: int) -> Event:
    """A floor button was pressed in the car."""
    return ButtonPressed(CarFloor(floor))


def _ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def main(argv: list[str] | None = None) -> int:
    """Print a sample trip from the ground floor to the given floor (3)."""
    floor = int(argv[0]) if argv else 3
    place = _ordinal(floor)
    trip = [
        (
            "A ground floor passenger has pressed the up button",
            lobby_call_button_pressed(0, Direction.UP),
        ),
        ("The car has arrived on the ground floor", car_arrived(0)),
        ("The car door opened", car_door_opened()),
        (f"A passenger has pressed the {place} floor button", car_floor_button_pressed(floor)),
        ("The car door closed", car_door_closed()),
        (f"The car has arrived on the {place} floor", car_arrived(floor)),
    ]
    for description, event in trip:
        sys.stdout.write(f"{description}: {event!r}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))