"""Space missions, flight tallies and a clock-sized slice."""

import argparse
import enum
import time
from dataclasses import dataclass

_U8_MAX = 255


class Project(enum.Enum):
    APOLLO = "Apollo"
    GEMINI = "Gemini"
    MERCURY = "Mercury"

    def __str__(self):
        return self.value


@dataclass
class Mission:
    """A numbered mission of a project and how many days it flew."""

    project: Project
    number: int
    duration_days: int = 0

    def __setattr__(self, name, value):
        if name in ("number", "duration_days") and not 0 <= value <= _U8_MAX:
            raise ValueError(f"{name} must be in 0..{_U8_MAX}, not {value!r}")
        super().__setattr__(name, value)

    def describe(self):
        """Return a one-line summary of the mission."""
        return f"{self.project} {self.number} flew for {self.duration_days} days"


def project_flights():
    """Return ``(year, flights)`` pairs for the crewed flights of each year."""
    return [(1968, 2), (1969, 4), (1970, 1), (1971, 2), (1972, 2)]


def total_flights(flights):
    """Sum the flight counts; raise OverflowError past an 8-bit total."""
    total = 0
    for _, count in flights:
        total += count
        if total > _U8_MAX:
            raise OverflowError(f"flight total {total} exceeds {_U8_MAX}")
    return total


def flight():
    """Return the Apollo 8 mission."""
    return Mission(Project.APOLLO, 8, 6)


def prefix_by_clock(values, seconds=None):
    """Return the prefix of ``values`` as long as ``seconds`` modulo its length.

    ``seconds`` defaults to the current Unix time in whole seconds.
    """
    if not values:
        raise ValueError("values must not be empty")
    if seconds is None:
        seconds = time.time()
    return values[: int(seconds) % len(values)]


_VALUES = [0, 1, 2, 3, 4, 5, 7, 8, 9, 10]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show mission examples.")
    parser.add_argument(
        "example",
        nargs="?",
        choices=("flights", "split-array", "split-struct", "slice"),
        default="flights",
    )
    args = parser.parse_args(argv)
    if args.example == "flights":
        print(total_flights(project_flights()))
    elif args.example == "split-array":
        missions = [Mission(Project.GEMINI, 2, 0), Mission(Project.GEMINI, 12, 2)]
        print(missions[0].describe())
    elif args.example == "split-struct":
        mission = Mission(Project.GEMINI, 2, 0)
        mission.number = 12
        mission.duration_days = 3
        print(mission.describe())
    else:
        print(prefix_by_clock(_VALUES))
    return 0