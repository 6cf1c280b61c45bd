"""Rocket fuel, including the fuel needed to lift the fuel."""

from __future__ import annotations

from typing import Iterable


def fuel_for_mass(mass: int) -> int:
    """Return the fuel for ``mass``, adding fuel for fuel until none is needed."""
    total = 0
    fuel = mass // 3 - 2
    while fuel > 0:
        total += fuel
        fuel = fuel // 3 - 2
    return total


def total_fuel(masses: Iterable[int]) -> int:
    """Return the fuel for all modules together."""
    return sum(fuel_for_mass(mass) for mass in masses)


def solve(text: str) -> int:
    return total_fuel(int(token) for token in text.split())