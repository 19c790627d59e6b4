"""Comparable building blocks: component values and units.

A version string is decomposed into a flat stream of *units*, each an
ordered triple of *component values*. Component values are tagged so the
bound markers and the "absent" slot never collide with real numbers:

    LOWER_BOUND < ABSENT < VALUE(0) <= VALUE(n) <= VALUE(COMPONENT_MAX) < UPPER_BOUND

Both types are tuples, so ordering is plain lexicographic tuple ordering.
"""

from __future__ import annotations

import enum
from typing import Final, NamedTuple

from .flags import VersionFlag

# Saturation ceiling for numeric runs (signed 64-bit maximum)
COMPONENT_MAX: Final[int] = 2**63 - 1


class ComponentKind(enum.IntEnum):
    LOWER_BOUND = 0
    ABSENT = 1
    VALUE = 2
    UPPER_BOUND = 3


class Component(NamedTuple):
    """A single tagged slot of a unit. ``value`` only matters for ``VALUE``."""

    kind: ComponentKind
    value: int = 0

    @classmethod
    def of(cls, value: int) -> "Component":
        return cls(ComponentKind.VALUE, value)

    def __repr__(self) -> str:
        if self.kind is ComponentKind.VALUE:
            return repr(self.value)
        return self.kind.name


ABSENT: Final[Component] = Component(ComponentKind.ABSENT)
LOWER: Final[Component] = Component(ComponentKind.LOWER_BOUND)
UPPER: Final[Component] = Component(ComponentKind.UPPER_BOUND)
ZERO: Final[Component] = Component.of(0)


class Unit(NamedTuple):
    """Atomic comparable element: (number, letter, trailing number)."""

    primary: Component
    secondary: Component = ABSENT
    tertiary: Component = ABSENT


PLAIN_FILLER: Final[Unit] = Unit(ZERO, ABSENT, ABSENT)
LOWER_FILLER: Final[Unit] = Unit(LOWER, LOWER, LOWER)
UPPER_FILLER: Final[Unit] = Unit(UPPER, UPPER, UPPER)


def filler_unit(flags: int) -> Unit:
    """Unit emitted once a string has no characters left."""
    if flags & VersionFlag.LOWER_BOUND:
        return LOWER_FILLER
    if flags & VersionFlag.UPPER_BOUND:
        return UPPER_FILLER
    return PLAIN_FILLER


def compare_units(u1: Unit, u2: Unit) -> int:
    return (u1 > u2) - (u1 < u2)


__all__ = [
    "ABSENT",
    "COMPONENT_MAX",
    "Component",
    "ComponentKind",
    "LOWER",
    "LOWER_FILLER",
    "PLAIN_FILLER",
    "UPPER",
    "UPPER_FILLER",
    "Unit",
    "ZERO",
    "compare_units",
    "filler_unit",
]
