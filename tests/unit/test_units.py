import pytest

from anyver.flags import VersionFlag
from anyver.units import (
    ABSENT,
    COMPONENT_MAX,
    LOWER,
    LOWER_FILLER,
    PLAIN_FILLER,
    UPPER,
    UPPER_FILLER,
    ZERO,
    Component,
    Unit,
    compare_units,
    filler_unit,
)


def test_component_total_order():
    ordered = [LOWER, ABSENT, ZERO, Component.of(1), Component.of(COMPONENT_MAX), UPPER]
    assert ordered == sorted(reversed(ordered))
    for lo, hi in zip(ordered, ordered[1:]):
        assert lo < hi


def test_component_repr():
    assert repr(Component.of(7)) == "7"
    assert repr(ABSENT) == "ABSENT"


@pytest.mark.parametrize(
    "u1,u2,expected",
    [
        (Unit(Component.of(1)), Unit(Component.of(1)), 0),
        (Unit(Component.of(1)), Unit(Component.of(2)), -1),
        (Unit(ZERO, Component.of(97)), Unit(ZERO), 1),
        (Unit(ZERO, ABSENT, Component.of(1)), Unit(ZERO, ABSENT, Component.of(2)), -1),
        # First field dominates the rest
        (Unit(ABSENT, Component.of(122), Component.of(9)), Unit(ZERO), -1),
    ],
)
def test_compare_units(u1: Unit, u2: Unit, expected: int):
    assert compare_units(u1, u2) == expected
    assert compare_units(u2, u1) == -expected


def test_fillers_by_flags():
    assert filler_unit(0) == PLAIN_FILLER == Unit(ZERO, ABSENT, ABSENT)
    assert filler_unit(VersionFlag.LOWER_BOUND) == LOWER_FILLER
    assert filler_unit(VersionFlag.UPPER_BOUND) == UPPER_FILLER
    # Lower bound takes precedence when both are given
    assert filler_unit(VersionFlag.LOWER_BOUND | VersionFlag.UPPER_BOUND) == LOWER_FILLER


def test_bound_fillers_enclose_any_unit():
    unit = Unit(Component.of(COMPONENT_MAX), Component.of(COMPONENT_MAX), Component.of(COMPONENT_MAX))
    assert compare_units(LOWER_FILLER, Unit(ABSENT, ABSENT, ABSENT)) == -1
    assert compare_units(unit, UPPER_FILLER) == -1
