"""Version ordering.

Compares two arbitrary version strings without a fixed schema. Each string
is lazily decomposed into units (see :mod:`anyver.tokenizer`) and the two
unit streams are compared pairwise. Exhausted strings keep yielding filler
units, which is what makes ``1 == 1.0 == 1.0.0`` and ``1.0alpha1 < 1.0``.

Every entry point returns -1, 0 or 1 and never fails on string content.

Bounds: a side flagged ``LOWER_BOUND`` (``UPPER_BOUND``) compares strictly
below (above) the literal string and every version that extends it, which
lets callers express open or closed range endpoints with the same ordering.
"""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Iterable, Optional, Tuple, Union

from .config import get_settings
from .flags import BOUND_FLAGS, VersionFlag, split_flags
from .tokenizer import canonical_units, next_component
from .units import Unit, compare_units

_logger = logging.getLogger(__name__)

VersionLike = Union[str, bytes, bytearray]


def _as_text(version: VersionLike) -> str:
    if isinstance(version, str):
        return version
    if isinstance(version, (bytes, bytearray)):
        # One char per byte; non-ASCII bytes end up as separators
        return bytes(version).decode("latin-1")
    raise TypeError(f"version must be str or bytes, got {type(version).__name__}")


def _resolve_strict_errata(strict_errata: Optional[bool]) -> bool:
    if strict_errata is None:
        return get_settings().ERRATA_STRICT
    return strict_errata


def _compare(left: str, right: str, left_flags: int, right_flags: int, strict_errata: bool) -> int:
    left_pos = right_pos = 0
    left_units: Tuple[Unit, ...] = ()
    right_units: Tuple[Unit, ...] = ()

    # Bound sides get one extra round after running out, which yields the bound filler
    left_extra = 1 if left_flags & BOUND_FLAGS else 0
    right_extra = 1 if right_flags & BOUND_FLAGS else 0

    while True:
        if not left_units:
            left_units, left_pos = next_component(
                left, left_pos, left_flags, strict_errata=strict_errata
            )
        if not right_units:
            right_units, right_pos = next_component(
                right, right_pos, right_flags, strict_errata=strict_errata
            )

        shift = min(len(left_units), len(right_units))
        for lu, ru in zip(left_units, right_units):
            res = compare_units(lu, ru)
            if res != 0:
                return res

        # A side that produced two units keeps the second for the next round
        left_units = left_units[shift:]
        right_units = right_units[shift:]

        left_exhausted = left_pos >= len(left) and not left_units
        right_exhausted = right_pos >= len(right) and not right_units

        if left_exhausted and left_extra > 0:
            left_extra -= 1
            left_exhausted = False
        if right_exhausted and right_extra > 0:
            right_extra -= 1
            right_exhausted = False

        if left_exhausted and right_exhausted:
            return 0


def compare_versions_per_side(
    a: VersionLike,
    b: VersionLike,
    a_flags: int = 0,
    b_flags: int = 0,
    *,
    strict_errata: Optional[bool] = None,
) -> int:
    """Compare two versions with independent flags for each side.

    Returns -1 if a < b, 0 if equal, 1 if a > b.

    ``strict_errata`` overrides ``Settings.ERRATA_STRICT`` for this call.
    """

    left = _as_text(a)
    right = _as_text(b)
    result = _compare(left, right, a_flags, b_flags, _resolve_strict_errata(strict_errata))

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "compared versions",
            extra={
                "left": left,
                "right": right,
                "left_flags": int(a_flags),
                "right_flags": int(b_flags),
                "result": result,
            },
        )
    return result


def compare_versions(a: VersionLike, b: VersionLike, *, strict_errata: Optional[bool] = None) -> int:
    """Compare two version strings. Returns -1 if a < b, 0 if equal, 1 if a > b."""
    return compare_versions_per_side(a, b, 0, 0, strict_errata=strict_errata)


def compare_versions_shared(
    a: VersionLike, b: VersionLike, flags: int, *, strict_errata: Optional[bool] = None
) -> int:
    """Compare with the same flags applied to both sides.

    Deprecated: a bound flag on both sides is rarely what callers mean. Use
    :func:`compare_versions_per_side` instead.
    """

    warnings.warn(
        "compare_versions_shared() is deprecated, use compare_versions_per_side()",
        DeprecationWarning,
        stacklevel=2,
    )
    return compare_versions_per_side(a, b, flags, flags, strict_errata=strict_errata)


def compare_versions_flags(
    a: VersionLike, b: VersionLike, flags: int, *, strict_errata: Optional[bool] = None
) -> int:
    """Compare using a combined flag word.

    ``P_IS_PATCH_LEFT``/``ANY_IS_PATCH_LEFT`` apply to ``a`` and the
    ``*_RIGHT`` variants to ``b``.
    """

    a_flags, b_flags = split_flags(flags)
    return compare_versions_per_side(a, b, a_flags, b_flags, strict_errata=strict_errata)


def sort_versions(versions: Iterable[VersionLike], *, reverse: bool = False) -> list[VersionLike]:
    """Return a new list of versions sorted using :func:`compare_versions`.

    The sort is stable: versions comparing equal ("1" and "1.0") keep their
    input order.
    """
    return sorted(versions, key=functools.cmp_to_key(compare_versions), reverse=reverse)


class Version:
    """A version string bundled with its comparison flags.

    Instances order against each other and against plain strings. Equality
    and hashing only consider other ``Version`` instances, so ``"1.0"`` and
    ``Version("1.0")`` are distinct set members.
    """

    __slots__ = ("_version", "_flags")

    def __init__(self, version: VersionLike, flags: int = 0) -> None:
        self._version = _as_text(version)
        self._flags = VersionFlag(flags)

    @classmethod
    def lower_bound(cls, version: VersionLike, flags: int = 0) -> "Version":
        """Pseudo-version just below ``version`` and everything it prefixes."""
        return cls(version, (flags & ~VersionFlag.UPPER_BOUND) | VersionFlag.LOWER_BOUND)

    @classmethod
    def upper_bound(cls, version: VersionLike, flags: int = 0) -> "Version":
        """Pseudo-version just above ``version`` and everything it prefixes."""
        return cls(version, (flags & ~VersionFlag.LOWER_BOUND) | VersionFlag.UPPER_BOUND)

    @property
    def version(self) -> str:
        return self._version

    @property
    def flags(self) -> VersionFlag:
        return self._flags

    def _compare_to(self, other: object) -> Optional[int]:
        if isinstance(other, (str, bytes, bytearray)):
            other = Version(other)
        elif not isinstance(other, Version):
            return None
        return compare_versions_per_side(self._version, other._version, self._flags, other._flags)

    def __eq__(self, other: object) -> bool:
        # Strings never compare equal: they could not share the canonical hash
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        res = self._compare_to(other)
        if res is None:
            return NotImplemented
        return res < 0

    def __le__(self, other: object) -> bool:
        res = self._compare_to(other)
        if res is None:
            return NotImplemented
        return res <= 0

    def __gt__(self, other: object) -> bool:
        res = self._compare_to(other)
        if res is None:
            return NotImplemented
        return res > 0

    def __ge__(self, other: object) -> bool:
        res = self._compare_to(other)
        if res is None:
            return NotImplemented
        return res >= 0

    def __hash__(self) -> int:
        strict = get_settings().ERRATA_STRICT
        return hash(canonical_units(self._version, self._flags, strict_errata=strict))

    def __str__(self) -> str:
        return self._version

    def __repr__(self) -> str:
        if self._flags:
            return f"Version({self._version!r}, flags={self._flags!r})"
        return f"Version({self._version!r})"


__all__ = [
    "Version",
    "compare_versions",
    "compare_versions_flags",
    "compare_versions_per_side",
    "compare_versions_shared",
    "sort_versions",
]
