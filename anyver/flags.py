"""Per-side comparison flags.

A comparison takes one flag word for each input. The per-side flags are:

- ``P_IS_PATCH``: a bare ``p`` letter run means post-release ("1.0p1").
- ``ANY_IS_PATCH``: every letter run means post-release.
- ``LOWER_BOUND`` / ``UPPER_BOUND``: the string stands for a pseudo-version
  ordered just below (above) every version it is a prefix of.

The ``*_LEFT`` / ``*_RIGHT`` bits only exist for the combined-word entry
point, see :func:`split_flags`.
"""

from __future__ import annotations

import enum
from typing import Final, Tuple


class VersionFlag(enum.IntFlag):
    NONE = 0
    P_IS_PATCH = 0x1
    ANY_IS_PATCH = 0x2
    LOWER_BOUND = 0x4
    UPPER_BOUND = 0x8

    # Combined-word variants
    P_IS_PATCH_LEFT = 0x10
    P_IS_PATCH_RIGHT = 0x20
    ANY_IS_PATCH_LEFT = 0x40
    ANY_IS_PATCH_RIGHT = 0x80


BOUND_FLAGS: Final[VersionFlag] = VersionFlag.LOWER_BOUND | VersionFlag.UPPER_BOUND


def split_flags(flags: int) -> Tuple[VersionFlag, VersionFlag]:
    """Split a combined flag word into ``(left_flags, right_flags)``.

    Only the ``P_IS_PATCH`` and ``ANY_IS_PATCH`` side variants are honoured;
    bound flags and unsuffixed bits in the combined word are ignored.
    """

    left = VersionFlag.NONE
    right = VersionFlag.NONE
    if flags & VersionFlag.P_IS_PATCH_LEFT:
        left |= VersionFlag.P_IS_PATCH
    if flags & VersionFlag.ANY_IS_PATCH_LEFT:
        left |= VersionFlag.ANY_IS_PATCH
    if flags & VersionFlag.P_IS_PATCH_RIGHT:
        right |= VersionFlag.P_IS_PATCH
    if flags & VersionFlag.ANY_IS_PATCH_RIGHT:
        right |= VersionFlag.ANY_IS_PATCH
    return left, right


__all__ = ["BOUND_FLAGS", "VersionFlag", "split_flags"]
