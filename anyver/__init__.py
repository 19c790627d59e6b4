"""Heuristic ordering for heterogeneous software version strings.

Exports the comparison entry points, the flag set and the centralized
logging configuration.
"""

from .flags import VersionFlag
from .logging_config import configure_logging  # re-export for convenience
from .versioning import (
    Version,
    compare_versions,
    compare_versions_flags,
    compare_versions_per_side,
    compare_versions_shared,
    sort_versions,
)

__all__ = [
    "Version",
    "VersionFlag",
    "compare_versions",
    "compare_versions_flags",
    "compare_versions_per_side",
    "compare_versions_shared",
    "configure_logging",
    "sort_versions",
]
