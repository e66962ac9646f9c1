"""Domain model for cached filesystem-entry metadata.

This package contains the non-CLI primitives:
- entry/outcome kinds and the immutable metadata snapshot
- the platform stat probe (the only OS-facing call)
- resolution attempts that turn one probe answer into one snapshot
- lazily resolved, explicitly refreshed path handles
"""

from __future__ import annotations

from .types import EntryKind, MetadataSnapshot, ResolutionOutcome, TargetKind
from .probe import (
    PosixStatProbe,
    StatProbe,
    StatResult,
    WindowsStatProbe,
    default_stat_probe,
    stat_entry,
)
from .resolver import resolve_snapshot, snapshot_from_stat
from .handle import PathEntryHandle, create, directory_handle, file_handle

__all__ = [
    "EntryKind",
    "MetadataSnapshot",
    "ResolutionOutcome",
    "TargetKind",
    "StatProbe",
    "StatResult",
    "PosixStatProbe",
    "WindowsStatProbe",
    "default_stat_probe",
    "stat_entry",
    "resolve_snapshot",
    "snapshot_from_stat",
    "PathEntryHandle",
    "create",
    "directory_handle",
    "file_handle",
]
