"""Domain datatypes for cached filesystem-entry metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """What a path resolved to after following symbolic links."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    ABSENT = "absent"


class ResolutionOutcome(Enum):
    """How a resolution attempt ended.

    ``DENIED_OR_UNAVAILABLE`` and ``MALFORMED`` are kept apart from ``ABSENT``
    for diagnostics even though the public handle API reports all three as
    "not present".
    """

    FOUND = "found"
    ABSENT = "absent"
    DENIED_OR_UNAVAILABLE = "denied_or_unavailable"
    MALFORMED = "malformed"


class TargetKind(Enum):
    """Declared target kind of a handle: which entry kind counts as existing."""

    DIRECTORY = "directory"
    FILE = "file"

    def accepts(self, kind: EntryKind) -> bool:
        if self is TargetKind.DIRECTORY:
            return kind is EntryKind.DIRECTORY
        return kind is EntryKind.FILE


@dataclass(frozen=True)
class MetadataSnapshot:
    """Immutable result of one resolution attempt.

    ``exists`` is true when any entry was found, regardless of the declared
    kind of the handle that produced it. ``observed_at`` is wall-clock seconds
    and purely informational.
    """

    exists: bool
    kind: EntryKind
    observed_at: float
    outcome: ResolutionOutcome = ResolutionOutcome.ABSENT
    size: int | None = None
    mtime_ns: int | None = None
    is_dangling_link: bool = False
    error: str | None = None
    errno: int | None = None


__all__ = [
    "EntryKind",
    "ResolutionOutcome",
    "TargetKind",
    "MetadataSnapshot",
]
