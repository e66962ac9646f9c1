"""Lazily resolved, explicitly refreshed handles on filesystem paths.

A handle stores the caller's path string verbatim and does nothing else until
metadata is read. The first read runs one resolution attempt and caches the
snapshot; every later read returns that snapshot until ``refresh()`` marks the
handle unresolved again. Out-of-band filesystem changes are therefore only
visible after a refresh.
"""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable

from .probe import StatProbe, default_stat_probe
from .resolver import resolve_snapshot
from .types import EntryKind, MetadataSnapshot, TargetKind

PathInput = str | os.PathLike


class PathEntryHandle:
    """Cached existence/kind view of one path for one declared target kind."""

    __slots__ = ("_raw_path", "_target", "_probe", "_clock", "_lock", "_resolved", "_snapshot")

    def __init__(
        self,
        path: PathInput,
        target: TargetKind = TargetKind.DIRECTORY,
        *,
        probe: StatProbe | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._raw_path = os.fsdecode(path)
        self._target = target
        self._probe = probe if probe is not None else default_stat_probe()
        self._clock = clock if clock is not None else time.time
        self._lock = threading.Lock()
        self._resolved = False
        self._snapshot: MetadataSnapshot | None = None

    @property
    def raw_path(self) -> str:
        return self._raw_path

    @property
    def target(self) -> TargetKind:
        return self._target

    @property
    def resolved(self) -> bool:
        """Whether a resolution attempt has happened since the last refresh."""
        with self._lock:
            return self._resolved

    @property
    def full_path(self) -> str:
        """Absolute form of the raw path; string arithmetic only, no stat."""
        return os.path.abspath(self._raw_path)

    @property
    def name(self) -> str:
        stripped = self._raw_path.rstrip(os.sep + (os.altsep or ""))
        if not stripped:
            return self._raw_path
        return os.path.basename(stripped)

    def snapshot(self) -> MetadataSnapshot:
        """Return the cached snapshot, resolving first if unresolved.

        A single caller probes at most once per refresh cycle. Threads that
        make the first read at the same time may each probe; every one of them
        gets a complete snapshot and the last to finish is the one cached.
        """
        with self._lock:
            if self._resolved and self._snapshot is not None:
                return self._snapshot

        fresh = resolve_snapshot(self._raw_path, self._probe, self._clock)
        with self._lock:
            self._snapshot = fresh
            self._resolved = True
        return fresh

    def exists(self) -> bool:
        """Return whether the path held an entry of the declared kind when last resolved."""
        return self._target.accepts(self.snapshot().kind)

    def kind(self) -> EntryKind:
        return self.snapshot().kind

    @property
    def size(self) -> int | None:
        return self.snapshot().size

    @property
    def mtime_ns(self) -> int | None:
        return self.snapshot().mtime_ns

    def refresh(self) -> None:
        """Forget the cached snapshot; the next read resolves again."""
        with self._lock:
            self._resolved = False
            self._snapshot = None

    def make(self) -> None:
        """Create the entry on disk for the declared kind, then invalidate the cache.

        Directories are created with missing parents. Files are created empty;
        an existing file is left untouched. Raises ``OSError`` on failure.
        """
        if self._target is TargetKind.DIRECTORY:
            os.makedirs(self._raw_path, exist_ok=True)
        else:
            with open(self._raw_path, "ab"):
                pass
        self.refresh()

    def remove(self) -> None:
        """Delete the entry for the declared kind, then invalidate the cache.

        Directories must be empty. Raises ``OSError`` on failure.
        """
        if self._target is TargetKind.DIRECTORY:
            os.rmdir(self._raw_path)
        else:
            os.unlink(self._raw_path)
        self.refresh()

    def __fspath__(self) -> str:
        return self._raw_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw_path!r}, target={self._target.value})"


def create(
    path: PathInput,
    target: TargetKind = TargetKind.DIRECTORY,
    *,
    probe: StatProbe | None = None,
    clock: Callable[[], float] | None = None,
) -> PathEntryHandle:
    """Create an unresolved handle; the filesystem is not touched."""
    return PathEntryHandle(path, target, probe=probe, clock=clock)


def directory_handle(path: PathInput, **kwargs) -> PathEntryHandle:
    return create(path, TargetKind.DIRECTORY, **kwargs)


def file_handle(path: PathInput, **kwargs) -> PathEntryHandle:
    return create(path, TargetKind.FILE, **kwargs)


__all__ = [
    "PathEntryHandle",
    "create",
    "directory_handle",
    "file_handle",
]
