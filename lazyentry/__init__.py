"""Public package surface for lazyentry.

Exports entry handles and their datatypes; ``main`` runs the CLI.
Most implementation lives in ``lazyentry.entry_model``.
"""

from __future__ import annotations

from .entry_model import (
    EntryKind,
    MetadataSnapshot,
    PathEntryHandle,
    ResolutionOutcome,
    TargetKind,
    create,
    directory_handle,
    file_handle,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "EntryKind",
    "MetadataSnapshot",
    "PathEntryHandle",
    "ResolutionOutcome",
    "TargetKind",
    "create",
    "directory_handle",
    "file_handle",
    "main",
]
