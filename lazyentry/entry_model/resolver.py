"""Resolution attempts: one probe call turned into one immutable snapshot."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .probe import StatProbe, StatResult
from .types import EntryKind, MetadataSnapshot, ResolutionOutcome

logger = logging.getLogger(__name__)


def snapshot_from_stat(result: StatResult, observed_at: float) -> MetadataSnapshot:
    """Build a snapshot from a raw probe answer."""
    found = result.outcome is ResolutionOutcome.FOUND
    return MetadataSnapshot(
        exists=found,
        kind=result.kind if found else EntryKind.ABSENT,
        observed_at=observed_at,
        outcome=result.outcome,
        size=result.size,
        mtime_ns=result.mtime_ns,
        is_dangling_link=result.is_dangling_link,
        error=result.error,
        errno=result.errno,
    )


def resolve_snapshot(
    raw_path: str,
    probe: StatProbe,
    clock: Callable[[], float] = time.time,
) -> MetadataSnapshot:
    """Run one resolution attempt for ``raw_path`` exactly as given.

    Never raises for filesystem conditions. Denied and malformed outcomes are
    logged at debug level; the returned snapshot carries the detail.
    """
    result = probe.stat(raw_path)
    snapshot = snapshot_from_stat(result, clock())

    if result.outcome is ResolutionOutcome.DENIED_OR_UNAVAILABLE:
        logger.debug("cannot stat %r (errno=%s): %s", raw_path, result.errno, result.error)
    elif result.outcome is ResolutionOutcome.MALFORMED:
        logger.debug("malformed path %r: %s", raw_path, result.error)
    elif result.is_dangling_link:
        logger.debug("dangling symlink %r", raw_path)
    return snapshot


__all__ = [
    "resolve_snapshot",
    "snapshot_from_stat",
]
