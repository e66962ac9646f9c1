"""Tests for resolution attempts and their diagnostic logging."""

from __future__ import annotations

import errno
import unittest

from lazyentry.entry_model import EntryKind, ResolutionOutcome, StatResult, resolve_snapshot


class FixedProbe:
    def __init__(self, result: StatResult) -> None:
        self.result = result
        self.paths: list[str] = []

    def stat(self, path: str) -> StatResult:
        self.paths.append(path)
        return self.result


class ResolveSnapshotTests(unittest.TestCase):
    def test_found_entry_copies_kind_and_attributes(self) -> None:
        probe = FixedProbe(StatResult(kind=EntryKind.FILE, outcome=ResolutionOutcome.FOUND, size=3, mtime_ns=7))

        snapshot = resolve_snapshot("data.txt", probe, clock=lambda: 42.0)

        self.assertTrue(snapshot.exists)
        self.assertIs(snapshot.kind, EntryKind.FILE)
        self.assertEqual(snapshot.size, 3)
        self.assertEqual(snapshot.mtime_ns, 7)
        self.assertEqual(snapshot.observed_at, 42.0)

    def test_path_is_passed_to_probe_verbatim(self) -> None:
        probe = FixedProbe(StatResult(kind=EntryKind.ABSENT, outcome=ResolutionOutcome.ABSENT))
        raw = "Some/Dir/./../Mixed Case/ "

        resolve_snapshot(raw, probe)

        self.assertEqual(probe.paths, [raw])

    def test_denied_outcome_reports_absent_and_logs(self) -> None:
        probe = FixedProbe(
            StatResult(
                kind=EntryKind.ABSENT,
                outcome=ResolutionOutcome.DENIED_OR_UNAVAILABLE,
                error="Permission denied",
                errno=errno.EACCES,
            )
        )

        with self.assertLogs("lazyentry.entry_model.resolver", level="DEBUG") as captured:
            snapshot = resolve_snapshot("/locked/dir", probe)

        self.assertFalse(snapshot.exists)
        self.assertIs(snapshot.kind, EntryKind.ABSENT)
        self.assertIs(snapshot.outcome, ResolutionOutcome.DENIED_OR_UNAVAILABLE)
        self.assertEqual(snapshot.errno, errno.EACCES)
        self.assertIn("Permission denied", captured.output[0])

    def test_malformed_outcome_logs_the_reason(self) -> None:
        probe = FixedProbe(StatResult(kind=EntryKind.ABSENT, outcome=ResolutionOutcome.MALFORMED, error="empty path"))

        with self.assertLogs("lazyentry.entry_model.resolver", level="DEBUG") as captured:
            snapshot = resolve_snapshot("", probe)

        self.assertIs(snapshot.outcome, ResolutionOutcome.MALFORMED)
        self.assertIn("malformed path", captured.output[0])

    def test_non_found_outcome_never_carries_a_present_kind(self) -> None:
        probe = FixedProbe(StatResult(kind=EntryKind.DIRECTORY, outcome=ResolutionOutcome.DENIED_OR_UNAVAILABLE))

        snapshot = resolve_snapshot("x", probe)

        self.assertFalse(snapshot.exists)
        self.assertIs(snapshot.kind, EntryKind.ABSENT)


if __name__ == "__main__":
    unittest.main()
