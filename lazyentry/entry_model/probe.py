"""Filesystem stat collaborator used by resolution attempts.

This is the only module that talks to the operating system. Each probe answers
one question for one path string, following symbolic links, and never raises
for filesystem errors: failures come back as a classified ``StatResult``.
"""

from __future__ import annotations

import errno
import os
import stat as statmod
from dataclasses import dataclass
from typing import Protocol

from .types import EntryKind, ResolutionOutcome

_ABSENT_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})
_MALFORMED_ERRNOS = frozenset({errno.ENAMETOOLONG, errno.EILSEQ})

# Win32 error codes surfaced on OSError.winerror.
_WINERROR_FILE_NOT_FOUND = 2
_WINERROR_PATH_NOT_FOUND = 3
_WINERROR_INVALID_NAME = 123
_WINERROR_BAD_NETPATH = 53

_WINDOWS_DEVICE_PREFIXES = ("\\\\?\\", "\\\\.\\", "//?/", "//./")
_WINDOWS_RESERVED_CHARS = frozenset('<>"|?*')


@dataclass(frozen=True)
class StatResult:
    """Raw answer of one stat call, before it becomes a snapshot."""

    kind: EntryKind
    outcome: ResolutionOutcome
    size: int | None = None
    mtime_ns: int | None = None
    is_dangling_link: bool = False
    error: str | None = None
    errno: int | None = None


class StatProbe(Protocol):
    def stat(self, path: str) -> StatResult: ...


def kind_for_mode(mode: int) -> EntryKind:
    """Map an ``st_mode`` to an entry kind; fifos, sockets and devices are OTHER."""
    if statmod.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if statmod.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def classify_os_error(exc: OSError) -> ResolutionOutcome:
    """Decide whether an ``OSError`` means absence, denial, or a bad path."""
    winerror = getattr(exc, "winerror", None)
    if winerror == _WINERROR_INVALID_NAME:
        return ResolutionOutcome.MALFORMED
    if winerror in (_WINERROR_FILE_NOT_FOUND, _WINERROR_PATH_NOT_FOUND, _WINERROR_BAD_NETPATH):
        return ResolutionOutcome.ABSENT
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ResolutionOutcome.ABSENT
    if exc.errno in _ABSENT_ERRNOS:
        return ResolutionOutcome.ABSENT
    if exc.errno in _MALFORMED_ERRNOS:
        return ResolutionOutcome.MALFORMED
    return ResolutionOutcome.DENIED_OR_UNAVAILABLE


def _failure(outcome: ResolutionOutcome, error: str, error_number: int | None = None) -> StatResult:
    return StatResult(kind=EntryKind.ABSENT, outcome=outcome, error=error, errno=error_number)


def _is_dangling_link(path: str) -> bool:
    """Return whether ``path`` itself is a symlink whose target cannot be found."""
    try:
        return statmod.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def stat_entry(path: str) -> StatResult:
    """Stat ``path`` following symlinks and classify the result."""
    if not path:
        return _failure(ResolutionOutcome.MALFORMED, "empty path")

    try:
        st = os.stat(path)
    except ValueError as exc:
        # Embedded NUL or an unencodable name; UnicodeEncodeError lands here too.
        return _failure(ResolutionOutcome.MALFORMED, str(exc))
    except OSError as exc:
        outcome = classify_os_error(exc)
        if outcome is ResolutionOutcome.ABSENT:
            return StatResult(
                kind=EntryKind.ABSENT,
                outcome=outcome,
                is_dangling_link=_is_dangling_link(path),
                error=exc.strerror or str(exc),
                errno=exc.errno,
            )
        return _failure(outcome, exc.strerror or str(exc), exc.errno)

    kind = kind_for_mode(st.st_mode)
    return StatResult(
        kind=kind,
        outcome=ResolutionOutcome.FOUND,
        size=int(st.st_size) if kind is EntryKind.FILE else None,
        mtime_ns=int(st.st_mtime_ns),
    )


def invalid_windows_path_reason(path: str) -> str | None:
    """Return why ``path`` can never name a Win32 entry, or ``None`` if it might."""
    body = path
    for prefix in _WINDOWS_DEVICE_PREFIXES:
        if body.startswith(prefix):
            body = body[len(prefix):]
            break

    for ch in body:
        if ord(ch) < 32:
            return f"control character {ord(ch):#04x} in path"
        if ch in _WINDOWS_RESERVED_CHARS:
            return f"reserved character {ch!r} in path"
    return None


class PosixStatProbe:
    """Probe for POSIX systems; the kernel is the only authority on paths."""

    def stat(self, path: str) -> StatResult:
        return stat_entry(path)


class WindowsStatProbe:
    """Probe for Windows; rejects reserved characters before asking the OS."""

    def stat(self, path: str) -> StatResult:
        if path:
            reason = invalid_windows_path_reason(path)
            if reason is not None:
                return _failure(ResolutionOutcome.MALFORMED, reason, errno.EINVAL)
        return stat_entry(path)


def default_stat_probe() -> StatProbe:
    """Return the probe implementation for the running platform."""
    if os.name == "nt":
        return WindowsStatProbe()
    return PosixStatProbe()


__all__ = [
    "StatResult",
    "StatProbe",
    "PosixStatProbe",
    "WindowsStatProbe",
    "default_stat_probe",
    "stat_entry",
    "kind_for_mode",
    "classify_os_error",
    "invalid_windows_path_reason",
]
