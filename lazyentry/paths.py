"""Path string helpers used alongside entry handles.

Handles never normalize what they are given; callers that want ``..``
collapsed or a cwd-relative path made absolute do it here first.
"""

from __future__ import annotations

import os
import secrets
import tempfile
from pathlib import Path


def combine(*segments: str | os.PathLike) -> str:
    """Join segments with the platform separator, without normalizing."""
    if not segments:
        return ""
    return os.path.join(*(os.fspath(segment) for segment in segments))


def absolute(path: str | os.PathLike) -> str:
    """Return the cwd-relative absolute form of ``path`` with ``.``/``..`` collapsed lexically."""
    return os.path.abspath(os.fspath(path))


def path_root(path: str | os.PathLike) -> str:
    """Return the root portion of ``path`` (``/``, ``C:\\``, UNC share), or ``""`` when relative."""
    pure = Path(os.fspath(path))
    return pure.anchor


def random_file_name() -> str:
    """Return a short random name in the style of ``tmpXXXXXXXX.xyz``."""
    return f"{secrets.token_hex(4)}.{secrets.token_hex(2)[:3]}"


def filesystem_is_case_sensitive(directory: str | os.PathLike) -> bool:
    """Probe whether the filesystem holding ``directory`` distinguishes case.

    Creates a mixed-case temporary file inside ``directory`` and checks whether
    its swapped-case name resolves.
    """
    with tempfile.NamedTemporaryFile(prefix="CaseProbe", dir=os.fspath(directory)) as probe:
        head, tail = os.path.split(probe.name)
        swapped = os.path.join(head, tail.swapcase())
        return not os.path.exists(swapped)


__all__ = [
    "combine",
    "absolute",
    "path_root",
    "random_file_name",
    "filesystem_is_case_sensitive",
]
