"""Module entrypoint for ``python -m lazyentry``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and probing happen in ``lazyentry.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
