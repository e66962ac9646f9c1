"""Terminal highlighting for JSON probe reports.

Pygments is imported on first use so plain-text runs never pay for it.
Reports are rendered with the 256-color formatter, which is the one that
honors a named Pygments style.
"""

from __future__ import annotations

import logging
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=None)
def report_style(name: str) -> str:
    """Return ``name`` if Pygments knows the style, otherwise the default."""
    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(name)
    except ClassNotFound:
        logger.debug("unknown pygments style %r, using %s", name, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return name


@lru_cache(maxsize=8)
def _report_formatter(style: str):
    from pygments.formatters import Terminal256Formatter

    return Terminal256Formatter(style=style)


def highlight_json(text: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``text`` with ANSI 256-color JSON coloring in ``style``."""
    from pygments import highlight
    from pygments.lexers import JsonLexer

    return highlight(text, JsonLexer(), _report_formatter(report_style(style)))
