"""Terminal rendering of tarsier's color markup.

Markup looks like ``Hello <bold>world</>``: a known style name in angle
brackets opens a style, ``</>`` closes the innermost open one.  Styles nest.
Anything else in angle brackets is printed as-is.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

import typer

_STYLES: Dict[str, Dict[str, Any]] = {
    "red": {"fg": "red"},
    "green": {"fg": "green"},
    "blue": {"fg": "blue"},
    "cyan": {"fg": "cyan"},
    "yellow": {"fg": "yellow"},
    "bold": {"bold": True},
}

_TOKEN_RE = re.compile(r"<(/?)([a-zA-Z]*)>")


def _styled(text: str, stack: List[Dict[str, Any]]) -> str:
    if not text or not stack:
        return text
    merged: Dict[str, Any] = {}
    for style in stack:
        merged.update(style)
    return typer.style(text, **merged)


def render_markup(markup: str) -> str:
    """Return *markup* with style tokens replaced by ANSI escape codes."""
    out: List[str] = []
    stack: List[Dict[str, Any]] = []
    pos = 0
    for match in _TOKEN_RE.finditer(markup):
        out.append(_styled(markup[pos:match.start()], stack))
        pos = match.end()
        closing, name = match.group(1), match.group(2).lower()
        if closing and not name:
            if stack:
                stack.pop()
            continue
        if not closing and name in _STYLES:
            stack.append(_STYLES[name])
            continue
        out.append(_styled(match.group(0), stack))
    out.append(_styled(markup[pos:], stack))
    return "".join(out)


def echo_markup(markup: str, color: Optional[bool] = None) -> None:
    """Render *markup* and print it.

    ANSI codes are stripped when stdout is not a terminal unless *color*
    forces them on.
    """
    typer.echo(render_markup(markup), color=color)
