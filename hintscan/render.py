from __future__ import annotations

from typing import Sequence

from rich.style import Style
from rich.text import Text

from hintscan.scan.scanner import Match

MATCH_STYLE = Style(color="yellow")
HINT_STYLE = Style(color="black", bgcolor="yellow", bold=True)


def render_line(line: str, matches: Sequence[Match]) -> Text:
    """Render one line with each match highlighted and its hint drawn over it.

    *matches* must belong to *line* and be sorted by ``x``.  The hint covers
    the first characters of the match and is cut to the match length.
    """
    output = Text()
    cursor = 0
    for match in matches:
        output.append(line[cursor:match.x])
        end = match.x + len(match.text)
        hint = (match.hint or "")[: len(match.text)]
        if hint:
            output.append(hint, style=HINT_STYLE)
        output.append(match.text[len(hint):], style=MATCH_STYLE)
        cursor = end
    output.append(line[cursor:])
    return output


def render_hints(lines: Sequence[str], matches: Sequence[Match]) -> Text:
    by_line: dict[int, list[Match]] = {}
    for match in matches:
        by_line.setdefault(match.y, []).append(match)

    output = Text()
    for y, line in enumerate(lines):
        if y:
            output.append("\n")
        output.append_text(render_line(line, sorted(by_line.get(y, []), key=lambda m: m.x)))
    return output
