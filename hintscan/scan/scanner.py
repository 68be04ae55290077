from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .patterns import Pattern, PatternKind

log = logging.getLogger(__name__)


class ScanInvariantError(RuntimeError):
    """A winning pattern's declared capture group did not take part in its match."""


@dataclass(slots=True, eq=False)
class Match:
    """A hintable span.  Two matches are equal when they share a position."""

    x: int
    y: int
    text: str
    hint: str | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


def _first_match(regex: re.Pattern[str], chunk: str) -> re.Match[str] | None:
    # Empty matches can never be consumed, so they never compete.
    for m in regex.finditer(chunk):
        if m.end() > m.start():
            return m
    return None


def _best_match(
    catalog: Sequence[Pattern], chunk: str
) -> tuple[Pattern, re.Match[str]] | None:
    best: tuple[Pattern, re.Match[str]] | None = None
    for pattern in catalog:
        m = _first_match(pattern.regex, chunk)
        if m is None:
            continue
        # Strict comparison: on a tie the earlier catalog entry stays.
        if best is None or m.start() < best[1].start():
            best = (pattern, m)
    return best


def _emitted_span(pattern: Pattern, m: re.Match[str]) -> tuple[str, int]:
    """Return the text to emit and its offset from the start of the match."""
    if pattern.group is None:
        return m.group(), 0
    start = m.start(pattern.group)
    if start == -1:
        if pattern.kind is PatternKind.CUSTOM:
            return m.group(), 0
        raise ScanInvariantError(
            f"pattern {pattern.name!r} matched {m.group()!r} "
            f"without group {pattern.group}"
        )
    return m.group(pattern.group), start - m.start()


def scan_line(catalog: Sequence[Pattern], line: str, y: int) -> list[Match]:
    """Find every non-overlapping match in *line*, left to right."""
    matches: list[Match] = []
    chunk = line
    offset = 0

    while chunk:
        best = _best_match(catalog, chunk)
        if best is None:
            break
        pattern, m = best
        text, substart = _emitted_span(pattern, m)

        if not pattern.excluded:
            matches.append(Match(x=offset + m.start() + substart, y=y, text=text))

        # Advance past the whole match, not just the emitted group.
        chunk = chunk[m.end():]
        offset += m.end()

    return matches


def scan_lines(catalog: Sequence[Pattern], lines: Iterable[str]) -> list[Match]:
    """Scan *lines* in order; the result is sorted by ``(y, x)``."""
    matches: list[Match] = []
    count = 0
    for y, line in enumerate(lines):
        matches.extend(scan_line(catalog, line, y))
        count += 1
    log.debug("Scanned %d line(s), found %d match(es)", count, len(matches))
    return matches
