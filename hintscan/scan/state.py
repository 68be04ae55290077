from __future__ import annotations

import logging
from typing import Sequence

from .alphabets import get_alphabet
from .patterns import build_catalog
from .scanner import Match, scan_lines

log = logging.getLogger(__name__)


def allocate(
    matches: list[Match],
    hints: Sequence[str],
    reverse: bool = False,
    unique: bool = False,
) -> list[Match]:
    """Assign *hints*, in order, to *matches* and return them in scan order.

    With *reverse* the last match gets the first hint.  With *unique*
    matches sharing the same text share a single hint.  Matches left over
    once the hints run out get ``hint=None``, even if they had one before.
    """
    for match in matches:
        match.hint = None

    available = list(reversed(hints))
    walk = reversed(matches) if reverse else iter(matches)

    if unique:
        seen: dict[str, str] = {}
        for match in walk:
            if match.text in seen:
                match.hint = seen[match.text]
            elif available:
                match.hint = available.pop()
                seen[match.text] = match.hint
    else:
        for match in walk:
            if available:
                match.hint = available.pop()

    unhinted = sum(1 for match in matches if match.hint is None)
    if unhinted:
        log.info("Ran out of hints: %d match(es) left without one", unhinted)
    return matches


def find(matches: Sequence[Match], hint: str) -> Match | None:
    """Return the first match labelled *hint*, in scan order."""
    for match in matches:
        if match.hint is not None and match.hint == hint:
            return match
    return None


class State:
    """Scans a snapshot of terminal lines and labels what it finds.

    The pattern catalog and alphabet are resolved on construction, so a bad
    custom pattern or alphabet name fails before any line is looked at.
    """

    def __init__(
        self,
        lines: Sequence[str],
        alphabet: str = "qwerty",
        regexp: Sequence[str] = (),
    ) -> None:
        self.lines = lines
        self._alphabet = get_alphabet(alphabet)
        self._catalog = build_catalog(regexp)

    def matches(self, reverse: bool = False, unique: bool = False) -> list[Match]:
        found = scan_lines(self._catalog, self.lines)
        if unique:
            needed = len({match.text for match in found})
        else:
            needed = len(found)
        hints = self._alphabet.hints(needed)
        return allocate(found, hints, reverse=reverse, unique=unique)
