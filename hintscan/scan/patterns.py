from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

log = logging.getLogger(__name__)


class PatternKind(Enum):
    """Tier of a pattern.  Declaration order is scan priority."""

    EXCLUDE = "exclude"
    CUSTOM = "custom"
    BUILTIN = "builtin"


class InvalidPatternError(ValueError):
    """A user-supplied pattern does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid custom pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Pattern:
    name: str
    kind: PatternKind
    regex: re.Pattern[str]
    # Capture group holding the text to emit; None emits the whole match.
    group: int | None = None

    @property
    def excluded(self) -> bool:
        return self.kind is PatternKind.EXCLUDE


# Consumed but never hinted, so colour codes cannot leak into a match.
EXCLUDE_PATTERNS: list[tuple[str, str]] = [
    ("bash", r"[\x00-\x1f\x7f]\[(?:[0-9]{1,2};)?(?:[0-9]{1,2})?m"),
]

BUILTIN_PATTERNS: list[tuple[str, str, int | None]] = [
    ("url", r"(?:https?://|git@|git://|ssh://|ftp://|file:///)[\w?=%/_.:,;~@!#$&()*+-]*", None),
    ("diff_a", r"--- a/([^ ]+)", 1),
    ("diff_b", r"\+\+\+ b/([^ ]+)", 1),
    ("path", r"[^ ]+/[^ \x00-\x1f\x7f]+", None),
    ("color", r"#[0-9a-fA-F]{6}", None),
    ("uid", r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", None),
    ("sha", r"[0-9a-f]{7,40}", None),
    ("ip", r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", None),
    ("address", r"0x[0-9a-fA-F]+", None),
    ("number", r"[0-9]{4,}", None),
]

# Compiled once per process and shared by every catalog.
_EXCLUDE: tuple[Pattern, ...] = tuple(
    Pattern(name, PatternKind.EXCLUDE, re.compile(source))
    for name, source in EXCLUDE_PATTERNS
)
_BUILTIN: tuple[Pattern, ...] = tuple(
    Pattern(name, PatternKind.BUILTIN, re.compile(source), group)
    for name, source, group in BUILTIN_PATTERNS
)


def compile_custom(source: str) -> Pattern:
    """Compile one user pattern.  Its first capture group, if any, is emitted."""
    try:
        regex = re.compile(source)
    except re.error as exc:
        log.error("Rejected custom pattern %r: %s", source, exc)
        raise InvalidPatternError(source, str(exc)) from exc
    return Pattern("custom", PatternKind.CUSTOM, regex, 1 if regex.groups else None)


def build_catalog(custom_patterns: Iterable[str] = ()) -> tuple[Pattern, ...]:
    """Return exclusions, then custom patterns in order, then built-ins.

    Raises :class:`InvalidPatternError` for the first custom pattern that
    fails to compile; nothing is scanned in that case.
    """
    custom = tuple(compile_custom(source) for source in custom_patterns)
    catalog = _EXCLUDE + custom + _BUILTIN
    log.debug("Built pattern catalog: %d custom, %d total", len(custom), len(catalog))
    return catalog
