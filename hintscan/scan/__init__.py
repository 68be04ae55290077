from __future__ import annotations

from .alphabets import ALPHABETS, Alphabet, UnknownAlphabetError, generate, get_alphabet
from .patterns import InvalidPatternError, Pattern, PatternKind, build_catalog
from .scanner import Match, ScanInvariantError, scan_line, scan_lines
from .state import State, allocate, find

__all__ = [
    "ALPHABETS",
    "Alphabet",
    "UnknownAlphabetError",
    "generate",
    "get_alphabet",
    "InvalidPatternError",
    "Pattern",
    "PatternKind",
    "build_catalog",
    "Match",
    "ScanInvariantError",
    "scan_line",
    "scan_lines",
    "State",
    "allocate",
    "find",
]
