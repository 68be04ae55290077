from __future__ import annotations

import logging

log = logging.getLogger(__name__)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "preview")


def get_custom_patterns(config: dict) -> list[str]:
    """Return ``hints.regexp`` from *config* as a list of pattern strings.

    A bare string is accepted as a single pattern.  Non-string entries are
    dropped with a warning rather than handed to the compiler.
    """
    hints = config.get("hints", {})
    raw = hints.get("regexp", []) if isinstance(hints, dict) else []
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        log.warning("Ignoring hints.regexp: expected a list, got %s", type(raw).__name__)
        return []
    patterns: list[str] = []
    for item in raw:
        if isinstance(item, str):
            patterns.append(item)
        else:
            log.warning("Ignoring non-string entry in hints.regexp: %r", item)
    return patterns


DEFAULT_CONFIG: dict = {
    "general": {
        "log_file": "",
        "log_level": "INFO",
    },
    "hints": {
        "alphabet": "qwerty",
        "reverse": False,
        "unique": False,
        "regexp": [],
    },
    "output": {
        "format": "text",
    },
}
