from __future__ import annotations

import copy
import logging
import os
import tomllib
from pathlib import Path

from hintscan.config.defaults import DEFAULT_CONFIG

log = logging.getLogger(__name__)


class ConfigManager:
    def __init__(self, config_path: str | None = None) -> None:
        if config_path is not None:
            self._config_path = Path(config_path).expanduser()
        else:
            xdg = os.environ.get("XDG_CONFIG_HOME", "~/.config")
            self._config_path = Path(xdg).expanduser() / "hintscan" / "config.toml"
        self._config: dict = {}

    @property
    def path(self) -> Path:
        return self._config_path

    @property
    def config(self) -> dict:
        if not self._config:
            self._config = self.load()
        return self._config

    def load(self) -> dict:
        """Read the TOML file over the defaults.  A missing file means defaults."""
        defaults = copy.deepcopy(DEFAULT_CONFIG)
        if not self._config_path.exists():
            log.debug("No config at %s, using defaults", self._config_path)
            self._config = defaults
            return defaults

        with open(self._config_path, "rb") as f:
            user_config = tomllib.load(f)

        merged = self._merge_sections(defaults, user_config)
        self._config = merged
        return merged

    @staticmethod
    def _merge_sections(defaults: dict, user_config: dict) -> dict:
        """Overlay each ``[section]`` of *user_config* onto *defaults*.

        A section that is not a table, or that hintscan does not know, is
        dropped with a warning so readers can always treat sections as dicts.
        """
        for section, table in user_config.items():
            if section not in defaults:
                log.warning("Ignoring unknown config section %r", section)
            elif not isinstance(table, dict):
                log.warning(
                    "Ignoring config section %r: expected a table, got %s",
                    section,
                    type(table).__name__,
                )
            else:
                defaults[section].update(table)
        return defaults

    def save(self, config: dict) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            f.write(self._to_toml(config))
        log.info("Wrote config to %s", self._config_path)

    def get(self, key_path: str, default: object = None) -> object:
        keys = key_path.split(".")
        current: object = self.config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    # ------------------------------------------------------------------
    # TOML writer for the flat [section] / key = value shape (tomllib only reads)
    # ------------------------------------------------------------------

    @classmethod
    def _to_toml(cls, config: dict) -> str:
        blocks: list[str] = []
        for section, table in config.items():
            body = "".join(f"{key} = {cls._toml_value(value)}\n" for key, value in table.items())
            blocks.append(f"[{section}]\n{body}")
        return "\n".join(blocks)

    @staticmethod
    def _toml_value(value: object) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            # Literal strings keep regex backslashes readable.
            if "'" not in value and "\n" not in value:
                return f"'{value}'"
            escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
            return f'"{escaped}"'
        if isinstance(value, list):
            items = ", ".join(ConfigManager._toml_value(item) for item in value)
            return f"[{items}]"
        return str(value)
