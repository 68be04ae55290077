from __future__ import annotations

import textwrap
import tomllib

from hintscan.config.defaults import DEFAULT_CONFIG, get_custom_patterns
from hintscan.config.manager import ConfigManager


def test_default_config_has_all_sections() -> None:
    assert {"general", "hints", "output"} == set(DEFAULT_CONFIG.keys())


def test_default_log_file_is_off() -> None:
    assert DEFAULT_CONFIG["general"]["log_file"] == ""


def test_merge_sections_override() -> None:
    base = {"general": {"log_level": "INFO", "log_file": ""}, "hints": {"alphabet": "qwerty"}}
    result = ConfigManager._merge_sections(base, {"general": {"log_level": "DEBUG"}})
    assert result["general"] == {"log_level": "DEBUG", "log_file": ""}
    assert result["hints"] == {"alphabet": "qwerty"}


def test_merge_sections_drops_non_table_sections(tmp_path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text('general = 1\nhints = "x"\n\n[output]\nformat = "json"\n')
    cm = ConfigManager(config_path=str(config_file))
    cfg = cm.load()

    assert cfg["general"] == DEFAULT_CONFIG["general"]
    assert cfg["hints"] == DEFAULT_CONFIG["hints"]
    assert cfg["output"]["format"] == "json"
    assert cm.get("hints.alphabet") == "qwerty"


def test_merge_sections_drops_unknown_sections() -> None:
    result = ConfigManager._merge_sections({"hints": {}}, {"colors": {"hint": "red"}})
    assert result == {"hints": {}}


def test_get_dot_path() -> None:
    cm = ConfigManager.__new__(ConfigManager)
    cm._config = {"hints": {"alphabet": "dvorak"}}
    assert cm.get("hints.alphabet") == "dvorak"
    assert cm.get("hints.nonexistent", "fallback") == "fallback"
    assert cm.get("no_section.no_key") is None


def test_missing_file_means_defaults(tmp_path) -> None:
    config_file = tmp_path / "hintscan" / "config.toml"
    cfg = ConfigManager(config_path=str(config_file)).load()
    assert not config_file.exists()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_xdg_config_home(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert ConfigManager().path == tmp_path / "hintscan" / "config.toml"


def test_load_merges_user_config(tmp_path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        textwrap.dedent("""\
            [hints]
            alphabet = "colemak"
            unique = true
            regexp = ['JIRA-\\d+']
        """)
    )
    cfg = ConfigManager(config_path=str(config_file)).load()

    assert cfg["hints"]["alphabet"] == "colemak"
    assert cfg["hints"]["unique"] is True
    assert cfg["hints"]["regexp"] == [r"JIRA-\d+"]
    assert cfg["hints"]["reverse"] is False
    assert cfg["output"]["format"] == "text"


def test_save_round_trips_regexes(tmp_path) -> None:
    config_file = tmp_path / "out" / "config.toml"
    cm = ConfigManager(config_path=str(config_file))
    cfg = cm.load()
    cfg["hints"]["regexp"] = [r"ISSUE-[0-9]{3}", r"it's\s\d+"]
    cm.save(cfg)

    with open(config_file, "rb") as f:
        reloaded = tomllib.load(f)
    assert reloaded["hints"]["regexp"] == [r"ISSUE-[0-9]{3}", r"it's\s\d+"]
    assert reloaded["hints"]["reverse"] is False
    assert reloaded["general"]["log_level"] == "INFO"


def test_custom_patterns_from_config() -> None:
    assert get_custom_patterns({"hints": {"regexp": ["a", 3, "b"]}}) == ["a", "b"]
    assert get_custom_patterns({"hints": {"regexp": "single"}}) == ["single"]
    assert get_custom_patterns({"hints": {"regexp": 5}}) == []
    assert get_custom_patterns({}) == []
    assert get_custom_patterns({"hints": "x"}) == []
