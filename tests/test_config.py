import pytest

from mcserver_installer.config import DEFAULTS, load_defaults
from mcserver_installer.errors import ConfigError


def test_no_file_gives_builtin_defaults():
    assert load_defaults(None) == DEFAULTS


def test_yaml_overrides(tmp_path):
    p = tmp_path / "defaults.yaml"
    p.write_text("user: mc\nport: 25570\nmotd:\n", encoding="utf-8")

    d = load_defaults(str(p))

    assert d["user"] == "mc"
    assert d["port"] == "25570"
    assert d["motd"] == DEFAULTS["motd"]
    assert d["base_dir"] == DEFAULTS["base_dir"]


def test_unknown_keys_rejected(tmp_path):
    p = tmp_path / "defaults.yaml"
    p.write_text("usr: mc\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="usr"):
        load_defaults(str(p))


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / "defaults.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_defaults(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_defaults(str(tmp_path / "nope.yaml"))
