# tests/test_config/test_settings.py
import os
import pytest
from pathlib import Path
from unittest.mock import patch
from pydantic import ValidationError
from radius.config.settings import App, CONFIG_FILE, tagsFile_resolve


def setup_function():
    for k in list(os.environ):
        if k.startswith("RADIUS_"):
            del os.environ[k]


def teardown_function():
    for k in list(os.environ):
        if k.startswith("RADIUS_"):
            del os.environ[k]


def test_app_default_settings():
    app = App()
    assert app.beQuiet is False
    assert app.prefix == "radius"
    assert app.tags_file is None
    assert app.include_max_size == 1024 * 1024
    assert app.include_base_path is None


def test_app_env_override():
    os.environ["RADIUS_BEQUIET"] = "true"
    os.environ["RADIUS_PREFIX"] = "tpl"
    os.environ["RADIUS_TAGS_FILE"] = "/tmp/tags.json"
    os.environ["RADIUS_INCLUDE_MAX_SIZE"] = "10"
    os.environ["RADIUS_INCLUDE_BASE_PATH"] = "/srv/templates"

    app = App()
    assert app.beQuiet is True
    assert app.prefix == "tpl"
    assert app.tags_file == Path("/tmp/tags.json")
    assert app.include_max_size == 10
    assert app.include_base_path == "/srv/templates"


@pytest.mark.parametrize("prefix", ["", "a b", "a>b", "a/b"])
def test_app_invalid_prefix(prefix):
    with pytest.raises(ValidationError, match="Invalid tag prefix"):
        App(prefix=prefix)


def test_app_invalid_prefix_from_env():
    os.environ["RADIUS_PREFIX"] = "no<pe"
    with pytest.raises(ValidationError):
        App()


def test_app_invalid_max_size():
    with pytest.raises(ValidationError):
        App(include_max_size=0)


def test_config_file_location():
    assert CONFIG_FILE.name == "tags.json"
    assert "radius" in str(CONFIG_FILE.parent).lower()


def test_tags_file_explicit_wins(tmp_path: Path):
    explicit = tmp_path / "explicit.json"
    with patch("radius.config.settings.appsettings", App(tags_file=tmp_path / "env.json")):
        assert tagsFile_resolve(explicit) == explicit


def test_tags_file_from_settings(tmp_path: Path):
    configured = tmp_path / "env.json"
    with patch("radius.config.settings.appsettings", App(tags_file=configured)):
        assert tagsFile_resolve() == configured


def test_tags_file_default_config(tmp_path: Path):
    default = tmp_path / "tags.json"
    with (
        patch("radius.config.settings.appsettings", App()),
        patch("radius.config.settings.CONFIG_FILE", default),
    ):
        assert tagsFile_resolve() is None
        default.write_text("{}")
        assert tagsFile_resolve() == default
