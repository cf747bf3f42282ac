"""
Tests for input processing functionality.

Tests cover:
- Context construction from settings and tag libraries
- Template input sources
- Conversion of parse failures into results
"""

import io
import json
import sys
import pytest
from pathlib import Path
from unittest.mock import patch
from radius.config.settings import App
from radius.lib.input import context_build, input_read, input_process
from radius.lib.parser import Context
from radius.models.dataModel import ParseResult


@pytest.fixture
def library_file(tmp_path: Path) -> Path:
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"greet": "Hello $name!"}))
    return path


@pytest.fixture
def context() -> Context:
    context = Context()
    context.define_tag("up", lambda attributes, content: content().upper())
    return context


# Context Construction Tests
def test_context_build_with_library(library_file):
    context = context_build(library_file)
    assert context.tag_names() == ["greet", "include"]
    assert context.prefix == "radius"


def test_context_build_without_library():
    with patch("radius.lib.input.tagsFile_resolve", return_value=None):
        context = context_build()
    assert context.tag_names() == ["include"]


def test_context_build_prefix_precedence(tmp_path: Path):
    path = tmp_path / "tags.json"
    path.write_text(json.dumps({"prefix": "lib", "tags": {}}))
    with patch("radius.lib.input.appsettings", App(prefix="env")):
        assert context_build(path).prefix == "lib"
        assert context_build(path, prefix="arg").prefix == "arg"
        with patch("radius.lib.input.tagsFile_resolve", return_value=None):
            assert context_build().prefix == "env"


def test_context_build_include_limits():
    settings = App(include_max_size=42, include_base_path="/srv")
    with (
        patch("radius.lib.input.appsettings", settings),
        patch("radius.lib.input.tagsFile_resolve", return_value=None),
    ):
        context = context_build()
    assert context.max_size == 42
    assert context.base_path == "/srv"


def test_context_build_bad_library(tmp_path: Path):
    path = tmp_path / "tags.json"
    path.write_text("{broken")
    with pytest.raises(ValueError):
        context_build(path)


# Input Source Tests
def test_input_read_text_first(tmp_path: Path):
    path = tmp_path / "page.txt"
    path.write_text("from file")
    assert input_read(path, text="direct") == "direct"
    assert input_read(path) == "from file"


def test_input_read_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("from stdin"))
    assert input_read() == "from stdin"


def test_input_read_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Failed to read input"):
        input_read(tmp_path / "absent.txt")


# Processing Tests
def test_input_process_success(context):
    result = input_process("say <radius:up>hi</radius:up>", context)
    assert isinstance(result, ParseResult)
    assert result.success
    assert result.text == "say HI"
    assert result.error is None


@pytest.mark.parametrize(
    "text,error",
    [
        ("<radius:up>hi", "end tag not found for start tag `up'"),
        ("<radius:up>hi</radius:down>", "end tag not found for start tag `up'"),
        ("<radius:down />", "undefined tag `down'"),
    ],
)
def test_input_process_failure(context, text, error):
    result = input_process(text, context)
    assert not result.success
    assert result.text == ""
    assert result.error == error


def test_input_process_logs_failure(context):
    with patch("radius.lib.input.LOG") as mock_log:
        input_process("<radius:up>", context)
    mock_log.assert_called_once()
    assert "end tag not found" in mock_log.call_args.args[0]
