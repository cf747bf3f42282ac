"""
Concrete contexts for Radius.

Implements ready-made tag sets:
- Static tags: templates from a tag library, expanded with the tag's
  attributes and inner content
- Include: file system reads with size limits and base path checks
"""

import json
import os
from pathlib import Path
from string import Template
from typing import Optional, Self
from pydantic import ValidationError
from radius.lib.log import LOG
from radius.lib.parser.context import Context, ContentProvider, DEFAULT_PREFIX, TagHandler
from radius.lib.parser.errors import TagError
from radius.models.dataModel import TagLibrary

INCLUDE_TAG: str = "include"


def library_load(path: Path | str) -> TagLibrary:
    """Load a tag library from a JSON file.

    The file holds either a full library document
    ({"prefix": ..., "tags": {...}}) or a bare name to template mapping.

    Args:
        path: Location of the JSON file

    Returns:
        The validated TagLibrary

    Raises:
        ValueError: If the file cannot be read or is not a valid library
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        LOG(f"Error loading tag library {path}: {e}")
        raise ValueError(f"Cannot load tag library {path}: {e}") from e

    if isinstance(data, dict) and "tags" not in data:
        data = {"tags": data}

    try:
        return TagLibrary.model_validate(data)
    except ValidationError as e:
        LOG(f"Invalid tag library {path}: {e}")
        raise ValueError(f"Invalid tag library {path}: {e}") from e


def template_handler(template: str) -> TagHandler:
    """Build a handler that expands template with attributes and content.

    Placeholders use string.Template syntax; $content is the tag's inner
    text. Unknown placeholders are left as written.
    """
    compiled: Template = Template(template)

    def handler(attributes: dict[str, str], content: Optional[ContentProvider]) -> str:
        values: dict[str, str] = dict(attributes)
        values["content"] = content() if content else ""
        return compiled.safe_substitute(values)

    return handler


class StaticContext(Context):
    """Context serving tags from a TagLibrary plus the include tag.

    Attributes:
        library: Tag library the context was built from
        max_size: Largest file the include tag will read, in bytes
        base_path: If set, include only reads files below this directory
    """

    def __init__(
        self: Self,
        library: TagLibrary | None = None,
        prefix: str | None = None,
        max_size: int = 1024 * 1024,
        base_path: str | None = None,
    ) -> None:
        """Initialize context from a library.

        Args:
            library: Tags to serve; empty if omitted
            prefix: Tag prefix; falls back to the library's, then the default
            max_size: Size limit for included files
            base_path: Optional directory restriction for included files
        """
        self.library: TagLibrary = library or TagLibrary()
        super().__init__(prefix or self.library.prefix or DEFAULT_PREFIX)

        self.max_size: int = max_size
        self.base_path: str | None = os.path.realpath(base_path) if base_path else None

        self.define_tag(INCLUDE_TAG, self.include)
        for name, template in self.library.tags.items():
            self.define_tag(name, template_handler(template))

    def include(
        self: Self, attributes: dict[str, str], content: Optional[ContentProvider]
    ) -> str:
        """Return a file's contents, followed by the tag's inner content.

        Raises:
            TagError: If the file attribute is missing or the file cannot
                      be read within the configured limits
        """
        file: str | None = attributes.get("file")
        if not file:
            raise TagError(INCLUDE_TAG, "missing `file' attribute")

        path: str = os.path.realpath(os.path.expanduser(file))

        # Path traversal check
        if self.base_path and os.path.commonpath([self.base_path, path]) != self.base_path:
            raise TagError(INCLUDE_TAG, f"path outside base directory: {path}")

        if not os.path.isfile(path):
            raise TagError(INCLUDE_TAG, f"file not found: {path}")

        if not os.access(path, os.R_OK):
            raise TagError(INCLUDE_TAG, f"file not readable: {path}")

        size: int = os.path.getsize(path)
        if size > self.max_size:
            raise TagError(INCLUDE_TAG, f"file too large: {path} ({size} bytes)")

        try:
            with open(path, "r", encoding="utf-8") as f:
                text: str = f.read()
        except UnicodeDecodeError:
            raise TagError(INCLUDE_TAG, f"file is not valid UTF-8: {path}")

        LOG(f"Included {path} ({size} bytes)")
        return text + (content() if content else "")
