"""
dataModel.py

This module defines the data models used throughout Radius.

Features:
- Parse tree nodes (literal text and matched container tags)
- Parsing results returned to the command line layer
- Tag library documents loaded from JSON

Usage:
Import these models to build, walk, or report on parsed templates.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union
from dataclasses import dataclass, field
import re

TAG_NAME_PATTERN: re.Pattern = re.compile(r"[A-Za-z0-9_]+")


@dataclass
class Literal:
    """Raw text between tag markers.

    Self-closing tags inside the text are only resolved when the node is
    evaluated.

    Attributes:
        text: The raw text slice
    """

    text: str


@dataclass
class Container:
    """A matched start/end tag pair.

    Attributes:
        name: Tag name (empty for the synthetic root)
        attributes: Attribute name to value mapping
        contents: Child nodes in document order
        root: True only for the synthetic root, which evaluates to the
              plain concatenation of its children

    Example:
        * "<radius:b href='x'>hi</radius:b>" parses into
          Container(name="b", attributes={"href": "x"},
                    contents=[Literal("hi")])
    """

    name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    contents: list["Node"] = field(default_factory=list)
    root: bool = False


Node = Union[Literal, Container]


class ParseResult(BaseModel):
    """Result of a template expansion.

    Attributes:
        text: The expanded document
        error: Optional error message if expansion failed
        success: Whether expansion succeeded
    """

    text: str
    error: str | None
    success: bool


class TagLibrary(BaseModel):
    """
    Model for a tag library document.

    Attributes:
        prefix (Optional[str]): Tag prefix to use instead of the configured one.
        tags (dict[str, str]): Mapping of tag names to template strings.
    """

    prefix: Optional[str] = Field(
        default=None, description="Overrides the configured tag prefix."
    )
    tags: dict[str, str] = Field(
        default_factory=dict, description="Tag name to template mapping."
    )

    @field_validator("tags")
    @classmethod
    def names_check(cls, tags: dict[str, str]) -> dict[str, str]:
        """Reject tag names the parser could never match."""
        for name in tags:
            if not TAG_NAME_PATTERN.fullmatch(name):
                raise ValueError(f"Invalid tag name: {name!r}")
        return tags
