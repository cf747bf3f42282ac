"""
Parser package for Radius templates.

Provides the tag parser, the context protocol it resolves tags through,
and ready-made contexts.
"""

from .base import Parser, parse_attributes
from .context import Context, TagResolver
from .contexts import StaticContext, library_load
from .errors import (
    ParseError,
    MissingEndTagError,
    MismatchedEndTagError,
    UndefinedTagError,
    TagError,
)

__all__ = [
    "Parser",
    "parse_attributes",
    "Context",
    "TagResolver",
    "StaticContext",
    "library_load",
    "ParseError",
    "MissingEndTagError",
    "MismatchedEndTagError",
    "UndefinedTagError",
    "TagError",
]
