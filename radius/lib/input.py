"""
Input handling and processing for Radius.

This module sits between the command line and the parser core.

The module handles:
- Building the tag context from settings and tag libraries
- Reading the template from text, a file, or stdin
- Expanding templates into ParseResult objects
- Logging parse failures
"""

import sys
from pathlib import Path
from typing import Optional
from radius.config.settings import appsettings, tagsFile_resolve
from radius.lib.log import LOG
from radius.lib.parser import Parser, ParseError, StaticContext, TagResolver, library_load
from radius.models.dataModel import ParseResult, TagLibrary


def context_build(
    tags_file: Optional[Path] = None, prefix: Optional[str] = None
) -> StaticContext:
    """Create the context used to expand templates.

    Args:
        tags_file: Tag library to load; see `tagsFile_resolve` for fallbacks
        prefix: Tag prefix overriding the library's and the configured one

    Returns:
        StaticContext serving the library's tags and the include tag

    Raises:
        ValueError: If the tag library cannot be loaded
    """
    library: TagLibrary = TagLibrary()
    path: Optional[Path] = tagsFile_resolve(tags_file)
    if path:
        LOG(f"Loading tag library {path}")
        library = library_load(path)

    return StaticContext(
        library,
        prefix=prefix or library.prefix or appsettings.prefix,
        max_size=appsettings.include_max_size,
        base_path=appsettings.include_base_path,
    )


def input_read(path: Optional[Path] = None, text: Optional[str] = None) -> str:
    """Collect the template to expand.

    Args:
        path: Template file
        text: Template given directly; takes priority over path

    Returns:
        The template text; stdin is read when neither is given

    Raises:
        IOError: If the file or stdin cannot be read
    """
    if text is not None:
        return text

    try:
        if path:
            return Path(path).read_text(encoding="utf-8")
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        LOG(f"Error reading input: {e}")
        raise IOError(f"Failed to read input: {e}")


def input_process(text: str, context: TagResolver) -> ParseResult:
    """Expand a template.

    Args:
        text: Raw template text
        context: Context resolving the template's tags

    Returns:
        ParseResult with the expanded text, or the parse error on failure
    """
    try:
        output: str = Parser(context).parse(text)
    except ParseError as e:
        LOG(f"Error parsing template: {e}")
        return ParseResult(text="", error=str(e), success=False)

    return ParseResult(text=output, error=None, success=True)
