r"""
Template parser implementation for Radius tags.

Scans a document for prefixed tags, matches start and end tags into a tree
of containers, and expands the tree through a context once the whole
document has been read.

The parser handles:
- Container tags: <radius:name attr="v">...</radius:name>
- Self-closing tags: <radius:name attr="v" />, resolved inside literal text
- Attribute lists with single or double quoted values
- Pairing errors for unclosed and mismatched end tags

Self-closing tags need whitespace after the tag name, so <radius:name/>
is left untouched as plain text.

Example:
    parser = Parser(context)
    result = parser.parse('<radius:repeat times="2">x</radius:repeat>')
"""

import re
from functools import lru_cache
from typing import Iterator, NamedTuple, Optional, Self
from radius.lib.parser.context import Context, TagResolver
from radius.lib.parser.errors import MismatchedEndTagError, MissingEndTagError
from radius.models.dataModel import Container, Literal, Node

TAG_NAME: str = r"[A-Za-z0-9_]+?"

ATTRIBUTE_PATTERN: re.Pattern = re.compile(r"([A-Za-z0-9_]+?)\s*=\s*('|\")(.*?)\2")


class TagPatterns(NamedTuple):
    """Compiled patterns for one tag prefix.

    Attributes:
        container: Matches a start tag (groups 1, 2) or an end tag (group 3)
        individual: Matches a self-closing tag (groups 1, 2)
    """

    container: re.Pattern
    individual: re.Pattern


@lru_cache(maxsize=32)
def patterns_compile(prefix: str) -> TagPatterns:
    """Build the tag patterns for prefix."""
    p: str = re.escape(prefix)
    # Whitespace runs have exactly one way to match, keeping scans linear
    # on long runs with no closing delimiter.
    return TagPatterns(
        container=re.compile(
            rf"<{p}:({TAG_NAME})(?:\s++([^/>]*+)|)>|</{p}:({TAG_NAME})\s*+>"
        ),
        individual=re.compile(rf"<{p}:({TAG_NAME})\s++((?:.*?\S)??)\s*+/>"),
    )


def parse_attributes(text: Optional[str]) -> dict[str, str]:
    """Parse an attribute fragment into a mapping.

    Args:
        text: Raw attribute text, e.g. name="v1" other='v2'

    Returns:
        Attribute name to value mapping. Later duplicates win; anything
        that does not form a complete name="value" pair is ignored.
    """
    attributes: dict[str, str] = {}
    if not text:
        return attributes

    for match in ATTRIBUTE_PATTERN.finditer(text):
        attributes[match.group(1)] = match.group(3)
    return attributes


class Parser:
    """Radius template parser.

    Attributes:
        context: Resolver used to expand tags
    """

    def __init__(self: Self, context: TagResolver | None = None) -> None:
        """Initialize parser with a context.

        Args:
            context: Resolver used to expand tags; a bare Context with the
                     default prefix if omitted

        Raises:
            TypeError: If context does not provide prefix and render_tag
        """
        if context is None:
            context = Context()
        if not isinstance(context, TagResolver):
            raise TypeError(f"Not a tag context: {context!r}")

        self.context: TagResolver = context

    def parse(self: Self, text: Optional[str]) -> str:
        """Parse text and return it with every tag expanded.

        Args:
            text: Raw template text

        Returns:
            The expanded document

        Raises:
            MissingEndTagError: If a start tag is never closed
            MismatchedEndTagError: If an end tag does not close the
                                   innermost open tag
            UndefinedTagError: If the context does not know a tag
        """
        return self.evaluate(self.tree_build(text or ""))

    def tree_build(self: Self, text: str) -> Container:
        """Match start and end tags into a tree without expanding anything.

        Args:
            text: Raw template text

        Returns:
            The synthetic root container holding the document

        Raises:
            MissingEndTagError: If a start tag is never closed
            MismatchedEndTagError: On a mismatched end tag
        """
        pattern: re.Pattern = patterns_compile(self.context.prefix).container
        stack: list[Container] = [Container(root=True)]
        position: int = 0

        while match := pattern.search(text, position):
            start_tag, attributes, end_tag = match.groups()
            stack[-1].contents.append(Literal(text[position : match.start()]))
            position = match.end()

            if start_tag:
                stack.append(Container(start_tag, parse_attributes(attributes)))
                continue

            popped: Container = stack.pop()
            if popped.name != end_tag:
                raise MismatchedEndTagError(popped.name, end_tag)
            stack[-1].contents.append(popped)

        if len(stack) > 1:
            raise MissingEndTagError(stack[-1].name)

        stack[0].contents.append(Literal(text[position:]))
        return stack[0]

    def evaluate(self: Self, root: Container) -> str:
        """Expand a parsed tree, depth-first and in document order.

        Every container's children are expanded before the container
        itself is handed to the context.

        Args:
            root: Tree built by `tree_build`

        Returns:
            The expanded text
        """
        frames: list[tuple[Container, Iterator[Node], list[str]]] = [
            (root, iter(root.contents), [])
        ]

        while True:
            node, children, parts = frames[-1]
            child: Node | None = next(children, None)

            if child is None:
                frames.pop()
                value: str = self._container_render(node, "".join(parts))
                if not frames:
                    return value
                frames[-1][2].append(value)
            elif isinstance(child, Literal):
                parts.append(self.resolve_inline(child.text))
            else:
                frames.append((child, iter(child.contents), []))

    def resolve_inline(self: Self, text: Optional[str]) -> str:
        """Replace every self-closing tag in text with its expansion.

        Tags are resolved left to right; substituted text is not scanned
        again.

        Args:
            text: Literal text that may contain self-closing tags

        Returns:
            The text with self-closing tags expanded
        """
        if not text:
            return ""

        pattern: re.Pattern = patterns_compile(self.context.prefix).individual
        return pattern.sub(self._individual_render, text)

    def _individual_render(self: Self, match: re.Match) -> str:
        return self.context.render_tag(match.group(1), parse_attributes(match.group(2)))

    def _container_render(self: Self, node: Container, inner: str) -> str:
        if node.root:
            return inner

        def content() -> str:
            return inner

        return self.context.render_tag(node.name, node.attributes, content)
