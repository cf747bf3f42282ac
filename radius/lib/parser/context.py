"""
Tag contexts for Radius.

A context defines which tags are available to a template and what each
one expands to. Handlers are registered explicitly by name; the parser
only ever talks to a context through `render_tag`.

Example:
    context = Context()

    @context.tag("hello")
    def hello(attributes, content):
        return f"Hello {attributes.get('name', 'World')}!"

    Parser(context).parse('<radius:hello name="John" />')
"""

from typing import Callable, Optional, Protocol, Self, runtime_checkable
from radius.lib.parser.errors import UndefinedTagError

ContentProvider = Callable[[], str]
TagHandler = Callable[[dict[str, str], Optional[ContentProvider]], str]

DEFAULT_PREFIX: str = "radius"


@runtime_checkable
class TagResolver(Protocol):
    """Protocol defining what the parser needs from a context.

    Attributes:
        prefix: Namespace that marks template tags, as in "<prefix:name>"
    """

    prefix: str

    def render_tag(
        self: Self,
        name: str,
        attributes: dict[str, str],
        content: Optional[ContentProvider] = None,
    ) -> str:
        """Return the substitution text for one tag occurrence.

        Args:
            name: Tag name without the prefix
            attributes: Attributes parsed from the tag
            content: Returns the expanded body of a container tag;
                     None for self-closing tags

        Raises:
            UndefinedTagError: If no handler exists for name
        """
        ...


class Context:
    """Registration table mapping tag names to handlers.

    Attributes:
        prefix: Namespace that marks template tags
        tags: Tag name to handler mapping
    """

    def __init__(self: Self, prefix: str = DEFAULT_PREFIX) -> None:
        if not prefix:
            raise ValueError("Tag prefix cannot be empty")

        self.prefix: str = prefix
        self.tags: dict[str, TagHandler] = {}

    def define_tag(self: Self, name: str, handler: TagHandler) -> None:
        """Register handler for name, replacing any previous one."""
        self.tags[name] = handler

    def tag(self: Self, name: str) -> Callable[[TagHandler], TagHandler]:
        """Decorator form of `define_tag`."""

        def decorator(handler: TagHandler) -> TagHandler:
            self.define_tag(name, handler)
            return handler

        return decorator

    def tag_names(self: Self) -> list[str]:
        return sorted(self.tags)

    def render_tag(
        self: Self,
        name: str,
        attributes: dict[str, str],
        content: Optional[ContentProvider] = None,
    ) -> str:
        """Dispatch one tag occurrence to its handler.

        Args:
            name: Tag name without the prefix
            attributes: Attributes parsed from the tag
            content: Inner content provider for container tags

        Returns:
            The handler's substitution text
        """
        handler: TagHandler | None = self.tags.get(name)
        if handler is None:
            return self.tag_missing(name, attributes, content)
        return handler(attributes, content)

    def tag_missing(
        self: Self,
        name: str,
        attributes: dict[str, str],
        content: Optional[ContentProvider] = None,
    ) -> str:
        """Called for tags with no handler. Override to supply a fallback.

        Raises:
            UndefinedTagError: Always, in this base implementation
        """
        raise UndefinedTagError(name)
