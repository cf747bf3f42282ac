"""
Exceptions raised while parsing and expanding Radius templates.

Every failure is fatal to the current parse call; callers that want a
result object instead of an exception should go through
`radius.lib.input.input_process`.
"""


class ParseError(Exception):
    """Base class for all template parsing failures."""


class MissingEndTagError(ParseError):
    """A start tag was never closed.

    Attributes:
        tag_name: Name of the innermost tag left open
    """

    def __init__(self, tag_name: str) -> None:
        self.tag_name: str = tag_name
        super().__init__(f"end tag not found for start tag `{tag_name}'")


class MismatchedEndTagError(MissingEndTagError):
    """An end tag did not close the innermost open tag.

    The error is reported against the tag that was left open (the popped
    stack frame), not against the end tag that was found.

    Attributes:
        tag_name: Name of the open tag that failed to close
        end_tag: Name written in the offending end tag
    """

    def __init__(self, tag_name: str, end_tag: str) -> None:
        self.end_tag: str = end_tag
        super().__init__(tag_name)


class UndefinedTagError(ParseError):
    """The context has no handler for a tag name."""

    def __init__(self, tag_name: str) -> None:
        self.tag_name: str = tag_name
        super().__init__(f"undefined tag `{tag_name}'")


class TagError(ParseError):
    """A tag handler could not produce its output."""

    def __init__(self, tag_name: str, reason: str) -> None:
        self.tag_name: str = tag_name
        self.reason: str = reason
        super().__init__(f"tag `{tag_name}': {reason}")
