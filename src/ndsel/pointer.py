"""JSON Pointer (RFC 6901) parsing and resolution.

Syntax:
    ""              the whole document
    /key/0/sub      object member "key", array element 0, member "sub"

Inside a token "~1" stands for "/" and "~0" stands for "~".
"""

import re
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import ConfigurationError, PointerResolutionError, PointerSyntaxError

_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")
_BAD_ESCAPE = re.compile(r"~(?![01])")


def _unescape(token: str) -> str:
    # Order matters: "~01" must become "~1", not "/"
    return token.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True)
class JsonPointer:
    """Parsed JSON Pointer.

    Examples:
        >>> JsonPointer.parse("/a/0").tokens
        ('a', '0')
        >>> JsonPointer.parse("/a~1b").tokens
        ('a/b',)
        >>> JsonPointer.parse("").tokens
        ()
    """

    text: str
    """Pointer as written by the user."""

    tokens: Tuple[str, ...]
    """Unescaped reference tokens, outermost first."""

    @classmethod
    def parse(cls, text: str) -> "JsonPointer":
        """Parse pointer text.

        Raises:
            PointerSyntaxError: If text is non-empty and does not start with
                "/", or contains a "~" that is not part of "~0" or "~1".
        """
        if text == "":
            return cls(text=text, tokens=())
        if not text.startswith("/"):
            raise PointerSyntaxError(text, "must be empty or start with '/'")
        if _BAD_ESCAPE.search(text):
            raise PointerSyntaxError(text, "'~' must be followed by '0' or '1'")
        tokens = tuple(_unescape(token) for token in text[1:].split("/"))
        return cls(text=text, tokens=tokens)

    def resolve(self, document: Any) -> Any:
        """Return the value this pointer selects in a parsed JSON document.

        Raises:
            PointerResolutionError: If any token does not select a value.
        """
        value = document
        for token in self.tokens:
            if isinstance(value, dict):
                if token not in value:
                    raise PointerResolutionError(self.text, f"no member {token!r}")
                value = value[token]
            elif isinstance(value, list):
                if not _ARRAY_INDEX.fullmatch(token):
                    raise PointerResolutionError(
                        self.text, f"invalid array index {token!r}"
                    )
                index = int(token)
                if index >= len(value):
                    raise PointerResolutionError(
                        self.text, f"index {index} out of range"
                    )
                value = value[index]
            else:
                raise PointerResolutionError(
                    self.text, f"cannot descend into {type(value).__name__}"
                )
        return value

    def __str__(self) -> str:
        return self.text


def parse_pointers(fields: str) -> Tuple[JsonPointer, ...]:
    """Parse a comma-separated list of pointers, keeping order and duplicates.

    Args:
        fields: Value of the --fields option, e.g. "/a,/b/0,/a"

    Returns:
        Tuple of parsed pointers

    Raises:
        ConfigurationError: If no pointer is given or one is malformed
    """
    if not fields:
        raise ConfigurationError("at least one field pointer is required")
    return tuple(JsonPointer.parse(text) for text in fields.split(","))
