"""
Naming utilities for safe code generation.

Handles case conversion of schema names, the type-name suffix rule and
reserved word escaping. All helpers are pure: converting the same name twice
always yields the same result.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import Iterable, Optional, Set

_WORD_BOUNDARIES = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


class NamingCase(Enum):
    """Different naming case styles."""

    PASCAL_CASE = "pascal"  # UserName
    CAMEL_CASE = "camel"  # userName
    SNAKE_CASE = "snake"  # user_name
    KEEP = "keep"  # as written in the schema


def split_words(name: str) -> list[str]:
    """Split a name on case changes and non-alphanumeric characters."""
    for pattern in _WORD_BOUNDARIES:
        name = pattern.sub(r"\1 \2", name)
    return _NON_ALNUM.sub(" ", name).split()


@lru_cache(maxsize=1024)
def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(name))


@lru_cache(maxsize=1024)
def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


@lru_cache(maxsize=1024)
def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    return "_".join(word.lower() for word in split_words(name))


def convert_case(
    name: str, target_case: NamingCase, transform_underscore: bool = False
) -> str:
    """
    Convert a name to the target case style.

    Args:
        name: Original name
        target_case: Desired case style
        transform_underscore: When False, underscores are kept and every
            underscore-separated chunk is converted on its own

    Returns:
        Converted name
    """
    if target_case == NamingCase.KEEP:
        return name

    converters = {
        NamingCase.PASCAL_CASE: to_pascal_case,
        NamingCase.CAMEL_CASE: to_camel_case,
        NamingCase.SNAKE_CASE: to_snake_case,
    }
    convert = converters[target_case]

    if transform_underscore or target_case == NamingCase.SNAKE_CASE:
        return convert(name)

    return "_".join(convert(part) for part in name.split("_"))


def with_suffix(name: str, suffix: str) -> str:
    """Append suffix unless the name already ends with it (case-sensitive)."""
    if not suffix or name.endswith(suffix):
        return name
    return f"{name}{suffix}"


class NameSanitizer:
    """Keeps emitted names clear of reserved words."""

    def __init__(
        self,
        reserved_words: Optional[Iterable[str]] = None,
        escape_prefix: str = "_",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that may not be emitted as-is (matched
                case-insensitively)
            escape_prefix: Prefix used to escape a reserved word
        """
        self.reserved_words: Set[str] = {w.lower() for w in reserved_words or ()}
        self.escape_prefix = escape_prefix

    def is_reserved(self, name: str) -> bool:
        """Check whether a name collides with a reserved word."""
        return name.strip().lower() in self.reserved_words

    def escape_reserved(self, name: str) -> str:
        """Prefix a reserved word, leave any other name untouched."""
        if self.is_reserved(name):
            return f"{self.escape_prefix}{name.strip()}"
        return name
