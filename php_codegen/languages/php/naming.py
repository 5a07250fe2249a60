"""
PHP-specific naming utilities.

Handles the words PHP refuses (or that read ambiguously) as enum case names.
"""

from ...core.naming import NameSanitizer

# Enum case names share the class-constant namespace; matched case-insensitively.
PHP_RESERVED_CASE_NAMES = frozenset({"class", "new"})


def create_enum_case_sanitizer() -> NameSanitizer:
    """Create a sanitizer that escapes reserved enum case names with `_`."""
    return NameSanitizer(PHP_RESERVED_CASE_NAMES, escape_prefix="_")
