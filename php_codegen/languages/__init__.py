"""
Language-specific code generators.

This package contains the generators for supported target languages.
"""

from .php import PhpGenerator, create_php_generator

__all__ = ["PhpGenerator", "create_php_generator"]
