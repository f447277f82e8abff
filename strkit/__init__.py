"""String manipulation utilities.

This package provides functions for trimming text, converting between
case styles, building slugs and checking prefixes and suffixes, plus a
chainable wrapper over the same functions.
"""

from strkit.string_utils import (
    TextCoercionError,
    to_text,
    trim,
    capitalize,
    camel,
    slugify,
    count,
    ends_with,
    starts_with,
    lower,
    upper,
    capitalize_all,
    snake_to_camel,
    snake,
    detect_object,
    words,
    title,
)
from strkit.chain import TextChain, chain

__all__ = [
    'TextCoercionError',
    'to_text',
    'trim',
    'capitalize',
    'camel',
    'slugify',
    'count',
    'ends_with',
    'starts_with',
    'lower',
    'upper',
    'capitalize_all',
    'snake_to_camel',
    'snake',
    'detect_object',
    'words',
    'title',
    'TextChain',
    'chain',
]
