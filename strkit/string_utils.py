"""String utility functions for strkit.

This module provides the stateless text helpers: trimming, case
conversion, capitalization, slugs, prefix/suffix checks and character
counting. Every function coerces its text arguments through `to_text`
before doing any work, so numbers and other values are accepted where
text is expected.
"""

from collections.abc import Mapping
import logging
import math
import re
import unicodedata
from typing import Any, Optional


logger = logging.getLogger(__name__)

# Runs of ASCII uppercase letters
_UPPER_RUN = re.compile(r'[A-Z]+')
_LEADING_UPPER_RUN = re.compile(r'^[A-Z]+')
_UNDERSCORE_RUN = re.compile(r'_+(.?)')
_COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')


class TextCoercionError(TypeError):
    """Exception raised when a value cannot be converted to text."""

    def __init__(self, message: str, value: Any = None):
        """Initialize the error.

        Args:
            message: Error description.
            value: The rejected value.
        """
        self.value = value
        super().__init__(message)


def to_text(value: Any) -> str:
    """Convert a value to text.

    Strings pass through unchanged, bytes are decoded as UTF-8 and any
    other value goes through ``str()``.

    Args:
        value: The value to convert.

    Returns:
        The text representation of the value.

    Raises:
        TextCoercionError: If the value is None or undecodable bytes.
    """
    if isinstance(value, str):
        return value
    if value is None:
        raise TextCoercionError("Cannot convert None to text", value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextCoercionError(f"Bytes are not valid UTF-8: {e}", value) from e

    logger.debug(f"Coercing {type(value).__name__} to text")
    return str(value)


def trim(text: Any) -> str:
    """Remove leading and trailing whitespace.

    Args:
        text: The text to trim.

    Returns:
        Trimmed text.
    """
    return to_text(text).strip()


def capitalize(text: Any) -> str:
    """Trim, then uppercase the first character and lowercase the rest.

    Args:
        text: The text to capitalize.

    Returns:
        Capitalized text, or an empty string for blank input.
    """
    text = trim(text)
    return text[:1].upper() + text[1:].lower()


def camel(text: Any) -> str:
    """Convert space separated words to camelCase.

    Args:
        text: The text to convert.

    Returns:
        Camel case string.
    """
    parts = trim(text).lower().split(' ')
    return parts[0] + ''.join(capitalize(word) for word in parts[1:])


def slugify(text: Any, delimiter: Any = '-') -> str:
    """Build a lowercase, delimiter separated slug without accents.

    Args:
        text: The text to slugify.
        delimiter: String placed where spaces were.

    Returns:
        Slugified string.
    """
    slug = trim(text).lower().replace(' ', to_text(delimiter))
    slug = unicodedata.normalize('NFD', slug)
    return _COMBINING_MARKS.sub('', slug)


def count(value: Any) -> int:
    """Count the characters of a value's text form."""
    return len(to_text(value))


def _is_integral(position: Any) -> bool:
    if isinstance(position, bool) or not isinstance(position, (int, float)):
        return False
    if isinstance(position, float):
        return math.isfinite(position) and position.is_integer()
    return True


def ends_with(text: Any, substring: Any, position: Optional[int] = None) -> bool:
    """Check whether text, cut at a position, ends with a substring.

    A missing, zero, non-integral or out of range position means the
    whole text is checked.

    Args:
        text: The text to check.
        substring: The expected ending.
        position: Index the text is considered to end at.

    Returns:
        True if the (cut) text ends with the substring.
    """
    text = to_text(text)
    substring = to_text(substring)

    if not position or not _is_integral(position) or not 0 < position <= len(text):
        position = len(text)

    return text[:int(position)].endswith(substring)


def starts_with(text: Any, substring: Any, position: Optional[int] = 0) -> bool:
    """Check whether a substring occurs in text exactly at a position.

    Args:
        text: The text to check.
        substring: The expected prefix.
        position: Index the substring must start at. Defaults to 0.

    Returns:
        True if the substring starts at the position. Positions that are
        not integers within the text always give False.
    """
    text = to_text(text)
    substring = to_text(substring)

    if position is None:
        position = 0
    if not _is_integral(position) or not 0 <= position <= len(text):
        return False

    return text.startswith(substring, int(position))


def lower(value: Any) -> str:
    """Convert a value's text form to lower case."""
    return to_text(value).lower()


def upper(value: Any) -> str:
    """Convert a value's text form to upper case."""
    return to_text(value).upper()


def capitalize_all(text: Any) -> str:
    """Capitalize every space separated word.

    Empty words are dropped, so runs of spaces collapse to one.

    Args:
        text: The text to convert.

    Returns:
        Text with each word capitalized.
    """
    capitalized = (capitalize(word) for word in to_text(text).split(' '))
    return ' '.join(word for word in capitalized if word)


def snake_to_camel(text: Any) -> str:
    """Convert snake_case to camelCase.

    Args:
        text: Snake case string.

    Returns:
        Camel case string.
    """
    return _UNDERSCORE_RUN.sub(lambda m: m.group(1).upper(), to_text(text))


def snake(text: Any) -> str:
    """Convert camelCase or PascalCase to snake_case.

    A leading run of capitals is lowercased in place; every later run
    becomes an underscore followed by the lowercased run, so ``userID``
    gives ``user_id``.

    Args:
        text: Camel or Pascal case string.

    Returns:
        Snake case string.
    """
    text = _LEADING_UPPER_RUN.sub(lambda m: m.group(0).lower(), to_text(text))
    return _UPPER_RUN.sub(lambda m: '_' + m.group(0).lower(), text)


def detect_object(value: Any) -> bool:
    """Return True if the value is a key-value mapping."""
    return isinstance(value, Mapping)


def words(text: Any) -> str:
    """Split a camelCase string into space separated lowercase words.

    Args:
        text: The text to split.

    Returns:
        The snake case form with underscores replaced by spaces.
    """
    return snake(text).replace('_', ' ')


def title(text: Any) -> str:
    """Convert an identifier or phrase to Title Case.

    Args:
        text: The text to convert.

    Returns:
        Title cased words.
    """
    return capitalize_all(words(text))
