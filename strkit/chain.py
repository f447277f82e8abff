"""Chainable wrapper around the string utility functions.

Example:
    from strkit import chain

    chain(' This is a tesT ').slugify().value      # 'this-is-a-test'
    chain('user_id').snake_to_camel().upper().value  # 'USERID'
    chain('test').length                             # 4
"""

from dataclasses import dataclass
from typing import Any, Optional

from strkit import string_utils


@dataclass(frozen=True)
class TextChain:
    """Immutable holder for one text value.

    Text-producing methods return a new TextChain; ``count``,
    ``ends_with`` and ``starts_with`` return plain values.
    """

    value: str

    def __post_init__(self):
        object.__setattr__(self, 'value', string_utils.to_text(self.value))

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return string_utils.count(self.value)

    @property
    def length(self) -> int:
        return len(self)

    def trim(self) -> 'TextChain':
        return TextChain(string_utils.trim(self.value))

    def capitalize(self) -> 'TextChain':
        return TextChain(string_utils.capitalize(self.value))

    def camel(self) -> 'TextChain':
        return TextChain(string_utils.camel(self.value))

    def slugify(self, delimiter: Any = '-') -> 'TextChain':
        return TextChain(string_utils.slugify(self.value, delimiter))

    def lower(self) -> 'TextChain':
        return TextChain(string_utils.lower(self.value))

    def upper(self) -> 'TextChain':
        return TextChain(string_utils.upper(self.value))

    def capitalize_all(self) -> 'TextChain':
        return TextChain(string_utils.capitalize_all(self.value))

    def snake_to_camel(self) -> 'TextChain':
        return TextChain(string_utils.snake_to_camel(self.value))

    def snake(self) -> 'TextChain':
        return TextChain(string_utils.snake(self.value))

    def words(self) -> 'TextChain':
        return TextChain(string_utils.words(self.value))

    def title(self) -> 'TextChain':
        return TextChain(string_utils.title(self.value))

    def count(self) -> int:
        return string_utils.count(self.value)

    def ends_with(self, substring: Any, position: Optional[int] = None) -> bool:
        return string_utils.ends_with(self.value, substring, position)

    def starts_with(self, substring: Any, position: Optional[int] = 0) -> bool:
        return string_utils.starts_with(self.value, substring, position)


def chain(value: Any) -> TextChain:
    """Wrap a value for chained calls.

    Args:
        value: Text or any text-coercible value.

    Returns:
        A TextChain holding the coerced text.

    Raises:
        TextCoercionError: If the value cannot be converted to text.
    """
    return TextChain(value)
