"""Whitespace tokenizer implementation."""

from .base import BaseTokenizer

# Same set as C's isspace() in the "C" locale.
WHITESPACE = frozenset(' \t\n\v\f\r')


class WhitespaceTokenizer(BaseTokenizer):
    """Splits text on runs of ASCII whitespace.

    Unicode space characters outside `WHITESPACE` (e.g. U+00A0) are treated
    as ordinary token characters.
    """

    def is_delimiter(self, ch: str) -> bool:
        """Returns True if `ch` is space, tab, newline, VT, FF or CR."""
        return ch in WHITESPACE
