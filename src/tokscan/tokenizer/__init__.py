"""Tokenizer package.

`BaseTokenizer` owns the scanning loop and leaves the choice of delimiter
characters to subclasses; `WhitespaceTokenizer` splits on ASCII whitespace.
"""

from .base import BaseTokenizer
from .whitespace import WhitespaceTokenizer

__all__ = ['BaseTokenizer', 'WhitespaceTokenizer']
