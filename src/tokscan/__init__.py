"""tokscan: print the whitespace-delimited tokens of a file."""

from .config import ScanConfig
from .errors import InputUnavailableError
from .scanner import open_input, scan_file
from .tokenizer import BaseTokenizer, WhitespaceTokenizer

__all__ = [
    'BaseTokenizer',
    'InputUnavailableError',
    'ScanConfig',
    'WhitespaceTokenizer',
    'open_input',
    'scan_file',
]
