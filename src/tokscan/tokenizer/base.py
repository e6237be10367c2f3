# Copyright 2025 Michael Ellis
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Abstract base class for tokenizers.

A tokenizer turns a stream of text into tokens. Concrete subclasses only
decide which characters separate tokens; the scanning loop itself lives
here so every tokenizer collapses delimiters and handles the end of input
the same way.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TextIO


class BaseTokenizer(ABC):
    """Base tokenizer class with the shared scanning loop."""

    @abstractmethod
    def is_delimiter(self, ch: str) -> bool:
        """Returns True if `ch` separates tokens."""

    def tokenize(self, chunks: Iterable[str]) -> Iterator[str]:
        """Lazily yields the tokens found in a sequence of text chunks.

        A token is a maximal run of non-delimiter characters. Runs of
        delimiters collapse, so no empty token is ever produced, and the end
        of the input is not itself a delimiter: whatever has been collected
        when the chunks run out is yielded as the last token.

        Chunks may be of any size. A token that starts in one chunk and ends
        in a later one is yielded once, intact.

        Args:
            chunks (Iterable[str]): Text to scan, e.g. a string, a list of
                lines, or an open text file.

        Yields:
            str: Each token, in the order it appears in the input.
        """
        token_chars: list[str] = []
        for chunk in chunks:
            for ch in chunk:
                if not self.is_delimiter(ch):
                    token_chars.append(ch)
                elif token_chars:
                    yield ''.join(token_chars)
                    token_chars.clear()

        if token_chars:
            yield ''.join(token_chars)

    def tokenize_text(self, text: str) -> list[str]:
        """Returns all tokens of an in-memory string."""
        return list(self.tokenize((text,)))

    def tokenize_stream(
        self, stream: TextIO, chunk_size: int = 4096
    ) -> Iterator[str]:
        """Lazily yields the tokens read from an open text stream.

        Args:
            stream (TextIO): A readable text stream. It is not closed here.
            chunk_size (int): Number of characters per read call.
                Defaults to 4096.

        Yields:
            str: Each token, in the order it appears in the stream.
        """
        yield from self.tokenize(iter(lambda: stream.read(chunk_size), ''))
