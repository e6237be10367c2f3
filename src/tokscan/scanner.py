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
"""Scanning a file into token lines.

This module connects the input file, the tokenizer and the output sink. The
input is opened once, read in chunks, and every token is written out as
soon as it is complete.
"""

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from tokscan.config import ScanConfig
from tokscan.errors import InputUnavailableError
from tokscan.tokenizer import BaseTokenizer, WhitespaceTokenizer

HEADER = 'Processing tokens:'


@contextmanager
def open_input(
    path: Path, encoding: str = 'utf-8', errors: str = 'replace'
) -> Iterator[TextIO]:
    """Opens the input file for reading as text.

    The file is closed when the `with` block exits, whether or not an
    exception was raised inside it.

    Args:
        path (Path): The file to open.
        encoding (str): Text encoding. Defaults to 'utf-8'.
        errors (str): Decoding error handler. Defaults to 'replace'.

    Raises:
        InputUnavailableError: If the file is missing, is a directory, or
            cannot be read.

    Yields:
        TextIO: The open text stream.
    """
    try:
        stream = Path(path).open('r', encoding=encoding, errors=errors)
    except OSError as err:
        raise InputUnavailableError(path, err.strerror or str(err)) from err

    with stream:
        yield stream


class _ProgressReader:
    """Text stream proxy that reports raw bytes consumed to a progress bar."""

    def __init__(self, stream: TextIO, pbar: tqdm):
        self._stream = stream
        self._pbar = pbar

    def read(self, size: int = -1) -> str:
        chunk = self._stream.read(size)
        # Position of the underlying binary buffer, i.e. bytes read from disk.
        self._pbar.update(self._stream.buffer.tell() - self._pbar.n)
        return chunk


def scan_file(
    config: ScanConfig,
    out: TextIO | None = None,
    tokenizer: BaseTokenizer | None = None,
) -> int:
    """Tokenizes `config.input_file` and writes one line per token.

    Each line is `config.token_prefix` followed by the token, written and
    flushed before the next token is scanned. Nothing is written if the
    input cannot be opened.

    Args:
        config (ScanConfig): Settings for this run.
        out (TextIO | None): Output sink. Defaults to `sys.stdout`.
        tokenizer (BaseTokenizer | None): The tokenizer to use. If None, a
            `WhitespaceTokenizer` is used.

    Raises:
        InputUnavailableError: If the input file cannot be opened.

    Returns:
        int: The number of tokens written.
    """
    out = sys.stdout if out is None else out
    tokenizer = WhitespaceTokenizer() if tokenizer is None else tokenizer

    num_tokens = 0
    with open_input(config.input_file, config.encoding, config.errors) as f:
        if config.show_header:
            print(HEADER, file=out, flush=True)

        with tqdm(
            ncols=100,
            desc='Scanning ' + config.input_file.name,
            total=os.fstat(f.fileno()).st_size,
            unit='B',
            unit_scale=True,
            disable=not config.show_progress,
        ) as pbar:
            reader = _ProgressReader(f, pbar)
            tokens = tokenizer.tokenize_stream(reader, config.chunk_size)
            for token in tokens:
                print(f'{config.token_prefix}{token}', file=out, flush=True)
                num_tokens += 1

    return num_tokens
