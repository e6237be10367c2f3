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
"""Configuration module for a scan run."""

import io
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ScanConfig:
    """Configuration class for a single scan.

    Args:
        input_file (Path): Path to the file to tokenize.
        encoding (str): Text encoding used to decode the input.
        errors (str): Decoding error handler passed to `open`.
        chunk_size (int): Number of characters read per read call.
        show_header (bool): Print the banner line before the tokens.
        show_progress (bool): Draw a byte progress bar on stderr.
        token_prefix (str): Text written in front of every token.
    """

    # --- Input ---
    input_file: Path = Path('tokens.txt')
    encoding: str = 'utf-8'
    errors: str = 'replace'
    chunk_size: int = 4096

    # --- Output ---
    show_header: bool = True
    show_progress: bool = False
    token_prefix: str = 'Token: '

    def __post_init__(self):
        self.input_file = Path(self.input_file)
        if self.chunk_size < 1:
            raise ValueError(
                'chunk_size must be a positive integer, '
                f'got {self.chunk_size}'
            )
        try:
            io.TextIOWrapper(io.BytesIO(), encoding=self.encoding)
        except LookupError as err:
            raise ValueError(
                f"'{self.encoding}' is not a known text encoding"
            ) from err
