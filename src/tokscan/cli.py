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
"""Command line entry point for tokscan.

Reads one file, splits it into whitespace-delimited tokens and prints each
token on its own line.

Typical usage example:
    tokscan
    tokscan --input_file notes.txt --no_header
    python -m tokscan --input_file big.txt --progress
"""

import argparse
import sys
from pathlib import Path

from tokscan.config import ScanConfig
from tokscan.errors import InputUnavailableError
from tokscan.scanner import scan_file


def create_base_parser():
    """Create base argument parser with common arguments."""
    defaults = ScanConfig()
    parser = argparse.ArgumentParser(
        prog='tokscan',
        description='Print the whitespace-delimited tokens of a file.',
    )

    # Input
    input_group = parser.add_argument_group('Input')
    input_group.add_argument(
        '--input_file', type=Path, default=defaults.input_file
    )
    input_group.add_argument('--encoding', type=str, default=defaults.encoding)
    input_group.add_argument(
        '--chunk_size', type=int, default=defaults.chunk_size
    )

    # Output
    output_group = parser.add_argument_group('Output')
    output_group.add_argument('--no_header', action='store_true')
    output_group.add_argument('--progress', action='store_true')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main function for scanning.

    Args:
        argv (list[str] | None): Command line arguments. If None,
            `sys.argv[1:]` is used.

    Returns:
        int: The process exit code, 0 on success and 1 if the input file
            cannot be opened.
    """
    parser = create_base_parser()
    args = parser.parse_args(argv)

    try:
        config = ScanConfig(
            input_file=args.input_file,
            encoding=args.encoding,
            chunk_size=args.chunk_size,
            show_header=not args.no_header,
            show_progress=args.progress,
        )
    except ValueError as err:
        parser.error(str(err))

    try:
        scan_file(config)
    except InputUnavailableError as err:
        print(f'Error: {err}', file=sys.stderr)
        return 1

    return 0
