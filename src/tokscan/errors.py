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
"""Exceptions raised by tokscan."""

from pathlib import Path


class InputUnavailableError(OSError):
    """The input file is missing or cannot be opened for reading.

    Attributes:
        path (Path): The path that could not be opened.
    """

    def __init__(self, path: Path, reason: str = ''):
        self.path = Path(path)
        message = f"Could not open the input file at path: '{self.path}'"
        if reason:
            message = f'{message} ({reason})'
        super().__init__(message)
