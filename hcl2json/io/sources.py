# Copyright 2025 Roger Cibrian
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

"""Reading inputs and writing output.

File patterns are expanded with glob in the order they were given; the
matches of a single pattern are sorted so runs are reproducible. The order
matters: it decides which document wins a merge.
"""

from __future__ import annotations

import glob
from collections.abc import Iterable, Sequence
from pathlib import Path
import sys
from typing import TextIO

from hcl2json.exceptions import InputError
from hcl2json.logging import get_global_logger

__all__ = ["expand_patterns", "read_documents", "read_stdin", "write_output"]


def expand_patterns(patterns: Iterable[str]) -> list[Path]:
    """Expand file patterns into an ordered list of files.

    Args:
        patterns: Paths or glob patterns ("*", "?", "[...]", "**").

    Returns:
        Matching files. A file matched by more than one pattern appears
            once, at its first position.

    Raises:
        InputError: If a pattern matches no files.
    """
    logger = get_global_logger()
    seen: set[Path] = set()
    paths: list[Path] = []

    for pattern in patterns:
        matches = sorted(
            m for m in glob.glob(pattern, recursive=True) if Path(m).is_file()
        )
        if not matches:
            raise InputError(f"No files match pattern: {pattern}")
        logger.debug("INPUT", f"Pattern {pattern!r} matched {len(matches)} file(s)")
        for match in matches:
            path = Path(match)
            if path in seen:
                continue
            seen.add(path)
            paths.append(path)

    return paths


def read_documents(paths: Sequence[Path]) -> list[tuple[str, str]]:
    """Read files as UTF-8 text.

    Returns:
        (name, text) pairs in the given order; name is the path as given.

    Raises:
        InputError: If a file cannot be read or is not valid UTF-8.
    """
    logger = get_global_logger()
    documents = []
    for path in paths:
        logger.verbose("INPUT", f"Reading: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as err:
            raise InputError(f"File is not valid UTF-8 text: {path}") from err
        except OSError as err:
            raise InputError(f"Failed to read file: {path}: {err}") from err
        documents.append((str(path), text))
    return documents


def read_stdin(stream: TextIO | None = None) -> str:
    """Read all of standard input (or the given stream)."""
    stream = stream if stream is not None else sys.stdin
    try:
        return stream.read()
    except UnicodeDecodeError as err:
        raise InputError("Standard input is not valid UTF-8 text") from err


def write_output(text: str, path: Path | None = None) -> None:
    """Write text to a file, or print it to stdout with a trailing newline.

    Parent directories of path are created as needed.
    """
    if path is None:
        print(text)
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as err:
        raise InputError(f"Failed to write output file: {path}: {err}") from err
    get_global_logger().verbose("OUTPUT", f"Wrote {len(text)} characters to {path}")
