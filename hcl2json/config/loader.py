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

"""
Conversion options and options-file loading for hcl2json.

Configuration Layers
--------------------
1. **Built-in defaults**
   - Compact output, 2-space indent, double quotes, shallow merge

2. **Options file** (.hcl2json.yaml, or --config PATH)
   - Project-wide formatting preferences
   - Optional; discovered by walking upward from the working directory
   - Overrides built-in defaults

3. **Command-line flags**
   - Only flags that were actually given
   - Override the options file

Options File
------------
A YAML mapping with any of these keys:

    pretty: true
    indent: 4
    single_quotes: false
    deep_merge: true
    property: tags

Inputs (files, stdin) and validate mode are never read from the file.

Error Handling
--------------
- ConfigError: explicit file missing, YAML parse errors, unknown keys,
  or values of the wrong type
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from hcl2json.config import resolve_options
    >>> opts = resolve_options({"pretty": True}, config_path=None, start_dir=None)
    >>> opts.pretty, opts.indent
    (True, 2)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hcl2json.exceptions import ConfigError
from hcl2json.logging import get_global_logger
from hcl2json.merge import deep_merge

OPTIONS_FILENAME = ".hcl2json.yaml"

# Keys an options file may set, with their expected types
_FILE_KEYS: dict[str, type] = {
    "pretty": bool,
    "indent": int,
    "single_quotes": bool,
    "deep_merge": bool,
    "property": str,
}

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class ConvertOptions:
    """
    Everything the conversion pipeline needs to know.

    Attributes:
        pretty: Multi-line indented output.
        indent: Spaces per nesting level in pretty output.
        validate: Only check syntax; produce no JSON.
        single_quotes: Delimit strings with single quotes.
        files: File paths or glob patterns; empty means stdin.
        deep_merge: Merge nested objects recursively.
        property: Dotted path to extract, or None for the whole document.
    """

    pretty: bool = False
    indent: int = 2
    validate: bool = False
    single_quotes: bool = False
    files: tuple[str, ...] = field(default_factory=tuple)
    deep_merge: bool = False
    property: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ConfigError(f"indent must be an integer, got {self.indent!r}")
        if self.indent < 0:
            raise ConfigError(f"indent must not be negative, got {self.indent}")


# -------------------------------
# YAML helpers
# -------------------------------


def _check_types(data: dict[str, Any], source: Path) -> None:
    """Reject unknown keys and values of the wrong type."""
    unknown = [k for k in data if k not in _FILE_KEYS]
    if unknown:
        raise ConfigError(
            f"Unknown option(s) in {source}: {', '.join(map(str, unknown))} "
            f"(allowed: {', '.join(_FILE_KEYS)})"
        )
    for key, value in data.items():
        expected = _FILE_KEYS[key]
        # bool is an int subclass; an indent of `true` is still wrong
        if expected is int and isinstance(value, bool):
            ok = False
        else:
            ok = isinstance(value, expected)
        if not ok:
            raise ConfigError(
                f"Option '{key}' in {source} must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )


def load_options_file(path: Path) -> dict[str, Any]:
    """
    Load an options file and return its validated mapping.

    Raises:
      ConfigError - when the file does not exist, is not valid YAML, is not
                    a mapping, or holds unknown or mistyped options
    """
    if not path.exists():
        raise ConfigError(f"Options file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {path}: {err}") from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Options file must be a YAML mapping: {path}")
    _check_types(data, path)
    return data


def find_options_file(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for '.hcl2json.yaml'.
    Returns the first one found or None.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / OPTIONS_FILENAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Public API
# -------------------------------


def resolve_options(
    overrides: dict[str, Any],
    *,
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> ConvertOptions:
    """
    Build the effective ConvertOptions.

    Steps
      1) Start from the ConvertOptions defaults.
      2) Load the options file: 'config_path' if given, else the first
         .hcl2json.yaml found upward from 'start_dir' (skipped when
         'start_dir' is None).
      3) Merge: defaults -> options file -> overrides.

    Args
      overrides: Values given on the command line; keys whose value is None
                 are treated as not given.

    Raises
      ConfigError on a bad options file or invalid option values.
    """
    logger = get_global_logger()

    merged: dict[str, Any] = asdict(ConvertOptions())

    if config_path is None and start_dir is not None:
        config_path = find_options_file(start_dir.resolve())

    if config_path is not None:
        logger.verbose("CONFIG", f"Loading options: {config_path}")
        file_options = load_options_file(config_path)
        logger.dump("CONFIG", f"Content from {config_path.name}", file_options)
        merged = deep_merge(merged, file_options)

    given = {k: v for k, v in overrides.items() if v is not None}
    merged = deep_merge(merged, given)
    merged["files"] = tuple(merged["files"])

    logger.dump("CONFIG", "Effective options", {**merged, "files": list(merged["files"])})
    return ConvertOptions(**merged)
