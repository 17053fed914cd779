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

"""Exception hierarchy for hcl2json.

This module defines a custom exception hierarchy that allows library users
to distinguish between the stages of a conversion that can fail:

- ParseError: Malformed HCL input
- MergeError: Documents that cannot be combined
- ProjectionError: A --property path that does not resolve
- SerializationError: A value that cannot be encoded as text
- InputError: Missing, unreadable, or unmatched input files
- ConfigError: Invalid options file or option values

All exceptions inherit from HCL2JSONError, allowing users to catch every
conversion error with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from hcl2json.core import convert
        from hcl2json.exceptions import ParseError, ProjectionError

        try:
            text = convert(options, input_text=source)
        except ParseError as e:
            print(f"Syntax error: {e}")
        except ProjectionError as e:
            print(f"Bad property path: {e}")
        ```

    Catching all hcl2json errors:
        ```python
        from hcl2json.exceptions import HCL2JSONError

        try:
            text = convert(options, input_text=source)
        except HCL2JSONError as e:
            print(f"hcl2json error: {e}")
        ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hcl2json.results import ValidationReport

__all__ = [
    "HCL2JSONError",
    "ParseError",
    "MergeError",
    "ProjectionError",
    "SerializationError",
    "InputError",
    "ConfigError",
    "ValidationFailed",
]


class HCL2JSONError(Exception):
    """Base exception for all hcl2json errors."""

    pass


class ParseError(HCL2JSONError):
    """Raised when HCL text cannot be parsed.

    Attributes:
        name: Name of the input that failed (file path or "stdin"), or
            None when the text was parsed anonymously.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class MergeError(HCL2JSONError):
    """Raised when documents cannot be merged.

    This happens when a shallow merge of two or more documents meets a
    document whose top level is not an object, or when there is nothing
    to merge at all.
    """

    pass


class ProjectionError(HCL2JSONError):
    """Raised when a dotted property path cannot be resolved.

    Attributes:
        path: The full path that was requested (e.g., "database.engine").
        resolved: The sub-path reached when resolution failed.
        segment: The segment that could not be applied.
        reason: "not_found" when the key is missing from an object,
            "not_object" when the current node is not an object.
        available: Keys of the object at `resolved` for "not_found"
            failures (possibly empty), None for "not_object" failures.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        resolved: str,
        segment: str,
        reason: str,
        available: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.resolved = resolved
        self.segment = segment
        self.reason = reason
        self.available = available


class SerializationError(HCL2JSONError):
    """Raised when a value cannot be rendered as text.

    Should not occur for values produced by the parser; reserved for
    non-finite floats and unsupported types.
    """

    pass


class InputError(HCL2JSONError):
    """Raised for problems obtaining input.

    This exception is raised when there are problems with:

    - No files and no stdin text supplied
    - A file pattern that matches nothing
    - Files that cannot be read or are not UTF-8 text
    """

    pass


class ConfigError(HCL2JSONError):
    """Raised for options-file and option-value errors.

    This exception is raised when there are problems with:

    - YAML parsing of the options file
    - Unknown option keys
    - Option values of the wrong type (e.g., a negative indent)
    """

    pass


class ValidationFailed(HCL2JSONError):
    """Raised by the pipeline when validation mode finds invalid inputs.

    Attributes:
        report: The complete per-input ValidationReport, including the
            inputs that were valid.
    """

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report
