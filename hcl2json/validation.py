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

"""Syntax validation module.

This module checks that inputs parse as HCL without merging, projecting,
or producing any JSON. This is useful for quick feedback while editing
variable files and for CI/CD pre-checks.

Every input is checked, even after a failure, and results are reported in
input order.

Example:
    Validate inputs and handle results:
        ```python
        from hcl2json.validation import format_report, validate_inputs

        report = validate_inputs([
            ("a.tfvars", 'region = "us-west-2"'),
            ("b.tfvars", "invalid hcl content {"),
        ])
        print(format_report(report))
        # VALID: a.tfvars
        # INVALID: b.tfvars: Failed to parse HCL content in b.tfvars: ...
        assert not report.ok
        ```

"""

from __future__ import annotations

from collections.abc import Iterable

from hcl2json.exceptions import ParseError
from hcl2json.logging import get_global_logger
from hcl2json.parsing import parse_hcl
from hcl2json.results import INVALID, VALID, InputStatus, ValidationReport

__all__ = ["validate_inputs", "format_report"]


def validate_inputs(named_inputs: Iterable[tuple[str, str]]) -> ValidationReport:
    """Parse each named input and record whether it is valid.

    Does NOT:

    - Merge documents
    - Resolve property paths
    - Produce JSON output

    Args:
        named_inputs: (name, text) pairs, in the order to report them.

    Returns:
        A ValidationReport with one entry per input. report.ok is False
            if any input failed to parse.

    """
    logger = get_global_logger()
    results: list[InputStatus] = []

    for name, text in named_inputs:
        try:
            parse_hcl(text, name=name)
        except ParseError as err:
            logger.verbose("VALIDATE", f"[X] {name}")
            results.append(InputStatus(name=name, status=INVALID, error=str(err)))
            continue
        logger.verbose("VALIDATE", f"[OK] {name}")
        results.append(InputStatus(name=name, status=VALID))

    report = ValidationReport(results=tuple(results))
    if report.ok:
        logger.verbose("VALIDATE", f"All {len(results)} input(s) are valid")
    else:
        logger.verbose(
            "VALIDATE",
            f"{len(report.errors)} of {len(results)} input(s) failed validation",
        )
    return report


def format_report(report: ValidationReport) -> str:
    """Render a report as one "VALID: name" / "INVALID: name: error" line per input."""
    lines = []
    for entry in report.results:
        if entry.valid:
            lines.append(f"VALID: {entry.name}")
        else:
            lines.append(f"INVALID: {entry.name}: {entry.error}")
    return "\n".join(lines)
