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

"""Public API return types for hcl2json.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from hcl2json.validation import validate_inputs

        report = validate_inputs([("main.tfvars", text)])
        for entry in report.results:
            print(entry.name, entry.status)
        print(report.ok)
        ```
"""

from __future__ import annotations

from dataclasses import dataclass

VALID = "valid"
INVALID = "invalid"


@dataclass(frozen=True)
class InputStatus:
    """Validation outcome for one named input.

    Attributes:
        name: Input name (file path or "stdin").
        status: "valid" or "invalid".
        error: Description of the syntax problem, None when valid.
    """

    name: str
    status: str
    error: str | None = None

    @property
    def valid(self) -> bool:
        return self.status == VALID


@dataclass(frozen=True)
class ValidationReport:
    """Result from validating a set of inputs.

    Attributes:
        results: One InputStatus per input, in input order.
    """

    results: tuple[InputStatus, ...]

    @property
    def ok(self) -> bool:
        """True when every input is valid."""
        return all(entry.valid for entry in self.results)

    @property
    def errors(self) -> list[InputStatus]:
        return [entry for entry in self.results if not entry.valid]
