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

"""hcl2json - Convert HCL to JSON

A Python-based CLI tool for turning HCL documents (Terraform variable files
and similar) into JSON.

hcl2json provides:

- Conversion of one or many files, or stdin
- Shallow or deep merging of multiple documents (later files win)
- Extraction of a nested property by dotted path
- Compact, pretty, and single-quoted output
- Syntax-only validation of many files at once

Quick Start:
Convert a variables file:

    $ hcl2json -f terraform.tfvars --pretty

Validate several files:

    $ hcl2json --validate -f 'env/*.tfvars'

For full CLI documentation:

    $ hcl2json --help

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "hcl2json - Convert HCL files to JSON"

# Re-export commonly used functions for convenience
from hcl2json.config import ConvertOptions
from hcl2json.core import convert
from hcl2json.exceptions import (
    ConfigError,
    HCL2JSONError,
    InputError,
    MergeError,
    ParseError,
    ProjectionError,
    SerializationError,
    ValidationFailed,
)
from hcl2json.merge import merge_documents
from hcl2json.parsing import parse_hcl
from hcl2json.projection import project
from hcl2json.results import InputStatus, ValidationReport
from hcl2json.serialization import serialize
from hcl2json.validation import validate_inputs

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "ConfigError",
    "ConvertOptions",
    "HCL2JSONError",
    "InputError",
    "InputStatus",
    "MergeError",
    "ParseError",
    "ProjectionError",
    "SerializationError",
    "ValidationFailed",
    "ValidationReport",
    "convert",
    "merge_documents",
    "parse_hcl",
    "project",
    "serialize",
    "validate_inputs",
]
