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

"""Conversion options for hcl2json.

Options come from three layers, later layers winning:

  - Built-in defaults (ConvertOptions)
  - An options file (.hcl2json.yaml found upward, or --config PATH)
  - Command-line flags

Public API:

- ConvertOptions: Frozen dataclass of every pipeline option
- resolve_options: Combine the layers into a ConvertOptions
- load_options_file: Read and check a YAML options file

Example:
    Basic usage:

        from pathlib import Path
        from hcl2json.config import resolve_options

        options = resolve_options({"indent": 4}, start_dir=Path.cwd())
        print(options.indent)  # 4

"""

from .loader import ConvertOptions, load_options_file, resolve_options

__all__ = ["ConvertOptions", "load_options_file", "resolve_options"]
