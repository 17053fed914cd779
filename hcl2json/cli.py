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

"""Command-line interface for hcl2json.

This module provides the main CLI entry point for the hcl2json tool, which
converts HCL files (e.g., Terraform .tfvars) to JSON.

Example:
    Convert a file:
        ```bash
        $ hcl2json -f terraform.tfvars
        ```

    Merge several files and pretty-print with 4-space indent:
        ```bash
        $ hcl2json -f 'env/*.tfvars' --deep-merge --pretty --indent 4
        ```

    Extract a nested property:
        ```bash
        $ hcl2json -f terraform.tfvars -p database.engine
        ```

    Read from stdin and write to a file:
        ```bash
        $ cat terraform.tfvars | hcl2json -o out.json
        ```

    Validate syntax only:
        ```bash
        $ hcl2json --validate -f 'env/*.tfvars'
        ```

Exit Codes:

- 0: Success
- 1: Error (input, syntax, merge, property, or validation failure)

Note:
    The CLI uses argparse for command parsing (stdlib, zero dependencies).
    Converted output goes to stdout; errors and diagnostics go to stderr.
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode and dumps parsed documents as YAML.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback

from hcl2json import __version__
from hcl2json.config import resolve_options
from hcl2json.core import convert
from hcl2json.exceptions import HCL2JSONError, ValidationFailed
from hcl2json.io import read_stdin, write_output
from hcl2json.logging import get_logger, set_global_logger
from hcl2json.validation import format_report


def _package_version() -> str:
    try:
        return version("hcl2json")
    except PackageNotFoundError:
        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Boolean flags default to None rather than False so that an options
    file can supply values for flags that were not given.
    """
    parser = argparse.ArgumentParser(
        prog="hcl2json",
        description="Convert HCL files to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hcl2json {_package_version()}",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=None,
        help="Pretty format JSON with newlines and indentation",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Number of spaces for indentation (default: 2)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate HCL syntax without conversion",
    )
    parser.add_argument(
        "--single-quotes",
        action="store_true",
        default=None,
        help="Use single quotes instead of double quotes",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        metavar="FILE",
        help="HCL file(s) to convert (supports glob patterns, reads from stdin if not provided)",
    )
    parser.add_argument(
        "--deep-merge",
        action="store_true",
        default=None,
        help="Use deep merge instead of shallow merge when multiple files provided",
    )
    parser.add_argument(
        "-p",
        "--property",
        default=None,
        help="Property within HCL to extract, as a dotted path (e.g., tags.Project)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Options file (default: nearest .hcl2json.yaml, if any)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress on stderr",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output on stderr (implies --verbose)",
    )
    return parser


def _report_error(err: HCL2JSONError, args: argparse.Namespace) -> int:
    print(f"Error: {err}", file=sys.stderr)
    if args.verbose or args.debug:
        traceback.print_exc()
    return 1


def run(args: argparse.Namespace) -> int:
    """Run a conversion or validation for parsed arguments.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).

    Note:
        Reads stdin when no --file is given. Prints the result to stdout
        (or writes it to --output) and errors to stderr.

    """
    # Configure global logger
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        options = resolve_options(
            {
                "pretty": args.pretty,
                "indent": args.indent,
                "validate": args.validate,
                "single_quotes": args.single_quotes,
                "files": tuple(args.file),
                "deep_merge": args.deep_merge,
                "property": args.property,
            },
            config_path=args.config,
            start_dir=Path.cwd(),
        )
        input_text = None if options.files else read_stdin()
        result = convert(options, input_text=input_text)
        write_output(result, args.output)
    except ValidationFailed as err:
        try:
            write_output(format_report(err.report), args.output)
        except HCL2JSONError as write_err:
            return _report_error(write_err, args)
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except HCL2JSONError as err:
        return _report_error(err, args)

    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the hcl2json CLI.

    This function is registered as the 'hcl2json' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = run(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
