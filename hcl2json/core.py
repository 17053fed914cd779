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

"""Core orchestration for hcl2json.

This module ties the pipeline stages together:

1. Gather named inputs (files matched by the patterns, else stdin text)
2. Parse each input into a document
3. Merge the documents (shallow or deep)
4. Optionally extract a property by dotted path
5. Render the result as JSON

Validation mode replaces steps 3-5: every input is parsed, and a
per-input report is produced instead of JSON.

Example:
    Convert a document from text:
        ```python
        from hcl2json.config import ConvertOptions
        from hcl2json.core import convert

        text = convert(
            ConvertOptions(pretty=True, property="tags"),
            input_text='tags = { Project = "web-app" }',
        )
        print(text)
        ```

"""

from __future__ import annotations

from collections.abc import Sequence

from hcl2json.config import ConvertOptions
from hcl2json.exceptions import InputError, ValidationFailed
from hcl2json.io import expand_patterns, read_documents
from hcl2json.logging import get_global_logger
from hcl2json.merge import merge_documents
from hcl2json.parsing import parse_hcl
from hcl2json.projection import project
from hcl2json.serialization import serialize
from hcl2json.validation import format_report, validate_inputs
from hcl2json.values import Value

STDIN_NAME = "stdin"


def gather_inputs(
    patterns: Sequence[str], input_text: str | None
) -> list[tuple[str, str]]:
    """Collect (name, text) pairs from file patterns or stdin text.

    Files take precedence; input_text is used only when no patterns are
    given.

    Raises:
        InputError: If there are neither patterns nor input text, or a
            pattern matches nothing.
    """
    if patterns:
        return read_documents(expand_patterns(patterns))
    if input_text is None:
        raise InputError("No input provided")
    return [(STDIN_NAME, input_text)]


def parse_documents(named_inputs: Sequence[tuple[str, str]]) -> list[Value]:
    """Parse every input, stopping at the first syntax error."""
    logger = get_global_logger()
    documents = []
    for name, text in named_inputs:
        document = parse_hcl(text, name=name)
        logger.debug("PARSE", f"Parsed {name}")
        logger.dump("PARSE", f"Content from {name}", document)
        documents.append(document)
    return documents


def convert(options: ConvertOptions, input_text: str | None = None) -> str:
    """Run the full pipeline and return the output text.

    Args:
        options: Pipeline options.
        input_text: HCL text read from stdin, used when options.files is
            empty.

    Returns:
        The rendered JSON, or the validation report in validate mode.

    Raises:
        InputError: If no input is available.
        ParseError: If an input is not valid HCL (conversion mode).
        MergeError: If the documents cannot be merged.
        ProjectionError: If options.property does not resolve.
        SerializationError: If the result cannot be rendered.
        ValidationFailed: If any input is invalid (validate mode). The
            exception carries the full report.
    """
    logger = get_global_logger()
    named_inputs = gather_inputs(options.files, input_text)

    if options.validate:
        report = validate_inputs(named_inputs)
        if not report.ok:
            raise ValidationFailed(
                f"{len(report.errors)} of {len(report.results)} input(s) "
                "failed validation",
                report,
            )
        return format_report(report)

    total = 4 if options.property else 3
    logger.step(1, total, f"Parsing {len(named_inputs)} input(s)")
    documents = parse_documents(named_inputs)

    mode = "Deep" if options.deep_merge else "Shallow"
    logger.step(2, total, f"{mode} merging {len(documents)} document(s)")
    result = merge_documents(documents, deep=options.deep_merge)
    if isinstance(result, dict):
        top_level_keys = list(result.keys())
        logger.verbose(
            "MERGE",
            f"Merged document has {len(top_level_keys)} top-level keys: "
            f"{', '.join(top_level_keys)}",
        )
    logger.dump("MERGE", "Merged document", result)

    if options.property:
        logger.step(3, total, f"Extracting property: {options.property}")
        result = project(result, options.property)

    logger.step(total, total, "Rendering JSON")
    return serialize(
        result,
        pretty=options.pretty,
        indent=options.indent,
        single_quotes=options.single_quotes,
    )
