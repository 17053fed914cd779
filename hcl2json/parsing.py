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

"""HCL parser boundary.

Wraps python-hcl2 so the rest of the package never sees parser types or
lark exceptions. Parsed trees are converted into the canonical model with
values.normalize().

Example:
    >>> from hcl2json.parsing import parse_hcl
    >>> parse_hcl('region = "us-west-2"\\ncount = 3\\n')
    {'region': 'us-west-2', 'count': 3}
"""

from __future__ import annotations

import re

import hcl2
from lark.exceptions import LarkError

from hcl2json.exceptions import ParseError
from hcl2json.values import Value, normalize

__all__ = ["parse_hcl", "describe_parse_error", "decode_escapes"]

_ESCAPE_RE = re.compile(r"\\(?:u([0-9A-Fa-f]{4})|U([0-9A-Fa-f]{8})|(.)|$)", re.DOTALL)
_SIMPLE_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "r": "\r", "t": "\t"}

# python-hcl2 renders a unary minus as an interpolation, e.g. "${-3}"
_NEGATIVE_NUMBER_RE = re.compile(r"^\$\{-(\d+)(\.\d+)?\}$")
_EXPRESSION_RE = re.compile(r"^\$\{.*\}$", re.DOTALL)


def describe_parse_error(err: Exception) -> str:
    """Return a one-line description of a parser exception.

    lark errors render several lines of context (the offending source line,
    a caret, and the expected tokens); only the first line is kept.
    """
    for line in str(err).splitlines():
        if line.strip():
            return line.strip()
    return type(err).__name__


def decode_escapes(text: str) -> str:
    """Decode the backslash escapes of an HCL quoted string.

    Supported sequences are \\", \\\\, \\n, \\r, \\t, \\uNNNN and
    \\UNNNNNNNN.

    Raises:
        ValueError: On any other escape sequence.

    Example:
        >>> decode_escapes(r'He said \\"Hi\\"')
        'He said "Hi"'
    """
    if "\\" not in text:
        return text

    def replace(match: re.Match) -> str:
        short_hex, long_hex, char = match.groups()
        hex_digits = short_hex or long_hex
        if hex_digits:
            code = int(hex_digits, 16)
            if code > 0x10FFFF:
                raise ValueError(f"Invalid unicode escape '{match.group(0)}'")
            return chr(code)
        if char in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[char]
        raise ValueError(f"Invalid escape sequence '{match.group(0)}'")

    return _ESCAPE_RE.sub(replace, text)


def _decode_string(text: str) -> Value:
    match = _NEGATIVE_NUMBER_RE.match(text)
    if match:
        whole, fraction = match.groups()
        return -float(whole + fraction) if fraction else -int(whole)
    if _EXPRESSION_RE.match(text):
        return text
    return decode_escapes(text)


def _decode_literals(node: Value) -> Value:
    """Finish literal decoding that python-hcl2 leaves undone."""
    if isinstance(node, str):
        return _decode_string(node)
    if isinstance(node, list):
        return [_decode_literals(item) for item in node]
    if isinstance(node, dict):
        return {
            decode_escapes(key): _decode_literals(item) for key, item in node.items()
        }
    return node


def parse_hcl(text: str, name: str | None = None) -> Value:
    """Parse HCL text into a canonical value.

    String escapes are decoded and negative number literals come back as
    numbers. Other expressions are kept as "${...}" strings.

    Args:
        text: HCL source text.
        name: Input name used in error messages (file path or "stdin").

    Returns:
        The parsed document. An HCL body is always an object.

    Raises:
        ParseError: If the text is not valid HCL, or a string holds an
            invalid escape sequence.
    """
    where = f" in {name}" if name else ""
    # The grammar expects every body line, including the last, to end in a newline
    if text and not text.endswith("\n"):
        text += "\n"
    try:
        tree = hcl2.loads(text)
    except LarkError as err:
        raise ParseError(
            f"Failed to parse HCL content{where}: {describe_parse_error(err)}",
            name=name,
        ) from err
    try:
        return _decode_literals(normalize(tree))
    except ValueError as err:
        raise ParseError(f"Failed to parse HCL content{where}: {err}", name=name) from err
