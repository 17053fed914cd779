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

"""JSON rendering with formatting options.

Output Styles
-------------
Compact (default):
    {"region":"us-west-2","tags":{"Project":"web-app"}}

Pretty (--pretty, --indent N):
    {
      "region": "us-west-2",
      "tags": {
        "Project": "web-app"
      }
    }

Single quotes (--single-quotes):
    {'region':'us-west-2','note':'He said \\"Hi\\"'}

The single-quote style is a text pass over the finished JSON. It swaps
only the delimiting quotes; escape sequences inside strings are copied
unchanged, and apostrophes inside strings are escaped so they cannot be
mistaken for delimiters.

Numbers: ints render without a decimal point, floats render with the
shortest representation that reads back to the same float.
"""

from __future__ import annotations

import json

from hcl2json.exceptions import SerializationError
from hcl2json.values import Value

__all__ = ["serialize", "to_single_quotes"]


def to_single_quotes(text: str) -> str:
    """Replace the string delimiters of JSON text with single quotes.

    Scans left to right tracking whether the cursor is inside a string
    and whether the previous character started an escape sequence.

    Example:
        >>> print(to_single_quotes('{"q":"He said \\\\"Hi\\\\"","a":"it\\'s"}'))
        {'q':'He said \\"Hi\\"','a':'it\\'s'}
    """
    out: list[str] = []
    in_string = False
    escaped = False

    for ch in text:
        if not in_string:
            if ch == '"':
                in_string = True
                out.append("'")
            else:
                out.append(ch)
        elif escaped:
            out.append(ch)
            escaped = False
        elif ch == "\\":
            out.append(ch)
            escaped = True
        elif ch == '"':
            in_string = False
            out.append("'")
        elif ch == "'":
            out.append("\\'")
        else:
            out.append(ch)

    return "".join(out)


def serialize(
    value: Value,
    pretty: bool = False,
    indent: int = 2,
    single_quotes: bool = False,
) -> str:
    """Render a value as JSON text.

    Args:
        value: Value to render.
        pretty: If True, one key or element per line, indented by
            `indent` spaces per level. Otherwise no insignificant
            whitespace at all.
        indent: Spaces per nesting level in pretty mode.
        single_quotes: If True, delimit strings and keys with single
            quotes (see to_single_quotes()).

    Returns:
        The rendered text, without a trailing newline.

    Raises:
        SerializationError: If the value holds a non-finite float, a type
            outside the value model, or text that cannot be UTF-8 encoded.
    """
    try:
        if pretty:
            text = json.dumps(
                value,
                indent=indent,
                separators=(",", ": "),
                ensure_ascii=False,
                allow_nan=False,
            )
        else:
            text = json.dumps(
                value,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        text.encode("utf-8")
    except (TypeError, ValueError) as err:
        raise SerializationError(f"Failed to convert value to JSON: {err}") from err

    if single_quotes:
        return to_single_quotes(text)
    return text
