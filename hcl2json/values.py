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

"""Canonical value model.

Every intermediate result (parsed document, merged document, projected
sub-value) is a plain tree of six kinds of node:

| Kind     | Python type  |
|----------|--------------|
| null     | None         |
| bool     | bool         |
| number   | int or float |
| string   | str          |
| array    | list         |
| object   | dict (str keys, insertion order preserved) |

Parser output is converted once with normalize(); nothing downstream
depends on parser-specific types.

Because Python treats True == 1 and 1 == 1.0, plain == is too loose for
comparing trees of this model. values_equal() compares kinds as well as
contents.
"""

from __future__ import annotations

from typing import Any, Union

from hcl2json.exceptions import SerializationError

__all__ = ["Value", "normalize", "value_kind", "values_equal"]

Value = Union[None, bool, int, float, str, list["Value"], dict[str, "Value"]]


def value_kind(value: Any) -> str:
    """Return the kind name of a model value.

    Returns:
        One of "null", "bool", "number", "string", "array", "object".

    Raises:
        SerializationError: If the value is not part of the model.
    """
    # bool is a subclass of int, so it must be tested first.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise SerializationError(f"Unsupported value type: {type(value).__name__}")


def normalize(node: Any) -> Value:
    """Convert a parser tree into the canonical model.

    The conversion is a fresh deep copy: key order and array order are
    kept, ints stay ints and floats stay floats. Tuples become lists.
    Object keys are coerced to str; if two keys collide after coercion
    the later one wins.

    Args:
        node: Tree produced by the HCL parser.

    Returns:
        An independent tree made only of model types.

    Raises:
        SerializationError: If the tree holds a type outside the model.

    Example:
        >>> normalize({"a": (1, 2.5), "b": {"c": None}})
        {'a': [1, 2.5], 'b': {'c': None}}
    """
    if node is None or isinstance(node, (bool, str)):
        return node
    if isinstance(node, (int, float)):
        # Collapse int/float subclasses (e.g. IntEnum) to the base type
        return float(node) if isinstance(node, float) else int(node)
    if isinstance(node, (list, tuple)):
        return [normalize(item) for item in node]
    if isinstance(node, dict):
        result: dict[str, Value] = {}
        for key, item in node.items():
            result[str(key)] = normalize(item)
        return result
    raise SerializationError(
        f"Cannot convert parser value of type {type(node).__name__}"
    )


def values_equal(left: Value, right: Value) -> bool:
    """Structural equality that also compares kinds.

    Unlike ==, True is not equal to 1 and 1 is not equal to 1.0. Object
    comparison ignores key order.
    """
    left_kind = value_kind(left)
    if left_kind != value_kind(right):
        return False
    if left_kind == "number":
        return type(left) is type(right) and left == right
    if left_kind == "array":
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if left_kind == "object":
        return left.keys() == right.keys() and all(
            values_equal(left[key], right[key]) for key in left
        )
    return left == right
