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

"""Dotted-path property extraction.

Resolves a path such as "database.engine" against a value by walking
object keys one segment at a time. Segments are matched literally and
case-sensitively; there is no wildcard or array-index syntax.

Example:
    >>> root = {"database": {"engine": "mysql", "port": 3306}}
    >>> project(root, "database.engine")
    'mysql'
    >>> project(root, "database.name")
    Traceback (most recent call last):
    ...
    hcl2json.exceptions.ProjectionError: Property 'database.name' not found at 'database.name' (available properties: engine, port)
"""

from __future__ import annotations

import copy

from hcl2json.exceptions import ProjectionError
from hcl2json.values import Value, value_kind

__all__ = ["project", "split_path"]


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments; the empty path has none."""
    if path == "":
        return []
    return path.split(".")


def project(root: Value, path: str) -> Value:
    """Return a copy of the sub-value of root addressed by path.

    Args:
        root: Value to walk.
        path: Dot-separated object keys. The empty string selects root.

    Returns:
        A deep copy of the selected value.

    Raises:
        ProjectionError: If a segment is missing from an object, or is
            applied to something that is not an object. The error carries
            the requested path, the sub-path resolved so far and, for a
            missing key, the keys that were available.
    """
    parts = split_path(path)
    current = root

    for i, part in enumerate(parts):
        if not isinstance(current, dict):
            resolved = ".".join(parts[:i])
            raise ProjectionError(
                f"Cannot access property '{part}' on non-object "
                f"({value_kind(current)}) at path '{resolved or '<root>'}'",
                path=path,
                resolved=resolved,
                segment=part,
                reason="not_object",
            )
        if part not in current:
            resolved = ".".join(parts[: i + 1])
            available = list(current.keys())
            if available:
                detail = f"available properties: {', '.join(available)}"
            else:
                detail = "no properties available"
            raise ProjectionError(
                f"Property '{path}' not found at '{resolved}' ({detail})",
                path=path,
                resolved=resolved,
                segment=part,
                reason="not_found",
                available=available,
            )
        current = current[part]

    return copy.deepcopy(current)
