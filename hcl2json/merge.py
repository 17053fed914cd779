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

"""Document merging.

Combines several parsed documents into one, in input order, with
"last wins" semantics.

Merge Behavior
--------------
Shallow (default):
  - Every document must be an object
  - Top-level keys of later documents overwrite earlier ones verbatim
  - Nested objects are NOT combined

Deep (--deep-merge):
  - **Objects**: Recursively merged (keys from overlay override base)
  - **Arrays**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans, null)
  - Kind mismatch at any level: overlay replaces base wholesale

A single document is returned unchanged in both modes.

Each document is deep-copied as it is folded in, so the result never
shares structure with the caller's inputs.

Example:
    >>> a = {"tags": {"Team": "backend", "Environment": "dev"}}
    >>> b = {"tags": {"Environment": "staging"}}
    >>> merge_documents([a, b], deep=False)
    {'tags': {'Environment': 'staging'}}
    >>> merge_documents([a, b], deep=True)
    {'tags': {'Team': 'backend', 'Environment': 'staging'}}
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from hcl2json.exceptions import MergeError
from hcl2json.values import Value, value_kind

__all__ = ["merge_documents", "deep_merge", "shallow_merge"]


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two objects with "overlay wins".

    Rules:
      - object + object -> deep merge
      - array + array -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict. Values
    taken from overlay are not copied.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = deep_merge(result[k], v)
        else:
            # Replace arrays and scalars entirely
            result[k] = v
    return result


def shallow_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Overwrite top-level keys of base with overlay's; returns a new dict."""
    result: dict[str, Any] = dict(base)
    result.update(overlay)
    return result


def merge_documents(documents: Sequence[Value], deep: bool = False) -> Value:
    """Merge documents in order into a single value.

    Args:
        documents: Parsed documents, earliest first. Later documents win.
        deep: If True, nested objects are merged recursively; otherwise
            only top-level keys are combined.

    Returns:
        The merged value, independent of the inputs.

    Raises:
        MergeError: If documents is empty, or if a shallow merge of two or
            more documents meets a document that is not an object.
    """
    if not documents:
        raise MergeError("No documents to merge")

    if len(documents) == 1:
        return copy.deepcopy(documents[0])

    merged: Value = {}
    for index, document in enumerate(documents):
        incoming = copy.deepcopy(document)
        if deep:
            if isinstance(merged, dict) and isinstance(incoming, dict):
                merged = deep_merge(merged, incoming)
            else:
                merged = incoming
        else:
            if not isinstance(incoming, dict):
                raise MergeError(
                    f"Cannot shallow-merge document #{index + 1}: top level is "
                    f"{value_kind(incoming)}, expected object"
                )
            merged = shallow_merge(merged, incoming)
    return merged
