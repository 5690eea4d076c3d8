#!/usr/bin/env python3
"""Deep merge of nested translation structures.

Later structures win on conflict. Two values are merged recursively only when
both are mappings; lists and every other value are treated as leaves and
overwritten.
"""

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["deep_merge", "merge_pair"]


def merge_pair(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge two nested mappings into a new dict.

    Args:
        base: Earlier structure (lower precedence)
        override: Later structure (higher precedence)

    Returns:
        New dict; neither input is modified

    Examples:
        >>> merge_pair({"a": {"b": 1, "c": 2}}, {"a": {"b": 3, "d": 4}})
        {'a': {'b': 3, 'c': 2, 'd': 4}}
        >>> merge_pair({"a": {"b": 1}}, {"a": "scalar"})
        {'a': 'scalar'}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_pair(current, value)
        else:
            merged[key] = value
    return merged


def deep_merge(structures: Iterable[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Fold a sequence of nested mappings left to right.

    Args:
        structures: Structures in precedence order (last wins)

    Returns:
        Empty dict for no input, the structure itself for a single input,
        otherwise a newly built merged dict
    """
    structures = list(structures)
    if not structures:
        return {}
    if len(structures) == 1:
        return structures[0]

    merged = structures[0]
    for structure in structures[1:]:
        merged = merge_pair(merged, structure)
    return merged
