"""Deep merge of JSON-like documents.

Objects merge key by key, scalars are overwritten, and arrays follow the
chosen MergeArrayHandling policy. ``None`` values in the patch are
ignored unless ``merge_null_values`` is set.
"""

import copy
from enum import Enum
from typing import Any, Dict, List


class MergeArrayHandling(str, Enum):
    """How arrays present in both documents are combined."""

    REPLACE = "replace"
    CONCAT = "concat"
    UNION = "union"
    MERGE = "merge"


def _merge_arrays(
    target: List[Any],
    patch: List[Any],
    array_handling: MergeArrayHandling,
    merge_null_values: bool,
) -> List[Any]:
    if array_handling is MergeArrayHandling.REPLACE:
        return copy.deepcopy(patch)
    if array_handling is MergeArrayHandling.CONCAT:
        return target + copy.deepcopy(patch)
    if array_handling is MergeArrayHandling.UNION:
        merged = list(target)
        for item in patch:
            if item not in merged:
                merged.append(copy.deepcopy(item))
        return merged

    # MERGE: combine position by position
    merged = list(target)
    for index, item in enumerate(patch):
        if index >= len(merged):
            merged.append(copy.deepcopy(item))
        else:
            merged[index] = _merge_value(
                merged[index], item, array_handling, merge_null_values
            )
    return merged


def _merge_value(
    current: Any,
    incoming: Any,
    array_handling: MergeArrayHandling,
    merge_null_values: bool,
) -> Any:
    if isinstance(current, dict) and isinstance(incoming, dict):
        merge_json(current, incoming, array_handling, merge_null_values)
        return current
    if isinstance(current, list) and isinstance(incoming, list):
        return _merge_arrays(current, incoming, array_handling, merge_null_values)
    if incoming is None and not merge_null_values:
        return current
    return copy.deepcopy(incoming)


def merge_json(
    target: Dict[str, Any],
    patch: Dict[str, Any],
    array_handling: MergeArrayHandling = MergeArrayHandling.REPLACE,
    merge_null_values: bool = False,
) -> Dict[str, Any]:
    """Merge ``patch`` into ``target`` in place and return ``target``.

    Example:
        >>> merge_json({"tags": ["a", "b"], "title": "x"}, {"tags": ["c"]})
        {'tags': ['c'], 'title': 'x'}
    """
    for key, incoming in patch.items():
        if key not in target:
            if incoming is None and not merge_null_values:
                continue
            target[key] = copy.deepcopy(incoming)
            continue
        target[key] = _merge_value(
            target[key], incoming, array_handling, merge_null_values
        )
    return target
