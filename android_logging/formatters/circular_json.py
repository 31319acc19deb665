"""
Cycle-tolerant JSON serialization

Containers that were already visited are written as a back-reference
marker instead of being walked again. The marker is ``"~"`` for the root
value and ``"~"`` followed by the ``~``-joined key path of the first
occurrence otherwise, e.g. ``"~children~0"``.
"""

import json
import types
from typing import Any, Dict, List, Set

SPECIAL_CHAR = "~"
ESCAPED_SPECIAL_CHAR = "\\x7e"

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _escape_path(key: str) -> str:
    return key.replace(SPECIAL_CHAR, ESCAPED_SPECIAL_CHAR)


def _key_name(key: Any, taken: Set[str]) -> str:
    """str(key), or a typed form when that would clash with another key."""
    name = str(key)
    if name in taken:
        name = f"{key!r} ({type(key).__name__})"
    return name


def is_plain_object(value: Any) -> bool:
    """True for instances whose attributes can be dumped like a dict."""
    if callable(value) or isinstance(value, types.ModuleType):
        return False
    return hasattr(value, "__dict__")


def is_structured(value: Any) -> bool:
    """True for values serialized as a JSON tree."""
    return isinstance(value, (dict,) + _SEQUENCE_TYPES) or is_plain_object(value)


def to_json_tree(value: Any) -> Any:
    """
    Convert value into something json.dumps accepts.

    Args:
        value: Any value; containers may reference themselves

    Returns:
        A tree of dicts, lists and JSON scalars
    """
    seen: Dict[int, str] = {}

    def walk(node: Any, path: List[str]) -> Any:
        if isinstance(node, str):
            if node.startswith(SPECIAL_CHAR):
                return ESCAPED_SPECIAL_CHAR + node[1:]
            return node
        if node is None or isinstance(node, (bool, int, float)):
            return node
        if not is_structured(node):
            return str(node)

        marker = seen.get(id(node))
        if marker is not None:
            return marker
        seen[id(node)] = SPECIAL_CHAR + SPECIAL_CHAR.join(path)

        if isinstance(node, _SEQUENCE_TYPES):
            return [walk(item, path + [str(i)]) for i, item in enumerate(node)]

        items = node if isinstance(node, dict) else vars(node)
        taken = {key for key in items if isinstance(key, str)}
        tree: Dict[str, Any] = {}
        for key, item in items.items():
            name = key if isinstance(key, str) else _key_name(key, taken)
            taken.add(name)
            tree[name] = walk(item, path + [_escape_path(name)])
        return tree

    return walk(value, [])


def stringify(value: Any, indent: int = 2) -> str:
    """
    Pretty-print value as JSON, tolerating reference cycles.

    Escaped newlines inside string values are turned back into real line
    breaks so multi-line text stays readable once indented.
    """
    text = json.dumps(to_json_tree(value), indent=indent, ensure_ascii=False)
    return text.replace("\\n", "\n")
