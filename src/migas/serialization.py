"""mdast serialization: JSON output for Migas nodes.

Converts typed mdast nodes into plain dicts shaped like the mdast
format (``{"type": "listItem", "spread": false, ...}``). Useful for
handing converted trees to markdown serializers in other ecosystems and for
debugging.

All output is deterministic (sorted keys).

Example:
    from migas import to_mdast
    from migas.html import parse_fragment
    from migas.serialization import to_json

    print(to_json(to_mdast(parse_fragment("<ul><li>one</li></ul>"))))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from migas.location import SourceLocation
from migas.nodes import Node

# Python field names that differ from their mdast property names
_FIELD_NAMES = {"location": "position"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an mdast node to a JSON-compatible dict.

    The node kind is emitted as ``type``. ``position`` appears only for
    nodes that carry a source location.

    Args:
        node: Any Migas mdast node.

    Returns:
        Dict with ``type`` and all node fields.

    """
    result: dict[str, Any] = {"type": node.kind}

    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "location" and value is None:
            continue
        result[_FIELD_NAMES.get(f.name, f.name)] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return _position(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    return value


def _position(location: SourceLocation) -> dict[str, Any]:
    """mdast position: 1-indexed line and column."""
    start = {"line": location.lineno, "column": location.col_offset + 1}
    position: dict[str, Any] = {"start": start}
    if location.end_lineno is not None:
        end_col = location.end_col_offset if location.end_col_offset is not None else 0
        position["end"] = {"line": location.end_lineno, "column": end_col + 1}
    return position


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an mdast node to a JSON string with sorted keys."""
    return json.dumps(to_dict(node), indent=indent, sort_keys=True, ensure_ascii=False)
