"""Tree serialization — JSON round-trip for sparkmark nodes.

Converts typed nodes to/from JSON-compatible dicts, for hosts that
receive the rendered tree over the wire rather than in-process.

All output is deterministic (sorted keys), so identical input text
always serializes to identical JSON.

Example:
    from sparkmark import parse
    from sparkmark.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    json_str = to_json(doc)
    assert from_json(json_str) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from sparkmark.errors import SerializationError
from sparkmark.location import LineSpan
from sparkmark.nodes import (
    Blank,
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    EquationForm,
    Heading,
    Italic,
    List,
    ListItem,
    Node,
    Paragraph,
    Rule,
    Text,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "CodeBlock": CodeBlock,
    "List": List,
    "ListItem": ListItem,
    "Rule": Rule,
    "Blank": Blank,
    "Text": Text,
    "Bold": Bold,
    "Italic": Italic,
    "Code": Code,
    "Equation": Equation,
}

# Fields whose list entries must all be nodes
_NODE_FIELDS = frozenset({"children", "items"})


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and line spans.

    Args:
        node: Any sparkmark node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, LineSpan):
        return {"_type": "LineSpan", "start": value.start, "end": value.end}
    if isinstance(value, EquationForm):
        return value.value
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        SerializationError: If ``data`` is not a dict, ``_type`` is missing
            or unknown, or a field value cannot be decoded.

    """
    if not isinstance(data, dict):
        msg = f"Expected a node object, got {type(data).__name__}"
        raise SerializationError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    try:
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Cannot build {type_name}: {e}"
        raise SerializationError(msg) from e


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if field_name in _NODE_FIELDS and isinstance(value, list):
        return tuple(from_dict(item) for item in value)
    if field_name == "form":
        try:
            return EquationForm(value)
        except ValueError as e:
            msg = f"Unknown equation form: {value!r}"
            raise SerializationError(msg) from e
    if isinstance(value, dict):
        if value.get("_type") == "LineSpan":
            return _decode_span(value)
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def _decode_span(value: dict[str, Any]) -> LineSpan:
    start, end = value.get("start"), value.get("end")
    if type(start) is not int or type(end) is not int:
        msg = f"Line span needs integer start and end, got {value!r}"
        raise SerializationError(msg)
    return LineSpan(start=start, end=end)


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        SerializationError: If the text is not JSON or doesn't represent
            a Document.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise SerializationError(msg)
    return node
