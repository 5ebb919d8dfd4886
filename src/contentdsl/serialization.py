"""
Serialization domain for converting between content trees and tagged data.

Every node is written as ``{"type": <tag>, "component": <body>}``. The body's
layout is driven by the variant's field schema, and container children are
nodes in their own right, so encoding and decoding recurse through the tree.
Decoding is all-or-nothing: the first invalid value aborts the whole tree with
a DecodeError naming its path.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from contentdsl.errors import (
    DepthExceeded,
    InvalidEnumValue,
    MissingField,
    Path,
    TypeMismatch,
)
from contentdsl.nodes import AnyComponent, Component
from contentdsl.schema import record_fields
from contentdsl.tags import component_class, resolve
from contentdsl.types import (
    BoolType,
    EnumType,
    NodeType,
    NoneType,
    RecordType,
    SequenceType,
    StrType,
    TypeDef,
    UnionType,
)

logger = logging.getLogger(__name__)

# Maximum number of nested nodes accepted by from_dict; the root is depth 1.
DEFAULT_MAX_DEPTH = 64

_CONTAINERS_PER_NODE = 3

# Variant name reported for problems with the node envelope itself
_ENVELOPE = "node"

# =============================================================================
# Encoding
# =============================================================================


def to_dict(node: AnyComponent | Component) -> dict[str, Any]:
    """Serialize a node (or a bare component) to a tagged dict."""
    if isinstance(node, Component):
        node = AnyComponent(node)
    elif not isinstance(node, AnyComponent):
        raise TypeError(f"Cannot serialize {type(node)}")
    component = node.component
    return {"type": component.tag.value, "component": _encode_record(component)}


def _encode_record(obj: Any) -> dict[str, Any]:
    body: dict[str, Any] = {}
    for f in record_fields(type(obj)):
        value = getattr(obj, f.name)
        # Absent optionals are omitted rather than written as null
        if value is None and not f.required:
            continue
        body[f.key] = _encode_value(f.type, value)
    return body


def _encode_value(typedef: TypeDef, value: Any) -> Any:
    match typedef:
        case NodeType():
            return to_dict(value)
        case SequenceType(element=element):
            return [_encode_value(element, item) for item in value]
        case EnumType():
            return value.value
        case RecordType():
            return _encode_record(value)
        case UnionType(options=options):
            if value is None:
                return None
            option = next(o for o in options if not isinstance(o, NoneType))
            return _encode_value(option, value)
        case _:
            return value


def to_json(node: AnyComponent | Component, indent: int | None = 2) -> str:
    return json.dumps(to_dict(node), indent=indent)


# =============================================================================
# Decoding
# =============================================================================


@dataclass
class _DecodeState:
    max_depth: int
    nodes: int = 0


def from_dict(data: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AnyComponent:
    """
    Deserialize a tagged dict into a node.

    Args:
        data: Decoded JSON value for the root node.
        max_depth: Maximum number of nested nodes, counting the root.

    Raises:
        DecodeError: If any node in the tree is invalid. The concrete subclass
            (UnknownVariant, MissingField, TypeMismatch, InvalidEnumValue,
            DepthExceeded) and its ``path`` identify the offending value.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    state = _DecodeState(max_depth=max_depth)
    node = _decode_node(data, depth=1, path=(), state=state)
    logger.debug("Decoded %r tree with %d node(s)", node.tag.value, state.nodes)
    return node


def from_json(s: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AnyComponent:
    """
    Deserialize JSON text into a node.

    The text's bracket nesting is checked before parsing, so an over-deep
    payload raises DepthExceeded instead of exhausting the JSON parser's stack.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    _check_json_nesting(s, max_depth)
    try:
        data = json.loads(s)
    except RecursionError:
        raise DepthExceeded(max_depth, max_depth + 1) from None
    return from_dict(data, max_depth=max_depth)


def _check_json_nesting(s: str, max_depth: int) -> None:
    # Each node nests at most three containers: node object, body object and
    # either its children array or a record such as the button action.
    limit = _CONTAINERS_PER_NODE * max_depth
    level = 0
    in_string = escaped = False
    for char in s:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "{[":
            level += 1
            if level > limit:
                depth = (level + _CONTAINERS_PER_NODE - 1) // _CONTAINERS_PER_NODE
                raise DepthExceeded(max_depth, depth)
        elif char in "}]":
            level -= 1


def _decode_node(data: Any, depth: int, path: Path, state: _DecodeState) -> AnyComponent:
    if depth > state.max_depth:
        raise DepthExceeded(state.max_depth, depth, path)
    if not isinstance(data, dict):
        raise TypeMismatch(_ENVELOPE, None, "object", data, path)
    if "type" not in data:
        raise MissingField(_ENVELOPE, "type", path)
    tag = resolve(data["type"], path + ("type",))
    if "component" not in data:
        raise MissingField(_ENVELOPE, "component", path)

    cls = component_class(tag)
    values = _decode_record(
        cls, tag.value, data["component"], path + ("component",), depth, state
    )
    state.nodes += 1
    return AnyComponent(cls(**values))


def _decode_record(
    cls: type,
    variant: str,
    body: Any,
    path: Path,
    depth: int,
    state: _DecodeState,
) -> dict[str, Any]:
    """Decode a record body into constructor keyword arguments."""
    if not isinstance(body, dict):
        raise TypeMismatch(variant, None, "object", body, path)

    # Unknown keys are ignored so newer producers stay readable
    values: dict[str, Any] = {}
    for f in record_fields(cls):
        if f.key not in body:
            if f.required:
                raise MissingField(variant, f.key, path)
            continue
        values[f.name] = _decode_value(
            f.type, body[f.key], variant, f.key, path + (f.key,), depth, state
        )
    return values


def _decode_value(
    typedef: TypeDef,
    raw: Any,
    variant: str,
    field: str,
    path: Path,
    depth: int,
    state: _DecodeState,
) -> Any:
    match typedef:
        case StrType():
            if not isinstance(raw, str):
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            return raw
        case BoolType():
            if not isinstance(raw, bool):
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            return raw
        case NoneType():
            if raw is not None:
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            return None
        case EnumType(enum=enum):
            if not isinstance(raw, str):
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            try:
                return enum(raw)
            except ValueError:
                raise InvalidEnumValue(variant, field, raw, path) from None
        case RecordType(record=record):
            if not isinstance(raw, dict):
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            return record(**_decode_record(record, variant, raw, path, depth, state))
        case SequenceType(element=element):
            if not isinstance(raw, list):
                raise TypeMismatch(variant, field, typedef.describe(), raw, path)
            return tuple(
                _decode_value(element, item, variant, field, path + (index,), depth, state)
                for index, item in enumerate(raw)
            )
        case NodeType():
            return _decode_node(raw, depth + 1, path, state)
        case UnionType(options=options):
            if raw is None and typedef.optional:
                return None
            candidates = [o for o in options if not isinstance(o, NoneType)]
            if len(candidates) == 1:
                return _decode_value(candidates[0], raw, variant, field, path, depth, state)
            raise TypeMismatch(variant, field, typedef.describe(), raw, path)
    raise ValueError(f"Cannot decode field of type: {typedef}")


def structurally_equal(a: AnyComponent | Component, b: AnyComponent | Component) -> bool:
    """Full content comparison, unlike identity-based ``AnyComponent.__eq__``."""
    return to_dict(a) == to_dict(b)
