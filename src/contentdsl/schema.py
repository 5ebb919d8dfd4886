"""Schema extraction and field reflection for component variants."""

from __future__ import annotations

import dataclasses
import types
from dataclasses import dataclass, fields
from enum import Enum
from functools import cache
from typing import Any, Union, get_args, get_origin, get_type_hints

from contentdsl.nodes import AnyComponent, Component
from contentdsl.tags import ComponentTag, aliases_of, component_class
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

_SIMPLE_TYPE_MAP: dict[type, type[TypeDef]] = {
    str: StrType,
    bool: BoolType,
    type(None): NoneType,
}

_SEQUENCE_ORIGINS: frozenset[type] = frozenset({tuple, list})


@dataclass(frozen=True)
class FieldSchema:
    """Schema for a single field of a variant or record."""

    name: str
    key: str  # Key used on the wire
    type: TypeDef
    required: bool
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.key,
            "type": self.type.to_dict(),
            "required": self.required,
        }
        if not self.required:
            default = self.default
            data["default"] = default.value if isinstance(default, Enum) else default
        return data


@dataclass(frozen=True)
class ComponentSchema:
    """Complete schema for a component variant."""

    tag: ComponentTag
    aliases: tuple[str, ...]
    fields: tuple[FieldSchema, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.tag.value,
            "aliases": list(self.aliases),
            "fields": [f.to_dict() for f in self.fields],
        }


def extract_type(py_type: Any) -> TypeDef:
    """Convert a Python field annotation to a TypeDef."""
    origin = get_origin(py_type)
    args = get_args(py_type)

    if py_type in _SIMPLE_TYPE_MAP:
        return _SIMPLE_TYPE_MAP[py_type]()

    if py_type is AnyComponent:
        return NodeType()

    if origin in _SEQUENCE_ORIGINS:
        # tuple[X, ...] or list[X]
        if not args:
            raise ValueError(f"{origin.__name__} type must have an element type")
        if origin is tuple and (len(args) != 2 or args[1] is not Ellipsis):
            raise ValueError(f"Only homogeneous tuples are supported: {py_type}")
        return SequenceType(element=extract_type(args[0]))

    if isinstance(py_type, types.UnionType) or origin is Union:
        return UnionType(tuple(extract_type(a) for a in args))

    if isinstance(py_type, type) and issubclass(py_type, Enum):
        return EnumType(py_type)

    # Plain records nested inside a variant, e.g. ButtonAction
    if (
        isinstance(py_type, type)
        and dataclasses.is_dataclass(py_type)
        and not issubclass(py_type, Component)
    ):
        return RecordType(py_type)

    raise ValueError(f"Cannot extract type from: {py_type}")


def wire_key(name: str) -> str:
    """Field name as written on the wire (lowerCamelCase)."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@cache
def record_fields(cls: type) -> tuple[FieldSchema, ...]:
    """Public fields of a dataclass, in declaration order."""
    hints = get_type_hints(cls)
    result = []
    for f in fields(cls):
        if f.name.startswith("_"):
            continue
        if f.default is not dataclasses.MISSING:
            required, default = False, f.default
        elif f.default_factory is not dataclasses.MISSING:
            required, default = False, f.default_factory()
        else:
            required, default = True, None
        result.append(
            FieldSchema(
                name=f.name,
                key=wire_key(f.name),
                type=extract_type(hints[f.name]),
                required=required,
                default=default,
            )
        )
    return tuple(result)


def component_schema(cls: type[Component]) -> ComponentSchema:
    """Get schema for a component variant."""
    return ComponentSchema(
        tag=cls.tag,
        aliases=aliases_of(cls.tag),
        fields=record_fields(cls),
    )


def all_schemas() -> dict[str, ComponentSchema]:
    """Get the schema of every variant, keyed by canonical tag."""
    return {tag.value: component_schema(component_class(tag)) for tag in ComponentTag}


def export_schema() -> dict[str, Any]:
    """Describe the whole format as JSON-compatible data."""
    return {
        "node": {"type": "string", "component": "object"},
        "components": {tag: schema.to_dict() for tag, schema in all_schemas().items()},
    }
