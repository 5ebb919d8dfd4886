"""
Type system domain for runtime field type representation.

This module defines the runtime representation of component field types. The
codec walks these definitions to encode and validate each field, and schema
export renders them for consumers that need to know the format's contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, dataclass_transform

# =============================================================================
# Type Definition Base
# =============================================================================


@dataclass_transform(frozen_default=True)
class TypeDef:
    """Base for type definitions."""

    _tag: ClassVar[str]

    def __init_subclass__(cls, tag: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True)(cls)

        cls._tag = tag or cls.__name__.lower().removesuffix("type")

    def describe(self) -> str:
        """Human-readable name used in error messages."""
        return self._tag

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self._tag}


# =============================================================================
# Primitives
# =============================================================================


class StrType(TypeDef, tag="str"):
    def describe(self) -> str:
        return "string"


class BoolType(TypeDef, tag="bool"):
    def describe(self) -> str:
        return "boolean"


class NoneType(TypeDef, tag="none"):
    def describe(self) -> str:
        return "null"


# =============================================================================
# Composite Types
# =============================================================================


class EnumType(TypeDef, tag="enum"):
    """A closed set of string values backed by a Python Enum."""

    enum: type[Enum]

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(member.value for member in self.enum)

    def describe(self) -> str:
        return "one of " + ", ".join(self.values)

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self._tag, "name": self.enum.__name__, "values": list(self.values)}


class RecordType(TypeDef, tag="record"):
    """A nested plain record (a frozen dataclass that is not a component)."""

    record: type

    def describe(self) -> str:
        return "object"

    def to_dict(self) -> dict[str, Any]:
        # Local import: schema depends on this module
        from contentdsl.schema import record_fields

        return {
            "tag": self._tag,
            "name": self.record.__name__,
            "fields": [f.to_dict() for f in record_fields(self.record)],
        }


class UnionType(TypeDef, tag="union"):
    options: tuple[TypeDef, ...]

    @property
    def optional(self) -> bool:
        return any(isinstance(o, NoneType) for o in self.options)

    def describe(self) -> str:
        return " or ".join(o.describe() for o in self.options)

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self._tag, "options": [o.to_dict() for o in self.options]}


class SequenceType(TypeDef, tag="sequence"):
    """Ordered, variable-length sequence; encoded as a JSON array."""

    element: TypeDef

    def describe(self) -> str:
        return "array"

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self._tag, "element": self.element.to_dict()}


class NodeType(TypeDef, tag="node"):
    """A nested, tagged component node."""

    def describe(self) -> str:
        return "object"
