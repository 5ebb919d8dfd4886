"""
Error domain for decoding serialized content trees.

Every failure raised while decoding is a DecodeError carrying the JSON path of
the offending value, so a failure deep inside a container can be attributed to
exactly one node. Encoding has no error channel.
"""

from __future__ import annotations

from typing import Any

type Path = tuple[str | int, ...]


def format_path(path: Path) -> str:
    """Render a path as ``$.component.components[0].component``."""
    parts = ["$"]
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}")
    return "".join(parts)


class DecodeError(ValueError):
    """Base for all decode failures."""

    def __init__(self, message: str, path: Path = ()) -> None:
        self.message = message
        self.path = tuple(path)
        super().__init__(f"{message} (at {format_path(self.path)})")


class UnknownVariant(DecodeError):
    """Raised when a node's type tag names no known variant."""

    def __init__(self, tag: Any, path: Path = ()) -> None:
        self.tag = tag
        super().__init__(f"Unknown component type {tag!r}", path)


class MissingField(DecodeError):
    """Raised when a required field is absent."""

    def __init__(self, variant: str, field: str, path: Path = ()) -> None:
        self.variant = variant
        self.field = field
        super().__init__(f"{variant}: missing required field '{field}'", path)


class TypeMismatch(DecodeError):
    """Raised when a field holds a value of the wrong JSON type."""

    def __init__(
        self,
        variant: str,
        field: str | None,
        expected: str,
        actual: Any = None,
        path: Path = (),
    ) -> None:
        self.variant = variant
        self.field = field
        self.expected = expected
        self.actual = actual
        target = f"field '{field}'" if field is not None else "value"
        super().__init__(
            f"{variant}: {target} expected {expected}, got {_json_type_name(actual)}",
            path,
        )


class InvalidEnumValue(DecodeError):
    """Raised when an enum field holds a string outside its closed set."""

    def __init__(self, variant: str, field: str, value: Any, path: Path = ()) -> None:
        self.variant = variant
        self.field = field
        self.value = value
        super().__init__(f"{variant}: invalid value {value!r} for field '{field}'", path)


class DepthExceeded(DecodeError):
    """Raised when nodes are nested deeper than the configured maximum."""

    def __init__(self, max_depth: int, depth: int, path: Path = ()) -> None:
        self.max_depth = max_depth
        self.depth = depth
        super().__init__(
            f"Component nesting depth {depth} exceeds maximum of {max_depth}", path
        )


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
