"""
Type tag registry for component variants.

Tags are the stable string discriminators written under ``"type"``. The set of
variants is closed, so resolution is a pure lookup: canonical values first,
then legacy aliases accepted at decode time only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from contentdsl.errors import Path, UnknownVariant

if TYPE_CHECKING:
    from contentdsl.nodes import Component

logger = logging.getLogger(__name__)


class ComponentTag(str, Enum):
    """Canonical tag of each variant, as emitted when encoding."""

    HSTACK = "hstack"
    GROUP = "group"
    IMAGE = "image"
    TEXT = "text"
    BUTTON = "button"


# Legacy tag -> current variant. Decode only.
ALIASES: Mapping[str, ComponentTag] = MappingProxyType({
    "vstack": ComponentTag.GROUP,
})


def resolve(tag: Any, path: Path = ()) -> ComponentTag:
    """Resolve a wire tag to its variant, accepting legacy aliases."""
    if isinstance(tag, str):
        try:
            return ComponentTag(tag)
        except ValueError:
            pass
        if (current := ALIASES.get(tag)) is not None:
            logger.debug("Resolved legacy tag %r to %r", tag, current.value)
            return current
    raise UnknownVariant(tag, path)


def aliases_of(tag: ComponentTag) -> tuple[str, ...]:
    """Legacy spellings that also decode to ``tag``."""
    return tuple(alias for alias, current in ALIASES.items() if current is tag)


def component_class(tag: ComponentTag) -> type[Component]:
    """Map a tag to the variant class it names."""
    from contentdsl.nodes import Button, Group, Image, Stack, Text

    match tag:
        case ComponentTag.HSTACK:
            return Stack
        case ComponentTag.GROUP:
            return Group
        case ComponentTag.IMAGE:
            return Image
        case ComponentTag.TEXT:
            return Text
        case ComponentTag.BUTTON:
            return Button
    raise ValueError(f"No component class for tag: {tag}")
