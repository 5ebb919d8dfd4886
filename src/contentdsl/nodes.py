"""
Component domain for the content tree.

This module provides the closed catalog of component variants (containers and
leaves), the button action identifier, and the AnyComponent wrapper that holds
any variant uniformly. All values are immutable once constructed.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, dataclass_transform

from contentdsl.tags import ComponentTag

# =============================================================================
# Core Types
# =============================================================================


@dataclass_transform(frozen_default=True)
class Component:
    """Base for component variants. Subclasses become frozen dataclasses."""

    tag: ClassVar[ComponentTag]

    def __init_subclass__(cls, tag: ComponentTag, **kwargs):
        super().__init_subclass__(**kwargs)
        dataclass(frozen=True, eq=True, repr=True)(cls)
        cls.tag = tag

    @property
    def identity(self) -> str:
        """Key used for list diffing. Every variant overrides this."""
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class AnyComponent:
    """
    Type-erased holder for any component variant.

    Equality and hashing use the held component's identity, not its full
    content: two Text nodes with the same text and different styles compare
    equal. This keeps nodes usable as stable list keys.
    """

    component: Component

    @property
    def identity(self) -> str:
        return self.component.identity

    @property
    def tag(self) -> ComponentTag:
        return self.component.tag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyComponent):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    # -------------------------------------------------------------------------
    # Convenience constructors
    # -------------------------------------------------------------------------

    @classmethod
    def hstack(cls, components: Iterable[AnyComponent]) -> AnyComponent:
        return cls(Stack(components=tuple(components)))

    @classmethod
    def group(
        cls, components: Iterable[AnyComponent], is_prominent: bool = False
    ) -> AnyComponent:
        return cls(Group(components=tuple(components), is_prominent=is_prominent))

    @classmethod
    def vstack(cls, components: Iterable[AnyComponent]) -> AnyComponent:
        """Legacy spelling of :meth:`group`."""
        return cls.group(components)

    @classmethod
    def image(cls, url: str) -> AnyComponent:
        return cls(Image(url=url))

    @classmethod
    def text(cls, text: str, style: Style | None = None) -> AnyComponent:
        return cls(Text(text=text, style=style or Style.BODY))

    @classmethod
    def button(
        cls,
        title: str,
        action: ButtonAction | str,
        subtitle: str | None = None,
        url: str | None = None,
    ) -> AnyComponent:
        if isinstance(action, str):
            action = ButtonAction(action)
        return cls(Button(title=title, action=action, subtitle=subtitle, url=url))


def identity(node: AnyComponent | Component) -> str:
    """Derived identity used for keying nodes in rendered lists."""
    return node.identity


def _new_identity() -> str:
    return uuid.uuid4().hex


def _container_identity(components: tuple[AnyComponent, ...], fallback: str) -> str:
    # An empty container has no representative child
    if components:
        return components[0].identity
    return fallback


def _contents(components: tuple[AnyComponent, ...]) -> tuple[Component, ...]:
    # Children compare by content here, not by their wrappers' identity
    return tuple(c.component for c in components)


# =============================================================================
# Containers
# =============================================================================


class Stack(Component, tag=ComponentTag.HSTACK):
    """Children laid out along the horizontal axis."""

    components: tuple[AnyComponent, ...]
    _fallback_identity: str = field(
        default_factory=_new_identity, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def identity(self) -> str:
        return _container_identity(self.components, self._fallback_identity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return _contents(self.components) == _contents(other.components)

    def __hash__(self) -> int:
        return hash(_contents(self.components))


class Group(Component, tag=ComponentTag.GROUP):
    """Generic container of children, optionally marked prominent."""

    components: tuple[AnyComponent, ...]
    is_prominent: bool = False
    _fallback_identity: str = field(
        default_factory=_new_identity, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def identity(self) -> str:
        return _container_identity(self.components, self._fallback_identity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return (
            self.is_prominent == other.is_prominent
            and _contents(self.components) == _contents(other.components)
        )

    def __hash__(self) -> int:
        return hash((_contents(self.components), self.is_prominent))


# =============================================================================
# Leaves
# =============================================================================


class Style(Enum):
    """Text style selector."""

    TITLE = "title"
    BODY = "body"
    FOOTNOTE = "footnote"


class Image(Component, tag=ComponentTag.IMAGE):
    url: str

    @property
    def identity(self) -> str:
        return self.url


class Text(Component, tag=ComponentTag.TEXT):
    text: str
    style: Style = Style.BODY

    @property
    def identity(self) -> str:
        return self.text


@dataclass(frozen=True)
class ButtonAction:
    """Semantic action identifier of a button. Any string is valid."""

    identifier: str

    # Well-known actions; each identifier is the constant's name in camelCase.
    OPEN: ClassVar[ButtonAction]
    DISMISS: ClassVar[ButtonAction]
    OPEN_URL: ClassVar[ButtonAction]
    SHARE_URL: ClassVar[ButtonAction]


ButtonAction.OPEN = ButtonAction("open")
ButtonAction.DISMISS = ButtonAction("dismiss")
ButtonAction.OPEN_URL = ButtonAction("openUrl")
ButtonAction.SHARE_URL = ButtonAction("shareUrl")


class Button(Component, tag=ComponentTag.BUTTON):
    title: str
    action: ButtonAction
    subtitle: str | None = None
    url: str | None = None

    @property
    def identity(self) -> str:
        return self.title
