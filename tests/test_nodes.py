"""Tests for contentdsl.nodes module."""

import dataclasses
import re

import pytest

from contentdsl.nodes import (
    AnyComponent,
    Button,
    ButtonAction,
    Component,
    Group,
    Image,
    Stack,
    Style,
    Text,
    identity,
)


def _camel(name: str) -> str:
    head, *rest = name.lower().split("_")
    return head + "".join(part.capitalize() for part in rest)


class TestVariants:
    """Test variant construction and defaults."""

    def test_text_default_style(self):
        """Test that Text defaults to the body style."""
        assert Text(text="hi").style is Style.BODY

    def test_group_default_prominence(self):
        """Test that Group is not prominent by default."""
        assert Group(components=()).is_prominent is False

    def test_button_optional_fields(self):
        """Test that Button subtitle and url default to None."""
        button = Button(title="Go", action=ButtonAction.OPEN)
        assert button.subtitle is None
        assert button.url is None

    def test_container_stores_tuple(self):
        """Test that containers freeze their children into a tuple."""
        stack = Stack(components=[AnyComponent.text("a")])
        assert isinstance(stack.components, tuple)

    def test_variants_are_frozen(self):
        """Test that variants are immutable."""
        text = Text(text="hi")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.text = "bye"

    def test_private_identity_not_a_public_field(self):
        """Test that the fallback identity is excluded from repr and comparison."""
        assert "_fallback_identity" not in repr(Stack(components=()))
        assert Stack(components=()) == Stack(components=())


class TestContainerEquality:
    """Test content equality of container variants."""

    def test_child_style_difference(self):
        """Test that a style change inside a child makes stacks unequal."""
        a = Stack(components=(AnyComponent.text("a", Style.TITLE),))
        b = Stack(components=(AnyComponent.text("a", Style.BODY),))
        assert a != b
        assert AnyComponent(a) == AnyComponent(b)

    def test_empty_children_compare_by_content(self):
        """Test that empty child containers compare equal despite distinct identities."""
        a = Stack(components=(AnyComponent.group([]),))
        b = Stack(components=(AnyComponent.group([]),))
        assert a.identity != b.identity
        assert a == b
        assert hash(a) == hash(b)

    def test_group_prominence(self):
        """Test that prominence takes part in group equality."""
        children = (AnyComponent.image("u"),)
        assert Group(components=children) != Group(components=children, is_prominent=True)
        assert hash(Group(components=children)) == hash(Group(components=children))

    def test_stack_is_not_group(self):
        """Test that a stack never equals a group with the same children."""
        children = (AnyComponent.image("u"),)
        assert Stack(components=children) != Group(components=children)

    def test_child_order(self):
        """Test that child order matters."""
        a, b = AnyComponent.text("a"), AnyComponent.text("b")
        assert Stack(components=(a, b)) != Stack(components=(b, a))


class TestIdentity:
    """Test per-variant identity rules."""

    def test_image_identity(self):
        """Test that an image is identified by its url."""
        assert Image(url="https://x/y.png").identity == "https://x/y.png"

    def test_text_identity(self):
        """Test that text is identified by its payload."""
        assert Text(text="hello", style=Style.TITLE).identity == "hello"

    def test_button_identity(self):
        """Test that a button is identified by its title."""
        button = Button(title="Buy", action=ButtonAction.OPEN, subtitle="now")
        assert button.identity == "Buy"

    def test_stack_identity_tracks_first_child(self):
        """Test that a stack takes its first child's identity."""
        stack = Stack(components=(AnyComponent.text("first"), AnyComponent.text("second")))
        assert stack.identity == "first"

    def test_group_identity_tracks_first_child(self):
        """Test that a group takes its first child's identity."""
        group = Group(components=(AnyComponent.image("u"),))
        assert group.identity == "u"

    def test_nested_container_identity(self):
        """Test that identity follows first children through nesting."""
        inner = AnyComponent.group([AnyComponent.text("deep")])
        outer = AnyComponent.hstack([inner, AnyComponent.text("other")])
        assert outer.identity == "deep"

    def test_empty_containers_are_distinct(self):
        """Test that two empty containers never share an identity."""
        a = AnyComponent.hstack([])
        b = AnyComponent.hstack([])
        assert a.identity != b.identity
        assert a != b

    def test_empty_container_identity_is_stable(self):
        """Test that an empty container keeps the same identity."""
        node = AnyComponent.group([])
        assert node.identity == node.identity
        assert node == node

    def test_base_identity_not_implemented(self):
        """Test that the base class leaves identity to its variants."""
        with pytest.raises(NotImplementedError):
            Component().identity

    def test_identity_function(self):
        """Test that identity() dispatches to the held variant."""
        assert identity(AnyComponent.text("x")) == "x"
        assert identity(Image(url="u")) == "u"


class TestAnyComponentEquality:
    """Test identity-based node equality."""

    def test_same_text_different_style_equal(self):
        """Test that nodes with equal text but different styles compare equal."""
        n1 = AnyComponent.text("hi", Style.TITLE)
        n2 = AnyComponent.text("hi", Style.FOOTNOTE)
        assert n1 == n2
        assert n1.component != n2.component

    def test_different_variants_same_identity_equal(self):
        """Test that equality ignores the variant kind."""
        assert AnyComponent.text("u") == AnyComponent.image("u")

    def test_different_identity_not_equal(self):
        """Test that different identities compare unequal."""
        assert AnyComponent.text("a") != AnyComponent.text("b")

    def test_hash_matches_identity(self):
        """Test that equal nodes collapse in a set."""
        nodes = {
            AnyComponent.text("hi", Style.TITLE),
            AnyComponent.text("hi", Style.BODY),
            AnyComponent.button("hi", ButtonAction.DISMISS),
        }
        assert len(nodes) == 1

    def test_not_equal_to_other_types(self):
        """Test that a node never equals a bare string."""
        assert AnyComponent.text("hi") != "hi"


class TestConvenienceConstructors:
    """Test the AnyComponent factory methods."""

    def test_hstack(self):
        """Test building a stack."""
        node = AnyComponent.hstack([AnyComponent.text("a")])
        assert isinstance(node.component, Stack)
        assert node.component.components == (AnyComponent.text("a"),)

    def test_group(self):
        """Test building a prominent group."""
        node = AnyComponent.group([], is_prominent=True)
        assert isinstance(node.component, Group)
        assert node.component.is_prominent is True

    def test_vstack_builds_group(self):
        """Test that the legacy vstack constructor builds a group."""
        node = AnyComponent.vstack([AnyComponent.text("a")])
        assert isinstance(node.component, Group)
        assert node.component.is_prominent is False

    def test_image(self):
        """Test building an image."""
        assert AnyComponent.image("u").component == Image(url="u")

    def test_text(self):
        """Test building text with and without a style."""
        assert AnyComponent.text("t").component == Text(text="t", style=Style.BODY)
        assert AnyComponent.text("t", Style.TITLE).component.style is Style.TITLE

    def test_button_with_string_action(self):
        """Test that a plain string becomes a custom action."""
        node = AnyComponent.button("Go", "checkout", subtitle="now", url="https://x")
        assert node.component == Button(
            title="Go",
            action=ButtonAction("checkout"),
            subtitle="now",
            url="https://x",
        )

    def test_tag_property(self):
        """Test that the wrapper exposes the held variant's tag."""
        assert AnyComponent.image("u").tag is Image.tag


class TestButtonAction:
    """Test button action identifiers."""

    @pytest.mark.parametrize("name", ["OPEN", "DISMISS", "OPEN_URL", "SHARE_URL"])
    def test_constant_identifier_matches_name(self, name):
        """Test that each well-known constant's identifier is its own name."""
        action = getattr(ButtonAction, name)
        assert action.identifier == _camel(name)

    def test_well_known_identifiers(self):
        """Test the exact well-known identifier strings."""
        assert ButtonAction.OPEN.identifier == "open"
        assert ButtonAction.DISMISS.identifier == "dismiss"
        assert ButtonAction.OPEN_URL.identifier == "openUrl"
        assert ButtonAction.SHARE_URL.identifier == "shareUrl"

    def test_equality_by_identifier(self):
        """Test that actions compare and hash by identifier."""
        assert ButtonAction("open") == ButtonAction.OPEN
        assert hash(ButtonAction("open")) == hash(ButtonAction.OPEN)
        assert len({ButtonAction("x"), ButtonAction("x")}) == 1

    def test_custom_identifier(self):
        """Test that any string is a valid action."""
        action = ButtonAction("add-to-cart")
        assert action.identifier == "add-to-cart"
        assert action != ButtonAction.OPEN

    def test_constants_not_fields(self):
        """Test that the constants are class-level, not dataclass fields."""
        assert [f.name for f in dataclasses.fields(ButtonAction)] == ["identifier"]

    def test_repr(self):
        """Test that actions render with their identifier."""
        assert re.search(r"identifier='open'", repr(ButtonAction.OPEN))
