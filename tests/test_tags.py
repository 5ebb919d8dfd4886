"""Tests for contentdsl.tags module."""

import pytest

from contentdsl.errors import DecodeError, UnknownVariant
from contentdsl.nodes import Button, Group, Image, Stack, Text
from contentdsl.tags import ALIASES, ComponentTag, aliases_of, component_class, resolve


class TestComponentTag:
    """Test the canonical tag values."""

    def test_canonical_values(self):
        """Test that every tag has its wire value."""
        assert [t.value for t in ComponentTag] == [
            "hstack",
            "group",
            "image",
            "text",
            "button",
        ]

    def test_tag_compares_to_string(self):
        """Test that tags compare equal to their wire strings."""
        assert ComponentTag.GROUP == "group"

    def test_variant_tags(self):
        """Test that each variant carries its defining tag."""
        assert Stack.tag is ComponentTag.HSTACK
        assert Group.tag is ComponentTag.GROUP
        assert Image.tag is ComponentTag.IMAGE
        assert Text.tag is ComponentTag.TEXT
        assert Button.tag is ComponentTag.BUTTON


class TestResolve:
    """Test tag resolution."""

    @pytest.mark.parametrize("tag", ["hstack", "group", "image", "text", "button"])
    def test_resolve_canonical(self, tag):
        """Test that canonical tags resolve to themselves."""
        assert resolve(tag).value == tag

    def test_resolve_legacy_alias(self):
        """Test that the legacy vstack tag resolves to group."""
        assert resolve("vstack") is ComponentTag.GROUP

    def test_alias_is_not_canonical(self):
        """Test that no alias is also a canonical tag."""
        canonical = {t.value for t in ComponentTag}
        assert not canonical & set(ALIASES)

    def test_resolve_unknown(self):
        """Test that an unknown tag raises UnknownVariant."""
        with pytest.raises(UnknownVariant) as exc_info:
            resolve("carousel")
        assert exc_info.value.tag == "carousel"

    def test_unknown_is_decode_error(self):
        """Test that UnknownVariant is a recoverable ValueError."""
        with pytest.raises(DecodeError):
            resolve("carousel")
        with pytest.raises(ValueError):
            resolve("carousel")

    def test_resolve_is_case_sensitive(self):
        """Test that lookup is an exact match."""
        with pytest.raises(UnknownVariant):
            resolve("HStack")

    def test_resolve_non_string(self):
        """Test that non-string tags are unknown."""
        with pytest.raises(UnknownVariant) as exc_info:
            resolve(3)
        assert exc_info.value.tag == 3

    def test_resolve_keeps_path(self):
        """Test that the error carries the given path."""
        with pytest.raises(UnknownVariant) as exc_info:
            resolve("carousel", ("component", "components", 0, "type"))
        assert exc_info.value.path == ("component", "components", 0, "type")


class TestAliasesOf:
    """Test alias lookup per variant."""

    def test_group_aliases(self):
        """Test that group accepts vstack."""
        assert aliases_of(ComponentTag.GROUP) == ("vstack",)

    def test_no_aliases(self):
        """Test that variants without history have no aliases."""
        assert aliases_of(ComponentTag.TEXT) == ()


class TestComponentClass:
    """Test mapping tags to variant classes."""

    @pytest.mark.parametrize("cls", [Stack, Group, Image, Text, Button])
    def test_round_trip(self, cls):
        """Test that each variant's tag maps back to the variant."""
        assert component_class(cls.tag) is cls
