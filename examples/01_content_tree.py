"""
Content Tree Example
====================

This example shows how a producer and a consumer exchange a content tree
using contentDSL. It covers:

1. Building a tree with the AnyComponent constructors
2. Serializing it to tagged JSON
3. Decoding a payload written with the legacy "vstack" tag
4. Identity-keyed equality versus full content comparison
5. Handling a decode failure
"""

from contentdsl import (
    AnyComponent,
    ButtonAction,
    DecodeError,
    Style,
    from_dict,
    from_json,
    structurally_equal,
    to_dict,
    to_json,
)


# ============================================================================
# Step 1: Build a Tree
# ============================================================================
# Containers hold further nodes, so trees are built bottom-up.


def build_card() -> AnyComponent:
    """A card: artwork next to a prominent group of text and a button."""
    return AnyComponent.hstack([
        AnyComponent.image("https://example.com/cover.png"),
        AnyComponent.group(
            [
                AnyComponent.text("Weekly digest", Style.TITLE),
                AnyComponent.text("Five stories you missed"),
                AnyComponent.button(
                    "Read",
                    ButtonAction.OPEN_URL,
                    subtitle="4 min",
                    url="https://example.com/digest",
                ),
            ],
            is_prominent=True,
        ),
    ])


# ============================================================================
# Step 2: Serialize and Deserialize
# ============================================================================


def example_round_trip():
    card = build_card()
    payload = to_json(card)
    print("Card as JSON:")
    print(payload)

    decoded = from_json(payload)
    print(f"\nRound trip preserved content: {structurally_equal(card, decoded)}")


# ============================================================================
# Step 3: Legacy Payloads
# ============================================================================
# Older producers wrote groups as "vstack". They still decode, and re-encoding
# always writes the current tag.


def example_legacy_payload():
    legacy = {
        "type": "vstack",
        "component": {
            "components": [{"type": "text", "component": {"text": "Hello"}}],
        },
    }
    node = from_dict(legacy)
    print(f"\nLegacy payload decoded to: {type(node.component).__name__}")
    print(f"Re-encoded type: {to_dict(node)['type']}")


# ============================================================================
# Step 4: Identity
# ============================================================================
# Nodes compare by identity so they can key rendered lists. Identity ignores
# styling, so use structurally_equal when content matters.


def example_identity():
    title = AnyComponent.text("Hello", Style.TITLE)
    body = AnyComponent.text("Hello", Style.BODY)
    print(f"\nidentity equal: {title == body}")
    print(f"content equal:  {structurally_equal(title, body)}")
    print(f"card identity:  {build_card().identity}")


# ============================================================================
# Step 5: Decode Errors
# ============================================================================


def example_decode_error():
    bad = {
        "type": "hstack",
        "component": {
            "components": [
                {"type": "text", "component": {"text": "ok"}},
                {"type": "carousel", "component": {}},
            ],
        },
    }
    try:
        from_dict(bad)
    except DecodeError as e:
        print(f"\nRejected payload: {e}")


if __name__ == "__main__":
    example_round_trip()
    example_legacy_payload()
    example_identity()
    example_decode_error()
