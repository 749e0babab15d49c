"""Tests for element tree accessors."""

import pytest

from jsx_parser import ElementNode, ExpressionNode, FragmentNode, Identifier, JsxParser, TextNode
from jsxrules.accessors import UNKNOWN_NAME, get_children, get_name, get_props


@pytest.fixture
def parse():
    return JsxParser().parse


class TestGetName:
    """Display name resolution."""

    def test_identifier(self, parse):
        assert get_name(parse("<Header />")) == "Header"

    def test_dashed_identifier(self, parse):
        assert get_name(parse("<custom-element />")) == "custom-element"

    def test_member_name(self, parse):
        assert get_name(parse("<Dialog.Trigger />")) == "Dialog.Trigger"

    def test_nested_member_name(self, parse):
        assert get_name(parse("<UI.Dialog.Trigger />")) == "UI.Dialog.Trigger"

    def test_namespaced_name_is_unknown(self, parse):
        assert get_name(parse("<svg:rect />")) == UNKNOWN_NAME == "unknown"


class TestGetChildren:
    """Element children filtering."""

    def test_only_elements_in_order(self, parse):
        root = parse("<List>text{expr}<A />{/* c */}<B />tail</List>")
        assert [get_name(child) for child in get_children(root)] == ["A", "B"]

    def test_fragment_contents_skipped(self):
        root = ElementNode(Identifier("List"), children=[
            TextNode("text"),
            ElementNode(Identifier("A")),
            FragmentNode([ElementNode(Identifier("Hidden"))]),
            ExpressionNode("expr"),
            ElementNode(Identifier("B")),
        ])
        assert [get_name(child) for child in get_children(root)] == ["A", "B"]

    def test_no_children(self, parse):
        assert get_children(parse("<Leaf />")) == []


class TestGetProps:
    """Attribute name extraction."""

    def test_plain_names_in_order(self, parse):
        root = parse('<Button onClick={fn} disabled type="submit" />')
        assert get_props(root) == ["onClick", "disabled", "type"]

    def test_spread_and_namespaced_dropped(self, parse):
        root = parse("<Link {...rest} xlink:href='#a' data-id=\"1\" />")
        assert get_props(root) == ["data-id"]

    def test_repeated_attribute_kept(self, parse):
        assert get_props(parse("<A key='1' key='2' />")) == ["key", "key"]
