"""Read-only accessors over parsed JSX element nodes."""

from jsx_parser import Attribute, ElementNode, Identifier, MemberName

UNKNOWN_NAME = "unknown"


def get_name(node: ElementNode) -> str:
    """Display name of an element.

    Plain identifiers are returned as-is and member names are joined with
    ``.`` (``Dialog.Trigger``); namespaced names such as ``svg:rect`` have
    no display name and yield ``"unknown"``.
    """
    name = node.name
    if isinstance(name, Identifier):
        return name.name
    if isinstance(name, MemberName):
        return ".".join(name.segments)
    return UNKNOWN_NAME


def get_children(node: ElementNode) -> list[ElementNode]:
    """Element children in document order; text, expressions and fragments are skipped."""
    return [child for child in node.children if isinstance(child, ElementNode)]


def get_props(node: ElementNode) -> list[str]:
    """Names of plainly-named attributes in declaration order.

    Spread attributes and namespaced names (``xlink:href``) are dropped.
    """
    return [
        attribute.name.name
        for attribute in node.attributes
        if isinstance(attribute, Attribute)
        and isinstance(attribute.name, Identifier)
        and attribute.name.name
    ]
