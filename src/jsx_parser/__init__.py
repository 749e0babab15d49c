"""Standalone JSX markup parser for component trees.

This package parses a single JSX element expression with esprima and
converts it into a tree of plain dataclasses, designed for reuse by tools
that inspect component structure.

Basic usage:
    from jsx_parser import JsxParser

    parser = JsxParser()
    root = parser.parse('<App><Header /></App>')
    print(root.name, len(root.children))
"""

from .constants import DEFAULT_CONFIG
from .models import (
    Attribute,
    ChildNode,
    ElementName,
    ElementNode,
    ExpressionNode,
    FragmentNode,
    Identifier,
    MemberName,
    NamespacedName,
    SpreadAttribute,
    TextNode,
)
from .parser import JsxParser, ParseError

__all__ = [
    # Main parser
    'JsxParser',
    'ParseError',

    # Tree models
    'ElementNode',
    'FragmentNode',
    'TextNode',
    'ExpressionNode',
    'Attribute',
    'SpreadAttribute',
    'Identifier',
    'MemberName',
    'NamespacedName',
    'ElementName',
    'ChildNode',

    # Constants
    'DEFAULT_CONFIG',

    # Convenience
    'parse_jsx',
    'parse_jsx_file',
]


def parse_jsx(content, config=None):
    """Convenience function to parse JSX content string.

    Args:
        content: JSX source containing one element expression
        config: Optional parser configuration

    Returns:
        Root ElementNode
    """
    return JsxParser(config).parse(content)


def parse_jsx_file(file_path, config=None):
    """Convenience function to parse a JSX file directly.

    Args:
        file_path: Path to JSX file (string or Path object)
        config: Optional parser configuration

    Returns:
        Root ElementNode
    """
    from pathlib import Path
    return JsxParser(config).parse_file(Path(file_path))
