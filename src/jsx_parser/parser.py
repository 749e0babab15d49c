"""Core JSX markup parser.

This module provides the JsxParser class. Source text is handed to esprima
with JSX enabled and the resulting ESTree is converted into ElementNode
trees. Exactly one element expression is accepted; anything else raises
ParseError.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import esprima

from .constants import (
    DEFAULT_CONFIG,
    ESPRIMA_OPTIONS,
    EXPRESSION_STATEMENT,
    JSX_ELEMENT,
    JSX_EMPTY_EXPRESSION,
    JSX_EXPRESSION_CONTAINER,
    JSX_FRAGMENT,
    JSX_MEMBER_EXPRESSION,
    JSX_NAMESPACED_NAME,
    JSX_SPREAD_ATTRIBUTE,
    JSX_TEXT,
)
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

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when source text is not a single well-formed JSX element."""

    def __init__(self, message: str, line: int = 0, column: int = 0,
                 file_path: Optional[str] = None):
        self.message = message
        self.line = line
        self.column = column
        self.file_path = file_path
        location = f" (line {line}, column {column})" if line else ""
        prefix = f"{file_path}: " if file_path else ""
        super().__init__(f"{prefix}{message}{location}")


def _position(node: Any) -> tuple:
    """1-based (line, column) where an esprima node starts."""
    if node is None or node.loc is None:
        return 0, 0
    return node.loc.start.line, node.loc.start.column + 1


class JsxParser:
    """JSX markup parser producing ElementNode trees.

    The parser holds configuration only and every esprima call builds its
    own scanner state, so a single instance can be shared between threads.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize parser with configuration.

        Args:
            config: Parser configuration dict, uses DEFAULT_CONFIG if None
        """
        self.config = {**DEFAULT_CONFIG, **(config or {})}

    def parse(self, text: str) -> ElementNode:
        """Parse JSX source text into its root element.

        Args:
            text: Source containing exactly one JSX element expression

        Returns:
            Root ElementNode

        Raises:
            ParseError: If the text is not a single well-formed element
        """
        if not isinstance(text, str):
            raise TypeError(f"JSX source must be str, got {type(text).__name__}")

        start_time = time.time()
        try:
            program = esprima.parseScript(text, dict(ESPRIMA_OPTIONS))
        except esprima.Error as e:
            raise ParseError(
                getattr(e, 'description', None) or str(e),
                getattr(e, 'lineNumber', None) or 0,
                getattr(e, 'column', None) or 0,
            ) from e

        root = self._convert_element(self._root_expression(program), text, 0)

        logger.debug(f"Parsed <{root.name}> in {(time.time() - start_time) * 1000:.2f}ms")
        return root

    def parse_file(self, file_path: Path) -> ElementNode:
        """Parse a JSX file read as UTF-8.

        Raises:
            ParseError: With ``file_path`` set, if the content is not valid
        """
        content = Path(file_path).read_text(encoding='utf-8')
        try:
            return self.parse(content)
        except ParseError as e:
            raise ParseError(e.message, e.line, e.column, str(file_path)) from e

    def _root_expression(self, program: Any) -> Any:
        """The single top-level JSX element of a parsed program."""
        body = list(program.body or [])
        if not body:
            raise ParseError("Invalid JSX: expected expression statement")
        if len(body) > 1:
            raise ParseError("Invalid JSX: expected a single JSX element expression", *_position(body[1]))

        statement = body[0]
        if statement.type != EXPRESSION_STATEMENT:
            raise ParseError("Invalid JSX: expected expression statement", *_position(statement))

        expression = statement.expression
        if expression.type == JSX_FRAGMENT:
            raise ParseError("Invalid JSX: expected JSX element, found fragment", *_position(expression))
        if expression.type != JSX_ELEMENT:
            raise ParseError("Invalid JSX: expected JSX element", *_position(expression))
        return expression

    def _convert_element(self, node: Any, text: str, depth: int) -> ElementNode:
        line, column = _position(node)
        max_depth = self.config['max_depth']
        if depth >= max_depth:
            raise ParseError(f"Maximum nesting depth of {max_depth} exceeded", line, column)

        opening = node.openingElement
        return ElementNode(
            name=self._convert_name(opening.name),
            attributes=[self._convert_attribute(a, text, depth) for a in opening.attributes or []],
            children=self._convert_children(node.children or [], text, depth),
            self_closing=bool(opening.selfClosing),
            line=line,
            column=column,
        )

    def _convert_fragment(self, node: Any, text: str, depth: int) -> FragmentNode:
        line, column = _position(node)
        return FragmentNode(self._convert_children(node.children or [], text, depth), line, column)

    def _convert_name(self, node: Any) -> ElementName:
        if node.type == JSX_MEMBER_EXPRESSION:
            return MemberName(self._convert_name(node.object), Identifier(node.property.name))
        if node.type == JSX_NAMESPACED_NAME:
            return NamespacedName(Identifier(node.namespace.name), Identifier(node.name.name))
        return Identifier(node.name)

    def _convert_attribute(self, node: Any, text: str,
                           depth: int) -> Union[Attribute, SpreadAttribute]:
        line, column = _position(node)
        if node.type == JSX_SPREAD_ATTRIBUTE:
            return SpreadAttribute(self._source(node.argument, text), line, column)

        value = node.value
        if value is None:
            converted = None
        elif value.type == JSX_EXPRESSION_CONTAINER:
            converted = self._convert_expression(value, text)
        elif value.type == JSX_ELEMENT:
            converted = self._convert_element(value, text, depth + 1)
        elif value.type == JSX_FRAGMENT:
            converted = self._convert_fragment(value, text, depth + 1)
        else:
            converted = value.value

        return Attribute(self._convert_name(node.name), converted, line, column)

    def _convert_children(self, nodes: List[Any], text: str, depth: int) -> List[ChildNode]:
        children: List[ChildNode] = []
        for child in nodes:
            if child.type == JSX_ELEMENT:
                children.append(self._convert_element(child, text, depth + 1))
            elif child.type == JSX_FRAGMENT:
                children.append(self._convert_fragment(child, text, depth + 1))
            elif child.type == JSX_EXPRESSION_CONTAINER:
                children.append(self._convert_expression(child, text))
            elif child.type == JSX_TEXT:
                children.append(TextNode(child.value, *_position(child)))
            else:
                logger.debug(f"Skipping unsupported JSX child {child.type}")
        return children

    def _convert_expression(self, node: Any, text: str) -> ExpressionNode:
        line, column = _position(node)
        if node.expression is None or node.expression.type == JSX_EMPTY_EXPRESSION:
            return ExpressionNode('', line, column)
        return ExpressionNode(self._source(node.expression, text), line, column)

    def _source(self, node: Any, text: str) -> str:
        """Raw source text spanned by an esprima node."""
        start, end = node.range
        return text[start:end]
