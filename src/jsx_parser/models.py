"""Data models for parsed JSX markup using only Python stdlib dataclasses.

All models are plain dataclasses. A parsed tree is never mutated after
``JsxParser.parse`` returns it, so consumers may walk it freely.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Identifier:
    """Plain element or attribute name, e.g. ``Header`` or ``data-id``."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MemberName:
    """Dotted element name, e.g. ``Dialog.Trigger``."""
    object: Union[Identifier, 'MemberName']
    property: Identifier

    @property
    def segments(self) -> List[str]:
        """All identifiers of the member chain, outermost first."""
        if isinstance(self.object, MemberName):
            return self.object.segments + [self.property.name]
        return [self.object.name, self.property.name]

    def __str__(self) -> str:
        return '.'.join(self.segments)


@dataclass(frozen=True)
class NamespacedName:
    """Colon-separated name, e.g. ``svg:rect`` or ``xlink:href``."""
    namespace: Identifier
    name: Identifier

    def __str__(self) -> str:
        return f"{self.namespace.name}:{self.name.name}"


ElementName = Union[Identifier, MemberName, NamespacedName]


@dataclass
class TextNode:
    """Literal text between tags, as written in the source."""
    value: str
    line: int = 0
    column: int = 0


@dataclass
class ExpressionNode:
    """Expression container ``{...}``; ``source`` is the raw expression text, empty for ``{}``."""
    source: str
    line: int = 0
    column: int = 0

    @property
    def is_empty(self) -> bool:
        """True for ``{}`` and comment-only containers like ``{/* note */}``."""
        return not self.source.strip()


@dataclass
class Attribute:
    """Attribute declaration; ``value`` is None for bare attributes like ``disabled``."""
    name: Union[Identifier, NamespacedName]
    value: Optional[Union[str, ExpressionNode, 'ElementNode', 'FragmentNode']] = None
    line: int = 0
    column: int = 0


@dataclass
class SpreadAttribute:
    """Spread attribute ``{...props}``; ``source`` is the spread expression."""
    source: str
    line: int = 0
    column: int = 0


@dataclass
class ElementNode:
    """A JSX element with its name, attributes and children in document order."""
    name: ElementName
    attributes: List[Union[Attribute, SpreadAttribute]] = field(default_factory=list)
    children: List['ChildNode'] = field(default_factory=list)
    self_closing: bool = False
    line: int = 0
    column: int = 0


@dataclass
class FragmentNode:
    """Fragment ``<>...</>``; not addressable by name."""
    children: List['ChildNode'] = field(default_factory=list)
    line: int = 0
    column: int = 0


ChildNode = Union[ElementNode, FragmentNode, TextNode, ExpressionNode]
