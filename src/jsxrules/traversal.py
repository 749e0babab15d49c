"""Flattening of element trees into paths and per-node metadata.

Paths chain display names from the root with ``>``:

    ["App", "App>Header", "App>Header>Logo", "App>Footer"]

Paths are not unique; identical sibling subtrees produce identical paths,
which is what duplicate detection relies on.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from jsx_parser import ElementNode

from .accessors import get_children, get_name, get_props

logger = logging.getLogger(__name__)

PATH_SEPARATOR = ">"


@dataclass(frozen=True)
class NodeMeta:
    """Metadata about one element in the flattened tree."""
    path: str                                            # Full path from root, e.g. "App>Main>Content"
    name: str                                            # Display name
    props: list[str] = field(default_factory=list)       # Plain attribute names, declaration order
    child_count: int = 0                                 # Number of element children
    children: list[str] = field(default_factory=list)    # Names of immediate element children

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "path": self.path,
            "name": self.name,
            "props": list(self.props),
            "childCount": self.child_count,
            "children": list(self.children),
        }


def join_path(parent: str, name: str) -> str:
    """Path of a node named ``name`` under ``parent`` (empty for the root)."""
    return f"{parent}{PATH_SEPARATOR}{name}" if parent else name


def walk(root: ElementNode) -> Iterator[tuple[str, ElementNode]]:
    """Yield ``(path, node)`` pairs in pre-order, root first.

    Uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    stack = [("", root)]
    while stack:
        parent_path, node = stack.pop()
        path = join_path(parent_path, get_name(node))
        yield path, node
        # Reversed so the leftmost child is visited first
        for child in reversed(get_children(node)):
            stack.append((path, child))


def describe(path: str, node: ElementNode) -> NodeMeta:
    """Build the metadata record for ``node`` located at ``path``."""
    kids = get_children(node)
    return NodeMeta(
        path=path,
        name=get_name(node),
        props=get_props(node),
        child_count=len(kids),
        children=[get_name(kid) for kid in kids],
    )


def flatten(root: ElementNode) -> tuple[list[str], list[NodeMeta]]:
    """Paths and metadata for every element, from a single walk."""
    paths: list[str] = []
    nodes: list[NodeMeta] = []
    for path, node in walk(root):
        paths.append(path)
        nodes.append(describe(path, node))
    logger.debug(f"Flattened tree rooted at {paths[0]} into {len(paths)} nodes")
    return paths, nodes


def flatten_paths(root: ElementNode) -> list[str]:
    """Flatten a tree into its list of component paths."""
    return [path for path, _ in walk(root)]


def flatten_meta(root: ElementNode) -> list[NodeMeta]:
    """Flatten a tree into its list of node metadata records."""
    return [describe(path, node) for path, node in walk(root)]
