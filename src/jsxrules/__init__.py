"""jsxrules - Structural contract checks for JSX component trees.

jsxrules flattens a JSX component tree into addressable paths and checks it
against declarative rules: required paths, forbidden duplicates, child
ordering, required props and child-count bounds.
"""

__version__ = "0.1.0"
__author__ = "jsxrules contributors"
__description__ = "Structural contract checks for JSX component trees"

from jsx_parser import ElementNode, ParseError, parse_jsx as parse

from jsxrules.accessors import get_children, get_name, get_props
from jsxrules.config import ChildConstraint, JsxrulesConfig, ValidationRules
from jsxrules.traversal import NodeMeta, flatten, flatten_meta, flatten_paths
from jsxrules.utils import cyclic_match, diff, duplicates
from jsxrules.validation import ValidationResult, validate

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    # Entry points
    "validate",
    "parse",
    "ParseError",
    # Rules
    "ValidationRules",
    "ChildConstraint",
    "JsxrulesConfig",
    "ValidationResult",
    # Lower-level helpers for custom rules
    "ElementNode",
    "NodeMeta",
    "flatten",
    "flatten_paths",
    "flatten_meta",
    "get_name",
    "get_children",
    "get_props",
    "diff",
    "duplicates",
    "cyclic_match",
]
