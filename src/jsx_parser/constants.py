"""Constants and configuration for JSX parsing.

ESTree node type names produced by esprima and default parser settings
centralized for easy maintenance.
"""

from typing import Any, Dict

# Program-level node types
EXPRESSION_STATEMENT = 'ExpressionStatement'

# JSX node types (ESTree JSX extension)
JSX_ELEMENT = 'JSXElement'
JSX_FRAGMENT = 'JSXFragment'
JSX_TEXT = 'JSXText'
JSX_EXPRESSION_CONTAINER = 'JSXExpressionContainer'
JSX_EMPTY_EXPRESSION = 'JSXEmptyExpression'
JSX_SPREAD_ATTRIBUTE = 'JSXSpreadAttribute'
JSX_MEMBER_EXPRESSION = 'JSXMemberExpression'
JSX_NAMESPACED_NAME = 'JSXNamespacedName'

# Options handed to esprima.parseScript; locations and ranges feed node positions
ESPRIMA_OPTIONS: Dict[str, Any] = {
    'jsx': True,
    'loc': True,
    'range': True,
}

# Default parser settings
DEFAULT_CONFIG = {
    'max_depth': 256,              # Element nesting limit, raises ParseError beyond it
}
