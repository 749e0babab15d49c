"""Built-in rule evaluators.

Component-scoped rules (sequence, props, children) look up the component
by display name with ``find_first``: only the first node in traversal order
is checked, later nodes with the same name are ignored. A component that
does not occur at all produces no error for these rules.
"""

from ..config import ValidationRules
from ..traversal import NodeMeta
from ..utils import cyclic_match, diff, duplicates, unique
from .framework import RuleEvaluator


def find_first(nodes: list[NodeMeta], name: str) -> NodeMeta | None:
    """First node in traversal order whose display name is ``name``."""
    return next((node for node in nodes if node.name == name), None)


class PathsRule(RuleEvaluator):
    """Require exactly the listed paths: none missing, none extra."""

    @property
    def name(self) -> str:
        return "paths"

    def applies(self, rules: ValidationRules) -> bool:
        return rules.paths is not None

    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        errors = []
        missing = diff(rules.paths, paths)
        if missing:
            errors.append(f"Missing: {', '.join(missing)}")

        extra = diff(paths, rules.paths)
        if extra:
            errors.append(f"Extra: {', '.join(extra)}")
        return errors


class DuplicatesRule(RuleEvaluator):
    """Reject paths that occur more than once."""

    @property
    def name(self) -> str:
        return "duplicates"

    def applies(self, rules: ValidationRules) -> bool:
        return bool(rules.no_duplicates)

    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        repeated = unique(duplicates(paths))
        if not repeated:
            return []
        return [f"Duplicates: {', '.join(repeated)}"]


class SequenceRule(RuleEvaluator):
    """Require a component's children to follow a repeating name pattern."""

    @property
    def name(self) -> str:
        return "sequence"

    def applies(self, rules: ValidationRules) -> bool:
        return rules.sequence is not None

    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        errors = []
        for parent, pattern in rules.sequence.items():
            node = find_first(nodes, parent)
            if node and not cyclic_match(node.children, pattern):
                errors.append(f"{parent}: wrong sequence, expected {' -> '.join(pattern)}")
        return errors


class PropsRule(RuleEvaluator):
    """Require attributes on a component."""

    @property
    def name(self) -> str:
        return "props"

    def applies(self, rules: ValidationRules) -> bool:
        return rules.props is not None

    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        errors = []
        for component, required in rules.props.items():
            node = find_first(nodes, component)
            if node:
                missing = diff(required, node.props)
                if missing:
                    errors.append(f"{component}: missing props {', '.join(missing)}")
        return errors


class ChildrenRule(RuleEvaluator):
    """Bound a component's element child count (inclusive)."""

    @property
    def name(self) -> str:
        return "children"

    def applies(self, rules: ValidationRules) -> bool:
        return rules.children is not None

    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        errors = []
        for component, bounds in rules.children.items():
            node = find_first(nodes, component)
            if not node:
                continue
            if bounds.min is not None and node.child_count < bounds.min:
                errors.append(f"{component}: needs at least {bounds.min} children, got {node.child_count}")
            if bounds.max is not None and node.child_count > bounds.max:
                errors.append(f"{component}: max {bounds.max} children, got {node.child_count}")
        return errors
