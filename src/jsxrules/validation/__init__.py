"""Validation layer for component trees.

Rule categories (paths, duplicates, sequence, props, children) are
independent and opt-in: a category absent from the rule set is skipped.
"""

from collections.abc import Mapping
from typing import Any

from ..config import ValidationRules
from .framework import RuleEvaluator, ValidationEngine, ValidationIssue, ValidationResult
from .rules import (
    ChildrenRule,
    DuplicatesRule,
    PathsRule,
    PropsRule,
    SequenceRule,
    find_first,
)

__all__ = [
    "validate",
    "ValidationEngine",
    "ValidationResult",
    "ValidationIssue",
    "RuleEvaluator",
    "PathsRule",
    "DuplicatesRule",
    "SequenceRule",
    "PropsRule",
    "ChildrenRule",
    "find_first",
]


def validate(markup: str, rules: ValidationRules | Mapping[str, Any] | None = None) -> ValidationResult:
    """Validate JSX markup against a set of structural rules.

    Args:
        markup: Source containing exactly one JSX element expression
        rules: ValidationRules or an equivalent mapping

    Returns:
        ValidationResult; ``valid`` is False when any rule is violated

    Raises:
        ParseError: If the markup cannot be parsed into a single element
    """
    engine = ValidationEngine(rules)
    engine.create_default_rules()
    return engine.validate(markup)
