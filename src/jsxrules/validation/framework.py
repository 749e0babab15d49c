"""Core validation framework for component trees.

Parses markup once, flattens it once, and runs pluggable rule evaluators
over the flattened form. Rule violations are collected as data; only a
markup parse failure is raised.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from jsx_parser import ElementNode, JsxParser

from ..config import ValidationRules
from ..traversal import NodeMeta, flatten

logger = logging.getLogger(__name__)


@dataclass
class ValidationIssue:
    """A single rule violation."""
    rule: str
    message: str

    def __str__(self) -> str:
        return f"[{self.rule}] {self.message}"


@dataclass
class ValidationResult:
    """Outcome of validating one tree against one rule set."""
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Violation messages in evaluation order."""
        return [issue.message for issue in self.issues]

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = valid, 1 = rule violations."""
        return 0 if self.valid else 1

    def add_issue(self, rule: str, message: str) -> None:
        """Add a validation issue."""
        self.issues.append(ValidationIssue(rule, message))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "errors": self.errors,
            "issues": [{"rule": issue.rule, "message": issue.message} for issue in self.issues],
        }


class RuleEvaluator(ABC):
    """Base class for rule evaluators.

    Evaluators are independent: each sees only the flattened tree and the
    rule set, never another evaluator's output.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule category name for identification."""
        pass

    @abstractmethod
    def applies(self, rules: ValidationRules) -> bool:
        """Whether the rule set enables this category."""
        pass

    @abstractmethod
    def evaluate(self, paths: list[str], nodes: list[NodeMeta], rules: ValidationRules) -> list[str]:
        """Check the flattened tree.

        Args:
            paths: Component paths in traversal order
            nodes: Node metadata in traversal order
            rules: Complete rule set

        Returns:
            Violation messages, empty when the category passes
        """
        pass


def coerce_rules(rules: ValidationRules | Mapping[str, Any] | None) -> ValidationRules:
    """Accept a ValidationRules instance or a plain mapping (camelCase or snake_case keys)."""
    if rules is None:
        return ValidationRules()
    if isinstance(rules, ValidationRules):
        return rules
    return ValidationRules.model_validate(dict(rules))


class ValidationEngine:
    """Runs rule evaluators over parsed component trees."""

    def __init__(self, rules: ValidationRules | Mapping[str, Any] | None = None,
                 parser: JsxParser | None = None):
        self.rules = coerce_rules(rules)
        self.parser = parser or JsxParser()
        self.evaluators: list[RuleEvaluator] = []

    def add_rule(self, evaluator: RuleEvaluator) -> None:
        """Add a rule evaluator; evaluators run in insertion order."""
        self.evaluators.append(evaluator)

    def create_default_rules(self) -> None:
        """Register the built-in evaluators in reporting order."""
        from .rules import ChildrenRule, DuplicatesRule, PathsRule, PropsRule, SequenceRule

        self.add_rule(PathsRule())
        self.add_rule(DuplicatesRule())
        self.add_rule(SequenceRule())
        self.add_rule(PropsRule())
        self.add_rule(ChildrenRule())

    def validate(self, markup: str) -> ValidationResult:
        """Parse markup and validate the resulting tree.

        Raises:
            ParseError: If the markup is not a single JSX element
        """
        root = self.parser.parse(markup)
        return self.validate_tree(root)

    def validate_tree(self, root: ElementNode) -> ValidationResult:
        """Validate an already-parsed tree."""
        paths, nodes = flatten(root)
        result = ValidationResult()

        active = [evaluator for evaluator in self.evaluators if evaluator.applies(self.rules)]
        logger.debug(f"Running {len(active)} of {len(self.evaluators)} rule categories over {len(paths)} nodes")

        for evaluator in active:
            messages = evaluator.evaluate(paths, nodes, self.rules)
            logger.debug(f"Rule {evaluator.name}: {len(messages)} violations")
            for message in messages:
                result.add_issue(evaluator.name, message)

        logger.info(f"Validation of <{paths[0]}> finished: {'valid' if result.valid else 'invalid'} "
                    f"({len(result.issues)} errors)")
        return result
