"""Rules and configuration management for jsxrules using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".jsxrules.json"


class OutputFormat(str, Enum):
    """Report format types."""
    TABLE = "table"
    JSON = "json"
    MARKDOWN = "markdown"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ChildConstraint(BaseModel):
    """Inclusive bounds on the number of element children."""
    min: int | None = None
    max: int | None = None

    @model_validator(mode="after")
    def warn_unsatisfiable(self):
        """Inverted bounds are accepted; each bound is still checked on its own."""
        if self.min is not None and self.max is not None and self.min > self.max:
            logger.warning(f"Child bounds min={self.min} max={self.max} can never be satisfied")
        return self

    model_config = ConfigDict(extra="forbid")


class ValidationRules(BaseModel):
    """Structural rules for a component tree.

    Every category is optional; a category left as None is not checked.
    """
    paths: list[str] | None = None
    no_duplicates: bool | None = Field(alias="noDuplicates", default=None)
    sequence: dict[str, list[str]] | None = None
    props: dict[str, list[str]] | None = None
    children: dict[str, ChildConstraint] | None = None

    @field_validator("sequence")
    @classmethod
    def validate_sequence_patterns(cls, v):
        """Sequence patterns need at least one entry to repeat."""
        for parent, pattern in (v or {}).items():
            if not pattern:
                raise ValueError(f"sequence pattern for '{parent}' must not be empty")
        return v

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class ParserConfig(BaseModel):
    """Markup parser configuration section."""
    max_depth: int = Field(alias="maxDepth", default=256)

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v):
        if v < 1:
            raise ValueError("parser max_depth must be >= 1")
        return v

    def to_parser_config(self) -> dict[str, Any]:
        """Settings in the form JsxParser expects."""
        return {"max_depth": self.max_depth}

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class JsxrulesConfig(BaseModel):
    """Complete jsxrules configuration model."""
    rules: ValidationRules = Field(default_factory=ValidationRules)
    output: OutputConfig = Field(default_factory=OutputConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_rules(rules_path: str | Path) -> ValidationRules:
    """Load a JSON rules file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not a valid rule set
    """
    rules_path = Path(rules_path)
    with open(rules_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in rules file {rules_path}: {e}") from e
    try:
        return ValidationRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid rules in {rules_path}: {e}") from e


def load_config(config_path: str | Path | None = None) -> JsxrulesConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .jsxrules.json

    Returns:
        JsxrulesConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return JsxrulesConfig.model_validate(config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except (OSError, ValidationError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return create_default_config()


def find_config_file(start_dir: Path | None = None,
                     filename: str = CONFIG_FILENAME) -> Path | None:
    """Nearest ``filename`` in ``start_dir`` (default: cwd) or one of its ancestors."""
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / filename
        if candidate.is_file():
            logger.debug(f"Using config file {candidate}")
            return candidate
    return None


def create_default_config() -> JsxrulesConfig:
    """Create default configuration: no rules, table output, warnings only."""
    return JsxrulesConfig()
