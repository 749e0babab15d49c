"""CLI interface for jsxrules using Typer framework."""

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from jsx_parser import ElementNode, JsxParser, ParseError
from jsxrules import __description__, __version__
from jsxrules.config import JsxrulesConfig, LogLevel, OutputFormat, load_config, load_rules
from jsxrules.traversal import flatten
from jsxrules.validation import ValidationEngine, ValidationResult

app = typer.Typer(
    name="jsxrules",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

# Exit code for unreadable input, unparseable markup and unusable rules
EXIT_USAGE = 2

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

# Set by the --log-level global option, overrides the config file
_cli_log_level: str | None = None


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"jsxrules version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level: error, warn, info, debug (default: from config)")
    ] = None,
) -> None:
    """jsxrules - structural contract checks for JSX component trees."""
    global _cli_log_level
    if log_level is not None and log_level not in LOG_LEVELS:
        console.print(f"[red]Error:[/red] Invalid log level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(EXIT_USAGE)
    _cli_log_level = log_level


def _setup_logging(config: JsxrulesConfig) -> None:
    level = _cli_log_level or config.logging.level
    logging.basicConfig(
        level=LOG_LEVELS[level],
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config_or_exit(config_path: Path | None) -> JsxrulesConfig:
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)
    _setup_logging(config)
    return config


def _read_markup(file: str) -> str:
    """Read markup from a file path, or stdin for '-'."""
    if file == "-":
        return sys.stdin.read()
    try:
        return Path(file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Cannot read {escape(file)}: {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)


def _parse_or_exit(file: str, config: JsxrulesConfig) -> ElementNode:
    parser = JsxParser(config.parser.to_parser_config())
    try:
        return parser.parse(_read_markup(file))
    except ParseError as e:
        console.print(f"[red]Parse error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _output_result(result: ValidationResult, file: str, format: str) -> None:
    if format == OutputFormat.JSON.value:
        _print_plain(jsonlib.dumps({"file": file, **result.to_dict()}, indent=2))
    elif format == OutputFormat.MARKDOWN.value:
        _print_plain("# Validation Report")
        _print_plain(f"**File:** {file}")
        _print_plain(f"**Status:** {'valid' if result.valid else 'invalid'}")
        if result.issues:
            _print_plain("")
            _print_plain("## Errors")
            for issue in result.issues:
                _print_plain(f"- **{issue.rule}** {issue.message}")
    else:  # table format
        status_color = "green" if result.valid else "red"
        status = "VALID" if result.valid else "INVALID"
        console.print(f"[{status_color}]{escape(file)}: {status}[/{status_color}]")

        if result.issues:
            issues_table = Table()
            issues_table.add_column("Rule", style="cyan")
            issues_table.add_column("Message", style="white")
            for issue in result.issues:
                issues_table.add_row(issue.rule, escape(issue.message))
            console.print(issues_table)


@app.command()
def validate(
    file: Annotated[
        str,
        typer.Argument(help="JSX file to validate, or '-' to read stdin")
    ],
    rules: Annotated[
        Optional[Path],
        typer.Option("--rules", "-r", help="JSON rules file (default: 'rules' section of the config)")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .jsxrules.json)")
    ] = None,
) -> None:
    """Check a component tree against structural rules."""
    jsx_config = _load_config_or_exit(config)

    valid_formats = [f.value for f in OutputFormat]
    output_format = format or jsx_config.output.format
    if output_format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{output_format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(EXIT_USAGE)

    if rules is not None:
        try:
            rule_set = load_rules(rules)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(EXIT_USAGE)
    else:
        rule_set = jsx_config.rules

    root = _parse_or_exit(file, jsx_config)

    engine = ValidationEngine(rule_set)
    engine.create_default_rules()
    result = engine.validate_tree(root)

    _output_result(result, file, output_format)
    raise typer.Exit(result.exit_code)


@app.command()
def paths(
    file: Annotated[
        str,
        typer.Argument(help="JSX file to flatten, or '-' to read stdin")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .jsxrules.json)")
    ] = None,
) -> None:
    """Print the component path of every element, one per line."""
    jsx_config = _load_config_or_exit(config)
    root = _parse_or_exit(file, jsx_config)

    tree_paths, _ = flatten(root)
    for path in tree_paths:
        _print_plain(path)


@app.command()
def tree(
    file: Annotated[
        str,
        typer.Argument(help="JSX file to describe, or '-' to read stdin")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .jsxrules.json)")
    ] = None,
) -> None:
    """Show per-element metadata: props and element children."""
    valid_formats = [OutputFormat.TABLE.value, OutputFormat.JSON.value]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(EXIT_USAGE)

    jsx_config = _load_config_or_exit(config)
    root = _parse_or_exit(file, jsx_config)
    _, nodes = flatten(root)

    if format == OutputFormat.JSON.value:
        _print_plain(jsonlib.dumps([node.to_dict() for node in nodes], indent=2))
        return

    node_table = Table()
    node_table.add_column("Path", style="cyan")
    node_table.add_column("Props", style="white")
    node_table.add_column("Children", style="white", justify="right")
    node_table.add_column("Child Names", style="dim")
    for node in nodes:
        node_table.add_row(
            escape(node.path),
            escape(", ".join(node.props)),
            str(node.child_count),
            escape(", ".join(node.children)),
        )
    console.print(node_table)


if __name__ == "__main__":
    app()
