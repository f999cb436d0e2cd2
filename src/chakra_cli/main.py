import logging
import sys
from pathlib import Path

import typer
from chakra_linter.engine import LinterEngine
from chakra_linter.errors import ChakraLintError
from chakra_linter.registry import registry

from .config import LintConfig
from .converters import internal_issue_to_lint_issue

logger = logging.getLogger(__name__)

app = typer.Typer(help="Chakra UI Linter - Suggest specific Chakra components over a generic Box")

SOURCE_SUFFIXES = (".tsx", ".jsx")


def setup_logging(verbose: bool) -> None:
    """Log to stderr; stdout carries the report."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    root_logger.addHandler(handler)


def collect_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the TSX/JSX files below them"""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.glob("**/*") if p.suffix in SOURCE_SUFFIXES))
        else:
            files.append(path)
    return files


@app.command()
def lint(
    files: list[Path] = typer.Argument(None, help="Files or directories to lint"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
    config_file: Path = typer.Option(Path(".chakra-lint.toml"), "--config", help="Path to config file"),
    severity: str = typer.Option("STYLE", help="Minimum severity to show"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run linter on TSX/JSX files"""
    setup_logging(verbose)

    if not files:
        typer.echo("Error: Provide files or directories to lint")
        raise typer.Exit(code=1)

    config = LintConfig(config_file)
    engine = LinterEngine(rules=config.apply_to_registry(registry))
    all_issues = []

    for file_path in collect_files(files):
        if not file_path.is_file():
            typer.echo(f"Error: {file_path} does not exist", err=True)
            raise typer.Exit(code=2)

        try:
            if fix:
                report = engine.fix_file(file_path)
                if report.modified:
                    typer.echo(f"  🔧 Fixed {report.fixed} issue(s) in {file_path.name}")
                current_issues = report.issues
            else:
                current_issues = engine.analyze_file(file_path)
        except ChakraLintError as e:
            logger.debug("Linting %s failed", file_path, exc_info=True)
            typer.echo(f"Error: {file_path}: {e}", err=True)
            raise typer.Exit(code=2)

        all_issues.extend(current_issues)

    external_issues = [internal_issue_to_lint_issue(i) for i in all_issues]

    # Sort and filter by severity
    severity_rank = {"ERROR": 4, "WARNING": 3, "INFO": 2, "STYLE": 1}
    min_rank = severity_rank.get(severity.upper(), 1)

    reported_count = 0
    for issue in sorted(external_issues, key=lambda x: (x.file_path, x.line_number, x.column)):
        if severity_rank.get(issue.severity.value, 0) >= min_rank:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id}] - {issue.message}"
            )
            reported_count += 1

    typer.echo(f"\nTotal issues found: {len(external_issues)} ({reported_count} reported)")

    errors = sum(1 for i in external_issues if i.severity.value == "ERROR")
    if errors > 0:
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List available rules"""
    for rule in registry.get_all_rules():
        fixable = " [fixable]" if rule.auto_fixable else ""
        typer.echo(f"{rule.rule_id} {rule.name}{fixable} - {rule.description}")


if __name__ == "__main__":
    app()
