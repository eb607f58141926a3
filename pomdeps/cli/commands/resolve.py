"""
Resolve command implementation.

Thin wrapper around ResolveService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from pomdeps.core.resolve_service import ResolveService


def resolve_command(
    path: str = typer.Argument(".", help="pom.xml file or directory containing one"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output_format: Optional[str] = typer.Option(None, "-f", "--format", help="Output format: json, table or cyclonedx"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write output to this file"),
    resolve_parents: Optional[bool] = typer.Option(None, "--parents/--no-parents", help="Follow <parent> descriptors on disk"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
):
    """Resolve the declared dependencies of a Maven pom.xml."""

    # Delegate to service layer
    service = ResolveService()
    exit_code = service.execute_resolve(
        path=path,
        config_path=config_path,
        output_format=output_format,
        output=output,
        resolve_parents=resolve_parents,
        log_level=log_level,
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
