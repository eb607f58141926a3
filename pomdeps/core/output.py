"""
Output rendering for dependency records.

Renders records as JSON, as a Rich table, or as a CycloneDX document, and
writes rendered text to a file when one is configured.
"""
import json
import os
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from pomdeps import sbom
from pomdeps.models import DependencyRecord


def render_json(records: List[DependencyRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], indent=2)


def build_table(records: List[DependencyRecord], title: Optional[str] = None) -> Table:
    """Build a Rich table with one row per record."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Version")
    table.add_column("Scope", style="magenta")
    table.add_column("Details", style="dim")

    for record in records:
        details = ", ".join(
            f"{key}={','.join(value) if isinstance(value, list) else value}"
            for key, value in record.metadata.items()
        )
        table.add_row(record.name, record.version, record.scope, details)
    return table


def render(records: List[DependencyRecord], output_format: str) -> str:
    """Render records as ``json`` or ``cyclonedx`` text."""
    if output_format == "cyclonedx":
        return sbom.generate(records)
    return render_json(records)


def write_output(text: str, output_file: str) -> str:
    """Write rendered text and return the absolute output path."""
    output_path = os.path.abspath(output_file)
    with open(output_path, "w") as f:
        f.write(text)
    return output_path


def emit(
    records: List[DependencyRecord],
    output_format: str,
    console: Console,
    output_file: Optional[str] = None,
    title: Optional[str] = None,
) -> Optional[str]:
    """Print or write records in the requested format.

    Returns:
        The written file path, or ``None`` when output went to the console.
    """
    if output_format == "table" and not output_file:
        console.print(build_table(records, title=title))
        return None

    if output_format == "table":
        # Tables are for terminals; files get JSON
        text = render_json(records)
    else:
        text = render(records, output_format)

    if output_file:
        return write_output(text, output_file)

    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
    return None
