"""
Main CLI application for pomdeps.

Defines the Typer application structure and command routing,
following clean architecture principles with thin CLI layer.
"""
import typer

from pomdeps.cli.commands.resolve import resolve_command


# Initialize Typer app
app = typer.Typer(help="pomdeps - Maven descriptor dependency resolution")

# Register commands
app.command("resolve", help="Resolve the declared dependencies of a Maven pom.xml.")(resolve_command)


@app.callback()
def main():
    """pomdeps - Maven descriptor dependency resolution.

    Run 'pomdeps resolve path/to/pom.xml' to list the dependencies a
    descriptor declares, with properties, parents and profiles applied.
    """
