"""
Command-line interface for pomdeps.

``app`` is the console-script entry point; the Typer application itself
lives in ``pomdeps.cli.app``.
"""
from pomdeps.cli.app import app as _app


def app():
    """Run the pomdeps CLI."""
    _app()


__all__ = ['app']
