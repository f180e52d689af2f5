"""
cli — command-line interface for schema-constraints.

Entry points
────────────
  python -m schema_constraints.cli
  schema-constraints            (via pyproject.toml [project.scripts])

Subcommands: inspect
"""

from schema_constraints.cli.main import build_parser, cmd_inspect, main

__all__ = ["build_parser", "cmd_inspect", "main"]
