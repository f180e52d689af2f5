"""
CLI entry point for schema-constraints.

Usage
─────
  # Constraint keywords for every field/accessor of a class
  schema-constraints inspect myapp.models:Account

  # Also resolve "pattern", and use "idn-email" for Email
  schema-constraints inspect myapp.models:Account --include-patterns --idn-email

Subcommands are implemented as standalone functions (cmd_inspect) so they
can be unit-tested without invoking argparse.
"""

import argparse
import importlib
import json
import logging
import sys
from decimal import Decimal
from typing import Optional

from schema_constraints.exceptions import SchemaConstraintsError
from schema_constraints.members.introspect import members_of
from schema_constraints.resolver.models import ValidationOption
from schema_constraints.resolver.module import ValidationModule
from schema_constraints.resolver.registry import ConfigBuilder

__all__ = ["build_parser", "load_target", "build_report", "cmd_inspect", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: inspect
    """
    parser = argparse.ArgumentParser(
        prog="schema-constraints",
        description="Derive JSON Schema constraints from validation metadata",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── inspect ───────────────────────────────────────────────────────────
    ins = sub.add_parser("inspect", help="Print resolved constraints for a class")
    ins.add_argument(
        "target",
        metavar="MODULE:CLASS",
        help="Class to inspect, e.g. myapp.models:Account",
    )
    ins.add_argument(
        "--include-patterns",
        action="store_true",
        default=False,
        dest="include_patterns",
        help="Resolve the \"pattern\" keyword from Pattern / Email metadata",
    )
    ins.add_argument(
        "--idn-email",
        action="store_true",
        default=False,
        dest="idn_email",
        help="Use format \"idn-email\" instead of \"email\"",
    )
    ins.add_argument(
        "--indent",
        type=int,
        default=2,
        metavar="N",
        help="JSON indentation (default: 2)",
    )

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def load_target(target: str) -> type:
    """
    Import ``package.module:QualName`` and return the class.

    Raises:
        ValueError: malformed target, missing attribute, or not a class.
        ImportError: module cannot be imported.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Target must look like 'package.module:ClassName', got {target!r}")

    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"{module_name} has no attribute {qualname!r}") from None

    if not isinstance(obj, type):
        raise ValueError(f"{target} is not a class")
    return obj


def _jsonable(value):
    if isinstance(value, Decimal):
        # json has no Decimal support; non-integral bounds stay exact as text
        return int(value) if value == value.to_integral_value() else str(value)
    return value


def build_report(cls: type, options: list[ValidationOption]) -> dict:
    """Resolve every member of ``cls`` and return the JSON-ready report dict."""
    builder = ConfigBuilder()
    ValidationModule(*options).apply_to_config_builder(builder)

    members = []
    for member in members_of(cls):
        constraints = builder.resolve(member)
        members.append({
            "name": member.name,
            "kind": member.shape.value,
            "constraints": {k: _jsonable(v) for k, v in constraints.items()},
        })
    return {"type": cls.__qualname__, "members": members}


# ── Command implementations ───────────────────────────────────────────────────


def cmd_inspect(
    target: str,
    include_patterns: bool = False,
    idn_email: bool = False,
    indent: int = 2,
) -> dict:
    """
    Print the constraint report for ``target`` to stdout and return it.

    Raises:
        Any error from load_target / members_of propagates to the caller.
    """
    options: list[ValidationOption] = []
    if include_patterns:
        options.append(ValidationOption.INCLUDE_PATTERN_EXPRESSIONS)
    if idn_email:
        options.append(ValidationOption.PREFER_IDN_EMAIL_FORMAT)

    logger.info("Inspecting %s", target)
    cls = load_target(target)
    report = build_report(cls, options)
    logger.debug("Resolved %d members of %s", len(report["members"]), target)

    print(json.dumps(report, ensure_ascii=False, indent=indent))
    return report


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand == "inspect":
        try:
            cmd_inspect(
                target=ns.target,
                include_patterns=ns.include_patterns,
                idn_email=ns.idn_email,
                indent=ns.indent,
            )
        except (SchemaConstraintsError, ImportError, ValueError) as exc:
            logger.debug("inspect failed", exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
