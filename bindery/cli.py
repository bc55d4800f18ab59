"""
bindery CLI - inspect the module object the feature modules assemble.

Usage:
    bindery describe [--settings PATH] [--log-level LEVEL]
    python -m bindery describe

Output is one JSON object on stdout; logs go to stderr.
"""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from bindery import __version__
from bindery.application.bootstrap import create_module
from bindery.registry import APIRegistry, RegistryError, exported_entries
from bindery.utils.message import Log
from bindery.utils.settings import Settings


def describe(settings: Settings, registry: Optional[APIRegistry] = None) -> Dict[str, Any]:
    """Build the module against an owned registry and summarize it."""
    registry = registry or APIRegistry("cli")
    module = create_module(settings, registry=registry)
    return {
        "module": module.__name__,
        "version": __version__,
        "conflictPolicy": registry.conflict_policy.value,
        "callbacks": [
            {"order": r.order, "name": r.name, "source": r.source}
            for r in registry.list_records()
        ],
        "entries": sorted(exported_entries(module)),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindery",
        description="Inspect the module object assembled from bindery's feature modules.",
    )
    parser.add_argument("--version", action="version", version=f"bindery {__version__}")
    parser.add_argument("--settings", help="Path to a settings JSON file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("describe", help="Print registered callbacks and exported entries as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings(args.settings)
    Log.set_level(args.log_level or settings.get("log_level", "INFO"))

    if args.command == "describe":
        try:
            summary = describe(settings)
        except (RegistryError, ValueError) as e:
            Log.error(f"describe failed: {e}")
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
