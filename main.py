"""Command-line access to struct metadata mined from rustdoc JSON exports."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from quarry.errors import QuarryError, TypeNotFoundError
from quarry.load_config import load_config
from quarry.models import StructInfo
from quarry.struct_registry import StructRegistry


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description="Inspect standard library structs from rustdoc JSON output."
    )
    parser.add_argument(
        "--doc-dir",
        help="Directory containing std.json, alloc.json and core.json",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Show the fields of a struct")
    lookup.add_argument("path", help="Full path, e.g. alloc::string::String")
    lookup.add_argument("--json", action="store_true", help="Print JSON")

    sub.add_parser("list", help="List every known struct path")

    exists = sub.add_parser("exists", help="Exit 0 if the struct is known")
    exists.add_argument("path")

    sub.add_parser("stats", help="Build the registry and print its size")
    return parser


def format_struct(info: StructInfo) -> str:
    """Render a struct and its fields as plain text."""
    lines = [
        f"Struct: {info.full_path}",
        f"Module: {info.module_path or '(none)'}",
        f"Shape: {info.shape.value}",
        f"Fields ({len(info.fields)}):",
    ]
    for f in info.fields:
        visibility = "pub " if f.is_public else ""
        lines.append(f"  {visibility}{f.name}: {f.type_name}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.doc_dir:
        config["docs"]["doc_dir"] = args.doc_dir
    registry = StructRegistry.from_config(config)

    try:
        if args.command == "lookup":
            info = registry.lookup(args.path)
            if args.json:
                print(json.dumps(info.to_dict(), indent=2))
            else:
                print(format_struct(info))
        elif args.command == "list":
            for path in registry.list_all():
                print(path)
        elif args.command == "exists":
            return 0 if registry.exists(args.path) else 1
        elif args.command == "stats":
            registry.warm()
            count, ready = registry.stats()
            print(f"Cache contains {count} types, initialized: {ready}")
    except TypeNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    except QuarryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
