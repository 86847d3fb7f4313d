#!/usr/bin/env python3
"""
principia - browse the design principle catalog

Usage:
    principia list
    principia show 3
    principia show SRP --markdown
    principia search principle
    principia validate path/to/catalog.md
    principia export --format json --output catalog.json

    # Or as a module
    python -m principia list
"""

import argparse
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .catalog.library import PrincipleCatalog
from .config import Config
from .errors import CatalogError
from .hooks.audit import log_lookup
from .loader import load_catalog
from .logger import CatalogLogger
from .render import render_catalog, render_entry, render_index


def cmd_list(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    render_index(catalog.list_all(), console, title=catalog.title)
    return 0


def cmd_read(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    render_catalog(catalog, console)
    return 0


def cmd_show(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    """Show one entry by ordinal or by name/abbreviation."""
    try:
        entry = catalog.resolve(args.key)
    except CatalogError:
        log_lookup("show", args.key, [], audit)
        raise
    log_lookup("show", args.key, [entry.ordinal], audit)

    if args.markdown:
        sys.stdout.write(catalog.format_markdown([entry]))
    else:
        render_entry(entry, console)
    return 0


def cmd_search(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    """List every entry matching a name or abbreviation."""
    matches = catalog.get_by_name(args.query)
    log_lookup("search", args.query, [e.ordinal for e in matches], audit)

    if not matches:
        console.print(f"[yellow]No principle matches {escape(repr(args.query))}[/yellow]")
        return 1
    render_index(matches, console, title=f"Matches for {args.query!r}")
    return 0


def cmd_validate(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    console.print(f"[green]OK[/green] {len(catalog)} principle(s) in {escape(catalog.title)}")
    return 0


def cmd_export(catalog: PrincipleCatalog, args: argparse.Namespace, console: Console, audit) -> int:
    """Write the catalog as markdown or JSON to a file or stdout."""
    content = catalog.to_json() + "\n" if args.format == "json" else catalog.to_markdown()

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(content)
        console.print(f"Exported {len(catalog)} principle(s) to {escape(args.output)}")
    else:
        sys.stdout.write(content)
    return 0


COMMANDS = {
    "list": cmd_list,
    "read": cmd_read,
    "show": cmd_show,
    "search": cmd_search,
    "validate": cmd_validate,
    "export": cmd_export,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="principia",
        description="principia - object-oriented design principle catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Index of every principle
  principia list

  # One principle by position or abbreviation
  principia show 5
  principia show DIP

  # Name search: exact abbreviation first, then names containing the text
  principia search principle

  # Check a catalog file without rendering it
  principia validate docs/design_principles.md
        """
    )

    parser.add_argument(
        "--catalog", "-c",
        help="Catalog file, markdown or .json (default: bundled corpus)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log load and lookup steps to stderr"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show the index of principles")
    sub.add_parser("read", help="Render the whole catalog")

    show = sub.add_parser("show", help="Show one principle")
    show.add_argument("key", help="Ordinal (e.g. 3) or name/abbreviation (e.g. SRP)")
    show.add_argument("--markdown", action="store_true", help="Print markdown instead of rich output")

    search = sub.add_parser("search", help="Find principles by name or abbreviation")
    search.add_argument("query")

    validate = sub.add_parser("validate", help="Load and validate a catalog file")
    validate.add_argument("path", nargs="?", help="Catalog file (default: --catalog or bundled)")

    export = sub.add_parser("export", help="Export the catalog")
    export.add_argument("--format", "-f", choices=["markdown", "json"], default="markdown")
    export.add_argument("--output", "-o", help="Output file (default: stdout)")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    config = Config.from_env()

    args = build_parser().parse_args(argv)

    console = Console()
    logger = CatalogLogger(log_file=config.log_file, verbose=args.verbose or config.verbose)
    audit = config.audit_context()
    logger.log_section(f"principia {args.command}")

    path = args.catalog or config.catalog_path
    if args.command == "validate" and args.path:
        path = args.path

    try:
        catalog = load_catalog(path, logger=logger, audit_context=audit)
        return COMMANDS[args.command](catalog, args, console, audit)
    except (CatalogError, OSError) as e:
        logger.log("ERROR", str(e))
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
