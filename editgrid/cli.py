"""Command-line interface for editgrid configuration and CSV viewing."""

from __future__ import annotations

import argparse
import os
import sys

from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .config import EditGridSettings
    from .grid import RenderedPage


def main() -> int:
    """Run the main CLI entry point.

    Returns
    -------
    int
        Exit code.
    """
    parser = argparse.ArgumentParser(
        prog="editgrid",
        description="editgrid configuration and grid viewing tools",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show or export configuration",
    )
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )
    config_group.add_argument(
        "--toml",
        action="store_true",
        help="Export configuration as TOML",
    )
    config_group.add_argument(
        "--env",
        action="store_true",
        help="Export configuration as environment variables",
    )
    config_group.add_argument(
        "--sources",
        action="store_true",
        help="Show configuration file sources",
    )
    config_parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: stdout)",
    )

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize an editgrid.toml configuration file",
    )
    init_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite existing configuration file",
    )
    init_parser.add_argument(
        "--path",
        "-p",
        type=str,
        default="editgrid.toml",
        help="Path for configuration file (default: editgrid.toml)",
    )

    # view command
    view_parser = subparsers.add_parser(
        "view",
        help="Load a CSV file and print one page of the grid",
    )
    view_parser.add_argument("file", type=str, help="CSV file with a header line")
    view_parser.add_argument(
        "--type",
        "-t",
        action="append",
        default=[],
        metavar="NAME=DESCRIPTOR",
        help="Column type descriptor, e.g. price='double(€,2)' (repeatable)",
    )
    view_parser.add_argument("--sort", "-s", type=str, help="Column to sort by")
    view_parser.add_argument("--desc", action="store_true", help="Sort descending")
    view_parser.add_argument("--filter", type=str, help="Filter text")
    view_parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Rows per page (default: from configuration)",
    )
    view_parser.add_argument(
        "--page",
        type=int,
        default=0,
        help="Page index to show, starting at 0",
    )
    view_parser.add_argument(
        "--delimiter",
        type=str,
        default=",",
        help="CSV field delimiter (default: ,)",
    )

    args = parser.parse_args()

    if args.command == "config":
        return handle_config(args)
    if args.command == "init":
        return handle_init(args)
    if args.command == "view":
        return handle_view(args)
    parser.print_help()
    return 0


def handle_config(args: argparse.Namespace) -> int:
    """Handle the config command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .config import EditGridSettings

    settings = EditGridSettings()

    if args.sources:
        return show_config_sources()

    if args.toml:
        output = settings.to_toml()
    elif args.env:
        output = settings.to_env()
    else:
        output = format_config_show(settings)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Configuration written to {args.output}")
    else:
        print(output)

    return 0


def handle_init(args: argparse.Namespace) -> int:
    """Handle the init command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .config import EditGridSettings

    path = Path(args.path)

    if path.exists() and not args.force:
        print(f"Error: {path} already exists. Use --force to overwrite.", file=sys.stderr)
        return 1

    settings = EditGridSettings()
    toml_content = settings.to_toml()

    header = """# editgrid Configuration File
#
# Environment variables can override any setting:
#   EDITGRID_GRID__PAGE_SIZE=25
#   EDITGRID_GRID__DATE_FORMAT="US"
#   EDITGRID_GRID__SHORT_MONTH_NAMES="Jan,Feb,Mar,Apr,May,Jun,Jul,Aug,Sep,Oct,Nov,Dec"
#   EDITGRID_LOG__LEVEL="DEBUG"
#
# Use nested keys with __ (double underscore) delimiter.

"""
    path.write_text(header + toml_content, encoding="utf-8")
    print(f"Created {path}")

    return 0


def _parse_type_options(options: list[str]) -> dict[str, str]:
    types: dict[str, str] = {}
    for option in options:
        name, sep, descriptor = option.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Expected NAME=DESCRIPTOR, got {option!r}")
        types[name.strip()] = descriptor.strip()
    return types


def handle_view(args: argparse.Namespace) -> int:
    """Handle the view command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.

    Returns
    -------
    int
        Exit code.
    """
    from .grid import EditableGrid
    from .loader import infer_column_definitions, read_csv
    from .models import RowDefinition

    path = Path(args.file)
    if not path.exists():
        print(f"Error: {path} does not exist.", file=sys.stderr)
        return 1

    try:
        column_types = _parse_type_options(args.type)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    columns, records = read_csv(path, delimiter=args.delimiter)
    definitions = infer_column_definitions(columns, records, column_types, parse_strings=True)

    options = {}
    if args.page_size is not None:
        if args.page_size < 0:
            print("Error: --page-size must be >= 0.", file=sys.stderr)
            return 1
        options["page_size"] = args.page_size

    grid = EditableGrid(path.stem, caption=path.name, **options)
    grid.load(
        definitions,
        [RowDefinition(id=index, values=record) for index, record in enumerate(records)],
    )

    if args.sort:
        if not grid.has_column(args.sort):
            print(f"Error: unknown column {args.sort!r}.", file=sys.stderr)
            return 1
        grid.sort(args.sort, descending=args.desc)
    if args.filter:
        grid.filter(args.filter)
    if grid.page_size > 0:
        grid.set_page_index(args.page)

    print(format_page(grid.render_page()))
    return 0


def format_page(page: RenderedPage) -> str:
    """Format a rendered page as a plain text table.

    Parameters
    ----------
    page : RenderedPage
        Header and row texts from ``EditableGrid.render_page``.

    Returns
    -------
    str
        The table, with a caption line and a page footer.
    """
    widths = [len(label) for label in page.header]
    for _, cells in page.rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, cells)]

    def line(cells: list[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = []
    if page.caption:
        lines.append(page.caption)
    lines.append(line(page.header))
    lines.append("-+-".join("-" * width for width in widths))
    lines.extend(line(cells) for _, cells in page.rows)
    if not page.rows:
        lines.append("(no rows)")
    lines.append(f"\nPage {page.page_index + 1}/{page.page_count}")
    return "\n".join(lines)


def _env_overrides() -> dict[str, str]:
    """EDITGRID_* variables that set a setting, keyed by ``section.field``."""
    overrides = {}
    for key in os.environ:
        section, sep, field = key.removeprefix("EDITGRID_").partition("__")
        if key.startswith("EDITGRID_") and sep:
            overrides[f"{section.lower()}.{field.lower()}"] = key
    return overrides


def show_config_sources() -> int:
    """Print the configuration files editgrid reads and which of them exist.

    Returns
    -------
    int
        Exit code.
    """
    from .config import config_file_candidates

    print("Configuration files (later files override earlier ones):")
    for label, path in config_file_candidates():
        status = "found" if path.exists() else "missing"
        print(f"  [{status:>7}] {label}: {path}")

    overrides = _env_overrides()
    if overrides:
        print("Environment overrides:")
        for name in sorted(overrides.values()):
            print(f"  {name}")
    else:
        print("Environment overrides: none")
    return 0


def format_config_show(settings: EditGridSettings) -> str:
    """Format the effective settings, marking values set from the environment.

    Parameters
    ----------
    settings : EditGridSettings
        The settings object to format.

    Returns
    -------
    str
        One ``[section]`` block per settings section.
    """
    overrides = _env_overrides()
    blocks = []
    for section_name, values in settings.model_dump().items():
        lines = [f"[{section_name}]"]
        for field_name, value in values.items():
            line = f"  {field_name} = {value!r}"
            env_name = overrides.get(f"{section_name}.{field_name}")
            if env_name:
                line += f"  # from {env_name}"
            lines.append(line)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


if __name__ == "__main__":
    sys.exit(main())
