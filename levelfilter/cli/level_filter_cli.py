"""
LevelFilter - Level Filter CLI
Command-line tools for filtering tagged log streams

Usage:
    levelfilter filter [--input FILE] [--levels DEBUG,WARN,ERROR] [--min-level WARN] [--no-color]
    levelfilter levels [--levels DEBUG,WARN,ERROR] [--min-level WARN]

Options shared by all commands:
    --config PATH     app_config.json to load (default: configs/app_config.json)

CLI options override config values (including LEVELFILTER_MIN_LEVEL).
"""

import argparse
import sys
import traceback
from typing import IO, BinaryIO, List, Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from levelfilter.components.color import Attribute, color_for_gap
from levelfilter.components.level_filter import LevelFilter
from levelfilter.configuration.config_file_loader import ConfigFileLoader
from levelfilter.configuration.level_filter_config import LevelFilterConfig
from levelfilter.framework.exceptions.configuration_errors import ConfigurationError
from levelfilter.framework.logging.bootstrap_logger import get_global_logger, setup_console_logging
from levelfilter.framework.types.log_level_types import DEFAULT_LEVELS, DEFAULT_MIN_LEVEL

vLog = get_global_logger()

# Rich color names for the palette attributes
RICH_COLORS = {
    Attribute.FG_RED: "red",
    Attribute.FG_YELLOW: "yellow",
    Attribute.FG_GREEN: "green",
    Attribute.FG_BLUE: "blue",
}


class LevelFilterCLI:
    """
    Command-line interface for the level filter.

    Builds one LevelFilter from config + CLI options and runs commands on it.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize CLI.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self.config = self._load_config()

    def _load_config(self) -> LevelFilterConfig:
        """Load app config and apply --levels on top of it."""
        if self.args.config:
            ConfigFileLoader.initialize(self.args.config)

        try:
            app_config, _ = ConfigFileLoader.get_config()
        except FileNotFoundError:
            if self.args.config:
                raise
            vLog.debug("No app config found - using built-in level defaults")
            app_config = {}

        console_level = app_config.get('console_logging', {}).get('log_level')
        if console_level:
            setup_console_logging(console_level)

        block = dict(app_config.get('level_filter') or {
            'levels': DEFAULT_LEVELS,
            'min_level': DEFAULT_MIN_LEVEL,
        })
        if self.args.levels:
            block['levels'] = [
                level.strip() for level in self.args.levels.split(',') if level.strip()
            ]

        return LevelFilterConfig({**app_config, 'level_filter': block})

    def _create_filter(self, writer) -> LevelFilter:
        """Create the filter and apply --min-level / --no-color."""
        level_filter = self.config.create_filter(writer)
        if self.args.min_level:
            level_filter.set_min_level(self.args.min_level)
        if getattr(self.args, 'no_color', False):
            level_filter.colorize = False
        return level_filter

    def cmd_filter(self, output: BinaryIO):
        """Filter lines from --input (or stdin) to output, byte for byte."""
        level_filter = self._create_filter(output)
        vLog.debug(f"Filtering with {level_filter}")

        if self.args.input:
            with open(self.args.input, "rb") as f:
                self._pump(f, level_filter)
        else:
            self._pump(getattr(sys.stdin, "buffer", sys.stdin), level_filter)

    def _pump(self, source: IO, level_filter: LevelFilter):
        for line in source:
            level_filter.write(line)
        level_filter.flush()

    def cmd_levels(self, output: TextIO):
        """Show configured levels with their filter status and color."""
        level_filter = self._create_filter(output)

        table = Table(
            title=f"Level Filter (min level: {level_filter.min_level})",
            box=box.ROUNDED
        )
        table.add_column("#", justify="right")
        table.add_column("Level")
        table.add_column("Status")
        table.add_column("Color")

        levels = level_filter.levels
        for index, level in enumerate(levels):
            # Labels may contain brackets, so no round trip through check()
            allowed = level not in level_filter.suppressed_levels
            color = color_for_gap(len(levels) - levels.index(level) - 1)
            if not allowed:
                status = "[dim]suppressed[/dim]"
                color_cell = "-"
            else:
                status = "[bold]allowed[/bold]"
                rich_color = RICH_COLORS.get(color)
                color_cell = f"[{rich_color}]{color.name}[/{rich_color}]" if rich_color else "default"
            table.add_row(str(index), Text(level), status, color_cell)

        Console(file=output).print(table)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="levelfilter",
        description="Filter and colorize [LEVEL]-tagged log lines",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to app_config.json (default: configs/app_config.json)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # ────────────────────────────────────────────
    # FILTER command
    # ────────────────────────────────────────────
    filter_parser = subparsers.add_parser(
        'filter',
        help='Filter log lines from stdin or a file to stdout'
    )
    filter_parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Read lines from FILE instead of stdin'
    )
    filter_parser.add_argument(
        '--no-color',
        action='store_true',
        default=False,
        help='Forward passing lines without color escape sequences'
    )

    # ────────────────────────────────────────────
    # LEVELS command
    # ────────────────────────────────────────────
    levels_parser = subparsers.add_parser(
        'levels',
        help='Show configured levels, their status and color'
    )

    for sub in (filter_parser, levels_parser):
        sub.add_argument(
            '--levels',
            type=str,
            default=None,
            help='Comma separated levels, low to high (e.g. DEBUG,WARN,ERROR)'
        )
        sub.add_argument(
            '--min-level',
            type=str,
            default=None,
            help='Minimum level allowed through'
        )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        cli = LevelFilterCLI(args)
        if args.command == 'filter':
            cli.cmd_filter(getattr(sys.stdout, "buffer", sys.stdout))
        elif args.command == 'levels':
            cli.cmd_levels(sys.stdout)

    except KeyboardInterrupt:
        print("\n\n👋 Interrupted by user", file=sys.stderr)
        sys.exit(0)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"\n❌ {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
