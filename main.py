"""
Line Markdown - converts a line-oriented Markdown subset to HTML.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from internal.config.manager import ConfigManager
from lib.line_markdown import MarkdownParser
from lib.logging_utils import initLogging
from lib.utils import jsonDumps

# Configure basic logging first, stdout is reserved for output
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


class LineMarkdownApp:
    """Command line application wiring config, logging and the parser."""

    def __init__(self, configPath: Optional[str] = None, configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())
        self.options: Dict[str, Any] = self.configManager.getRendererOptions()

    def overrideOptions(self, groupLists: bool = False, maxHeaderLevel: Optional[int] = None) -> None:
        """Apply command line overrides on top of the configured options."""
        if groupLists:
            self.options["group_lists"] = True
        if maxHeaderLevel is not None:
            self.options["max_header_level"] = maxHeaderLevel

    def convert(self, text: str, asAst: bool = False, showStats: bool = False) -> str:
        """Convert text to HTML, or to the JSON block stream when asAst is set."""
        parser = MarkdownParser(self.options)
        if asAst:
            result = jsonDumps(parser.getAstJson(text), indent=2)
        else:
            result = parser.parseToHtml(text)

        if showStats:
            print(f"Stats: {jsonDumps(parser.getStats())}", file=sys.stderr)
        return result


def parseArguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert line-oriented Markdown to HTML")
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file, '-' for stdin (default: -)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output file, '-' for stdout (default: -)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "--group-lists",
        action="store_true",
        help="Wrap consecutive list items in <ul>",
    )
    parser.add_argument(
        "--max-header-level",
        type=int,
        default=None,
        help="Clamp header levels to this value",
    )
    parser.add_argument(
        "--ast",
        action="store_true",
        help="Print classified blocks as JSON instead of HTML",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print parse statistics to stderr",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    args = parser.parse_args(argv)

    if args.max_header_level is not None and args.max_header_level < 1:
        parser.error("--max-header-level must be a positive integer")

    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    return args


def readInput(path: str) -> str:
    """Read the whole input, without the single trailing newline editors add."""
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, "rt", encoding="utf-8") as f:
            text = f.read()
    if text.endswith("\n"):
        text = text[:-1]
    return text


def writeOutput(path: str, text: str) -> None:
    """Write the result followed by a newline."""
    if path == "-":
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
    else:
        with open(path, "wt", encoding="utf-8") as f:
            f.write(text + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parseArguments(argv)

    try:
        app = LineMarkdownApp(configPath=args.config, configDirs=args.config_dir)

        if args.print_config:
            print(jsonDumps(app.configManager.config, indent=2))
            return 0

        app.overrideOptions(groupLists=args.group_lists, maxHeaderLevel=args.max_header_level)
        text = readInput(args.input)
        writeOutput(args.output, app.convert(text, asAst=args.ast, showStats=args.stats))
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
