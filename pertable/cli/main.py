"""
Main CLI entry point for pertable.
"""

import argparse
import sys

from pertable.core.constants import PROMPT
from pertable.core.logging_config import get_logger, setup_logging, stream_supports_color

logger = get_logger("cli.main")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pertable",
        description="Look up a chemical element by name, symbol or atomic number",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "query",
        nargs="*",
        help="Element name, symbol or atomic number (prompted for if omitted)",
    )
    parser.add_argument(
        "-n",
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser


def ask_query() -> str:
    """
    Prompt for a query on the terminal.

    A closed or failing input stream gives an empty query.
    """
    try:
        return input(f"{PROMPT}: ")
    except (EOFError, OSError) as e:
        logger.debug(f"No query read from input: {e!r}")
        return ""


def get_query(args) -> str:
    """Return the query from the command line, or prompt for one."""
    if args.query:
        return args.query[0]
    return ask_query()


def lookup_cmd(args, config):
    """Resolve the query and print the matching element."""
    from pertable.display.renderer import show_element
    from pertable.elements.loader import get_elements
    from pertable.elements.matcher import match_element

    query = get_query(args).strip()
    if not query:
        logger.info("Empty query, nothing to look up")
        return

    elements = get_elements()
    result = match_element(elements, query)

    if result is None:
        logger.info(f"No element matches {query!r}")
        return

    if not result.is_exact:
        logger.info(
            f"No exact match for {query!r}, showing {result.element.label} "
            f"(edit distance {result.distance})"
        )

    show_element(result.element, config)


def main(argv=None):
    """Main CLI entry point."""
    from pertable.core.config import load_display_config

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_display_config()
    except Exception as e:
        setup_logging(level="WARNING")
        logger.error(f"Failed to load configuration: {e}", exc_info=True)
        sys.exit(1)

    if args.no_color:
        config.use_styling = False

    setup_logging(
        level=config.log_level,
        use_color=config.use_styling and stream_supports_color(sys.stderr),
    )

    try:
        lookup_cmd(args, config)
    except Exception as e:
        logger.error(f"Error executing lookup: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
