"""
Entry point for tinyini.

Usage:
    python -m tinyini settings.ini
    python -m tinyini settings.ini --section database --key port --type int
    python -m tinyini --help
"""

import argparse
import json
import sys

from . import __version__
from .const import GLOBAL_SECTION, NOT_FOUND
from .document import IniDocument, IniError
from .loader import IniLoader, IniLoadError
from .logging import LogConfig, get_logger, setup_logging

logger = get_logger("main")


def query_value(doc: IniDocument, args: argparse.Namespace) -> int:
    """Print one value from the document."""
    if args.section is None:
        section = GLOBAL_SECTION
    else:
        section = doc.find_section(args.section)
        if section == NOT_FOUND:
            print(f"Section not found: [{args.section}]", file=sys.stderr)
            return 1

    if not doc.property_exists(section, args.key):
        where = f"[{args.section}]" if args.section is not None else "global section"
        print(f"Key not found in {where}: {args.key}", file=sys.stderr)
        return 1

    try:
        if args.type == "int":
            result = str(doc.value_as_int(section, args.key, strict=args.strict))
        elif args.type == "float":
            result = str(doc.value_as_float(section, args.key, strict=args.strict))
        elif args.type == "bool":
            result = "true" if doc.value_as_bool(section, args.key) else "false"
        else:
            result = doc.value(section, args.key)
    except IniError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinyini",
        description="Read an INI file and print its contents or a single value",
    )

    parser.add_argument(
        "file",
        help="Path to INI file",
    )

    parser.add_argument(
        "-s", "--section",
        metavar="NAME",
        help="Section to query (default: global section)",
    )

    parser.add_argument(
        "-k", "--key",
        metavar="KEY",
        help="Print the value of this key instead of the whole document",
    )

    parser.add_argument(
        "-t", "--type",
        choices=("str", "int", "float", "bool"),
        default="str",
        help="Interpret the value as this type (default: str)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of converting non-numeric values to zero",
    )

    parser.add_argument(
        "--encoding",
        metavar="NAME",
        help="Text encoding of the file (default: detect)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.log_file = args.log_file

    setup_logging(log_config)

    if args.strict and args.type not in ("int", "float"):
        logger.warning("--strict only applies to --type int and --type float")

    loader = IniLoader(encoding=args.encoding)
    try:
        doc = loader.load_file(args.file)
    except IniLoadError as e:
        logger.error(f"Load error: {e}")
        return 1

    if args.key is not None:
        return query_value(doc, args)

    if args.section is not None:
        logger.warning("--section has no effect without --key")

    print(json.dumps(doc.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
