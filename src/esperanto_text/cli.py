"""
CLI interface for esperanto-text.

Usage:
    eotext x u "sxangxo"
    eotext u h "ĉiuĵaŭde"
    echo "Chiuj estas senchavaj" | eotext h u
    eotext h x --file letero.txt
"""

import argparse
import io
import logging
import sys
from typing import List, Optional

from esperanto_text import SYSTEMS, __version__, convert

logger = logging.getLogger(__name__)

SYSTEM_HELP = (
    "where FROM and TO are one of the following letters:\n"
    "    u   UTF-8 (with diacritics)\n"
    "    x   x-system\n"
    "    h   h-system\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eotext",
        description="Convert Esperanto text between UTF-8, x-system and h-system.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=SYSTEM_HELP + '\nExample:\n    eotext x u "sxangxo"',
    )
    parser.add_argument("source", choices=SYSTEMS, metavar="FROM", help="input system")
    parser.add_argument("target", choices=SYSTEMS, metavar="TO", help="output system")
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="text to convert (default: read --file or standard input)",
    )
    parser.add_argument("-f", "--file", default=None, help="read input from this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        logger.debug("Reading %s", args.file)
        with open(args.file, "r", encoding="utf-8", newline="") as f:
            return f.read()
    logger.debug("Reading standard input")
    stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
    try:
        return stdin.read()
    finally:
        # Leave sys.stdin.buffer open
        stdin.detach()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.text is not None and args.file is not None:
        parser.error("give either TEXT or --file, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        text = _read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"eotext: cannot read input: {e}", file=sys.stderr)
        return 1

    output = convert(text, args.source, args.target)
    sys.stdout.write(output if output.endswith("\n") else output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
