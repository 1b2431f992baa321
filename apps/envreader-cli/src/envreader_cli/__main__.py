"""Entry point for envreader-cli."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from envreader.config import EnvironmentReader
from envreader.logging import setup_logging

from .config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envreader", description="Read typed values from the environment")
    sub = parser.add_subparsers(dest="command", help="Command")

    get_cmd = sub.add_parser("get", help="Print the value of a variable")
    get_cmd.add_argument("name", help="Variable name")
    get_cmd.add_argument("--type", dest="kind", choices=["str", "int", "bool", "list"], default="str")
    get_cmd.add_argument("--default", help="Value used when the variable is unset (empty means required)")
    get_cmd.add_argument("--sep", default=",", help="List separator")
    get_cmd.add_argument("--json", action="store_true", help="Print the result as JSON")

    check_cmd = sub.add_parser("check", help="Fail unless every variable is set")
    check_cmd.add_argument("names", nargs="+", metavar="NAME")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("envreader-cli", settings.log_level, json_output=settings.log_format == "json")

    from .commands import InvalidDefaultError, convert_default, run_check, run_get

    reader = EnvironmentReader()

    if args.command == "get":
        try:
            default = convert_default(args.kind, args.default, args.sep)
        except InvalidDefaultError as e:
            parser.error(str(e))
        return run_get(reader, args.name, args.kind, default, args.sep, args.json)
    elif args.command == "check":
        return run_check(reader, args.names)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
