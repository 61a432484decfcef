from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys

USAGE = """mockf [package] <interface>
mockf generates type func to implement interface.
Examples:
mockf io Reader
mockf iface
"""


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="mockf", usage=USAGE, add_help=True)
    parser.add_argument("args", nargs="*", help="[package] <interface>")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps to stderr.")
    parser.add_argument(
        "--format",
        choices=["auto", "always", "never"],
        default=None,
        help="Pretty-print with gofmt (default: MOCKF_FORMAT or auto).",
    )
    parser.add_argument("--version", action="store_true", help="Print mockf version.")
    args = parser.parse_args(argv)

    if args.version:
        try:
            print(importlib.metadata.version("mockf"))
        except importlib.metadata.PackageNotFoundError:
            print("0.0.0")
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    if len(args.args) not in (1, 2):
        sys.stderr.write(USAGE)
        raise SystemExit(2)

    from . import generate
    from .errors import MockfError

    if len(args.args) == 1:
        package, name = None, args.args[0]
    else:
        package, name = args.args

    try:
        out = generate(name, package, mode=args.format)
    except MockfError as e:
        print(e, file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(out)


if __name__ == "__main__":
    main()
