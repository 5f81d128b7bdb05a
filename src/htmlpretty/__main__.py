"""Pretty-print an HTML5 document from stdin to stdout."""

from __future__ import annotations

import argparse
import sys

from .errors import PrintError, StrictModeError
from .serialize import DEFAULT_INDENT, DEFAULT_WRAP, to_html
from .treebuilder import parse


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="htmlpretty",
        description="Pretty-print an HTML5 document from stdin.",
    )
    parser.add_argument(
        "-indent",
        "--indent",
        default=DEFAULT_INDENT,
        help="String to use for each level of indenting (default: two spaces)",
    )
    parser.add_argument(
        "-wrap",
        "--wrap",
        type=int,
        default=DEFAULT_WRAP,
        help=f"Line wrap length in bytes, 0 to disable (default: {DEFAULT_WRAP})",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Character encoding of the input, overriding detection",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first HTML parse error",
    )
    parser.add_argument(
        "--no-scripting",
        dest="scripting",
        action="store_false",
        help="Parse <noscript> contents as markup instead of text",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace layout decisions to stderr",
    )
    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None, stderr=None):
    """Run the filter. Streams are binary stdin/stdout and text stderr."""
    args = parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    try:
        root = parse(stdin.read(), strict=args.strict, scripting=args.scripting, encoding=args.encoding)
    except (StrictModeError, OSError) as exc:
        print(f"Failed parsing HTML: {exc}", file=stderr)
        return 1

    try:
        html = to_html(root, args.indent, args.wrap, debug=args.debug)
        stdout.write(html.encode("utf-8", "surrogatepass"))
        stdout.flush()
    except (PrintError, OSError) as exc:
        print(f"Failed printing HTML: {exc}", file=stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
