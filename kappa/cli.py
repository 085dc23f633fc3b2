"""
kappa.cli - kappa Command Line Interface

Reads kappa source, runs it through the lexer, parser and syntax analyzer,
and prints one line per top-level form: the analyzed expression, or
``error: <message>`` when the form is malformed.

- kappa                     Read stdin line by line
- kappa file.scm ...        Read files line by line
- kappa --whole file.scm    Read each file as one document
- kappa -c "(if 1 2 3)"     Read code given on the command line
"""

import argparse
import logging
import sys
from typing import IO, Optional

from kappa import config
from kappa.debug_utils.pprint import to_source
from kappa.errors import KappaError, NestingTooDeep
from kappa.pipeline import Frontend
from kappa.reader.source import iter_chars, iter_lines

logger = logging.getLogger(__name__)


def print_results(frontend: Frontend, results: list, use_repr: bool) -> None:
    for result in results:
        if isinstance(result, KappaError):
            print(f"error: {result}")
            continue
        try:
            text = repr(result) if use_repr else to_source(result)
        except RecursionError:
            # Quoted data nested past the recursion limit
            frontend.errors += 1
            text = f"error: {NestingTooDeep()}"
        print(text)


def read_stream(frontend: Frontend, stream: IO[str], whole: bool, use_repr: bool) -> None:
    if whole:
        print_results(frontend, frontend.feed(iter_chars(stream)), use_repr)
        return
    # Each line is a separate character source
    for line in iter_lines(stream):
        print_results(frontend, frontend.feed(line), use_repr)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kappa",
        description="kappa - read Scheme source into a typed expression tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  kappa                         Read forms from stdin, one line at a time
  kappa prog.scm                Read forms from a file
  kappa --whole prog.scm        Let forms span lines
  kappa -c "(quote (a b))"      Read code directly
        """,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Source files (default: stdin)")
    parser.add_argument(
        "-c",
        "--command",
        metavar="CODE",
        help="Read CODE instead of files",
    )
    parser.add_argument(
        "--lexer",
        choices=config.LEXER_KINDS,
        help="Lexer variant (default: $KAPPA_LEXER or char)",
    )
    parser.add_argument(
        "--whole",
        action="store_true",
        help="Read each input as one document instead of line by line",
    )
    parser.add_argument(
        "--repr",
        action="store_true",
        dest="use_repr",
        help="Print the Python repr of each expression instead of source text",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level (default: $KAPPA_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    args = create_parser().parse_args(argv)

    try:
        level = logging.getLevelName(args.log_level.upper()) if args.log_level else config.get_log_level()
        if not isinstance(level, int):
            raise ValueError(f"not a logging level: {args.log_level!r}")
        kind = args.lexer or config.get_lexer_kind()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    frontend = Frontend(kind)

    if args.command is not None:
        print_results(frontend, frontend.feed(args.command), args.use_repr)
    elif args.files:
        for path in args.files:
            try:
                with open(path, encoding="utf-8") as f:
                    read_stream(frontend, f, args.whole, args.use_repr)
            except OSError as e:
                print(f"Error reading {path}: {e}", file=sys.stderr)
                return 1
    else:
        read_stream(frontend, sys.stdin, args.whole, args.use_repr)

    logger.info("read %d forms, %d errors", frontend.forms, frontend.errors)
    return 1 if frontend.errors else 0


if __name__ == "__main__":
    sys.exit(main())
