"""
Egg Programming Language - command line entry point
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from egg.config import get_log_level, get_pprint_json
from egg.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json, pprint_expr, show
from egg.errors import EggError
from egg.interpreter import Interpreter
from egg.reader.parser import parse
from egg.repl import Repl

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog='egg',
        description='Egg Programming Language - a tiny expression language',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s program.egg            # Run an Egg program
  %(prog)s                        # Interactive mode
  %(prog)s -i                     # Interactive mode
  %(prog)s --parse program.egg    # Parse and show the expression tree
  %(prog)s -e '+(1, 2)'           # Evaluate inline code and print the result
        """
    )
    parser.add_argument('script', nargs='?', help='Egg program file to execute')
    parser.add_argument(
        '-i', '--repl', '--interactive',
        dest='interactive',
        action='store_true',
        help='Start interactive mode',
    )
    parser.add_argument('-e', '--eval', dest='code', help='Evaluate CODE and print the result')
    parser.add_argument(
        '--parse',
        action='store_true',
        help='Parse the program and show its expression tree without running it',
    )
    parser.add_argument('--no-prelude', action='store_true', help='Skip EGG_PRELUDE_PATH files')
    parser.add_argument('--version', action='version', version=f'Egg {__version__}')
    return parser


def _read_source(args: argparse.Namespace) -> str:
    if args.code is not None:
        return args.code
    path = Path(args.script)
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {args.script}") from None


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    if args.interactive or (args.script is None and args.code is None):
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        Repl(interp, color=sys.stdout.isatty()).run()
        return 0

    try:
        if args.parse:
            raw = get_pprint_json()
            options = load_options_from_json(raw) if raw else dict(DEFAULT_OPTIONS)
            print(pprint_expr(parse(_read_source(args)), options=options))
            return 0
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.code is not None:
            print(show(interp.run(args.code)))
        else:
            interp.run_file(args.script)
        return 0
    except (EggError, FileNotFoundError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    except RecursionError:
        logger.debug("Recursion limit hit", exc_info=True)
        print("Error: Maximum recursion depth exceeded", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
