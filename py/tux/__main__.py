"""Entry point for running tux as a module (python -m tux)."""

import argparse
import logging
import os
import sys
from pathlib import Path

from . import diff, text
from .data import testdata_to_result
from .types import TestDataError

CALLBACKS = {
    "empty": lambda lines: [],
    "reverse": lambda lines: list(reversed(lines)),
    "id": lambda lines: lines,
}


def cmd_diff(args) -> int:
    """Print the diff between two files, exit status 1 if they differ."""
    source = text.lines(Path(args.old).read_text(encoding="utf-8"))
    result = text.lines(Path(args.new).read_text(encoding="utf-8"))
    changes = diff.lines(source, result)
    if not changes:
        return 0
    print(changes)
    return 1


def cmd_testdata(args) -> int:
    """Run testdata cases with one of the built-in callbacks."""
    run = testdata_to_result(args.directory, CALLBACKS[args.callback])
    try:
        run.check()
    except TestDataError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


def cmd_info(args) -> int:
    # used as a self-test that the executable can run
    print("tux testdata helper")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Test utilities: line diffs and testdata runner')
    parser.add_argument('--log-level', type=str, help='Logging level (default: TUX_LOG_LEVEL or WARNING)')
    sub = parser.add_subparsers(dest='command', required=True)

    diff_parser = sub.add_parser('diff', help='Show line differences between two files')
    diff_parser.add_argument('old', help='Original file')
    diff_parser.add_argument('new', help='New file')
    diff_parser.set_defaults(func=cmd_diff)

    data_parser = sub.add_parser('testdata', help='Run .input/.valid test cases in a directory')
    data_parser.add_argument('callback', choices=sorted(CALLBACKS), help='Function applied to each input')
    data_parser.add_argument('directory', help='Directory with the test cases')
    data_parser.set_defaults(func=cmd_testdata)

    info_parser = sub.add_parser('info', help='Print a fixed line and exit')
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    # Get configuration from args, env, or defaults
    log_level = args.log_level or os.environ.get('TUX_LOG_LEVEL', 'WARNING')
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
