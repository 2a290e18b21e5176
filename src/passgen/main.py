from __future__ import annotations

import argparse
import logging
import sys

from typing import Optional, Sequence

from . import __version__
from .errors import InvalidLengthError, PassgenError
from .password_generator import DEFAULT_LENGTH, PasswordGenerator
from .sampler import MAX_LENGTH, validate_length


def parse_length(value: str) -> int:
    """Argparse type for --length: an integer within the allowed range."""
    try:
        length = int(value)
    except ValueError:
        msg = f'invalid integer: {value!r}'
        raise argparse.ArgumentTypeError(msg) from None

    try:
        return validate_length(length)
    except InvalidLengthError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='passgen',
        description=(
            'Generate a random string of fixed length made up of characters '
            'acceptable for use in passwords.'
        ),
    )
    parser.add_argument(
        '-l',
        '--length',
        type=parse_length,
        default=DEFAULT_LENGTH,
        help=f'number of characters, max {MAX_LENGTH} (default: {DEFAULT_LENGTH})',
    )
    parser.add_argument(
        '-n',
        '--no-symbols',
        action='store_true',
        help='leave out symbols such as !@#$%%^&*',
    )
    parser.add_argument(
        '-e',
        '--extended-symbols',
        action='store_true',
        help='include quotes, backtick, slash and backslash',
    )
    parser.add_argument(
        '-s',
        '--allow-space',
        action='store_true',
        help='include the space character',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='log generation details to stderr (never the password)',
    )
    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr at WARNING, or DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        generator = PasswordGenerator(
            length=args.length,
            include_symbols=not args.no_symbols,
            include_extended=args.extended_symbols,
            allow_space=args.allow_space,
        )
        password = generator.generate_password()
    except PassgenError as exc:
        print(f'[!] {exc}', file=sys.stderr)
        sys.exit(1)

    print(password)


if __name__ == '__main__':
    main()
