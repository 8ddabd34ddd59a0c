"""
console.py: Command line front end for tailog.

Usage:
    tailog -n <number> <file>

Prints the last <number> lines of <file>. Any other arguments print the
usage text.
"""

import argparse
import logging
import re
import sys

from .common import DEFAULT_CONFIG, load_config, setup_logging, print_error
from .tail import tailog

# Signed decimal digits only, within a 32-bit int
COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")
COUNT_MIN = -2 ** 31
COUNT_MAX = 2 ** 31 - 1


def build_parser() -> argparse.ArgumentParser:
    """
    Build the parser that formats the help text.

    Arguments are not parsed with it: main() accepts only the exact
    three-word form and prints this help for anything else.
    """
    parser = argparse.ArgumentParser(
        prog="tailog",
        description="Output the last part of a file.",
        usage="tailog [-n number] file",
        epilog="Example: tailog -n 10 somefile.txt",
        add_help=False,
    )
    parser.add_argument("-n", dest="number", metavar="number",
                        help="output the last 'number' of lines from file")
    parser.add_argument("file", help="The file to read.")
    return parser


def print_usage(parser=None):
    """Prints the command help text to stdout."""
    if parser is None:
        parser = build_parser()
    print()
    parser.print_help(sys.stdout)
    print()


def parse_count(text: str) -> int:
    """
    Parse a line count the way Integer.parseInt would.

    Raises:
        ValueError: On anything but optionally signed ASCII digits, or a
            value outside the 32-bit range.
    """
    if not COUNT_PATTERN.fullmatch(text):
        raise ValueError(f"For input string: \"{text}\"")
    value = int(text)
    if not COUNT_MIN <= value <= COUNT_MAX:
        raise ValueError(f"For input string: \"{text}\" (out of range)")
    return value


def configure_logging():
    """Set up logging from the environment, falling back to the defaults."""
    try:
        setup_logging(load_config())
    except (ValueError, OSError) as e:
        print_error(f"Config Error: {e}")
        setup_logging(dict(DEFAULT_CONFIG))


def write_output(text: str, stream=None):
    """Write text, replacing characters the stream's encoding cannot hold."""
    if stream is None:
        stream = sys.stdout
    try:
        stream.write(text)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "utf-8"
        stream.write(text.encode(encoding, errors="replace").decode(encoding))
    stream.flush()


def main(args_list=None) -> int:
    """
    Main entry point for the tailog command.

    Args:
        args_list: Command line arguments (defaults to sys.argv[1:])

    Returns:
        0 on success or when usage was printed, 1 on a number or I/O error.
    """
    if args_list is None:
        args_list = sys.argv[1:]

    configure_logging()

    # Only the exact form "-n <number> <file>" is accepted
    if len(args_list) != 3 or args_list[0] != "-n":
        logging.debug(f"Unrecognized arguments: {args_list}")
        print_usage()
        return 0

    # Values are taken positionally; a count such as "-x" or a file named
    # "-f" must not be read as an option.
    _, number, filename = args_list

    try:
        number_of_lines = parse_count(number)
    except ValueError as e:
        print_error(f"Number Error: {e}")
        return 1

    logging.debug(f"Reading last {number_of_lines} lines of '{filename}'")
    try:
        result = tailog(filename, number_of_lines)
    except OSError as e:
        logging.debug(f"tailog failed on '{filename}'", exc_info=True)
        print_error(f"I/O Error: {e}")
        return 1

    write_output(result)
    logging.debug(f"Wrote {len(result)} characters")
    return 0


if __name__ == "__main__":
    sys.exit(main())
