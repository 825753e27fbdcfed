"""json-polish CLI main entry point."""

import argparse
import sys
from jsonpolish.cli import __version__
from jsonpolish.cli.formatters import format_output, write_output
from jsonpolish.cli.options import DEFAULT_INDENT, MAX_INDENT, MIN_INDENT, parse_options
from jsonpolish.cli.source import FileContent, StdinText, decode, is_blank, resolve_input
from jsonpolish.cli.utils import (
    handle_error,
    print_error,
    print_verbose,
    EXIT_ERROR,
    EXIT_SUCCESS,
)
from jsonpolish.errors import JsonPolishError, ParseError, UsageError


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Fixed-width help so usage text does not depend on the terminal."""

    def __init__(self, prog):
        super().__init__(prog, max_help_position=24, width=80)


def create_parser():
    """Create the argument parser used to render help text.

    Tokens are scanned by parse_options; this parser only describes them.

    Returns:
        ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='json-polish',
        usage='%(prog)s [--indent N] [--sort-keys] [--compact] [--out FILE] [JSON|FILE]',
        description='json-polish: pretty-print JSON',
        formatter_class=HelpFormatter,
        epilog="""
Examples:
  json-polish '{"a":1,"b":[2,3]}'
  cat input.json | json-polish --sort-keys
  json-polish input.json --indent 4 --out pretty.json

Notes:
  - If JSON|FILE is omitted, reads from stdin.
  - If the argument points to an existing file, reads JSON from that file.
"""
    )

    parser.add_argument('source', nargs='?', metavar='JSON|FILE',
                        help='JSON text or path to a JSON file')

    parser.add_argument('--indent', metavar='N', type=int, default=DEFAULT_INDENT,
                        help=f'Indent width, {MIN_INDENT}-{MAX_INDENT} (default: {DEFAULT_INDENT})')
    parser.add_argument('--sort-keys', action='store_true',
                        help='Sort object keys recursively')
    parser.add_argument('--compact', action='store_true',
                        help='No added whitespace (overrides --indent)')
    parser.add_argument('--out', metavar='FILE',
                        help='Write output to FILE instead of stdout')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose output')
    parser.add_argument('--debug', action='store_true',
                        help='Show stack traces for write failures')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output')
    parser.add_argument('--version', action='version', version=f'json-polish {__version__}')

    return parser


def usage_text():
    return create_parser().format_help()


def describe_source(source):
    if isinstance(source, FileContent):
        return f"Reading JSON from file {source.path}"
    elif isinstance(source, StdinText):
        return "Reading JSON from standard input"
    else:
        return "Treating argument as JSON text"


def polish(options, positionals, stdin=None):
    """Resolve, decode and format the input.

    Args:
        options: Parsed Options
        positionals: Zero or one positional arguments
        stdin: Stream to read when there is no positional (default: sys.stdin)

    Returns:
        Formatted text ending in a newline

    Raises:
        UsageError: Input is empty or whitespace only
        ParseError: Input is not valid JSON
        FormatError: Output cannot be produced
    """
    source = resolve_input(positionals, stdin)
    print_verbose(describe_source(source), options)
    print_verbose(f"Read {len(source.text)} characters", options)

    if is_blank(source.text):
        raise UsageError(exit_code=EXIT_ERROR)

    data = decode(source.text)

    if options.sort_keys:
        print_verbose("Sorting object keys", options)
    return format_output(data, options)


def main(argv=None):
    """Main CLI entry point.

    Args:
        argv: Argument list without the program name (default: sys.argv[1:])

    Returns:
        Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    options = None
    try:
        options, positionals = parse_options(argv)
        output = polish(options, positionals)
    except UsageError as e:
        sys.stdout.write(e.text or usage_text())
        return e.exit_code
    except ParseError as e:
        print_error(str(e), options, label='Invalid JSON')
        return EXIT_ERROR
    except JsonPolishError as e:
        print_error(str(e), options)
        return EXIT_ERROR

    target = options.out_file or 'standard output'
    try:
        write_output(output, options.out_file)
    except OSError as e:
        handle_error(f"cannot write {target}: {e.strerror or e}", e, options)
        return EXIT_ERROR

    print_verbose(f"Wrote {len(output)} characters to {target}", options)
    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())
