"""Command-line option scanning.

``parse_options`` never exits the process: it returns the parsed options or
raises an error from ``jsonpolish.errors`` for ``main`` to report.
"""

import math
import re
from typing import List, NamedTuple, Optional, Tuple

from jsonpolish import __version__
from jsonpolish.errors import ArityError, OptionError, UsageError


MIN_INDENT = 0
MAX_INDENT = 16
DEFAULT_INDENT = 2

INDENT_ERROR = f"--indent must be a number between {MIN_INDENT} and {MAX_INDENT}"
OUT_ERROR = "--out requires a file path"
# Plain decimal notation only: no underscores, hex, or non-ASCII digits
NUMBER_RE = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)

ARITY_ERROR = "too many arguments. Provide a JSON string OR a file path, or use stdin."


class Options(NamedTuple):
    """Formatting and diagnostic settings for a single run."""
    indent: int = DEFAULT_INDENT
    sort_keys: bool = False
    compact: bool = False
    out_file: Optional[str] = None
    verbose: bool = False
    debug: bool = False
    color: bool = True

    @property
    def width(self) -> int:
        """Indent width actually used for serialization."""
        return 0 if self.compact else self.indent


def parse_indent(value: Optional[str]) -> int:
    """
    Parse an --indent value. Fractional widths are truncated toward zero.
    """
    if value is None or not NUMBER_RE.fullmatch(value):
        raise OptionError(INDENT_ERROR)
    number = float(value)
    if not math.isfinite(number) or not MIN_INDENT <= number <= MAX_INDENT:
        raise OptionError(INDENT_ERROR)
    return int(number)


def parse_out(value: Optional[str]) -> str:
    if not value:
        raise OptionError(OUT_ERROR)
    return value


def parse_options(argv: List[str]) -> Tuple[Options, List[str]]:
    """Scan command-line tokens into Options and positional arguments.

    --indent and --out take the following token as their value even when it
    starts with a dash. A help flag anywhere in argv takes precedence over every
    other error; otherwise the first error found is raised.

    Args:
        argv: Argument list without the program name

    Returns:
        Tuple of (Options, list of positional arguments)

    Raises:
        UsageError: --help or --version was given
        OptionError: Malformed or unknown option
        ArityError: More than one positional argument
    """
    settings = {}
    positionals = []
    error = None
    help_requested = False
    version_requested = False

    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1
        try:
            if token in ('-h', '--help'):
                help_requested = True
            elif token == '--version':
                version_requested = True
            elif token == '--indent':
                value = argv[i] if i < len(argv) else None
                i += 1
                settings['indent'] = parse_indent(value)
            elif token.startswith('--indent='):
                settings['indent'] = parse_indent(token.partition('=')[2])
            elif token == '--sort-keys':
                settings['sort_keys'] = True
            elif token == '--compact':
                settings['compact'] = True
            elif token == '--out':
                value = argv[i] if i < len(argv) else None
                i += 1
                settings['out_file'] = parse_out(value)
            elif token.startswith('--out='):
                settings['out_file'] = parse_out(token.partition('=')[2])
            elif token in ('-v', '--verbose'):
                settings['verbose'] = True
            elif token == '--debug':
                settings['debug'] = True
            elif token == '--no-color':
                settings['color'] = False
            elif token.startswith('-'):
                raise OptionError(f"unknown option {token}. Use --help.")
            else:
                positionals.append(token)
        except OptionError as e:
            if error is None:
                error = e

    if help_requested:
        raise UsageError(exit_code=0)
    if version_requested:
        raise UsageError(exit_code=0, text=f"json-polish {__version__}\n")
    if error is not None:
        raise error
    if len(positionals) > 1:
        raise ArityError(ARITY_ERROR)

    return Options(**settings), positionals
