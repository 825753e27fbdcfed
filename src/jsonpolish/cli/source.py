"""Input resolution and decoding."""

import json
import os
import sys
from typing import List, NamedTuple, Optional, Union

from jsonpolish.cli.utils import is_tty
from jsonpolish.errors import NestingError, ParseError


class FileContent(NamedTuple):
    """Text read from a file named on the command line."""
    path: str
    text: str


class LiteralText(NamedTuple):
    """The positional argument itself, taken as JSON text."""
    text: str


class StdinText(NamedTuple):
    """Text read from standard input (empty for an interactive terminal)."""
    text: str


Source = Union[FileContent, LiteralText, StdinText]


def read_file(path: str) -> Optional[str]:
    """
    Return the contents of a readable regular file, or None for anything else.
    """
    if not os.path.isfile(path):
        return None
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError:
        return None


def read_stdin(stream=None) -> str:
    """Read all of standard input as UTF-8 text.

    An interactive terminal (nothing piped in) or a missing stdin counts as
    empty input rather than blocking for keyboard input.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None or is_tty(stream):
        return ''

    buffer = getattr(stream, 'buffer', None)
    if buffer is not None:
        return buffer.read().decode('utf-8', errors='replace')
    return stream.read()


def resolve_input(positionals: List[str], stdin=None) -> Source:
    """Decide where the raw JSON text comes from.

    Args:
        positionals: Zero or one positional arguments
        stdin: Stream to read when there is no positional (default: sys.stdin)

    Returns:
        FileContent if the positional names a readable regular file,
        LiteralText for any other positional, StdinText otherwise
    """
    if not positionals:
        return StdinText(read_stdin(stdin))

    arg = positionals[0]
    text = read_file(arg)
    if text is not None:
        return FileContent(arg, text)
    return LiteralText(arg)


def is_blank(text: str) -> bool:
    return not text or text.isspace()


def _reject_constant(name):
    raise ParseError(f"{name} is not a valid JSON value")


def decode(text: str):
    """Parse JSON text strictly, raising ParseError on any syntax problem."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise NestingError() from e
