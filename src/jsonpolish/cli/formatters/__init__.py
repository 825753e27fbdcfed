"""Output formatting and emission for the CLI."""

import sys

from .json import format_json, sort_object_keys


def format_output(data, options):
    """Format decoded data according to parsed options.

    Args:
        data: Decoded JSON value
        options: Parsed Options

    Returns:
        Formatted string ending in a newline
    """
    return format_json(data, indent=options.width, sort_keys=options.sort_keys)


def write_output(text, out_file=None, stream=None):
    """Write formatted text to a file or standard output as UTF-8.

    Args:
        text: Formatted text
        out_file: Path to create or truncate (optional)
        stream: Output stream when out_file is not set (default: sys.stdout)

    Raises:
        OSError: If out_file cannot be written
    """
    if out_file:
        with open(out_file, 'w', encoding='utf-8') as f:
            f.write(text)
        return

    if stream is None:
        stream = sys.stdout

    buffer = getattr(stream, 'buffer', None)
    if buffer is not None:
        stream.flush()
        buffer.write(text.encode('utf-8'))
        buffer.flush()
    else:
        stream.write(text)
        stream.flush()


__all__ = ['format_output', 'write_output', 'format_json', 'sort_object_keys']
