"""CLI utilities for json-polish."""

import sys


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    RED = '\033[91m'
    CYAN = '\033[96m'
    GRAY = '\033[90m'


def is_tty(stream):
    """Check if a stream is attached to a terminal."""
    isatty = getattr(stream, 'isatty', None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


def should_use_color(options, stream):
    """Determine if color output should be used.

    Args:
        options: Parsed Options (may be None before parsing finished)
        stream: Stream the message is written to

    Returns:
        True if colors should be used, False otherwise
    """
    if options is not None and not options.color:
        return False

    return is_tty(stream)


def colorize(text, color, options=None, stream=None):
    """Colorize text if color output is enabled.

    Args:
        text: Text to colorize
        color: Color code from Colors class
        options: Parsed Options (optional)
        stream: Target stream (default: stderr)

    Returns:
        Colorized text if colors enabled, plain text otherwise
    """
    if stream is None:
        stream = sys.stderr

    if not should_use_color(options, stream):
        return text

    return f"{color}{text}{Colors.RESET}"


def print_error(message, options=None, label='Error'):
    """Print a one-line error message to stderr.

    Args:
        message: Error message
        options: Parsed Options (optional)
        label: Prefix before the message ('Error' or 'Invalid JSON')
    """
    colored_msg = colorize(f"{label}: {message}", Colors.RED, options)
    print(colored_msg, file=sys.stderr)


def print_verbose(message, options):
    """Print verbose message if verbose mode is enabled.

    Args:
        message: Message to print
        options: Parsed Options with verbose attribute
    """
    if options is not None and options.verbose:
        colored_msg = colorize(f"[VERBOSE] {message}", Colors.GRAY, options)
        print(colored_msg, file=sys.stderr)


def print_debug(message, options):
    """Print debug message if debug mode is enabled.

    Args:
        message: Message to print
        options: Parsed Options with debug attribute
    """
    if options is not None and options.debug:
        colored_msg = colorize(f"[DEBUG] {message}", Colors.CYAN, options)
        print(colored_msg, file=sys.stderr)


def handle_error(message, exception, options):
    """Handle and display an error to the user.

    Args:
        message: One-line message for stderr
        exception: Exception that occurred
        options: Parsed Options (may be None)
    """
    print_error(message, options)

    print_verbose(f"Exception type: {type(exception).__name__}", options)

    # Print stack trace if debug enabled
    if options is not None and options.debug:
        import traceback
        print_debug("Stack trace:", options)
        traceback.print_exception(type(exception), exception, exception.__traceback__,
                                  file=sys.stderr)
