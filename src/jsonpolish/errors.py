"""Exceptions raised by json-polish.

Every error is terminal: it is raised where the problem is found and reported
once by the driver in ``jsonpolish.cli.main``.
"""


class JsonPolishError(Exception):
    """
    Base class for all json-polish errors.
    """

    pass


class UsageError(JsonPolishError):
    """
    Raised when usage text should be shown instead of output.

    ``exit_code`` is 0 for an explicit --help/--version and 1 for empty input.
    ``text`` replaces the usage text when set (used by --version).
    """

    def __init__(self, exit_code=1, text=None):
        super().__init__(text or 'usage requested')
        self.exit_code = exit_code
        self.text = text


class OptionError(JsonPolishError):
    """
    Malformed or unknown flag, missing flag value or out-of-range indent.
    """

    pass


class ArityError(OptionError):
    """
    More than one positional argument was given.
    """

    pass


class ParseError(JsonPolishError):
    """
    Input is not syntactically valid JSON.
    """

    pass


class FormatError(JsonPolishError):
    """
    A decoded value cannot be serialized back to JSON.
    """

    pass


class CircularStructureError(FormatError):
    """
    Key-sorting found a container that contains one of its ancestors.
    """

    def __init__(self, message='Circular structure in JSON'):
        super().__init__(message)


class NestingError(JsonPolishError):
    """
    A document is nested more deeply than the json module can decode or encode.
    """

    def __init__(self, message='document is nested too deeply'):
        super().__init__(message)
