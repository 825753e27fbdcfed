"""json-polish: pretty-print JSON from the command line."""

__version__ = '0.1.0'
