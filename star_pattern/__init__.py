"""Star pattern printer.

Reads a row count from standard input and prints a left-aligned triangle of
``"* "`` tokens, one more token per row.
"""

__version__ = "0.1.0"
