"""Solutions to classic data-structure problems, as functions, classes and command-line tools."""

__version__ = "0.1.0"