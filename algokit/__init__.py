"""Classic algorithms and data structures: sorts, searches, graphs, strings, trees and puzzles."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "bst",
    "distribution",
    "grids",
    "line_coding",
    "paths",
    "problems",
    "searching",
    "sorting",
    "strings",
    "structures",
    "traversal",
]