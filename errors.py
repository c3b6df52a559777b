# errors.py
"""Exceptions raised by the maze engine."""


class MazeError(Exception):
    """Base class for all maze engine errors."""


class InvalidSizeError(MazeError, ValueError):
    """Raised when a grid dimension or set size is not positive."""


class OutOfRangeError(MazeError, IndexError):
    """Raised when a cell index falls outside [0, n) of a DisjointSet."""


class UnknownVertexError(MazeError, ValueError):
    """Raised when an edge references a vertex that was never added."""


class NoPathFoundError(MazeError, LookupError):
    """Raised when trace-back reaches a cell missing from the parent map."""


class MazeGenerationError(MazeError, RuntimeError):
    """Raised when generation exceeds its maximum number of attempts."""
