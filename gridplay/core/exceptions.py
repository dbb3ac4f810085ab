"""Custom exception hierarchy for the grid engines."""


class GridPlayError(Exception):
    """Base exception for engine failures."""


class OutOfBoundsError(GridPlayError, IndexError):
    """Raised when a coordinate falls outside the grid extents."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"Cell ({row},{col}) outside {rows}x{cols} grid")
        self.row = row
        self.col = col


class InvalidInputError(GridPlayError, ValueError):
    """Raised when an operation is handed input it cannot work with."""


class DictionaryLoadError(GridPlayError):
    """Raised when the word list cannot be read."""


class PatternLoadError(InvalidInputError):
    """Raised when a Life pattern file is malformed."""
