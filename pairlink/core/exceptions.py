"""Custom exception hierarchy for the puzzle engine."""


class PuzzleError(Exception):
    """Base exception for engine failures."""


class InvalidDimensionsError(PuzzleError):
    """Raised when a board is requested with non-positive rows or columns."""


class OutOfBoundsError(PuzzleError):
    """Raised when a position lies outside the padded board."""


class CellStateError(PuzzleError):
    """Raised when an operation targets a cell in the wrong state."""


class PatternError(PuzzleError):
    """Raised when a shape pattern name is not registered."""


class GenerationError(PuzzleError):
    """Raised when the layout generator is misconfigured."""


class ValidationError(PuzzleError):
    """Raised when the board integrity checks fail."""


class PathValidationError(ValidationError):
    """Raised when a connecting path breaks the matching rules."""


class UnsolvableBoardError(PuzzleError):
    """Raised when shuffling cannot restore a playable board."""
