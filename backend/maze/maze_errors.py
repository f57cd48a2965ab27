# Lookups into the maze fail fast. Callers that feed continuous positions
# (the confiner, the game session) are expected to stay inside the grid.


class MazeError(Exception):
    """
    Base class for all maze-related errors.
    """
    pass


class OutOfRangeError(MazeError, IndexError):
    """
    Raised when a cell or wall coordinate is outside the grid.
    """
    pass


class InvalidDirectionError(MazeError, ValueError):
    """
    Raised when an index mapping receives something that is not a Direction.
    """
    pass
