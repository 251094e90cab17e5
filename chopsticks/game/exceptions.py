"""
Exceptions raised when a Chopsticks move is rejected.

Every rejection is a ``ValueError`` so callers that only care about "the move
was illegal" can catch that, while UIs and tests can tell the reasons apart.
"""


class InvalidMoveError(ValueError):
    """Raised when a move is malformed or not legal in the given state."""

    pass


class InvalidPlayerError(InvalidMoveError):
    """Raised when a player identifier is not one of the two seats."""

    pass


class InvalidHandError(InvalidMoveError):
    """Raised when a hand identifier is neither left nor right."""

    pass


class DeadHandError(InvalidMoveError):
    """Raised when attacking with, or targeting, an eliminated hand."""

    pass


class SelfTargetError(InvalidMoveError):
    """Raised when a player attacks a hand with that same hand."""

    pass


class SplitNotAllowedError(InvalidMoveError):
    """Raised when a split is attempted while the player cannot split."""

    pass


class InvalidSplitError(InvalidMoveError):
    """Raised when split values are not integers, out of range, or do not conserve fingers."""

    pass


class GameOverError(RuntimeError):
    """Raised by a game session when a move is submitted after the game ended."""

    pass
