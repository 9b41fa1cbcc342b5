"""
High card game error definitions.

Expected outcomes such as drawing from an empty deck or removing a card that
is not there are reported through return values, never through these classes.
"""


class HighCardError(Exception):
    """Base class for every error raised by the high card package."""
    pass


class InvalidArgumentError(HighCardError, ValueError):
    """An argument is present but not acceptable (blank, negative, ...)."""
    pass


class MissingArgumentError(HighCardError, TypeError):
    """A required argument is absent (None)."""
    pass


class EmptyHandError(HighCardError):
    """The round engine was asked to play from a hand with no cards."""
    pass


class GameStateError(HighCardError):
    """A game operation was requested in a state that does not allow it."""
    pass
