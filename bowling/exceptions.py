"""Encapsulates all exceptions raised by bowling game."""


class BowlingGameError(Exception):
    """Base class for all bowling game errors."""

    @property
    def error_type(self):
        """Machine readable kind of the error."""
        return self.__class__.__name__


class InvalidThrowError(BowlingGameError):
    """A throw is not a whole number of pins between 0 and 10, or the throws
       of a frame break the rules of that frame:
       1. the two throws of an open frame must knock down fewer than 10 pins.
       2. the first throw of a spare must knock down fewer than 10 pins.
       3. the 10th frame has a third throw iff the first two reach 10 pins.
    """


class InvalidNotationError(InvalidThrowError):
    def __init__(self, notation, frame):
        super(InvalidNotationError, self).__init__(
            'Frame notation: \'{notation}\' is invalid for frame: '
            '{frame}.'.format(notation=notation, frame=frame))


class InvalidBonusError(BowlingGameError):
    """A bonus throw is not a whole number of pins between 0 and 10."""


class FrameNotScoredError(BowlingGameError):
    def __init__(self, frame):
        super(FrameNotScoredError, self).__init__(
            'Score is not available for frame: {}.'.format(frame))


class ScoreUnavailableError(BowlingGameError):
    def __init__(self, kind, required, supplied):
        super(ScoreUnavailableError, self).__init__(
            ('{kind} frame needs {required} bonus throws to be scored; '
             '{supplied} supplied.'.format(kind=kind, required=required,
                                           supplied=supplied)))


class GameCompleteError(BowlingGameError):
    def __init__(self, frames_played):
        super(GameCompleteError, self).__init__(
            'Game has already been played: no frame can follow frame: '
            '{}.'.format(frames_played))
