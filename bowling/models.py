import logging

from bowling import exceptions
from bowling import fields as bowling_fields

FRAMES_PER_GAME = 10

MAX_PINS = bowling_fields.MAX_PINS


class Frame:
    """A single frame of a bowling game.

    A frame is scored once it has received the bonus throws it is owed by the
    frames bowled after it. The score is computed at most once and kept from
    then on.

    Attributes:
        kind: name of the frame variant
        bonus_count: number of throws borrowed from the following frames
        base_throws: pins knocked down by the frame's own throws
        bonus_throws: pins borrowed from the following frames
    """
    kind = None
    bonus_count = 0

    def __init__(self, *throws):
        self.base_throws = self._validate_throws(
            [bowling_fields.validate_pins(throw) for throw in throws])
        self.bonus_throws = []
        self._score = None

    def _validate_throws(self, throws):
        """Returns the base throws of the frame.

        Raises:
            InvalidThrowError: if the throws break the rules of the frame
        """
        raise NotImplementedError

    @property
    def scored(self):
        return self._score is not None

    def is_scorable(self):
        """Returns True if the frame has all the bonus throws it needs."""
        return len(self.bonus_throws) >= self.bonus_count

    def assign_bonus(self, *throws):
        """Attaches the bonus throws owed to the frame.

        Only the first `bonus_count` throws are kept. Once the frame has been
        scored the bonus can no longer change, and the call is ignored.
        """
        if self.scored:
            logging.debug(
                'Frame {} has already been scored; bonus {} ignored.'.format(
                    self, list(throws)))
            return
        self.bonus_throws = [
            bowling_fields.validate_pins(
                throw, exceptions.InvalidBonusError, 'bonus')
            for throw in throws[:self.bonus_count]]

    def score(self):
        """Returns the points earned by this frame alone."""
        if self._score is None:
            if not self.is_scorable():
                raise exceptions.ScoreUnavailableError(
                    self.kind, self.bonus_count, len(self.bonus_throws))
            self._score = sum(self.base_throws) + sum(self.bonus_throws)
        return self._score

    def __str__(self):
        return '{}{}'.format(self.kind, self.base_throws)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class OpenFrame(Frame):
    """Two throws that leave at least one pin standing."""
    kind = 'open'
    bonus_count = 0

    def _validate_throws(self, throws):
        if len(throws) != 2:
            raise exceptions.InvalidThrowError(
                'an open frame has 2 throws, got: {}'.format(len(throws)))
        if sum(throws) >= MAX_PINS:
            raise exceptions.InvalidThrowError(
                ('2 throws of an open frame must knock down less than {} '
                 'pins'.format(MAX_PINS)))
        return throws


class SpareFrame(Frame):
    """All pins knocked down by the second throw."""
    kind = 'spare'
    bonus_count = 1

    def _validate_throws(self, throws):
        if len(throws) != 1:
            raise exceptions.InvalidThrowError(
                'a spare is given by its first throw, got: {} throws'.format(
                    len(throws)))
        first = throws[0]
        if first >= MAX_PINS:
            raise exceptions.InvalidThrowError(
                'first throw of a spare cannot reach {} pins'.format(MAX_PINS))
        # The second throw is whatever was left standing.
        return [first, MAX_PINS - first]


class StrikeFrame(Frame):
    """All pins knocked down by the first throw."""
    kind = 'strike'
    bonus_count = 2

    def _validate_throws(self, throws):
        if throws:
            raise exceptions.InvalidThrowError(
                'a strike takes no throws, got: {}'.format(throws))
        return [MAX_PINS]


class TenthFrame(Frame):
    """The last frame, holding its own bonus throws.

    A third throw is bowled only when the first two throws knock down 10 pins
    or more, so the frame never borrows from another frame.
    """
    kind = 'tenth'
    bonus_count = 0

    def _validate_throws(self, throws):
        if len(throws) not in (2, 3):
            raise exceptions.InvalidThrowError(
                'the 10th frame has 2 or 3 throws, got: {}'.format(
                    len(throws)))
        first, second = throws[:2]
        if first + second >= MAX_PINS and len(throws) == 2:
            raise exceptions.InvalidThrowError(
                'the 3rd throw cannot be undefined')
        if first + second < MAX_PINS and len(throws) == 3:
            raise exceptions.InvalidThrowError(
                'the 3rd throw is not allowed when 2 throws knock down less '
                'than {} pins'.format(MAX_PINS))
        if first < MAX_PINS and first + second > MAX_PINS:
            raise exceptions.InvalidThrowError(
                '2 throws cannot exceed {} pins'.format(MAX_PINS))
        if first == MAX_PINS and second < MAX_PINS and (
                second + throws[2] > MAX_PINS):
            raise exceptions.InvalidThrowError(
                'the 2 throws after a strike cannot exceed {} pins'.format(
                    MAX_PINS))
        return throws


class Game:
    """Scores the frames of a single bowling game as they are bowled.

    Attributes:
        frames: the frames bowled so far, in order
        cumulative_scores: running total after each scored frame
    """

    def __init__(self):
        self._frames = []
        self._cumulative_scores = []

    @property
    def frames(self):
        return tuple(self._frames)

    @property
    def cumulative_scores(self):
        return tuple(self._cumulative_scores)

    @property
    def is_complete(self):
        return (len(self._frames) >= FRAMES_PER_GAME or
                (bool(self._frames) and
                 isinstance(self._frames[-1], TenthFrame)))

    def open(self, first, second):
        """Bowls an open frame."""
        return self._append(OpenFrame, first, second)

    def spare(self, first):
        """Bowls a spare, given the pins knocked down by its first throw."""
        return self._append(SpareFrame, first)

    def strike(self):
        """Bowls a strike."""
        return self._append(StrikeFrame)

    def bowl_tenth(self, first, second, third=None):
        """Bowls the last frame of the game."""
        throws = (first, second) if third is None else (first, second, third)
        return self._append(TenthFrame, *throws)

    def score_of_frame(self, frame):
        """Returns the total score of the game up to and including the frame.

        Args:
            frame: 1-indexed frame number

        Raises:
            FrameNotScoredError: if the frame was not bowled or cannot be
                scored yet
        """
        if not 1 <= frame <= len(self._cumulative_scores):
            logging.debug('Frame {} cannot be scored yet.'.format(frame))
            raise exceptions.FrameNotScoredError(frame)
        return self._cumulative_scores[frame - 1]

    def frame_score(self, frame):
        """Returns the points earned by the frame alone."""
        if not 1 <= frame <= len(self._cumulative_scores):
            raise exceptions.FrameNotScoredError(frame)
        return self._frames[frame - 1].score()

    def total_score(self):
        """Returns the total score so far, or None if no frame is scored."""
        if not self._cumulative_scores:
            return None
        return self._cumulative_scores[-1]

    def _append(self, frame_class, *throws):
        if self.is_complete:
            raise exceptions.GameCompleteError(len(self._frames))
        frame = frame_class(*throws)
        self._frames.append(frame)
        self._update_scores()
        return frame

    def _update_scores(self):
        if self._cannot_score_yet():
            logging.debug('Cannot score this game yet.')
            return
        self._assign_bonuses()
        # Scoring a frame may complete the frames before it, so the totals
        # are always rebuilt.
        self._cumulative_scores = self._cumulative_totals()

    def _cannot_score_yet(self):
        """Returns True while the opening frames are all waiting for a bonus.

        This is the case when the first frame is a strike or a spare, or when
        the first two frames are both strikes.
        """
        frame_classes = [type(frame) for frame in self._frames]
        return frame_classes in ([StrikeFrame], [SpareFrame],
                                 [StrikeFrame, StrikeFrame])

    def _assign_bonuses(self):
        for index, frame in enumerate(self._frames):
            if frame.scored:
                continue
            # A spare borrows from the next frame, a strike from the next two.
            following = self._frames[index + 1:index + 1 + frame.bonus_count]
            bonus = []
            for following_frame in following:
                bonus.extend(following_frame.base_throws)
            frame.assign_bonus(*bonus)

    def _cumulative_totals(self):
        totals = []
        running_total = 0
        for frame in self._frames:
            if not frame.is_scorable():
                break
            running_total += frame.score()
            totals.append(running_total)
        return totals

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class ErrorModel:

    def __init__(self):
        self.errors = []

    def add_error(self, error_object):
        """Appends the error to the list of errors."""
        self.errors.append(error_object)


class FrameScore:
    """Score of a single bowled frame, None while it cannot be scored."""

    def __init__(self, frame, frame_score=None, total_score_for_frame=None):
        self.frame = frame
        self.frame_score = frame_score
        self.total_score_for_frame = total_score_for_frame

    def __eq__(self, other):
        return (self.frame == other.frame and
                self.frame_score == other.frame_score and
                self.total_score_for_frame == other.total_score_for_frame)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class ScoreCard(ErrorModel):
    """Encapsulates all the frames in addition to the score."""

    def __init__(self, frames=None, total_score=None):
        super(ScoreCard, self).__init__()
        self.frames = frames if frames is not None else []
        self.total_score = total_score

    @classmethod
    def from_game(cls, game):
        cumulative_scores = game.cumulative_scores
        frames = []
        for number, frame in enumerate(game.frames, 1):
            if number <= len(cumulative_scores):
                frames.append(FrameScore(number, frame.score(),
                                         cumulative_scores[number - 1]))
            else:
                frames.append(FrameScore(number))
        return cls(frames, game.total_score())

    def __eq__(self, other):
        return (self.frames == other.frames and
                self.total_score == other.total_score and
                self.errors == other.errors)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)


class Error:
    """
    An instance of this class encapsulates the error code and the message to be
    returned.

    Attributes:
        error_code: HTTP error code representation
        error_type: kind of the error, the name of the exception raised
        error_message: error message that represents the error
    """
    def __init__(self, error_code, error_type, error_message):
        self.error_code = error_code
        self.error_type = error_type
        self.error_message = error_message

    def __eq__(self, other):
        return (self.error_code == other.error_code and
                self.error_type == other.error_type and
                self.error_message == other.error_message)

    def __repr__(self):
        return '{}:{}'.format(self.__class__.__name__, self.__dict__)
