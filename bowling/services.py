"""Module that encapsulates all service functions.
"""
import logging

from bowling import exceptions
from bowling import fields as bowling_fields
from bowling import models as bowling_models


def play_frame(game, notation):
    """Bowls the frame described by the notation and returns the frame.

    The acceptable notations for the first 9 frames are given below:

    1. X (strike)

    2. <0-9>/ (spare, given the first throw)

    3. <0-9>-<0-9> (open frame)

    The 10th frame is always bowled as the last frame of the game, and also
    accepts X-X-X, X-X-<0-9>, X-<0-9>/, X-<0-9>-<0-9>, <0-9>/X and
    <0-9>/<0-9>.

    Raises:
        GameCompleteError: if the game has already been played
        InvalidNotationError: if the notation is invalid for the frame
        InvalidThrowError: if the throws break the rules of the frame
    """
    if game.is_complete:
        raise exceptions.GameCompleteError(len(game.frames))

    frame_number = len(game.frames) + 1
    if frame_number < bowling_models.FRAMES_PER_GAME:
        return _play_frame(game, notation, frame_number)
    return game.bowl_tenth(*_parse_tenth_frame(notation, frame_number))


def score_frames(notations):
    """Plays the frames on a new game and returns its score card.

    Errors are not raised; they are added to the returned score card instead,
    and the remaining frames are not played.
    """
    game = bowling_models.Game()
    for notation in notations:
        try:
            play_frame(game, notation)
        except exceptions.BowlingGameError as err:
            logging.error(
                'Unable to play frame {frame} with \'{notation}\': {err}'.format(
                    frame=len(game.frames) + 1, notation=notation, err=err))
            score_card = bowling_models.ScoreCard()
            score_card.add_error(bowling_models.Error(
                error_code=400, error_type=err.error_type,
                error_message=str(err)))
            return score_card
    return bowling_models.ScoreCard.from_game(game)


def _play_frame(game, notation, frame_number):
    if not bowling_fields.FRAME_NOTATION.fullmatch(notation or ''):
        raise exceptions.InvalidNotationError(notation, frame_number)
    if notation == 'X':
        return game.strike()
    if notation.endswith('/'):
        return game.spare(int(notation[0]))
    first, second = notation.split('-')
    return game.open(int(first), int(second))


def _parse_tenth_frame(notation, frame_number):
    """Parses the notation of the 10th frame into its 2 or 3 throws.

    A strike counts 10 pins and a spare counts the pins left standing by the
    previous throw, e.g. X-7/ is parsed as [10, 7, 3].
    """
    if not bowling_fields.TENTH_FRAME_NOTATION.fullmatch(notation or ''):
        raise exceptions.InvalidNotationError(notation, frame_number)
    throws = []
    for mark in notation.replace('-', ''):
        if mark == 'X':
            throws.append(bowling_models.MAX_PINS)
        elif mark == '/':
            throws.append(bowling_models.MAX_PINS - throws[-1])
        else:
            throws.append(int(mark))
    return throws
