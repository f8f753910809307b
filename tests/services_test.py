from unittest import mock

import pytest
from pytest import mark

from bowling import exceptions
from bowling import models as bowling_models
from bowling import services


class TestPlayFrame:
    """Unit tests to verify bowling a frame from its notation."""

    def setup_method(self):
        self.game = bowling_models.Game()

    def test_play_frame__strike(self):
        frame = services.play_frame(self.game, 'X')
        assert isinstance(frame, bowling_models.StrikeFrame)
        assert frame.base_throws == [10]

    def test_play_frame__spare(self):
        frame = services.play_frame(self.game, '3/')
        assert isinstance(frame, bowling_models.SpareFrame)
        assert frame.base_throws == [3, 7]

    def test_play_frame__open_frame(self):
        frame = services.play_frame(self.game, '3-5')
        assert isinstance(frame, bowling_models.OpenFrame)
        assert frame.base_throws == [3, 5]
        assert self.game.total_score() == 8

    def test_play_frame__open_frame_knocks_down_ten_pins(self):
        with pytest.raises(exceptions.InvalidThrowError,
                           match='2 throws of an open frame'):
            services.play_frame(self.game, '5-5')

    @mark.parametrize('notation', ['XX', 'X-X-X', '7/3', '', None])
    def test_play_frame__invalid_notation(self, notation):
        with pytest.raises(
                exceptions.InvalidNotationError,
                match='Frame notation: \'{}\' is invalid for frame: 1.'.format(
                    notation)):
            services.play_frame(self.game, notation)

    @mark.parametrize('notation, throws', [
        ('X-X-X', [10, 10, 10]),
        ('X-X-7', [10, 10, 7]),
        ('X-7/', [10, 7, 3]),
        ('X-3-4', [10, 3, 4]),
        ('7/X', [7, 3, 10]),
        ('7/3', [7, 3, 3]),
        ('3-5', [3, 5]),
        ('0/0', [0, 10, 0]),
    ])
    def test_play_frame__tenth_frame(self, notation, throws):
        for _ in range(9):
            services.play_frame(self.game, '0-0')
        frame = services.play_frame(self.game, notation)
        assert isinstance(frame, bowling_models.TenthFrame)
        assert frame.base_throws == throws
        assert self.game.is_complete

    def test_play_frame__tenth_frame_needs_all_throws(self):
        for _ in range(9):
            services.play_frame(self.game, 'X')
        with pytest.raises(exceptions.InvalidNotationError,
                           match='is invalid for frame: 10.'):
            services.play_frame(self.game, 'X')

    def test_play_frame__tenth_frame_breaks_pin_rules(self):
        for _ in range(9):
            services.play_frame(self.game, '0-0')
        with pytest.raises(exceptions.InvalidThrowError,
                           match='the 2 throws after a strike'):
            services.play_frame(self.game, 'X-6-6')

    def test_play_frame__game_already_played(self):
        for _ in range(9):
            services.play_frame(self.game, 'X')
        services.play_frame(self.game, 'X-X-X')
        with pytest.raises(exceptions.GameCompleteError):
            services.play_frame(self.game, 'X')


class TestScoreFrames:

    def test_score_frames__partial_game(self):
        score_card = services.score_frames(['X', '7/', '7-2', '9/', 'X'])
        assert score_card.errors == []
        assert score_card.total_score == 66
        assert score_card.frames == [
            bowling_models.FrameScore(1, 20, 20),
            bowling_models.FrameScore(2, 17, 37),
            bowling_models.FrameScore(3, 9, 46),
            bowling_models.FrameScore(4, 20, 66),
            bowling_models.FrameScore(5),
        ]

    def test_score_frames__complete_game(self):
        score_card = services.score_frames(
            ['X', '7/', '7-2', '9/', 'X', 'X', 'X', '2-3', '6/', '7/3'])
        assert score_card.errors == []
        assert [frame.total_score_for_frame for frame in score_card.frames] == [
            20, 37, 46, 66, 96, 118, 133, 138, 155, 168]
        assert score_card.total_score == 168

    def test_score_frames__perfect_game(self):
        score_card = services.score_frames(['X'] * 9 + ['X-X-X'])
        assert score_card.total_score == 300

    def test_score_frames__no_frames(self):
        score_card = services.score_frames([])
        assert score_card == bowling_models.ScoreCard()

    def test_score_frames__first_frame_strike(self):
        score_card = services.score_frames(['X'])
        assert score_card.total_score is None
        assert score_card.frames == [bowling_models.FrameScore(1)]

    def test_score_frames__invalid_frame(self):
        with mock.patch('logging.error') as logging_error:
            score_card = services.score_frames(['X', '5-5', '3-4'])
        assert score_card.frames == []
        assert score_card.total_score is None
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400, error_type='InvalidThrowError',
                error_message=('2 throws of an open frame must knock down '
                               'less than 10 pins'))]
        assert logging_error.call_count == 1

    def test_score_frames__too_many_frames(self):
        score_card = services.score_frames(['1-1'] * 11)
        assert score_card.errors == [
            bowling_models.Error(
                error_code=400, error_type='GameCompleteError',
                error_message=('Game has already been played: no frame can '
                               'follow frame: 10.'))]
