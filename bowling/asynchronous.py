"""Awaitable version of the bowling game.

All the frames of a game are bowled one at a time: the calls that bowl a
frame wait for any frame still being bowled on the same game.
"""
import asyncio

from bowling import models


class AsyncGame:
    """Wraps a `models.Game` behind coroutines."""

    def __init__(self, game=None):
        self.game = game if game is not None else models.Game()
        self._lock = asyncio.Lock()

    async def open(self, first, second):
        async with self._lock:
            return self.game.open(first, second)

    async def spare(self, first):
        async with self._lock:
            return self.game.spare(first)

    async def strike(self):
        async with self._lock:
            return self.game.strike()

    async def bowl_tenth(self, first, second, third=None):
        async with self._lock:
            return self.game.bowl_tenth(first, second, third)

    async def score_of_frame(self, frame):
        return self.game.score_of_frame(frame)

    async def total_score(self):
        return self.game.total_score()
