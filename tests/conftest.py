import random

import pytest

from wordstack.dictionary import DictionaryService
from wordstack.letters import LetterBag, LetterStack
from wordstack.managers.game import GameSession


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSio:
    def __init__(self):
        self.emitted = []

    async def emit(self, event, data=None, to=None, room=None):
        self.emitted.append((event, data, to))


@pytest.fixture
def sio():
    return FakeSio()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_session(clock):
    def factory(stack, bag="", words=("cat",), loaded=True):
        dictionary = DictionaryService(words) if loaded else DictionaryService()
        return GameSession(
            "test",
            dictionary,
            bag=LetterBag(bag, rng=random.Random(7)),
            stack=LetterStack(stack),
            clock=clock,
        )
    return factory
