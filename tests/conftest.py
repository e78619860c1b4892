import random

import pytest
from fastapi.testclient import TestClient

from wordscramble.config import Config
from wordscramble.dictionary import DictionaryService
from wordscramble.game_logic import GameSession
from wordscramble.words import WordSource

WORDS = [
    'silkworm', 'silk', 'milk', 'worm', 'work', 'slim', 'skim', 'owl', 'owls',
    'sleep', 'eel', 'eels', 'peel', 'see', 'lee', 'seep',
    'or', 'is', 'so',
]


class AppTestConfig(Config):
    LANGUAGE = 'en'
    MIN_WORD_LENGTH = 3
    CORS_ORIGINS = ['*']


class FakeSio:
    """Records emitted events instead of sending them."""

    def __init__(self):
        self.emitted = []

    async def emit(self, event, data=None, room=None, to=None, **kwargs):
        self.emitted.append((event, data, room or to))

    def events(self, name):
        return [data for event, data, _ in self.emitted if event == name]


@pytest.fixture()
def checker():
    return DictionaryService(WORDS)


@pytest.fixture()
def new_session(checker):
    def factory(*roots):
        session = GameSession(WordSource(words=roots, rng=random.Random(0)), checker)
        session.start_game()
        return session
    return factory


@pytest.fixture()
def silkworm(new_session):
    return new_session('silkworm')


@pytest.fixture()
def sio():
    return FakeSio()


@pytest.fixture()
def make_app(checker):
    from wordscramble.main import create_app

    def factory(words=('silkworm',), source=None):
        source = source or WordSource(words=list(words))
        return create_app(AppTestConfig, source=source, checker=checker)
    return factory


@pytest.fixture()
def web_app(make_app):
    return make_app()


@pytest.fixture()
def client(web_app):
    with TestClient(web_app) as test_client:
        yield test_client
