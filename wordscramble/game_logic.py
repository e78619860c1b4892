from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from .dictionary import DEFAULT_LANGUAGE, DictionaryService
from .errors import GameNotStarted
from .words import WordSource

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


class RejectionKind(str, Enum):
    ALREADY_USED = 'already_used'
    NOT_POSSIBLE = 'not_possible'
    NOT_REAL = 'not_real'
    TOO_SHORT_OR_SAME_AS_ROOT = 'too_short_or_same_as_root'


# (title, message) shown to the player for each rejection
REJECTION_TEXT = {
    RejectionKind.ALREADY_USED: ('Word used already', 'Be more original!'),
    RejectionKind.NOT_POSSIBLE: ('Word not possible', "You can't spell that word from '{root}'!"),
    RejectionKind.NOT_REAL: ('Word not real', 'That word is not real!'),
    RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT: (
        'Short word or Same word',
        'Word is shorter than {min_length} letters or same with start word',
    ),
}


@dataclass(frozen=True)
class Accepted:
    word: str
    points: int

    accepted = True


@dataclass(frozen=True)
class Rejected:
    word: str
    kind: RejectionKind
    root_word: str = ''
    min_length: int = MIN_WORD_LENGTH

    accepted = False

    @property
    def title(self) -> str:
        return REJECTION_TEXT[self.kind][0]

    @property
    def message(self) -> str:
        return REJECTION_TEXT[self.kind][1].format(root=self.root_word, min_length=self.min_length)


ValidationResult = Union[Accepted, Rejected]


def normalize(word: str) -> str:
    return word.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """True if every letter of `word` can be taken from `root_word`, each root letter used once."""
    available = Counter(root_word)
    for letter in word:
        if available[letter] == 0:
            return False
        available[letter] -= 1
    return True


def is_real(word: str, checker: DictionaryService, language: str = DEFAULT_LANGUAGE) -> bool:
    return checker.is_valid(word, language)


def is_long_enough_and_distinct(word: str, root_word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length and word != root_word


class GameSession:
    """
    State of one player's round: the root word, the words accepted so far
    (newest first) and the running score.

    Calls are expected one at a time from a single owner; nothing here awaits
    or locks.
    """

    def __init__(
        self,
        source: WordSource,
        checker: DictionaryService,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
    ):
        self.source = source
        self.checker = checker
        self.language = language
        self.min_length = min_length
        self.root_word: str = ''
        self.used_words: List[str] = []
        self.score: int = 0

    @property
    def started(self) -> bool:
        return bool(self.root_word)

    def start_game(self) -> str:
        # Pick first so a failed load leaves the previous round untouched
        root = self.source.random_word()
        self.root_word = root
        self.used_words = []
        self.score = 0
        logger.info('New round with root word %r', root)
        return root

    def submit(self, candidate: str) -> Optional[ValidationResult]:
        word = normalize(candidate)
        if not word:
            return None
        if not self.started:
            raise GameNotStarted('Start a game before submitting words')

        kind = self._check(word)
        if kind is not None:
            logger.debug('Rejected %r against %r: %s', word, self.root_word, kind.value)
            return Rejected(word=word, kind=kind, root_word=self.root_word, min_length=self.min_length)

        points = len(word)
        self.score += points
        self.used_words.insert(0, word)
        logger.info('Accepted %r for %s points (score %s)', word, points, self.score)
        return Accepted(word=word, points=points)

    def _check(self, word: str) -> Optional[RejectionKind]:
        # Order matters: each failure reports a different reason
        if not is_original(word, self.used_words):
            return RejectionKind.ALREADY_USED
        if not is_possible(word, self.root_word):
            return RejectionKind.NOT_POSSIBLE
        if not is_real(word, self.checker, self.language):
            return RejectionKind.NOT_REAL
        if not is_long_enough_and_distinct(word, self.root_word, self.min_length):
            return RejectionKind.TOO_SHORT_OR_SAME_AS_ROOT
        return None
