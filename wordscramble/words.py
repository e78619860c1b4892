from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import DATA_DIR
from .errors import WordListUnavailable

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST = DATA_DIR / 'start.txt'


class WordSource:
    """
    Supplies root words for new rounds.

    Words come either from an explicit sequence or from a text file with one
    word per line (the bundled start.txt by default). The file is read on the
    first load and cached; a failed load is not cached so the caller can retry.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        words: Optional[Iterable[str]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.path = Path(path) if path is not None else DEFAULT_WORD_LIST
        self._words: Optional[List[str]] = _clean(words) if words is not None else None
        self._rng = rng or random.Random()

    def load(self) -> List[str]:
        if self._words is None:
            self._words = self._read()
        if not self._words:
            raise WordListUnavailable('Word list is empty')
        return list(self._words)

    def random_word(self) -> str:
        return self._rng.choice(self.load())

    def _read(self) -> List[str]:
        try:
            with self.path.open('r', encoding='utf-8') as f:
                words = _clean(f)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error('Could not load word list from %s: %s', self.path, exc)
            raise WordListUnavailable(f'Could not load {self.path.name}') from exc
        if not words:
            logger.error('Word list %s has no usable words', self.path)
            raise WordListUnavailable(f'{self.path.name} has no words')
        logger.info('Loaded %s start words from %s', len(words), self.path)
        return words


def _clean(lines: Iterable[str]) -> List[str]:
    words = []
    for line in lines:
        w = line.strip().lower()
        if w:
            words.append(w)
    return words
