from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from .errors import DictionaryUnavailable

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'en'


class DictionaryService:
    """
    Spell checker backed by plain word lists, one set per language tag.

    A word counts as correctly spelled when it appears in the list for the
    requested language. No suggestions, no partial matches.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = DEFAULT_LANGUAGE):
        # Store lowercase words
        self._words: Dict[str, Set[str]] = {}
        if words is not None:
            self.add_words(words, language)

    @classmethod
    def from_file(cls, path: Union[str, Path], language: str = DEFAULT_LANGUAGE) -> 'DictionaryService':
        service = cls()
        service.load_file(path, language)
        return service

    def load_file(self, path: Union[str, Path], language: str = DEFAULT_LANGUAGE) -> int:
        path = Path(path)
        try:
            with path.open('r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error('Could not load dictionary from %s: %s', path, exc)
            raise DictionaryUnavailable(f'Could not load dictionary {path}') from exc
        added = self.add_words(lines, language)
        logger.info('Loaded %s %r words from %s', added, language, path)
        return added

    def add_words(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE) -> int:
        bucket = self._words.setdefault(language, set())
        before = len(bucket)
        for line in words:
            w = line.strip().lower()
            if w:
                bucket.add(w)
        return len(bucket) - before

    @property
    def languages(self) -> List[str]:
        return sorted(self._words)

    def is_valid(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        words = self._words.get(language)
        if words is None:
            logger.warning('No dictionary loaded for language %r', language)
            return False
        return word.lower() in words
