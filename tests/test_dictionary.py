import pytest

from wordscramble.config import DATA_DIR
from wordscramble.dictionary import DictionaryService
from wordscramble.errors import DictionaryUnavailable
from wordscramble.words import WordSource


def test_is_valid_is_case_insensitive():
    service = DictionaryService(['Silk', 'worm'])
    assert service.is_valid('silk')
    assert service.is_valid('SILK')
    assert service.is_valid('Worm')
    assert not service.is_valid('zzqx')
    assert not service.is_valid('')


def test_languages_are_separate():
    service = DictionaryService(['silk'])
    service.add_words(['soie'], language='fr')
    assert service.languages == ['en', 'fr']
    assert service.is_valid('soie', 'fr')
    assert not service.is_valid('soie', 'en')
    assert not service.is_valid('silk', 'de')


def test_add_words_counts_new_entries():
    service = DictionaryService(['silk'])
    assert service.add_words(['silk', 'milk', '', '  worm ']) == 2


def test_from_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('silk\nmilk\n\n', encoding='utf-8')
    service = DictionaryService.from_file(path)
    assert service.is_valid('milk')
    assert not service.is_valid('worm')


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(DictionaryUnavailable):
        DictionaryService.from_file(tmp_path / 'nope.txt')


def test_bundled_dictionary_knows_every_start_word():
    service = DictionaryService.from_file(DATA_DIR / 'words.txt')
    for word in WordSource(DATA_DIR / 'start.txt').load():
        assert service.is_valid(word)
    assert service.is_valid('silk')
    assert service.is_valid('eel')


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes(b'silk\ncaf\xe9\n')
    service = DictionaryService()
    with pytest.raises(DictionaryUnavailable):
        service.load_file(path)
    assert not service.is_valid('silk')
    assert not service.is_valid('caf')
