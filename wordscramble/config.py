import logging
import os
from pathlib import Path

DATA_DIR = Path(__file__).parent / 'data'

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'


class Config:
    WORD_LIST_PATH = os.environ.get('WORDSCRAMBLE_WORD_LIST') or str(DATA_DIR / 'start.txt')
    DICTIONARY_PATH = os.environ.get('WORDSCRAMBLE_DICTIONARY') or str(DATA_DIR / 'words.txt')
    # Language tag handed to the spell checker
    LANGUAGE = os.environ.get('WORDSCRAMBLE_LANGUAGE', 'en')
    MIN_WORD_LENGTH = int(os.environ.get('WORDSCRAMBLE_MIN_WORD_LENGTH', '3'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get('WORDSCRAMBLE_CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('WORDSCRAMBLE_LOG_LEVEL', 'INFO')


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
