"""Exception types for faults. Rejected words are results, not errors."""


class WordScrambleError(RuntimeError):
    """Base class for everything the game raises."""


class WordListUnavailable(WordScrambleError):
    """Raised when no root word can be obtained to start a round."""


class DictionaryUnavailable(WordScrambleError):
    """Raised when the spell-checking word list cannot be loaded."""


class GameNotStarted(WordScrambleError):
    """Raised when a word is submitted before any round was started."""


class GameNotFound(WordScrambleError):
    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game not found: {self.game_id}"
