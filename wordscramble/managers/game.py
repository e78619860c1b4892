from __future__ import annotations
import logging
import uuid
from typing import Dict, Optional

from ..dictionary import DEFAULT_LANGUAGE, DictionaryService
from ..errors import GameNotFound
from ..game_logic import MIN_WORD_LENGTH, GameSession, Rejected, ValidationResult
from ..schemas import GameSessionState, Rejection, SubmitResult, UsedWord
from ..words import WordSource

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, game_id: str, session: GameSession):
        self.id = game_id
        self.session = session

    def to_state(self) -> GameSessionState:
        return GameSessionState(
            id=self.id,
            rootWord=self.session.root_word,
            usedWords=[UsedWord(word=w, letters=len(w)) for w in self.session.used_words],
            score=self.session.score,
        )

    def to_result(self, result: ValidationResult) -> SubmitResult:
        rejection = None
        if isinstance(result, Rejected):
            rejection = Rejection(kind=result.kind, title=result.title, message=result.message)
        return SubmitResult(
            accepted=result.accepted,
            word=result.word,
            points=getattr(result, 'points', 0),
            rejection=rejection,
            state=self.to_state(),
        )


class GameManager:
    """
    In-memory registry of game sessions keyed by game id.

    Every state change is broadcast as `game:state` to the Socket.IO room
    named after the game, so any connected screen can re-render.
    """

    def __init__(
        self,
        sio,
        source: WordSource,
        checker: DictionaryService,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
    ):
        self.sio = sio
        self.source = source
        self.checker = checker
        self.language = language
        self.min_length = min_length
        self.games: Dict[str, Game] = {}

    def _new_session(self) -> GameSession:
        return GameSession(self.source, self.checker, language=self.language, min_length=self.min_length)

    def get(self, game_id: str) -> Game:
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    async def create(self, game_id: Optional[str] = None) -> Game:
        game_id = game_id or uuid.uuid4().hex
        session = self._new_session()
        # Raises WordListUnavailable before anything is registered
        session.start_game()
        game = Game(game_id, session)
        self.games[game_id] = game
        logger.info('Created game %s', game_id)
        await self._emit_state(game)
        return game

    async def get_or_create(self, game_id: str) -> Game:
        if game_id in self.games:
            return self.games[game_id]
        return await self.create(game_id)

    async def restart(self, game_id: str) -> Game:
        game = self.get(game_id)
        game.session.start_game()
        await self._emit_state(game)
        return game

    async def submit(self, game_id: str, word: str) -> Optional[ValidationResult]:
        game = self.get(game_id)
        result = game.session.submit(word)
        if result is None:
            return None
        event = 'word:accepted' if result.accepted else 'word:rejected'
        await self.sio.emit(event, game.to_result(result).model_dump(mode='json'), room=game_id)
        if result.accepted:
            await self._emit_state(game)
        return result

    def end(self, game_id: str) -> None:
        if self.games.pop(game_id, None) is None:
            raise GameNotFound(game_id)
        logger.info('Ended game %s', game_id)

    async def _emit_state(self, game: Game):
        await self.sio.emit('game:state', game.to_state().model_dump(mode='json'), room=game.id)
