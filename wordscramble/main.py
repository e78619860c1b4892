from __future__ import annotations
import logging

import socketio
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config
from .dictionary import DictionaryService
from .errors import GameNotFound, GameNotStarted, WordListUnavailable
from .managers.game import GameManager
from .routers import dictionary, games as games_router, ws
from .words import WordSource

logger = logging.getLogger(__name__)


def create_app(config_class=Config, source: WordSource | None = None, checker: DictionaryService | None = None) -> FastAPI:
    # Socket.IO server (ASGI); engine.io only treats the bare string as a wildcard
    origins = config_class.CORS_ORIGINS
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*' if origins == ['*'] else origins)
    app = FastAPI(title="Word Scramble Server", version="0.1.0")

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    if source is None:
        source = WordSource(config_class.WORD_LIST_PATH)
    if checker is None:
        checker = DictionaryService.from_file(config_class.DICTIONARY_PATH, language=config_class.LANGUAGE)

    games = GameManager(
        sio,
        source,
        checker,
        language=config_class.LANGUAGE,
        min_length=config_class.MIN_WORD_LENGTH,
    )
    app.state.config = config_class
    app.state.sio = sio
    app.state.games = games
    app.state.dictionary = checker

    app.include_router(games_router.router, prefix='/games', tags=['games'])
    app.include_router(dictionary.router, prefix='/dict', tags=['dictionary'])
    app.include_router(ws.router, prefix='/ws')

    @app.exception_handler(GameNotFound)
    async def game_not_found(request: Request, exc: GameNotFound):
        return JSONResponse(status_code=404, content={'detail': str(exc)})

    @app.exception_handler(GameNotStarted)
    async def game_not_started(request: Request, exc: GameNotStarted):
        return JSONResponse(status_code=409, content={'detail': str(exc)})

    @app.exception_handler(WordListUnavailable)
    async def word_list_unavailable(request: Request, exc: WordListUnavailable):
        logger.error('Cannot start a round: %s', exc)
        return JSONResponse(status_code=503, content={'detail': str(exc)})

    register_socketio_handlers(sio, games)
    return app


def register_socketio_handlers(sio: socketio.AsyncServer, games: GameManager):
    @sio.event
    async def connect(sid, environ, auth=None):
        await sio.save_session(sid, {'game_id': None})
        await sio.emit('pong', to=sid)

    @sio.event
    async def disconnect(sid):
        # Games outlive their screens; a reconnecting client joins again by id
        logger.debug('Client %s disconnected', sid)

    @sio.on('ping')
    async def on_ping(sid):
        await sio.emit('pong', to=sid)

    async def _current_game(sid):
        sess = await sio.get_session(sid)
        return sess.get('game_id') if sess else None

    @sio.on('game:join')
    async def join_game(sid, game_id: str):
        try:
            game = await games.get_or_create(game_id)
        except WordListUnavailable as exc:
            await sio.emit('game:error', {'message': str(exc)}, to=sid)
            return
        # Join after creation so the creation broadcast does not reach the joiner twice
        await sio.enter_room(sid, game_id)
        sess = await sio.get_session(sid) or {}
        await sio.save_session(sid, {**sess, 'game_id': game_id})
        await sio.emit('game:state', game.to_state().model_dump(mode='json'), to=sid)

    @sio.on('game:new')
    async def new_game(sid):
        game_id = await _current_game(sid)
        if not game_id:
            return
        try:
            await games.restart(game_id)
        except (GameNotFound, WordListUnavailable) as exc:
            await sio.emit('game:error', {'message': str(exc)}, to=sid)

    @sio.on('word:submit')
    async def submit_word(sid, payload):
        game_id = await _current_game(sid)
        if not game_id:
            return
        word = payload.get('word') if isinstance(payload, dict) else payload
        if not isinstance(word, str):
            word = ''
        try:
            result = await games.submit(game_id, word)
        except GameNotFound as exc:
            await sio.emit('game:error', {'message': str(exc)}, to=sid)
            return
        if result is None:
            return
        game = games.get(game_id)
        await sio.emit('word:result', game.to_result(result).model_dump(mode='json'), to=sid)


app = create_app()

# Export ASGI app for uvicorn
application = socketio.ASGIApp(app.state.sio, other_asgi_app=app)

# For local running: uvicorn wordscramble.main:application --reload --host 0.0.0.0 --port 8000
