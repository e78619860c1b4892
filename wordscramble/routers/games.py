from fastapi import APIRouter, Request, Response

from ..managers.game import GameManager
from ..schemas import GameSessionState, SubmitResult, SubmitWord

router = APIRouter()


def _games(request: Request) -> GameManager:
    return request.app.state.games


@router.post('', status_code=201, response_model=GameSessionState)
async def create_game(request: Request):
    game = await _games(request).create()
    return game.to_state()


@router.get('/{game_id}', response_model=GameSessionState)
async def get_game(game_id: str, request: Request):
    return _games(request).get(game_id).to_state()


@router.post('/{game_id}/new', response_model=GameSessionState)
async def new_game(game_id: str, request: Request):
    game = await _games(request).restart(game_id)
    return game.to_state()


@router.post('/{game_id}/words', response_model=SubmitResult, responses={204: {'description': 'Empty word ignored'}})
async def submit_word(game_id: str, body: SubmitWord, request: Request):
    games = _games(request)
    result = await games.submit(game_id, body.word)
    if result is None:
        return Response(status_code=204)
    return games.get(game_id).to_result(result)


@router.delete('/{game_id}', status_code=204)
async def end_game(game_id: str, request: Request):
    _games(request).end(game_id)
    return Response(status_code=204)
