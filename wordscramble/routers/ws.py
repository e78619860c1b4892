import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..errors import GameNotFound, WordListUnavailable

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    await websocket.accept()
    games = websocket.app.state.games

    try:
        game = await games.get_or_create(game_id)
    except WordListUnavailable as exc:
        await websocket.send_json({"type": "error", "message": str(exc)})
        await websocket.close(code=1011)
        return

    # Send initial state to player
    await websocket.send_json({"type": "init", **game.to_state().model_dump(mode="json")})

    try:
        while True:
            text = await websocket.receive_text()
            try:
                data = json.loads(text)
            except ValueError:
                await websocket.send_json({"type": "error", "message": "Message is not valid JSON"})
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            try:
                if kind == "submit":
                    word = data.get("word")
                    result = await games.submit(game_id, word if isinstance(word, str) else "")
                    if result is None:
                        continue
                    game = games.get(game_id)
                    await websocket.send_json({"type": "result", **game.to_result(result).model_dump(mode="json")})
                elif kind == "new":
                    game = await games.restart(game_id)
                    await websocket.send_json({"type": "update", **game.to_state().model_dump(mode="json")})
                else:
                    await websocket.send_json({"type": "error", "message": f"Unknown message type: {kind}"})
            except (GameNotFound, WordListUnavailable) as exc:
                await websocket.send_json({"type": "error", "message": str(exc)})
    except WebSocketDisconnect:
        logger.debug("WebSocket for game %s disconnected", game_id)
