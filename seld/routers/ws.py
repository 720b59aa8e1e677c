from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from seld.dictionary import service as dict_service
from seld.schemas import SearchQuery, DefinitionQuery, ExistingWordsQuery

router = APIRouter()

# One JSON message in, one JSON message out:
#   {"type": "search", "query": "...", "limit": 30}  -> {"type": "results", ...}
#   {"type": "define", "word": "..."}                -> {"type": "definition", ...}
#   {"type": "existing", "words": [...]}             -> {"type": "existing", ...}
async def handle_message(data: dict) -> dict:
    kind = data.get("type")
    if kind == "search":
        q = SearchQuery.model_validate(data)
        results = await dict_service.search(q.query, q.limit)
        return {
            "type": "results",
            "query": q.query,
            "results": [r.model_dump() for r in results],
        }
    if kind == "define":
        q = DefinitionQuery.model_validate(data)
        definition = await dict_service.get_definition(q.word)
        return {
            "type": "definition",
            "word": q.word,
            "found": definition is not None,
            "definition": definition,
        }
    if kind == "existing":
        q = ExistingWordsQuery.model_validate(data)
        return {"type": "existing", "words": await dict_service.find_existing_words(q.words)}
    return {"type": "error", "error": f"Unknown message type: {kind!r}"}

@router.websocket("/lookup")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    try:
        while True:
            data = await websocket.receive_json()
            if not isinstance(data, dict):
                await websocket.send_json({"type": "error", "error": "Expected a JSON object"})
                continue
            try:
                reply = await handle_message(data)
            except ValidationError as err:
                reply = {"type": "error", "error": err.errors(include_url=False)}
            await websocket.send_json(reply)
    except WebSocketDisconnect:
        pass
