from __future__ import annotations
import logging
from typing import Dict

import socketio
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from . import config
from .schemas import SearchQuery, DefinitionQuery, ExistingWordsQuery, DefinitionResult
from .dictionary import service as dict_service
from .managers.loader import DictionaryLoadError
from .routers import ws

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=config.CORS_ORIGINS)
app = FastAPI(title="SELD Dictionary Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Plain WebSocket lookups
app.include_router(ws.router, prefix='/ws')

async def _definition(word: str) -> DefinitionResult:
    definition = await dict_service.get_definition(word)
    return DefinitionResult(word=word, found=definition is not None, definition=definition)

# REST Endpoints
@app.get('/dict/status')
async def dictionary_status():
    return dict_service.status.model_dump()

@app.post('/dict/load')
async def load_dictionary():
    # Unlike the query endpoints, surface load failures to the caller
    try:
        index = await dict_service.load()
    except DictionaryLoadError as exc:
        raise HTTPException(status_code=503, detail=f'Dictionary unavailable: {exc}')
    return { 'ok': True, 'entries': len(index) }

@app.post('/dict/reload')
async def reload_dictionary():
    if not dict_service.loader.reset():
        return { 'ok': False, 'error': 'Load already in progress' }
    logger.info('Reloading dictionary')
    return await load_dictionary()

@app.get('/dict/search')
async def search_words(
    q: str = '',
    limit: int = Query(config.SEARCH_LIMIT, ge=0, le=config.MAX_SEARCH_LIMIT),
):
    results = await dict_service.search(q, limit)
    return { 'query': q, 'results': [r.model_dump() for r in results] }

@app.get('/dict/words')
async def list_words(limit: int = Query(config.LIST_LIMIT, ge=0, le=config.MAX_SEARCH_LIMIT)):
    results = await dict_service.get_list(limit)
    return { 'results': [r.model_dump() for r in results] }

@app.get('/dict/definition')
async def get_definition(word: str):
    return (await _definition(word)).model_dump()

# Dictionary validation REST endpoint
@app.get('/dict/validate')
async def validate_word(word: str):
    valid = await dict_service.exact_match(word)
    definition = await dict_service.get_definition(word) if valid else None
    return { 'word': word, 'valid': valid, 'definition': definition }

@app.post('/dict/existing')
async def existing_words(body: ExistingWordsQuery) -> Dict[str, list]:
    return { 'words': await dict_service.find_existing_words(body.words) }

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth):
    await sio.emit('pong', to=sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _reject(sid, event: str, err: ValidationError):
    await sio.emit('dict:error', { 'event': event, 'errors': err.errors(include_url=False) }, to=sid)

@sio.on('dict:search')
async def on_search(sid, payload):
    try:
        q = SearchQuery.model_validate(payload)
    except ValidationError as err:
        await _reject(sid, 'dict:search', err)
        return
    results = await dict_service.search(q.query, q.limit)
    await sio.emit('dict:results', {
        'query': q.query,
        'results': [r.model_dump() for r in results],
    }, to=sid)

@sio.on('dict:define')
async def on_define(sid, payload):
    try:
        q = DefinitionQuery.model_validate(payload)
    except ValidationError as err:
        await _reject(sid, 'dict:define', err)
        return
    result = await _definition(q.word)
    await sio.emit('dict:definition', result.model_dump(), to=sid)

# Page words -> the ones worth highlighting
@sio.on('dict:findExisting')
async def on_find_existing(sid, payload):
    try:
        q = ExistingWordsQuery.model_validate(payload)
    except ValidationError as err:
        await _reject(sid, 'dict:findExisting', err)
        return
    words = await dict_service.find_existing_words(q.words)
    await sio.emit('dict:existing', { 'words': words }, to=sid)

@sio.on('dict:list')
async def on_list(sid, limit=None):
    if not isinstance(limit, int):
        limit = config.LIST_LIMIT
    results = await dict_service.get_list(min(limit, config.MAX_SEARCH_LIMIT))
    await sio.emit('dict:list', { 'results': [r.model_dump() for r in results] }, to=sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn seld.main:application --reload --host 0.0.0.0 --port 8000
