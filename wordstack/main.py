from __future__ import annotations
import logging
from contextlib import asynccontextmanager

import socketio
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .schemas import Health, KeyPress, SessionSnapshot, WordCheck
from .managers.game import SessionManager
from .dictionary import service as dict_service

settings = load_settings()
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Sessions stay inert until this finishes; a failed load leaves them inert for good.
    if not dict_service.loaded:
        await dict_service.load(settings.wordlist_path)
    yield

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_origins)
app = FastAPI(title="Word Stack", version="0.1.0", lifespan=lifespan)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

sessions = SessionManager(sio, dict_service)

# REST Endpoints
@app.get('/health', response_model=Health)
async def health() -> Health:
    return Health(
        dictionaryLoaded=dict_service.loaded,
        dictionarySize=len(dict_service),
        sessions=len(sessions.sessions),
    )

@app.get('/dict/validate', response_model=WordCheck)
async def validate_word(word: str) -> WordCheck:
    return WordCheck(word=word.lower(), valid=dict_service.is_valid(word))

@app.get('/sessions/{session_id}', response_model=SessionSnapshot)
async def get_session(session_id: str) -> SessionSnapshot:
    session = sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail='Session not found')
    return session.snapshot()

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sessions.open(sid)

@sio.event
async def disconnect(sid, *args):
    await sessions.close(sid)

@sio.on('key')
async def on_key(sid, payload):
    if isinstance(payload, str):
        payload = {'key': payload}
    try:
        press = KeyPress.model_validate(payload)
    except ValueError:
        logger.debug("Session %s: ignoring malformed key payload %r", sid, payload)
        return
    await sessions.handle_key(sid, press.key)

@sio.on('session:state')
async def on_state(sid):
    await sessions.emit_state(sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordstack.main:application --reload --host 0.0.0.0 --port 8000
