from __future__ import annotations
import asyncio
import logging
from typing import TYPE_CHECKING, Dict

from ..config import SCORE_TICK_SECONDS

if TYPE_CHECKING:
    from .game import GameSession

logger = logging.getLogger(__name__)

class TimerManager:
    """One background task per session: counts the visible score up, ends
    feedback periods and pushes a fresh snapshot whenever either changed."""

    def __init__(self, sio, sessions: Dict[str, GameSession], interval: float = SCORE_TICK_SECONDS):
        self.sio = sio
        self._sessions = sessions
        self.interval = interval
        self._tasks: Dict[str, asyncio.Task] = {}

    def start(self, session_id: str):
        task = self._tasks.get(session_id)
        if task and not task.done():
            return
        self._tasks[session_id] = asyncio.create_task(self._run(session_id))

    def stop(self, session_id: str):
        task = self._tasks.pop(session_id, None)
        if task:
            task.cancel()

    def running(self, session_id: str) -> bool:
        task = self._tasks.get(session_id)
        return bool(task) and not task.done()

    async def _run(self, session_id: str):
        try:
            while True:
                await asyncio.sleep(self.interval)
                session = self._sessions.get(session_id)
                if session is None:
                    break
                resolved = session.update()
                ticked = session.tick()
                if resolved or ticked:
                    await self.sio.emit('session:state', session.snapshot().model_dump(), to=session_id)
        except asyncio.CancelledError:
            return
        finally:
            logger.debug("Timer for session %s stopped", session_id)
