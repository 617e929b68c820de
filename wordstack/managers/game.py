from __future__ import annotations
import logging
import random
import time
from typing import Callable, Dict, List, Optional

from ..config import FEEDBACK_SECONDS, STACK_SIZE
from ..dictionary import DictionaryService
from ..letters import LetterBag, LetterStack, draw_to_stack
from ..schemas import FeedbackState, SessionSnapshot, Verdict
from ..scoring import ScoreBoard
from ..validator import validate
from .timer import TimerManager

logger = logging.getLogger(__name__)

class GameSession:
    """One player's game: letter economy, scoring and the typing/resolving turn cycle.

    Turn resolution is driven by ``update()``, which compares the injected clock
    against ``resolving_until``; nothing here sleeps or schedules callbacks.
    """

    def __init__(
        self,
        session_id: str,
        dictionary: DictionaryService,
        bag: Optional[LetterBag] = None,
        stack: Optional[LetterStack] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        stack_size: int = STACK_SIZE,
        feedback_seconds: float = FEEDBACK_SECONDS,
    ):
        self.id = session_id
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.bag = bag if bag is not None else LetterBag(rng=self.rng)
        self.stack = stack if stack is not None else LetterStack()
        self.stack_size = stack_size
        self.feedback_seconds = feedback_seconds
        self._clock = clock
        self.history: List[str] = []
        self.scores = ScoreBoard()
        self.buffer: str = ''
        self.feedback: FeedbackState = 'typing'
        self.locked: bool = False
        self.resolving_until: Optional[float] = None
        draw_to_stack(self.stack, self.bag, self.stack_size)

    @property
    def ready(self) -> bool:
        return self.dictionary.loaded

    @property
    def exhausted(self) -> bool:
        return not self.bag and not self.stack

    @property
    def letters_used(self) -> int:
        return sum(len(word) for word in self.history)

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns True if the visible state changed."""
        self.update()
        if self.locked or not self.ready:
            return False
        if key == 'Enter':
            return self.commit() is not None
        if key == 'Backspace':
            if not self.buffer:
                return False
            self.buffer = self.buffer[:-1]
            return True
        if len(key) == 1 and key.isascii() and key.isalpha():
            self.buffer += key.lower()
            return True
        return False

    def commit(self) -> Optional[Verdict]:
        """Validate the buffer and start the feedback period.

        Returns None without touching anything while locked or before the dictionary is ready.
        """
        self.update()
        if self.locked:
            return None
        if not self.ready:
            logger.debug("Session %s: commit ignored, dictionary not loaded", self.id)
            return None
        verdict = validate(self.buffer, self.stack, self.dictionary, self.history)
        if verdict.accepted:
            self._accept(verdict.word)
            self.feedback = 'correct'
        else:
            self.feedback = 'incorrect'
        self.locked = True
        self.resolving_until = self._clock() + self.feedback_seconds
        return verdict

    def _accept(self, word: str):
        self.stack.remove_word(word)
        draw_to_stack(self.stack, self.bag, self.stack_size)
        self.history.insert(0, word)
        points = self.scores.add(word)
        logger.info("Session %s: accepted %r for %d points (score %d)", self.id, word, points, self.scores.score)
        if self.exhausted:
            logger.info("Session %s: bag and stack are empty", self.id)

    def update(self, now: Optional[float] = None) -> bool:
        """Finish the feedback period once its time is up. Returns True if it did."""
        if not self.locked or self.resolving_until is None:
            return False
        if now is None:
            now = self._clock()
        if now < self.resolving_until:
            return False
        self.feedback = 'typing'
        self.buffer = ''
        self.locked = False
        self.resolving_until = None
        return True

    def tick(self) -> bool:
        return self.scores.tick()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            id=self.id,
            buffer=self.buffer,
            feedback=self.feedback,
            history=list(self.history),
            visibleScore=self.scores.visible_score,
            score=self.scores.score,
            stack=self.stack.letters,
            bagCount=len(self.bag),
            ready=self.ready,
            locked=self.locked,
            exhausted=self.exhausted,
        )

class SessionManager:
    def __init__(self, sio, dictionary: DictionaryService):
        self.sio = sio
        self.dictionary = dictionary
        self.sessions: Dict[str, GameSession] = {}
        self.timer = TimerManager(sio, self.sessions)

    def get(self, session_id: str) -> Optional[GameSession]:
        return self.sessions.get(session_id)

    async def open(self, session_id: str) -> GameSession:
        session = self.sessions.get(session_id)
        if session is None:
            session = GameSession(session_id, self.dictionary)
            self.sessions[session_id] = session
            logger.info("Session %s opened with stack %s", session_id, ''.join(session.stack))
        self.timer.start(session_id)
        await self.emit_state(session_id)
        return session

    async def close(self, session_id: str):
        self.timer.stop(session_id)
        if self.sessions.pop(session_id, None) is not None:
            logger.info("Session %s closed", session_id)

    async def handle_key(self, session_id: str, key: str):
        session = self.sessions.get(session_id)
        if not session:
            return
        if session.handle_key(key):
            await self.emit_state(session_id)

    async def emit_state(self, session_id: str):
        session = self.sessions.get(session_id)
        if not session:
            return
        await self.sio.emit('session:state', session.snapshot().model_dump(), to=session_id)
