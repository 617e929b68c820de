from __future__ import annotations
from enum import Enum
from pydantic import BaseModel
from typing import List, Literal, Optional

FeedbackState = Literal['typing', 'correct', 'incorrect']

class RejectReason(str, Enum):
    NOT_READY = 'not_ready'
    EMPTY = 'empty'
    LETTERS_UNAVAILABLE = 'letters_unavailable'
    ALREADY_USED = 'already_used'
    NOT_IN_DICTIONARY = 'not_in_dictionary'

class Verdict(BaseModel):
    word: str
    accepted: bool
    reason: Optional[RejectReason] = None

class KeyPress(BaseModel):
    key: str

class SessionSnapshot(BaseModel):
    id: str
    buffer: str = ''
    feedback: FeedbackState = 'typing'
    history: List[str] = []
    visibleScore: int = 0
    score: int = 0
    stack: List[str] = []
    bagCount: int = 0
    ready: bool = False
    locked: bool = False
    exhausted: bool = False

class WordCheck(BaseModel):
    word: str
    valid: bool

class Health(BaseModel):
    dictionaryLoaded: bool
    dictionarySize: int
    sessions: int
