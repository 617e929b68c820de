from __future__ import annotations
import logging
from collections import Counter
from typing import Sequence

from .dictionary import DictionaryService
from .letters import LetterStack
from .schemas import RejectReason, Verdict

logger = logging.getLogger(__name__)

def letters_available(word: str, stack: LetterStack) -> bool:
    """True when every letter of ``word`` has its own tile in ``stack``."""
    return not (Counter(word) - stack.counts())

def validate(word: str, stack: LetterStack, dictionary: DictionaryService, history: Sequence[str]) -> Verdict:
    """Accept or reject ``word``. Checks run in a fixed order and the first failure is reported."""
    if not dictionary.loaded:
        reason = RejectReason.NOT_READY
    elif not word:
        reason = RejectReason.EMPTY
    elif not letters_available(word, stack):
        reason = RejectReason.LETTERS_UNAVAILABLE
    elif word in history:
        reason = RejectReason.ALREADY_USED
    elif word not in dictionary:
        reason = RejectReason.NOT_IN_DICTIONARY
    else:
        return Verdict(word=word, accepted=True)
    logger.debug("Rejected %r: %s", word, reason.value)
    return Verdict(word=word, accepted=False, reason=reason)
