from __future__ import annotations
import logging
import random
from collections import Counter
from typing import Dict, Iterable, List, Optional

from .config import STACK_SIZE

logger = logging.getLogger(__name__)

# No f, h, v, w or y tiles in the bag.
LETTER_DISTRIBUTION: Dict[str, int] = {
    'e': 12, 'a': 9, 'i': 9, 'o': 8, 'n': 6, 'r': 6, 't': 6,
    'l': 4, 's': 4, 'u': 4, 'd': 4, 'g': 3,
    'b': 2, 'c': 2, 'm': 2, 'p': 2,
    'k': 1, 'j': 1, 'x': 1, 'q': 1, 'z': 1,
}

class LetterBag:
    """Reserve pool of letters not yet in play. Only ever shrinks."""

    def __init__(self, letters: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        if letters is None:
            letters = self.generate_letters()
        self._letters: List[str] = list(letters)
        self._rng = rng or random.Random()
        self.initial_size = len(self._letters)

    @staticmethod
    def generate_letters(distribution: Optional[Dict[str, int]] = None) -> List[str]:
        letters: List[str] = []
        for letter, count in (distribution or LETTER_DISTRIBUTION).items():
            letters.extend([letter] * count)
        return letters

    def __len__(self) -> int:
        return len(self._letters)

    def __bool__(self) -> bool:
        return bool(self._letters)

    def remaining(self) -> List[str]:
        return list(self._letters)

    def shuffle(self):
        # random.shuffle is Fisher-Yates
        self._rng.shuffle(self._letters)

    def draw(self) -> str:
        return self._letters.pop()

class LetterStack:
    """The player's available letters, in draw order. Duplicates are separate tiles."""

    def __init__(self, letters: Iterable[str] = ()):
        self._letters: List[str] = list(letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __iter__(self):
        return iter(self._letters)

    def __repr__(self) -> str:
        return f"LetterStack({self._letters!r})"

    @property
    def letters(self) -> List[str]:
        return list(self._letters)

    def counts(self) -> Counter:
        return Counter(self._letters)

    def append(self, letter: str):
        self._letters.append(letter)

    def remove_word(self, word: str):
        """Take one tile per letter of ``word``, first match by position.

        The caller must have checked the word fits; a missing letter raises ValueError.
        """
        for letter in word:
            self._letters.remove(letter)

def draw_to_stack(stack: LetterStack, bag: LetterBag, target_size: int = STACK_SIZE) -> int:
    """Refill ``stack`` from ``bag`` up to ``target_size``. Returns the number of letters drawn."""
    if len(stack) >= target_size or not bag:
        return 0
    bag.shuffle()
    drawn = 0
    while len(stack) < target_size and bag:
        stack.append(bag.draw())
        drawn += 1
    if len(stack) < target_size:
        logger.info("Letter bag exhausted, stack holds %d of %d letters", len(stack), target_size)
    return drawn
