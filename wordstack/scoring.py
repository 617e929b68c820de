from __future__ import annotations
from typing import Dict

LETTER_POINTS: Dict[str, int] = {
    'a': 1, 'e': 1, 'i': 1, 'l': 1, 'n': 1, 'o': 1, 'r': 1, 's': 1, 't': 1, 'u': 1,
    'd': 2, 'g': 2,
    'b': 3, 'c': 3, 'm': 3, 'p': 3,
    'f': 4, 'h': 4, 'v': 4, 'w': 4, 'y': 4,
    'k': 5,
    'j': 8, 'x': 8,
    'q': 10, 'z': 10,
}

def score_word(word: str) -> int:
    # Words reaching here were validated against the stack, so every letter is a-z.
    return sum(LETTER_POINTS[letter] for letter in word)

class ScoreBoard:
    """True score plus the counter shown to the player, which trails it one point per tick."""

    def __init__(self):
        self.score: int = 0
        self.visible_score: int = 0

    def add(self, word: str) -> int:
        points = score_word(word)
        self.score += points
        return points

    def tick(self) -> bool:
        if self.visible_score < self.score:
            self.visible_score += 1
            return True
        return False
