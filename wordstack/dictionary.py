from __future__ import annotations
import asyncio
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

logger = logging.getLogger(__name__)

class DictionaryLoadError(Exception):
    pass

class DictionaryService:
    """Lowercase word list, filled once and read-only afterwards.

    Until a load succeeds ``loaded`` stays False and every lookup misses.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: FrozenSet[str] = frozenset()
        self.loaded = False
        if words is not None:
            self._set_words(words)

    def _set_words(self, words: Iterable[str]):
        self._words = frozenset(w.lower() for w in words)
        self.loaded = True

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._words

    def load_text(self, text: str):
        if self.loaded:
            logger.warning("Dictionary already loaded, ignoring new word list")
            return
        # Blank lines stay in as '' entries; empty words are rejected before lookup.
        self._set_words(text.split("\n"))
        logger.info("Dictionary loaded with %d words", len(self._words))

    async def load(self, path: Union[str, Path]) -> bool:
        """Read a one-word-per-line file off the event loop. Returns whether the dictionary is ready."""
        try:
            text = await asyncio.to_thread(_read_wordlist, Path(path))
        except DictionaryLoadError:
            logger.exception("Could not load word list from %s", path)
            return False
        self.load_text(text)
        return self.loaded

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words

def _read_wordlist(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"unreadable word list {path}") from exc

# Singleton instance
service = DictionaryService()
