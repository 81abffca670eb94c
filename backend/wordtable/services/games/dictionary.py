"""Dictionary oracle for the tile game.

The word list itself lives outside the repo; ``DICTIONARY_PATH`` points at a
newline-separated file. Without one only two-letter words are known.
"""

import logging
import re
from typing import Dict, Iterable, Optional

from .words import TWO_LETTER_WORDS

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r'^[A-Z]{2,15}$')
_cache: Dict[Optional[str], 'Dictionary'] = {}


class Dictionary:
    def __init__(self, words: Iterable[str] = ()):
        cleaned = {w.strip().upper() for w in words if w and w.strip()}
        self._words = frozenset(cleaned | TWO_LETTER_WORDS)

    def __len__(self):
        return len(self._words)

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        upper = word.upper()
        if not _WORD_RE.match(upper):
            return False
        return upper in self._words


def load_dictionary(path: Optional[str]) -> Dictionary:
    """Load (once per path) the dictionary at ``path``.

    A missing or unreadable file is not fatal: the game falls back to the
    two-letter list and a warning is logged.
    """
    if path in _cache:
        return _cache[path]
    words = []
    if path:
        try:
            with open(path, 'r', encoding='utf-8') as fh:
                words = [line.strip() for line in fh if len(line.strip()) >= 2]
        except OSError as exc:
            logger.warning(f"[dictionary] could not read {path}: {exc}")
    dictionary = Dictionary(words)
    logger.info(f"[dictionary] loaded {len(dictionary)} words from {path or 'built-in list'}")
    _cache[path] = dictionary
    return dictionary
