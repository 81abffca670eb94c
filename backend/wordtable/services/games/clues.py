import re
from dataclasses import dataclass
from typing import Iterable, Optional

BASIC = 'basic'
STRICT = 'strict'
VERY_STRICT = 'very_strict'
STRICTNESS_LEVELS = (BASIC, STRICT, VERY_STRICT)

# Longest match wins (ES before S).
SUFFIXES = sorted(
    ['ING', 'ED', 'ER', 'EST', 'LY', 'TION', 'SION', 'NESS', 'MENT', 'ABLE', 'IBLE', 'S', 'ES'],
    key=len,
    reverse=True,
)

_WHITESPACE = re.compile(r'\s')


@dataclass
class ClueCheck:
    valid: bool
    reason: Optional[str] = None


def word_root(word: str) -> str:
    """Crude suffix strip. A heuristic, not a stemmer."""
    root = word.upper()
    for suffix in SUFFIXES:
        if root.endswith(suffix) and len(root) > len(suffix) + 2:
            return root[:-len(suffix)]
    return root


def check_clue(clue: str, board_words: Iterable[str], strictness: str = STRICT) -> ClueCheck:
    """Check a one-word clue against the words still showing on the board."""
    normalized = (clue or '').strip().upper()
    words = [w.upper() for w in board_words]

    if not normalized:
        return ClueCheck(False, 'Clue cannot be empty')
    if _WHITESPACE.search(normalized):
        return ClueCheck(False, 'Clue must be a single word')
    if normalized in words:
        return ClueCheck(False, f'"{clue.strip()}" is a word on the board')
    if strictness == BASIC:
        return ClueCheck(True)

    for word in words:
        if normalized in word:
            return ClueCheck(False, f'"{clue.strip()}" is part of "{word}" on the board')
        if word in normalized:
            return ClueCheck(False, f'"{word}" from the board is part of your clue')

    if strictness == VERY_STRICT:
        clue_root = word_root(normalized)
        for word in words:
            if clue_root == word_root(word):
                return ClueCheck(False, f'"{clue.strip()}" shares a root with "{word}" on the board')

    return ClueCheck(True)
