import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence


@dataclass
class RuleSettings:
    """Tunable game constants. Defaults match the physical games."""
    default_timer_tokens: int = 9
    default_clue_strictness: str = 'strict'
    max_word_swaps: int = 0
    max_scoreless_turns: int = 6
    default_dictionary_mode: str = 'friendly'
    clover_decoy_count: int = 1
    clover_first_attempt_score: int = 6
    clover_second_attempt_full_score: int = 4

    @classmethod
    def from_config(cls, config) -> 'RuleSettings':
        return cls(
            default_timer_tokens=int(config.get('DEFAULT_TIMER_TOKENS', 9)),
            default_clue_strictness=config.get('DEFAULT_CLUE_STRICTNESS', 'strict'),
            max_word_swaps=int(config.get('MAX_WORD_SWAPS', 0)),
            max_scoreless_turns=int(config.get('MAX_SCORELESS_TURNS', 6)),
            default_dictionary_mode=config.get('DEFAULT_DICTIONARY_MODE', 'friendly'),
            clover_decoy_count=int(config.get('CLOVER_DECOY_COUNT', 1)),
            clover_first_attempt_score=int(config.get('CLOVER_FIRST_ATTEMPT_SCORE', 6)),
            clover_second_attempt_full_score=int(config.get('CLOVER_SECOND_ATTEMPT_FULL_SCORE', 4)),
        )


@dataclass
class MoveContext:
    """Everything an engine handler may consult besides the snapshot."""
    seat: int
    payload: Dict[str, Any]
    rng: random.Random
    settings: RuleSettings = field(default_factory=RuleSettings)
    is_valid_word: Callable[[str], bool] = lambda word: True
    word_pool: Sequence[str] = ()


def as_index(value, size: int) -> Optional[int]:
    """Return ``value`` as an index into a sequence of ``size``, or None."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0 or value >= size:
        return None
    return value
