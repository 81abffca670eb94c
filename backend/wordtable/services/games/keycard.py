import random
from typing import List, Optional, Set

from .errors import InvariantViolation
from .state import AGENT, ASSASSIN, BYSTANDER, KeyCardSide

BOARD_WORDS = 25
SHARED_AGENTS = 3
EXCLUSIVE_AGENTS = 6
AGENTS_PER_SIDE = SHARED_AGENTS + EXCLUSIVE_AGENTS
ASSASSINS_PER_SIDE = 3
UNIQUE_AGENTS = SHARED_AGENTS + 2 * EXCLUSIVE_AGENTS


def generate_key_card(rng: Optional[random.Random] = None) -> List[KeyCardSide]:
    """Deal the two-sided Duet key card.

    Each side gets 9 agents and 3 assassins: 3 agents and 1 assassin are
    shared, one assassin is an agent for the partner and one is a bystander
    for the partner. 18 of the 25 indices are used; the rest are bystanders
    on both sides.
    """
    rng = rng or random.SystemRandom()
    indices = list(range(BOARD_WORDS))
    rng.shuffle(indices)

    shared_agents = indices[0:3]
    shared_assassin = indices[3]
    exclusive = [indices[4:10], indices[10:16]]
    bystander_assassins = [indices[16], indices[17]]

    sides = []
    for seat in (0, 1):
        partner = 1 - seat
        sides.append(KeyCardSide(
            agents=shared_agents + exclusive[seat],
            assassins=[shared_assassin, exclusive[partner][0], bystander_assassins[seat]],
        ))
    return sides


def card_type_for(key_card: List[KeyCardSide], seat: int, index: int) -> str:
    side = key_card[seat]
    if index in side.agents:
        return AGENT
    if index in side.assassins:
        return ASSASSIN
    return BYSTANDER


def unique_agents(key_card: List[KeyCardSide]) -> Set[int]:
    return set(key_card[0].agents) | set(key_card[1].agents)


def validate_key_card(key_card: List[KeyCardSide]) -> None:
    """Raise InvariantViolation unless ``key_card`` is a legal Duet key."""
    if len(key_card) != 2:
        raise InvariantViolation('Key card must have exactly two sides')
    for seat, side in enumerate(key_card):
        agents, assassins = set(side.agents), set(side.assassins)
        if len(side.agents) != AGENTS_PER_SIDE or len(agents) != AGENTS_PER_SIDE:
            raise InvariantViolation(f'Key side {seat} must have {AGENTS_PER_SIDE} agents')
        if len(side.assassins) != ASSASSINS_PER_SIDE or len(assassins) != ASSASSINS_PER_SIDE:
            raise InvariantViolation(f'Key side {seat} must have {ASSASSINS_PER_SIDE} assassins')
        if agents & assassins:
            raise InvariantViolation(f'Key side {seat} marks a word as both agent and assassin')
        if any(i < 0 or i >= BOARD_WORDS for i in agents | assassins):
            raise InvariantViolation(f'Key side {seat} references a word off the board')

    a0, a1 = set(key_card[0].agents), set(key_card[1].agents)
    s0, s1 = set(key_card[0].assassins), set(key_card[1].assassins)
    if len(a0 & a1) != SHARED_AGENTS:
        raise InvariantViolation('Key card must share exactly 3 agents')
    if len(s0 & s1) != 1:
        raise InvariantViolation('Key card must share exactly 1 assassin')
    if len(a0 | a1) != UNIQUE_AGENTS:
        raise InvariantViolation('Key card must have 15 unique agents')
    for mine, partner_agents, partner_assassins in ((s0, a1, s1), (s1, a0, s0)):
        own_only = mine - partner_assassins
        if len(own_only & partner_agents) != 1 or len(own_only - partner_agents) != 1:
            raise InvariantViolation('Each side needs one assassin that is a partner agent and one that is a partner bystander')
