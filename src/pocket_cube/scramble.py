import logging
import random
from typing import List, Optional, Tuple

from .app_types import Move
from .config import SCRAMBLE_MAX_MOVES
from .cube_state import CubeState, format_moves

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def random_moves(count: int, rng: Optional[random.Random] = None) -> List[Move]:
    """ Return `count` moves drawn uniformly from the six primitive turns. """
    if count < 0:
        raise ValueError(f"move count must be >= 0, got {count}")
    rng = rng or random.Random()
    available = list(Move)
    return [rng.choice(available) for _ in range(count)]


def scramble(state: CubeState,
             max_moves: int = SCRAMBLE_MAX_MOVES,
             rng: Optional[random.Random] = None) -> Tuple[CubeState, List[Move]]:
    """
    Let a monkey play with the cube: apply a random number of random moves,
    the count drawn from [0, max_moves). Returns (new state, moves applied).
    """
    if max_moves < 0:
        raise ValueError(f"max_moves must be >= 0, got {max_moves}")
    rng = rng or random.Random()
    count = rng.randrange(max_moves) if max_moves else 0
    moves = random_moves(count, rng)
    logger.info("Scramble (%d moves): %s", count, format_moves(moves))
    return state.apply_sequence(moves), moves
