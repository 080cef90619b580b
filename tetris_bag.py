"""7-bag randomizer: every piece type once per bag, shuffled by the game's PRNG"""
from collections import deque
from typing import Deque, List

from tetris_rng import XorShiftRandom
from tetris_shapes import PIECES

BAG_SIZE = len(PIECES)


def generate_bag(rng: XorShiftRandom) -> List[str]:
    """Return a fresh permutation of all piece types.

    Shuffles in place from the last index down to 1, swapping position i with
    a position drawn uniformly from [0, i]. Consumes exactly BAG_SIZE - 1 draws.
    """
    bag = list(PIECES)
    for i in range(len(bag) - 1, 0, -1):
        j = int(rng.next() * (i + 1))
        bag[i], bag[j] = bag[j], bag[i]
    return bag


def refill_queue(queue: Deque[str], rng: XorShiftRandom) -> int:
    """Append whole bags until the queue holds at least one full bag.

    Returns the number of bags appended.
    """
    added = 0
    while len(queue) < BAG_SIZE:
        queue.extend(generate_bag(rng))
        added += 1
    return added


def new_queue(rng: XorShiftRandom) -> Deque[str]:
    q: Deque[str] = deque()
    refill_queue(q, rng)
    return q
