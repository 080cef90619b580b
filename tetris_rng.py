"""Deterministic xorshift32 randomizer module"""
from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
FALLBACK_SEED = 0x9E3779B9  # zero state would emit zeros forever


def sanitize_seed(seed: Optional[int]) -> int:
    """Clamp a seed to an unsigned 32-bit, non-zero state."""
    if seed is None:
        return FALLBACK_SEED
    state = int(seed) & MASK32
    return state or FALLBACK_SEED


def xorshift32(state: int) -> int:
    """Advance a 32-bit xorshift state once (shifts 13, 17, 5)."""
    x = state & MASK32
    x ^= (x << 13) & MASK32
    x ^= x >> 17
    x ^= (x << 5) & MASK32
    return x


def next_random(seed: int) -> Tuple[float, int]:
    """Pure draw: return (value in [0, 1), new_seed)."""
    state = xorshift32(sanitize_seed(seed))
    return state / 2.0 ** 32, state


class XorShiftRandom:
    """
    Seeded xorshift32 generator owned by a single game.

    All randomness in a game flows through one instance that is advanced in
    place on every draw, so two instances built from the same seed produce
    identical streams.
    """

    def __init__(self, seed: Optional[int] = None):
        self.state = sanitize_seed(seed)

    def next(self) -> float:
        value, self.state = next_random(self.state)
        return value

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randrange() needs a positive bound")
        return int(self.next() * n)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randrange(len(seq))]

    def __repr__(self):
        return f"XorShiftRandom(state=0x{self.state:08X})"
