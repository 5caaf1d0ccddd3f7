"""Uniform random selection over word buckets."""

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with a uniform ``choice`` over a non-empty sequence."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


# OS entropy; no seeding, nothing to share between threads.
_SYSTEM_RANDOM: RandomSource = random.SystemRandom()


def select_random(
    seq: Optional[Sequence[T]],
    rng: Optional[RandomSource] = None,
) -> Optional[T]:
    """Pick one element of ``seq`` uniformly at random.

    Returns None when ``seq`` is None or empty instead of raising.
    """
    if not seq:
        return None
    return (rng or _SYSTEM_RANDOM).choice(seq)
