"""Random scenario generation for exercising and cross-checking the strategies."""

from __future__ import annotations

import random
from typing import Optional

from suitcase_packer.models import Item, Suitcase


def random_items(
    n: int,
    max_width: int = 5,
    max_height: int = 5,
    rng: Optional[random.Random] = None,
) -> list[Item]:
    """
    Generate n items named Item0..Item{n-1} with uniform random dimensions.

    Args:
        n: Number of items
        max_width: Largest width (inclusive, at least 1)
        max_height: Largest height (inclusive, at least 1)
        rng: Source of randomness; pass a seeded Random for reproducible runs
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if max_width < 1 or max_height < 1:
        raise ValueError(f"max dimensions must be positive, got {max_width}x{max_height}")

    rng = rng or random.Random()
    return [
        Item(
            name=f"Item{i}",
            width=rng.randint(1, max_width),
            height=rng.randint(1, max_height),
        )
        for i in range(n)
    ]


def randomly_pack(suitcase: Suitcase, rng: Optional[random.Random] = None) -> Suitcase:
    """
    Pack a random subset of the unpacked items in a random order.

    Items are shuffled and a random-length prefix of them is attempted in
    turn, so the result ranges from no further packing to a full pass. Every
    step goes through can_pack_item(), so the result is always reachable.
    """
    rng = rng or random.Random()
    order = list(suitcase.get_unpacked_items())
    rng.shuffle(order)
    attempts = rng.randint(0, len(order))

    current = suitcase
    for item in order[:attempts]:
        if current.can_pack_item(item):
            current = current.pack_item(item)
    return current
