"""Strategy lookup by name."""

from __future__ import annotations

from typing import Callable

from suitcase_packer.models import Suitcase
from suitcase_packer.packing.greedy import greedy_packing
from suitcase_packer.packing.optimal import optimal_packing
from suitcase_packer.packing.rushed import rushed_packing

Strategy = Callable[[Suitcase], Suitcase]

STRATEGIES: dict[str, Strategy] = {
    "rushed": rushed_packing,
    "greedy": greedy_packing,
    "optimal": optimal_packing,
}

STRATEGY_NAMES: tuple[str, ...] = tuple(STRATEGIES)


def get_strategy(name: str) -> Strategy:
    key = name.strip().lower()
    if key not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Valid: {list(STRATEGY_NAMES)}")
    return STRATEGIES[key]
