# src/suitcase_packer/packing/optimal.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from suitcase_packer.models import Suitcase

logger = logging.getLogger(__name__)


class SearchTimeoutError(RuntimeError):
    """Raised when the optimal search runs past its time limit."""

    def __init__(self, best: Suitcase, nodes: int, elapsed: float):
        self.best = best
        self.nodes = nodes
        self.elapsed = elapsed
        super().__init__(
            f"Optimal search exceeded time limit after {elapsed:.3f}s "
            f"({nodes} nodes, best area so far {best.area_packed()})"
        )


@dataclass
class SearchOutcome:
    """Best suitcase found plus search counters."""
    best: Suitcase
    nodes: int = 0
    pruned: int = 0
    elapsed: float = 0.0


class _BranchAndBound:
    def __init__(self, root: Suitcase, deadline: Optional[float]):
        self.deadline = deadline
        self.started = time.monotonic()
        self.nodes = 0
        self.pruned = 0
        # Best state seen anywhere in the tree, reported on timeout
        self.incumbent = root

    def _check_deadline(self) -> None:
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise SearchTimeoutError(
                self.incumbent, self.nodes, time.monotonic() - self.started
            )

    def solve(self, suitcase: Suitcase) -> Suitcase:
        self.nodes += 1
        if suitcase.area_packed() > self.incumbent.area_packed():
            self.incumbent = suitcase
        self._check_deadline()

        if not suitcase.can_pack_any():
            return suitcase

        # Packing nothing further is always an option
        best = suitcase
        best_area = suitcase.area_packed()

        # Optimistic bound: everything still unpacked also fits. Packing any
        # one item moves area between the two sums, so siblings share it.
        upper_bound = suitcase.area_packed() + suitcase.area_unpacked()

        for item in suitcase.packable_items():
            if upper_bound <= best_area:
                self.pruned += 1
                continue

            result = self.solve(suitcase.pack_item(item))
            # Strict comparison keeps the first maximum found in scan order
            if result.area_packed() > best_area:
                best = result
                best_area = result.area_packed()

        return best


def optimal_search(suitcase: Suitcase, time_limit: Optional[float] = None) -> SearchOutcome:
    """
    Exhaustive branch-and-bound search for the packing with the greatest area.

    Every packable item is tried as the next one at each level. A branch is
    skipped when its packed area plus all remaining unpacked area cannot beat
    the best area already found at that level.

    Args:
        suitcase: Initial state; never modified
        time_limit: Optional limit in seconds

    Returns:
        SearchOutcome with the best suitcase and node/prune counters

    Raises:
        SearchTimeoutError: time_limit passed before the search finished
    """
    if time_limit is not None and time_limit <= 0:
        raise ValueError(f"time_limit must be positive, got {time_limit}")

    deadline = None if time_limit is None else time.monotonic() + time_limit
    search = _BranchAndBound(suitcase, deadline)
    best = search.solve(suitcase)
    elapsed = time.monotonic() - search.started

    logger.debug(
        f"optimal: packed={best.num_items_packed()} "
        f"area={best.area_packed()}/{best.capacity_area()} "
        f"nodes={search.nodes} pruned={search.pruned} elapsed={elapsed:.4f}s"
    )
    return SearchOutcome(best=best, nodes=search.nodes, pruned=search.pruned, elapsed=elapsed)


def optimal_packing(suitcase: Suitcase, time_limit: Optional[float] = None) -> Suitcase:
    """Suitcase with the greatest packed area reachable from `suitcase`."""
    return optimal_search(suitcase, time_limit=time_limit).best
