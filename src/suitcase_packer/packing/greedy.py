# src/suitcase_packer/packing/greedy.py

from __future__ import annotations

import logging
from typing import Optional

from suitcase_packer.models import Item, Suitcase

logger = logging.getLogger(__name__)


def largest_packable(suitcase: Suitcase) -> Optional[Item]:
    """
    Packable item with the greatest area.

    Only a strictly larger area replaces the current pick, so ties go to the
    item met first in unpacked order.
    """
    largest: Optional[Item] = None
    for item in suitcase.packable_items():
        if largest is None or item.area > largest.area:
            largest = item
    return largest


def greedy_packing(suitcase: Suitcase) -> Suitcase:
    """Repeatedly pack the largest item that still fits."""
    current = suitcase
    item = largest_packable(current)
    while item is not None:
        current = current.pack_item(item)
        item = largest_packable(current)

    logger.debug(
        f"greedy: packed={current.num_items_packed()} "
        f"area={current.area_packed()}/{current.capacity_area()}"
    )
    return current
