# src/suitcase_packer/packing/rushed.py

from __future__ import annotations

import logging
from typing import Optional

from suitcase_packer.models import Item, Suitcase

logger = logging.getLogger(__name__)


def first_packable(suitcase: Suitcase) -> Optional[Item]:
    """First unpacked item, in scan order, that fits right now."""
    packable = suitcase.packable_items()
    return packable[0] if packable else None


def rushed_packing(suitcase: Suitcase) -> Suitcase:
    """
    First-fit packer that takes unpacked items in their current order.
    - Packs the first item that fits, then rescans from the start
    - Items that do not fit at their turn are skipped, never reordered
    - Stops when nothing left can be packed
    - Deterministic (no randomness)
    """
    current = suitcase
    item = first_packable(current)
    while item is not None:
        current = current.pack_item(item)
        item = first_packable(current)

    logger.debug(
        f"rushed: packed={current.num_items_packed()} "
        f"area={current.area_packed()}/{current.capacity_area()}"
    )
    return current
