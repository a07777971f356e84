from __future__ import annotations

from suitcase_packer.models import Suitcase


def compute_metrics(suitcase: Suitcase) -> tuple[int, int, float]:
    """Return (area_packed, capacity_area, fill_rate)."""
    area_packed = suitcase.area_packed()
    capacity_area = suitcase.capacity_area()
    # Dimensions are positive and packed area never exceeds capacity
    return area_packed, capacity_area, area_packed / capacity_area
