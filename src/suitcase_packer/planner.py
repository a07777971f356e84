"""Build packing plans: run strategies on a request and compare their outcomes."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Optional

from suitcase_packer.config import Settings, get_settings
from suitcase_packer.io.schemas import (
    ItemSchema,
    PackingPlanSchema,
    PackingRequestSchema,
    SuitcaseSchema,
    SuitcaseSummarySchema,
)
from suitcase_packer.models import Item, PackingResult, Suitcase
from suitcase_packer.packing.optimal import optimal_packing
from suitcase_packer.packing.registry import get_strategy
from suitcase_packer.presets import get_suitcase_dims

logger = logging.getLogger(__name__)


def expand_items(lines: Iterable[ItemSchema]) -> list[Item]:
    """
    Turn request item lines into Items, preserving order.

    A line with quantity q > 1 becomes q items named name_1..name_q.
    """
    items: list[Item] = []
    for line in lines:
        if line.quantity == 1:
            items.append(Item(name=line.name, width=line.width, height=line.height))
            continue
        for i in range(line.quantity):
            items.append(Item(name=f"{line.name}_{i + 1}", width=line.width, height=line.height))
    return items


def build_suitcase(schema: SuitcaseSchema, items: list[Item]) -> Suitcase:
    dims: dict[str, int] = {}
    if schema.preset is not None:
        dims.update(get_suitcase_dims(schema.preset))
    # Explicit dimensions override the preset
    if schema.width is not None:
        dims["width"] = schema.width
    if schema.height is not None:
        dims["height"] = schema.height
    return Suitcase.create(dims["width"], dims["height"], items)


def run_strategy(name: str, suitcase: Suitcase, time_limit: Optional[float] = None) -> PackingResult:
    """Run one strategy by name and time it."""
    strategy = get_strategy(name)
    key = name.strip().lower()

    started = time.perf_counter()
    if key == "optimal" and time_limit is not None:
        packed = optimal_packing(suitcase, time_limit=time_limit)
    else:
        packed = strategy(suitcase)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    return PackingResult.from_suitcase(key, packed, elapsed_ms=elapsed_ms)


def compare_strategies(
    suitcase: Suitcase,
    names: Iterable[str],
    time_limit: Optional[float] = None,
) -> dict[str, PackingResult]:
    """Run each named strategy once on the same initial suitcase, in first-seen order."""
    names = list(names)
    # Fail on a bad name before spending time on the others
    for name in names:
        get_strategy(name)
    names = list(dict.fromkeys(name.strip().lower() for name in names))

    results: dict[str, PackingResult] = {}
    for name in names:
        result = run_strategy(name, suitcase, time_limit=time_limit)
        results[result.strategy] = result
    return results


def best_strategy(results: dict[str, PackingResult]) -> Optional[str]:
    """Strategy with the greatest packed area; ties go to the earliest one."""
    best_name: Optional[str] = None
    best_area = -1
    for name, result in results.items():
        if result.area_packed > best_area:
            best_name = name
            best_area = result.area_packed
    return best_name


def build_plan(
    request: dict[str, Any] | PackingRequestSchema,
    settings: Optional[Settings] = None,
) -> dict[str, Any]:
    """
    Build a plan from a packing request.

    Args:
        request: Request dict or already-validated PackingRequestSchema
        settings: Defaults for time limit and item cap; read from env if omitted

    Returns:
        Plan dict with suitcase, items_total, per-strategy results and best_strategy

    Raises:
        ValueError: invalid request, unknown preset/strategy, or too many items
        SearchTimeoutError: optimal search ran past its time limit
    """
    settings = settings or get_settings()
    if not isinstance(request, PackingRequestSchema):
        request = PackingRequestSchema.model_validate(request)

    total = sum(line.quantity for line in request.items)
    if total > settings.max_items:
        raise ValueError(f"Request has {total} items; the limit is {settings.max_items}")

    items = expand_items(request.items)
    suitcase = build_suitcase(request.suitcase, items)
    time_limit = request.time_limit if request.time_limit is not None else settings.optimal_time_limit

    results = compare_strategies(suitcase, request.strategies, time_limit=time_limit)
    best = best_strategy(results)

    logger.debug(
        f"plan: suitcase={suitcase.width}x{suitcase.height} items={len(items)} "
        f"strategies={list(results)} best={best}"
    )

    plan = PackingPlanSchema(
        suitcase=SuitcaseSummarySchema(
            width=suitcase.width,
            height=suitcase.height,
            capacity_area=suitcase.capacity_area(),
        ),
        items_total=len(items),
        results=results,
        best_strategy=best,
    )
    return plan.model_dump(mode="json")
