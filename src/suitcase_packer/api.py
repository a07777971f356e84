"""FastAPI endpoint for the suitcase packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from suitcase_packer.config import get_settings
from suitcase_packer.io.schemas import PackingRequestSchema
from suitcase_packer.packing.optimal import SearchTimeoutError
from suitcase_packer.planner import build_plan

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Suitcase Packer API",
    description="Area-budget suitcase packing with rushed, greedy and optimal strategies",
)


# Sync endpoint: the search is CPU-bound, so FastAPI runs it in its threadpool
@app.post("/pack")
def pack(request: PackingRequestSchema) -> dict[str, Any]:
    """
    Run the requested strategies and return the plan.

    Input (request body):
        {
            "suitcase": { "width": 10, "height": 10 },
            "items": [ { "name": "A", "width": 4, "height": 4, "quantity": 2 } ],
            "strategies": ["greedy", "optimal"]
        }
    """
    try:
        settings = get_settings()
        plan = build_plan(request, settings=settings)
    except SearchTimeoutError as e:
        logger.warning(f"/pack search timed out: {e}")
        raise HTTPException(status_code=504, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    areas = {name: result["area_packed"] for name, result in plan["results"].items()}
    logger.info(
        f"items={plan['items_total']}, capacity_area={plan['suitcase']['capacity_area']}, "
        f"areas={areas}, best_strategy={plan['best_strategy']}"
    )
    return plan


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    settings = get_settings()
    return {
        "ok": True,
        "optimal_time_limit": settings.optimal_time_limit,
    }
