from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from suitcase_packer.config import get_settings
from suitcase_packer.generators import random_items
from suitcase_packer.packing.optimal import SearchTimeoutError
from suitcase_packer.packing.registry import STRATEGY_NAMES
from suitcase_packer.planner import build_plan

logger = logging.getLogger(__name__)


def load_request(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at the top level")
    return data


def random_request(n: int, width: int, height: int, seed: Optional[int] = None) -> dict[str, Any]:
    """Request for a random scenario: n random items in a width x height suitcase."""
    rng = random.Random(seed)
    items = random_items(n, rng=rng)
    return {
        "suitcase": {"width": width, "height": height},
        "items": [item.model_dump() for item in items],
    }


def write_plan(plan: dict, path: str = "plan.json") -> None:
    """
    Write a plan dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"write_plan: writing to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, sort_keys=True)


def summarize(plan: dict[str, Any]) -> dict[str, Any]:
    return {
        "best_strategy": plan["best_strategy"],
        "capacity_area": plan["suitcase"]["capacity_area"],
        "items_total": plan["items_total"],
        "strategies": {
            name: {
                "area_packed": result["area_packed"],
                "num_items_packed": result["num_items_packed"],
                "fill_rate": round(result["fill_rate"], 4),
            }
            for name, result in plan["results"].items()
        },
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suitcase-packer",
        description="Pack items into a suitcase area budget using rushed, greedy and optimal strategies",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="Input request JSON file")
    source.add_argument("--random", type=int, metavar="N", help="Generate N random items instead of reading --input")
    parser.add_argument("--width", type=int, default=6, help="Suitcase width for --random (default: 6)")
    parser.add_argument("--height", type=int, default=6, help="Suitcase height for --random (default: 6)")
    parser.add_argument("--seed", type=int, help="Random seed for --random")
    parser.add_argument("--output", help="Output plan JSON file")
    parser.add_argument(
        "--strategy",
        action="append",
        choices=list(STRATEGY_NAMES),
        help="Strategy to run; repeat for several (default: all)",
    )
    parser.add_argument("--time-limit", type=float, help="Optimal search limit in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.time_limit is not None and args.time_limit <= 0:
        parser.error("--time-limit must be positive")

    try:
        if args.input:
            request = load_request(Path(args.input))
        else:
            request = random_request(args.random, args.width, args.height, seed=args.seed)

        if args.strategy:
            request["strategies"] = args.strategy
        if args.time_limit is not None:
            request["time_limit"] = args.time_limit

        plan = build_plan(request, settings=settings)
    except OSError as e:
        parser.error(f"cannot read input: {e}")
    except ValidationError as e:
        parser.error(f"invalid request: {e}")
    except SearchTimeoutError as e:
        parser.error(str(e))
    except ValueError as e:
        parser.error(str(e))

    if args.output:
        write_plan(plan, args.output)
        logger.info(f"Plan written to {Path(args.output).resolve()}")

    print(json.dumps(summarize(plan), indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
