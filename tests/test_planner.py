from __future__ import annotations

import pytest
from pydantic import ValidationError

from suitcase_packer.config import Settings
from suitcase_packer.io.schemas import ItemSchema, SuitcaseSchema
from suitcase_packer.models import Item, PackingResult, Suitcase
from suitcase_packer.planner import (
    best_strategy,
    build_plan,
    build_suitcase,
    compare_strategies,
    expand_items,
    run_strategy,
)

SETTINGS = Settings()


def test_expand_items_keeps_order_and_names() -> None:
    items = expand_items([
        ItemSchema(name="A", width=1, height=2),
        ItemSchema(name="B", width=3, height=1, quantity=3),
    ])
    assert [item.name for item in items] == ["A", "B_1", "B_2", "B_3"]
    assert all(item.width == 3 and item.height == 1 for item in items[1:])


def test_build_suitcase_from_dims_and_preset() -> None:
    items = [Item(name="A", width=1, height=1)]

    explicit = build_suitcase(SuitcaseSchema(width=7, height=3), items)
    assert (explicit.width, explicit.height) == (7, 3)
    assert explicit.get_unpacked_items() == tuple(items)

    preset = build_suitcase(SuitcaseSchema(preset="carry-on"), items)
    assert (preset.width, preset.height) == (6, 4)

    overridden = build_suitcase(SuitcaseSchema(preset="Carry-On", height=9), items)
    assert (overridden.width, overridden.height) == (6, 9)


def test_build_suitcase_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown suitcase preset"):
        build_suitcase(SuitcaseSchema(preset="steamer-trunk"), [])


def test_suitcase_schema_needs_dims_or_preset() -> None:
    with pytest.raises(ValidationError):
        SuitcaseSchema(width=3)


def test_run_strategy_result() -> None:
    suitcase = Suitcase.create(3, 3, [Item(name="L", width=2, height=2), Item(name="S", width=6, height=6)])
    result = run_strategy("Rushed", suitcase)

    assert result.strategy == "rushed"
    assert [item.name for item in result.packed] == ["L"]
    assert [item.name for item in result.unpacked] == ["S"]
    assert result.area_packed == 4
    assert result.elapsed_ms is not None and result.elapsed_ms >= 0


def test_compare_strategies_fails_fast_on_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown strategy"):
        compare_strategies(Suitcase.create(3, 3, []), ["greedy", "bogus"])


def test_compare_strategies_runs_each_name_once(monkeypatch) -> None:
    calls = []

    def counting_run_strategy(name, suitcase, time_limit=None):
        calls.append(name)
        return PackingResult.from_suitcase(name, suitcase)

    monkeypatch.setattr("suitcase_packer.planner.run_strategy", counting_run_strategy)
    results = compare_strategies(
        Suitcase.create(3, 3, []), ["greedy", " Greedy", "rushed", "GREEDY", "rushed"]
    )

    assert calls == ["greedy", "rushed"]
    assert list(results) == ["greedy", "rushed"]


def test_best_strategy_prefers_earliest_on_tie() -> None:
    results = {
        "rushed": PackingResult(strategy="rushed", area_packed=9),
        "greedy": PackingResult(strategy="greedy", area_packed=10),
        "optimal": PackingResult(strategy="optimal", area_packed=10),
    }
    assert best_strategy(results) == "greedy"
    assert best_strategy({}) is None


def test_build_plan_compares_all_strategies() -> None:
    request = {
        "suitcase": {"width": 3, "height": 3},
        "items": [
            {"name": "Small", "width": 1, "height": 1},
            {"name": "Large", "width": 3, "height": 3},
        ],
    }
    plan = build_plan(request, settings=SETTINGS)

    assert plan["suitcase"] == {"width": 3, "height": 3, "capacity_area": 9}
    assert plan["items_total"] == 2
    assert list(plan["results"]) == ["rushed", "greedy", "optimal"]
    assert plan["results"]["rushed"]["area_packed"] == 1
    assert plan["results"]["greedy"]["area_packed"] == 9
    assert plan["results"]["optimal"]["area_packed"] == 9
    assert plan["best_strategy"] == "greedy"
    assert plan["results"]["greedy"]["packed"] == [{"name": "Large", "width": 3, "height": 3}]


def test_build_plan_selected_strategies() -> None:
    request = {
        "suitcase": {"preset": "personal"},
        "items": [{"name": "A", "width": 2, "height": 2, "quantity": 2}],
        "strategies": ["optimal"],
    }
    plan = build_plan(request, settings=SETTINGS)

    assert list(plan["results"]) == ["optimal"]
    assert plan["results"]["optimal"]["num_items_packed"] == 2
    assert plan["best_strategy"] == "optimal"


def test_build_plan_item_limit() -> None:
    request = {
        "suitcase": {"width": 3, "height": 3},
        "items": [{"name": "A", "width": 1, "height": 1, "quantity": 11}],
    }
    with pytest.raises(ValueError, match="limit is 10"):
        build_plan(request, settings=Settings(max_items=10))


def test_build_plan_rejects_invalid_request() -> None:
    with pytest.raises(ValidationError):
        build_plan({"suitcase": {"width": 3, "height": 3}, "items": [{"name": "A", "width": 0, "height": 1}]},
                   settings=SETTINGS)
