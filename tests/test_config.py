from __future__ import annotations

import pytest

from suitcase_packer.config import DEFAULT_MAX_ITEMS, get_settings

ENV_VARS = ("SUITCASE_LOG_LEVEL", "SUITCASE_OPTIMAL_TIME_LIMIT", "SUITCASE_MAX_ITEMS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.optimal_time_limit is None
    assert settings.max_items == DEFAULT_MAX_ITEMS


def test_values_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUITCASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SUITCASE_OPTIMAL_TIME_LIMIT", "2.5")
    monkeypatch.setenv("SUITCASE_MAX_ITEMS", "40")

    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.optimal_time_limit == 2.5
    assert settings.max_items == 40


@pytest.mark.parametrize(
    "name,value",
    [
        ("SUITCASE_OPTIMAL_TIME_LIMIT", "soon"),
        ("SUITCASE_OPTIMAL_TIME_LIMIT", "0"),
        ("SUITCASE_MAX_ITEMS", "many"),
        ("SUITCASE_MAX_ITEMS", "0"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        get_settings()
