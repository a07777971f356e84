# src/suitcase_packer/presets.py
from __future__ import annotations

# Suitcase sizes in packing grid units (width x height).
SUITCASE_PRESETS: dict[str, dict[str, int]] = {
    "PERSONAL": {"width": 4, "height": 3},
    "CARRY-ON": {"width": 6, "height": 4},
    "MEDIUM":   {"width": 8, "height": 5},
    "LARGE":    {"width": 10, "height": 6},
    "CABIN":    {"width": 6, "height": 4},  # alias
}


def get_suitcase_dims(preset: str) -> dict[str, int]:
    key = preset.strip().upper()
    if key not in SUITCASE_PRESETS:
        valid = sorted(k.lower() for k in SUITCASE_PRESETS)
        raise ValueError(f"Unknown suitcase preset '{preset}'. Valid: {valid}")
    return dict(SUITCASE_PRESETS[key])
