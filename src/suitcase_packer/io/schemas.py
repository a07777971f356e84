"""Data schemas for input/output operations."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from suitcase_packer.models import PackingResult
from suitcase_packer.packing.registry import STRATEGY_NAMES


class ItemSchema(BaseModel):
    """Schema for an item line; quantity > 1 expands into several items."""
    name: str = Field(min_length=1, description="Name of the item")
    width: int = Field(gt=0, description="Width of the item")
    height: int = Field(gt=0, description="Height of the item")
    quantity: int = Field(default=1, ge=1, description="Number of identical items")


class SuitcaseSchema(BaseModel):
    """Schema for a suitcase: explicit dimensions or a named preset."""
    width: Optional[int] = Field(None, gt=0, description="Width of the suitcase")
    height: Optional[int] = Field(None, gt=0, description="Height of the suitcase")
    preset: Optional[str] = Field(None, description="Preset name, e.g. carry-on")

    @model_validator(mode="after")
    def dims_or_preset(self) -> "SuitcaseSchema":
        if self.preset is None and (self.width is None or self.height is None):
            raise ValueError("suitcase needs either 'preset' or both 'width' and 'height'")
        return self


class PackingRequestSchema(BaseModel):
    """Schema for a packing request."""
    suitcase: SuitcaseSchema
    items: List[ItemSchema] = Field(default_factory=list, description="Items to pack, in scan order")
    strategies: List[str] = Field(
        default_factory=lambda: list(STRATEGY_NAMES),
        min_length=1,
        description="Strategies to run, in report order",
    )
    time_limit: Optional[float] = Field(None, gt=0, description="Optimal search limit in seconds")


class SuitcaseSummarySchema(BaseModel):
    width: int
    height: int
    capacity_area: int


class PackingPlanSchema(BaseModel):
    """Schema for a packing plan."""
    suitcase: SuitcaseSummarySchema
    items_total: int = Field(ge=0)
    results: Dict[str, PackingResult]
    best_strategy: Optional[str] = Field(None, description="Strategy with the greatest packed area")
