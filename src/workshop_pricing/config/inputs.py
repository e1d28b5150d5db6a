"""Price / enrollment input conventions used by the UI sliders.

The engine never enforces these ranges; they only describe what the
calculator offers by default.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class InputRanges(BaseModel):
    """Slider ranges and starting values."""

    price_min: float = Field(default=500.0, ge=0, description="Lowest selectable price per student ($)")
    price_max: float = Field(default=3_000.0, gt=0, description="Highest selectable price per student ($)")
    price_step: float = Field(default=50.0, gt=0, description="Price slider increment ($)")
    default_price: float = Field(default=1_500.0, ge=0, description="Price shown on first load ($)")
    enrollment_min: int = Field(default=0, ge=0, description="Lowest selectable enrollment")
    enrollment_max: int = Field(default=20, ge=1, description="Highest selectable enrollment")
    default_enrollment: int = Field(default=8, ge=0, description="Enrollment shown on first load")
    chart_enrollment_points: list[int] = Field(
        default_factory=lambda: [0, 5, 10, 15, 20],
        description="Enrollment values sampled by the profit chart",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "InputRanges":
        if self.price_min > self.price_max:
            raise ValueError("price_min must not exceed price_max")
        if self.enrollment_min > self.enrollment_max:
            raise ValueError("enrollment_min must not exceed enrollment_max")
        if not self.price_min <= self.default_price <= self.price_max:
            raise ValueError("default_price must lie within [price_min, price_max]")
        if not self.enrollment_min <= self.default_enrollment <= self.enrollment_max:
            raise ValueError("default_enrollment must lie within [enrollment_min, enrollment_max]")
        if any(p < 0 for p in self.chart_enrollment_points):
            raise ValueError("chart_enrollment_points must be non-negative")
        return self
