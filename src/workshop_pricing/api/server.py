"""FastAPI server — HTTP access to the workshop pricing calculator.

Run with:
    uvicorn workshop_pricing.api.server:app --reload --port 8000

Or:
    python -m workshop_pricing.api.server

Endpoints:
    GET    /inputs                  — slider ranges and starting values
    GET    /costs/{kind}            — list fixed or variable cost items
    POST   /costs/{kind}            — add a cost item
    PUT    /costs/{kind}            — replace the whole list
    PATCH  /costs/{kind}/{item_id}  — rename and/or re-price an item
    DELETE /costs/{kind}/{item_id}  — remove an item
    POST   /calculate               — financial summary + narrative
    POST   /curve                   — profit curve across enrollments
    POST   /scenarios/snapshot      — capture the current scenario
    POST   /scenarios/restore       — load a captured scenario
    POST   /reset                   — back to the default cost items
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from workshop_pricing import __version__
from workshop_pricing.api.narrative import generate_narrative
from workshop_pricing.config.costs import CostItem, CostKind
from workshop_pricing.config.inputs import InputRanges
from workshop_pricing.config.scenario import SavedScenario
from workshop_pricing.engine.curve import build_profit_curve
from workshop_pricing.models.results import CostError, CostResult
from workshop_pricing.store.cost_store import CostStore
from workshop_pricing.store.scenarios import restore_scenario, snapshot_scenario

logger = logging.getLogger(__name__)

# starlette renamed its 422 constant; use the number
HTTP_422_UNPROCESSABLE = 422


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Workshop Pricing Calculator API",
    version=__version__,
    description=(
        "Edit fixed and variable cost items for a workshop and get revenue, "
        "costs, profit, margin, and break-even for a price and enrollment."
    ),
)

# The calculator UI is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_store = CostStore()
_input_ranges = InputRanges()


def get_store() -> CostStore:
    """The process-wide store. Tests override this dependency."""
    return _store


def get_input_ranges() -> InputRanges:
    return _input_ranges


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class AddCostRequest(BaseModel):
    """Body for POST /costs/{kind}. Validation happens in the store."""
    name: str | None = None
    cost: float | str | None = None


class UpdateCostRequest(BaseModel):
    """Body for PATCH /costs/{kind}/{item_id}. Only fields sent are applied."""
    name: str | None = None
    cost: float | str | None = Field(
        default=None,
        description="Unreadable values become 0 and negatives clamp to 0",
    )


class CalculateRequest(BaseModel):
    """Body for POST /calculate. Missing fields use the input defaults."""
    price: float | None = None
    enrollment: int | None = Field(default=None, ge=0)


class CurveRequest(BaseModel):
    """Body for POST /curve."""
    price: float | None = None
    enrollments: list[float] | None = Field(
        default=None,
        description="Enrollment points to sample. Defaults to the chart points.",
    )


class SnapshotRequest(BaseModel):
    """Body for POST /scenarios/snapshot."""
    name: str
    price: float | None = None
    enrollment: int | None = Field(default=None, ge=0)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

_ERROR_STATUS: dict[CostError, int] = {
    CostError.EMPTY_NAME: HTTP_422_UNPROCESSABLE,
    CostError.INVALID_AMOUNT: HTTP_422_UNPROCESSABLE,
    CostError.LAST_ITEM_PROTECTED: status.HTTP_409_CONFLICT,
    CostError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _failure(result: CostResult) -> JSONResponse:
    """Turn a refused mutation into an error response."""
    logger.info("Cost mutation refused: %s", result.message)
    return JSONResponse(
        status_code=_ERROR_STATUS[result.error],
        content={"error": result.error.value, "message": result.message},
    )


def _items(store: CostStore, kind: CostKind) -> list[dict[str, Any]]:
    return [item.model_dump() for item in store.get_list(kind).get_all()]


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Workshop Pricing Calculator API",
        "version": __version__,
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/inputs")
def get_inputs(ranges: InputRanges = Depends(get_input_ranges)):
    """Price / enrollment slider ranges and their starting values."""
    return ranges.model_dump()


@app.get("/costs/{kind}")
def list_costs(kind: CostKind, store: CostStore = Depends(get_store)):
    return {"kind": kind.value, "items": _items(store, kind)}


@app.post("/costs/{kind}", status_code=status.HTTP_201_CREATED)
def add_cost(kind: CostKind, req: AddCostRequest, store: CostStore = Depends(get_store)):
    """Add a cost item. Blank names and negative or non-numeric amounts are refused."""
    result = store.get_list(kind).add(req.name, req.cost)
    if not result.success:
        return _failure(result)
    return result.cost.model_dump()


@app.put("/costs/{kind}")
def replace_costs(kind: CostKind, items: list[CostItem], store: CostStore = Depends(get_store)):
    """Replace the whole list as given (no business-rule checks)."""
    cost_list = store.get_list(kind)
    cost_list.set_all(items)
    return {"kind": kind.value, "items": _items(store, kind), "next_id": cost_list.next_id}


@app.patch("/costs/{kind}/{item_id}")
def update_cost(
    kind: CostKind,
    item_id: int,
    req: UpdateCostRequest,
    store: CostStore = Depends(get_store),
):
    """Rename and/or re-price one item. Names are stored as sent."""
    cost_list = store.get_list(kind)
    if "name" in req.model_fields_set and req.name is None:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={"error": "invalid_name", "message": "Cost name must be a string"},
        )
    if "name" in req.model_fields_set:
        result = cost_list.update_name(item_id, req.name)
        if not result.success:
            return _failure(result)
    if "cost" in req.model_fields_set:
        result = cost_list.update_amount(item_id, req.cost)
        if not result.success:
            return _failure(result)
    if not req.model_fields_set:
        # Nothing to change, but the id must still exist
        if not any(item.id == item_id for item in cost_list.get_all()):
            return _failure(CostResult.fail(CostError.NOT_FOUND, f"{kind.value.capitalize()} cost not found"))

    return next(item for item in _items(store, kind) if item["id"] == item_id)


@app.delete("/costs/{kind}/{item_id}")
def remove_cost(kind: CostKind, item_id: int, store: CostStore = Depends(get_store)):
    result = store.get_list(kind).remove(item_id)
    if not result.success:
        return _failure(result)
    return {"kind": kind.value, "items": _items(store, kind)}


@app.post("/calculate")
def calculate(
    req: CalculateRequest,
    store: CostStore = Depends(get_store),
    ranges: InputRanges = Depends(get_input_ranges),
):
    """Financial summary for the current cost lists.

    An unreachable break-even comes back as ``break_even_point: null`` with
    ``break_even_reachable: false``.
    """
    price = req.price if req.price is not None else ranges.default_price
    enrollment = req.enrollment if req.enrollment is not None else ranges.default_enrollment
    summary = store.calculate(price, enrollment)
    return {
        "summary": summary.model_dump(mode="json"),
        "narrative": generate_narrative(summary),
    }


@app.post("/curve")
def profit_curve(
    req: CurveRequest,
    store: CostStore = Depends(get_store),
    ranges: InputRanges = Depends(get_input_ranges),
):
    price = req.price if req.price is not None else ranges.default_price
    enrollments = req.enrollments if req.enrollments is not None else ranges.chart_enrollment_points
    curve = build_profit_curve(price, store.fixed.get_all(), store.variable.get_all(), enrollments)
    return curve.model_dump()


@app.post("/scenarios/snapshot")
def snapshot(
    req: SnapshotRequest,
    store: CostStore = Depends(get_store),
    ranges: InputRanges = Depends(get_input_ranges),
):
    """Capture the current scenario for the caller to store."""
    price = req.price if req.price is not None else ranges.default_price
    enrollment = req.enrollment if req.enrollment is not None else ranges.default_enrollment
    try:
        scenario = snapshot_scenario(store, req.name, price, enrollment)
    except ValueError as exc:
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={"error": "invalid_scenario", "message": str(exc)},
        )
    return scenario.model_dump(mode="json")


@app.post("/scenarios/restore")
def restore(scenario: SavedScenario, store: CostStore = Depends(get_store)):
    """Load a captured scenario's cost lists; returns the recomputed summary."""
    inputs = restore_scenario(store, scenario)
    summary = store.calculate(inputs.price, inputs.enrollment)
    return {
        "inputs": inputs.model_dump(mode="json"),
        "summary": summary.model_dump(mode="json"),
    }


@app.post("/reset")
def reset(store: CostStore = Depends(get_store)):
    store.reset()
    return {
        "fixed": _items(store, CostKind.FIXED),
        "variable": _items(store, CostKind.VARIABLE),
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "workshop_pricing.api.server:app",
        host="0.0.0.0",
        port=8000,
        log_level="info",
    )


if __name__ == "__main__":
    main()
