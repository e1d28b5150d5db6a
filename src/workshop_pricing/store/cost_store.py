"""Cost lists — the mutable state feeding the engine.

A ``CostList`` owns one ordered list of ``CostItem`` plus its next-id
counter; a ``CostStore`` pairs a fixed and a variable list.  Mutators never
raise for business-rule violations: they return a ``CostResult`` whose
``error`` says what was refused.

Validation is deliberately asymmetric:
  - ``add`` rejects blank names and negative / non-numeric amounts.
  - ``update_name`` stores the name as given (no trim, no empty check).
  - ``update_amount`` coerces: unparseable input becomes 0, negatives clamp to 0.
"""

from __future__ import annotations

import logging
import math
import re
import threading
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from workshop_pricing.config.costs import CostItem, CostKind, default_costs
from workshop_pricing.engine.calculations import calculate_financials
from workshop_pricing.models.results import CostError, CostResult, FinancialSummary

logger = logging.getLogger(__name__)

EMPTY_NAME_MESSAGE = "Cost name cannot be empty"
INVALID_AMOUNT_MESSAGE = "Cost amount must be a non-negative number"

# Decimal number as a browser spells it: ``Infinity`` but not ``inf``, no underscores.
_NUMBER = r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_LEADING_NUMBER = re.compile(rf"^{_NUMBER}")
_WHOLE_NUMBER = re.compile(rf"^{_NUMBER}$")


def _number_to_float(value: int | float) -> float:
    """``float(value)``, with ints beyond float range becoming ±inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _text_to_float(text: str) -> float:
    return float(text.replace("Infinity", "inf"))


def parse_amount(value: Any) -> float:
    """Coerce ``value`` to a non-negative amount; anything unreadable is 0.

    Numbers are taken as-is; strings are read up to the first character that
    cannot continue a number (``"12.5 each"`` → 12.5).  NaN and negatives
    both end up as 0.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = _number_to_float(value)
    else:
        match = _LEADING_NUMBER.match(str(value).strip()) if value is not None else None
        parsed = 0.0 if match is None else _text_to_float(match.group(0))
    if math.isnan(parsed):
        parsed = 0.0
    return max(0.0, parsed)


def _validated_amount(cost: Any) -> float | None:
    """``cost`` as a float, or None when it is not a non-negative number.

    Strings must be a whole number in browser spelling (``" 12.5 "``,
    ``"1e3"``, ``"Infinity"``); ``"inf"`` or ``"1_000"`` are not numbers.
    """
    if isinstance(cost, (int, float)):
        amount = _number_to_float(cost)
    elif isinstance(cost, str) and _WHOLE_NUMBER.match(cost.strip()):
        amount = _text_to_float(cost.strip())
    else:
        return None
    if math.isnan(amount) or amount < 0:
        return None
    return amount


class CostList:
    """One ordered, id-keyed list of cost items."""

    def __init__(self, kind: CostKind | str, items: Iterable[CostItem | Mapping[str, Any]] | None = None) -> None:
        self.kind = CostKind(kind)
        self._lock = threading.RLock()
        self._items: list[CostItem] = []
        self._next_id = 1
        self.set_all(default_costs(self.kind) if items is None else items)

    # ── Reads ──────────────────────────────────────────────────────────

    def get_all(self) -> list[CostItem]:
        """Copies of the current items, in list order."""
        with self._lock:
            return [item.model_copy() for item in self._items]

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _find(self, item_id: int) -> CostItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _not_found(self, item_id: int) -> CostResult:
        logger.info("%s cost %s not found", self.kind.value, item_id)
        return CostResult.fail(CostError.NOT_FOUND, f"{self.kind.value.capitalize()} cost not found")

    # ── Mutations ──────────────────────────────────────────────────────

    def add(self, name: str | None, cost: float | str | None) -> CostResult:
        """Append a new item with the next id and a trimmed name."""
        if name is None or not name.strip():
            logger.info("Rejected %s cost: empty name", self.kind.value)
            return CostResult.fail(CostError.EMPTY_NAME, EMPTY_NAME_MESSAGE)

        amount = _validated_amount(cost)
        if amount is None:
            logger.info("Rejected %s cost %r: invalid amount %r", self.kind.value, name, cost)
            return CostResult.fail(CostError.INVALID_AMOUNT, INVALID_AMOUNT_MESSAGE)

        with self._lock:
            new_cost = CostItem(id=self._next_id, name=name.strip(), cost=amount)
            self._next_id += 1
            self._items.append(new_cost)

        logger.debug("Added %s cost %s (%s = %s)", self.kind.value, new_cost.id, new_cost.name, new_cost.cost)
        return CostResult.ok(new_cost.model_copy())

    def remove(self, item_id: int) -> CostResult:
        """Drop the item with ``item_id``; the last remaining item cannot go."""
        with self._lock:
            if len(self._items) == 1:
                logger.info("Refused to remove the last %s cost", self.kind.value)
                return CostResult.fail(
                    CostError.LAST_ITEM_PROTECTED,
                    f"You must have at least one {self.kind.value} cost item.",
                )

            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return self._not_found(item_id)
            self._items = remaining

        logger.debug("Removed %s cost %s", self.kind.value, item_id)
        return CostResult.ok()

    def update_name(self, item_id: int, name: str) -> CostResult:
        with self._lock:
            item = self._find(item_id)
            if item is None:
                return self._not_found(item_id)
            item.name = name

        logger.debug("Renamed %s cost %s to %r", self.kind.value, item_id, name)
        return CostResult.ok()

    def update_amount(self, item_id: int, amount: float | str | None) -> CostResult:
        """Set the amount, coercing unreadable or negative input to 0."""
        with self._lock:
            item = self._find(item_id)
            if item is None:
                return self._not_found(item_id)
            item.cost = new_amount = parse_amount(amount)

        logger.debug("Set %s cost %s amount to %s", self.kind.value, item_id, new_amount)
        return CostResult.ok()

    def set_all(self, items: Iterable[CostItem | Mapping[str, Any]]) -> None:
        """Replace the whole list (scenario load).

        Items are copied so later edits by the caller do not leak in.  Only
        the ``{id, name, cost}`` shape is checked; blank names or negative
        costs are stored as given.
        """
        copies = [
            item.model_copy(deep=True) if isinstance(item, CostItem) else CostItem.model_validate(dict(item))
            for item in items
        ]
        with self._lock:
            self._items = copies
            self._next_id = next_id = max([item.id for item in copies] + [0]) + 1

        logger.debug("Loaded %d %s costs (next id %d)", len(copies), self.kind.value, next_id)


class CostStore:
    """The fixed and variable cost lists of one calculator session."""

    def __init__(
        self,
        fixed_costs: Iterable[CostItem | Mapping[str, Any]] | None = None,
        variable_costs: Iterable[CostItem | Mapping[str, Any]] | None = None,
    ) -> None:
        self.fixed = CostList(CostKind.FIXED, fixed_costs)
        self.variable = CostList(CostKind.VARIABLE, variable_costs)

    def get_list(self, kind: CostKind | str) -> CostList:
        if CostKind(kind) is CostKind.FIXED:
            return self.fixed
        return self.variable

    @contextmanager
    def locked(self) -> Iterator[CostStore]:
        """Hold both list locks, fixed first, so a pair of reads or writes is atomic."""
        with self.fixed._lock, self.variable._lock:
            yield self

    def calculate(self, price: float, enrollment: float) -> FinancialSummary:
        """Financial summary for the current cost lists."""
        with self.locked():
            fixed_costs = self.fixed.get_all()
            variable_costs = self.variable.get_all()
        return calculate_financials(price, enrollment, fixed_costs, variable_costs)

    def replace_all(
        self,
        fixed_costs: Iterable[CostItem | Mapping[str, Any]],
        variable_costs: Iterable[CostItem | Mapping[str, Any]],
    ) -> None:
        """``set_all`` on both lists as one step."""
        with self.locked():
            self.fixed.set_all(fixed_costs)
            self.variable.set_all(variable_costs)

    def reset(self) -> None:
        """Back to the seeded default items."""
        self.replace_all(default_costs(CostKind.FIXED), default_costs(CostKind.VARIABLE))
