from __future__ import annotations

from typing import Dict, Iterable, List

from .models import AllocationEntry, AllocationPlan
from .units import PackSize, Quantity


def merge_plan(plan: Iterable[AllocationEntry]) -> AllocationPlan:
    """Sum quantities per pack size, keeping the order sizes first appear in."""
    totals: Dict[PackSize, Quantity] = {}
    for entry in plan:
        totals[entry.pack_size] = totals.get(entry.pack_size, 0) + entry.quantity
    return [AllocationEntry(pack_size=size, quantity=qty) for size, qty in totals.items()]


def shipped_items(plan: Iterable[AllocationEntry]) -> int:
    return sum(entry.pack_size * entry.quantity for entry in plan)


def total_packs(plan: Iterable[AllocationEntry]) -> int:
    return sum(entry.quantity for entry in plan)


def overage(plan: Iterable[AllocationEntry], demand: Quantity) -> int:
    return max(0, shipped_items(plan) - demand)


def covers_demand(plan: Iterable[AllocationEntry], demand: Quantity) -> bool:
    return shipped_items(plan) >= demand


def plan_rows(plan: Iterable[AllocationEntry]) -> List[Dict[str, int]]:
    return [{"pack": entry.pack_size, "quantity": entry.quantity} for entry in plan]
