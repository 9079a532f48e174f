from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .catalog import is_descending, normalize_sizes, validate_pack_size
from .errors import EmptyCatalog, InvalidDemand, UnorderedCatalog
from .models import AllocationEntry, AllocationPlan
from .policy import DEFAULT_POLICY, AllocationPolicy
from .units import PackSize, Quantity, is_int

logger = logging.getLogger(__name__)


@dataclass
class AllocationResult:
    """Outcome of one pass over the catalog.

    ``steps`` counts visited pack sizes and never exceeds the catalog length.
    ``remaining`` is the final counter: zero or negative once the order is
    covered, still equal to the demand when nothing could be allocated.
    """

    plan: AllocationPlan = field(default_factory=list)
    steps: int = 0
    remaining: int = 0

    @property
    def fulfilled(self) -> bool:
        return self.remaining <= 0


def _check_inputs(sizes: Sequence[PackSize], demand: Quantity) -> None:
    if not is_int(demand):
        raise InvalidDemand(f"demand must be an integer, got {demand!r}")
    if demand < 0:
        raise InvalidDemand(f"demand must not be negative, got {demand}")
    if not isinstance(sizes, Sequence):
        raise UnorderedCatalog(
            f"pack sizes must be a descending sequence, got {type(sizes).__name__}"
        )
    for size in sizes:
        validate_pack_size(size)
    if not is_descending(sizes):
        raise UnorderedCatalog(f"pack sizes must be strictly descending, got {list(sizes)}")


def run_allocation(
    sizes: Sequence[PackSize],
    demand: Quantity,
    *,
    policy: Optional[AllocationPolicy] = None,
) -> AllocationResult:
    """Walk the descending pack sizes once and split ``demand`` into packs.

    At each size the whole number of packs that fit is taken. At the smallest
    size, when one pack would not cover what is left, the count is booked
    against the second-smallest size instead; the count itself stays the one
    computed for the smallest size. Anything still left after the smallest
    size is covered by one extra pack of that size.
    """
    _check_inputs(sizes, demand)
    if policy is None:
        policy = DEFAULT_POLICY

    result = AllocationResult(remaining=demand)
    if demand == 0:
        return result
    if not sizes:
        if policy.raise_on_empty_catalog:
            raise EmptyCatalog(f"no pack sizes available for an order of {demand} items")
        logger.warning("No pack sizes available, order of %d items left unfulfilled", demand)
        return result

    last = len(sizes) - 1
    index = 0
    remaining = demand
    while remaining > 0 and index < len(sizes):
        result.steps += 1
        size = sizes[index]
        count = remaining // size

        if index == last and index > 0 and remaining - size > 0:
            logger.debug(
                "Remainder %d exceeds smallest pack %d, booking %d x %d instead",
                remaining,
                size,
                count,
                sizes[index - 1],
            )
            size = sizes[index - 1]

        if count > 0:
            result.plan.append(AllocationEntry(pack_size=size, quantity=count))
            remaining -= count * size
        logger.debug("Step %d: pack %d x %d, remaining %d", index, size, count, remaining)

        if remaining > 0:
            if index < last:
                index += 1
                continue
            result.plan.append(AllocationEntry(pack_size=sizes[index], quantity=1))
            remaining = 0
        break

    result.remaining = remaining
    return result


def allocate(
    sizes: Sequence[PackSize],
    demand: Quantity,
    *,
    policy: Optional[AllocationPolicy] = None,
) -> AllocationPlan:
    return run_allocation(sizes, demand, policy=policy).plan


def plan_order(
    raw_sizes: Iterable[PackSize],
    demand: Quantity,
    *,
    policy: Optional[AllocationPolicy] = None,
) -> AllocationPlan:
    """Allocate against an unsorted catalog that may contain duplicates."""
    return allocate(normalize_sizes(raw_sizes), demand, policy=policy)
