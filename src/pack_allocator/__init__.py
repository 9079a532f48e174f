"""Split an order quantity into packs of the available sizes."""

from .allocator import AllocationResult, allocate, plan_order, run_allocation
from .catalog import (
    CatalogSource,
    catalog_sizes,
    is_descending,
    normalize_sizes,
    sizes_from_packs,
    validate_pack_size,
)
from .errors import (
    AllocationError,
    EmptyCatalog,
    InvalidDemand,
    InvalidPackSize,
    UnorderedCatalog,
)
from .models import AllocationEntry, AllocationPlan, Pack
from .plan import (
    covers_demand,
    merge_plan,
    overage,
    plan_rows,
    shipped_items,
    total_packs,
)
from .policy import DEFAULT_POLICY, AllocationPolicy, load_policy

__all__ = [
    "AllocationEntry",
    "AllocationError",
    "AllocationPlan",
    "AllocationPolicy",
    "AllocationResult",
    "CatalogSource",
    "DEFAULT_POLICY",
    "EmptyCatalog",
    "InvalidDemand",
    "InvalidPackSize",
    "Pack",
    "UnorderedCatalog",
    "allocate",
    "catalog_sizes",
    "covers_demand",
    "is_descending",
    "load_policy",
    "merge_plan",
    "normalize_sizes",
    "overage",
    "plan_order",
    "plan_rows",
    "run_allocation",
    "shipped_items",
    "sizes_from_packs",
    "total_packs",
    "validate_pack_size",
]
