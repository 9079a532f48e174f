from dataclasses import dataclass
from typing import List

from .units import PackSize, Quantity


@dataclass(frozen=True)
class Pack:
    """Catalog record as kept by the pack-size store."""

    id: str
    size: PackSize


@dataclass(frozen=True)
class AllocationEntry:
    """Ship ``quantity`` packs of ``pack_size`` items."""

    pack_size: PackSize
    quantity: Quantity


AllocationPlan = List[AllocationEntry]
