from __future__ import annotations

from itertools import islice
from typing import Iterable, List, Protocol, Sequence

from .errors import InvalidPackSize
from .models import Pack
from .units import PackSize, is_int


class CatalogSource(Protocol):
    """Anything that can hand out the currently offered pack sizes."""

    def get_catalog_sizes(self) -> Iterable[PackSize]:
        ...


def validate_pack_size(value: object) -> PackSize:
    if not is_int(value) or value < 1:
        raise InvalidPackSize(f"pack size must be a positive integer, got {value!r}")
    return value


def normalize_sizes(sizes: Iterable[PackSize]) -> List[PackSize]:
    """Return the distinct pack sizes, largest first."""
    unique = {validate_pack_size(size) for size in sizes}
    return sorted(unique, reverse=True)


def is_descending(sizes: Sequence[PackSize]) -> bool:
    return all(a > b for a, b in zip(sizes, islice(sizes, 1, None)))


def sizes_from_packs(packs: Iterable[Pack]) -> List[PackSize]:
    return normalize_sizes(pack.size for pack in packs)


def catalog_sizes(source: CatalogSource) -> List[PackSize]:
    return normalize_sizes(source.get_catalog_sizes())
