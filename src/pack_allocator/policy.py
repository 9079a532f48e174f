from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional

import yaml

logger = logging.getLogger(__name__)

EmptyCatalogMode = Literal["raise", "empty_plan"]

EMPTY_CATALOG_MODES = ("raise", "empty_plan")

SETTINGS_FILENAME = "settings.yaml"


@dataclass(frozen=True)
class AllocationPolicy:
    empty_catalog: EmptyCatalogMode = "raise"

    @property
    def raise_on_empty_catalog(self) -> bool:
        return self.empty_catalog == "raise"


DEFAULT_POLICY = AllocationPolicy()


def default_settings_path() -> str:
    return os.path.join(os.path.dirname(__file__), SETTINGS_FILENAME)


@lru_cache(maxsize=None)
def load_policy(path: Optional[str] = None) -> AllocationPolicy:
    """Load the allocation policy from ``settings.yaml`` when available."""

    settings_path = path or default_settings_path()
    data: dict = {}
    if os.path.exists(settings_path):
        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read allocation settings from %s", settings_path)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded
        else:
            logger.warning("Ignoring allocation settings in %s: not a mapping", settings_path)

    mode = data.get("empty_catalog", DEFAULT_POLICY.empty_catalog)
    if mode not in EMPTY_CATALOG_MODES:
        logger.warning(
            "Unknown empty_catalog mode %r in %s, using %r",
            mode,
            settings_path,
            DEFAULT_POLICY.empty_catalog,
        )
        mode = DEFAULT_POLICY.empty_catalog
    return AllocationPolicy(empty_catalog=mode)
