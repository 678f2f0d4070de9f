"""
BurnFlow: Coordinate-to-Percentage Mapper
=========================================
Translates pointer position on a diagram region into a % BSA value,
and applies the commit rules shared by pointer clicks and typed input:

    preview  = round(fraction * reference_max, 0.1)
    click    = 0 if |committed - preview| < 0.1 else min(preview, reference_max)
    typed    = clamp(parse(text), 0, reference_max)

The hover preview and the committed value are separate state: the
preview lives in BodyMapPointer, the committed value in BurnSession.
"""

import logging
import math
import re
from typing import Optional

from models import RegionCatalog
from constants import BURN_CONSTANTS
from protocols import round_half_up

logger = logging.getLogger("burnflow.body_map")

# Leading decimal number, the way a browser's parseFloat reads "3.5%" as 3.5
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def clamp_percentage(value: float, reference_max: float) -> float:
    return min(max(value, 0.0), reference_max)


def fraction_from_offset(offset: float, extent: float) -> float:
    """Relative pointer offset along a region's axis, clamped to [0, 1]."""
    if not extent or extent <= 0:
        return 0.0
    return min(max(offset / extent, 0.0), 1.0)


def map_position(region_key: str, pointer_fraction: float, catalog: RegionCatalog) -> float:
    reference_max = catalog.reference_max(region_key)
    fraction = min(max(pointer_fraction, 0.0), 1.0) if math.isfinite(pointer_fraction) else 0.0
    value = round_half_up(fraction * reference_max, BURN_CONSTANTS.MAPPED_VALUE_QUANTUM)
    return clamp_percentage(value, reference_max)


def resolve_click(current_value: float, position_value: float, reference_max: float) -> float:
    """Toggle rule: clicking the value already set deselects the region."""
    # Compared on the decimal grid: 0.3 - 0.2 is one full step, not 0.0999...
    gap = round_half_up(abs(current_value - position_value), BURN_CONSTANTS.TOGGLE_COMPARE_QUANTUM)
    if gap < BURN_CONSTANTS.TOGGLE_TOLERANCE_PCT:
        return 0.0
    return min(position_value, reference_max)


def parse_direct_input(raw) -> float:
    """Typed percentage. Empty or unreadable input reads as 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(str(raw))
        if not match:
            return 0.0
        value = float(match.group(1))

    if not math.isfinite(value):
        return 0.0
    return value


class BodyMapPointer:
    """
    Hover/click state for one diagram. The session is injected by the
    controller that owns it; the pointer never writes a value on move.
    """

    def __init__(self, session):
        self._session = session
        self.hovered_key: Optional[str] = None
        self.hovered_value: float = 0.0
        self._preview_catalog: Optional[RegionCatalog] = None

    def move(self, region_key: str, fraction: float) -> float:
        catalog = self._session.catalog
        self.hovered_value = map_position(region_key, fraction, catalog)
        self.hovered_key = region_key
        self._preview_catalog = catalog
        return self.hovered_value

    def leave(self):
        self.hovered_key = None
        self.hovered_value = 0.0
        self._preview_catalog = None

    def click(self, region_key: str) -> Optional[float]:
        """
        Commits the preview for `region_key`. A click with no live preview
        on that region (pointer already left) commits nothing.
        """
        if self.hovered_key != region_key:
            logger.debug(f"Ignored click on '{region_key}' without a live preview")
            return None
        if self._preview_catalog is not self._session.catalog:
            # Age changed since the preview was mapped
            logger.debug(f"Discarded stale preview for '{region_key}'")
            self.leave()
            return None
        return self._session.commit_click(region_key, self.hovered_value)

    def display_value(self, region_key: str) -> float:
        if self.hovered_key == region_key and self._preview_catalog is self._session.catalog:
            return self.hovered_value
        return self._session.values.get(region_key, 0.0)
