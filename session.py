"""
BurnFlow: Session State Store & BSA Aggregator
==============================================
One BurnSession per patient assessment, owned by the wizard controller.
Holds the patient record and the region value set, and recomputes the
derived outputs (total BSA, Parkland plan, severity) on every read.

Age-bracket policy:
  * Child (<10) and adult (>=10) catalogs use different region keys.
    When a positive age lands in the other key space, the value set is
    replaced with all zeros for the new catalog. Defaults are never
    injected on that path.
  * A change within the same bracket (e.g. 3 -> 4 years) leaves the
    values as they are. Moving to another bracket of the same key space
    (e.g. 4 -> 5) keeps the keys and clamps each value to its new maximum.
  * Age 0 (cleared field) leaves bracket and values untouched.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from models import (
    AgeBracket,
    BodySide,
    BSAAssessment,
    BurnClassification,
    FluidPlan,
    PatientField,
    PatientRecord,
    RegionCatalog,
    RegionGroup,
    RegionValueSet,
    UnknownPatientFieldError,
)
from constants import AGE_CONSTANTS, BURN_CONSTANTS
from body_areas import catalog_for_bracket, classify_age, default_values, empty_values
from body_map import clamp_percentage, parse_direct_input, resolve_click
from protocols import calculate_fluid_needs, get_burn_classification, round_half_up
from safety import SafetySupervisor

logger = logging.getLogger("burnflow.session")

_NUMERIC_FIELDS = (PatientField.AGE, PatientField.WEIGHT)


def normalize_accident_time(value) -> str:
    """Keeps only the HH:MM part of whatever the time input produced."""
    if value is None:
        return ""
    return str(value)[:5]


def _settle(total: float) -> float:
    return round_half_up(total, BURN_CONSTANTS.TOTAL_BSA_QUANTUM)


class BurnSession:

    def __init__(self):
        self.patient = PatientRecord()
        self._bracket = AgeBracket.UNDER_1
        self._values: RegionValueSet = empty_values(self.catalog)

    # --- Read side ---

    @property
    def bracket(self) -> AgeBracket:
        return self._bracket

    @property
    def catalog(self) -> RegionCatalog:
        return catalog_for_bracket(self._bracket)

    @property
    def values(self) -> RegionValueSet:
        return dict(self._values)

    def total_bsa(self) -> float:
        """Sum of committed values, settled so 0.1-step entries hit 15/25 exactly."""
        return _settle(sum(self._values.values()))

    def group_totals(self) -> Dict[RegionGroup, float]:
        totals = {group: 0.0 for group in RegionGroup}
        for key, region in self.catalog.regions.items():
            totals[region.group] += self._values.get(key, 0.0)
        return {group: _settle(total) for group, total in totals.items()}

    def side_totals(self) -> Dict[BodySide, float]:
        totals = {BodySide.FRONT: 0.0, BodySide.BACK: 0.0}
        for key, region in self.catalog.regions.items():
            totals[region.side] = totals.get(region.side, 0.0) + self._values.get(key, 0.0)
        return {side: _settle(total) for side, total in totals.items()}

    def burned_regions(self) -> List[Tuple[str, float]]:
        """Non-zero regions in diagram order."""
        return [(key, self._values[key]) for key in self.catalog.keys() if self._values.get(key, 0.0) > 0]

    def bsa_assessment(self) -> BSAAssessment:
        return SafetySupervisor.assess_bsa(self.total_bsa())

    def fluid_plan(self) -> FluidPlan:
        return calculate_fluid_needs(self.patient.weight, self.total_bsa())

    def burn_classification(self) -> BurnClassification:
        return get_burn_classification(self.total_bsa())

    def missing_patient_fields(self) -> List[PatientField]:
        return SafetySupervisor.missing_patient_fields(self.patient)

    def is_patient_ready(self) -> bool:
        return not self.missing_patient_fields()

    # --- Patient record ---

    def set_patient_field(self, field, value):
        try:
            field = PatientField(field)
        except ValueError:
            raise UnknownPatientFieldError(f"Unknown patient field: {field!r}") from None

        if field in _NUMERIC_FIELDS:
            value = parse_direct_input(value)
        elif field == PatientField.ACCIDENT_TIME:
            value = normalize_accident_time(value)
        else:
            value = "" if value is None else str(value)

        setattr(self.patient, field.value, value)

        if field == PatientField.AGE:
            self._on_age_changed(value)

    def ensure_accident_time(self, now: Optional[datetime] = None) -> str:
        """Defaults a blank accident time to the current clock time."""
        if not self.patient.accident_time:
            now = now or datetime.now()
            self.patient.accident_time = now.strftime("%H:%M")
        return self.patient.accident_time

    def _on_age_changed(self, age: float):
        if age <= 0:
            return

        new_bracket = classify_age(age).tier
        old_catalog = self.catalog
        self._bracket = new_bracket
        new_catalog = self.catalog

        if new_catalog.variant != old_catalog.variant:
            # Key spaces are incompatible; start the new one from zero
            self._values = empty_values(new_catalog)
            logger.info(
                f"Age {age} crossed the {AGE_CONSTANTS.CHILD_KEY_SPACE_LIMIT_YEARS}-year boundary: "
                f"region values reset for the {new_catalog.variant.value} catalog"
            )
        elif new_catalog.bracket != old_catalog.bracket:
            # Same keys, new maxima; only values above the new maximum move
            self._values = {
                key: clamp_percentage(value, new_catalog.reference_max(key))
                for key, value in self._values.items()
            }

    # --- Region values ---

    def set_region_value(self, key: str, value: float):
        """Writes an already-clamped value. Clamping belongs to the mapper."""
        self.catalog.get(key)
        self._values[key] = value
        logger.debug(f"Region '{key}' set to {value}")

    def commit_click(self, key: str, position_value: float) -> float:
        current = self._values.get(key, 0.0)
        new_value = resolve_click(current, position_value, self.catalog.reference_max(key))
        self.set_region_value(key, new_value)
        return new_value

    def commit_direct_input(self, key: str, raw) -> float:
        new_value = clamp_percentage(parse_direct_input(raw), self.catalog.reference_max(key))
        self.set_region_value(key, new_value)
        return new_value

    def apply_defaults(self):
        self._values = default_values(self.catalog)

    def clear_all(self):
        self._values = empty_values(self.catalog)

    def reset(self):
        self.patient = PatientRecord()
        self._bracket = AgeBracket.UNDER_1
        self._values = empty_values(self.catalog)
        logger.info("Session reset")
