"""
BurnFlow: Data Dictionary & Variable Definitions
================================================
This module defines the entire state space for the burn assessment:
the anatomical region catalog (Lund-Browder), the patient record the
wizard collects, and the derived clinical outputs (Parkland plan,
severity, BSA advisory).

NO LOGIC is implemented here beyond trivial lookups. The catalog is
built in body_areas.py, mutated through session.py.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping


class InvalidAgeError(ValueError):
    """Raised when an age cannot be placed in any Lund-Browder bracket."""
    pass


class UnknownRegionError(KeyError):
    """Raised when a region key does not exist in the active catalog."""
    pass


class UnknownPatientFieldError(ValueError):
    """Raised when a patient attribute name is not part of the record."""
    pass


# --- 1. ENUMS (Standardizing the Inputs) ---

class AgeBracket(Enum):
    """Lund-Browder age tiers (years). Lower bound inclusive."""
    UNDER_1 = "under_1"
    AGE_1_TO_4 = "1_to_4"
    AGE_5_TO_9 = "5_to_9"
    AGE_10_TO_14 = "10_to_14"
    AGE_15_PLUS = "15_plus"


class CatalogVariant(Enum):
    CHILD = "child"   # < 10 years: head in quadrants
    ADULT = "adult"   # >= 10 years: head anterior/posterior only


class BodySide(Enum):
    FRONT = "front"
    BACK = "back"
    BOTH = "both"     # Combined regions; not used by the shipped catalogs


class RegionGroup(Enum):
    HEAD = "head"
    TORSO = "torso"
    ABDOMEN = "abdomen"
    ARM = "arm"
    LEG = "leg"
    GENITAL = "genital"


class BurnClassification(Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"

    @property
    def label(self) -> str:
        return _CLASSIFICATION_LABELS[self]


_CLASSIFICATION_LABELS = {
    BurnClassification.MINOR: "Menor",
    BurnClassification.MODERATE: "Moderada",
    BurnClassification.MAJOR: "Mayor",
}


class BSAStatus(Enum):
    UNDER = "under_100"
    CORRECT = "equals_100"
    OVER = "over_100"


class PatientField(Enum):
    AGE = "age"                       # years
    WEIGHT = "weight"                 # kg
    ACCIDENT_TIME = "accident_time"   # HH:MM
    LOCATION = "location"
    SERVICIO = "servicio"             # Referring hospital service


# --- 2. REGION CATALOG (Immutable Reference Data) ---

@dataclass(frozen=True)
class RegionDefinition:
    """One anatomical region of the body diagram."""
    key: str              # Stable identifier, never shown to the clinician
    label: str
    reference_max: float  # % BSA for this region in the active age bracket
    side: BodySide        # Anterior/posterior view; no effect on totals
    group: RegionGroup
    color: str = "#d1d5db"


@dataclass(frozen=True)
class RegionCatalog:
    """
    The full set of regions for one age bracket.
    The sum of reference_max over all regions is 100.
    """
    bracket: AgeBracket
    variant: CatalogVariant
    regions: Mapping[str, RegionDefinition]

    def __post_init__(self):
        # Freeze the mapping itself, not just the attribute
        if not isinstance(self.regions, MappingProxyType):
            object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))

    def __contains__(self, key) -> bool:
        return key in self.regions

    def __len__(self) -> int:
        return len(self.regions)

    def keys(self) -> List[str]:
        return list(self.regions)

    def get(self, key: str) -> RegionDefinition:
        try:
            return self.regions[key]
        except KeyError:
            raise UnknownRegionError(
                f"Region '{key}' is not part of the {self.variant.value} catalog"
            ) from None

    def reference_max(self, key: str) -> float:
        return self.get(key).reference_max

    def regions_for_side(self, side: BodySide) -> List[RegionDefinition]:
        return [r for r in self.regions.values() if r.side == side]

    def side_total(self, side: BodySide) -> float:
        return sum(r.reference_max for r in self.regions_for_side(side))

    def total_reference(self) -> float:
        return sum(r.reference_max for r in self.regions.values())


@dataclass(frozen=True)
class AgeClassification:
    age_years: float
    tier: AgeBracket
    variant: CatalogVariant

    @property
    def is_child_key_space(self) -> bool:
        return self.variant == CatalogVariant.CHILD


# --- 3. INPUT LAYER (What the Clinician Enters) ---

@dataclass
class PatientRecord:
    """
    Pass-through patient data. The form layer validates these;
    the core only keys off `age`.
    """
    age: float = 0
    weight: float = 0
    accident_time: str = ""
    location: str = ""
    servicio: str = ""


# --- 4. OUTPUT LAYER (The Actionable Results) ---

@dataclass(frozen=True)
class FluidPlan:
    """
    Parkland formula output (mL and mL/hr, integers).
    Half of the 24h volume runs in the first 8 hours from the accident.
    """
    total_in_24h: int
    first_8h: int
    rate_first_8h: int          # mL/hr
    remaining_16h: int
    rate_remaining_16h: int     # mL/hr
    weight_kg: float = 0.0
    bsa_percent: float = 0.0


@dataclass(frozen=True)
class BSAAssessment:
    """Advisory only: any total may proceed to the fluid plan."""
    total_bsa: float
    status: BSAStatus
    difference: float           # total - 100
    message: str = ""


RegionValueSet = Dict[str, float]
