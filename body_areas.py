"""
BurnFlow: Region Catalog & Age Classifier
=========================================
Maps a patient age onto a Lund-Browder bracket and returns the
matching region catalog. All variant branching (child quadrants vs.
adult head faces) happens here; callers only ever see a RegionCatalog.
"""

import logging
import math
from typing import Dict

from models import (
    AgeBracket,
    AgeClassification,
    CatalogVariant,
    InvalidAgeError,
    RegionCatalog,
    RegionDefinition,
    RegionValueSet,
)
from constants import AGE_CONSTANTS, LUND_BROWDER, REGION_LAYOUT

logger = logging.getLogger("burnflow.body_areas")


def _build_catalog(bracket: AgeBracket) -> RegionCatalog:
    variant = LUND_BROWDER.variant_for(bracket)
    table = LUND_BROWDER.TABLES[bracket]

    regions: Dict[str, RegionDefinition] = {}
    for key, label, side, group, segment in REGION_LAYOUT.LAYOUTS[variant]:
        regions[key] = RegionDefinition(
            key=key,
            label=label,
            reference_max=float(table[segment]),
            side=side,
            group=group,
            color=REGION_LAYOUT.GROUP_COLORS[group],
        )
    logger.debug(f"Built {variant.value} catalog for {bracket.value}: {len(regions)} regions")
    return RegionCatalog(bracket=bracket, variant=variant, regions=regions)


# Built once; catalogs are never mutated
_CATALOGS: Dict[AgeBracket, RegionCatalog] = {
    bracket: _build_catalog(bracket) for bracket in AgeBracket
}


def classify_age(age_years: float) -> AgeClassification:
    """
    Places an age (years, fractional allowed) in its Lund-Browder tier.
    The child key space covers every tier below 10 years.
    """
    if isinstance(age_years, bool) or not isinstance(age_years, (int, float)):
        raise InvalidAgeError(f"Age must be numeric, got {type(age_years)}")
    if math.isnan(age_years) or age_years < 0:
        raise InvalidAgeError(f"Invalid age: {age_years}")

    tier = AgeBracket.UNDER_1
    for lower_bound, bracket in AGE_CONSTANTS.BRACKET_LOWER_BOUNDS:
        if age_years >= lower_bound:
            tier = bracket

    variant = (
        CatalogVariant.CHILD
        if age_years < AGE_CONSTANTS.CHILD_KEY_SPACE_LIMIT_YEARS
        else CatalogVariant.ADULT
    )
    return AgeClassification(age_years=age_years, tier=tier, variant=variant)


def catalog_for_bracket(bracket: AgeBracket) -> RegionCatalog:
    return _CATALOGS[bracket]


def get_catalog(age_years: float) -> RegionCatalog:
    return _CATALOGS[classify_age(age_years).tier]


def get_age_group(age_years: float) -> str:
    """Display label for the bracket, e.g. '1-4 años'."""
    return AGE_CONSTANTS.BRACKET_LABELS[classify_age(age_years).tier]


def get_lund_browder_percentages(age_years: float) -> Dict[str, float]:
    return default_values(get_catalog(age_years))


def get_default_body_areas(age_years: float) -> RegionValueSet:
    """Every region of the age's catalog set to its reference maximum."""
    return get_lund_browder_percentages(age_years)


def get_empty_body_areas(age_years: float) -> RegionValueSet:
    return empty_values(get_catalog(age_years))


def default_values(catalog: RegionCatalog) -> RegionValueSet:
    return {key: region.reference_max for key, region in catalog.regions.items()}


def empty_values(catalog: RegionCatalog) -> RegionValueSet:
    return {key: 0.0 for key in catalog.keys()}
