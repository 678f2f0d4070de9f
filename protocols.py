# protocols.py
import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from models import BurnClassification, FluidPlan
from constants import BURN_CONSTANTS

logger = logging.getLogger("burnflow.protocols")


def round_half_up(value: float, quantum: str = "1") -> float:
    """
    Rounds half away from zero at the given decimal quantum.
    Goes through str() so 2.25 rounds to 2.3, not to the binary neighbour.
    """
    if not math.isfinite(value):
        return value
    rounded = Decimal(str(value)).quantize(Decimal(quantum), rounding=ROUND_HALF_UP)
    return float(rounded)


def _round_ml(value: float) -> int:
    return int(round_half_up(value))


class ParklandFormula:
    @staticmethod
    def calculate(weight_kg: float, bsa_percent: float) -> FluidPlan:
        """
        Parkland: 4 mL x kg x %BSA in 24h. Half in the first 8 hours
        (from the time of the accident), half over the next 16.
        Inputs are trusted; the wizard blocks this step until age/weight > 0.
        """
        total_in_24h = _round_ml(BURN_CONSTANTS.PARKLAND_ML_PER_KG_PER_PCT * weight_kg * bsa_percent)
        first_8h = _round_ml(total_in_24h / 2)
        rate_first_8h = _round_ml(first_8h / BURN_CONSTANTS.FIRST_PHASE_HOURS)
        remaining_16h = _round_ml(total_in_24h / 2)
        rate_remaining_16h = _round_ml(remaining_16h / BURN_CONSTANTS.SECOND_PHASE_HOURS)

        logger.debug(f"Parkland for {weight_kg}kg / {bsa_percent}% BSA: {total_in_24h} mL in 24h")

        return FluidPlan(
            total_in_24h=total_in_24h,
            first_8h=first_8h,
            rate_first_8h=rate_first_8h,
            remaining_16h=remaining_16h,
            rate_remaining_16h=rate_remaining_16h,
            weight_kg=weight_kg,
            bsa_percent=bsa_percent,
        )


class BurnClassifier:
    @staticmethod
    def classify(bsa_percent: float) -> BurnClassification:
        if bsa_percent < BURN_CONSTANTS.MODERATE_BURN_MIN_PCT:
            return BurnClassification.MINOR
        if bsa_percent < BURN_CONSTANTS.MAJOR_BURN_MIN_PCT:
            return BurnClassification.MODERATE
        return BurnClassification.MAJOR


def calculate_fluid_needs(weight_kg: float, bsa_percent: float) -> FluidPlan:
    return ParklandFormula.calculate(weight_kg, bsa_percent)


def get_burn_classification(bsa_percent: float) -> BurnClassification:
    return BurnClassifier.classify(bsa_percent)
