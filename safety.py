# safety.py
import logging
from typing import List

from models import BSAAssessment, BSAStatus, PatientField, PatientRecord
from constants import BURN_CONSTANTS

logger = logging.getLogger("burnflow.safety")


class SafetySupervisor:
    """
    Advisory checks for the wizard. Nothing here blocks the fluid plan:
    a total other than 100% is surfaced for clinical judgment only.
    """

    @staticmethod
    def assess_bsa(total_bsa: float) -> BSAAssessment:
        difference = total_bsa - BURN_CONSTANTS.REFERENCE_TOTAL_PCT

        if abs(difference) <= BURN_CONSTANTS.BSA_TOLERANCE:
            return BSAAssessment(
                total_bsa=total_bsa,
                status=BSAStatus.CORRECT,
                difference=0.0,
                message="Total BSA equals the 100% reference.",
            )

        if difference > 0:
            status = BSAStatus.OVER
            message = f"Total BSA exceeds 100% by {difference:.1f}%. Review marked regions."
            logger.warning(message)
        else:
            status = BSAStatus.UNDER
            message = f"Total BSA is {-difference:.1f}% below the 100% reference."

        return BSAAssessment(
            total_bsa=total_bsa,
            status=status,
            difference=difference,
            message=message,
        )

    @staticmethod
    def missing_patient_fields(record: PatientRecord) -> List[PatientField]:
        """Fields the form must fill before results can be shown."""
        missing = []
        if not record.age or record.age <= 0:
            missing.append(PatientField.AGE)
        if not record.weight or record.weight <= 0:
            missing.append(PatientField.WEIGHT)
        if not record.accident_time or not record.accident_time.strip():
            missing.append(PatientField.ACCIDENT_TIME)
        return missing
