# summary.py
"""
Read-only clinical summary for the print/export view.
Mirrors the session's derived values; performs no formatting.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models import (
    AgeBracket,
    BodySide,
    BSAStatus,
    BurnClassification,
    FluidPlan,
    RegionGroup,
)
from constants import AGE_CONSTANTS, VERSION


class RegionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    side: BodySide
    group: RegionGroup
    reference_max: float
    value: float


class ClinicalSummary(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        protected_namespaces=(),
        json_schema_extra={
            "example": {
                "age_years": 30, "age_bracket": "15_plus", "age_group_label": "15+ años",
                "weight_kg": 70.0, "accident_time": "08:15", "location": "Domicilio",
                "servicio": "Urgencias", "total_bsa": 30.0, "bsa_status": "under_100",
                "classification": "major",
            }
        },
    )

    # Patient
    age_years: float
    age_bracket: AgeBracket
    age_group_label: str
    weight_kg: float
    accident_time: str
    location: str
    servicio: str

    # Burn assessment
    total_bsa: float
    bsa_status: BSAStatus
    bsa_message: str = ""
    classification: BurnClassification
    classification_label: str

    # Parkland plan; pydantic handles the nested dataclass
    fluid_plan: FluidPlan

    regions: List[RegionEntry]
    group_totals: Dict[RegionGroup, float]

    model_version: str = VERSION
    generated_at: datetime = Field(default_factory=datetime.now)

    @property
    def burned_regions(self) -> List[RegionEntry]:
        return [entry for entry in self.regions if entry.value > 0]


def build_clinical_summary(session, generated_at: Optional[datetime] = None) -> ClinicalSummary:
    """Snapshot of a BurnSession for printing. The session is not modified."""
    patient = session.patient
    catalog = session.catalog
    values = session.values
    assessment = session.bsa_assessment()
    classification = session.burn_classification()

    regions = [
        RegionEntry(
            key=key,
            label=region.label,
            side=region.side,
            group=region.group,
            reference_max=region.reference_max,
            value=values.get(key, 0.0),
        )
        for key, region in catalog.regions.items()
    ]

    extra = {}
    if generated_at is not None:
        extra["generated_at"] = generated_at

    return ClinicalSummary(
        age_years=patient.age,
        age_bracket=session.bracket,
        age_group_label=AGE_CONSTANTS.BRACKET_LABELS[session.bracket],
        weight_kg=patient.weight,
        accident_time=patient.accident_time,
        location=patient.location,
        servicio=patient.servicio,
        total_bsa=assessment.total_bsa,
        bsa_status=assessment.status,
        bsa_message=assessment.message,
        classification=classification,
        classification_label=classification.label,
        fluid_plan=session.fluid_plan(),
        regions=regions,
        group_totals=session.group_totals(),
        **extra,
    )
