from models import AgeBracket, BodySide, CatalogVariant, RegionGroup

VERSION = "1.0.0"


class AGE_CONSTANTS:
    # Age (years): lower bound of each Lund-Browder bracket, ascending
    BRACKET_LOWER_BOUNDS = (
        (0, AgeBracket.UNDER_1),
        (1, AgeBracket.AGE_1_TO_4),
        (5, AgeBracket.AGE_5_TO_9),
        (10, AgeBracket.AGE_10_TO_14),
        (15, AgeBracket.AGE_15_PLUS),
    )

    # Crossing this age swaps the region key space (structural reset)
    CHILD_KEY_SPACE_LIMIT_YEARS = 10

    BRACKET_LABELS = {
        AgeBracket.UNDER_1: "Menor de 1 año",
        AgeBracket.AGE_1_TO_4: "1-4 años",
        AgeBracket.AGE_5_TO_9: "5-9 años",
        AgeBracket.AGE_10_TO_14: "10-14 años",
        AgeBracket.AGE_15_PLUS: "15+ años",
    }


class BURN_CONSTANTS:
    # Parkland: 4 mL x kg x %BSA over 24h
    PARKLAND_ML_PER_KG_PER_PCT = 4
    FIRST_PHASE_HOURS = 8
    SECOND_PHASE_HOURS = 16

    # Severity thresholds (% BSA, lower bound inclusive)
    MODERATE_BURN_MIN_PCT = 15
    MAJOR_BURN_MIN_PCT = 25

    # Full body reference total and float tolerance for "equals 100"
    REFERENCE_TOTAL_PCT = 100.0
    BSA_TOLERANCE = 1e-5

    # Clicking within this distance of the committed value deselects the region
    TOGGLE_TOLERANCE_PCT = 0.1

    # Pointer-mapped values are rounded to one decimal (0.1 %)
    MAPPED_VALUE_QUANTUM = "0.1"
    TOGGLE_COMPARE_QUANTUM = "0.01"

    # Aggregated totals are settled at this quantum before thresholds apply
    TOTAL_BSA_QUANTUM = "0.0001"


class LUND_BROWDER:
    """
    Reference percentages per region (one face of one segment).
    Child head values are per quadrant; adult head values per face.
    Every bracket sums to exactly 100 over its variant's key space.
    """
    # <1 and 10+ follow the charted values. 1-4 and 5-9 are derived
    # approximations (head shifted to legs, sum held at 100), not the
    # textbook chart (which gives thigh 3.25 at 1-4, head 3.25 at 5-9).
    TABLES = {
        AgeBracket.UNDER_1: {
            "head": 4.5, "torso": 4, "abdomen": 4,
            "hand": 1.5, "forearm": 1.5, "upper_arm": 1.5,
            "foot": 1.5, "lower_leg": 2.5, "thigh": 3.5,
            "genital": 1,
        },
        AgeBracket.AGE_1_TO_4: {
            "head": 4.25, "torso": 4, "abdomen": 4,
            "hand": 1.5, "forearm": 1.5, "upper_arm": 1.5,
            "foot": 1.5, "lower_leg": 2.5, "thigh": 3.75,
            "genital": 1,
        },
        AgeBracket.AGE_5_TO_9: {
            "head": 3.75, "torso": 4, "abdomen": 4,
            "hand": 1.5, "forearm": 1.5, "upper_arm": 1.5,
            "foot": 1.5, "lower_leg": 2.75, "thigh": 4,
            "genital": 1,
        },
        AgeBracket.AGE_10_TO_14: {
            "head": 4.5, "torso": 4.5, "abdomen": 4.5,
            "hand": 1.5, "forearm": 1.5, "upper_arm": 1.5,
            "foot": 1.5, "lower_leg": 3, "thigh": 4.5,
            "genital": 0.5,
        },
        AgeBracket.AGE_15_PLUS: {
            "head": 4.5, "torso": 4.5, "abdomen": 4.5,
            "hand": 1.5, "forearm": 1.5, "upper_arm": 1.5,
            "foot": 1.5, "lower_leg": 3, "thigh": 4.5,
            "genital": 0.5,
        },
    }

    @staticmethod
    def variant_for(bracket: AgeBracket) -> CatalogVariant:
        if bracket in (AgeBracket.AGE_10_TO_14, AgeBracket.AGE_15_PLUS):
            return CatalogVariant.ADULT
        return CatalogVariant.CHILD


class REGION_LAYOUT:
    """
    The diagram's key spaces: (key, label, side, group, table segment).
    The perineum is marked on the posterior view, so both genital
    regions count toward the back.
    """
    GROUP_COLORS = {
        RegionGroup.HEAD: "#fca5a5",
        RegionGroup.TORSO: "#fbbf24",
        RegionGroup.ABDOMEN: "#f97316",
        RegionGroup.ARM: "#60a5fa",
        RegionGroup.LEG: "#34d399",
        RegionGroup.GENITAL: "#c084fc",
    }

    CHILD_HEAD = (
        ("head_left_anterior", "Cabeza Izq. Anterior", BodySide.FRONT, RegionGroup.HEAD, "head"),
        ("head_right_anterior", "Cabeza Der. Anterior", BodySide.FRONT, RegionGroup.HEAD, "head"),
        ("head_left_posterior", "Cabeza Izq. Posterior", BodySide.BACK, RegionGroup.HEAD, "head"),
        ("head_right_posterior", "Cabeza Der. Posterior", BodySide.BACK, RegionGroup.HEAD, "head"),
    )

    ADULT_HEAD = (
        ("head_anterior", "Cabeza Anterior", BodySide.FRONT, RegionGroup.HEAD, "head"),
        ("head_posterior", "Cabeza Posterior", BodySide.BACK, RegionGroup.HEAD, "head"),
    )

    TRUNK = (
        ("torso_left_anterior", "Tórax Izq. Anterior", BodySide.FRONT, RegionGroup.TORSO, "torso"),
        ("torso_right_anterior", "Tórax Der. Anterior", BodySide.FRONT, RegionGroup.TORSO, "torso"),
        ("torso_left_posterior", "Tórax Izq. Posterior", BodySide.BACK, RegionGroup.TORSO, "torso"),
        ("torso_right_posterior", "Tórax Der. Posterior", BodySide.BACK, RegionGroup.TORSO, "torso"),
        ("abdomen_left_anterior", "Abdomen Izq. Anterior", BodySide.FRONT, RegionGroup.ABDOMEN, "abdomen"),
        ("abdomen_right_anterior", "Abdomen Der. Anterior", BodySide.FRONT, RegionGroup.ABDOMEN, "abdomen"),
        ("abdomen_left_posterior", "Abdomen Izq. Posterior", BodySide.BACK, RegionGroup.ABDOMEN, "abdomen"),
        ("abdomen_right_posterior", "Abdomen Der. Posterior", BodySide.BACK, RegionGroup.ABDOMEN, "abdomen"),
    )

    ARMS = (
        ("right_hand_anterior", "Mano Der. Anterior", BodySide.FRONT, RegionGroup.ARM, "hand"),
        ("right_forearm_anterior", "Antebrazo Der. Anterior", BodySide.FRONT, RegionGroup.ARM, "forearm"),
        ("right_upper_arm_anterior", "Brazo Der. Sup. Anterior", BodySide.FRONT, RegionGroup.ARM, "upper_arm"),
        ("right_hand_posterior", "Mano Der. Posterior", BodySide.BACK, RegionGroup.ARM, "hand"),
        ("right_forearm_posterior", "Antebrazo Der. Posterior", BodySide.BACK, RegionGroup.ARM, "forearm"),
        ("right_upper_arm_posterior", "Brazo Der. Sup. Posterior", BodySide.BACK, RegionGroup.ARM, "upper_arm"),
        ("left_hand_anterior", "Mano Izq. Anterior", BodySide.FRONT, RegionGroup.ARM, "hand"),
        ("left_forearm_anterior", "Antebrazo Izq. Anterior", BodySide.FRONT, RegionGroup.ARM, "forearm"),
        ("left_upper_arm_anterior", "Brazo Izq. Sup. Anterior", BodySide.FRONT, RegionGroup.ARM, "upper_arm"),
        ("left_hand_posterior", "Mano Izq. Posterior", BodySide.BACK, RegionGroup.ARM, "hand"),
        ("left_forearm_posterior", "Antebrazo Izq. Posterior", BodySide.BACK, RegionGroup.ARM, "forearm"),
        ("left_upper_arm_posterior", "Brazo Izq. Sup. Posterior", BodySide.BACK, RegionGroup.ARM, "upper_arm"),
    )

    LEGS = (
        ("right_foot_anterior", "Pie Der. Anterior", BodySide.FRONT, RegionGroup.LEG, "foot"),
        ("right_lower_leg_anterior", "Pierna Der. Inf. Anterior", BodySide.FRONT, RegionGroup.LEG, "lower_leg"),
        ("right_thigh_anterior", "Muslo Der. Anterior", BodySide.FRONT, RegionGroup.LEG, "thigh"),
        ("right_foot_posterior", "Pie Der. Posterior", BodySide.BACK, RegionGroup.LEG, "foot"),
        ("right_lower_leg_posterior", "Pierna Der. Inf. Posterior", BodySide.BACK, RegionGroup.LEG, "lower_leg"),
        ("right_thigh_posterior", "Muslo Der. Posterior", BodySide.BACK, RegionGroup.LEG, "thigh"),
        ("left_foot_anterior", "Pie Izq. Anterior", BodySide.FRONT, RegionGroup.LEG, "foot"),
        ("left_lower_leg_anterior", "Pierna Izq. Inf. Anterior", BodySide.FRONT, RegionGroup.LEG, "lower_leg"),
        ("left_thigh_anterior", "Muslo Izq. Anterior", BodySide.FRONT, RegionGroup.LEG, "thigh"),
        ("left_foot_posterior", "Pie Izq. Posterior", BodySide.BACK, RegionGroup.LEG, "foot"),
        ("left_lower_leg_posterior", "Pierna Izq. Inf. Posterior", BodySide.BACK, RegionGroup.LEG, "lower_leg"),
        ("left_thigh_posterior", "Muslo Izq. Posterior", BodySide.BACK, RegionGroup.LEG, "thigh"),
    )

    GENITALS = (
        ("genital_anterior", "Genitales Anterior", BodySide.BACK, RegionGroup.GENITAL, "genital"),
        ("genital_posterior", "Genitales Posterior", BodySide.BACK, RegionGroup.GENITAL, "genital"),
    )

    LAYOUTS = {
        CatalogVariant.CHILD: CHILD_HEAD + TRUNK + ARMS + LEGS + GENITALS,
        CatalogVariant.ADULT: ADULT_HEAD + TRUNK + ARMS + LEGS + GENITALS,
    }
