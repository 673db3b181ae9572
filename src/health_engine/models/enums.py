"""Enumerations and clinical constants for the health scoring engine.

All thresholds and constants cite their published source where one exists.
"""

from enum import Enum, IntEnum


class BmiClass(str, Enum):
    """Weight-status classes for adults (WHO 5-band scheme plus sentinel)."""

    INSUFFICIENT_DATA = "Insufficient data"
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESITY_I = "Obesity Grade I"
    OBESITY_II = "Obesity Grade II"
    OBESITY_III = "Obesity Grade III"

    def label(self, locale: str = "en") -> str:
        return _localized(self, locale)


class ActivityLevel(str, Enum):
    """IPAQ short-form categorical activity levels."""

    NOT_INFORMED = "Not informed"
    VERY_ACTIVE = "Very Active"
    ACTIVE = "Active"
    INSUFFICIENTLY_ACTIVE = "Insufficiently Active"

    def label(self, locale: str = "en") -> str:
        return _localized(self, locale)


class BodyLocation(str, Enum):
    """Body regions a pilot can report a complaint against."""

    THORAX = "Thorax"
    THORACIC_SPINE = "Thoracic Spine"
    LUMBAR_SPINE = "Lumbar Spine"
    PELVIS_AND_BUTTOCKS = "Pelvis and Buttocks"
    HIP_AND_GROIN = "Hip and Groin"
    HEAD = "Head"
    SHOULDER = "Shoulder"
    KNEE = "Knee"
    THIGH = "Thigh"
    WRIST_AND_HAND = "Wrist and Hand"
    FOREARM = "Forearm"
    LEG_ANKLE_FOOT = "Leg/Ankle/Foot"
    ELBOW = "Elbow"

    def label(self, locale: str = "en") -> str:
        return _localized(self, locale)


class WorkloadDimension(IntEnum):
    """The six NASA-TLX subscales, in questionnaire order."""

    MENTAL = 1
    PHYSICAL = 2
    TEMPORAL = 3
    PERFORMANCE = 4
    EFFORT = 5
    FRUSTRATION = 6


class Role(IntEnum):
    """Application roles that may request scores."""

    PILOT = 1
    HEALTH_PROFESSIONAL = 2
    MANAGER = 3


# ---------------------------------------------------------------------------
# BMI thresholds (kg/m²) — WHO Technical Report Series 894 (2000)
# ---------------------------------------------------------------------------
BMI_UNDERWEIGHT_UPPER = 18.5
BMI_NORMAL_UPPER = 25.0
BMI_OVERWEIGHT_UPPER = 30.0
BMI_OBESITY_I_UPPER = 35.0
BMI_OBESITY_II_UPPER = 40.0

# Evaluated top-down; first upper bound the value falls below wins.
BMI_BANDS: tuple[tuple[float, BmiClass], ...] = (
    (BMI_UNDERWEIGHT_UPPER, BmiClass.UNDERWEIGHT),
    (BMI_NORMAL_UPPER, BmiClass.NORMAL),
    (BMI_OVERWEIGHT_UPPER, BmiClass.OVERWEIGHT),
    (BMI_OBESITY_I_UPPER, BmiClass.OBESITY_I),
    (BMI_OBESITY_II_UPPER, BmiClass.OBESITY_II),
)

# ---------------------------------------------------------------------------
# IPAQ scoring — IPAQ Research Committee (2005), Guidelines for Data
# Processing and Analysis of the IPAQ, short form
# ---------------------------------------------------------------------------
MET_VIGOROUS = 8.0
MET_MODERATE = 4.0
MET_WALKING = 3.3

IPAQ_VERY_ACTIVE_VIGOROUS_DAYS = 3
IPAQ_VERY_ACTIVE_VIGOROUS_MET = 1500.0
IPAQ_VERY_ACTIVE_TOTAL_DAYS = 7
IPAQ_VERY_ACTIVE_TOTAL_MET = 3000.0

IPAQ_ACTIVE_VIGOROUS_DAYS = 3
IPAQ_ACTIVE_MODERATE_DAYS = 5
IPAQ_ACTIVE_TOTAL_DAYS = 5
IPAQ_ACTIVE_VIG_MOD_MET = 600.0

# ---------------------------------------------------------------------------
# Fatigue-Injury Index (IFL) body-location severity weights
# ---------------------------------------------------------------------------
LOCATION_WEIGHTS: dict[BodyLocation, int] = {
    BodyLocation.THORAX: 3,
    BodyLocation.THORACIC_SPINE: 3,
    BodyLocation.LUMBAR_SPINE: 3,
    BodyLocation.PELVIS_AND_BUTTOCKS: 3,
    BodyLocation.HIP_AND_GROIN: 3,
    BodyLocation.HEAD: 2,
    BodyLocation.SHOULDER: 2,
    BodyLocation.KNEE: 2,
    BodyLocation.THIGH: 2,
    BodyLocation.WRIST_AND_HAND: 1,
    BodyLocation.FOREARM: 1,
    BodyLocation.LEG_ANKLE_FOOT: 1,
    BodyLocation.ELBOW: 1,
}

# Roles allowed to see anthropometrics and the fatigue-injury index
CLINICAL_ROLES = frozenset({Role.HEALTH_PROFESSIONAL, Role.MANAGER})

# ---------------------------------------------------------------------------
# Localization — labels used by the pt-BR front end
# ---------------------------------------------------------------------------
SUPPORTED_LOCALES = ("en", "pt_BR")

PT_BR_LABELS: dict[Enum, str] = {
    BmiClass.INSUFFICIENT_DATA: "Dados insuficientes",
    BmiClass.UNDERWEIGHT: "Abaixo do peso",
    BmiClass.NORMAL: "Peso Normal",
    BmiClass.OVERWEIGHT: "Sobrepeso",
    BmiClass.OBESITY_I: "Obesidade Grau I",
    BmiClass.OBESITY_II: "Obesidade Grau II",
    BmiClass.OBESITY_III: "Obesidade Grau III",
    ActivityLevel.NOT_INFORMED: "Não informado",
    ActivityLevel.VERY_ACTIVE: "Muito Ativo",
    ActivityLevel.ACTIVE: "Ativo",
    ActivityLevel.INSUFFICIENTLY_ACTIVE: "Insuficientemente Ativo",
    BodyLocation.THORAX: "Tórax",
    BodyLocation.THORACIC_SPINE: "Coluna Torácica",
    BodyLocation.LUMBAR_SPINE: "Coluna Lombar",
    BodyLocation.PELVIS_AND_BUTTOCKS: "Pelve e Nádegas",
    BodyLocation.HIP_AND_GROIN: "Quadril e virilha",
    BodyLocation.HEAD: "Cabeça",
    BodyLocation.SHOULDER: "Ombro",
    BodyLocation.KNEE: "Joelho",
    BodyLocation.THIGH: "Coxa",
    BodyLocation.WRIST_AND_HAND: "Punho e Mão",
    BodyLocation.FOREARM: "Antebraço",
    BodyLocation.LEG_ANKLE_FOOT: "Perna, Tornozelo e Pé",
    BodyLocation.ELBOW: "Cotovelo",
}


def _localized(member: Enum, locale: str) -> str:
    if locale == "pt_BR":
        return PT_BR_LABELS.get(member, member.value)
    return member.value
