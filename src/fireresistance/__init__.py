"""Fire resistance of concrete slabs per ACI/TMS 216.1M-14."""

from .errors import (
    FireResistanceError,
    UnknownCategoryError,
    OutOfRangeError,
    DomainError,
    InvalidUnitError,
    UnsupportedDurationError,
    CurveDataError,
)
from .utils import TemperatureUnit
from .model.curves import Curve, CurveFamily
from .model.materials import (
    AggregateType,
    NormalWeightCondition,
    SemiLightweightCondition,
    NormalWeightConcrete,
    SemiLightweightConcrete,
    ReinforcingSteel,
)
from .model.rating import (
    RatingTable,
    RatingResult,
    RatingEngine,
    evaluate_rating,
    maximum_rating,
)
from .analysis.temperature import DepthTimeSurface, SlabTemperatureModel
from .analysis.strength import StrengthModel
from .analysis.rebar import RebarCondition, RebarConditionFacade
from .analysis.model import FireResistanceLibrary

__all__ = [
    "FireResistanceError",
    "UnknownCategoryError",
    "OutOfRangeError",
    "DomainError",
    "InvalidUnitError",
    "UnsupportedDurationError",
    "CurveDataError",
    "TemperatureUnit",
    "Curve",
    "CurveFamily",
    "AggregateType",
    "NormalWeightCondition",
    "SemiLightweightCondition",
    "NormalWeightConcrete",
    "SemiLightweightConcrete",
    "ReinforcingSteel",
    "RatingTable",
    "RatingResult",
    "RatingEngine",
    "evaluate_rating",
    "maximum_rating",
    "DepthTimeSurface",
    "SlabTemperatureModel",
    "StrengthModel",
    "RebarCondition",
    "RebarConditionFacade",
    "FireResistanceLibrary",
]
