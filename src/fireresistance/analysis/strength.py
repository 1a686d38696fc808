"""
Material Strength at Elevated Temperature
=========================================
ACI/TMS 216.1M-14 strength-temperature relationships:

    Fig. 4.4.3.4.1: hot-rolled steel flexural reinforcement (yield strength)
    Fig. 4.4.3.4.2: siliceous aggregate concrete (compressive strength)
    Fig. 4.4.3.4.3: carbonate aggregate concrete (compressive strength)
    Fig. 4.4.3.4.4: semi-lightweight aggregate concrete (compressive strength)

Curves hold retained-strength fractions over temperature (°F). Below the
first knot the first value is returned (full ambient strength); above the
last knot the last value is returned, since the source curves stop where the
material has lost structural viability.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Optional

from fireresistance.analysis.interpolation import evaluate, inverse_threshold
from fireresistance.errors import CurveDataError, UnknownCategoryError
from fireresistance.model.curves import Curve, CurveFamily
from fireresistance.model.materials import (
    CONDITIONS,
    AggregateType,
    ReinforcingSteel,
    StrengthMaterial,
    condition_names,
    parse_aggregate,
    parse_material,
)
from fireresistance.utils import (
    TemperatureUnit,
    from_fahrenheit,
    resolve_unit,
    to_fahrenheit,
)

logger = logging.getLogger(__name__)


class StrengthModel:
    """
    Retained strength fractions and critical temperatures.

    Args:
        concrete: Mapping of aggregate type -> CurveFamily keyed by condition name.
            Every condition of the aggregate's vocabulary must be present.
        steel: Steel yield-strength curve.
    """

    def __init__(
        self,
        concrete: Mapping[AggregateType | str, CurveFamily],
        steel: Curve,
    ):
        families = {}
        for key, family in concrete.items():
            aggregate = parse_aggregate(key)
            if aggregate not in CONDITIONS:
                raise CurveDataError(
                    f"No strength condition vocabulary for aggregate type '{aggregate.value}'."
                )
            missing = [c.value for c in CONDITIONS[aggregate] if c.value not in family]
            if missing:
                raise CurveDataError(
                    f"Strength curves for '{aggregate.value}' are missing conditions: "
                    + ", ".join(missing)
                )
            families[aggregate] = family

        self._concrete = families
        self.steel = steel

    @property
    def aggregate_types(self) -> tuple[AggregateType, ...]:
        return tuple(self._concrete)

    def conditions(self, aggregate_type: str | AggregateType) -> list[str]:
        return condition_names(aggregate_type)

    def curve(self, material: str | StrengthMaterial, condition: Optional[str] = None) -> Curve:
        """Resolve the strength curve for a material / condition selection."""
        resolved = parse_material(material, condition)
        if isinstance(resolved, ReinforcingSteel):
            return self.steel

        family = self._concrete.get(resolved.aggregate)
        if family is None:
            valid = ", ".join(sorted(a.value for a in self._concrete))
            raise UnknownCategoryError(
                f"No strength curves loaded for '{resolved.family}'. Loaded: {valid}"
            )
        return family.get_curve(resolved.curve_key)

    def strength_fraction(
        self,
        temperature: float,
        material: str | StrengthMaterial,
        condition: Optional[str] = None,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        """
        Retained strength as a fraction of the ambient value.

        Args:
            temperature: Temperature in ``unit``.
            material: ``"steel"``, an aggregate type, or a typed material variant.
            condition: Stress condition for concrete (see
                :mod:`fireresistance.model.materials`); ``None`` uses the default.
            unit: ``"fahrenheit"`` (default) or ``"celsius"``.

        Raises:
            InvalidUnitError, UnknownCategoryError
        """
        unit = resolve_unit(unit)
        c = self.curve(material, condition)
        temp_f = to_fahrenheit(temperature, unit)
        fraction = evaluate(c, temp_f)
        logger.debug(f"{c.name}: {temp_f:.1f} °F -> {fraction:.4f}")
        return fraction

    def critical_temperature(
        self,
        threshold: float,
        material: str | StrengthMaterial,
        condition: Optional[str] = None,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        """
        Temperature at which the retained fraction first drops to ``threshold``.

        Returns ``math.inf`` when the curve never reaches ``threshold`` inside
        the digitized range; this is a result, not an error.

        Raises:
            InvalidUnitError, UnknownCategoryError, DomainError
        """
        unit = resolve_unit(unit)
        c = self.curve(material, condition)
        temp_f = inverse_threshold(c, float(threshold))
        if math.isinf(temp_f):
            logger.debug(f"{c.name}: fraction never reaches {threshold}")
            return temp_f
        return from_fahrenheit(temp_f, unit)

    # Named forms of the two operations above

    def concrete_strength_fraction(
        self,
        temperature: float,
        aggregate_type: str | AggregateType,
        condition: str,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.strength_fraction(temperature, aggregate_type, condition, unit=unit)

    def steel_strength_fraction(
        self,
        temperature: float,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.strength_fraction(temperature, ReinforcingSteel(), unit=unit)

    def concrete_critical_temperature(
        self,
        threshold: float,
        aggregate_type: str | AggregateType,
        condition: str,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.critical_temperature(threshold, aggregate_type, condition, unit=unit)

    def steel_critical_temperature(
        self,
        threshold: float,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.critical_temperature(threshold, ReinforcingSteel(), unit=unit)
