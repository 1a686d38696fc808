"""
Rebar Condition
===============
Chains the slab temperature model into the strength model for one rebar depth:
temperature at the cover depth, then the retained steel and concrete
fractions at that temperature.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fireresistance.analysis.strength import StrengthModel
from fireresistance.analysis.temperature import SlabTemperatureModel
from fireresistance.model.materials import AggregateType, ReinforcingSteel, parse_material
from fireresistance.utils import fahrenheit_to_celsius


@dataclass(frozen=True)
class RebarCondition:
    temperature_f: float
    temperature_c: float
    steel_fraction: float
    concrete_fraction: float


class RebarConditionFacade:
    """
    Combined temperature / strength query at a rebar depth.

    Args:
        temperature_model: Slab temperature model.
        strength_model: Strength model sharing the same aggregate types.
    """

    def __init__(self, temperature_model: SlabTemperatureModel, strength_model: StrengthModel):
        self.temperature_model = temperature_model
        self.strength_model = strength_model

    def rebar_condition(
        self,
        fire_time: float,
        cover: float,
        aggregate_type: str | AggregateType,
        concrete_condition: Optional[str] = None,
    ) -> RebarCondition:
        """
        Temperature and retained strengths at the rebar.

        Args:
            fire_time: Fire exposure duration in minutes.
            cover: Clear cover from the fire-exposed surface to the rebar in mm.
            aggregate_type: ``"carbonate"``, ``"siliceous"`` or ``"semi_lightweight"``.
            concrete_condition: Stress condition for the concrete curve. Defaults to
                ``"unstressed"``, or ``"unstressed_sanded"`` for semi-lightweight.
        """
        # Resolve the concrete curve first so a bad condition fails before any interpolation
        concrete = parse_material(aggregate_type, concrete_condition)

        temp_f = self.temperature_model.temperature_at(fire_time, cover, aggregate_type)

        return RebarCondition(
            temperature_f=temp_f,
            temperature_c=fahrenheit_to_celsius(temp_f),
            steel_fraction=self.strength_model.strength_fraction(temp_f, ReinforcingSteel()),
            concrete_fraction=self.strength_model.strength_fraction(temp_f, concrete),
        )
