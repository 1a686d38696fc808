from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from fireresistance.analysis.rebar import RebarCondition, RebarConditionFacade
from fireresistance.analysis.strength import StrengthModel
from fireresistance.analysis.temperature import SlabTemperatureModel
from fireresistance.config import DATA_PATH
from fireresistance.model.io import DataLoader
from fireresistance.model.materials import AggregateType, StrengthMaterial
from fireresistance.model.rating import RatingEngine, RatingResult
from fireresistance.utils import TemperatureUnit

logger = logging.getLogger(__name__)


class FireResistanceLibrary:
    """
    Class represents the loaded ACI 216.1M-14 data set.

    This class bundles the slab temperature model, the strength model and the
    rating engine behind one object, so a caller loads the tables once and
    queries all three.
    """
    def __init__(
        self,
        temperature_model: SlabTemperatureModel,
        strength_model: StrengthModel,
        rating_engine: Optional[RatingEngine] = None,
    ):
        """Initialize the library from already built models."""
        self.temperature_model = temperature_model
        self.strength_model = strength_model
        self.rating_engine = rating_engine or RatingEngine()
        self.rebar = RebarConditionFacade(temperature_model, strength_model)

    @classmethod
    def from_directory(cls, path: str = DATA_PATH) -> FireResistanceLibrary:
        """Load every temperature and strength table from a data directory."""
        logger.info(f"Loading fire resistance data from: {path}")
        return cls(
            temperature_model=DataLoader.load_temperature_model(path),
            strength_model=DataLoader.load_strength_model(path),
        )

    @property
    def aggregate_types(self) -> tuple[AggregateType, ...]:
        """Return the aggregate types with slab temperature data."""
        return self.temperature_model.aggregate_types

    def temperature_at(
        self,
        fire_time: float,
        depth: float,
        aggregate_type: str | AggregateType,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.temperature_model.temperature_at(fire_time, depth, aggregate_type, unit=unit)

    def temperature_profile(
        self,
        fire_time: float,
        depths: Iterable[float],
        aggregate_type: str | AggregateType,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> List[float]:
        return self.temperature_model.temperature_profile(fire_time, depths, aggregate_type, unit=unit)

    def strength_fraction(
        self,
        temperature: float,
        material: str | StrengthMaterial,
        condition: Optional[str] = None,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.strength_model.strength_fraction(temperature, material, condition, unit=unit)

    def critical_temperature(
        self,
        threshold: float,
        material: str | StrengthMaterial,
        condition: Optional[str] = None,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        return self.strength_model.critical_temperature(threshold, material, condition, unit=unit)

    def evaluate_rating(
        self,
        aggregate_type: str | AggregateType,
        restrained: bool,
        thickness: float,
        cover: float,
        durations: Optional[Iterable[int]] = None,
    ) -> List[RatingResult]:
        return self.rating_engine.evaluate(aggregate_type, restrained, thickness, cover, durations)

    def maximum_rating(
        self,
        aggregate_type: str | AggregateType,
        restrained: bool,
        thickness: float,
        cover: float,
        durations: Optional[Iterable[int]] = None,
    ) -> Optional[int]:
        return self.rating_engine.maximum_rating(aggregate_type, restrained, thickness, cover, durations)

    def rebar_condition(
        self,
        fire_time: float,
        cover: float,
        aggregate_type: str | AggregateType,
        concrete_condition: Optional[str] = None,
    ) -> RebarCondition:
        return self.rebar.rebar_condition(fire_time, cover, aggregate_type, concrete_condition)
