"""
Temperature Within Concrete Slabs
=================================
ACI/TMS 216.1M-14, Fig. 4.4.2.2.1a(a)-(c): temperature at a depth inside a
slab exposed to the ASTM E119 standard fire.

Interpolation strategy: controlled linear 2D
--------------------------------------------
The figures are a set of independently digitized time curves at irregular
depths, and every depth curve has its own time range. Shallow curves stop
early because they reach ~1600 °F long before 240 min.

1. Interpolate in fire time on each of the two depth curves bracketing the
   requested depth, each inside its own time range.
2. Interpolate linearly in depth between the two results.

A query at an exact digitized depth skips step 2. Nothing is extrapolated:
depths and times outside the data raise :class:`OutOfRangeError`.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

import numpy as np
import matplotlib.pyplot as plt

from fireresistance.analysis.interpolation import evaluate
from fireresistance.errors import CurveDataError, OutOfRangeError
from fireresistance.model.curves import Curve
from fireresistance.model.materials import AggregateType, parse_aggregate
from fireresistance.utils import TemperatureUnit, from_fahrenheit, resolve_unit

if TYPE_CHECKING:
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)


class DepthTimeSurface:
    """
    Temperature curves over fire time, one per digitized depth.

    Args:
        aggregate: Aggregate type the surface belongs to.
        curves: Mapping of depth (mm) -> Curve of temperature (°F) over time (min).
    """

    def __init__(self, aggregate: AggregateType | str, curves: Mapping[float, Curve]):
        aggregate = parse_aggregate(aggregate)
        if not curves:
            raise CurveDataError(f"No depth curves given for aggregate type '{aggregate}'.")

        depths = np.array(sorted(float(d) for d in curves), dtype=np.float64)
        if not np.all(np.isfinite(depths)):
            raise CurveDataError(f"Depths for '{aggregate}' must be finite numbers.")
        if len(np.unique(depths)) != len(depths):
            raise CurveDataError(f"Duplicate depth curves for '{aggregate}'.")
        depths.setflags(write=False)

        self.aggregate = aggregate
        self.depths = depths
        self._curves = {float(d): c for d, c in curves.items()}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self.depths.setflags(write=False)

    def __repr__(self) -> str:
        return (
            f"DepthTimeSurface({self.aggregate.value!r}, depths={len(self.depths)}, "
            f"range=[{self.min_depth:g}, {self.max_depth:g}] mm)"
        )

    @property
    def min_depth(self) -> float:
        return float(self.depths[0])

    @property
    def max_depth(self) -> float:
        return float(self.depths[-1])

    def curve(self, depth: float) -> Curve:
        return self._curves[float(depth)]

    def time_range(self, depth: float) -> tuple[float, float]:
        c = self.curve(depth)
        return c.x_min, c.x_max

    def interpolate_time(self, depth: float, fire_time: float) -> float:
        """Temperature (°F) on the curve of a digitized ``depth`` at ``fire_time``."""
        c = self.curve(depth)
        t_min, t_max = c.x_min, c.x_max
        if not t_min <= fire_time <= t_max:
            raise OutOfRangeError(
                f"fire_time = {fire_time} min is out of range [{t_min:g}, {t_max:g}] min "
                f"for depth {depth:g} mm in concrete_type = '{self.aggregate.value}'. "
                "Shallow curves reach ~1600 °F before 240 min and have shorter time ranges."
            )
        return evaluate(c, fire_time)

    def plot(self, ax: Optional[Axes] = None, show: bool = False, **kwargs: Any) -> Axes:
        """Plot every depth curve of the surface into one Axes."""
        if ax is None:
            plt.rcParams["figure.constrained_layout.use"] = True
            _, ax = plt.subplots(figsize=(7, 5))

        for depth in self.depths:
            self.curve(depth).plot(ax=ax, label=f"{depth:g} mm", **kwargs)

        ax.set_title(f"Temperature within slab: {self.aggregate.value}")
        ax.legend(fontsize="small", ncol=2)

        if show:
            plt.show()
        return ax


class SlabTemperatureModel:
    """
    Temperature at depth inside a fire-exposed slab.

    Args:
        surfaces: Mapping of aggregate type -> DepthTimeSurface.
    """

    def __init__(self, surfaces: Mapping[AggregateType | str, DepthTimeSurface]):
        if not surfaces:
            raise CurveDataError("SlabTemperatureModel needs at least one aggregate type.")
        self._surfaces: dict[AggregateType, DepthTimeSurface] = {}
        for key, s in surfaces.items():
            aggregate = parse_aggregate(key)
            if s.aggregate != aggregate:
                raise CurveDataError(
                    f"Surface for '{s.aggregate.value}' registered under aggregate type "
                    f"'{aggregate.value}'."
                )
            self._surfaces[aggregate] = s

    @property
    def aggregate_types(self) -> tuple[AggregateType, ...]:
        return tuple(self._surfaces)

    def surface(self, aggregate_type: str | AggregateType) -> DepthTimeSurface:
        aggregate = parse_aggregate(aggregate_type, self.aggregate_types)
        return self._surfaces[aggregate]

    def depth_range(self, aggregate_type: str | AggregateType) -> tuple[float, float]:
        s = self.surface(aggregate_type)
        return s.min_depth, s.max_depth

    def time_range(self, aggregate_type: str | AggregateType, depth: float) -> tuple[float, float]:
        """Time range of a digitized depth curve."""
        s = self.surface(aggregate_type)
        if float(depth) not in s.depths:
            raise OutOfRangeError(
                f"{depth} mm is not a digitized depth for '{s.aggregate.value}'. "
                f"Digitized depths: {', '.join(f'{d:g}' for d in s.depths)}"
            )
        return s.time_range(depth)

    def temperature_at(
        self,
        fire_time: float,
        depth: float,
        aggregate_type: str | AggregateType,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> float:
        """
        Temperature at ``depth`` (mm) after ``fire_time`` (min) of standard fire exposure.

        Args:
            fire_time: Fire test duration in minutes. Must lie inside the time
                range of both bounding depth curves.
            depth: Distance from the fire-exposed surface in mm.
            aggregate_type: ``"carbonate"``, ``"siliceous"`` or ``"semi_lightweight"``.
            unit: ``"fahrenheit"`` (default) or ``"celsius"`` for the result.

        Raises:
            InvalidUnitError, UnknownCategoryError, OutOfRangeError
        """
        unit = resolve_unit(unit)
        s = self.surface(aggregate_type)

        d_min, d_max = s.min_depth, s.max_depth
        if not d_min <= depth <= d_max:
            raise OutOfRangeError(
                f"distance_from_fire = {depth} mm is out of range "
                f"[{d_min:g}, {d_max:g}] mm for concrete_type = '{s.aggregate.value}'"
            )

        idx = int(np.searchsorted(s.depths, depth, side="left"))

        if s.depths[idx] == depth:
            # Exact depth match: time interpolation only
            temp_f = s.interpolate_time(s.depths[idx], fire_time)
            logger.debug(
                f"{s.aggregate.value}: t={fire_time} min, d={depth} mm (exact curve) -> {temp_f:.1f} °F"
            )
            return from_fahrenheit(temp_f, unit)

        d_lo = float(s.depths[idx - 1])  # closer to fire, hotter
        d_hi = float(s.depths[idx])      # farther from fire, cooler

        t_lo = s.interpolate_time(d_lo, fire_time)
        t_hi = s.interpolate_time(d_hi, fire_time)

        alpha = (depth - d_lo) / (d_hi - d_lo)
        temp_f = t_lo + alpha * (t_hi - t_lo)
        logger.debug(
            f"{s.aggregate.value}: t={fire_time} min, d={depth} mm "
            f"between {d_lo:g} and {d_hi:g} mm -> {temp_f:.1f} °F"
        )
        return from_fahrenheit(temp_f, unit)

    def temperature_profile(
        self,
        fire_time: float,
        depths: Iterable[float],
        aggregate_type: str | AggregateType,
        unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ) -> list[float]:
        """
        Temperatures at several depths for one fire time, in the order given.

        The first depth that fails validation raises; later depths are not evaluated.
        """
        return [
            self.temperature_at(fire_time, d, aggregate_type, unit=unit)
            for d in depths
        ]
