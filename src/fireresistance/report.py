"""
Text Summaries
==============
Plain-text tables for rating results and strength retention, returned as
strings so the caller decides whether they go to a console, a log or a file.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from fireresistance.analysis.strength import StrengthModel
from fireresistance.model.materials import AggregateType, parse_material
from fireresistance.model.rating import RatingResult
from fireresistance.utils import TemperatureUnit, resolve_unit

DEFAULT_TEMPERATURES_F: tuple[float, ...] = tuple(range(200, 1401, 200))
DEFAULT_TEMPERATURES_C: tuple[float, ...] = tuple(range(100, 701, 100))

_UNIT_SYMBOL = {
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.CELSIUS: "°C",
}


def format_rating_summary(results: Iterable[RatingResult]) -> str:
    """
    One line per checked duration, headed by the slab description.

    Example::

        carbonate, unrestrained: t = 170.0 mm (6.69 in), cover = 30.0 mm (1.18 in)
          1.0 hr: PASS  (req. t >= 80 mm, cover >= 20 mm)
          ...
    """
    results = list(results)
    if not results:
        return "No ratings evaluated."

    first = results[0]
    restraint = "restrained" if first.restrained else "unrestrained"
    lines: List[str] = [
        f"{first.aggregate_type.value}, {restraint}: "
        f"t = {first.slab_thickness_mm:.1f} mm ({first.slab_thickness_in:.2f} in), "
        f"cover = {first.clear_cover_mm:.1f} mm ({first.clear_cover_in:.2f} in)"
    ]
    for r in results:
        status = "PASS" if r.overall_pass else r.failure_reason
        lines.append(
            f"  {r.duration_hr:.1f} hr: {status}  "
            f"(req. t >= {r.required_thickness_mm:g} mm, cover >= {r.required_cover_mm:g} mm)"
        )

    passed = [r.duration_min for r in results if r.overall_pass]
    if passed:
        lines.append(f"  Maximum rating: {max(passed) / 60.0:.1f} hr")
    else:
        lines.append("  Maximum rating: none")
    lines.append(f"  Ref: {first.code_ref}")
    return "\n".join(lines)


def format_strength_summary(
    strength_model: StrengthModel,
    aggregate: str | AggregateType,
    condition: Optional[str] = None,
    temperatures: Optional[Sequence[float]] = None,
    unit: str | TemperatureUnit = TemperatureUnit.FAHRENHEIT,
) -> str:
    """
    Retained concrete and steel strength at a list of temperatures.

    Args:
        strength_model: Loaded strength curves.
        aggregate: Concrete aggregate type.
        condition: Concrete stress condition; the aggregate default when omitted.
        temperatures: Temperatures in ``unit``. Defaults to 200-1400 °F in steps
            of 200, or 100-700 °C in steps of 100.
        unit: ``"fahrenheit"`` or ``"celsius"``.
    """
    unit = resolve_unit(unit)
    concrete = parse_material(aggregate, condition)
    if temperatures is None:
        temperatures = (
            DEFAULT_TEMPERATURES_C if unit == TemperatureUnit.CELSIUS else DEFAULT_TEMPERATURES_F
        )

    symbol = _UNIT_SYMBOL[unit]
    lines = [
        f"Strength retention: {concrete.family} ({concrete.curve_key}) and steel",
        f"{'T [' + symbol + ']':>10}  {'concrete':>9}  {'steel':>9}",
    ]
    for t in temperatures:
        fc = strength_model.strength_fraction(t, concrete, unit=unit)
        fy = strength_model.steel_strength_fraction(t, unit=unit)
        lines.append(f"{t:>10g}  {fc:>9.3f}  {fy:>9.3f}")
    return "\n".join(lines)
