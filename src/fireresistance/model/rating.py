"""
Prescriptive Fire Resistance of Concrete Slabs
==============================================
ACI 216.1M-14:

    Table 4.2      minimum equivalent slab thickness (mm)
    Table 4.3.1.1  minimum clear cover for nonprestressed slabs (mm)

A slab achieves a rating only when both criteria hold. Cover is measured from
the fire-exposed surface to the nearest surface of the longitudinal
reinforcement. The tables are looked up, never interpolated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from fireresistance.config import CODE_REFERENCE
from fireresistance.errors import CurveDataError, UnsupportedDurationError
from fireresistance.model.materials import AggregateType, parse_aggregate
from fireresistance.utils import mm_to_in

logger = logging.getLogger(__name__)

SUPPORTED_DURATIONS: Tuple[int, ...] = (60, 90, 120, 180, 240)

# Table 4.2: Minimum equivalent thickness (mm)
MIN_THICKNESS_MM: Dict[AggregateType, Dict[int, float]] = {
    AggregateType.SILICEOUS:        {60: 90, 90: 110, 120: 125, 180: 155, 240: 175},
    AggregateType.CARBONATE:        {60: 80, 90: 100, 120: 115, 180: 145, 240: 170},
    AggregateType.SEMI_LIGHTWEIGHT: {60: 70, 90: 85,  120: 95,  180: 115, 240: 135},
    AggregateType.LIGHTWEIGHT:      {60: 65, 90: 80,  120: 90,  180: 110, 240: 130},
}

# Table 4.3.1.1: Minimum cover (mm), restrained: 20 mm for every type and rating
MIN_COVER_RESTRAINED_MM: Dict[AggregateType, Dict[int, float]] = {
    aggregate: {duration: 20 for duration in SUPPORTED_DURATIONS}
    for aggregate in AggregateType
}

# Table 4.3.1.1: Minimum cover (mm), unrestrained
MIN_COVER_UNRESTRAINED_MM: Dict[AggregateType, Dict[int, float]] = {
    AggregateType.SILICEOUS:        {60: 20, 90: 20, 120: 25, 180: 30, 240: 40},
    AggregateType.CARBONATE:        {60: 20, 90: 20, 120: 20, 180: 30, 240: 30},
    AggregateType.SEMI_LIGHTWEIGHT: {60: 20, 90: 20, 120: 20, 180: 30, 240: 30},
    AggregateType.LIGHTWEIGHT:      {60: 20, 90: 20, 120: 20, 180: 30, 240: 30},
}


@dataclass(frozen=True)
class RatingTable:
    """The two prescriptive tables, keyed by aggregate type and duration (min)."""
    min_thickness_mm: Mapping[AggregateType, Mapping[int, float]]
    min_cover_restrained_mm: Mapping[AggregateType, Mapping[int, float]]
    min_cover_unrestrained_mm: Mapping[AggregateType, Mapping[int, float]]
    durations: Tuple[int, ...] = SUPPORTED_DURATIONS

    def __post_init__(self) -> None:
        for label, table in (
            ("minimum thickness", self.min_thickness_mm),
            ("restrained cover", self.min_cover_restrained_mm),
            ("unrestrained cover", self.min_cover_unrestrained_mm),
        ):
            for aggregate in AggregateType:
                row = table.get(aggregate)
                if row is None or set(row) != set(self.durations):
                    raise CurveDataError(
                        f"Rating table '{label}' must list durations "
                        f"{list(self.durations)} for '{aggregate.value}'."
                    )

    @classmethod
    def standard(cls) -> RatingTable:
        return cls(
            min_thickness_mm=MIN_THICKNESS_MM,
            min_cover_restrained_mm=MIN_COVER_RESTRAINED_MM,
            min_cover_unrestrained_mm=MIN_COVER_UNRESTRAINED_MM,
        )

    def required_thickness(self, aggregate: AggregateType, duration: int) -> float:
        return float(self.min_thickness_mm[aggregate][duration])

    def required_cover(self, aggregate: AggregateType, restrained: bool, duration: int) -> float:
        table = self.min_cover_restrained_mm if restrained else self.min_cover_unrestrained_mm
        return float(table[aggregate][duration])


@dataclass(frozen=True)
class RatingResult:
    """Outcome of one fire-resistance duration check."""
    # Inputs
    aggregate_type: AggregateType
    restrained: bool
    duration_min: int
    slab_thickness_mm: float
    clear_cover_mm: float
    # Required values (Table 4.2 / Table 4.3.1.1)
    required_thickness_mm: float
    required_cover_mm: float
    # Pass / fail
    thickness_pass: bool
    cover_pass: bool
    overall_pass: bool
    failure_reason: str
    code_ref: str = f"{CODE_REFERENCE}: Table 4.2, Table 4.3.1.1"

    @property
    def duration_hr(self) -> float:
        return self.duration_min / 60.0

    @property
    def slab_thickness_in(self) -> float:
        return mm_to_in(self.slab_thickness_mm)

    @property
    def clear_cover_in(self) -> float:
        return mm_to_in(self.clear_cover_mm)

    @property
    def required_thickness_in(self) -> float:
        return mm_to_in(self.required_thickness_mm)

    @property
    def required_cover_in(self) -> float:
        return mm_to_in(self.required_cover_mm)


def _failure_reason(
    thickness: float,
    cover: float,
    required_thickness: float,
    required_cover: float,
    thickness_pass: bool,
    cover_pass: bool,
    restrained: bool,
) -> str:
    if thickness_pass and cover_pass:
        return "PASS"

    restraint_label = "restrained" if restrained else "unrestrained"
    thickness_msg = (
        f"thickness {thickness:.1f} mm < required {required_thickness:g} mm (Table 4.2)"
    )
    cover_msg = (
        f"cover {cover:.1f} mm < required {required_cover:g} mm "
        f"(Table 4.3.1.1, {restraint_label})"
    )
    if not thickness_pass and not cover_pass:
        return f"FAIL: {thickness_msg}; {cover_msg}"
    if not thickness_pass:
        return f"FAIL: {thickness_msg}"
    return f"FAIL: {cover_msg}"


class RatingEngine:
    """
    Pass/fail evaluation of slab thickness and cover against the rating tables.

    Args:
        table: Prescriptive tables; the ACI 216.1M-14 values when omitted.
    """

    def __init__(self, table: Optional[RatingTable] = None):
        self.table = table or RatingTable.standard()

    def _validate_durations(self, durations: Iterable[int]) -> List[int]:
        checked = list(durations)
        for duration in checked:
            if duration not in self.table.durations:
                raise UnsupportedDurationError(
                    f"Duration {duration} min is not in {CODE_REFERENCE} Table 4.2. "
                    f"Supported durations: {list(self.table.durations)}"
                )
        return [int(d) for d in checked]

    def evaluate(
        self,
        aggregate_type: str | AggregateType,
        restrained: bool,
        thickness: float,
        cover: float,
        durations: Optional[Iterable[int]] = None,
    ) -> List[RatingResult]:
        """
        Check a slab against every requested duration.

        Args:
            aggregate_type: ``"siliceous"``, ``"carbonate"``, ``"semi_lightweight"``
                or ``"lightweight"``.
            restrained: Restraint class per Table 4.3.1.
            thickness: Slab (equivalent) thickness in mm.
            cover: Clear cover in mm.
            durations: Ratings to check in minutes; all five when omitted.

        Returns:
            One RatingResult per duration, in the order requested.

        Raises:
            UnknownCategoryError: Unknown aggregate type.
            UnsupportedDurationError: Any duration outside the tables.
        """
        aggregate = parse_aggregate(aggregate_type)
        checked = self._validate_durations(
            self.table.durations if durations is None else durations
        )

        t_mm = float(thickness)
        cc_mm = float(cover)
        results: List[RatingResult] = []

        for duration in checked:
            req_t = self.table.required_thickness(aggregate, duration)
            req_cc = self.table.required_cover(aggregate, restrained, duration)

            thickness_pass = t_mm >= req_t
            cover_pass = cc_mm >= req_cc

            results.append(RatingResult(
                aggregate_type=aggregate,
                restrained=bool(restrained),
                duration_min=duration,
                slab_thickness_mm=t_mm,
                clear_cover_mm=cc_mm,
                required_thickness_mm=req_t,
                required_cover_mm=req_cc,
                thickness_pass=thickness_pass,
                cover_pass=cover_pass,
                overall_pass=thickness_pass and cover_pass,
                failure_reason=_failure_reason(
                    t_mm, cc_mm, req_t, req_cc, thickness_pass, cover_pass, restrained
                ),
            ))

        logger.debug(
            f"{aggregate.value} ({'restrained' if restrained else 'unrestrained'}), "
            f"{t_mm} mm / {cc_mm} mm: "
            + ", ".join(f"{r.duration_min}={'PASS' if r.overall_pass else 'FAIL'}" for r in results)
        )
        return results

    def maximum_rating(
        self,
        aggregate_type: str | AggregateType,
        restrained: bool,
        thickness: float,
        cover: float,
        durations: Optional[Iterable[int]] = None,
    ) -> Optional[int]:
        """Largest passing duration in minutes, or ``None`` when no rating passes."""
        results = self.evaluate(aggregate_type, restrained, thickness, cover, durations)
        passed = [r.duration_min for r in results if r.overall_pass]
        return max(passed) if passed else None


_DEFAULT_ENGINE = RatingEngine()


def evaluate_rating(
    aggregate_type: str | AggregateType,
    restrained: bool,
    thickness: float,
    cover: float,
    durations: Optional[Iterable[int]] = None,
) -> List[RatingResult]:
    """:meth:`RatingEngine.evaluate` on the ACI 216.1M-14 tables."""
    return _DEFAULT_ENGINE.evaluate(aggregate_type, restrained, thickness, cover, durations)


def maximum_rating(
    aggregate_type: str | AggregateType,
    restrained: bool,
    thickness: float,
    cover: float,
    durations: Optional[Iterable[int]] = None,
) -> Optional[int]:
    """:meth:`RatingEngine.maximum_rating` on the ACI 216.1M-14 tables."""
    return _DEFAULT_ENGINE.maximum_rating(aggregate_type, restrained, thickness, cover, durations)
