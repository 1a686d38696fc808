"""
Input/Output Manager (CSV)
Reads the digitized ACI 216.1M-14 tables into curves, and converts raw
digitizer exports into the long-format tables the loaders expect.

Long-format tables:
    <aggregate>_concrete.csv  -> Distance_mm, Time_min, Temperature (°F)
    <aggregate>_strength.csv  -> condition, temperature_F, strength_fraction
    steel_strength.csv        -> temperature_F, strength_fraction
"""
from __future__ import annotations

import csv
import logging
import os
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from fireresistance.analysis.strength import StrengthModel
from fireresistance.analysis.temperature import DepthTimeSurface, SlabTemperatureModel
from fireresistance.config import (
    DATA_PATH,
    STEEL_STRENGTH_FILENAME,
    STRENGTH_FILENAMES,
    TEMPERATURE_FILENAMES,
)
from fireresistance.errors import CurveDataError
from fireresistance.model.curves import Curve, CurveFamily
from fireresistance.model.materials import CONDITIONS, AggregateType, parse_aggregate

# Get module logger
logger = logging.getLogger(__name__)

DEPTH_COLUMN = "Distance_mm"
TIME_COLUMN = "Time_min"

StrengthRow = Tuple[str, float, float]


def _read_rows(filepath: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """Read a CSV file with a header row; ``;`` or ``,`` delimited."""
    with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
        line = f.readline()
        delimiter = ';' if ';' in line else ','
        f.seek(0)
        reader = csv.DictReader(f, delimiter=delimiter)
        header = [name.strip() for name in (reader.fieldnames or [])]
        rows = [
            {(k or "").strip(): (v or "").strip() for k, v in row.items()}
            for row in reader
            if any((v or "").strip() for v in row.values())
        ]
    return header, rows


def _number(row: Mapping[str, str], column: str, filepath: str, line: int) -> float:
    try:
        return float(row[column].replace(',', '.'))
    except (KeyError, ValueError) as e:
        raise CurveDataError(
            f"{filepath}, data row {line}: invalid value for column '{column}' ({e})"
        ) from e


def _require_columns(header: Sequence[str], columns: Iterable[str], filepath: str) -> None:
    missing = [c for c in columns if c not in header]
    if missing:
        raise CurveDataError(
            f"{filepath}: missing column(s) {', '.join(missing)}. Found: {', '.join(header)}"
        )


class DataLoader:
    """Builds curves and models from the long-format CSV tables."""

    @staticmethod
    def read_temperature_csv(filepath: str, aggregate: AggregateType | str) -> DepthTimeSurface:
        """
        Read one aggregate's slab temperature table.

        The temperature column is recognised by name (any header containing
        ``Temperature``; the digitizer export carries the unit in parentheses).
        """
        aggregate = parse_aggregate(aggregate)
        logger.info(f"Loading slab temperatures for '{aggregate.value}' from: {filepath}")
        header, rows = _read_rows(filepath)

        temp_cols = [name for name in header if "Temperature" in name]
        if len(temp_cols) != 1:
            raise CurveDataError(
                f"{filepath}: expected exactly one temperature column, found {temp_cols}"
            )
        _require_columns(header, (DEPTH_COLUMN, TIME_COLUMN), filepath)
        temp_col = temp_cols[0]

        knots: Dict[float, List[Tuple[float, float]]] = defaultdict(list)
        for i, row in enumerate(rows, start=1):
            depth = _number(row, DEPTH_COLUMN, filepath, i)
            time = _number(row, TIME_COLUMN, filepath, i)
            temperature = _number(row, temp_col, filepath, i)
            knots[depth].append((time, temperature))

        curves = {
            depth: Curve.from_knots(
                f"{aggregate.value} {depth:g} mm",
                pairs,
                x_label="Time (min)",
                y_label="Temperature (°F)",
            )
            for depth, pairs in knots.items()
        }
        surface = DepthTimeSurface(aggregate, curves)
        logger.debug(f"Loaded {surface!r} with {len(rows)} knots.")
        return surface

    @staticmethod
    def read_strength_csv(filepath: str, aggregate: AggregateType | str) -> CurveFamily:
        """Read one aggregate's concrete strength table (one curve per condition)."""
        aggregate = parse_aggregate(aggregate)
        logger.info(f"Loading concrete strength for '{aggregate.value}' from: {filepath}")
        header, rows = _read_rows(filepath)
        _require_columns(header, ("condition", "temperature_F", "strength_fraction"), filepath)

        knots: Dict[str, List[Tuple[float, float]]] = defaultdict(list)
        for i, row in enumerate(rows, start=1):
            knots[row["condition"]].append((
                _number(row, "temperature_F", filepath, i),
                _number(row, "strength_fraction", filepath, i),
            ))

        curves = {
            condition: Curve.from_knots(
                f"{aggregate.value} {condition}",
                pairs,
                x_label="Temperature (°F)",
                y_label="Retained f'c fraction",
            )
            for condition, pairs in knots.items()
        }
        required = [c.value for c in CONDITIONS.get(aggregate, ())]
        return CurveFamily(f"{aggregate.value} strength", curves, required_keys=required)

    @staticmethod
    def read_steel_strength_csv(filepath: str) -> Curve:
        logger.info(f"Loading steel strength from: {filepath}")
        header, rows = _read_rows(filepath)
        _require_columns(header, ("temperature_F", "strength_fraction"), filepath)
        return Curve.from_knots(
            "steel",
            [
                (
                    _number(row, "temperature_F", filepath, i),
                    _number(row, "strength_fraction", filepath, i),
                )
                for i, row in enumerate(rows, start=1)
            ],
            x_label="Temperature (°F)",
            y_label="Retained fy fraction",
        )

    @staticmethod
    def load_temperature_model(
        directory: str = DATA_PATH,
        filenames: Optional[Mapping[str, str]] = None,
    ) -> SlabTemperatureModel:
        filenames = TEMPERATURE_FILENAMES if filenames is None else filenames
        surfaces = {
            parse_aggregate(ct): DataLoader.read_temperature_csv(os.path.join(directory, fname), ct)
            for ct, fname in filenames.items()
        }
        return SlabTemperatureModel(surfaces)

    @staticmethod
    def load_strength_model(
        directory: str = DATA_PATH,
        filenames: Optional[Mapping[str, str]] = None,
        steel_filename: str = STEEL_STRENGTH_FILENAME,
    ) -> StrengthModel:
        filenames = STRENGTH_FILENAMES if filenames is None else filenames
        concrete = {
            parse_aggregate(ct): DataLoader.read_strength_csv(os.path.join(directory, fname), ct)
            for ct, fname in filenames.items()
        }
        steel = DataLoader.read_steel_strength_csv(os.path.join(directory, steel_filename))
        return StrengthModel(concrete, steel)


# ---------------------------------------------------------------------------
# One-time conversion of digitizer exports
# ---------------------------------------------------------------------------

def convert_wide_strength_csv(filepath: str, curve_names: Sequence[str]) -> List[StrengthRow]:
    """
    Convert a wide-format digitizer export into long-format strength rows.

    Source layout:
        row 1: curve names (one per X/Y column pair)
        row 2: X,Y headers
        row 3+: ragged data, empty cells are missing

    Args:
        filepath: Path to the export.
        curve_names: Condition names for the X/Y column pairs, left to right.

    Returns:
        ``(condition, temperature_F, strength_fraction)`` rows sorted by condition
        and temperature. Percent values are divided by 100 and capped at 1.0
        to remove digitizing overshoot.
    """
    logger.info(f"Converting wide strength export: {filepath}")
    out: List[StrengthRow] = []
    with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
        reader = csv.reader(f)
        for line_no, row in enumerate(reader, start=1):
            if line_no <= 2:
                continue
            for i, name in enumerate(curve_names):
                xcol, ycol = 2 * i, 2 * i + 1
                x = row[xcol].strip() if xcol < len(row) else ""
                y = row[ycol].strip() if ycol < len(row) else ""
                if not x or not y:
                    continue
                try:
                    temperature, percent = float(x), float(y)
                except ValueError as e:
                    raise CurveDataError(f"{filepath}, line {line_no}: {e}") from e
                out.append((name, temperature, min(1.0, percent / 100.0)))

    out.sort(key=lambda r: (r[0], r[1]))
    logger.info(f"Converted {len(out)} rows ({', '.join(dict.fromkeys(r[0] for r in out))}).")
    return out


def convert_steel_strength_csv(filepath: str) -> List[Tuple[float, float]]:
    """Convert the steel export (``temperature_F, percent_strength_at_70F``) to fractions."""
    header, rows = _read_rows(filepath)
    _require_columns(header, ("temperature_F", "percent_strength_at_70F"), filepath)
    out = [
        (
            _number(row, "temperature_F", filepath, i),
            _number(row, "percent_strength_at_70F", filepath, i) / 100.0,
        )
        for i, row in enumerate(rows, start=1)
    ]
    out.sort()
    return out


def write_long_strength_csv(rows: Iterable[StrengthRow], filepath: str) -> None:
    with open(filepath, mode='w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(["condition", "temperature_F", "strength_fraction"])
        writer.writerows(rows)
    logger.info(f"Strength table written to: {filepath}")


def write_steel_strength_csv(rows: Iterable[Tuple[float, float]], filepath: str) -> None:
    with open(filepath, mode='w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(["temperature_F", "strength_fraction"])
        writer.writerows(rows)
    logger.info(f"Steel strength table written to: {filepath}")
