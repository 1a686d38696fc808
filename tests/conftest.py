import csv
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from fireresistance.analysis.strength import StrengthModel
from fireresistance.analysis.temperature import DepthTimeSurface, SlabTemperatureModel
from fireresistance.model.curves import Curve, CurveFamily

# depth (mm) -> [(time (min), temperature (°F))]
# Shallow curves stop early, as in the digitized figures.
CARBONATE_TEMPERATURES = {
    10.0: [(0, 70), (30, 1000), (60, 1300), (90, 1500)],
    20.0: [(0, 70), (30, 700), (60, 1000), (120, 1300), (180, 1500)],
    40.0: [(0, 70), (60, 600), (120, 900), (240, 1200)],
}

SILICEOUS_TEMPERATURES = {
    10.0: [(0, 70), (30, 1050), (60, 1350), (90, 1550)],
    25.0: [(0, 70), (60, 950), (120, 1250), (240, 1500)],
    50.0: [(0, 70), (60, 500), (120, 800), (240, 1100)],
}

SEMI_LIGHTWEIGHT_TEMPERATURES = {
    10.0: [(0, 70), (30, 900), (60, 1200), (120, 1450)],
    30.0: [(0, 70), (60, 500), (120, 800), (240, 1100)],
}

# condition -> [(temperature (°F), retained fraction)]
NORMAL_WEIGHT_STRENGTH = {
    "unstressed": [(70, 1.0), (600, 1.0), (1000, 0.75), (1400, 0.3), (1600, 0.1)],
    "stressed": [(70, 1.0), (800, 1.0), (1200, 0.6), (1600, 0.2)],
    "unstressed_residual": [(70, 1.0), (400, 0.9), (800, 0.5), (1200, 0.2)],
}

SEMI_LIGHTWEIGHT_STRENGTH = {
    "unstressed_sanded": [(70, 1.0), (800, 1.0), (1200, 0.7), (1600, 0.25)],
    "unstressed_unsanded": [(70, 1.0), (600, 1.0), (1000, 0.8), (1600, 0.2)],
    "stressed": [(70, 1.0), (900, 1.0), (1300, 0.6), (1600, 0.3)],
    "unstressed_residual_sanded": [(70, 1.0), (500, 0.9), (900, 0.5), (1300, 0.2)],
}

STEEL_STRENGTH = [(70, 1.0), (400, 1.0), (800, 0.7), (1000, 0.5), (1200, 0.2), (1400, 0.1)]

TEMPERATURE_DATA = {
    "carbonate": CARBONATE_TEMPERATURES,
    "siliceous": SILICEOUS_TEMPERATURES,
    "semi_lightweight": SEMI_LIGHTWEIGHT_TEMPERATURES,
}

STRENGTH_DATA = {
    "carbonate": NORMAL_WEIGHT_STRENGTH,
    "siliceous": NORMAL_WEIGHT_STRENGTH,
    "semi_lightweight": SEMI_LIGHTWEIGHT_STRENGTH,
}


def _surface(aggregate: str, table: dict) -> DepthTimeSurface:
    curves = {
        depth: Curve.from_knots(f"{aggregate} {depth:g} mm", knots)
        for depth, knots in table.items()
    }
    return DepthTimeSurface(aggregate, curves)


def _family(aggregate: str, table: dict) -> CurveFamily:
    return CurveFamily(
        f"{aggregate} strength",
        {condition: Curve.from_knots(condition, knots) for condition, knots in table.items()},
    )


@pytest.fixture
def steel_curve() -> Curve:
    return Curve.from_knots("steel", STEEL_STRENGTH)


@pytest.fixture
def temperature_model() -> SlabTemperatureModel:
    """Synthetic slab temperatures for the three digitized aggregate types."""
    return SlabTemperatureModel(
        {aggregate: _surface(aggregate, table) for aggregate, table in TEMPERATURE_DATA.items()}
    )


@pytest.fixture
def strength_model(steel_curve: Curve) -> StrengthModel:
    """Synthetic strength curves for every aggregate type and condition."""
    return StrengthModel(
        {aggregate: _family(aggregate, table) for aggregate, table in STRENGTH_DATA.items()},
        steel_curve,
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """The synthetic tables written out in the long CSV format."""
    for aggregate, table in TEMPERATURE_DATA.items():
        with open(tmp_path / f"{aggregate}_concrete.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Distance_mm", "Time_min", "Temperature (°F)"])
            for depth, knots in table.items():
                for time, temperature in knots:
                    writer.writerow([depth, time, temperature])

    for aggregate, table in STRENGTH_DATA.items():
        with open(tmp_path / f"{aggregate}_strength.csv", "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["condition", "temperature_F", "strength_fraction"])
            for condition, knots in table.items():
                for temperature, fraction in knots:
                    writer.writerow([condition, temperature, fraction])

    with open(tmp_path / "steel_strength.csv", "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["temperature_F", "strength_fraction"])
        writer.writerows(STEEL_STRENGTH)

    return tmp_path
