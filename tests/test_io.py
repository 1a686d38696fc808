import csv
from pathlib import Path

import pytest

from fireresistance.analysis.model import FireResistanceLibrary
from fireresistance.errors import CurveDataError, OutOfRangeError
from fireresistance.model.io import (
    DataLoader,
    convert_steel_strength_csv,
    convert_wide_strength_csv,
    write_long_strength_csv,
    write_steel_strength_csv,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_read_temperature_csv_groups_and_sorts_by_depth(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "carbonate_concrete.csv",
        "Distance_mm,Time_min,Temperature (°F)\n"
        "20,60,1000\n"
        "10,30,1000\n"
        "20,0,70\n"
        "10,0,70\n"
        "20,30,700\n",
    )

    surface = DataLoader.read_temperature_csv(str(path), "carbonate")

    assert list(surface.depths) == [10.0, 20.0]
    assert list(surface.curve(20)) == [(0.0, 70.0), (30.0, 700.0), (60.0, 1000.0)]
    assert surface.time_range(10) == (0.0, 30.0)


def test_read_temperature_csv_accepts_bom_and_semicolons(tmp_path: Path) -> None:
    path = tmp_path / "siliceous_concrete.csv"
    path.write_text(
        "Distance_mm;Time_min;Temperature_F\n10;0;70\n10;60;1200\n",
        encoding="utf-8-sig",
    )

    surface = DataLoader.read_temperature_csv(str(path), "siliceous")
    assert list(surface.curve(10)) == [(0.0, 70.0), (60.0, 1200.0)]


def test_read_temperature_csv_requires_temperature_column(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.csv", "Distance_mm,Time_min,Value\n10,0,70\n")
    with pytest.raises(CurveDataError, match="temperature column"):
        DataLoader.read_temperature_csv(str(path), "carbonate")


def test_read_temperature_csv_rejects_duplicate_times(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "dup.csv",
        "Distance_mm,Time_min,Temperature (°F)\n10,0,70\n10,0,80\n",
    )
    with pytest.raises(CurveDataError):
        DataLoader.read_temperature_csv(str(path), "carbonate")


def test_read_temperature_csv_rejects_non_numeric(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "text.csv",
        "Distance_mm,Time_min,Temperature (°F)\n10,zero,70\n",
    )
    with pytest.raises(CurveDataError, match="Time_min"):
        DataLoader.read_temperature_csv(str(path), "carbonate")


def test_read_strength_csv_requires_every_condition(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "carbonate_strength.csv",
        "condition,temperature_F,strength_fraction\n"
        "unstressed,70,1.0\n"
        "unstressed,1000,0.75\n",
    )
    with pytest.raises(CurveDataError, match="missing curves"):
        DataLoader.read_strength_csv(str(path), "carbonate")


def test_read_steel_strength_csv(data_dir: Path) -> None:
    curve = DataLoader.read_steel_strength_csv(str(data_dir / "steel_strength.csv"))
    assert curve.x_min == 70.0
    assert curve.x_max == 1400.0


def test_missing_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        DataLoader.load_temperature_model(str(tmp_path))


def test_load_models_from_directory(data_dir: Path) -> None:
    temperature_model = DataLoader.load_temperature_model(str(data_dir))
    strength_model = DataLoader.load_strength_model(str(data_dir))

    assert set(temperature_model.aggregate_types) == {"carbonate", "siliceous", "semi_lightweight"}
    assert temperature_model.temperature_at(90, 30, "carbonate") == pytest.approx(950.0)
    assert strength_model.strength_fraction(1000, "carbonate") == pytest.approx(0.75)


def test_library_from_directory(data_dir: Path) -> None:
    library = FireResistanceLibrary.from_directory(str(data_dir))

    assert library.temperature_at(60, 20, "carbonate") == pytest.approx(1000.0)
    assert library.temperature_profile(60, [20, 40], "carbonate") == pytest.approx([1000.0, 600.0])
    assert library.strength_fraction(800, "steel") == pytest.approx(0.7)
    assert library.critical_temperature(0.5, "steel") == pytest.approx(1000.0)
    assert library.maximum_rating("carbonate", False, 170.0, 30.0) == 240
    assert len(library.evaluate_rating("carbonate", False, 170.0, 30.0, [60, 90])) == 2
    assert library.rebar_condition(60, 20, "carbonate").steel_fraction == pytest.approx(0.5)

    with pytest.raises(OutOfRangeError):
        library.temperature_at(60, 0.1, "carbonate")


def test_convert_wide_strength_csv(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "wide.csv",
        "Unstressed,,Stressed,\n"
        "X,Y,X,Y\n"
        "70,100,900,80\n"
        "800,101.5,70,100\n"
        "1200,50,,\n"
        "1400,20\n",
    )

    rows = convert_wide_strength_csv(str(path), ["unstressed", "stressed"])

    assert rows == [
        ("stressed", 70.0, 1.0),
        ("stressed", 900.0, pytest.approx(0.8)),
        ("unstressed", 70.0, 1.0),
        ("unstressed", 800.0, 1.0),
        ("unstressed", 1200.0, pytest.approx(0.5)),
        ("unstressed", 1400.0, pytest.approx(0.2)),
    ]


def test_write_long_strength_csv(tmp_path: Path) -> None:
    out = tmp_path / "long.csv"
    write_long_strength_csv([("stressed", 70.0, 1.0), ("stressed", 900.0, 0.8)], str(out))

    with open(out, newline="", encoding="utf-8") as f:
        lines = list(csv.reader(f))
    assert lines == [
        ["condition", "temperature_F", "strength_fraction"],
        ["stressed", "70.0", "1.0"],
        ["stressed", "900.0", "0.8"],
    ]


def test_steel_conversion_round_trip(tmp_path: Path) -> None:
    source = _write(
        tmp_path / "steel_raw.csv",
        "temperature_F,percent_strength_at_70F\n800,70\n70,100\n1000,50\n",
    )
    rows = convert_steel_strength_csv(str(source))
    assert rows == [(70.0, 1.0), (800.0, pytest.approx(0.7)), (1000.0, pytest.approx(0.5))]

    out = tmp_path / "steel_strength.csv"
    write_steel_strength_csv(rows, str(out))
    curve = DataLoader.read_steel_strength_csv(str(out))
    assert list(curve.x) == [70.0, 800.0, 1000.0]
