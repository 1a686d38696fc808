import pytest

from fireresistance.analysis.rebar import RebarCondition, RebarConditionFacade
from fireresistance.analysis.strength import StrengthModel
from fireresistance.analysis.temperature import SlabTemperatureModel
from fireresistance.errors import OutOfRangeError, UnknownCategoryError
from fireresistance.utils import fahrenheit_to_celsius


@pytest.fixture
def facade(
    temperature_model: SlabTemperatureModel, strength_model: StrengthModel
) -> RebarConditionFacade:
    return RebarConditionFacade(temperature_model, strength_model)


def test_rebar_condition_at_tabulated_point(facade: RebarConditionFacade) -> None:
    result = facade.rebar_condition(60, 20, "carbonate")

    assert isinstance(result, RebarCondition)
    assert result.temperature_f == pytest.approx(1000.0)
    assert result.temperature_c == pytest.approx(fahrenheit_to_celsius(1000.0))
    assert result.steel_fraction == pytest.approx(0.5)
    assert result.concrete_fraction == pytest.approx(0.75)


def test_rebar_condition_uses_requested_concrete_condition(facade: RebarConditionFacade) -> None:
    result = facade.rebar_condition(60, 20, "carbonate", "stressed")
    assert result.concrete_fraction == pytest.approx(0.8)


def test_semi_lightweight_defaults_to_sanded(facade: RebarConditionFacade) -> None:
    result = facade.rebar_condition(60, 10, "semi_lightweight")

    assert result.temperature_f == pytest.approx(1200.0)
    assert result.concrete_fraction == pytest.approx(0.7)
    assert result.steel_fraction == pytest.approx(0.2)


def test_bad_condition_fails_before_temperature_lookup(facade: RebarConditionFacade) -> None:
    with pytest.raises(UnknownCategoryError):
        facade.rebar_condition(60, 500, "carbonate", "unstressed_sanded")


def test_cover_outside_data_propagates(facade: RebarConditionFacade) -> None:
    with pytest.raises(OutOfRangeError):
        facade.rebar_condition(60, 5, "carbonate")


def test_rebar_condition_is_frozen(facade: RebarConditionFacade) -> None:
    result = facade.rebar_condition(60, 20, "carbonate")
    with pytest.raises(AttributeError):
        result.temperature_f = 0.0
