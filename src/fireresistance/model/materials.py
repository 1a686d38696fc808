"""
Material Categories
===================
Aggregate types and the strength-curve material variants.

Each material family carries its own condition vocabulary, so a condition of
one family cannot be attached to another:

    NormalWeightConcrete(AggregateType.CARBONATE, NormalWeightCondition.STRESSED)
    SemiLightweightConcrete(SemiLightweightCondition.UNSTRESSED_SANDED)
    ReinforcingSteel()

The string front-end (:func:`parse_material`) turns the loose
``("carbonate", "stressed")`` form into one of these variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Tuple, Union

from fireresistance.errors import UnknownCategoryError

STEEL = "steel"


class AggregateType(StrEnum):
    SILICEOUS = "siliceous"
    CARBONATE = "carbonate"
    SEMI_LIGHTWEIGHT = "semi_lightweight"
    LIGHTWEIGHT = "lightweight"


# Aggregate types with digitized temperature and strength figures.
# Lightweight concrete is only covered by the prescriptive tables.
DIGITIZED_AGGREGATES: Tuple[AggregateType, ...] = (
    AggregateType.CARBONATE,
    AggregateType.SILICEOUS,
    AggregateType.SEMI_LIGHTWEIGHT,
)


class NormalWeightCondition(StrEnum):
    UNSTRESSED = "unstressed"
    STRESSED = "stressed"
    UNSTRESSED_RESIDUAL = "unstressed_residual"


class SemiLightweightCondition(StrEnum):
    UNSTRESSED_SANDED = "unstressed_sanded"
    UNSTRESSED_UNSANDED = "unstressed_unsanded"
    STRESSED = "stressed"
    UNSTRESSED_RESIDUAL_SANDED = "unstressed_residual_sanded"


ConcreteCondition = Union[NormalWeightCondition, SemiLightweightCondition]

NORMAL_WEIGHT_AGGREGATES: Tuple[AggregateType, ...] = (
    AggregateType.CARBONATE,
    AggregateType.SILICEOUS,
)


def _coerce_condition(
    vocabulary: type[StrEnum],
    condition: str | StrEnum,
    aggregate: AggregateType,
) -> StrEnum:
    """Resolve a condition inside the vocabulary of its own material family."""
    valid = ", ".join(sorted(c.value for c in vocabulary))
    if isinstance(condition, StrEnum) and not isinstance(condition, vocabulary):
        raise UnknownCategoryError(
            f"Condition {type(condition).__name__}.{condition.name} does not apply to "
            f"aggregate_type {aggregate.value!r}. Valid conditions: {valid}"
        )
    try:
        return vocabulary(condition)
    except ValueError:
        raise UnknownCategoryError(
            f"Unknown condition: {condition!r} for aggregate_type {aggregate.value!r}. "
            f"Valid conditions: {valid}"
        ) from None


@dataclass(frozen=True)
class NormalWeightConcrete:
    """Carbonate or siliceous aggregate concrete under a given stress condition."""
    aggregate: AggregateType
    condition: NormalWeightCondition = NormalWeightCondition.UNSTRESSED

    def __post_init__(self) -> None:
        aggregate = parse_aggregate(self.aggregate, NORMAL_WEIGHT_AGGREGATES)
        object.__setattr__(self, "aggregate", aggregate)
        object.__setattr__(
            self, "condition", _coerce_condition(NormalWeightCondition, self.condition, aggregate)
        )

    @property
    def family(self) -> str:
        return self.aggregate.value

    @property
    def curve_key(self) -> str:
        return self.condition.value


@dataclass(frozen=True)
class SemiLightweightConcrete:
    condition: SemiLightweightCondition = SemiLightweightCondition.UNSTRESSED_SANDED
    aggregate = AggregateType.SEMI_LIGHTWEIGHT

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "condition",
            _coerce_condition(SemiLightweightCondition, self.condition, self.aggregate),
        )

    @property
    def family(self) -> str:
        return self.aggregate.value

    @property
    def curve_key(self) -> str:
        return self.condition.value


@dataclass(frozen=True)
class ReinforcingSteel:
    """Hot-rolled flexural reinforcement (yield strength)."""

    @property
    def family(self) -> str:
        return STEEL

    @property
    def curve_key(self) -> str:
        return STEEL


StrengthMaterial = Union[NormalWeightConcrete, SemiLightweightConcrete, ReinforcingSteel]

CONDITIONS: dict[AggregateType, type[StrEnum]] = {
    AggregateType.CARBONATE: NormalWeightCondition,
    AggregateType.SILICEOUS: NormalWeightCondition,
    AggregateType.SEMI_LIGHTWEIGHT: SemiLightweightCondition,
}

DEFAULT_CONDITIONS: dict[AggregateType, ConcreteCondition] = {
    AggregateType.CARBONATE: NormalWeightCondition.UNSTRESSED,
    AggregateType.SILICEOUS: NormalWeightCondition.UNSTRESSED,
    AggregateType.SEMI_LIGHTWEIGHT: SemiLightweightCondition.UNSTRESSED_SANDED,
}


def parse_aggregate(
    aggregate_type: str | AggregateType,
    valid: Tuple[AggregateType, ...] = tuple(AggregateType),
) -> AggregateType:
    """Resolve an aggregate type string, restricted to ``valid``."""
    try:
        aggregate = AggregateType(aggregate_type)
    except ValueError:
        aggregate = None
    if aggregate is None or aggregate not in valid:
        raise UnknownCategoryError(
            f"Unknown aggregate_type: {aggregate_type!r}. "
            f"Valid options: {', '.join(sorted(a.value for a in valid))}"
        )
    return aggregate


def condition_names(aggregate_type: str | AggregateType) -> list[str]:
    """Valid strength-curve conditions for a digitized aggregate type."""
    aggregate = parse_aggregate(aggregate_type, DIGITIZED_AGGREGATES)
    return [c.value for c in CONDITIONS[aggregate]]


def parse_material(
    material: str | StrengthMaterial,
    condition: Optional[str] = None,
) -> StrengthMaterial:
    """
    Resolve the string form of a strength-curve selection into a material variant.

    Args:
        material: ``"steel"``, an aggregate type string, or an already typed variant.
        condition: Stress condition for concrete. ``None`` selects the default
            condition of the aggregate (unstressed / unstressed sanded).
            Steel has no conditions.

    Raises:
        UnknownCategoryError: For an unknown material or a condition that does not
            belong to the material's vocabulary.
    """
    if isinstance(material, (NormalWeightConcrete, SemiLightweightConcrete, ReinforcingSteel)):
        if condition is not None:
            raise UnknownCategoryError(
                f"condition {condition!r} given together with a typed material {material!r}"
            )
        return material

    if material == STEEL:
        if condition is not None:
            raise UnknownCategoryError(
                f"Unknown condition: {condition!r} for material 'steel'. "
                "Steel strength has a single curve and takes no condition."
            )
        return ReinforcingSteel()

    try:
        aggregate = parse_aggregate(material, DIGITIZED_AGGREGATES)
    except UnknownCategoryError:
        valid = sorted([a.value for a in DIGITIZED_AGGREGATES] + [STEEL])
        raise UnknownCategoryError(
            f"Unknown material: {material!r}. Valid options: {', '.join(valid)}"
        ) from None

    resolved = DEFAULT_CONDITIONS[aggregate] if condition is None else condition
    # the variant constructors validate the condition against their own vocabulary
    if aggregate == AggregateType.SEMI_LIGHTWEIGHT:
        return SemiLightweightConcrete(resolved)
    return NormalWeightConcrete(aggregate, resolved)
