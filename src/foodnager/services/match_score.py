"""Match scoring between recipe ingredients and fridge contents.

A requirement earns full credit when the fridge holds at least the required
quantity in the same unit, or holds the product in a different unit (no unit
conversion is attempted, so a mismatch is treated as satisfied). It earns
half credit when the same unit is present in insufficient quantity, and no
credit when the product is absent. The score is the mean credit, clamped to
``[0, 1]``.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from foodnager.domain.matching import (
    FridgeEntry,
    IngredientOutcome,
    IngredientRequirement,
    MatchResult,
)

DEFAULT_GOOD_MATCH_THRESHOLD = 0.7
PARTIAL_CREDIT = 0.5


def units_match(required_unit_id: int, fridge_unit_id: int) -> bool:
    """Return True when both ids refer to the same unit."""
    return required_unit_id == fridge_unit_id


def build_fridge_index(entries: Iterable[FridgeEntry]) -> dict[int, FridgeEntry]:
    """Index fridge entries by product id.

    Duplicate product ids are not merged: the last entry in iteration order
    replaces earlier ones.
    """
    index: dict[int, FridgeEntry] = {}
    for entry in entries:
        index[entry.product_id] = entry
    return index


def calculate_match_score(
    requirements: Iterable[IngredientRequirement],
    fridge_entries: Iterable[FridgeEntry],
) -> MatchResult:
    """Score a recipe's requirements against the fridge.

    ``available_ingredients`` gets one outcome per requirement present in the
    fridge, ``missing_ingredients`` one per requirement not fully covered,
    both in requirement order. A partially covered requirement shows up in
    both lists: with the full required quantity in ``available_ingredients``
    and with the shortfall in ``missing_ingredients``.
    """
    fridge_index = build_fridge_index(fridge_entries)
    available: list[IngredientOutcome] = []
    missing: list[IngredientOutcome] = []
    total = 0
    fully_available = 0
    partially_available = 0

    for requirement in requirements:
        total += 1
        entry = fridge_index.get(requirement.product_id)
        if entry is None:
            missing.append(_outcome(requirement, requirement.quantity, 0.0))
            continue

        if not units_match(requirement.unit.id, entry.unit.id):
            available.append(
                _outcome(
                    requirement,
                    requirement.quantity,
                    entry.quantity,
                    fridge_unit=entry.unit.abbreviation,
                )
            )
            fully_available += 1
            continue

        available.append(_outcome(requirement, requirement.quantity, entry.quantity))
        if entry.quantity >= requirement.quantity:
            fully_available += 1
        else:
            shortfall = requirement.quantity - entry.quantity
            missing.append(_outcome(requirement, shortfall, 0.0))
            partially_available += 1

    score = (
        (fully_available + PARTIAL_CREDIT * partially_available) / total
        if total
        else 0.0
    )
    return MatchResult(
        score=max(0.0, min(1.0, score)),
        available_ingredients=tuple(available),
        missing_ingredients=tuple(missing),
    )


def is_good_match(
    result: MatchResult, threshold: float = DEFAULT_GOOD_MATCH_THRESHOLD
) -> bool:
    """Return True when the score reaches the threshold (inclusive)."""
    return result.score >= threshold


@dataclass(frozen=True)
class MatchScoreCalculator:
    """Stateless scorer bound to a good-match threshold."""

    good_match_threshold: float = DEFAULT_GOOD_MATCH_THRESHOLD

    def calculate(
        self,
        requirements: Iterable[IngredientRequirement],
        fridge_entries: Iterable[FridgeEntry],
    ) -> MatchResult:
        """Score requirements against fridge entries."""
        return calculate_match_score(requirements, fridge_entries)

    def is_good(self, result: MatchResult) -> bool:
        """Return True when the result reaches this calculator's threshold."""
        return is_good_match(result, self.good_match_threshold)


def _outcome(
    requirement: IngredientRequirement,
    required_quantity: float,
    available_quantity: float,
    fridge_unit: str | None = None,
) -> IngredientOutcome:
    return IngredientOutcome(
        product_id=requirement.product_id,
        product_name=requirement.product_name,
        required_quantity=required_quantity,
        available_quantity=available_quantity,
        unit=requirement.unit.abbreviation,
        unit_mismatch=True if fridge_unit is not None else None,
        fridge_unit=fridge_unit,
    )
