"""Active-selection summary.

Projects applied criteria into removable chips and a badge count.
"""

import dataclasses
from typing import Callable

from catalog_browser.domain.value_objects import (
    FilterCriteria,
    FilterField,
    PriceRange,
    rating_label,
)


@dataclasses.dataclass(frozen=True)
class ActiveFilterChip:
    """One active criterion as shown in the chip row.

    Attributes:
        field: Criterion this chip represents.
        label: Display text.
        remove: Returns the applied criteria with this field reset.
    """

    field: FilterField
    label: str
    remove: Callable[[], FilterCriteria] = dataclasses.field(compare=False, repr=False)


def active_count(applied: FilterCriteria) -> int:
    """Count fields that differ from their default."""
    return sum(1 for f in FilterField if applied.is_active(f))


def _label(applied: FilterCriteria, which: FilterField) -> str:
    if which is FilterField.CATEGORY:
        return applied.category
    if which is FilterField.PRICE_RANGE:
        resolved = PriceRange.parse(applied.price_range)
        return resolved.label if resolved else str(applied.price_range)
    return rating_label(applied.min_rating)


def describe(applied: FilterCriteria) -> tuple[ActiveFilterChip, ...]:
    """Build chips for every non-default field.

    Chips come in a fixed order: category, price range, rating.

    Args:
        applied: Applied criteria.

    Returns:
        One chip per active field.
    """
    return tuple(
        ActiveFilterChip(
            field=f,
            label=_label(applied, f),
            remove=lambda f=f: applied.reset(f),
        )
        for f in FilterField
        if applied.is_active(f)
    )
