"""Domain predicates."""

from cleanarch.domain.predicates.base import (
    UnitPredicate,
    all_of,
    any_of,
    negate,
    select,
)
from cleanarch.domain.predicates.unit_predicates import (
    has_constructor_visibility,
    has_simple_name_ending_with,
    is_kind,
    resides_in_package,
    resides_outside_package,
)

__all__ = [
    # Type alias
    "UnitPredicate",
    # Combinators
    "all_of",
    "any_of",
    "negate",
    "select",
    # Unit predicates
    "resides_in_package",
    "resides_outside_package",
    "is_kind",
    "has_simple_name_ending_with",
    "has_constructor_visibility",
]
