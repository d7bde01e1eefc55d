"""
Translation of listing search filters into database predicates.

Each filter field maps to exactly one predicate through ``FILTER_TABLE``,
which is evaluated in a fixed order. The translation is pure: it produces a
list of ``Predicate`` values, and ``apply_predicates`` replays them onto a
Supabase (PostgREST) query builder. Execution, and any failure of it, is
left entirely to the database call.
"""

from enum import Enum
from typing import Any, NamedTuple

from .models import PoleOrder, SearchFilters


class Operator(str, Enum):
    """Comparison operators, named after the query builder methods."""

    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    IN = "in_"


class Predicate(NamedTuple):
    """One column constraint."""

    column: str
    operator: Operator
    value: Any


class FilterRule(NamedTuple):
    """Maps a ``SearchFilters`` field to the predicate it produces."""

    field: str
    column: str
    operator: Operator


FILTER_TABLE: tuple[FilterRule, ...] = (
    FilterRule("status", "status", Operator.IN),
    FilterRule("length_min", "length_cm", Operator.GTE),
    FilterRule("length_max", "length_cm", Operator.LTE),
    FilterRule("weight_min", "weight_lbs", Operator.GTE),
    FilterRule("weight_max", "weight_lbs", Operator.LTE),
    FilterRule("municipality", "municipality", Operator.EQ),
    FilterRule("brand", "brand", Operator.EQ),
    FilterRule("condition_min", "condition_rating", Operator.GTE),
)

# Column and direction per ordering.
ORDERINGS: dict[PoleOrder, tuple[str, bool]] = {
    PoleOrder.LENGTH_ASC: ("length_cm", False),
    PoleOrder.NEWEST_FIRST: ("created_at", True),
}


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (set, frozenset, list, tuple)):
        return len(value) > 0
    if isinstance(value, str):
        return value != ""
    return True


def _db_value(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        # Sorted so the emitted query is deterministic.
        return sorted(getattr(v, "value", v) for v in value)
    return getattr(value, "value", value)


def build_predicates(filters: SearchFilters) -> list[Predicate]:
    """
    Translate a filter into predicates, one per present field.

    Args:
        filters: The sparse filter.

    Returns:
        Predicates in ``FILTER_TABLE`` order. Empty for an empty filter.
    """
    predicates = []
    for rule in FILTER_TABLE:
        value = getattr(filters, rule.field)
        if _is_present(value):
            predicates.append(Predicate(rule.column, rule.operator, _db_value(value)))
    return predicates


def apply_predicates(query: Any, predicates: list[Predicate]) -> Any:
    """Apply predicates to a query builder, returning the narrowed query."""
    for predicate in predicates:
        query = getattr(query, predicate.operator.value)(predicate.column, predicate.value)
    return query


def apply_order(query: Any, order: PoleOrder) -> Any:
    """Apply a caller-selected ordering to a query builder."""
    column, desc = ORDERINGS[order]
    return query.order(column, desc=desc)
