"""
Condition normalization for ability declarations.

Conditions may be declared either as a predicate taking
``(performer, target, options)`` or as a plain attribute map. Maps are
turned into predicates here so the engine only ever deals with one shape.
"""

from typing import Any, Mapping, Optional

from ..shared.errors import InvalidConditionError
from .models import Condition


def get_attribute(obj: Any, key: str) -> Any:
    """Read ``key`` from ``obj``, preferring a ``get(key)`` accessor."""
    getter = getattr(obj, "get", None)
    if callable(getter):
        return getter(key)

    return getattr(obj, key, None)


def strictly_equal(actual: Any, expected: Any) -> bool:
    """Equality that does not let booleans stand in for numbers or vice versa."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual is expected

    return actual == expected


def is_partially_equal(target: Any, attributes: Mapping[str, Any]) -> bool:
    """Check that every declared attribute equals the target's attribute."""
    return all(strictly_equal(get_attribute(target, key), value) for key, value in attributes.items())


def attributes_condition(attributes: Mapping[str, Any]) -> Condition:
    """Build a predicate that only inspects the target's attributes."""
    # Snapshot so later mutation of the caller's map does not change the rule
    expected = dict(attributes)

    def condition(performer: Any, target: Any, options: Mapping[str, Any]) -> bool:
        return is_partially_equal(target, expected)

    condition.attributes = expected
    return condition


def normalize_condition(condition: Any) -> Optional[Condition]:
    """Return the canonical predicate for a declared condition.

    Raises:
        InvalidConditionError: condition is neither None, callable nor a mapping.
    """
    if condition is None:
        return None

    if isinstance(condition, Mapping):
        return attributes_condition(condition)

    if callable(condition):
        return condition

    raise InvalidConditionError(condition)
