"""
Ability registry for the CanCan authorization engine.
"""

from typing import Any, Iterator, List, Tuple

from ..shared.logging import get_logger
from .conditions import normalize_condition
from .models import Ability


def to_list(value: Any) -> List[Any]:
    """Treat a bare value as a one-element sequence."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class AbilityRegistry:
    """Append-only, ordered list of declared abilities."""

    def __init__(self):
        self.logger = get_logger("cancan.registry")
        self._abilities: List[Ability] = []

    def declare(self, model: Any, actions: Any, targets: Any, condition: Any = None) -> None:
        """Declare abilities for every (action, target) combination.

        ``actions`` and ``targets`` accept a single value or a list/tuple.
        ``condition`` may be a predicate ``(performer, target, options)``
        or an attribute map matched against the target. Validation
        happens before anything is appended.
        """
        predicate = normalize_condition(condition)

        action_list = to_list(actions)
        target_list = to_list(targets)

        declared = [
            Ability(model=model, action=action, target=target, condition=predicate)
            for action in action_list
            for target in target_list
        ]
        self._abilities.extend(declared)

        self.logger.debug(
            "Ability declared",
            model=_describe(model),
            actions=action_list,
            count=len(declared),
            conditional=predicate is not None
        )

    @property
    def abilities(self) -> Tuple[Ability, ...]:
        """Snapshot of the declared abilities in insertion order."""
        return tuple(self._abilities)

    def __iter__(self) -> Iterator[Ability]:
        return iter(tuple(self._abilities))

    def __len__(self) -> int:
        return len(self._abilities)


def _describe(descriptor: Any) -> str:
    return getattr(descriptor, "__name__", None) or repr(descriptor)
