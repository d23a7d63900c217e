"""
Ability data models for the CanCan authorization engine.
"""

from typing import Any, Awaitable, Callable, Mapping, Optional, Union
from dataclasses import dataclass


# Action sentinel matching every action
MANAGE = "manage"

# Target sentinel matching every target
ALL = "all"

ConditionResult = Union[bool, Awaitable[bool]]
Condition = Callable[[Any, Any, Mapping[str, Any]], ConditionResult]
InstanceOf = Callable[[Any, Any], bool]


@dataclass(frozen=True, eq=False)
class Ability:
    """A single declared permission.

    ``model`` and ``target`` are opaque descriptors compared through the
    engine's ``instance_of`` predicate. ``condition`` is always the
    canonical predicate form; attribute maps are desugared before an
    Ability is built.
    """
    model: Any
    action: str
    target: Any
    condition: Optional[Condition] = None

    @property
    def manages_all_actions(self) -> bool:
        return isinstance(self.action, str) and self.action == MANAGE

    @property
    def covers_all_targets(self) -> bool:
        return isinstance(self.target, str) and self.target == ALL
