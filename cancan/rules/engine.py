"""
Decision engine for the CanCan authorization engine.
"""

import asyncio
import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..shared.config import EngineConfig
from ..shared.errors import AuthorizationError
from ..shared.logging import get_logger
from .models import Ability, InstanceOf
from .registry import AbilityRegistry


def default_instance_of(instance: Any, model: Any) -> bool:
    """Class membership test; descriptors that are not classes never match."""
    return isinstance(model, type) and isinstance(instance, model)


class CanCan:
    """Ability-based authorization engine.

    Abilities are declared with :meth:`allow` and queried with
    :meth:`can`, :meth:`cannot` and :meth:`authorize`. Every operation
    is a bound method over this instance's own registry, so they can be
    pulled off the engine and passed around freely::

        cancan = CanCan()
        allow, can = cancan.allow, cancan.can

        allow(User, "read", Product, {"published": True})
        await can(user, "read", product)
    """

    def __init__(
        self,
        instance_of: Optional[InstanceOf] = None,
        create_error: Optional[Callable[..., Any]] = None,
        config: Optional[EngineConfig] = None
    ):
        self.config = config or EngineConfig()
        self.logger = get_logger("cancan.engine")
        self.registry = AbilityRegistry()
        self.instance_of = instance_of or default_instance_of
        self.create_error = create_error or self._default_create_error

    @property
    def abilities(self):
        """Declared abilities in insertion order."""
        return self.registry.abilities

    def allow(self, model: Any, actions: Any, targets: Any, condition: Any = None) -> None:
        """Declare that ``model`` may perform ``actions`` on ``targets``."""
        self.registry.declare(model, actions, targets, condition)

    def match(self, performer: Any, action: str, target: Any) -> List[Ability]:
        """Abilities whose model, target and action all apply to the query."""
        return [
            ability for ability in self.registry
            if self.instance_of(performer, ability.model)
            and self._target_applies(ability, target)
            and (ability.manages_all_actions or action == ability.action)
        ]

    async def can(
        self,
        performer: Any,
        action: str,
        target: Any,
        options: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """Check whether ``performer`` may perform ``action`` on ``target``.

        Any single applicable ability whose condition passes grants access.
        Conditions of all applicable abilities run concurrently; an error
        raised by any of them propagates instead of counting as a denial.
        """
        if options is None:
            options = {}

        abilities = self.match(performer, action, target)

        if not abilities:
            allowed = False
        elif self.config.short_circuit:
            allowed = await self._any_passes(abilities, performer, target, options)
        else:
            allowed = await self._all_settled(abilities, performer, target, options)

        self.logger.debug(
            "Decision made",
            action=action,
            allowed=allowed,
            matched_abilities=len(abilities)
        )

        return allowed

    async def cannot(self, *args, **kwargs) -> bool:
        """Inverse of :meth:`can`."""
        return not await self.can(*args, **kwargs)

    async def authorize(self, *args, **kwargs) -> None:
        """Raise the configured error when :meth:`can` denies the query.

        ``create_error`` receives exactly the arguments given here.
        """
        if await self.cannot(*args, **kwargs):
            error = self.create_error(*args, **kwargs)
            self.logger.info("Authorization denied", error=type(error).__name__)
            raise self._as_exception(error)

    declare = allow
    evaluate = can
    negate = cannot

    def _target_applies(self, ability: Ability, target: Any) -> bool:
        if ability.covers_all_targets:
            return True

        if target is ability.target or target == ability.target:
            return True

        return self.instance_of(target, ability.target)

    async def _check(self, ability: Ability, performer: Any, target: Any, options: Mapping[str, Any]) -> bool:
        if ability.condition is None:
            return True

        result = ability.condition(performer, target, options)
        if inspect.isawaitable(result):
            result = await result

        return bool(result)

    async def _all_settled(
        self,
        abilities: List[Ability],
        performer: Any,
        target: Any,
        options: Mapping[str, Any]
    ) -> bool:
        outcomes = await asyncio.gather(
            *(self._check(ability, performer, target, options) for ability in abilities),
            return_exceptions=True
        )

        # First failure in declaration order wins
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

        return any(outcomes)

    async def _any_passes(
        self,
        abilities: List[Ability],
        performer: Any,
        target: Any,
        options: Mapping[str, Any]
    ) -> bool:
        tasks = [
            asyncio.ensure_future(self._check(ability, performer, target, options))
            for ability in abilities
        ]

        try:
            for next_done in asyncio.as_completed(tasks):
                if await next_done:
                    return True
            return False
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            # Mark failures of tasks the loop above never reached as retrieved
            for task in tasks:
                if task.done() and not task.cancelled():
                    task.exception()

    def _default_create_error(self, performer: Any = None, action: Any = None, *args, **kwargs) -> AuthorizationError:
        details: Dict[str, Any] = {}
        if action is not None:
            details["action"] = action
        return AuthorizationError(self.config.default_error_message, details)

    def _as_exception(self, error: Any) -> BaseException:
        if isinstance(error, BaseException):
            return error

        if isinstance(error, type) and issubclass(error, BaseException):
            return error()

        return AuthorizationError(self.config.default_error_message, {"error": error})
