"""
CanCan: ability-based authorization for Python applications.

Declare what each kind of performer may do, then ask::

    from cancan import CanCan

    cancan = CanCan()
    cancan.allow(User, ["read", "create"], Product)
    cancan.allow(User, "update", Product, {"owner_id": 1})

    await cancan.can(user, "read", product)
    await cancan.authorize(user, "update", product)
"""

from .rules.engine import CanCan, default_instance_of
from .rules.models import ALL, MANAGE, Ability
from .rules.registry import AbilityRegistry
from .shared.config import EngineConfig, get_config
from .shared.errors import AuthorizationError, CanCanError, InvalidConditionError
from .shared.logging import configure_logging, get_logger

__version__ = "1.0.0"

__all__ = [
    "ALL",
    "MANAGE",
    "Ability",
    "AbilityRegistry",
    "AuthorizationError",
    "CanCan",
    "CanCanError",
    "EngineConfig",
    "InvalidConditionError",
    "configure_logging",
    "default_instance_of",
    "get_config",
    "get_logger",
]
