"""
Rules package.

Defines the ability model, the append-only registry abilities are
declared into, and the decision engine that answers whether a performer
may perform an action on a target.

Modules of interest:
- models: The Ability record and the MANAGE / ALL sentinels.
- conditions: Normalization of predicate and attribute-map conditions.
- registry: Ordered, append-only ability storage.
- engine: Matching on model, target and action plus concurrent
  condition evaluation.

Everything is evaluated in memory; nothing is persisted or cached.
"""
