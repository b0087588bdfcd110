"""Domain layer for physics-list resolution.

This package holds everything needed to turn a declarative physics
configuration into engine-ready artifacts, without touching the engine:

* Immutable value objects (see :mod:`models`) and the configuration view
  (see :mod:`source`).
* The closed module table (see :mod:`registry`).
* Pure functions resolving modules, production cuts and step limiters
  (:mod:`resolver`, :mod:`cuts`, :mod:`step_limits`).
* Shared constants (see :mod:`defaults`).
"""

from . import cuts, defaults, enums, errors, ions, models, registry, resolver, source, step_limits

__all__ = [
    "cuts",
    "defaults",
    "enums",
    "errors",
    "ions",
    "models",
    "registry",
    "resolver",
    "source",
    "step_limits",
]
