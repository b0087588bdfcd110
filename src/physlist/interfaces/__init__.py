"""Protocol-based interfaces for physlist services.

This module exports the protocols the executor depends on, so any engine
binding (or a test fake) can be injected without inheritance.
"""

from physlist.interfaces.engine import IPhysicsEngine
from physlist.interfaces.module import IPhysicsModule

__all__ = [
    "IPhysicsEngine",
    "IPhysicsModule",
]
