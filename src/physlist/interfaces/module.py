"""Physics Module Protocol Interface.

This module defines the capability every physics module handle offers to
the assembly executor.
"""

from typing import Protocol

from physlist.interfaces.engine import IPhysicsEngine


class IPhysicsModule(Protocol):
    """Protocol for a named unit of physics behaviour."""

    name: str

    def construct_particles(self, engine: IPhysicsEngine) -> None:
        """Define the particles this module needs inside the engine."""
        ...

    def construct_processes(self, engine: IPhysicsEngine) -> None:
        """Register this module's processes with the engine."""
        ...
