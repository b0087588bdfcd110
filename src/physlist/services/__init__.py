"""Service layer for physlist.

Services depend on the Protocol interfaces in :mod:`physlist.interfaces`:

- AssemblyExecutor: drives an ``IPhysicsEngine`` through both construction phases
- PhysicsSetupService: resolves a ``ConfigSource`` and hands the result to the executor

Production Usage:
    from physlist.factory import create_setup_service
    service = create_setup_service(engine)
    result = service.run(source)

Testing Usage:
    from physlist.engine import RecordingEngine
    from physlist.services import AssemblyExecutor

    engine = RecordingEngine()
    AssemblyExecutor(engine).apply(assembly, cut_table, plan)
    assert engine.operations()[0] == "define_unit"
"""

from physlist.services.assembly_service import AssemblyExecutor
from physlist.services.setup_service import PhysicsSetup, PhysicsSetupService

__all__ = [
    "AssemblyExecutor",
    "PhysicsSetup",
    "PhysicsSetupService",
]
