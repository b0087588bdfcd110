"""Service Factory for physlist.

Use these functions in production code to wire services onto an engine
binding.  Tests can build the services directly around a fake engine.

Example:
    from physlist.engine import RecordingEngine
    from physlist.factory import create_setup_service

    service = create_setup_service(RecordingEngine())
    setup = service.build(source)
"""

from physlist.domain.registry import DEFAULT_REGISTRY, ModuleRegistry
from physlist.engine import RecordingEngine
from physlist.interfaces import IPhysicsEngine
from physlist.services.assembly_service import AssemblyExecutor
from physlist.services.setup_service import PhysicsSetupService


def create_assembly_executor(engine: IPhysicsEngine) -> AssemblyExecutor:
    """Create an AssemblyExecutor bound to ``engine``.

    Args:
        engine: Engine binding receiving construction calls

    Returns:
        AssemblyExecutor using the default physics constants
    """
    return AssemblyExecutor(engine)


def create_setup_service(
    engine: IPhysicsEngine | None = None,
    registry: ModuleRegistry = DEFAULT_REGISTRY,
) -> PhysicsSetupService:
    """Create a PhysicsSetupService with all dependencies.

    Args:
        engine: Engine binding; a fresh ``RecordingEngine`` when omitted
        registry: Module table used for resolution

    Returns:
        Fully initialized PhysicsSetupService
    """
    executor = create_assembly_executor(engine if engine is not None else RecordingEngine())
    return PhysicsSetupService(executor, registry)
