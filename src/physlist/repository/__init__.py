from physlist.repository.json_store import JsonPhysicsConfigRepository

__all__ = ["JsonPhysicsConfigRepository"]
