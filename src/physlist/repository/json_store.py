"""JSON-based repository for named physics configurations."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import TypeAdapter

from physlist.schemas.physics import PhysicsConfig

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class JsonPhysicsConfigRepository:
    """Persist physics configurations as JSON documents on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[PhysicsConfig] = TypeAdapter(PhysicsConfig)

    def _path_for(self, name: str) -> Path:
        if not _NAME_PATTERN.match(name) or name.endswith(".json"):
            raise ValueError(f"Invalid configuration name '{name}'")
        return self.base_path / f"{name}.json"

    def save(self, name: str, config: PhysicsConfig) -> Path:
        """Serialize a configuration to disk and return its path."""

        path = self._path_for(name)
        payload = self._adapter.dump_json(config, indent=2, by_alias=True)
        path.write_bytes(payload)
        return path

    def load(self, name: str) -> PhysicsConfig:
        """Load a previously saved configuration or raise ``FileNotFoundError``."""

        path = self._path_for(name)
        data = path.read_bytes()
        return self._adapter.validate_json(data)

    def list_names(self) -> list[str]:
        """Return the names of every stored configuration, sorted."""

        return sorted(path.stem for path in self.base_path.glob("*.json"))

    def delete(self, name: str) -> None:
        """Remove a configuration if it exists."""

        path = self._path_for(name)
        if path.exists():
            path.unlink()
