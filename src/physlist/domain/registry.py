"""Static table of the physics modules a configuration may request."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import ModuleCategory
from .models import PhysicsModule
from .source import ModuleSpec

ModuleFactory = Callable[[ModuleSpec], PhysicsModule]


def _factory_for(category: ModuleCategory) -> ModuleFactory:
    def build(spec: ModuleSpec) -> PhysicsModule:
        return PhysicsModule(name=spec.name, category=category, options=dict(spec.options))

    return build


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """Category and constructor for one canonical module name."""

    category: ModuleCategory
    factory: ModuleFactory

    def create(self, spec: ModuleSpec) -> PhysicsModule:
        return self.factory(spec)


MODULE_CATEGORIES: dict[str, ModuleCategory] = {
    "G4DecayPhysics": ModuleCategory.DECAY,
    "G4RadioactiveDecayPhysics": ModuleCategory.RADIOACTIVE_DECAY,
    "G4EmLivermorePhysics": ModuleCategory.ELECTROMAGNETIC,
    "G4EmPenelopePhysics": ModuleCategory.ELECTROMAGNETIC,
    "G4EmStandardPhysics_option3": ModuleCategory.ELECTROMAGNETIC,
    "G4EmStandardPhysics_option4": ModuleCategory.ELECTROMAGNETIC,
    "G4HadronPhysicsQGSP_BIC_HP": ModuleCategory.HADRONIC,
    "G4IonBinaryCascadePhysics": ModuleCategory.HADRONIC,
    "G4HadronElasticPhysicsHP": ModuleCategory.HADRONIC,
    "G4NeutronTrackingCut": ModuleCategory.HADRONIC,
    "G4EmExtraPhysics": ModuleCategory.HADRONIC,
}


class ModuleRegistry:
    """Closed mapping from canonical module name to ``RegistryEntry``.

    Lookups never fail: a name missing from the table simply was not
    requested, so ``lookup`` returns ``None`` and callers skip it.
    """

    def __init__(self, entries: Mapping[str, RegistryEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_categories(cls, categories: Mapping[str, ModuleCategory]) -> ModuleRegistry:
        return cls(
            {name: RegistryEntry(category, _factory_for(category)) for name, category in categories.items()}
        )

    def lookup(self, name: str) -> RegistryEntry | None:
        return self._entries.get(name)

    def registered_names(self, category: ModuleCategory | None = None) -> list[str]:
        """Canonical names, optionally restricted to one category."""

        return [
            name
            for name, entry in self._entries.items()
            if category is None or entry.category is category
        ]

    def categories(self) -> Iterable[tuple[str, ModuleCategory]]:
        return ((name, entry.category) for name, entry in self._entries.items())


DEFAULT_REGISTRY = ModuleRegistry.from_categories(MODULE_CATEGORIES)
