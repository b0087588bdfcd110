"""Configuration errors raised while resolving a physics list."""

from __future__ import annotations

from collections.abc import Sequence


class PhysicsConfigError(ValueError):
    """Base class for physics configuration failures."""


class ExclusivityViolation(PhysicsConfigError):
    """More than one electromagnetic module was requested."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(
            "More than 1 EM physics list enabled: " + ", ".join(self.names)
        )


class InvalidCutWindow(PhysicsConfigError):
    """The production-cut energy window is not finite, non-positive or inverted."""

    def __init__(self, minimum: float, maximum: float) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid production cut energy window: min={minimum} keV, max={maximum} keV"
        )


class InvalidCutValue(PhysicsConfigError):
    """A production cut length is not finite and strictly positive."""

    def __init__(self, species: str, value: float) -> None:
        self.species = species
        self.value = value
        super().__init__(f"Production cut for '{species}' must be positive, got {value} mm")
