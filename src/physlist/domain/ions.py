"""Ion naming and the closed (Z, A) sweep used for step limiting."""

from __future__ import annotations

from collections.abc import Iterator

from .defaults import DEFAULT_PHYSICS, IonSweepDefaults

# Element symbols indexed by atomic number; index 0 is unused.
ELEMENT_SYMBOLS: tuple[str, ...] = (
    "",
    "H", "He", "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar", "K", "Ca",
    "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y", "Zr",
)  # fmt: skip


def element_symbol(z: int) -> str:
    """Return the chemical symbol for atomic number ``z``."""

    if not 1 <= z < len(ELEMENT_SYMBOLS):
        raise ValueError(f"No element symbol known for Z={z}")
    return ELEMENT_SYMBOLS[z]


def ion_name(z: int, a: int) -> str:
    """Canonical ground-state ion name, e.g. ``ion_name(6, 14) == "C14"``."""

    if a < z:
        raise ValueError(f"Mass number A={a} is smaller than Z={z}")
    return f"{element_symbol(z)}{a}"


def ion_sweep(bounds: IonSweepDefaults = DEFAULT_PHYSICS.ion_sweep) -> Iterator[tuple[int, int]]:
    """Yield every ``(Z, A)`` pair in the sweep, by increasing Z then A."""

    for z in range(bounds.z_min, bounds.z_max + 1):
        for a in range(bounds.a_min_factor * z, bounds.a_max_factor * z + 1):
            yield z, a
