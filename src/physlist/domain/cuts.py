"""Production cut table assembly."""

from __future__ import annotations

import math

from .defaults import DEFAULT_PHYSICS, CutDefaults
from .errors import InvalidCutValue, InvalidCutWindow
from .models import CutTable, EnergyWindow
from .source import ConfigSource


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _length(species: str, value: float | None, fallback: float) -> float:
    if value is None:
        return fallback
    if not _is_positive(value):
        raise InvalidCutValue(species, value)
    return value


def validate_energy_window(minimum: float, maximum: float) -> EnergyWindow:
    """Return the window or raise ``InvalidCutWindow`` if it is not usable.

    Both bounds must be finite and positive, with ``minimum <= maximum``.
    """

    if not (_is_positive(minimum) and _is_positive(maximum) and minimum <= maximum):
        raise InvalidCutWindow(minimum, maximum)
    return EnergyWindow(minimum=minimum, maximum=maximum)


def assign_cuts(source: ConfigSource, defaults: CutDefaults = DEFAULT_PHYSICS.cuts) -> CutTable:
    """Build the ``CutTable`` from declared overrides and the energy window."""

    overrides = source.cuts
    default = _length("default", overrides.default, defaults.default_length_mm)
    window = validate_energy_window(*source.energy_window)

    return CutTable(
        default=default,
        gamma=_length("gamma", overrides.gamma, default),
        electron=_length("e-", overrides.electron, default),
        positron=_length("e+", overrides.positron, default),
        muon=_length("mu", overrides.muon, default),
        neutron=_length("neutron", overrides.neutron, default),
        energy_window=window,
    )
