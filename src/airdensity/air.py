"""
Laboratory Air (Measurement Context)
====================================
Holds the current ambient readings together with the density model used to
evaluate them.

Why is this file needed?
------------------------
1. State: It keeps the latest temperature / humidity / pressure in one place
   so callers ask for "the air density now" instead of passing readings around.
2. Decoupling: The model is swappable at runtime; the readings and the model
   are replaced as whole values, never edited in place.

Classes:
    AirReading: Immutable snapshot of the ambient readings.
    Air: The context holding the current reading and model.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from airdensity.density import AirDensity, CIPM2007AirDensity
from airdensity.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AirReading:
    temperature_c: float
    relative_humidity: float  # fraction, 53 % -> 0.53
    pressure_pa: float


class Air:
    """
    Current laboratory air.

    Usage:
        air = Air()
        air.set(20.0, 0.50, 101325.0)
        rho = air.density()
        k = air.correction_factor_k()
    """

    def __init__(self, model: Optional[AirDensity] = None, reading: Optional[AirReading] = None) -> None:
        self._model: AirDensity = model if model is not None else CIPM2007AirDensity()
        self._reading: Optional[AirReading] = reading

    @property
    def model(self) -> AirDensity:
        return self._model

    @model.setter
    def model(self, model: AirDensity) -> None:
        logger.debug("Air density model changed: %s -> %s",
                     self._model.equation_name, model.equation_name)
        self._model = model

    @property
    def reading(self) -> Optional[AirReading]:
        return self._reading

    @reading.setter
    def reading(self, reading: AirReading) -> None:
        self._reading = reading

    def set(self, temperature_c: float, relative_humidity: float, pressure_pa: float) -> None:
        """
        Replace the current reading.

        Args:
            temperature_c: Air temperature in °C.
            relative_humidity: Relative humidity as a fraction (53 % -> 0.53).
            pressure_pa: Barometric pressure in Pa.
        """
        self._reading = AirReading(
            temperature_c=float(temperature_c),
            relative_humidity=float(relative_humidity),
            pressure_pa=float(pressure_pa),
        )

    def _current(self) -> AirReading:
        if self._reading is None:
            raise InvalidArgumentError("No air reading set; call set() first.")
        return self._reading

    def density(self, co2_fraction: Optional[float] = None) -> float:
        """Air density in kg/m³ for the current reading."""
        r = self._current()
        return self._model.compute_density(
            r.temperature_c, r.relative_humidity, r.pressure_pa, co2_fraction
        )

    def approximate_density(self) -> float:
        """Quick estimate of the air density for the current reading."""
        r = self._current()
        return self._model.approximate_density(r.temperature_c, r.relative_humidity, r.pressure_pa)

    def correction_factor_k(self) -> float:
        """Buoyancy correction factor K for the current reading."""
        r = self._current()
        return self._model.correction_factor_k(r.temperature_c, r.relative_humidity, r.pressure_pa)

    def __str__(self) -> str:
        r = self._reading
        if r is None:
            return f"Air [model={self._model.equation_name}, no reading]"
        return (
            f"Air [temperature={r.temperature_c}, humidity={r.relative_humidity}, "
            f"pressure={r.pressure_pa}, model={self._model.equation_name}]"
        )
