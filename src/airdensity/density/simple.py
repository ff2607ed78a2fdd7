from __future__ import annotations

from typing import Optional

from airdensity.density.base import AirDensity, FloatOrArray, barometric_air_density
from airdensity.density.registry import register_model


@register_model
class SimpleAirDensity(AirDensity):
    """
    Air density from the laboratory altitude only.

    Temperature, humidity, pressure and CO₂ do not enter the result;
    ``compute_density`` returns the barometric estimate at ``height``.

    Attributes:
        height: Height of the laboratory above sea level in meters.
    """
    NAME = "Simple"

    def __init__(self, height: float = 0.0) -> None:
        self.height = height

    def compute_density(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
        co2_fraction: Optional[FloatOrArray] = None,
    ) -> float:
        return barometric_air_density(self.height)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(height={self.height!r})"
