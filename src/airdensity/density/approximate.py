from __future__ import annotations

from typing import Optional

from airdensity.density.base import AirDensity, FloatOrArray, approximate_air_density, check_readings
from airdensity.density.registry import register_model


@register_model
class ApproximateAirDensity(AirDensity):
    """
    Closed-form approximation of moist air density.

    Needs no constants table; the CO₂ fraction is ignored.
    """
    NAME = "Approximate"

    def compute_density(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
        co2_fraction: Optional[FloatOrArray] = None,
    ) -> FloatOrArray:
        check_readings(temperature_c, pressure_pa)
        return approximate_air_density(temperature_c, relative_humidity, pressure_pa)
