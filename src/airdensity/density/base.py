from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from airdensity import config
from airdensity.exceptions import InvalidArgumentError
from airdensity.interpolation import round_half_up
from airdensity.units import celsius_to_kelvin

if TYPE_CHECKING:
    import numpy.typing as npt

FloatOrArray = Union[float, "npt.NDArray[np.float64]"]

# Barometric formula parameters
SEA_LEVEL_AIR_DENSITY = 1.2  # kg/m³
SEA_LEVEL_PRESSURE = 101325.0  # Pa
GRAVITY_ACCELERATION = 9.81  # m/s²


def approximate_air_density(
    temperature_c: FloatOrArray,
    relative_humidity: FloatOrArray,
    pressure_pa: FloatOrArray,
) -> FloatOrArray:
    """
    Simplified moist air density, independent of any constants table.

    Args:
        temperature_c: Air temperature in °C.
        relative_humidity: Relative humidity as a fraction (53 % -> 0.53).
        pressure_pa: Barometric pressure in Pa.

    Returns:
        Air density in kg/m³.
    """
    dry_term = 0.34848 * pressure_pa / 100
    vapour_term = 0.009024 * (relative_humidity * 100) * np.exp(0.0612 * temperature_c)
    return (dry_term - vapour_term) / celsius_to_kelvin(temperature_c)


def barometric_air_density(height: FloatOrArray) -> FloatOrArray:
    """
    Air density from the laboratory altitude alone, rounded to 3 decimals.

    Args:
        height: Height above sea level in meters.

    Returns:
        Air density in kg/m³.
    """
    exponent = (-SEA_LEVEL_AIR_DENSITY / SEA_LEVEL_PRESSURE) * GRAVITY_ACCELERATION * height
    return round_half_up(SEA_LEVEL_AIR_DENSITY * np.exp(exponent), 3)


def check_readings(temperature_c: FloatOrArray, pressure_pa: FloatOrArray) -> None:
    """Reject readings the density equations cannot be evaluated for."""
    if np.any(np.asarray(pressure_pa) <= 0):
        raise InvalidArgumentError(f"Pressure must be positive, got {pressure_pa} Pa.")
    if np.any(celsius_to_kelvin(np.asarray(temperature_c)) <= 0):
        raise InvalidArgumentError(
            f"Temperature must be above absolute zero, got {temperature_c} °C."
        )


class AirDensity(ABC):
    """
    Abstract base class for moist air density models.

    Subclasses implement ``compute_density``; every other operation
    (standard density, approximate and barometric estimates, the K factor)
    is shared.
    """
    NAME: str = "Air Density"

    @property
    def equation_name(self) -> str:
        """Name of the physical equation the model implements."""
        return self.NAME

    @abstractmethod
    def compute_density(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
        co2_fraction: Optional[FloatOrArray] = None,
    ) -> FloatOrArray:
        """
        Calculate the moist air density.

        Args:
            temperature_c: Air temperature in the laboratory in °C.
            relative_humidity: Relative humidity as a fraction (53 % -> 0.53).
            pressure_pa: Barometric pressure in Pa.
            co2_fraction: Mole fraction of carbon dioxide in the air. ``None``
                          uses the model's default.

        Returns:
            Air density in kg/m³.
        """
        pass

    def standard_density(self) -> float:
        """Conventional air density, 1.205 kg/m³."""
        return config.STANDARD_AIR_DENSITY

    def approximate_density(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
    ) -> FloatOrArray:
        """Quick estimate of the air density, see ``approximate_air_density``."""
        return approximate_air_density(temperature_c, relative_humidity, pressure_pa)

    def simple_density(self, height: FloatOrArray) -> FloatOrArray:
        """Altitude-only estimate of the air density, see ``barometric_air_density``."""
        return barometric_air_density(height)

    def correction_factor_k(
        self,
        temperature_c: Optional[FloatOrArray] = None,
        relative_humidity: Optional[FloatOrArray] = None,
        pressure_pa: Optional[FloatOrArray] = None,
    ) -> FloatOrArray:
        """
        Buoyancy correction factor K = 1 - ρ_air / 8000.

        Called without arguments, ρ_air is the standard air density.
        Called with all three readings, ρ_air is ``compute_density`` of them.

        Raises:
            InvalidArgumentError: If only some of the readings are given.
        """
        readings = (temperature_c, relative_humidity, pressure_pa)
        if all(r is None for r in readings):
            density = self.standard_density()
        elif any(r is None for r in readings):
            raise InvalidArgumentError(
                "correction_factor_k needs either no readings or temperature, humidity and pressure."
            )
        else:
            density = self.compute_density(temperature_c, relative_humidity, pressure_pa)
        return 1 - density / config.REFERENCE_WEIGHT_DENSITY

    def density_curve(
        self,
        temperatures: Optional[npt.ArrayLike] = None,
        relative_humidity: float = config.DEFAULT_RELATIVE_HUMIDITY,
        pressure_pa: float = config.DEFAULT_PRESSURE_PA,
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Get temperature and density arrays for previewing the model.

        Args:
            temperatures: Temperatures in °C. Defaults to 15-30 °C.
            relative_humidity: Relative humidity held constant along the curve.
            pressure_pa: Pressure in Pa held constant along the curve.

        Returns:
            (temperatures, densities) arrays.
        """
        if temperatures is None:
            temperatures = np.linspace(15.0, 30.0, num=100)
        temps = np.asarray(temperatures, dtype=np.float64)
        densities = self.compute_density(temps, relative_humidity, pressure_pa)
        return temps, np.broadcast_to(densities, temps.shape).astype(np.float64)

    def plot(
        self,
        relative_humidity: float = config.DEFAULT_RELATIVE_HUMIDITY,
        pressure_pa: float = config.DEFAULT_PRESSURE_PA,
    ) -> None:
        """
        Plot the air density over the usual laboratory temperature range.

        Needs the optional ``plot`` extra (matplotlib).
        """
        import matplotlib.pyplot as plt

        temps, densities = self.density_curve(
            relative_humidity=relative_humidity, pressure_pa=pressure_pa
        )

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        plt.plot(temps, densities, 'b', lw=2)
        plt.axhline(self.standard_density(), color='gray', linestyle='--', lw=1)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"{self.equation_name} Air Density (h={relative_humidity:.2f}, p={pressure_pa:.0f} Pa)")
        plt.xlabel("Temperature (°C)")
        plt.ylabel("Density (kg/m³)")
        plt.show()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(equation_name={self.equation_name!r})"
