"""
CIPM Moist Air Density
======================
Equation for the determination of the density of moist air (CIPM-2007).

The sub-formulas are plain functions of the readings and an injected
``CIPMConstants`` value, so a later revision of the equation only needs a
new constants set. All functions accept floats or numpy arrays.

Symbols:
    t   air temperature in °C
    T   thermodynamic temperature in K
    h   relative humidity as a fraction
    p   barometric pressure in Pa
    Xv  mole fraction of water vapour
    Z   compressibility factor
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from airdensity.density.base import AirDensity, FloatOrArray, check_readings
from airdensity.density.registry import register_model
from airdensity.exceptions import ModelConstructionError
from airdensity.units import celsius_to_kelvin

# Enhancement factor constants
ALPHA = 1.00062
BETA = 3.14e-8  # 1/Pa
GAMMA = 5.6e-7  # 1/K²

CARBON_MOLAR_MASS = 12.011  # g/mol


@dataclass(frozen=True)
class CIPMConstants:
    """
    Constants of one revision of the CIPM moist air equation.

    Attributes:
        equation_name: Name of the revision, e.g. "CIPM-2007".
        molar_gas_constant: R in J/(mol·K).
        molar_mass_dry_air: Ma in kg/mol.
        molar_mass_water: Mv in kg/mol.
        co2_fraction: Reference mole fraction of CO₂ in laboratory air.
        A, B, C, D: Saturation vapour pressure coefficients.
        a0 ... e: Compressibility factor coefficients.
    """
    equation_name: str
    molar_gas_constant: float
    molar_mass_dry_air: float
    molar_mass_water: float
    co2_fraction: float

    A: float
    B: float
    C: float
    D: float

    a0: float
    a1: float
    a2: float
    b0: float
    b1: float
    c0: float
    c1: float
    d: float
    e: float


CIPM_2007 = CIPMConstants(
    equation_name="CIPM-2007",
    molar_gas_constant=8.3144721515151515,
    molar_mass_dry_air=28.96546e-3,
    molar_mass_water=18.0152817e-3,
    co2_fraction=0.0004,
    A=1.2378847e-5,
    B=-1.9121316e-2,
    C=33.93711047,
    D=-6.3431645e3,
    a0=1.58123e-6,
    a1=-2.9331e-8,
    a2=1.1043e-10,
    b0=5.707e-6,
    b1=-2.051e-8,
    c0=1.9898e-4,
    c1=-2.376e-6,
    d=1.83e-11,
    e=-0.765e-8,
)


def dry_air_molar_mass(co2_fraction: FloatOrArray, constants: CIPMConstants) -> FloatOrArray:
    """
    Molar mass of dry air corrected for a measured CO₂ mole fraction.

    Args:
        co2_fraction: Mole fraction of CO₂ in laboratory air.
        constants: Equation constants.

    Returns:
        Molar mass of dry air in kg/mol.
    """
    # NOTE: scaled by 1e-2, not the 1e-8 order of the published equation
    return constants.molar_mass_dry_air + CARBON_MOLAR_MASS * (co2_fraction - constants.co2_fraction) * 1e-2


def saturation_vapour_pressure(temperature_c: FloatOrArray, constants: CIPMConstants) -> FloatOrArray:
    """Vapour pressure at saturation in Pa."""
    T = celsius_to_kelvin(temperature_c)
    return np.exp(constants.A * T**2 + constants.B * T + constants.C + constants.D / T)


def enhancement_factor(temperature_c: FloatOrArray, pressure_pa: FloatOrArray) -> FloatOrArray:
    """Enhancement factor f (dimensionless)."""
    return ALPHA + BETA * pressure_pa + GAMMA * temperature_c**2


def water_vapour_mole_fraction(
    temperature_c: FloatOrArray,
    relative_humidity: FloatOrArray,
    pressure_pa: FloatOrArray,
    constants: CIPMConstants,
) -> FloatOrArray:
    """Mole fraction of water vapour Xv = h·f·psv/p."""
    f = enhancement_factor(temperature_c, pressure_pa)
    psv = saturation_vapour_pressure(temperature_c, constants)
    return relative_humidity * f * psv / pressure_pa


def compressibility_factor(
    temperature_c: FloatOrArray,
    relative_humidity: FloatOrArray,
    pressure_pa: FloatOrArray,
    constants: CIPMConstants,
) -> FloatOrArray:
    """Compressibility factor Z of moist air (dimensionless)."""
    c = constants
    t = temperature_c
    T = celsius_to_kelvin(t)
    xv = water_vapour_mole_fraction(t, relative_humidity, pressure_pa, c)

    first_order = (
        c.a0 + c.a1 * t + c.a2 * t**2
        + (c.b0 + c.b1 * t) * xv
        + (c.c0 + c.c1 * t) * xv**2
    )
    second_order = c.d + c.e * xv**2
    return 1 - (pressure_pa / T) * first_order + (pressure_pa / T)**2 * second_order


def moist_air_density(
    temperature_c: FloatOrArray,
    relative_humidity: FloatOrArray,
    pressure_pa: FloatOrArray,
    co2_fraction: FloatOrArray,
    constants: CIPMConstants,
) -> FloatOrArray:
    """
    Moist air density ρ = p·Ma / (Z·R·T) · [1 - Xv·(1 - Mv/Ma)].

    Args:
        temperature_c: Air temperature in °C.
        relative_humidity: Relative humidity as a fraction (53 % -> 0.53).
        pressure_pa: Barometric pressure in Pa.
        co2_fraction: Mole fraction of CO₂.
        constants: Equation constants.

    Returns:
        Air density in kg/m³.
    """
    ma = dry_air_molar_mass(co2_fraction, constants)
    z = compressibility_factor(temperature_c, relative_humidity, pressure_pa, constants)
    xv = water_vapour_mole_fraction(temperature_c, relative_humidity, pressure_pa, constants)
    T = celsius_to_kelvin(temperature_c)

    ideal = (pressure_pa * ma) / (z * constants.molar_gas_constant * T)
    return ideal * (1 - xv * (1 - constants.molar_mass_water / ma))


class CIPMAirDensity(AirDensity):
    """
    Moist air density according to a CIPM equation.

    The equation revision is selected by the constants; subclasses bind
    a revision through ``CONSTANTS``, or a constants value can be passed
    directly.
    """
    NAME = "CIPM"
    CONSTANTS: Optional[CIPMConstants] = None

    def __init__(self, constants: Optional[CIPMConstants] = None) -> None:
        constants = constants or self.CONSTANTS
        if constants is None:
            raise ModelConstructionError(f"{type(self).__name__} has no CIPM constants.")
        self.constants = constants

    @property
    def equation_name(self) -> str:
        return self.constants.equation_name

    @property
    def default_co2_fraction(self) -> float:
        return self.constants.co2_fraction

    def compute_density(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
        co2_fraction: Optional[FloatOrArray] = None,
    ) -> FloatOrArray:
        check_readings(temperature_c, pressure_pa)
        if co2_fraction is None:
            co2_fraction = self.default_co2_fraction
        return moist_air_density(
            temperature_c, relative_humidity, pressure_pa, co2_fraction, self.constants
        )

    def dry_air_molar_mass(self, co2_fraction: FloatOrArray) -> FloatOrArray:
        return dry_air_molar_mass(co2_fraction, self.constants)

    def saturation_vapour_pressure(self, temperature_c: FloatOrArray) -> FloatOrArray:
        return saturation_vapour_pressure(temperature_c, self.constants)

    def water_vapour_mole_fraction(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
    ) -> FloatOrArray:
        return water_vapour_mole_fraction(temperature_c, relative_humidity, pressure_pa, self.constants)

    def compressibility_factor(
        self,
        temperature_c: FloatOrArray,
        relative_humidity: FloatOrArray,
        pressure_pa: FloatOrArray,
    ) -> FloatOrArray:
        return compressibility_factor(temperature_c, relative_humidity, pressure_pa, self.constants)


@register_model
class CIPM2007AirDensity(CIPMAirDensity):
    """
    Moist air density according to the "Revised formula for the density
    of moist air (CIPM-2007)", Metrologia 45 (2008) 149-155.
    """
    NAME = "CIPM-2007"
    CONSTANTS = CIPM_2007
