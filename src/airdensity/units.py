"""
Unit Conversions
================
Scalar conversions between temperature scales, pressure units and the
density-related quantities used around a weighing laboratory.

Every function works on plain floats and, where it is plain arithmetic,
on numpy arrays too.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from airdensity.constants import (
    ABSOLUTE_ZERO_CELSIUS,
    DENSITY_OF_WATER_4C,
    MMHG_IN_PASCAL,
)
from airdensity.exceptions import InvalidArgumentError

# ==========================================
# TEMPERATURE
# ==========================================

def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin."""
    return celsius - ABSOLUTE_ZERO_CELSIUS

def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""
    return kelvin + ABSOLUTE_ZERO_CELSIUS

def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return 9.0 / 5.0 * celsius + 32.0

def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return 5.0 / 9.0 * (fahrenheit - 32.0)

def ipts68_to_its90(temperature: float) -> float:
    """
    Convert an IPTS-68 water temperature to ITS-90.

    Args:
        temperature: IPTS-68 temperature in °C.

    Returns:
        ITS-90 temperature in °C.

    Raises:
        InvalidArgumentError: If the temperature is above 100 °C.
    """
    if temperature <= 40.0:
        return 0.0002 + 0.99975 * temperature
    if temperature <= 100.0:
        return 0.0005 + 0.9997333 * temperature
    raise InvalidArgumentError(
        f"Water temperature {temperature} °C is out of range 0 - 100 °C"
    )

def degrees_to_radians(angle_degree: float) -> float:
    """Convert an angle from degrees to radians."""
    return angle_degree * (math.pi / 180.0)

# ==========================================
# PRESSURE
# ==========================================

def pascal_to_mmhg(pressure: float) -> float:
    """Convert pressure from Pa to mm Hg."""
    return pressure / MMHG_IN_PASCAL

def mmhg_to_pascal(pressure: float) -> float:
    """Convert pressure from mm Hg to Pa."""
    return pressure * MMHG_IN_PASCAL

# ==========================================
# DENSITY / GRAVITY
# ==========================================

def sg_to_api(sg: float) -> float:
    """Convert specific gravity to API gravity."""
    return 141.5 / sg - 131.5

def api_to_sg(api: float) -> float:
    """Convert API gravity to specific gravity."""
    return 141.5 / (api + 131.5)

def density_to_sg(density: float, base_density: float = DENSITY_OF_WATER_4C) -> float:
    """
    Convert density to specific gravity.

    Args:
        density: Density of the substance in kg/m³.
        base_density: Density of the reference substance in kg/m³.
            Defaults to water at its densest (4 °C).

    Returns:
        Specific gravity (dimensionless).
    """
    return density / base_density

def sg_to_density(sg: float, base_density: float = DENSITY_OF_WATER_4C) -> float:
    """Convert specific gravity to density in kg/m³."""
    return sg * base_density

def density_to_api(density: float) -> float:
    """Convert density in kg/m³ to API gravity."""
    return sg_to_api(density_to_sg(density))

def api_to_density(api: float) -> float:
    """Convert API gravity to density in kg/m³."""
    return sg_to_density(api_to_sg(api))

# ==========================================
# COMPOSITION
# ==========================================

def substance_amount(mass: float, molar_mass: float) -> float:
    """Amount of substance in mol from mass [g] and molar mass [g/mol]."""
    return mass / molar_mass

def substance_mass(amount: float, molar_mass: float) -> float:
    """Mass in g from amount [mol] and molar mass [g/mol]."""
    return amount * molar_mass

def _fraction(index: int, quantities: Sequence[float]) -> float:
    if index < 0 or index >= len(quantities):
        raise InvalidArgumentError(
            f"Substance index {index} is out of substances array"
        )
    quantities = np.asarray(quantities, dtype=np.float64)
    return float(quantities[index] / quantities.sum())

def _check_lengths(name: str, values: Sequence[float], molar_masses: Sequence[float]) -> None:
    if len(values) != len(molar_masses):
        raise InvalidArgumentError(
            f"{name} length {len(values)} != molar masses length {len(molar_masses)}"
        )

def mole_fraction(
    index: int,
    amounts: Sequence[float],
    molar_masses: Sequence[float] | None = None,
) -> float:
    """
    Mole fraction of one component of a mixture.

    Args:
        index: Index of the component.
        amounts: Amounts of all components in mol, or their masses in g
            when ``molar_masses`` is given.
        molar_masses: Optional molar masses in g/mol, one per component.

    Returns:
        Mole fraction of the indexed component.
    """
    if molar_masses is None:
        return _fraction(index, amounts)

    _check_lengths("masses", amounts, molar_masses)
    moles = np.asarray(amounts, dtype=np.float64) / np.asarray(molar_masses, dtype=np.float64)
    return _fraction(index, moles)

def mass_fraction(
    index: int,
    masses: Sequence[float],
    molar_masses: Sequence[float] | None = None,
) -> float:
    """
    Mass fraction of one component of a mixture.

    Args:
        index: Index of the component.
        masses: Masses of all components in g, or their amounts in mol
            when ``molar_masses`` is given.
        molar_masses: Optional molar masses in g/mol, one per component.

    Returns:
        Mass fraction of the indexed component.
    """
    if molar_masses is None:
        return _fraction(index, masses)

    _check_lengths("amounts", masses, molar_masses)
    grams = np.asarray(masses, dtype=np.float64) * np.asarray(molar_masses, dtype=np.float64)
    return _fraction(index, grams)

def volume_fraction(index: int, volumes: Sequence[float]) -> float:
    """Volume fraction of one component of a mixture."""
    return _fraction(index, volumes)
