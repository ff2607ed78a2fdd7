"""
Configuration & Defaults
========================
This module serves as the central registry for default readings and the
reference values used by the density models.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (20 °C, 101325 Pa, ...) scattered
   throughout the code.
2. Consistency: The factory, the measurement context and the models all read
   the same defaults, so a "standard" laboratory atmosphere means the same
   thing everywhere.

Exports:
    DEFAULT_TEMPERATURE_C (float): Default laboratory air temperature in °C.
    DEFAULT_RELATIVE_HUMIDITY (float): Default relative humidity (0.50 = 50 %).
    DEFAULT_PRESSURE_PA (float): Default barometric pressure in Pa (760 mm Hg).
    STANDARD_AIR_DENSITY (float): Conventional air density in kg/m³.
    REFERENCE_WEIGHT_DENSITY (float): Conventional density of reference weights in kg/m³.
    DEFAULT_MODEL_NAME (str): Equation name of the model installed by default.
"""

# Default ambient readings (T=20.00 °C, H=0.50 [50%], P=101325 Pa [760 mmHg])
DEFAULT_TEMPERATURE_C: float = 20.0
DEFAULT_RELATIVE_HUMIDITY: float = 0.50
DEFAULT_PRESSURE_PA: float = 101325.0

# Reference values
STANDARD_AIR_DENSITY: float = 1.205  # kg/m³
REFERENCE_WEIGHT_DENSITY: float = 8000.0  # kg/m³

DEFAULT_MODEL_NAME: str = "CIPM-2007"
