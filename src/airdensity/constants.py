"""Physical and unit constants shared across the package."""

ABSOLUTE_ZERO_CELSIUS = -273.15

MMHG_IN_PASCAL = 133.3223684  # Pa per mm Hg

DENSITY_OF_WATER_4C = 1000.0  # kg/m³, reference for specific gravity
