"""
Density models. Importing this package registers every bundled model.
"""
from airdensity.density.base import AirDensity, approximate_air_density, barometric_air_density
from airdensity.density.cipm import CIPM_2007, CIPM2007AirDensity, CIPMAirDensity, CIPMConstants
from airdensity.density.approximate import ApproximateAirDensity
from airdensity.density.simple import SimpleAirDensity
from airdensity.density.registry import get_model_class, list_models, register_model

__all__ = [
    "AirDensity",
    "ApproximateAirDensity",
    "CIPM2007AirDensity",
    "CIPMAirDensity",
    "CIPMConstants",
    "CIPM_2007",
    "SimpleAirDensity",
    "approximate_air_density",
    "barometric_air_density",
    "get_model_class",
    "list_models",
    "register_model",
]
