"""
Moist laboratory air density.

The package computes air density from temperature, relative humidity and
barometric pressure with interchangeable models (CIPM-2007, an approximate
closed form and an altitude-only estimate), and provides the table
interpolation used to derive correction factors from measured data.
"""
from airdensity.air import Air, AirReading
from airdensity.density import (
    AirDensity,
    ApproximateAirDensity,
    CIPM2007AirDensity,
    CIPMAirDensity,
    CIPMConstants,
    SimpleAirDensity,
    list_models,
)
from airdensity.exceptions import AirDensityError, InvalidArgumentError, ModelConstructionError
from airdensity.factory import create_air, create_model
from airdensity.interpolation import interpolate, round_half_up
from airdensity.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Air",
    "AirDensity",
    "AirDensityError",
    "AirReading",
    "ApproximateAirDensity",
    "CIPM2007AirDensity",
    "CIPMAirDensity",
    "CIPMConstants",
    "InvalidArgumentError",
    "ModelConstructionError",
    "SimpleAirDensity",
    "create_air",
    "create_model",
    "interpolate",
    "list_models",
    "round_half_up",
    "setup_logging",
]
