"""
Exceptions
==========
Error types raised by the air density library.

All errors are raised synchronously at the call that caused them; nothing in
the package retries or recovers silently.
"""


class AirDensityError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(AirDensityError, ValueError):
    """
    Raised when an operation receives an input it cannot work with,
    e.g. an interpolation table with fewer than two entries or a
    non-positive pressure.
    """


class ModelConstructionError(AirDensityError, RuntimeError):
    """Raised when a requested air density model cannot be instantiated."""
