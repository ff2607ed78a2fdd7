"""
Air Factory
===========
Builds an ``Air`` context with a chosen density model and the standard
laboratory reading (T=20.00 °C, H=0.50 [50%], P=101325 Pa [760 mmHg]).
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from airdensity import config
from airdensity.air import Air
from airdensity.density import AirDensity, get_model_class
from airdensity.exceptions import ModelConstructionError

logger = logging.getLogger(__name__)

ModelSpec = Union[str, type[AirDensity], AirDensity]


def create_model(model: ModelSpec = config.DEFAULT_MODEL_NAME) -> AirDensity:
    """
    Instantiate a density model.

    Args:
        model: A registered equation name (e.g. "CIPM-2007"), a model class,
               or an existing model instance (returned as is).

    Returns:
        The model instance.

    Raises:
        ModelConstructionError: If the name is unknown or the model cannot
            be constructed without arguments.
    """
    if isinstance(model, AirDensity):
        return model

    if isinstance(model, str):
        try:
            model = get_model_class(model)
        except KeyError as e:
            logger.error(f"Unknown air density model: {e}")
            raise ModelConstructionError(f"Unknown air density model '{model}'") from e

    if not (isinstance(model, type) and issubclass(model, AirDensity)):
        logger.error(f"Not an air density model: {model!r}")
        raise ModelConstructionError(f"Not an air density model: {model!r}")

    try:
        instance = model()
    except Exception as e:
        logger.error(f"Air density model {model.__name__} could not be created: {e}")
        raise ModelConstructionError(f"Failed to create {model.__name__}: {e}") from e

    logger.debug("Created air density model %s", instance.equation_name)
    return instance


def create_air(model: Optional[ModelSpec] = None) -> Air:
    """
    Create an ``Air`` context with the default laboratory reading.

    Args:
        model: Model to install, see ``create_model``. Defaults to CIPM-2007.

    Returns:
        Air with T=20.00 °C, H=0.50 and P=101325 Pa set.
    """
    air = Air(model=create_model(model if model is not None else config.DEFAULT_MODEL_NAME))
    air.set(
        config.DEFAULT_TEMPERATURE_C,
        config.DEFAULT_RELATIVE_HUMIDITY,
        config.DEFAULT_PRESSURE_PA,
    )
    return air
