import dataclasses
import logging

import pytest

from airdensity.air import Air, AirReading
from airdensity.density import ApproximateAirDensity, CIPM2007AirDensity, SimpleAirDensity
from airdensity.exceptions import InvalidArgumentError


def test_default_model_is_cipm_2007():
    assert isinstance(Air().model, CIPM2007AirDensity)


def test_no_reading_until_set():
    air = Air()
    assert air.reading is None
    with pytest.raises(InvalidArgumentError):
        air.density()
    with pytest.raises(InvalidArgumentError):
        air.correction_factor_k()


def test_set_replaces_reading():
    air = Air()
    air.set(20.0, 0.5, 101325)
    first = air.reading
    air.set(22.0, 0.4, 100000)
    assert first == AirReading(20.0, 0.5, 101325.0)
    assert air.reading == AirReading(22.0, 0.4, 100000.0)


def test_reading_is_immutable():
    reading = AirReading(20.0, 0.5, 101325.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        reading.temperature_c = 21.0


def test_density_delegates_to_model():
    model = CIPM2007AirDensity()
    air = Air(model=model)
    air.set(20.0, 0.5, 101325.0)
    assert air.density() == model.compute_density(20.0, 0.5, 101325.0)
    assert air.density(0.0008) == model.compute_density(20.0, 0.5, 101325.0, 0.0008)
    assert air.approximate_density() == model.approximate_density(20.0, 0.5, 101325.0)
    assert air.correction_factor_k() == model.correction_factor_k(20.0, 0.5, 101325.0)


def test_swapping_model_keeps_reading(caplog):
    air = Air(reading=AirReading(20.0, 0.5, 101325.0))
    with caplog.at_level(logging.DEBUG, logger="airdensity"):
        air.model = SimpleAirDensity(height=1000.0)
    assert air.density() == 1.068
    assert air.reading == AirReading(20.0, 0.5, 101325.0)
    assert "CIPM-2007 -> Simple" in caplog.text


def test_model_can_be_shared_between_contexts():
    model = ApproximateAirDensity()
    a, b = Air(model=model), Air(model=model)
    a.set(20.0, 0.5, 101325.0)
    b.set(25.0, 0.5, 101325.0)
    assert a.model is b.model
    assert a.density() > b.density()


def test_str():
    air = Air()
    assert str(air) == "Air [model=CIPM-2007, no reading]"
    air.set(20.0, 0.5, 101325.0)
    assert str(air) == "Air [temperature=20.0, humidity=0.5, pressure=101325.0, model=CIPM-2007]"
