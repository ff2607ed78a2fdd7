import dataclasses

import numpy as np
import pytest

from airdensity.density.cipm import (
    CIPM_2007,
    CIPMAirDensity,
    compressibility_factor,
    dry_air_molar_mass,
    enhancement_factor,
    moist_air_density,
    saturation_vapour_pressure,
    water_vapour_mole_fraction,
)
from airdensity.exceptions import InvalidArgumentError, ModelConstructionError

P0 = 101325.0


class TestSubFormulas:

    def test_saturation_vapour_pressure_at_20c(self):
        assert saturation_vapour_pressure(20.0, CIPM_2007) == pytest.approx(2339.3, rel=1e-3)

    def test_enhancement_factor(self):
        expected = 1.00062 + 3.14e-8 * P0 + 5.6e-7 * 20.0 ** 2
        assert enhancement_factor(20.0, P0) == pytest.approx(expected, rel=1e-12)

    def test_mole_fraction_scales_with_humidity(self):
        half = water_vapour_mole_fraction(20.0, 0.5, P0, CIPM_2007)
        full = water_vapour_mole_fraction(20.0, 1.0, P0, CIPM_2007)
        assert full == pytest.approx(2 * half, rel=1e-12)
        assert half == pytest.approx(0.01159, abs=1e-4)

    def test_mole_fraction_of_dry_air_is_zero(self):
        assert water_vapour_mole_fraction(20.0, 0.0, P0, CIPM_2007) == 0.0

    def test_compressibility_factor(self):
        assert compressibility_factor(20.0, 0.5, P0, CIPM_2007) == pytest.approx(0.99961, abs=2e-5)
        assert compressibility_factor(20.0, 0.0, P0, CIPM_2007) == pytest.approx(0.99964, abs=2e-5)

    def test_dry_air_molar_mass_at_reference_co2(self):
        assert dry_air_molar_mass(CIPM_2007.co2_fraction, CIPM_2007) == CIPM_2007.molar_mass_dry_air

    def test_dry_air_molar_mass_co2_scaling(self):
        # 12.011 * (x_CO2 - 0.0004) * 1e-2
        expected = 28.96546e-3 + 12.011 * 0.0001 * 1e-2
        assert dry_air_molar_mass(0.0005, CIPM_2007) == pytest.approx(expected, rel=1e-12)

    def test_moist_air_density_accepts_arrays(self):
        temps = np.array([15.0, 20.0, 25.0])
        rho = moist_air_density(temps, 0.5, P0, CIPM_2007.co2_fraction, CIPM_2007)
        assert rho.shape == (3,)
        assert np.all(np.diff(rho) < 0)

    def test_zero_pressure_propagates_non_finite_value(self):
        with np.errstate(divide="ignore", invalid="ignore"):
            xv = water_vapour_mole_fraction(20.0, 0.5, np.float64(0.0), CIPM_2007)
        assert not np.isfinite(xv)


class TestCIPM2007AirDensity:

    def test_equation_name(self, cipm):
        assert cipm.equation_name == "CIPM-2007"

    def test_standard_laboratory_air(self, cipm):
        rho = cipm.compute_density(20.0, 0.5, P0)
        assert rho == pytest.approx(1.2, abs=0.01)
        assert rho == pytest.approx(1.1993, abs=1e-3)

    def test_dry_air(self, cipm):
        assert cipm.compute_density(20.0, 0.0, P0) == pytest.approx(1.2046, abs=1e-3)

    def test_default_co2_equals_reference_co2(self, cipm):
        explicit = cipm.compute_density(20.0, 0.0, P0, CIPM_2007.co2_fraction)
        default = cipm.compute_density(20.0, 0.0, P0)
        assert default == pytest.approx(explicit, abs=1e-12)

    def test_more_co2_gives_denser_air(self, cipm):
        assert cipm.compute_density(20.0, 0.5, P0, 0.0008) > cipm.compute_density(20.0, 0.5, P0)

    def test_humidity_lowers_density(self, cipm):
        assert cipm.compute_density(20.0, 0.9, P0) < cipm.compute_density(20.0, 0.1, P0)

    def test_density_rises_with_pressure(self, cipm):
        assert cipm.compute_density(20.0, 0.5, 102000.0) > cipm.compute_density(20.0, 0.5, 100000.0)

    def test_sub_formula_methods_use_bound_constants(self, cipm):
        assert cipm.saturation_vapour_pressure(20.0) == saturation_vapour_pressure(20.0, CIPM_2007)
        assert cipm.dry_air_molar_mass(0.0004) == dry_air_molar_mass(0.0004, CIPM_2007)
        assert cipm.water_vapour_mole_fraction(20.0, 0.5, P0) == water_vapour_mole_fraction(
            20.0, 0.5, P0, CIPM_2007
        )
        assert cipm.compressibility_factor(20.0, 0.5, P0) == compressibility_factor(
            20.0, 0.5, P0, CIPM_2007
        )

    @pytest.mark.parametrize("pressure", [0.0, -100.0])
    def test_non_positive_pressure_raises(self, cipm, pressure):
        with pytest.raises(InvalidArgumentError):
            cipm.compute_density(20.0, 0.5, pressure)

    def test_temperature_below_absolute_zero_raises(self, cipm):
        with pytest.raises(InvalidArgumentError):
            cipm.compute_density(-300.0, 0.5, P0)

    def test_correction_factor_k_without_readings(self, cipm):
        assert cipm.correction_factor_k() == 1 - 1.205 / 8000

    def test_correction_factor_k_with_readings(self, cipm):
        rho = cipm.compute_density(21.5, 0.42, 99800.0)
        assert cipm.correction_factor_k(21.5, 0.42, 99800.0) == 1 - rho / 8000


class TestCIPMAirDensity:

    def test_requires_constants(self):
        with pytest.raises(ModelConstructionError):
            CIPMAirDensity()

    def test_injected_constants(self):
        model = CIPMAirDensity(CIPM_2007)
        assert model.equation_name == "CIPM-2007"
        assert model.default_co2_fraction == 0.0004

    def test_revision_with_other_constants(self, cipm):
        revision = dataclasses.replace(CIPM_2007, equation_name="CIPM-test", co2_fraction=0.0005)
        model = CIPMAirDensity(revision)
        assert model.equation_name == "CIPM-test"
        # Same molar mass at each model's own reference CO2
        assert model.compute_density(20.0, 0.5, P0) == pytest.approx(
            cipm.compute_density(20.0, 0.5, P0), rel=1e-12
        )

    def test_constants_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CIPM_2007.A = 0.0
