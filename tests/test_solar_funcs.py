"""
Tests for the solar geometry and daily radiation functions.

Reference values from the worked examples in Allen et al. (1998) FAO-56.
"""

import numpy as np
import pytest

from weathersolar.solar_funcs import (
    deg2rad,
    inverse_relative_distance,
    solar_declination,
    sunset_hour_angle,
    sunset_angle_defined,
    extraterrestrial_radiation,
    daylight_hours,
    shortwave_radiation,
    temperature_range_valid,
    photosynthetically_active_radiation,
    photosynthetic_photon_flux,
    direct_radiation_fraction,
)


def daylength(latitude, doy):
    return daylight_hours(sunset_hour_angle(latitude, solar_declination(doy)))


class TestAstronomy:
    def test_deg2rad(self):
        assert deg2rad(180) == pytest.approx(np.pi)
        assert deg2rad(-90) == pytest.approx(-np.pi / 2)

    def test_inverse_relative_distance_default_divisor(self):
        doy = 100
        assert inverse_relative_distance(doy) == pytest.approx(1 + 0.033 * np.cos(2 * np.pi / 356 * doy))

    def test_inverse_relative_distance_fao56(self):
        # Allen (1998) example 8: 3 September
        assert inverse_relative_distance(246, divisor=365) == pytest.approx(0.985, abs=1e-3)

    def test_solar_declination_fao56(self):
        assert solar_declination(246) == pytest.approx(0.120, abs=1e-3)

    def test_sunset_hour_angle_fao56(self):
        assert sunset_hour_angle(-20, solar_declination(246)) == pytest.approx(1.527, abs=1e-3)

    def test_sunset_angle_real_outside_polar_circles(self):
        latitude = np.linspace(-66, 66, 133)[:, None]
        doy = np.arange(1, 367)[None, :]
        decl = solar_declination(doy)
        ws = sunset_hour_angle(latitude, decl)
        assert np.all(np.isfinite(ws))
        assert np.all(sunset_angle_defined(latitude, decl))

    def test_sunset_angle_nan_in_polar_summer_and_winter(self):
        for doy in (172, 355):
            decl = solar_declination(doy)
            assert np.isnan(sunset_hour_angle(80, decl))
            assert not sunset_angle_defined(80, decl)

    def test_daylength_extremes_at_45N(self):
        assert daylength(45, 172) > 15
        assert daylength(45, 355) < 9

    def test_daylength_southern_hemisphere_mirrors(self):
        assert daylength(-45, 172) < 9
        assert daylength(-45, 355) > 15

    def test_daylength_equator(self):
        assert daylength(0, np.arange(1, 366)) == pytest.approx(12.0)


class TestRadiation:
    def test_extraterrestrial_radiation_fao56(self):
        # Allen (1998) example 8: latitude 20S on 3 September, Ra = 32.2 MJ m-2 d-1
        doy, latitude = 246, -20
        decl = solar_declination(doy)
        ws = sunset_hour_angle(latitude, decl)
        d_r = inverse_relative_distance(doy, divisor=365)
        assert extraterrestrial_radiation(d_r, ws, latitude, decl) == pytest.approx(32.2, abs=0.1)

    def test_extraterrestrial_radiation_units(self):
        decl = solar_declination(200)
        ws = sunset_hour_angle(50, decl)
        d_r = inverse_relative_distance(200)
        Ra = extraterrestrial_radiation(d_r, ws, 50, decl)
        assert extraterrestrial_radiation(d_r, ws, 50, decl, unit="mm") == pytest.approx(0.408 * Ra)
        assert extraterrestrial_radiation(d_r, ws, 50, decl, unit="MJ") == Ra
        assert extraterrestrial_radiation(d_r, ws, 50, decl, unit="watts") == Ra

    def test_extraterrestrial_radiation_scales_with_solar_constant(self):
        decl = solar_declination(200)
        ws = sunset_hour_angle(50, decl)
        d_r = inverse_relative_distance(200)
        Ra = extraterrestrial_radiation(d_r, ws, 50, decl)
        assert extraterrestrial_radiation(d_r, ws, 50, decl, S0=0.0820) == Ra
        assert extraterrestrial_radiation(d_r, ws, 50, decl, S0=0.0822) == pytest.approx(Ra * 0.0822 / 0.0820)

    def test_shortwave_radiation(self):
        Ra, Tmin, Tmax = 30.0, 10.0, 26.0
        TD = Tmax - Tmin
        KT = 0.00185 * TD**2 - 0.0433 * TD + 0.4023
        assert shortwave_radiation(Ra, Tmin, Tmax) == pytest.approx(KT * Ra * np.sqrt(TD))

    def test_shortwave_radiation_zero_range(self):
        assert shortwave_radiation(30.0, 15.0, 15.0) == 0.0

    def test_shortwave_radiation_negative_range_is_nan(self):
        assert np.isnan(shortwave_radiation(30.0, 20.0, 10.0))
        assert not temperature_range_valid(20.0, 10.0)
        assert temperature_range_valid(10.0, 10.0)

    def test_shortwave_radiation_arrays(self):
        Rs = shortwave_radiation(np.array([30.0, 30.0]), np.array([5.0, 20.0]), np.array([20.0, 10.0]))
        assert np.isfinite(Rs[0])
        assert np.isnan(Rs[1])

    def test_par_and_ppf(self):
        assert photosynthetically_active_radiation(20.0) == pytest.approx(10.0)
        assert photosynthetically_active_radiation(20.0, fPAR=0.45) == pytest.approx(9.0)
        assert photosynthetic_photon_flux(0.218e6) == pytest.approx(1e6)


class TestDirectRadiationFraction:
    @pytest.mark.parametrize(
        "T_atm, expected",
        [
            (0.0, 0.0),
            (0.07, 0.0),
            (0.2, 2.3 * 0.13**2),
            (0.35, 2.3 * 0.28**2),
            (0.5, 1 - (1.33 - 1.46 * 0.5)),
            (0.75, 1 - (1.33 - 1.46 * 0.75)),
            (0.9, 0.77),
        ],
    )
    def test_brackets(self, T_atm, expected):
        assert direct_radiation_fraction(T_atm, 1.0) == pytest.approx(expected, abs=1e-12)

    def test_uses_ratio_of_rs_to_ra(self):
        assert direct_radiation_fraction(10.0, 20.0) == pytest.approx(direct_radiation_fraction(0.5, 1.0))

    def test_continuous_at_lower_edge(self):
        below = 1 - 1.0
        above = 1 - (1 - 2.3 * (0.07 - 0.07)**2)
        assert direct_radiation_fraction(0.07, 1.0) == pytest.approx(below, abs=1e-9)
        assert direct_radiation_fraction(0.07, 1.0) == pytest.approx(above, abs=1e-9)

    @pytest.mark.parametrize("edge", [0.35, 0.75])
    def test_pieces_nearly_meet_at_upper_edges(self, edge):
        left = direct_radiation_fraction(edge, 1.0)
        right = direct_radiation_fraction(edge + 1e-12, 1.0)
        assert left == pytest.approx(right, abs=1e-2)

    def test_array_input(self):
        f_s = direct_radiation_fraction(np.array([0.05, 0.5, 0.8]), np.ones(3))
        np.testing.assert_allclose(f_s, [0.0, 1 - (1.33 - 0.73), 0.77])

    def test_nan_transmissivity_gives_one(self):
        assert direct_radiation_fraction(np.nan, 30.0) == 1.0
        np.testing.assert_array_equal(direct_radiation_fraction(np.array([np.nan]), np.array([30.0])), [1.0])
