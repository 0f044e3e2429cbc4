"""
Solar geometry and daily radiation functions. Everything here works on a single day or on
arrays of days (numpy broadcasting) and depends only on day-of-year, latitude and daily
temperature extremes.
"""

import numpy as np

## Solar constant (MJ m-2 min-1), Allen et al. (1998)
S0_MJm2min = 0.0820

## Conversion factor from MJ m-2 d-1 to equivalent evaporation (mm d-1)
MJ_TO_MM = 0.408


def deg2rad(deg):
    """
    Convert decimal degrees to radians, Allen et al. (1998) eq. 22.
    """
    return (np.pi / 180) * deg

def inverse_relative_distance(doy, divisor=356):
    """
    Inverse relative distance Earth-Sun, Allen et al. (1998) eq. 23.

    Parameters
    ----------
    doy: int or ndarray
        Ordinal day of year (1-366)

    divisor: float
        Length of the annual cycle in the cosine term. Defaults to 356, which reproduces the
        historical weather.solar output. FAO-56 prints 365; use that for the textbook value.

    Returns
    -------
    d_r: float or ndarray
        Inverse relative distance Earth-Sun (-)
    """
    return 1 + 0.033 * np.cos((2 * np.pi / divisor) * doy)

def solar_declination(doy):
    """
    Solar declination, Allen et al. (1998) eq. 24.

    Parameters
    ----------
    doy: int or ndarray
        Ordinal day of year (1-366)

    Returns
    -------
    decl: float or ndarray
        Solar declination (rad)
    """
    return 0.409 * np.sin((2 * np.pi / 365) * doy - 1.39)

def sunset_hour_angle(latitude, decl):
    """
    Sunset hour angle, Allen et al. (1998) eq. 25.

    Parameters
    ----------
    latitude: float or ndarray
        Latitude in degrees (north is positive)

    decl: float or ndarray
        Solar declination (rad)

    Returns
    -------
    ws: float or ndarray
        Sunset hour angle (rad)

    Notes
    -----
    Inside the polar circles the arccos argument leaves [-1, 1] around the solstices (polar
    day or night) and the result is NaN. The NaN is returned silently and propagates into
    every quantity that depends on it. Use sunset_angle_defined to test for it up front.
    """
    with np.errstate(invalid="ignore"):
        return np.arccos(-np.tan(deg2rad(latitude)) * np.tan(decl))

def sunset_angle_defined(latitude, decl):
    """
    True where the sunset hour angle has a real value for the given latitude (degrees) and
    solar declination (rad), i.e. where the sun both rises and sets.
    """
    return np.abs(np.tan(deg2rad(latitude)) * np.tan(decl)) <= 1

def extraterrestrial_radiation(d_r, ws, latitude, decl, unit="mj", S0=S0_MJm2min):
    """
    Daily extraterrestrial radiation, Allen et al. (1998) eq. 21.

    Parameters
    ----------
    d_r: float or ndarray
        Inverse relative distance Earth-Sun (-), eq. 23

    ws: float or ndarray
        Sunset hour angle (rad), eq. 25

    latitude: float or ndarray
        Latitude in degrees (north is positive)

    decl: float or ndarray
        Solar declination (rad), eq. 24

    unit: str
        "mj" for MJ m-2 d-1 or "mm" for the equivalent evaporation in mm d-1. Any other
        value is treated as "mj".

    S0: float
        Solar constant (MJ m-2 min-1)

    Returns
    -------
    Ra: float or ndarray
        Extraterrestrial radiation (MJ m-2 d-1, or mm d-1 if unit="mm")
    """
    phi = deg2rad(latitude)
    Ra = (24 * 60) / np.pi * S0 * d_r * (ws * np.sin(phi) * np.sin(decl) + np.cos(phi) * np.cos(decl) * np.sin(ws))
    if unit == "mm":
        return Ra * MJ_TO_MM
    return Ra

def daylight_hours(ws):
    """
    Maximum possible duration of sunshine (hours), Allen et al. (1998) eq. 34.
    """
    return (24 / np.pi) * ws

def shortwave_radiation(Ra, Tmin, Tmax):
    """
    Incoming shortwave (solar) radiation estimated from the daily temperature range using
    the Hargreaves-Samani relation with the Samani (2000) empirical coefficient.

    Parameters
    ----------
    Ra: float or ndarray
        Extraterrestrial radiation (MJ m-2 d-1)

    Tmin: float or ndarray
        Daily minimum air temperature (degC)

    Tmax: float or ndarray
        Daily maximum air temperature (degC)

    Returns
    -------
    Rs: float or ndarray
        Shortwave radiation (MJ m-2 d-1)

    Notes
    -----
    Rs is NaN when Tmax < Tmin. Callers must supply Tmax >= Tmin; see temperature_range_valid.

    References
    ----------
    Samani (2000) J. Irrig. Drain. Eng., eqs. 1 and 3
    """
    TD = np.subtract(Tmax, Tmin, dtype=float)
    KT = 0.00185 * TD**2 - 0.0433 * TD + 0.4023
    with np.errstate(invalid="ignore"):
        return KT * Ra * np.sqrt(TD)

def temperature_range_valid(Tmin, Tmax):
    """
    True where the daily temperature range is non-negative, i.e. where shortwave_radiation
    is defined.
    """
    return np.greater_equal(Tmax, Tmin)

def photosynthetically_active_radiation(Rs, fPAR=0.5):
    """
    Photosynthetically active radiation (MJ m-2 d-1) as a fixed fraction of shortwave radiation.
    The fraction is uncertain, values between 0.45 and 0.5 are common.
    """
    return fPAR * Rs

def photosynthetic_photon_flux(PAR, conversion=0.218):
    """
    Photosynthetic photon flux, Johnson (2013) eq. 2.8.

    Parameters
    ----------
    PAR: float or ndarray
        Photosynthetically active radiation (J m-2 d-1). Note: joules, not megajoules.

    conversion: float
        Energy to photon conversion divisor (J umol-1)

    Returns
    -------
    PPF: float or ndarray
        Photosynthetic photon flux (umol photons m-2 d-1)
    """
    return PAR / conversion

def direct_radiation_fraction(Rs, Ra):
    """
    Fraction of direct solar radiation from the atmospheric transmissivity, Supit (2003)
    eqs. 4.28a-4.28d.

    Parameters
    ----------
    Rs: float or ndarray
        Shortwave radiation (MJ m-2 d-1)

    Ra: float or ndarray
        Extraterrestrial radiation (MJ m-2 d-1)

    Returns
    -------
    f_s: float or ndarray
        Fraction of direct solar radiation (-)

    Notes
    -----
    Each bracket of the diffuse fraction includes its upper edge. The pieces are not exactly
    continuous at 0.35 and 0.75, which is how the published relation is defined. A NaN
    transmissivity falls through every bracket, the diffuse fraction stays 0 and f_s is 1.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        T_atm = np.asarray(np.divide(Rs, Ra), dtype=float)
    f_d = np.select(
        [T_atm <= 0.07, T_atm <= 0.35, T_atm <= 0.75, T_atm > 0.75],
        [1.0, 1 - 2.3 * (T_atm - 0.07)**2, 1.33 - 1.46 * T_atm, 0.23],
        default=0.0,
    )
    return (1 - f_d)[()]
