"""
Helper functions for daily weather inputs: a humidity estimate for when no measurement is
available and interpolation of daily series into continuous-time forcing
"""

import numpy as np
from scipy.interpolate import interp1d
from functools import partial

def relative_humidity(Tmin, Tmax):
    """
    Simple estimate of relative humidity from the daily temperature range.

    Parameters
    ----------
    Tmin: float or ndarray
        Daily minimum air temperature (degC)

    Tmax: float or ndarray
        Daily maximum air temperature (degC)

    Returns
    -------
    rh: float or ndarray
        Relative humidity (-), at most 1

    Notes
    -----
    Only the upper end is clamped. A negative temperature range (Tmax < Tmin) gives a value
    below zero.

    References
    ----------
    Rotz et al. (2014) The integrated farm system model: reference manual version 4.1
    """
    return np.minimum(1, 1 - np.exp(-0.2 * np.subtract(Tmax, Tmin, dtype=float)))

def interp_nearest_lower_neighbour(x, y, xt, fill_value=(np.nan, np.nan)):
    """
    Piecewise constant interpolation of the data points (x, y) evaluated at xt. Each xt takes
    the y value of the closest x at or below it, so a daily value holds for the whole day.

    Parameters
    ----------
    x: array_like
        The x-coordinates of the data points (e.g. simulation day)
    y: array_like
        The y-coordinates of the data points, length must match x
    xt: float or array_like
        The x-coordinate(s) at which to evaluate
    fill_value: two-element tuple
        Values returned for xt below and above the data range, respectively

    Returns
    -------
    yt: ndarray
        The interpolated value(s) at xt
    """
    x = np.asarray(x)
    y = np.asarray(y)
    i = np.searchsorted(x, xt, side="right") - 1
    yt = np.where(i >= 0, y[np.clip(i, 0, len(y) - 1)], fill_value[0])
    yt = np.where(np.asarray(xt) > x.max(), fill_value[1], yt)
    return yt

def interp_forcing(nday, values, kind="linear", fill_value=(np.nan, np.nan)):
    """
    Turn a daily solar output (e.g. R_s or PAR) into a function of simulation time so it can
    drive a crop or pasture model integrated in continuous time.

    Parameters
    ----------
    nday: array_like
        Simulation day of each value, strictly increasing (1 for the first day of the series)
    values: array_like
        Daily values of the solar output, one per entry of nday
    kind: str
        "linear" or "quadratic" to blend neighbouring days (scipy.interpolate.interp1d), or
        "pconst" to hold each day's value until the next day starts
    fill_value: two-element tuple
        Values returned before the first and after the last simulation day

    Returns
    -------
    forcing_f: callable
        forcing_f(t) evaluates the output at simulation time t (days)
    """
    if kind == "pconst":
        return partial(interp_nearest_lower_neighbour, nday, values, fill_value=fill_value)
    if kind not in ("linear", "quadratic"):
        raise ValueError("Interpolation method %s not accepted. Please choose one of 'linear', 'quadratic' or 'pconst'" % kind)
    return interp1d(nday, values, kind=kind, bounds_error=False, fill_value=fill_value)
