"""
Solar class: Daily daylength and radiation for a site, estimated from latitude and daily minimum/maximum air temperature
"""

import logging
import numpy as np
from attrs import define, field, validators
from typing import Optional
from weathersolar.solar_funcs import *
from weathersolar.calendar_funcs import parse_date, day_of_year, date_range, days_in_year
from weathersolar.climate_funcs import interp_forcing
from weathersolar.utils import LengthMismatchError, DomainError

logger = logging.getLogger(__name__)

NUMERIC_OUTPUTS = ("N", "R_a", "R_s", "PAR", "PPF", "f_s")


@define(frozen=True, eq=False)
class SolarSeries:
    """
    Index-aligned daily solar outputs, one entry per input day
    """

    N: np.ndarray      ## Maximum possible duration of sunshine or daylight hours (hours)
    R_a: np.ndarray    ## Extraterrestrial radiation (MJ m-2 d-1, or mm d-1 if Ra_unit="mm")
    R_s: np.ndarray    ## Solar or shortwave radiation (MJ m-2 d-1)
    PAR: np.ndarray    ## Photosynthetically active radiation (MJ m-2 d-1)
    PPF: np.ndarray    ## Photosynthetic photon flux (umol photons m-2 d-1)
    f_s: np.ndarray    ## Fraction of direct solar radiation (-)
    date: Optional[list] = None    ## Date strings in ISO format (YYYY-MM-DD), start-date mode only
    doy: Optional[np.ndarray] = None    ## Ordinal day of year, start-date mode only

    def __len__(self):
        return len(self.N)

    @property
    def valid(self):
        """
        Boolean array, True for days where every numeric output is finite
        """
        return np.all(np.isfinite(np.vstack([getattr(self, name) for name in NUMERIC_OUTPUTS])), axis=0)

    def invalid_days(self):
        """
        Indices of the days with at least one undefined (NaN) output
        """
        return np.flatnonzero(~self.valid)

    def forcing(self, name, kind="linear"):
        """
        Continuous-time forcing function for one of the numeric outputs. The returned callable
        takes the simulation day (1 for the first day of the series).
        """
        if name not in NUMERIC_OUTPUTS:
            raise ValueError(f"Unknown solar output '{name}'. Choose one of {NUMERIC_OUTPUTS}")
        nday = np.arange(1, len(self) + 1)
        return interp_forcing(nday, getattr(self, name), kind=kind)

    def to_dict(self):
        out = {name: getattr(self, name).tolist() for name in NUMERIC_OUTPUTS}
        if self.date is not None:
            out["date"] = list(self.date)
        if self.doy is not None:
            out["doy"] = self.doy.tolist()
        return out


@define(frozen=True)
class SeriesResult:
    """
    Outcome of a year-range calculation: either the series or the length mismatch that
    prevented it
    """

    series: Optional[SolarSeries] = None
    error: Optional[LengthMismatchError] = None

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Return the series, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.series


def _check_divisor(instance, attribute, value):
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@define
class SolarModule:
    """
    Daily solar radiation and daylength from latitude and temperature (min, max)

    References
    ----------
    Allen et al. (1998) FAO Irrigation and Drainage Paper No. 56
    Johnson (2013) DairyMod and the SGS Pasture Model: a mathematical description of the biophysical models
    Samani (2000) J. Irrig. Drain. Eng.
    Supit (2003) Updated system description of the WOFOST crop growth simulation model
    """

    CLatDeg: float = field(
        default=-33.715,
        validator=[validators.ge(-90), validators.le(90)]
    )  ## latitude of site (degrees)
    Ra_unit: str = field(default="mj")  ## unit of extraterrestrial radiation, "mj" (MJ m-2 d-1) or "mm" (equivalent evaporation, mm d-1)
    dr_divisor: float = field(
        default=356,
        validator=_check_divisor
    )  ## divisor in the Earth-Sun distance term; 356 reproduces historical output, 365 is the FAO-56 formula
    fPAR: float = field(default=0.5)  ## fraction of shortwave radiation that is photosynthetically active (-)
    PPF_conversion: float = field(default=0.218)  ## PAR energy to photon flux divisor (J umol-1)
    strict: bool = field(default=False)  ## raise DomainError instead of returning NaN outputs
    S0_MJm2min: float = field(default=0.0820)  ## Solar constant (MJ m-2 min-1), incoming solar radiation at the top of Earth's atmosphere

    MJ_to_J: float = 1e6  ## conversion factor for MJ to J

    def calculate_daily(self, doy, Tmin, Tmax):
        """
        Run the daily chain of solar calculations.

        Parameters
        ----------
        doy: int or ndarray
            Ordinal day of year (1-366)

        Tmin: float or ndarray
            Daily minimum air temperature (degC)

        Tmax: float or ndarray
            Daily maximum air temperature (degC)

        Returns
        -------
        (N, R_a, R_s, PAR, PPF, f_s): tuple
            Daylength (hours), extraterrestrial radiation, shortwave radiation, PAR
            (MJ m-2 d-1), photosynthetic photon flux (umol m-2 d-1) and fraction of direct
            radiation (-)
        """
        d_r = inverse_relative_distance(doy, divisor=self.dr_divisor)
        decl = solar_declination(doy)
        ws = sunset_hour_angle(self.CLatDeg, decl)
        R_a = extraterrestrial_radiation(d_r, ws, self.CLatDeg, decl, unit=self.Ra_unit, S0=self.S0_MJm2min)
        N = daylight_hours(ws)
        R_s = shortwave_radiation(R_a, Tmin, Tmax)
        PAR = photosynthetically_active_radiation(R_s, fPAR=self.fPAR)
        PPF = photosynthetic_photon_flux(PAR * self.MJ_to_J, conversion=self.PPF_conversion)
        f_s = direct_radiation_fraction(R_s, R_a)
        return (N, R_a, R_s, PAR, PPF, f_s)

    def solar_series(self, Tmin, Tmax, start_date):
        """
        Daily solar outputs for consecutive days beginning at start_date.

        Parameters
        ----------
        Tmin: array_like
            Daily minimum air temperature (degC)

        Tmax: array_like
            Daily maximum air temperature (degC), same length as Tmin

        start_date: str or date
            Date of the first value, ISO format (e.g. "1995-01-01")

        Returns
        -------
        SolarSeries
            Series with the same length as Tmin, including date and doy
        """
        Tmin = np.atleast_1d(np.asarray(Tmin, dtype=float))
        Tmax = np.atleast_1d(np.asarray(Tmax, dtype=float))
        if Tmin.shape != Tmax.shape:
            raise ValueError("Size of Tmin and Tmax inputs must be the same")

        dates = date_range(start_date, len(Tmin))
        doy = np.array([day_of_year(d) for d in dates], dtype=int)
        logger.debug("Solar series at latitude %s from %s for %d days", self.CLatDeg, parse_date(start_date).isoformat(), len(Tmin))

        outputs = self.calculate_daily(doy, Tmin, Tmax)
        series = SolarSeries(*outputs, date=[d.isoformat() for d in dates], doy=doy)
        return self._checked(series)

    def solar_series_year_range(self, Tmin, Tmax, first_year, last_year):
        """
        Daily solar outputs for whole calendar years, first_year to last_year inclusive.

        Parameters
        ----------
        Tmin: array_like
            Daily minimum air temperature (degC), one value per day of the period

        Tmax: array_like
            Daily maximum air temperature (degC), one value per day of the period

        first_year: int
            First year of the period

        last_year: int
            Last year of the period (inclusive)

        Returns
        -------
        SeriesResult
            Holds the SolarSeries (without date and doy) or, if Tmin or Tmax does not have
            one value per day, a LengthMismatchError. A mismatch is not raised.
        """
        if first_year > last_year:
            raise ValueError("first_year (%d) must not be after last_year (%d)" % (first_year, last_year))

        Tmin = np.atleast_1d(np.asarray(Tmin, dtype=float))
        Tmax = np.atleast_1d(np.asarray(Tmax, dtype=float))
        years = range(int(first_year), int(last_year) + 1)
        ndays = sum(days_in_year(year) for year in years)

        for name, T in (("Tmin", Tmin), ("Tmax", Tmax)):
            if len(T) != ndays:
                error = LengthMismatchError(name, ndays, len(T))
                logger.warning("Solar series for %d-%d not computed: %s", first_year, last_year, error)
                return SeriesResult(error=error)

        doy = np.concatenate([np.arange(1, days_in_year(year) + 1) for year in years])
        logger.debug("Solar series at latitude %s for years %d-%d (%d days)", self.CLatDeg, first_year, last_year, ndays)

        outputs = self.calculate_daily(doy, Tmin, Tmax)
        return SeriesResult(series=self._checked(SolarSeries(*outputs)))

    def _checked(self, series):
        bad = series.invalid_days()
        if len(bad) > 0:
            if self.strict:
                raise DomainError(bad)
            logger.warning("%d of %d days have undefined solar outputs (first at index %d)", len(bad), len(series), bad[0])
        return series
