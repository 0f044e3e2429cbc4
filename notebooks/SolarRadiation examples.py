# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.1
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %%
import numpy as np
import matplotlib.pyplot as plt

# %%
from weathersolar.solar import SolarModule
from weathersolar.climate_funcs import relative_humidity

# %% [markdown]
# ## Synthetic temperature forcing
#
# Two years of daily minimum and maximum air temperature with a seasonal cycle (southern hemisphere site)

# %%
ndays = 365 + 366
nday = np.arange(1, ndays + 1)
Tmin = 8 + 6 * np.cos(2 * np.pi * nday / 365) + np.random.default_rng(0).normal(0, 2, ndays)
Tmax = Tmin + 10 + 4 * np.cos(2 * np.pi * nday / 365)

# %% [markdown]
# ## Class SolarModule

# %%
## Instance of class
Site = SolarModule(CLatDeg=-33.715)

series = Site.solar_series(Tmin, Tmax, "2023-01-01")
print("Days with undefined outputs:", series.invalid_days())

# %%
fig, axes = plt.subplots(2, 2, figsize=(10, 6), sharex=True)

axes[0, 0].plot(nday, series.N)
axes[0, 0].set_ylabel("Daylength\n(hours)")
axes[0, 1].plot(nday, series.R_a, label=r"$\rm R_a$")
axes[0, 1].plot(nday, series.R_s, label=r"$\rm R_s$")
axes[0, 1].plot(nday, series.PAR, label="PAR")
axes[0, 1].set_ylabel("Radiation\n"+r"($\rm MJ \; m^{-2} \; d^{-1}$)")
axes[0, 1].legend()
axes[1, 0].plot(nday, series.PPF * 1e-6)
axes[1, 0].set_ylabel("PPF\n"+r"($\rm mol \; m^{-2} \; d^{-1}$)")
axes[1, 1].plot(nday, series.f_s)
axes[1, 1].set_ylabel("Direct fraction (-)")
for ax in axes[1, :]:
    ax.set_xlabel("Simulation day")
plt.tight_layout()
plt.show()

# %% [markdown]
# #### Daylength by latitude
#
# Inside the polar circles the sunset hour angle is undefined around the solstices and the outputs are NaN

# %%
fig, ax = plt.subplots(1, 1, figsize=(5, 3))
for lat in [0, 30, 60, 70]:
    s = SolarModule(CLatDeg=lat).solar_series(Tmin[:365], Tmax[:365], "2023-01-01")
    ax.plot(s.doy, s.N, label=r"%d$^{\circ}$N" % lat)
ax.legend()
ax.set_xlabel("Day of year")
ax.set_ylabel("Daylength (hours)")
plt.show()

# %% [markdown]
# #### Whole years and the FAO-56 Earth-Sun distance term

# %%
result = SolarModule(CLatDeg=-33.715, dr_divisor=365).solar_series_year_range(Tmin, Tmax, 2023, 2024)
if result.ok:
    fao = result.series
    plt.plot(nday, fao.R_a - series.R_a)
    plt.xlabel("Simulation day")
    plt.ylabel(r"$\rm \Delta R_a$ (365 - 356)")
    plt.show()
else:
    print(result.error)

# %% [markdown]
# #### Continuous-time forcing and relative humidity

# %%
PAR_f = series.forcing("PAR", kind="pconst")
t = np.linspace(1, 30, 500)
plt.plot(t, PAR_f(t))
plt.xlabel("Simulation day")
plt.ylabel("PAR")
plt.show()

rh = relative_humidity(Tmin, Tmax)
print("Mean estimated relative humidity: %1.2f" % np.mean(rh))
