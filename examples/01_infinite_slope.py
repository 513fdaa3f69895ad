# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 01 — Infinite Slope Stability and Probability of Failure
#
# Evaluates the factor of safety of a shallow soil layer with the
# infinite slope model, then the probability of failure with the
# first-order second-moment (FOSM) method:
#
# $$
# FoS = \frac{c' + (\gamma z \cos^2\beta - u)\tan\phi'}{\gamma z \sin\beta\cos\beta}
# $$
#
# **Modules**: `pylandslide.slope`, `pylandslide.reliability`

# %%
from dataclasses import replace

import numpy as np
from pylandslide.materials import GeotechnicalParams, preset
from pylandslide.hydrology import pore_pressure
from pylandslide.reliability import compute_pof, reliability_index
from pylandslide.slope import compute_fos, effective_cohesion

# %% [markdown]
# ## 1. Reference Slope
#
# | β (°) | z (m) | γ (kN/m³) | c' (kPa) | φ' (°) |
# |-------|-------|-----------|----------|--------|
# | 30    | 3     | 18        | 10       | 30     |
#
# Half of the soil column is saturated.

# %%
params = GeotechnicalParams(
    slope_angle=30.0, soil_depth=3.0, unit_weight=18.0,
    cohesion=10.0, friction_angle=30.0,
)
pw, ru = pore_pressure(1.5, params.soil_depth, params.unit_weight)

fos = compute_fos(params, pw)
print(f"Pore pressure: {pw:.2f} kPa (ru = {ru:.3f})")
print(f"FoS:           {fos:.3f}")
print(f"β index:       {reliability_index(fos, 0.2):.3f}")
print(f"PoF:           {compute_pof(fos, 0.2):.2f} %")

# %% [markdown]
# ## 2. Roots, Erosion and Saturation Softening
#
# Vegetation adds root cohesion; erosion strips it; pore pressure
# softens the remaining bond.

# %%
for veg, ero in [(0.0, 0.0), (0.5, 0.3), (0.9, 0.1)]:
    c_eff = effective_cohesion(params.cohesion, veg, ero, ru)
    f = compute_fos(replace(params, cohesion=c_eff), pw)
    print(f"veg={veg:.1f} erosion={ero:.1f}: c_eff={c_eff:5.2f} kPa  FoS={f:.3f}")

# %% [markdown]
# ## 3. FoS against Slope Angle and Saturation

# %%
import matplotlib.pyplot as plt

angles = np.linspace(5, 45, 81)
fig, ax = plt.subplots(figsize=(7, 4))
for sat in (0.0, 0.5, 1.0):
    pw_s, _ = pore_pressure(sat * params.soil_depth, params.soil_depth)
    ax.plot(
        angles,
        [compute_fos(replace(params, slope_angle=b), pw_s) for b in angles],
        label=f"saturation {sat:.0%}",
    )
ax.axhline(1.0, color="r", linestyle="--", linewidth=0.8)
ax.set_xlabel("Slope angle β (°)")
ax.set_ylabel("Factor of Safety")
ax.grid(True, alpha=0.3)
ax.legend()
plt.tight_layout()
plt.show()

# %% [markdown]
# ## 4. Hazard Presets

# %%
for level in (1, 2, 3):
    p = preset(level)
    print(f"{p.label:>9}: β={p.params.slope_angle:.0f}°  c'={p.params.cohesion:.0f} kPa  "
          f"φ'={p.params.friction_angle:.0f}°")

# %% [markdown]
# ## Key Takeaways
#
# - Saturation raises pore pressure and lowers the effective normal
#   stress on the slip plane.
# - PoF grows quickly once FoS approaches 1; a larger COV widens the
#   transition.
# - The infinite slope model is only meaningful for shallow, planar
#   failures parallel to the surface.
