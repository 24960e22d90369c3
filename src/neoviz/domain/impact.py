# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Impact consequence estimation.

Converts impactor size, speed, density and entry angle into kinetic
energy, TNT equivalent, crater diameter, seismic magnitude, fireball
radius and ejecta height using simple empirical scaling laws:

    m     = 4/3·π·r³·ρ
    KE    = ½·m·v²
    D_cr  = max(0.01, 0.07·KE^0.29·sin(θ)^0.33)   (km)
    M_w   = min(10, 0.67·log10(E_Mt) + 5.87)
    R_fb  = 1.2·E_Mt^0.4                          (km)
    H_ej  = min(100, 2.5·D_cr)                    (km)

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from .constants import ImpactConstants

# Upper bounds in megatons, checked in order.
_COMPARISONS: tuple[tuple[float, str], ...] = (
    (0.001, "Equivalent to a large conventional bomb"),
    (0.02, "Comparable to the Hiroshima bomb"),
    (1.0, "Comparable to a modern nuclear warhead"),
    (100.0, "Comparable to the Tsar Bomba"),
    (10_000.0, "Comparable to the Chicxulub impactor's baby cousin"),
    (1e6, "Regional extinction-level event"),
    (1e9, "Comparable to the Chicxulub dinosaur-killer"),
)
_CATACLYSM = "Planet-shattering cataclysm"


@dataclass(frozen=True)
class ImpactParameters:
    """Impactor description."""
    diameter_km: float
    velocity_km_s: float
    density_kg_m3: float
    angle_degs: float

    def __post_init__(self):
        for field_name in ("diameter_km", "velocity_km_s", "density_kg_m3"):
            value = getattr(self, field_name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(
                    f"{field_name} must be a non-negative finite number, got {value}"
                )
        if not 0.0 <= self.angle_degs <= 90.0:
            raise ValueError(f"angle_degs must be in [0, 90], got {self.angle_degs}")
        try:
            mass_kg, kinetic_energy_j = _mass_and_energy(self)
        except OverflowError:
            mass_kg = kinetic_energy_j = math.inf
        if not (math.isfinite(mass_kg) and math.isfinite(kinetic_energy_j)):
            raise ValueError(
                f"impactor mass or energy overflows (diameter_km={self.diameter_km}, "
                f"velocity_km_s={self.velocity_km_s}, density_kg_m3={self.density_kg_m3})"
            )


@dataclass(frozen=True)
class ImpactResult:
    """Estimated consequences of an impact."""
    energy_megatons: float
    crater_diameter_km: float
    earthquake_magnitude: float
    fireball_radius_km: float
    ejecta_height_km: float
    mass_kg: float
    kinetic_energy_j: float
    tnt_equivalent: str
    comparison: str


def impact_comparison(energy_megatons: float) -> str:
    """Narrative comparison for an energy in megatons of TNT."""
    for upper_bound, label in _COMPARISONS:
        if energy_megatons < upper_bound:
            return label
    return _CATACLYSM


def format_tnt_equivalent(energy_megatons: float) -> str:
    """'12.3 Megatons TNT', or gigatons above 1000 Mt."""
    if energy_megatons > ImpactConstants.GIGATON_THRESHOLD_MT:
        return f"{energy_megatons / 1000:.1f} Gigatons TNT"
    return f"{energy_megatons:.1f} Megatons TNT"


def _mass_and_energy(params: ImpactParameters) -> tuple[float, float]:
    """(mass kg, kinetic energy J) of a spherical impactor."""
    radius_m = params.diameter_km * 1000 / 2
    volume_m3 = (4 / 3) * math.pi * radius_m ** 3
    mass_kg = volume_m3 * params.density_kg_m3
    velocity_m_s = params.velocity_km_s * 1000
    return mass_kg, 0.5 * mass_kg * velocity_m_s ** 2


def estimate_impact(params: ImpactParameters) -> ImpactResult:
    """
    Estimate the physical consequences of an impact.

    Never raises for validated parameters: a grazing entry (angle 0)
    drives the crater to its 0.01 km floor, and a zero-energy impact
    reports a magnitude of -inf.

    Args:
        params: Impactor diameter (km), velocity (km/s), density
            (kg/m³) and entry angle from horizontal (degrees).

    Returns:
        ImpactResult with energy, crater, seismic, fireball and ejecta
        estimates plus display strings.
    """
    c = ImpactConstants

    mass_kg, kinetic_energy_j = _mass_and_energy(params)
    energy_mt = kinetic_energy_j / c.JOULES_PER_MEGATON

    sin_angle = max(0.0, math.sin(math.radians(params.angle_degs)))
    crater_km = max(
        c.MIN_CRATER_DIAMETER_KM,
        c.CRATER_COEFFICIENT
        * kinetic_energy_j ** c.CRATER_ENERGY_EXPONENT
        * sin_angle ** c.CRATER_ANGLE_EXPONENT,
    )

    if energy_mt > 0:
        magnitude = min(
            c.MAX_QUAKE_MAGNITUDE,
            c.QUAKE_SLOPE * math.log10(energy_mt) + c.QUAKE_INTERCEPT,
        )
    else:
        magnitude = -math.inf

    fireball_km = energy_mt ** c.FIREBALL_EXPONENT * c.FIREBALL_COEFFICIENT
    ejecta_km = min(c.MAX_EJECTA_HEIGHT_KM, crater_km * c.EJECTA_CRATER_RATIO)

    return ImpactResult(
        energy_megatons=energy_mt,
        crater_diameter_km=crater_km,
        earthquake_magnitude=magnitude,
        fireball_radius_km=fireball_km,
        ejecta_height_km=ejecta_km,
        mass_kg=mass_kg,
        kinetic_energy_j=kinetic_energy_j,
        tnt_equivalent=format_tnt_equivalent(energy_mt),
        comparison=impact_comparison(energy_mt),
    )
