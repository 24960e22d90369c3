# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for orbit synthesis and impact estimation.

Usage:
    # Synthetic orbits for every object in a NeoWs feed / record list
    neoviz orbit -i feed.json
    neoviz orbit -i feed.json --id 3542519 --hours 36

    # Export orbit paths and a JSON report
    neoviz orbit -i feed.json --export-csv orbits.csv -o report.json

    # Impact estimates from a preset, overriding individual parameters
    neoviz impact --preset "Chicxulub Impactor"
    neoviz impact --diameter 0.3 --velocity 18 --angle 30 --location Siberia

    # List the reference impactors
    neoviz presets
"""
import argparse
import dataclasses
import logging
import sys

import numpy as np

from neoviz.domain.orbit_estimation import estimate_orbit
from neoviz.domain.orbit_geometry import compute_orbit_points
from neoviz.domain.propagation import get_position_at_time, orbit_progress
from neoviz.domain.impact import ImpactParameters, estimate_impact
from neoviz.domain.impact_scenarios import (
    DEFAULT_IMPACT_PARAMETERS,
    IMPACT_LOCATIONS,
    IMPACT_PRESETS,
    get_preset,
    lat_lng_to_scene,
    resolve_location,
)
from neoviz.domain.timeline import clamp_offset, format_time_offset
from neoviz.domain.formatting import format_distance, format_velocity
from neoviz.domain.constants import VisualizationConstants
from neoviz.adapters.json_io import JsonObservationReader, JsonReportWriter
from neoviz.adapters.csv_exporter import CsvOrbitExporter

logger = logging.getLogger(__name__)


def run_orbits(
    input_path: str,
    object_id: str | None = None,
    hours: float = 0.0,
    segments: int = VisualizationConstants.DEFAULT_SEGMENTS,
    export_csv: str | None = None,
    output_path: str | None = None,
) -> list[dict]:
    """
    Estimate orbits and positions for the observations in a JSON file.

    Returns:
        One report entry per selected object.
    """
    observations = JsonObservationReader().read_observations(input_path)
    if object_id is not None:
        observations = [
            o for o in observations
            if object_id in (o.identifier, o.name)
        ]
        if not observations:
            raise ValueError(f"No observation with id or name {object_id!r} in {input_path}")

    offset = clamp_offset(hours)
    if offset != hours:
        logger.warning("Time offset %.1f h clamped to %.1f h", hours, offset)

    entries = []
    orbits = []
    for obs in observations:
        elements = estimate_orbit(obs)
        position = get_position_at_time(elements, offset)
        entries.append({
            "id": obs.identifier,
            "name": obs.display_name,
            "hazardous": obs.is_potentially_hazardous,
            "elements": dataclasses.asdict(elements),
            "hours_offset": offset,
            "position": list(position),
            "progress": orbit_progress(elements, offset),
        })
        miss = format_distance(obs.effective_miss_distance_km)
        speed = format_velocity(obs.effective_velocity_km_s)
        print(
            f"{obs.display_name}: a={elements.semi_major_axis:.3f} "
            f"e={elements.eccentricity:.3f} i={elements.inclination_deg:.1f}° "
            f"P={elements.period_hours:.1f}h | {miss}, {speed} | "
            f"{format_time_offset(offset)} → "
            f"({position[0]:.3f}, {position[1]:.3f}, {position[2]:.3f})"
        )
        if export_csv:
            orbits.append((obs.display_name, compute_orbit_points(elements, segments)))

    if export_csv:
        n = CsvOrbitExporter().export_many(orbits, export_csv)
        print(f"Exported {n} orbit points to {export_csv}")
    if output_path:
        JsonReportWriter().write_report({"orbits": entries}, output_path)
        print(f"Wrote report to {output_path}")
    return entries


def run_impact(
    preset: str | None = None,
    diameter_km: float | None = None,
    velocity_km_s: float | None = None,
    density_kg_m3: float | None = None,
    angle_degs: float | None = None,
    location: str | None = None,
    seed: int | None = None,
    output_path: str | None = None,
) -> dict:
    """Estimate an impact from a preset and/or explicit parameters."""
    params: ImpactParameters = (
        get_preset(preset).parameters if preset else DEFAULT_IMPACT_PARAMETERS
    )
    overrides = {
        "diameter_km": diameter_km,
        "velocity_km_s": velocity_km_s,
        "density_kg_m3": density_kg_m3,
        "angle_degs": angle_degs,
    }
    params = dataclasses.replace(
        params, **{k: v for k, v in overrides.items() if v is not None},
    )
    result = estimate_impact(params)

    report = {
        "parameters": dataclasses.asdict(params),
        "result": dataclasses.asdict(result),
    }

    print(f"Impactor: {params.diameter_km:g} km at {format_velocity(params.velocity_km_s)}, "
          f"{params.density_kg_m3:g} kg/m³, {params.angle_degs:g}°")
    print(f"  Energy:      {result.tnt_equivalent} ({result.kinetic_energy_j:.3e} J)")
    print(f"  Crater:      {result.crater_diameter_km:.2f} km")
    print(f"  Earthquake:  M{result.earthquake_magnitude:.1f}")
    print(f"  Fireball:    {result.fireball_radius_km:.2f} km")
    print(f"  Ejecta:      {result.ejecta_height_km:.1f} km")
    print(f"  {result.comparison}")

    if location:
        site = _find_location(location)
        rng = np.random.default_rng(seed)
        lat, lng = resolve_location(site, rng)
        point = lat_lng_to_scene(lat, lng)
        report["location"] = {
            "name": site.name, "lat_deg": lat, "lng_deg": lng, "scene": list(point),
        }
        print(f"  Site:        {site.name} ({lat:.2f}, {lng:.2f})")

    if output_path:
        JsonReportWriter().write_report(report, output_path)
        print(f"Wrote report to {output_path}")
    return report


def _find_location(name: str):
    wanted = name.strip().lower()
    for site in IMPACT_LOCATIONS:
        if site.name.lower() == wanted:
            return site
    known = ", ".join(s.name for s in IMPACT_LOCATIONS)
    raise KeyError(f"unknown location {name!r} (known: {known})")


def _print_presets() -> None:
    for preset in IMPACT_PRESETS:
        p = preset.parameters
        print(
            f"{preset.name:<20} {p.diameter_km:>6g} km {p.velocity_km_s:>5g} km/s "
            f"{p.density_kg_m3:>5g} kg/m³ {p.angle_degs:>3g}°  {preset.description}"
        )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Synthetic NEO orbits, Kepler propagation and impact estimates"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    orbit = sub.add_parser('orbit', help="Estimate orbits from close-approach data")
    orbit.add_argument(
        '--input', '-i', required=True,
        help="JSON file: record list, single record, or NeoWs feed"
    )
    orbit.add_argument('--id', dest='object_id', help="Only this neo_reference_id or name")
    orbit.add_argument(
        '--hours', type=float, default=0.0,
        help="Time offset in hours (clamped to ±168)"
    )
    orbit.add_argument(
        '--segments', type=int, default=VisualizationConstants.DEFAULT_SEGMENTS,
        help="Orbit path segments for CSV export (default: 256)"
    )
    orbit.add_argument('--export-csv', metavar='PATH', help="Write orbit paths as CSV")
    orbit.add_argument('--output', '-o', help="Write a JSON report")

    impact = sub.add_parser('impact', help="Estimate impact consequences")
    impact.add_argument('--preset', help="Start from a named preset")
    impact.add_argument('--diameter', type=float, help="Impactor diameter (km)")
    impact.add_argument('--velocity', type=float, help="Impact velocity (km/s)")
    impact.add_argument('--density', type=float, help="Impactor density (kg/m³)")
    impact.add_argument('--angle', type=float, help="Entry angle from horizontal (degrees)")
    impact.add_argument('--location', help="Named impact site, or 'Random'")
    impact.add_argument('--seed', type=int, help="Seed for a random impact site")
    impact.add_argument('--output', '-o', help="Write a JSON report")

    sub.add_parser('presets', help="List reference impactors")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'orbit':
            run_orbits(
                input_path=args.input,
                object_id=args.object_id,
                hours=args.hours,
                segments=args.segments,
                export_csv=args.export_csv,
                output_path=args.output,
            )
        elif args.command == 'impact':
            run_impact(
                preset=args.preset,
                diameter_km=args.diameter,
                velocity_km_s=args.velocity,
                density_kg_m3=args.density,
                angle_degs=args.angle,
                location=args.location,
                seed=args.seed,
                output_path=args.output,
            )
        else:
            _print_presets()
    except FileNotFoundError as e:
        print(f"Error: Input file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except KeyError as e:
        print(f"Error: {e.args[0] if e.args else e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
