"""Bézier vs. B-Spline profiles demo.

This example demonstrates:
1. Editing a set of control points with latheCAD's Curve2D
2. Sampling the same points as a Bézier curve and as a cubic B-Spline
3. Exporting both profiles, with their control polygon, to DXF
4. Revolving each profile and exporting the meshes to OBJ and STL

Usage:
    python curve_families_demo.py                          # writes into ./build
    python curve_families_demo.py --output build/families  # choose directory
    python curve_families_demo.py --angle 270 --axis z     # open sweep about Z
"""

import argparse
import logging
from pathlib import Path

from lathecad.curve import Curve2D
from lathecad.io import GeometryExporter
from lathecad.io.dxf import write_profile_dxf
from lathecad.logging_config import setup_logging
from lathecad.revolve import Revolution3D


def make_curve():
    """Control points for a goblet-like profile, edited point by point."""
    curve = Curve2D()
    for x, y in [(0.0, 0.0), (1.4, 0.1), (0.2, 0.6), (0.15, 2.0), (1.6, 2.4), (1.1, 3.5)]:
        curve.add_control_point(x, y)
    # pull the stem in a little
    curve.update_control_point(3, 0.1, 2.0)
    curve.set_resolution(80)
    return curve


def main():
    parser = argparse.ArgumentParser(description='Compare curve families on one profile')
    parser.add_argument('--output', type=Path, default=Path('build'))
    parser.add_argument('--axis', default='y', choices=['x', 'y', 'z'])
    parser.add_argument('--angle', type=float, default=360.0)
    parser.add_argument('--subdivisions', type=int, default=48)
    args = parser.parse_args()

    setup_logging(logging.INFO)
    args.output.mkdir(parents=True, exist_ok=True)

    curve = make_curve()
    rev = Revolution3D()
    rev.set_axis(args.axis)
    rev.set_max_angle(args.angle)
    rev.set_subdivisions(args.subdivisions)

    for family in ('bezier', 'bspline'):
        curve.set_curve_type(family)
        profile = curve.generate_curve()
        write_profile_dxf(profile, args.output / f'{family}_profile.dxf',
                          control_points=curve.control_points)

        rev.set_profile(profile)
        rev.generate_surface()
        info = rev.get_info()
        print(f'{family}: {info["vertices"]} vertices, {info["faces"]} faces')

        exporter = GeometryExporter.from_mesh(rev.mesh)
        exporter.write('obj', args.output / f'{family}.obj')
        exporter.write('stl', args.output / f'{family}.stl', binary=True)


if __name__ == '__main__':
    main()
