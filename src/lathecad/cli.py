"""Run a latheCAD job file and export the resulting surface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from lathecad.config import EXPORT_FORMATS, LatheJob, load_job
from lathecad.errors import LatheError
from lathecad.io import GeometryExporter
from lathecad.io.dxf import write_profile_dxf
from lathecad.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lathecad',
        description='Revolve a 2D control curve into a 3D surface and export it.',
    )
    parser.add_argument('job', type=Path, help='Path to the YAML job file.')
    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help='Destination directory for exported files (default: the job file directory).',
    )
    parser.add_argument(
        '--format',
        choices=list(EXPORT_FORMATS) + ['all'],
        action='append',
        help='Export format(s) to generate; overrides the job file. Repeat for multiple outputs.',
    )
    parser.add_argument(
        '--binary-stl',
        action='store_true',
        help='Write binary rather than ASCII STL.',
    )
    parser.add_argument(
        '--overwrite',
        action='store_true',
        help='Allow replacing existing files in the output directory.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    return parser


def _requested_formats(job: LatheJob, formats: Sequence[str] | None) -> List[str]:
    chosen = list(formats) if formats else list(job.formats)
    if 'all' in chosen:
        return list(EXPORT_FORMATS)
    ordered = []
    for fmt in chosen:
        if fmt not in ordered:
            ordered.append(fmt)
    return ordered


def run(job: LatheJob, out_dir: Path, formats: Sequence[str], *,
        binary_stl: bool = False, overwrite: bool = False) -> List[Path]:
    """Generate the job's surface and write one file per format."""

    targets = [out_dir / f'{job.name}.{fmt}' for fmt in formats]
    if not overwrite:
        existing = [str(t) for t in targets if t.exists()]
        if existing:
            raise FileExistsError('refusing to overwrite: ' + ', '.join(existing))

    curve, rev = job.build()
    profile = list(rev.profile)
    rev.generate_surface()
    exporter = GeometryExporter.from_mesh(rev.mesh)
    logger.info('%s: %d vertices, %d faces', job.name, len(rev.vertices), len(rev.faces))

    out_dir.mkdir(parents=True, exist_ok=True)
    for fmt, target in zip(formats, targets):
        if fmt == 'dxf':
            write_profile_dxf(profile, target, control_points=curve.control_points)
        else:
            exporter.write(fmt, target, binary=binary_stl, parameters=job.parameters())
        logger.info('wrote %s', target)
    return targets


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        job = load_job(args.job)
        out_dir = args.output if args.output is not None else args.job.parent
        formats = _requested_formats(job, args.format)
        run(job, out_dir, formats, binary_stl=args.binary_stl, overwrite=args.overwrite)
    except (LatheError, FileNotFoundError, FileExistsError) as exc:
        print(f'lathecad: {exc}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
