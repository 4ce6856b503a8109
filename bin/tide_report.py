"""
Print a tide report for a beach: high/low water table, safety status, the
next dangerous high water, and Friday visit suggestions.
"""
from __future__ import annotations

import argparse
import logging.config
import os
import sys
import time
from pathlib import Path

import numpy as np

from beach_tides.tide_engine import (
    DEFAULT_LOCATION,
    LocationDescriptor,
    best_friday_visit_times,
    compute_tide_data,
    extremes_to_frame,
    is_dangerous,
    next_dangerous_period,
)
from beach_tides.tide_engine.local_time import to_local_datetime

DAY_CHOICES = (1, 2, 3, 7, 14)


def _setup_logger(logger):
    """Initialize logger if not provided."""
    if logger is not None:
        return logger

    log_config_file = (Path(__file__).parent.parent / 'conf/logging.conf').resolve()
    if not os.path.isfile(log_config_file):
        sys.exit(-1)

    logging.config.fileConfig(log_config_file)
    logger = logging.getLogger('root')
    logger.info('Using log config %s', log_config_file)
    return logger


def build_parser():
    parser = argparse.ArgumentParser(
        prog='python tide_report.py',
        description='Predict tides for a beach and print safety guidance',
    )
    parser.add_argument('-d', '--days', type=int, default=7, choices=DAY_CHOICES,
                        help='Number of days to predict')
    parser.add_argument('-n', '--name', default=DEFAULT_LOCATION.name, help='Location name')
    parser.add_argument('--lat', type=float, default=DEFAULT_LOCATION.latitude, help='Latitude')
    parser.add_argument('--lon', type=float, default=DEFAULT_LOCATION.longitude, help='Longitude')
    parser.add_argument('-t', '--timezone', default=DEFAULT_LOCATION.timezone,
                        help='IANA timezone for dates and hours, e.g. Africa/Mogadishu')
    parser.add_argument('-s', '--seed', type=int, required=False,
                        help='Seed for the synthesis noise (reproducible output)')
    parser.add_argument('--start', type=int, required=False,
                        help='Window start in ms since the Unix epoch (default now)')
    return parser


def tide_report(args, logger):
    """Run the prediction pipeline and print the report to stdout."""
    logger = _setup_logger(logger)
    logger.info('--- Starting tide report for %s ---', args.name)

    if args.name == DEFAULT_LOCATION.name:
        location = LocationDescriptor(
            args.name, args.lat, args.lon,
            DEFAULT_LOCATION.country, DEFAULT_LOCATION.region, args.timezone,
        )
    else:
        location = LocationDescriptor(args.name, args.lat, args.lon, timezone=args.timezone)

    now_ms = args.start if args.start is not None else int(time.time() * 1000)
    rng = np.random.default_rng(args.seed) if args.seed is not None else None

    try:
        data = compute_tide_data(location, args.days, start_ms=now_ms, rng=rng, logger=logger)
    except Exception:
        logger.exception('Tide computation failed for %s', location.name)
        raise

    tz = location.timezone
    print(f"{location.name} tide report ({args.days} days, {tz or 'UTC'})")

    if not data.extremes:
        print('No high/low waters in this window.')
    else:
        table = extremes_to_frame(data.extremes, tz)
        for date, day in table.groupby('date'):
            print(f"\n{date:%A %d %B %Y}")
            for row in day.itertuples():
                print(f"  {row.local_time:%H:%M}  {row.kind:<4}  {row.height:5.2f} m")

    height = data.current_height
    if height is not None:
        dangerous = is_dangerous(height, data.extremes)
        status = 'CAUTION: dangerous tide conditions' if dangerous else 'Conditions appear safe'
        print(f"\n{status} (current height {height:.2f} m)")

    period = next_dangerous_period(data.extremes, now_ms, logger=logger)
    if period is not None:
        start = to_local_datetime(period.start, tz)
        end = to_local_datetime(period.end, tz)
        print(f"Avoid the water {start:%a %H:%M} - {end:%a %H:%M} "
              f"(high water {period.height:.2f} m)")

    recommendations = best_friday_visit_times(data.extremes, tz, logger=logger)
    if not recommendations:
        print('\nNo Friday recommendations in this window.')
    else:
        print('\nBest times to visit on Friday:')
        for rec in recommendations:
            print(f"  {rec.time:%d %b %H:%M}  {rec.reason}")

    logger.info('Finished tide report: %d points, %d extrema.',
                len(data.points), len(data.extremes))
    return data


def main(argv=None, logger=None):
    args = build_parser().parse_args(argv)
    return tide_report(args, logger)


if __name__ == '__main__':
    main()
