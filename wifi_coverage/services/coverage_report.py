"""Color rasters and coverage reports built from sampled grids."""

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from wifi_coverage.services.coverage import (
    MetricMode, SignalGrid, calculate_coverage_percentage,
    calculate_signal_statistics
)
from wifi_coverage.services.quantizer import (
    ColorBucket, SIGNAL_BUCKETS, SIGNAL_FLOOR_BUCKET, THROUGHPUT_BUCKETS,
    THROUGHPUT_FLOOR_BUCKET, parse_rgba, signal_bucket, throughput_bucket
)


class ColorEncoding(str, Enum):
    """Output color encoding."""
    OVERLAY = "rgba"  # Alpha-blended, for 2D compositing
    VERTEX = "rgb"  # Opaque, for 3D vertex colors


def _bucket_fn(mode: MetricMode) -> Callable[[float], ColorBucket]:
    if MetricMode(mode) == MetricMode.THROUGHPUT:
        return throughput_bucket
    return signal_bucket


def _bucket_table(mode: MetricMode) -> List[Tuple[float, ColorBucket]]:
    if MetricMode(mode) == MetricMode.THROUGHPUT:
        return THROUGHPUT_BUCKETS + [(-np.inf, THROUGHPUT_FLOOR_BUCKET)]
    return SIGNAL_BUCKETS + [(-np.inf, SIGNAL_FLOOR_BUCKET)]


def colorize_grid(
    signal_grid: SignalGrid,
    encoding: ColorEncoding = ColorEncoding.OVERLAY
) -> np.ndarray:
    """
    Map every grid cell to its bucket color.

    Args:
        signal_grid: Sampled grid (signal or throughput)
        encoding: OVERLAY gives (h, w, 4) RGBA, VERTEX gives (h, w, 3) RGB

    Returns:
        Float array with channels normalized to 0-1
    """
    bucket_of = _bucket_fn(signal_grid.mode)
    encoding = ColorEncoding(encoding)
    channels = 4 if encoding == ColorEncoding.OVERLAY else 3
    colors: Dict[str, Tuple[float, ...]] = {}

    image = np.zeros((signal_grid.height, signal_grid.width, channels), dtype=float)
    for (gy, gx), value in np.ndenumerate(signal_grid.grid):
        bucket = bucket_of(float(value))
        if bucket.label not in colors:
            if encoding == ColorEncoding.OVERLAY:
                r, g, b, a = parse_rgba(bucket.rgba)
                colors[bucket.label] = (r / 255, g / 255, b / 255, a)
            else:
                colors[bucket.label] = bucket.rgb
        image[gy, gx] = colors[bucket.label]

    return image


def generate_coverage_report(
    signal_grid: SignalGrid,
    threshold_dbm: Optional[float] = None
) -> dict:
    """
    Generate a coverage report with statistics.

    The breakdown uses the same buckets as the renderers, so the report
    percentages match what is drawn.

    Args:
        signal_grid: Signal or throughput grid
        threshold_dbm: Minimum acceptable signal strength (signal grids only)

    Returns:
        Dictionary with coverage statistics
    """
    grid = signal_grid.grid
    total_cells = grid.size
    bucket_of = _bucket_fn(signal_grid.mode)

    labels = [bucket_of(float(value)).label for value in grid.ravel()]

    breakdown = {}
    for lower_bound, bucket in _bucket_table(signal_grid.mode):
        cells = labels.count(bucket.label)
        breakdown[bucket.label] = {
            "cells": cells,
            "percentage": float(cells / total_cells * 100) if total_cells else 0.0,
            "threshold": f"> {lower_bound}" if np.isfinite(lower_bound) else "floor"
        }

    report = {
        "mode": signal_grid.mode.value,
        "total_area": total_cells,
        "coverage_breakdown": breakdown,
    }

    if signal_grid.mode == MetricMode.SIGNAL:
        dead_cells = breakdown[SIGNAL_FLOOR_BUCKET.label]["cells"]
        report["total_coverage_percent"] = (
            float((total_cells - dead_cells) / total_cells * 100) if total_cells else 0.0
        )
        report["acceptable_coverage_percent"] = calculate_coverage_percentage(
            signal_grid, threshold_dbm
        )
        report["signal_statistics"] = calculate_signal_statistics(signal_grid)
    else:
        served = grid[grid > 0]
        report["served_percent"] = float(served.size / total_cells * 100) if total_cells else 0.0
        report["throughput_statistics"] = {
            "mean": float(np.mean(grid)) if total_cells else 0.0,
            "max": float(np.max(grid)) if total_cells else 0.0,
            "min": float(np.min(grid)) if total_cells else 0.0,
        }

    return report
