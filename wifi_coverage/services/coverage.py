"""Coverage evaluation across transmitters and floor plan grids.

Every consumer (2D overlay, 3D mesh, cursor readout) reduces the
per-transmitter estimates the same way through these helpers, so identical
inputs always produce identical numbers.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

import numpy as np

from wifi_coverage.core.config import settings
from wifi_coverage.schemas.access_point import TransmitterParams
from wifi_coverage.schemas.floor_plan import Point, SimulationConfig, Wall
from wifi_coverage.services.propagation import coverage_radius_meters, estimate_signal
from wifi_coverage.services.throughput import estimate_throughput

logger = logging.getLogger(__name__)

# Signal reported where no transmitter exists
NO_SIGNAL_DBM = -120.0


class MetricMode(str, Enum):
    """Which metric a grid holds."""
    SIGNAL = "signal"
    THROUGHPUT = "throughput"


@dataclass
class SignalGrid:
    """Grid of metric values sampled across the floor plan."""
    width: int  # Grid width in cells
    height: int  # Grid height in cells
    grid: np.ndarray  # 2D array, dBm or Mbps depending on mode
    resolution: int  # Pixels per grid cell
    mode: MetricMode = MetricMode.SIGNAL


def best_signal_at(
    point: Point,
    transmitters: Iterable[TransmitterParams],
    walls: Sequence[Wall],
    pixels_per_meter: float,
    rx_height_meters: Optional[float] = None
) -> float:
    """Strongest signal (dBm) any transmitter delivers at a point."""
    if rx_height_meters is None:
        rx_height_meters = settings.DEFAULT_RECEIVER_HEIGHT_M

    best = NO_SIGNAL_DBM
    for tx in transmitters:
        signal = estimate_signal(tx, point, rx_height_meters, walls, pixels_per_meter)
        if signal > best:
            best = signal
    return best


def best_throughput_at(
    point: Point,
    transmitters: Iterable[TransmitterParams],
    walls: Sequence[Wall],
    pixels_per_meter: float,
    rx_height_meters: Optional[float] = None
) -> int:
    """
    Highest throughput (Mbps) any transmitter delivers at a point.

    Each transmitter is rated with its own standard and channel width, so the
    fastest link is not necessarily the one with the strongest signal.
    """
    if rx_height_meters is None:
        rx_height_meters = settings.DEFAULT_RECEIVER_HEIGHT_M

    best = 0
    for tx in transmitters:
        signal = estimate_signal(tx, point, rx_height_meters, walls, pixels_per_meter)
        throughput = estimate_throughput(signal, tx.wifi_standard, tx.channel_width_mhz)
        if throughput > best:
            best = throughput
    return best


class CoverageEngine:
    """
    Evaluates coverage for one floor plan snapshot.

    Holds the walls, transmitters and sampling configuration so renderers
    only supply the points they want evaluated. Walls and transmitters are
    copied into tuples; the caller's lists are never mutated.
    """

    def __init__(
        self,
        walls: Iterable[Wall],
        transmitters: Iterable[TransmitterParams],
        config: Optional[SimulationConfig] = None,
        workers: Optional[int] = None
    ):
        self.walls = tuple(walls)
        self.transmitters = tuple(transmitters)
        self.config = config or SimulationConfig()
        self.workers = max(1, workers if workers is not None else settings.SAMPLING_WORKERS)

        logger.info(
            f"CoverageEngine initialized: {len(self.transmitters)} transmitters, "
            f"{len(self.walls)} walls, scale={self.config.pixels_per_meter}px/m, "
            f"workers={self.workers}"
        )

    def signal_at(self, point: Point) -> float:
        return best_signal_at(
            point,
            self.transmitters,
            self.walls,
            self.config.pixels_per_meter,
            self.config.receiver_height_meters
        )

    def throughput_at(self, point: Point) -> int:
        return best_throughput_at(
            point,
            self.transmitters,
            self.walls,
            self.config.pixels_per_meter,
            self.config.receiver_height_meters
        )

    def metric_at(self, point: Point, mode: MetricMode = MetricMode.SIGNAL) -> float:
        """Value of the requested metric at a point (cursor readout)."""
        if MetricMode(mode) == MetricMode.THROUGHPUT:
            return self.throughput_at(point)
        return self.signal_at(point)

    def sample_points(
        self,
        points: Sequence[Point],
        mode: MetricMode = MetricMode.SIGNAL
    ) -> np.ndarray:
        """Evaluate arbitrary points, e.g. the vertices of a 3D floor mesh."""
        return np.array([self.metric_at(p, mode) for p in points], dtype=float)

    def sample_grid(
        self,
        width: int,
        height: int,
        mode: MetricMode = MetricMode.SIGNAL,
        resolution: Optional[int] = None
    ) -> SignalGrid:
        """
        Sample the metric at the center of every grid cell.

        Args:
            width: Floor plan width in pixels
            height: Floor plan height in pixels
            mode: Metric to sample
            resolution: Cell size in pixels, defaults to the config resolution

        Returns:
            SignalGrid with one value per cell
        """
        resolution = resolution if resolution is not None else self.config.resolution
        if resolution <= 0:
            raise ValueError(f"Grid resolution must be positive, got {resolution}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Floor plan size must be positive, got {width}x{height}")

        mode = MetricMode(mode)
        grid_width = math.ceil(width / resolution)
        grid_height = math.ceil(height / resolution)

        logger.debug(
            f"Sampling {mode.value} grid {grid_width}x{grid_height} "
            f"(resolution={resolution}px, workers={self.workers})"
        )

        def sample_rows(rows: range) -> List[List[float]]:
            return [
                [
                    self.metric_at(
                        Point(x=(gx + 0.5) * resolution, y=(gy + 0.5) * resolution),
                        mode
                    )
                    for gx in range(grid_width)
                ]
                for gy in rows
            ]

        if self.workers == 1 or grid_height == 1:
            rows = sample_rows(range(grid_height))
        else:
            # Contiguous row bands, reassembled in order
            band = math.ceil(grid_height / self.workers)
            bands = [range(start, min(start + band, grid_height))
                     for start in range(0, grid_height, band)]
            rows = []
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                for band_rows in pool.map(sample_rows, bands):
                    rows.extend(band_rows)

        return SignalGrid(
            width=grid_width,
            height=grid_height,
            grid=np.array(rows, dtype=float).reshape(grid_height, grid_width),
            resolution=resolution,
            mode=mode
        )

    def coverage_radii(self, min_signal_dbm: Optional[float] = None) -> List[float]:
        """Free-space coverage radius in meters for each transmitter."""
        return [coverage_radius_meters(tx, min_signal_dbm) for tx in self.transmitters]


def calculate_coverage_percentage(
    signal_grid: SignalGrid,
    threshold_dbm: Optional[float] = None
) -> float:
    """
    Calculate percentage of area with acceptable signal.

    Args:
        signal_grid: Grid of signal strengths
        threshold_dbm: Minimum acceptable signal strength

    Returns:
        Percentage of covered area (0-100)
    """
    if threshold_dbm is None:
        threshold_dbm = settings.DEFAULT_COVERAGE_THRESHOLD_DBM

    total_cells = signal_grid.grid.size
    if total_cells == 0:
        return 0.0
    covered_cells = np.sum(signal_grid.grid >= threshold_dbm)
    return float(covered_cells / total_cells * 100.0)


def calculate_signal_statistics(signal_grid: SignalGrid) -> dict:
    """Calculate various signal statistics for the grid."""
    grid = signal_grid.grid

    # Cells nobody reaches carry NO_SIGNAL_DBM and are left out
    valid_signals = grid[np.isfinite(grid) & (grid > NO_SIGNAL_DBM)]

    if len(valid_signals) == 0:
        return {
            "mean": NO_SIGNAL_DBM,
            "median": NO_SIGNAL_DBM,
            "std": 0.0,
            "min": NO_SIGNAL_DBM,
            "max": NO_SIGNAL_DBM,
            "percentile_10": NO_SIGNAL_DBM,
            "percentile_90": NO_SIGNAL_DBM
        }

    return {
        "mean": float(np.mean(valid_signals)),
        "median": float(np.median(valid_signals)),
        "std": float(np.std(valid_signals)),
        "min": float(np.min(valid_signals)),
        "max": float(np.max(valid_signals)),
        "percentile_10": float(np.percentile(valid_signals, 10)),
        "percentile_90": float(np.percentile(valid_signals, 90))
    }
