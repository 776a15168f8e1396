"""Discrete color buckets for signal and throughput values.

Every renderer maps metrics to colors through this module. Each bucket
carries both encodings (RGBA overlay string, opaque RGB triple) so the 2D
overlay and the 3D mesh always agree on which bucket a value falls into.
"""

from dataclasses import dataclass
from typing import List, Tuple

RGB = Tuple[float, float, float]


@dataclass(frozen=True)
class ColorBucket:
    """One step of a metric color scale."""
    label: str
    rgba: str  # CSS color for alpha-blended 2D compositing
    rgb: RGB  # Normalized opaque color for 3D vertex coloring


# (exclusive lower bound, bucket), strongest first; values at or below
# every bound fall into the floor bucket.
SIGNAL_BUCKETS: List[Tuple[float, ColorBucket]] = [
    (-50.0, ColorBucket("excellent", "rgba(0, 255, 0, 0.6)", (0.0, 1.0, 0.0))),
    (-60.0, ColorBucket("very_good", "rgba(120, 255, 0, 0.6)", (0.47, 1.0, 0.0))),
    (-65.0, ColorBucket("good", "rgba(173, 255, 47, 0.6)", (0.68, 1.0, 0.18))),
    (-70.0, ColorBucket("fair", "rgba(255, 215, 0, 0.6)", (1.0, 0.84, 0.0))),
    (-75.0, ColorBucket("weak", "rgba(255, 165, 0, 0.6)", (1.0, 0.65, 0.0))),
    (-85.0, ColorBucket("poor", "rgba(255, 0, 0, 0.5)", (1.0, 0.0, 0.0))),
]
# Dead zone: transparent in the overlay, dark background on the mesh
SIGNAL_FLOOR_BUCKET = ColorBucket("dead_zone", "rgba(0, 0, 0, 0.0)", (0.1, 0.1, 0.1))

THROUGHPUT_BUCKETS: List[Tuple[float, ColorBucket]] = [
    (1000.0, ColorBucket("gigabit", "rgba(147, 51, 234, 0.6)", (0.58, 0.2, 0.92))),
    (500.0, ColorBucket("very_fast", "rgba(37, 99, 235, 0.6)", (0.15, 0.39, 0.92))),
    (100.0, ColorBucket("fast", "rgba(0, 255, 0, 0.6)", (0.0, 1.0, 0.0))),
    (50.0, ColorBucket("moderate", "rgba(255, 215, 0, 0.6)", (1.0, 0.84, 0.0))),
    (10.0, ColorBucket("slow", "rgba(255, 165, 0, 0.6)", (1.0, 0.65, 0.0))),
]
THROUGHPUT_FLOOR_BUCKET = ColorBucket("very_slow", "rgba(255, 0, 0, 0.5)", (1.0, 0.0, 0.0))


def _bucket(value: float, buckets: List[Tuple[float, ColorBucket]], floor: ColorBucket) -> ColorBucket:
    for lower_bound, bucket in buckets:
        if value > lower_bound:
            return bucket
    return floor


def signal_bucket(dbm: float) -> ColorBucket:
    """Bucket for a signal strength in dBm (NaN falls in the dead zone)."""
    return _bucket(dbm, SIGNAL_BUCKETS, SIGNAL_FLOOR_BUCKET)


def throughput_bucket(mbps: float) -> ColorBucket:
    """Bucket for a throughput in Mbps."""
    return _bucket(mbps, THROUGHPUT_BUCKETS, THROUGHPUT_FLOOR_BUCKET)


def signal_to_color(dbm: float) -> str:
    return signal_bucket(dbm).rgba


def throughput_to_color(mbps: float) -> str:
    return throughput_bucket(mbps).rgba


def signal_to_rgb(dbm: float) -> RGB:
    return signal_bucket(dbm).rgb


def throughput_to_rgb(mbps: float) -> RGB:
    return throughput_bucket(mbps).rgb


def parse_rgba(color: str) -> Tuple[int, int, int, float]:
    """Split an 'rgba(r, g, b, a)' string into its channels."""
    channels = color[color.index("(") + 1:color.rindex(")")].split(",")
    r, g, b = (int(c) for c in channels[:3])
    return r, g, b, float(channels[3])
