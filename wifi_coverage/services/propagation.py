"""Indoor RF propagation model.

Implements a simple link budget:
- Free Space Path Loss (Friis, meters/MHz form) over the 3D distance
- Multi-wall penetration loss scaled by wall thickness
- Linear sector-antenna pattern roll-off outside the beamwidth

and its inverse, the free-space range for a signal threshold.
"""

import math
from typing import Iterable, Optional

from wifi_coverage.core.config import settings
from wifi_coverage.schemas.access_point import AntennaKind, TransmitterParams
from wifi_coverage.schemas.floor_plan import Point, Wall, REFERENCE_WALL_THICKNESS_M
from wifi_coverage.services.geometry import segments_intersect

# FSPL constant for distance in meters and frequency in MHz:
# 20*log10(4*pi/c) + 20*log10(1e6) = -27.55 dB
FSPL_CONSTANT_DB = 27.55

# Below this 3D separation the far-field formula is not applied
NEAR_FIELD_DISTANCE_M = 0.1

# Pattern loss of a sector antenna directly behind its boresight
MAX_PATTERN_LOSS_DB = 25.0

# Range indicators never shrink below this radius
MIN_COVERAGE_RADIUS_M = 1.0


def eirp_dbm(tx_power_dbm: float, antenna_gain_dbi: float, cable_loss_db: float) -> float:
    """Effective isotropic radiated power in dBm."""
    return tx_power_dbm + antenna_gain_dbi - cable_loss_db


def safe_pixels_per_meter(pixels_per_meter: float) -> float:
    """Return the scale, or the default scale when it is not a usable positive number."""
    if math.isfinite(pixels_per_meter) and pixels_per_meter > 0:
        return pixels_per_meter
    return settings.DEFAULT_PIXELS_PER_METER


def _log10(value: float) -> float:
    # -inf at zero and nan below it, instead of a math domain error
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log10(value)


def free_space_path_loss_db(distance_m: float, frequency_ghz: float) -> float:
    """
    Calculate Free Space Path Loss.

    FSPL(dB) = 20*log10(d) + 20*log10(f) - 27.55

    Args:
        distance_m: Distance in meters (must be > 0)
        frequency_ghz: Frequency in GHz

    Returns:
        Path loss in dB
    """
    frequency_mhz = frequency_ghz * 1000
    return 20 * _log10(distance_m) + 20 * _log10(frequency_mhz) - FSPL_CONSTANT_DB


def antenna_pattern_loss_db(tx: TransmitterParams, dx: float, dy: float) -> float:
    """
    Pattern loss towards a receiver offset (dx, dy) pixels from the transmitter.

    Omni antennas have no pattern loss. Directional antennas are flat inside
    half the beamwidth either side of boresight, then lose gain linearly up
    to MAX_PATTERN_LOSS_DB directly behind.
    """
    if tx.antenna_kind != AntennaKind.DIRECTIONAL:
        return 0.0

    angle_deg = math.degrees(math.atan2(dy, dx))
    if angle_deg < 0:
        angle_deg += 360

    rotation = tx.rotation_degrees % 360

    diff = abs(angle_deg - rotation)
    if diff > 180:
        diff = 360 - diff

    half_beam = tx.beamwidth_degrees / 2
    if diff <= half_beam:
        return 0.0

    return (diff - half_beam) / (180 - half_beam) * MAX_PATTERN_LOSS_DB


def wall_loss_db(wall: Wall) -> float:
    """Penetration loss of one wall, scaled linearly with its thickness."""
    return wall.attenuation_db * (wall.thickness_meters / REFERENCE_WALL_THICKNESS_M)


def obstruction_loss_db(tx_point: Point, rx_point: Point, walls: Iterable[Wall]) -> float:
    """
    Cumulative wall loss along the direct path.

    Walls are tested in the floor plane only; wall height is not compared
    against the endpoint heights.
    """
    total_loss_db = 0.0
    for wall in walls:
        if segments_intersect(tx_point, rx_point, wall.start, wall.end):
            total_loss_db += wall_loss_db(wall)
    return total_loss_db


def estimate_signal(
    tx: TransmitterParams,
    rx_point: Point,
    rx_height_meters: float,
    walls: Iterable[Wall],
    pixels_per_meter: float
) -> float:
    """
    Estimate received signal strength at a point.

    RSSI = EIRP - FSPL(d3D) - sum(wall losses) - antenna pattern loss

    Args:
        tx: Transmitter parameters
        rx_point: Receiver position in pixels
        rx_height_meters: Receiver height above the floor
        walls: Obstructing walls (pixel coordinates)
        pixels_per_meter: Floor plan scale

    Returns:
        Signal strength in dBm. Non-finite inputs yield non-finite output.
    """
    scale = safe_pixels_per_meter(pixels_per_meter)

    dx = rx_point.x - tx.position.x
    dy = rx_point.y - tx.position.y

    dist_2d_m = math.sqrt(dx * dx + dy * dy) / scale
    dz_m = abs(tx.altitude_meters - rx_height_meters)
    dist_3d_m = math.sqrt(dist_2d_m * dist_2d_m + dz_m * dz_m)

    eirp = eirp_dbm(tx.tx_power_dbm, tx.antenna_gain_dbi, tx.cable_loss_db)

    if dist_3d_m < NEAR_FIELD_DISTANCE_M:
        return eirp

    fspl = free_space_path_loss_db(dist_3d_m, tx.frequency_ghz)
    pattern_loss = antenna_pattern_loss_db(tx, dx, dy)
    wall_loss = obstruction_loss_db(tx.position, rx_point, walls)

    return eirp - fspl - wall_loss - pattern_loss


def estimate_range(
    tx_power_dbm: float,
    frequency_ghz: float,
    min_signal_dbm: float = -75.0,
    antenna_gain_dbi: float = 0.0,
    cable_loss_db: float = 0.0
) -> float:
    """
    Free-space distance (meters) at which the signal falls to min_signal_dbm.

    Inverts the FSPL formula with no wall or pattern loss. The result is not
    clamped: callers must reject non-finite or non-positive values. A zero
    frequency gives inf and a negative one nan.
    """
    eirp = eirp_dbm(tx_power_dbm, antenna_gain_dbi, cable_loss_db)
    budget = eirp - min_signal_dbm
    const_term = 20 * _log10(frequency_ghz * 1000) - FSPL_CONSTANT_DB
    try:
        return 10 ** ((budget - const_term) / 20)
    except OverflowError:
        return math.inf


def coverage_radius_meters(tx: TransmitterParams, min_signal_dbm: Optional[float] = None) -> float:
    """
    Radius of the coverage indicator drawn around a transmitter.

    Uses estimate_range and falls back to MIN_COVERAGE_RADIUS_M when the
    estimate is unusable.
    """
    if min_signal_dbm is None:
        min_signal_dbm = settings.DEFAULT_COVERAGE_THRESHOLD_DBM

    range_m = estimate_range(
        tx.tx_power_dbm,
        tx.frequency_ghz,
        min_signal_dbm,
        tx.antenna_gain_dbi,
        tx.cable_loss_db
    )

    if not math.isfinite(range_m) or range_m <= 0:
        return MIN_COVERAGE_RADIUS_M
    return range_m
