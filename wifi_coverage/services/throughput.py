"""Achievable throughput estimation from received signal strength."""

import math
from typing import Dict, List, Tuple, Union

from wifi_coverage.schemas.access_point import WifiStandard

# Below this RSSI no link is assumed
MIN_USABLE_RSSI_DBM = -90.0

# Theoretical PHY maximums (Mbps, approx. 2x2 MIMO) per standard and channel width
MAX_PHY_RATE_MBPS: Dict[WifiStandard, Dict[int, float]] = {
    WifiStandard.N: {20: 144, 40: 300, 80: 300, 160: 300},
    WifiStandard.AC: {20: 173, 40: 400, 80: 867, 160: 867},
    WifiStandard.AX: {20: 287, 40: 574, 80: 1200, 160: 2400},
    WifiStandard.BE: {20: 287, 40: 574, 80: 1200, 160: 2400},
}

# (minimum RSSI dBm, MAC efficiency), strongest band first.
# RSSI roughly maps to the achievable MCS index.
EFFICIENCY_BANDS: List[Tuple[float, float]] = [
    (-45.0, 0.92),
    (-55.0, 0.80),
    (-65.0, 0.60),
    (-70.0, 0.40),
    (-75.0, 0.20),
    (-80.0, 0.10),
]


def max_phy_rate(standard: Union[WifiStandard, str], channel_width_mhz: int) -> float:
    """
    Look up the PHY rate ceiling.

    Unrecognised standards are treated as 802.11ax/be and unrecognised
    widths as the widest channel the standard supports.
    """
    try:
        rates = MAX_PHY_RATE_MBPS[WifiStandard(standard)]
    except ValueError:
        rates = MAX_PHY_RATE_MBPS[WifiStandard.AX]
    return rates.get(channel_width_mhz, rates[160])


def link_efficiency(rssi_dbm: float) -> float:
    """Fraction of the PHY rate achievable at a given RSSI."""
    for min_rssi, efficiency in EFFICIENCY_BANDS:
        if rssi_dbm >= min_rssi:
            return efficiency
    return 0.0


def estimate_throughput(
    rssi_dbm: float,
    standard: Union[WifiStandard, str],
    channel_width_mhz: int
) -> int:
    """
    Estimate achievable throughput for a link.

    Args:
        rssi_dbm: Received signal strength
        standard: 802.11 generation
        channel_width_mhz: Channel width (20, 40, 80 or 160)

    Returns:
        Whole-number throughput in Mbps, 0 when there is no usable link
    """
    if rssi_dbm < MIN_USABLE_RSSI_DBM:
        return 0

    return math.floor(max_phy_rate(standard, channel_width_mhz) * link_efficiency(rssi_dbm))
