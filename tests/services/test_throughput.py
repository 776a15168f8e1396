"""Tests for the throughput estimator."""

import pytest

from wifi_coverage.schemas import WifiStandard
from wifi_coverage.services.throughput import (
    estimate_throughput, link_efficiency, max_phy_rate
)

STANDARDS = list(WifiStandard)
WIDTHS = [20, 40, 80, 160]


@pytest.mark.parametrize("standard", STANDARDS)
@pytest.mark.parametrize("width", WIDTHS)
@pytest.mark.parametrize("rssi", [-90.01, -95, -120, float("-inf")])
def test_no_link_below_minus_ninety(standard, width, rssi):
    assert estimate_throughput(rssi, standard, width) == 0


@pytest.mark.parametrize("standard,width,expected", [
    (WifiStandard.N, 20, 144),
    (WifiStandard.N, 40, 300),
    (WifiStandard.N, 80, 300),
    (WifiStandard.N, 160, 300),
    (WifiStandard.AC, 20, 173),
    (WifiStandard.AC, 40, 400),
    (WifiStandard.AC, 80, 867),
    (WifiStandard.AC, 160, 867),
    (WifiStandard.AX, 20, 287),
    (WifiStandard.AX, 40, 574),
    (WifiStandard.AX, 80, 1200),
    (WifiStandard.AX, 160, 2400),
    (WifiStandard.BE, 20, 287),
    (WifiStandard.BE, 40, 574),
    (WifiStandard.BE, 80, 1200),
    (WifiStandard.BE, 160, 2400),
])
def test_phy_rate_table(standard, width, expected):
    assert max_phy_rate(standard, width) == expected


def test_plain_strings_are_accepted():
    assert max_phy_rate("802.11ac", 80) == 867


def test_unknown_standard_uses_newest_row():
    assert max_phy_rate("802.11g", 40) == 574


def test_unknown_width_uses_widest_channel():
    assert max_phy_rate(WifiStandard.AC, 60) == 867
    assert max_phy_rate(WifiStandard.N, 5) == 300


@pytest.mark.parametrize("rssi,expected", [
    (-30, 0.92),
    (-45, 0.92),
    (-45.01, 0.80),
    (-55, 0.80),
    (-60, 0.60),
    (-65, 0.60),
    (-70, 0.40),
    (-75, 0.20),
    (-80, 0.10),
    (-80.01, 0.0),
    (-90, 0.0),
])
def test_efficiency_bands(rssi, expected):
    assert link_efficiency(rssi) == expected


@pytest.mark.parametrize("rssi,standard,width,expected", [
    (-60, WifiStandard.AX, 40, 344),   # 574 * 0.60 = 344.4
    (-50, WifiStandard.AC, 80, 693),   # 867 * 0.80 = 693.6
    (-40, WifiStandard.BE, 160, 2208),  # 2400 * 0.92
    (-78, WifiStandard.N, 20, 14),     # 144 * 0.10 = 14.4
    (-85, WifiStandard.AX, 160, 0),
])
def test_throughput_is_floored(rssi, standard, width, expected):
    result = estimate_throughput(rssi, standard, width)
    assert result == expected
    assert result == int(result)


def test_throughput_never_increases_as_signal_drops():
    values = [estimate_throughput(rssi, WifiStandard.AX, 80) for rssi in range(-30, -100, -1)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert values[-1] == 0
