"""Shared fixtures for the coverage engine tests.

Floor plan convention used throughout: 20 px per meter, receiver and
transmitter at the same height so the 3D distance equals the planar one.
"""

import pytest

from wifi_coverage.schemas import MaterialType, Point, TransmitterParams, Wall

SCALE = 20.0  # px per meter
RX_HEIGHT = 1.0


@pytest.fixture
def omni_tx() -> TransmitterParams:
    """20 dBm omni transmitter at the origin, 5 GHz, level with the receiver."""
    return TransmitterParams(
        position=Point(x=0, y=0),
        altitude_meters=RX_HEIGHT,
        tx_power_dbm=20,
        antenna_gain_dbi=0,
        cable_loss_db=0,
        frequency_ghz=5,
    )


@pytest.fixture
def concrete_wall() -> Wall:
    """Vertical concrete wall crossing the x axis at x=100 px."""
    return Wall(
        start=Point(x=100, y=-50),
        end=Point(x=100, y=50),
        material=MaterialType.CONCRETE,
        attenuation_db=12,
        thickness_meters=0.15,
    )


@pytest.fixture
def drywall() -> Wall:
    """Vertical drywall partition crossing the x axis at x=150 px."""
    return Wall(
        start=Point(x=150, y=-50),
        end=Point(x=150, y=50),
        material=MaterialType.DRYWALL,
    )
