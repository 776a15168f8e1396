"""Tests for input validation and defaults in the pydantic schemas."""

import pytest
from pydantic import ValidationError

from wifi_coverage.schemas import (
    ACCESS_POINT_PRESETS, MATERIAL_ATTENUATION, AntennaKind, MaterialType, Point,
    SimulationConfig, TransmitterParams, Wall, WifiStandard, get_preset
)

ORIGIN = Point(x=0, y=0)
EAST = Point(x=100, y=0)


class TestWall:
    @pytest.mark.parametrize("material,expected", [
        (MaterialType.CONCRETE, 12),
        (MaterialType.BRICK, 8),
        (MaterialType.DRYWALL, 3),
        (MaterialType.GLASS, 2),
        (MaterialType.METAL, 20),
        ("Brick", 8),
    ])
    def test_attenuation_defaults_to_material(self, material, expected):
        assert Wall(start=ORIGIN, end=EAST, material=material).attenuation_db == expected

    def test_explicit_attenuation_wins(self):
        wall = Wall(start=ORIGIN, end=EAST, material=MaterialType.GLASS, attenuation_db=7.5)
        assert wall.attenuation_db == 7.5

    def test_defaults(self):
        wall = Wall(start=ORIGIN, end=EAST)
        assert wall.material == MaterialType.CONCRETE
        assert wall.attenuation_db == MATERIAL_ATTENUATION[MaterialType.CONCRETE]
        assert wall.thickness_meters == 0.15

    def test_degenerate_wall_is_legal(self):
        assert Wall(start=ORIGIN, end=ORIGIN).start == Wall(start=ORIGIN, end=ORIGIN).end

    @pytest.mark.parametrize("thickness", [0, -0.1])
    def test_thickness_must_be_positive(self, thickness):
        with pytest.raises(ValidationError):
            Wall(start=ORIGIN, end=EAST, thickness_meters=thickness)

    def test_attenuation_must_not_be_negative(self):
        with pytest.raises(ValidationError):
            Wall(start=ORIGIN, end=EAST, attenuation_db=-1)

    def test_walls_are_immutable(self):
        wall = Wall(start=ORIGIN, end=EAST)
        with pytest.raises(ValidationError):
            wall.attenuation_db = 0

    def test_unknown_material_rejected(self):
        with pytest.raises(ValueError):
            Wall(start=ORIGIN, end=EAST, material="Cardboard")


class TestTransmitterParams:
    def test_defaults(self):
        tx = TransmitterParams(position=ORIGIN)
        assert tx.altitude_meters == 2.5
        assert tx.antenna_kind == AntennaKind.OMNI
        assert tx.beamwidth_degrees == 60
        assert tx.rotation_degrees == 0
        assert tx.wifi_standard == WifiStandard.AX
        assert tx.channel_width_mhz == 40

    def test_eirp(self):
        tx = TransmitterParams(position=ORIGIN, tx_power_dbm=20, antenna_gain_dbi=5, cable_loss_db=1.5)
        assert tx.eirp_dbm == 23.5

    def test_non_finite_position_allowed(self):
        assert TransmitterParams(position=Point(x=float("inf"), y=0)).position.x == float("inf")

    @pytest.mark.parametrize("field,value", [
        ("beamwidth_degrees", 0),
        ("beamwidth_degrees", 361),
        ("channel_width_mhz", 30),
        ("frequency_ghz", 0),
        ("cable_loss_db", -1),
        ("wifi_standard", "802.11b"),
    ])
    def test_rejects_invalid(self, field, value):
        with pytest.raises(ValidationError):
            TransmitterParams(position=ORIGIN, **{field: value})


class TestPresets:
    def test_catalogue(self):
        assert [p.id for p in ACCESS_POINT_PRESETS] == [
            "AWK-1137C", "AWK-3131A", "AWK-4131A", "GENERIC-AP"
        ]

    def test_build(self):
        tx = get_preset("AWK-4131A").build(EAST, altitude_meters=4.0)
        assert tx.tx_power_dbm == 26
        assert tx.frequency_ghz == 5
        assert tx.model == "AWK-4131A"
        assert tx.name == "Moxa AWK-4131A Outdoor"
        assert tx.altitude_meters == 4.0
        assert tx.position == EAST

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("NOPE")


class TestSimulationConfig:
    def test_defaults_from_settings(self):
        config = SimulationConfig()
        assert config.pixels_per_meter == 20.0
        assert config.resolution == 8
        assert config.receiver_height_meters == 1.0

    @pytest.mark.parametrize("scale", [0, -3])
    def test_scale_must_be_positive(self, scale):
        with pytest.raises(ValidationError):
            SimulationConfig(pixels_per_meter=scale)
