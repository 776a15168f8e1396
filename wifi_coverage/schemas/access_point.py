"""Access point (transmitter) pydantic schemas."""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from wifi_coverage.schemas.floor_plan import Point


class AntennaKind(str, Enum):
    """Radiation pattern family of the transmitter antenna."""
    OMNI = "Omnidirectional"
    DIRECTIONAL = "Directional (Sector)"


class WifiStandard(str, Enum):
    """IEEE 802.11 PHY generation."""
    N = "802.11n"
    AC = "802.11ac"
    AX = "802.11ax"
    BE = "802.11be"


ChannelWidth = Literal[20, 40, 80, 160]


class TransmitterParams(BaseModel):
    """
    Radio and placement parameters of one access point.

    All defaults live here so that every consumer (2D overlay, 3D mesh,
    cursor readout) evaluates the same transmitter identically.
    """
    position: Point
    name: str = "Access Point"
    model: Optional[str] = None
    altitude_meters: float = Field(2.5, description="Mounting height (Z axis) in meters")
    tx_power_dbm: float = 20.0
    antenna_gain_dbi: float = 0.0
    cable_loss_db: float = Field(0.0, ge=0)
    frequency_ghz: float = Field(2.4, gt=0)
    antenna_kind: AntennaKind = AntennaKind.OMNI
    rotation_degrees: float = Field(0.0, description="Boresight bearing, 0 = East")
    beamwidth_degrees: float = Field(60.0, gt=0, le=360)
    wifi_standard: WifiStandard = WifiStandard.AX
    channel_width_mhz: ChannelWidth = 40

    model_config = ConfigDict(frozen=True)

    @property
    def eirp_dbm(self) -> float:
        """Effective isotropic radiated power."""
        return self.tx_power_dbm + self.antenna_gain_dbi - self.cable_loss_db


class AccessPointPreset(BaseModel):
    """Catalogue entry for a known access point product."""
    id: str
    name: str
    tx_power_dbm: float
    frequency_ghz: float

    def build(self, position: Point, **overrides) -> TransmitterParams:
        """Create transmitter parameters for this product at a position."""
        params = {
            "position": position,
            "name": self.name,
            "model": self.id,
            "tx_power_dbm": self.tx_power_dbm,
            "frequency_ghz": self.frequency_ghz,
        }
        params.update(overrides)
        return TransmitterParams(**params)


ACCESS_POINT_PRESETS: List[AccessPointPreset] = [
    AccessPointPreset(id="AWK-1137C", name="Moxa AWK-1137C", tx_power_dbm=20, frequency_ghz=5),
    AccessPointPreset(id="AWK-3131A", name="Moxa AWK-3131A", tx_power_dbm=23, frequency_ghz=2.4),
    AccessPointPreset(id="AWK-4131A", name="Moxa AWK-4131A Outdoor", tx_power_dbm=26, frequency_ghz=5),
    AccessPointPreset(id="GENERIC-AP", name="Generic Router", tx_power_dbm=18, frequency_ghz=2.4),
]


def get_preset(preset_id: str) -> AccessPointPreset:
    """Look up a catalogue entry by product id."""
    for preset in ACCESS_POINT_PRESETS:
        if preset.id == preset_id:
            return preset
    raise KeyError(f"Unknown access point preset: {preset_id}")
