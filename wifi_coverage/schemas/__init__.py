# Pydantic schemas
from wifi_coverage.schemas.floor_plan import (
    Point, Wall, MaterialType, MATERIAL_ATTENUATION, REFERENCE_WALL_THICKNESS_M,
    SimulationConfig
)
from wifi_coverage.schemas.access_point import (
    TransmitterParams, AntennaKind, WifiStandard, AccessPointPreset,
    ACCESS_POINT_PRESETS, get_preset
)
