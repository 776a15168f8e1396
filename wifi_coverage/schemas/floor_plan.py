"""Floor plan pydantic schemas: points, walls and sampling configuration."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wifi_coverage.core.config import settings

# Thickness (meters) the material attenuation table is calibrated against
REFERENCE_WALL_THICKNESS_M = 0.15


class MaterialType(str, Enum):
    """Wall construction material."""
    CONCRETE = "Concrete"
    BRICK = "Brick"
    DRYWALL = "Drywall"
    GLASS = "Glass"
    METAL = "Metal"


# dB loss per wall type for a REFERENCE_WALL_THICKNESS_M wall (approximate)
MATERIAL_ATTENUATION: Dict[MaterialType, float] = {
    MaterialType.CONCRETE: 12.0,
    MaterialType.BRICK: 8.0,
    MaterialType.DRYWALL: 3.0,
    MaterialType.GLASS: 2.0,
    MaterialType.METAL: 20.0,
}


class Point(BaseModel):
    """2D point coordinates in pixels."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class Wall(BaseModel):
    """Obstructing wall segment in the floor plan."""
    start: Point
    end: Point
    material: MaterialType = MaterialType.CONCRETE
    attenuation_db: float = Field(
        ...,
        ge=0,
        description="RF attenuation in dB for a 0.15 m wall; defaults to the material table value"
    )
    thickness_meters: float = Field(
        REFERENCE_WALL_THICKNESS_M, gt=0, description="Wall thickness in meters"
    )
    height_meters: float = Field(
        3.0, gt=0, description="Wall height in meters (3D display only, not used for occlusion)"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_attenuation(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("attenuation_db") is None:
            material = MaterialType(data.get("material", MaterialType.CONCRETE))
            data = {**data, "attenuation_db": MATERIAL_ATTENUATION[material]}
        return data


class SimulationConfig(BaseModel):
    """Caller-side sampling request: scale, grid cell size and receiver height."""
    pixels_per_meter: float = Field(settings.DEFAULT_PIXELS_PER_METER, gt=0)
    resolution: int = Field(
        settings.GRID_RESOLUTION_2D, gt=0, description="Grid cell size in pixels"
    )
    receiver_height_meters: float = Field(settings.DEFAULT_RECEIVER_HEIGHT_M, ge=0)
