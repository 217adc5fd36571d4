"""Surface material descriptions for Phong and physically based shading."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

Color = Tuple[float, float, float]


class MaterialType(enum.Enum):
    """Shading model a material is meant for."""

    PHONG = "phong"
    PBR = "pbr"
    UNLIT = "unlit"


@dataclass
class MaterialBase:
    """A named material; the base describes an unlit surface."""

    name: str
    material_type: MaterialType = field(default=MaterialType.UNLIT, init=False)


@dataclass
class PhongMaterial(MaterialBase):
    """Phong material with colours, shininess, opacity and optional textures."""

    material_type: MaterialType = field(default=MaterialType.PHONG, init=False)
    ambient: Color = (0.2, 0.2, 0.2)
    diffuse: Color = (1.0, 1.0, 1.0)
    specular: Color = (1.0, 1.0, 1.0)
    shininess: float = 0.2
    alpha: float = 1.0
    diffuse_texture: Optional[object] = None
    specular_texture: Optional[object] = None
    normal_texture: Optional[object] = None


@dataclass
class PBRMaterial(MaterialBase):
    """Metallic-roughness material with optional textures."""

    material_type: MaterialType = field(default=MaterialType.PBR, init=False)
    albedo_color: Color = (1.0, 1.0, 1.0)
    metalness: float = 0.0
    roughness: float = 1.0
    ao: float = 1.0
    albedo_texture: Optional[object] = None
    normal_texture: Optional[object] = None
    metalness_texture: Optional[object] = None
    roughness_texture: Optional[object] = None
    ao_texture: Optional[object] = None