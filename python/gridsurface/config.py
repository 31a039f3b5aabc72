# python/gridsurface/config.py
# Grid configuration parsing from mappings and JSON files
# Exists so driver scripts can keep view and projection settings as data instead of setter calls
# RELEVANT FILES:python/gridsurface/grid.py,tests/test_config.py
from __future__ import annotations

import copy
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple, Union

from .colors import BLACK, Color, normalize_color
from .errors import TiltRangeError
from .projection import DEFAULT_FOCAL_LENGTH, DEFAULT_Z_MARGIN

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)

ConfigSource = Union["GridConfig", Mapping[str, Any], str, Path, None]

_PROJECTIONS: Dict[str, str] = {
    "orthographic": "orthographic",
    "ortho": "orthographic",
    "parallel": "orthographic",
    "perspective": "perspective",
    "persp": "perspective",
    "pinhole": "perspective",
}


def _normalize_key(value: Any) -> str:
    return "".join(
        c
        for c in str(value).strip().lower()
        if c not in {"-", "_", " ", "."}
    )


def _normalize_choice(value: Any, mapping: Mapping[str, str], label: str) -> str:
    key = _normalize_key(value)
    if key not in mapping:
        raise ValueError(f"Unknown {label}: {value!r}")
    return mapping[key]


def _to_float2(value: Any, label: str) -> Tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ValueError(f"{label} must be a sequence of two numeric values")


def _to_origin(value: Any) -> Tuple[float, float, float]:
    if isinstance(value, (list, tuple)) and len(value) in (2, 3):
        z = float(value[2]) if len(value) == 3 else 0.0
        return (float(value[0]), float(value[1]), z)
    raise ValueError("origin must be a sequence of two or three numeric values")


@dataclass
class GridConfig:
    """Serializable grid settings. Angles are stored in radians."""

    grid_size: int = 20
    x_range: Tuple[float, float] = (-1.0, 1.0)
    z_range: Tuple[float, float] = (-1.0, 1.0)
    y_scale: float = 1.0
    rotation: float = math.pi / 6
    tilt: float = math.pi / 6
    width: float = 400.0
    origin: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    projection: str = "orthographic"
    focal_length: float = DEFAULT_FOCAL_LENGTH
    z_margin: float = DEFAULT_Z_MARGIN
    stroke_color: Color = BLACK
    stroke_width: float = 1.0

    def to_dict(self) -> dict:
        return {
            "grid_size": self.grid_size,
            "x_range": list(self.x_range),
            "z_range": list(self.z_range),
            "y_scale": self.y_scale,
            "rotation": self.rotation,
            "tilt": self.tilt,
            "width": self.width,
            "origin": list(self.origin),
            "projection": self.projection,
            "focal_length": self.focal_length,
            "z_margin": self.z_margin,
            "stroke_color": list(self.stroke_color),
            "stroke_width": self.stroke_width,
        }

    def copy(self) -> "GridConfig":
        return copy.deepcopy(self)

    @property
    def perspective(self) -> bool:
        return self.projection == "perspective"

    def validate(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {self.grid_size}")
        if self.x_range[1] <= self.x_range[0]:
            raise ValueError(f"x_range must be increasing, got {list(self.x_range)}")
        if self.z_range[1] <= self.z_range[0]:
            raise ValueError(f"z_range must be increasing, got {list(self.z_range)}")
        if not -math.pi / 2 <= self.tilt <= math.pi / 2:
            raise TiltRangeError(self.tilt)
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.perspective and self.focal_length <= 0:
            raise ValueError(f"focal_length must be > 0, got {self.focal_length}")
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["GridConfig"] = None) -> "GridConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        if "grid_size" in data:
            base.grid_size = int(data["grid_size"])
        if "x_range" in data:
            base.x_range = _to_float2(data["x_range"], "x_range")
        if "z_range" in data:
            base.z_range = _to_float2(data["z_range"], "z_range")
        if "y_scale" in data:
            base.y_scale = float(data["y_scale"])
        if "rotation" in data:
            base.rotation = float(data["rotation"])
        if "rotation_degrees" in data:
            base.rotation = float(data["rotation_degrees"]) / 180.0 * math.pi
        if "tilt" in data:
            base.tilt = float(data["tilt"])
        if "tilt_degrees" in data:
            base.tilt = float(data["tilt_degrees"]) / 180.0 * math.pi
        if "width" in data:
            base.width = float(data["width"])
        if "origin" in data:
            base.origin = _to_origin(data["origin"])
        if "projection" in data:
            base.projection = _normalize_choice(data["projection"], _PROJECTIONS, "projection")
        if "perspective" in data:
            base.projection = "perspective" if data["perspective"] else "orthographic"
        if "focal_length" in data:
            base.focal_length = float(data["focal_length"])
        if "z_margin" in data:
            base.z_margin = float(data["z_margin"])
        if "stroke_color" in data:
            base.stroke_color = normalize_color(data["stroke_color"])
        if "stroke_width" in data:
            base.stroke_width = float(data["stroke_width"])
        return base

    def apply(self, grid: "Grid") -> "Grid":
        """Push these settings through the grid's setters.

        Raises:
            TiltRangeError: if ``tilt`` is outside [-pi/2, pi/2].
        """
        grid.set_x_range(*self.x_range)
        grid.set_z_range(*self.z_range)
        grid.set_grid_size(self.grid_size)
        grid.set_y_scale(self.y_scale)
        grid.set_rotation(self.rotation)
        grid.set_tilt(self.tilt)
        grid.set_width(self.width)
        grid.set_origin(*self.origin)
        grid.set_perspective(self.perspective)
        grid.set_focal_length(self.focal_length)
        grid.set_z_margin(self.z_margin)
        grid.set_stroke(self.stroke_color, self.stroke_width)
        return grid


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        return json.loads(text)
    raise ValueError(f"Unsupported grid config file format: {path}")


def load_grid_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> GridConfig:
    if isinstance(config, GridConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = GridConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        logger.debug(f"Loading grid config from {config}")
        cfg = GridConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = GridConfig()
    else:
        raise TypeError("config must be GridConfig, mapping, path, or None")

    if overrides:
        cfg = GridConfig.from_mapping(overrides, cfg)
    cfg.validate()
    return cfg


__all__ = [
    "ConfigSource",
    "GridConfig",
    "load_grid_config",
]
