"""Configuration intake and engine-wide layout constants."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .collision import CollisionOptions
from .legend import LegendGeometry
from .model import Entry, Moved, QuadrantConfig, RadarColors, RadarConfig, RingConfig
from .segments import BOX_MARGIN, CENTER_RADIUS, CLIP_MARGIN, DEFAULT_RING_RADII
from .sequence import DEFAULT_SEED
from .validate import ValidationError, validate

logger = logging.getLogger(__name__)


@dataclass
class LayoutConstants:
    """Geometry and relaxation constants shared by every render."""

    seed: int = DEFAULT_SEED
    center_radius: float = CENTER_RADIUS
    clip_margin: float = CLIP_MARGIN
    box_margin: float = BOX_MARGIN
    zoom_extent: float = 400.0
    zoom_padding: float = 20.0
    collision: CollisionOptions = field(default_factory=CollisionOptions)
    legend: LegendGeometry = field(default_factory=LegendGeometry)


_LAYOUT_CONSTANTS = LayoutConstants()


def get_layout_constants() -> LayoutConstants:
    return copy.deepcopy(_LAYOUT_CONSTANTS)


def set_layout_constants(constants: LayoutConstants) -> None:
    global _LAYOUT_CONSTANTS
    _LAYOUT_CONSTANTS = copy.deepcopy(constants)


_ALIASES = {
    "surfaceId": "svg_id",
    "svgId": "svg_id",
    "printLayout": "print_layout",
    "zoomedQuadrant": "zoomed_quadrant",
    "outerRadius": "radius",
}


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {_ALIASES.get(key, key): value for key, value in data.items()}


def _require_mapping(value: object, where: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{where} must be an object (got {type(value).__name__})")
    return _normalize_keys(value)


def _require_list(value: object, where: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{where} must be a list (got {type(value).__name__})")
    return list(value)


def _parse_moved(value: object, where: str) -> Moved:
    if isinstance(value, Moved):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{where} moved must be one of -1, 0, 1 (got {value!r})")
    try:
        return Moved(value)
    except ValueError as exc:
        raise ValidationError(f"{where} moved must be one of -1, 0, 1 (got {value!r})") from exc


def _parse_entry(raw: object, idx: int) -> Entry:
    where = f"entry {idx}"
    data = _require_mapping(raw, where)
    if "label" not in data:
        raise ValidationError(f"{where} is missing a label")
    for key in ("quadrant", "ring"):
        if key not in data:
            raise ValidationError(f"{where} is missing {key}")
    return Entry(
        label=data["label"],
        quadrant=data["quadrant"],
        ring=data["ring"],
        active=data.get("active", True),
        moved=_parse_moved(data.get("moved", 0), where),
        description=data.get("description"),
        link=data.get("link"),
    )


def _parse_rings(raw: object) -> List[RingConfig]:
    defaults = default_rings()
    rings = []
    for idx, item in enumerate(_require_list(raw, "rings")):
        data = _require_mapping(item, f"ring {idx}")
        if idx >= len(defaults):
            missing = [key for key in ("name", "color", "radius") if key not in data]
            if missing:
                raise ValidationError(f"ring {idx} needs {', '.join(missing)}")
            rings.append(RingConfig(name=data["name"], color=data["color"], radius=data["radius"]))
            continue
        fallback = defaults[idx]
        rings.append(
            RingConfig(
                name=data.get("name", fallback.name),
                color=data.get("color", fallback.color),
                radius=data.get("radius", fallback.radius),
            )
        )
    return rings


def load_config(data: Mapping[str, Any]) -> RadarConfig:
    """Build and validate a :class:`RadarConfig` from a JSON-like mapping."""

    raw = _require_mapping(data, "config")
    for key in ("quadrants", "rings"):
        if key not in raw:
            raise ValidationError(f"config is missing '{key}'")

    quadrants = [
        QuadrantConfig(name=_require_mapping(item, f"quadrant {idx}").get("name", ""))
        for idx, item in enumerate(_require_list(raw["quadrants"], "quadrants"))
    ]
    colors_raw = _require_mapping(raw.get("colors", {}), "colors")
    colors = RadarColors(**{k: v for k, v in colors_raw.items() if k in ("background", "grid", "inactive")})
    entries = [_parse_entry(item, idx) for idx, item in enumerate(_require_list(raw.get("entries", []), "entries"))]

    config = RadarConfig(
        quadrants=quadrants,
        rings=_parse_rings(raw["rings"]),
        entries=entries,
        colors=colors,
        svg_id=raw.get("svg_id", "radar"),
        width=raw.get("width", 1450),
        height=raw.get("height", 1000),
        title=raw.get("title", ""),
        print_layout=raw.get("print_layout", False),
        zoomed_quadrant=raw.get("zoomed_quadrant"),
    )
    validate(config)
    logger.info("Loaded radar config '%s' with %d entries", config.svg_id, len(config.entries))
    return config


def load_config_file(path: Union[str, Path]) -> RadarConfig:
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValidationError(f"{path.name} must contain a JSON object")
    return load_config(data)


def default_rings() -> List[RingConfig]:
    """Ring names, colors and radii used for any ring field a config leaves out."""

    names = ("ADOPT", "TRIAL", "ASSESS", "HOLD")
    palette = ("#5ba300", "#009eb0", "#c7ba00", "#e09b96")
    return [RingConfig(name=n, color=c, radius=r) for n, c, r in zip(names, palette, DEFAULT_RING_RADII)]


__all__ = [
    "LayoutConstants",
    "default_rings",
    "get_layout_constants",
    "load_config",
    "load_config_file",
    "set_layout_constants",
]
