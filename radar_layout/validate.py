from typing import Dict, Set, Tuple

from .model import QUADRANT_COUNT, RING_COUNT, Moved, RadarConfig
from .segments import CENTER_RADIUS, CLIP_MARGIN

class ValidationError(ValueError):
    pass

def _is_index(value: object, upper: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < upper

def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def _validate_rings(config: RadarConfig, center_radius: float, clip_margin: float) -> None:
    previous = center_radius
    for idx, ring in enumerate(config.rings):
        if not ring.name:
            raise ValidationError(f'ring {idx} needs a name')
        radius = ring.radius
        if not _is_number(radius):
            raise ValidationError(f'ring {idx} radius must be a number (got {radius!r})')
        if radius - clip_margin < previous + clip_margin:
            raise ValidationError(
                f'ring {idx} radius {radius} leaves no room inside the {clip_margin:g}-unit margins '
                f'(inner radius {previous})'
            )
        previous = radius

def validate(
    config: RadarConfig,
    *,
    center_radius: float = CENTER_RADIUS,
    clip_margin: float = CLIP_MARGIN,
) -> None:
    if len(config.quadrants) != QUADRANT_COUNT:
        raise ValidationError(f'expected {QUADRANT_COUNT} quadrants, got {len(config.quadrants)}')
    if len(config.rings) != RING_COUNT:
        raise ValidationError(f'expected {RING_COUNT} rings, got {len(config.rings)}')
    _validate_rings(config, center_radius, clip_margin)
    for name in ('width', 'height'):
        value = getattr(config, name)
        if not _is_number(value) or value <= 0:
            raise ValidationError(f'{name} must be a positive number (got {value!r})')
    if not isinstance(config.print_layout, bool):
        raise ValidationError(f'print_layout must be boolean (got {config.print_layout!r})')
    if config.zoomed_quadrant is not None and not _is_index(config.zoomed_quadrant, QUADRANT_COUNT):
        raise ValidationError(f'zoomed_quadrant must be 0..3 (got {config.zoomed_quadrant!r})')

    seen_objects: Set[int] = set()
    seen_keys: Dict[Tuple[int, int, str], int] = {}
    for idx, entry in enumerate(config.entries):
        where = f'entry {idx}'
        if not isinstance(entry.label, str) or not entry.label.strip():
            raise ValidationError(f'{where} is missing a label')
        where = f'{where} ({entry.label!r})'
        if not _is_index(entry.quadrant, QUADRANT_COUNT):
            raise ValidationError(f'{where} quadrant must be 0..3 (got {entry.quadrant!r})')
        if not _is_index(entry.ring, RING_COUNT):
            raise ValidationError(f'{where} ring must be 0..3 (got {entry.ring!r})')
        if not isinstance(entry.active, bool):
            raise ValidationError(f'{where} active must be boolean')
        if not isinstance(entry.moved, Moved):
            raise ValidationError(f'{where} moved must be one of -1, 0, 1 (got {entry.moved!r})')
        if entry.description is not None and not isinstance(entry.description, str):
            raise ValidationError(f'{where} description must be text')
        if id(entry) in seen_objects:
            raise ValidationError(f'{where} appears more than once in the entry list')
        seen_objects.add(id(entry))
        key = (entry.quadrant, entry.ring, entry.label)
        if key in seen_keys:
            raise ValidationError(
                f'{where} duplicates entry {seen_keys[key]} in quadrant {entry.quadrant} ring {entry.ring}'
            )
        seen_keys[key] = idx
