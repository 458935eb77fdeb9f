from .model import (
    Entry,
    LegendBucket,
    LegendLayout,
    LegendRow,
    Moved,
    PlacedEntry,
    Point,
    PolarPoint,
    QuadrantConfig,
    RadarColors,
    RadarConfig,
    RenderResult,
    RingConfig,
)
from .sequence import DeterministicSequence
from .coords import clamp_box, clamp_radius, clamp_scalar, to_cartesian, to_polar
from .segments import Segment, build_segment, build_segments
from .partition import assign_ids, label_sort_key, ordered_entries, partition_entries
from .collision import CollisionOptions, CollisionReport, iteration_budget, resolve_collisions
from .legend import DescriptionLine, LegendGeometry, Selection, layout_legend, reflow, toggle_selection, wrap_description
from .validate import validate, ValidationError
from .config import (
    LayoutConstants,
    get_layout_constants,
    load_config,
    load_config_file,
    set_layout_constants,
)
from .engine import EntryNotFoundError, RadarEngine, viewbox
from .printer import print_legend, print_result

__all__ = [
    'CollisionOptions',
    'CollisionReport',
    'DescriptionLine',
    'DeterministicSequence',
    'Entry',
    'EntryNotFoundError',
    'LayoutConstants',
    'LegendBucket',
    'LegendGeometry',
    'LegendLayout',
    'LegendRow',
    'Moved',
    'PlacedEntry',
    'Point',
    'PolarPoint',
    'QuadrantConfig',
    'RadarColors',
    'RadarConfig',
    'RadarEngine',
    'RenderResult',
    'RingConfig',
    'Segment',
    'Selection',
    'ValidationError',
    'assign_ids',
    'build_segment',
    'build_segments',
    'clamp_box',
    'clamp_radius',
    'clamp_scalar',
    'get_layout_constants',
    'iteration_budget',
    'label_sort_key',
    'layout_legend',
    'load_config',
    'load_config_file',
    'ordered_entries',
    'partition_entries',
    'print_legend',
    'print_result',
    'reflow',
    'resolve_collisions',
    'set_layout_constants',
    'to_cartesian',
    'to_polar',
    'toggle_selection',
    'validate',
    'viewbox',
    'wrap_description',
]
