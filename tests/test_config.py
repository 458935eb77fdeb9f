import json

import pytest

from radar_layout.config import (
    LayoutConstants,
    get_layout_constants,
    load_config,
    load_config_file,
    set_layout_constants,
)
from radar_layout.model import Moved
from radar_layout.validate import ValidationError


def _raw(entries=None):
    return {
        'surfaceId': 'radar',
        'width': 1450,
        'height': 1000,
        'title': 'Tech Radar',
        'printLayout': True,
        'quadrants': [{'name': n} for n in ('Languages', 'Infrastructure', 'Datastores', 'Data Management')],
        'rings': [
            {'name': 'ADOPT', 'color': '#5ba300'},
            {'name': 'TRIAL', 'color': '#009eb0'},
            {'name': 'ASSESS', 'color': '#c7ba00'},
            {'name': 'HOLD', 'color': '#e09b96', 'outerRadius': 400},
        ],
        'colors': {'background': '#fff', 'grid': '#bbb', 'inactive': '#ddd'},
        'entries': entries if entries is not None else [
            {'label': 'Python', 'quadrant': 0, 'ring': 0, 'active': True, 'moved': 1, 'link': 'https://python.org'},
            {'label': 'COBOL', 'quadrant': 0, 'ring': 3, 'active': False, 'moved': -1, 'description': 'legacy'},
        ],
    }


def test_load_config_accepts_camel_case_aliases():
    config = load_config(_raw())

    assert config.svg_id == 'radar'
    assert config.print_layout is True
    assert config.zoomed_quadrant is None
    assert config.ring_radii == (130.0, 220.0, 310.0, 400.0)
    assert [e.moved for e in config.entries] == [Moved.UP, Moved.DOWN]
    assert config.entries[1].description == 'legacy'
    assert config.colors.inactive == '#ddd'


def test_load_config_defaults_optional_entry_fields():
    config = load_config(_raw([{'label': 'Rust', 'quadrant': 2, 'ring': 1}]))

    entry = config.entries[0]
    assert entry.active is True
    assert entry.moved is Moved.NONE
    assert entry.link is None


@pytest.mark.parametrize(
    'entry, message_part',
    [
        ({'quadrant': 0, 'ring': 0}, 'missing a label'),
        ({'label': 'X', 'ring': 0}, 'missing quadrant'),
        ({'label': 'X', 'quadrant': 4, 'ring': 0}, 'quadrant must be 0..3'),
        ({'label': 'X', 'quadrant': 0, 'ring': 0, 'moved': 5}, 'moved must be one of'),
        ({'label': 'X', 'quadrant': 0, 'ring': 0, 'moved': 'up'}, 'moved must be one of'),
    ],
)
def test_load_config_rejects_bad_entries(entry, message_part):
    with pytest.raises(ValidationError) as exc:
        load_config(_raw([entry]))

    assert message_part in str(exc.value)


def test_load_config_requires_quadrants_and_rings():
    raw = _raw()
    del raw['rings']

    with pytest.raises(ValidationError):
        load_config(raw)


def test_load_config_file_reads_json(tmp_path):
    path = tmp_path / 'radar.json'
    path.write_text(json.dumps(_raw()), encoding='utf-8')

    config = load_config_file(path)

    assert [e.label for e in config.entries] == ['Python', 'COBOL']


def test_load_config_file_rejects_non_object(tmp_path):
    path = tmp_path / 'radar.json'
    path.write_text('[1, 2]', encoding='utf-8')

    with pytest.raises(ValidationError):
        load_config_file(path)


def test_layout_constants_are_copied():
    original = get_layout_constants()
    try:
        custom = LayoutConstants(seed=7)
        set_layout_constants(custom)
        custom.seed = 99

        fetched = get_layout_constants()
        assert fetched.seed == 7
        fetched.collision.radius = 1.0
        assert get_layout_constants().collision.radius == 12.0
    finally:
        set_layout_constants(original)


@pytest.mark.parametrize('value', ['false', 'no', 1, None])
def test_load_config_requires_boolean_print_layout(value):
    raw = _raw()
    raw['printLayout'] = value

    with pytest.raises(ValidationError) as exc:
        load_config(raw)

    assert 'print_layout must be boolean' in str(exc.value)


def test_load_config_fills_missing_ring_fields_from_defaults():
    raw = _raw()
    raw['rings'] = [{}, {'name': 'Try'}, {'color': '#123456'}, {}]

    config = load_config(raw)

    assert [ring.name for ring in config.rings] == ['ADOPT', 'Try', 'ASSESS', 'HOLD']
    assert config.rings[2].color == '#123456'
    assert config.rings[0].color == '#5ba300'
    assert config.ring_radii == (130.0, 220.0, 310.0, 400.0)


def test_load_config_fifth_ring_needs_every_field():
    raw = _raw()
    raw['rings'] = raw['rings'] + [{'name': 'RETIRE'}]

    with pytest.raises(ValidationError) as exc:
        load_config(raw)

    assert 'ring 4 needs color, radius' in str(exc.value)
