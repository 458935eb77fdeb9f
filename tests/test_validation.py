import pytest

from radar_layout.config import default_rings
from radar_layout.model import Entry, Moved, QuadrantConfig, RadarConfig, RingConfig
from radar_layout.validate import ValidationError, validate


def _config(entries=None, **kwargs):
    return RadarConfig(
        quadrants=[QuadrantConfig(f'Q{i}') for i in range(4)],
        rings=kwargs.pop('rings', default_rings()),
        entries=entries or [],
        **kwargs,
    )


def test_validate_accepts_valid_config():
    validate(
        _config(
            [
                Entry('A', 0, 0),
                Entry('B', 3, 3, active=False, moved=Moved.UP, description='text'),
                Entry('A', 1, 0),
            ],
            zoomed_quadrant=2,
        )
    )


def test_validate_accepts_empty_entries():
    validate(_config([]))


@pytest.mark.parametrize(
    'entry, message_part',
    [
        (Entry('A', 4, 0), 'quadrant must be 0..3'),
        (Entry('A', -1, 0), 'quadrant must be 0..3'),
        (Entry('A', 0, 4), 'ring must be 0..3'),
        (Entry('A', True, 0), 'quadrant must be 0..3'),
        (Entry('', 0, 0), 'missing a label'),
        (Entry('A', 0, 0, active='yes'), 'active must be boolean'),
        (Entry('A', 0, 0, moved=2), 'moved must be one of'),
    ],
)
def test_invalid_entries_rejected(entry, message_part):
    with pytest.raises(ValidationError) as exc:
        validate(_config([entry]))

    assert message_part in str(exc.value)


def test_duplicate_entry_object_rejected():
    entry = Entry('A', 0, 0)

    with pytest.raises(ValidationError) as exc:
        validate(_config([entry, entry]))

    assert 'more than once' in str(exc.value)


def test_duplicate_label_in_same_segment_rejected():
    with pytest.raises(ValidationError) as exc:
        validate(_config([Entry('A', 2, 1), Entry('A', 2, 1)]))

    assert 'duplicates entry 0' in str(exc.value)


def test_wrong_quadrant_and_ring_counts_rejected():
    with pytest.raises(ValidationError):
        validate(RadarConfig(quadrants=[QuadrantConfig('Q')] * 3, rings=default_rings()))
    with pytest.raises(ValidationError):
        validate(_config(rings=default_rings()[:3]))


def test_ring_radii_must_leave_room_for_margins():
    rings = default_rings()
    rings[2] = RingConfig('ASSESS', '#c7ba00', 230)

    with pytest.raises(ValidationError) as exc:
        validate(_config(rings=rings))

    assert 'ring 2 radius' in str(exc.value)


def test_zoomed_quadrant_range():
    with pytest.raises(ValidationError):
        validate(_config(zoomed_quadrant=4))


@pytest.mark.parametrize(
    'field, value',
    [
        ('width', 'wide'),
        ('width', True),
        ('height', 0),
        ('height', -10.0),
        ('print_layout', 'false'),
        ('print_layout', 1),
    ],
)
def test_surface_settings_rejected(field, value):
    with pytest.raises(ValidationError) as exc:
        validate(_config(**{field: value}))

    assert field in str(exc.value)


def test_ring_margins_follow_supplied_clip_margin():
    validate(_config(), clip_margin=15.0)

    with pytest.raises(ValidationError) as exc:
        validate(_config(), clip_margin=50.0)

    assert 'ring 1 radius' in str(exc.value)
    assert '50-unit margins' in str(exc.value)
