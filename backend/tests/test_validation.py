import pytest

from leaderboard.errors import InvalidInput
from leaderboard.services.scores.validation import normalize_name, parse_int, validate_submission
from leaderboard.services.scores.types import ScoreSubmission


@pytest.mark.parametrize('raw, expected', [
    (' alice ', 'ALICE'),
    ('Bob', 'BOB'),
    ('abcdefghijklmnop', 'ABCDEFGHIJ'),
    ('  padded name here ', 'PADDED NAM'),
    (None, ''),
    ('', ''),
    (0, ''),
    (1234, '1234'),
])
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


@pytest.mark.parametrize('raw', [' alice ', 'abcdefghijklmnop', 'MiXeD CaSe', '  x'])
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


@pytest.mark.parametrize('raw, expected', [
    (42, 42),
    (-3, -3),
    (42.9, 42),
    (-0.5, 0),
    ('17', 17),
    ('  8 points', 8),
    ('+5', 5),
    ('-12', -12),
    ('abc', None),
    ('', None),
    (None, None),
    (True, None),
    (float('nan'), None),
    ([1], None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_valid_submission():
    assert validate_submission({'name': ' alice ', 'score_value': 42, 'time_score': 10}) == \
        ScoreSubmission('ALICE', 42, 10)


def test_time_defaults_to_zero():
    assert validate_submission({'name': 'a', 'score_value': 1}).time_score == 0
    assert validate_submission({'name': 'a', 'score_value': 1, 'time_score': 'soon'}).time_score == 0


def test_negative_time_is_clamped():
    assert validate_submission({'name': 'a', 'score_value': 1, 'time_score': -4}).time_score == 0


@pytest.mark.parametrize('payload', [{}, {'name': '   '}, {'name': None, 'score_value': 3}, None, [], 'bob'])
def test_name_required(payload):
    with pytest.raises(InvalidInput) as excinfo:
        validate_submission(payload)
    assert excinfo.value.message == 'Name is required'
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize('score_value', [None, 'lots', -1, '-5', False])
def test_invalid_score_value(score_value):
    payload = {'name': 'bob'}
    if score_value is not None:
        payload['score_value'] = score_value
    with pytest.raises(InvalidInput) as excinfo:
        validate_submission(payload)
    assert excinfo.value.message == 'Invalid or missing score_value'


def test_zero_score_is_valid():
    assert validate_submission({'name': 'z', 'score_value': 0}).score_value == 0


def test_digit_run_past_conversion_limit_is_unparseable():
    assert parse_int('1' * 5000) is None
    assert parse_int('  ' + '9' * 5000 + ' pts') is None


def test_oversized_score_rejected():
    for score_value in ['1' * 5000, 2 ** 63, 10 ** 20, 1e30]:
        with pytest.raises(InvalidInput) as excinfo:
            validate_submission({'name': 'zed', 'score_value': score_value})
        assert excinfo.value.message == 'Invalid or missing score_value'


def test_largest_storable_score_accepted():
    assert validate_submission({'name': 'zed', 'score_value': 2 ** 63 - 1}).score_value == 2 ** 63 - 1


def test_oversized_time_is_clamped_or_defaulted():
    assert validate_submission({'name': 'zed', 'score_value': 1, 'time_score': 10 ** 20}).time_score == 2 ** 63 - 1
    assert validate_submission({'name': 'zed', 'score_value': 1, 'time_score': '1' * 5000}).time_score == 0
