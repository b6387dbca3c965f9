import math
import re
from typing import Any, Optional

from leaderboard.errors import InvalidInput
from .types import ScoreSubmission, NAME_MAX_LENGTH, MAX_STORED_INT

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def normalize_name(raw: Any) -> str:
    """Trim, uppercase, and truncate a player name to the stored key form.

    Idempotent: ``normalize_name(normalize_name(x)) == normalize_name(x)``.
    """
    text = str(raw) if raw else ''
    return text.strip().upper()[:NAME_MAX_LENGTH]


def parse_int(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``; ``None`` when there is none.

    Floats truncate toward zero and strings use their leading digit run
    (``" 42abc"`` -> 42). Booleans and containers are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            return None
    return None


def validate_submission(payload: Any) -> ScoreSubmission:
    """Turn a decoded JSON body into a ``ScoreSubmission`` or raise ``InvalidInput``."""
    if not isinstance(payload, dict):
        payload = {}

    name = normalize_name(payload.get('name'))
    if not name:
        raise InvalidInput('Name is required')

    score_value = parse_int(payload.get('score_value'))
    if score_value is None or score_value < 0 or score_value > MAX_STORED_INT:
        raise InvalidInput('Invalid or missing score_value')

    # Missing or unparseable times default to 0; out-of-range ones clamp
    time_score = parse_int(payload.get('time_score'))
    if time_score is None or time_score < 0:
        time_score = 0
    time_score = min(time_score, MAX_STORED_INT)

    return ScoreSubmission(name=name, score_value=score_value, time_score=time_score)
