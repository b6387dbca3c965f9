from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional

NAME_MAX_LENGTH = 10
# Largest value a signed 64-bit BIGINT column holds
MAX_STORED_INT = 2 ** 63 - 1


@dataclass(frozen=True)
class ScoreRecord:
    name: str
    score_value: int
    time_score: int = 0

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ScoreSubmission:
    """A validated submission: normalized name, non-negative score and time."""
    name: str
    score_value: int
    time_score: int = 0


class Outcome(str, Enum):
    SAVED = 'Score saved'
    SCORE_AND_TIME_UPDATED = 'Score and time updated'
    TIME_UPDATED = 'Time score updated'
    UNCHANGED = 'No updates needed'

    @property
    def message(self) -> str:
        return self.value

    @property
    def writes(self) -> bool:
        return self is not Outcome.UNCHANGED


@dataclass(frozen=True)
class Reconciliation:
    outcome: Outcome
    record: ScoreRecord
    previous: Optional[ScoreRecord] = None
