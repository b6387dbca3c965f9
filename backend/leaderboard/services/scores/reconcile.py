from dataclasses import replace
from typing import Optional

from .types import Outcome, Reconciliation, ScoreRecord, ScoreSubmission


def decide(existing: Optional[ScoreRecord], submission: ScoreSubmission) -> Reconciliation:
    """Decide how a submission changes the stored record for its name.

    - no record: insert the submission as-is
    - higher score: overwrite both score_value and time_score
    - otherwise, a positive time: overwrite only time_score
    - otherwise: leave the record untouched

    Pure: the returned ``record`` is the state after reconciliation.
    """
    if existing is None:
        record = ScoreRecord(
            name=submission.name,
            score_value=submission.score_value,
            time_score=submission.time_score,
        )
        return Reconciliation(Outcome.SAVED, record)

    if submission.score_value > existing.score_value:
        record = replace(existing, score_value=submission.score_value, time_score=submission.time_score)
        return Reconciliation(Outcome.SCORE_AND_TIME_UPDATED, record, previous=existing)

    # time_score may move without score_value; the stored time then belongs
    # to the latest run rather than the run that set the best score
    if submission.time_score > 0:
        record = replace(existing, time_score=submission.time_score)
        return Reconciliation(Outcome.TIME_UPDATED, record, previous=existing)

    return Reconciliation(Outcome.UNCHANGED, existing, previous=existing)


def submit_score(store, submission: ScoreSubmission) -> Reconciliation:
    """Reconcile ``submission`` against ``store`` in a single transaction.

    Performs at most one write. Storage failures surface as ``StorageError``.
    """
    with store.transaction():
        existing = store.get(submission.name)
        result = decide(existing, submission)
        if result.outcome is Outcome.SAVED:
            store.insert(result.record)
        elif result.outcome.writes:
            store.update(result.record)
    return result
