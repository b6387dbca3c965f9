"""Storage for score records.

``SqlScoreStore`` is the production store on top of Flask-SQLAlchemy.
``MemoryScoreStore`` keeps rows in a dict and is used where no database
is wanted, mainly tests.
"""
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from leaderboard.errors import StorageError
from .types import ScoreRecord


def _sorted_for_leaderboard(records: List[ScoreRecord]) -> List[ScoreRecord]:
    return sorted(records, key=lambda r: (-r.score_value, r.name))


class ScoreStore(ABC):
    """Exact-match lookup, single-row insert/update, and a full listing."""

    @abstractmethod
    def leaderboard(self) -> List[ScoreRecord]:
        """All records, best score first."""

    @abstractmethod
    def transaction(self):
        """Context manager grouping a lookup and its write."""

    @abstractmethod
    def get(self, name: str) -> Optional[ScoreRecord]:
        ...

    @abstractmethod
    def insert(self, record: ScoreRecord) -> None:
        ...

    @abstractmethod
    def update(self, record: ScoreRecord) -> None:
        ...


class MemoryScoreStore(ScoreStore):
    def __init__(self, records=None):
        self._rows: Dict[str, ScoreRecord] = {}
        self._lock = threading.RLock()
        for record in records or []:
            self._rows[record.name] = record

    def leaderboard(self) -> List[ScoreRecord]:
        with self._lock:
            return _sorted_for_leaderboard(list(self._rows.values()))

    @contextmanager
    def transaction(self):
        with self._lock:
            yield self

    def get(self, name: str) -> Optional[ScoreRecord]:
        return self._rows.get(name)

    def insert(self, record: ScoreRecord) -> None:
        if record.name in self._rows:
            raise StorageError(f'duplicate name {record.name!r}')
        self._rows[record.name] = record

    def update(self, record: ScoreRecord) -> None:
        if record.name not in self._rows:
            raise StorageError(f'no row for name {record.name!r}')
        self._rows[record.name] = record

    def __len__(self):
        return len(self._rows)


class SqlScoreStore(ScoreStore):
    def __init__(self, db):
        self.db = db

    def leaderboard(self) -> List[ScoreRecord]:
        from leaderboard.models import Score
        try:
            rows = Score.query.order_by(Score.score_value.desc(), Score.name.asc()).all()
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            raise StorageError(str(exc)) from exc
        return [row.to_record() for row in rows]

    @contextmanager
    def transaction(self):
        session = self.db.session
        try:
            yield self
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(str(exc)) from exc
        except Exception:
            session.rollback()
            raise

    def _row(self, name: str):
        from leaderboard.models import Score
        # Row lock where supported (no-op on SQLite)
        return self.db.session.get(Score, name, with_for_update=True)

    def get(self, name: str) -> Optional[ScoreRecord]:
        row = self._row(name)
        return row.to_record() if row is not None else None

    def insert(self, record: ScoreRecord) -> None:
        from leaderboard.models import Score
        self.db.session.add(Score(
            name=record.name,
            score_value=record.score_value,
            time_score=record.time_score,
        ))

    def update(self, record: ScoreRecord) -> None:
        row = self._row(record.name)
        if row is None:
            raise StorageError(f'no row for name {record.name!r}')
        row.score_value = record.score_value
        row.time_score = record.time_score
