"""Ranking cache mirrored into a local SQLite file."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from blocktui.database import create_session_factory, create_store_engine, init_db
from blocktui.errors import (
    InvalidScoreError,
    LeaderboardError,
    StoreReadError,
    StoreUnavailableError,
    StoreWriteError,
)
from blocktui.models import ScoreRecord
from blocktui.scoreboard.highscore import HighScore, RankedScore, rank
from blocktui.scoreboard.ranking import RankingCache

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5

# ties on score fall back to row order so trimming and loading agree
TOP_ORDER = (ScoreRecord.score.desc(), ScoreRecord.id.asc())


class LocalLeaderboard:
    """The best ``capacity`` scores, kept in memory and in a SQLite file.

    On construction the store is trimmed to its top ``capacity`` rows and
    those rows seed the in-memory cache. Afterwards reads are served from the
    cache only, and every admission is written to the store (evicted row
    deleted by id, new row inserted) in a single transaction before the cache
    changes. If that transaction fails the cache is left as it was.

    The leaderboard owns its engine; use it as a context manager or call
    :meth:`close` when done.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, path=":memory:"):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.path = str(path)
        self._engine = self._open(self.path)
        self._session_factory = create_session_factory(self._engine)
        try:
            self._trim(capacity)
            self._cache = RankingCache.init(capacity, self._load(capacity))
        except LeaderboardError:
            self.close()
            raise
        logger.info(
            "opened scoreboard %s (%d/%d entries)", self.path, len(self._cache), capacity
        )

    @classmethod
    def from_settings(cls, settings) -> "LocalLeaderboard":
        return cls(settings.capacity, settings.db_path)

    @staticmethod
    def _open(path: str):
        engine = create_store_engine(path)
        try:
            init_db(engine)
        except SQLAlchemyError as exc:
            engine.dispose()
            logger.error("cannot open scoreboard store %s: %s", path, exc)
            raise StoreUnavailableError(f"cannot open scoreboard store at {path}") from exc
        return engine

    def _session(self):
        if self._engine is None:
            raise StoreUnavailableError(f"scoreboard store {self.path} is closed")
        return self._session_factory()

    def _trim(self, capacity: int) -> None:
        top = select(ScoreRecord.id).order_by(*TOP_ORDER).limit(capacity)
        try:
            with self._session() as session, session.begin():
                removed = (
                    session.query(ScoreRecord)
                    .filter(ScoreRecord.id.notin_(top))
                    .delete(synchronize_session=False)
                )
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"cannot trim scoreboard store {self.path}") from exc
        if removed:
            logger.info("trimmed %d rows below the top %d", removed, capacity)

    def _load(self, capacity: int) -> list[HighScore]:
        try:
            with self._session() as session:
                rows = (
                    session.query(ScoreRecord)
                    .order_by(*TOP_ORDER)
                    .limit(capacity)
                    .all()
                )
        except SQLAlchemyError as exc:
            raise StoreReadError(f"cannot read scoreboard store {self.path}") from exc

        records = []
        for row in rows:
            try:
                records.append(
                    HighScore(id=row.id, name=row.name, score=row.score, when=row.when)
                )
            except ValidationError as exc:
                raise StoreReadError(f"unreadable scoreboard row {row.id}") from exc
        return records

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def add(self, name: str, score: int) -> bool:
        """Record a score; returns whether it made the board."""
        if not self._cache.admits(score):
            logger.debug("score %d from %s did not make the board", score, name)
            return False

        try:
            record = HighScore.create(name, score)
        except ValidationError as exc:
            raise InvalidScoreError(f"cannot record score {score} for {name}") from exc
        evicted = self._cache.last() if self._cache.is_full() else None
        try:
            with self._session() as session, session.begin():
                if evicted is not None:
                    session.query(ScoreRecord).filter(ScoreRecord.id == evicted.id).delete(
                        synchronize_session=False
                    )
                row = ScoreRecord(
                    name=record.name, score=record.score, when=record.when.isoformat()
                )
                session.add(row)
                session.flush()
                record = record.with_id(row.id)
        except SQLAlchemyError as exc:
            logger.error("cannot save score %d for %s: %s", score, name, exc)
            raise StoreWriteError(f"cannot save score to {self.path}") from exc

        self._cache.insert(record)
        logger.debug("added %s (%d) as row %s", name, score, record.id)
        return True

    def first(self) -> Optional[HighScore]:
        return self._cache.first()

    def last(self) -> Optional[HighScore]:
        return self._cache.last()

    def all(self) -> tuple[HighScore, ...]:
        return self._cache.all()

    def ranked(self, limit: Optional[int] = None) -> list[RankedScore]:
        return rank(self.all(), limit)

    def __len__(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
