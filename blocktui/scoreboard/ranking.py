"""Bounded in-memory ranking of the best scores seen."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, Optional

from blocktui.scoreboard.highscore import HighScore

logger = logging.getLogger(__name__)


class RankingCache:
    """Keeps at most ``capacity`` entries, best first.

    A new score is admitted when there is room, or when it is at least as good
    as the current worst entry. At capacity an admitted score evicts exactly
    one entry (the worst), so a tying score replaces the older tie.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._high_scores: list[HighScore] = []

    @classmethod
    def init(cls, capacity: int, records: Iterable[HighScore]) -> "RankingCache":
        """Build a cache from existing entries.

        Only the first ``capacity`` entries of ``records`` are kept and they
        are sorted afterwards. Callers must pass entries already ordered best
        first (or no more than ``capacity`` of them), otherwise a better entry
        further down the input is lost.
        """
        cache = cls(capacity)
        cache._high_scores = list(islice(records, capacity))
        cache._sort()
        return cache

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._high_scores)

    def is_full(self) -> bool:
        return len(self._high_scores) >= self._capacity

    def admits(self, score: int) -> bool:
        if self._capacity == 0:
            return False
        if not self.is_full():
            return True
        return score >= self._high_scores[-1].score

    def add(self, name: str, score: int) -> bool:
        if not self.admits(score):
            return False
        self.insert(HighScore.create(name, score))
        return True

    def insert(self, record: HighScore) -> Optional[HighScore]:
        """Insert a prebuilt entry and return the one it evicted, if any."""
        if not self.admits(record.score):
            raise ValueError(f"score {record.score} does not make the board")

        evicted = None
        if self.is_full():
            evicted = self._high_scores.pop()
            logger.debug("evicted %s (%d)", evicted.name, evicted.score)
        self._high_scores.append(record)
        self._sort()
        return evicted

    def first(self) -> Optional[HighScore]:
        if not self._high_scores:
            return None
        return self._high_scores[0]

    def last(self) -> Optional[HighScore]:
        if not self._high_scores:
            return None
        return self._high_scores[-1]

    def all(self) -> tuple[HighScore, ...]:
        return tuple(self._high_scores)

    def _sort(self) -> None:
        self._high_scores.sort(key=lambda hs: hs.score, reverse=True)

    def __repr__(self):
        return f"<RankingCache {len(self)}/{self._capacity}>"
