from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HighScore(BaseModel):
    """A single board entry.

    Two entries are equal when name and score match; ``when`` and ``id`` take
    no part in equality. Ordering looks at the score alone, so entries with
    the same score compare neither less nor greater than each other and their
    relative position on a board is unspecified.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: int
    when: datetime
    # store row identity, None until persisted
    id: Optional[int] = None

    @field_validator('score')
    @classmethod
    def validate_score(cls, v: int) -> int:
        if v < INT64_MIN or v > INT64_MAX:
            raise ValueError('score must fit in a signed 64-bit integer')
        return v

    @field_validator('when')
    @classmethod
    def validate_when(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @classmethod
    def create(cls, name: str, score: int, when: Optional[datetime] = None) -> "HighScore":
        return cls(name=name, score=score, when=when if when is not None else utc_now())

    def with_id(self, row_id: int) -> "HighScore":
        return self.model_copy(update={'id': row_id})

    def __eq__(self, other):
        if not isinstance(other, HighScore):
            return NotImplemented
        return self.name == other.name and self.score == other.score

    def __hash__(self):
        return hash((self.name, self.score))

    def __lt__(self, other):
        if not isinstance(other, HighScore):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other):
        if not isinstance(other, HighScore):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other):
        if not isinstance(other, HighScore):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other):
        if not isinstance(other, HighScore):
            return NotImplemented
        return self.score >= other.score


class RankedScore(BaseModel):
    rank: int
    name: str
    score: int
    when: str

    @classmethod
    def from_highscore(cls, rank: int, high_score: HighScore) -> "RankedScore":
        return cls(
            rank=rank,
            name=high_score.name,
            score=high_score.score,
            when=high_score.when.isoformat(),
        )


def rank(high_scores, limit: Optional[int] = None) -> list[RankedScore]:
    if limit is not None:
        high_scores = high_scores[:limit]
    return [RankedScore.from_highscore(i + 1, hs) for i, hs in enumerate(high_scores)]
