"""Errors raised by the scoreboard subsystem.

Every store failure surfaces as one of these, chained to the SQLAlchemy or
parsing error that caused it. Nothing here is retried.
"""


class LeaderboardError(Exception):
    pass


class StoreUnavailableError(LeaderboardError):
    """The store could not be opened, its schema created, or it was closed."""


class StoreReadError(LeaderboardError):
    """Loading persisted records failed."""


class StoreWriteError(LeaderboardError):
    """Trimming the store or mirroring an admission into it failed."""


class InvalidScoreError(LeaderboardError, ValueError):
    """A score that cannot be recorded, such as one outside 64 bits."""
