from blocktui.scoreboard.highscore import HighScore, RankedScore
from blocktui.scoreboard.local import DEFAULT_CAPACITY, LocalLeaderboard
from blocktui.scoreboard.ranking import RankingCache

__all__ = [
    "DEFAULT_CAPACITY",
    "HighScore",
    "LocalLeaderboard",
    "RankedScore",
    "RankingCache",
]
