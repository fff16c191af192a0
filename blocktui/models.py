from sqlalchemy import Column, Integer, String, BigInteger
from blocktui.database import Base


class ScoreRecord(Base):
    __tablename__ = "scoreboard"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    score = Column(BigInteger, nullable=False)
    # ISO-8601, always UTC
    when = Column("when", String, nullable=False)

    def __repr__(self):
        return f"<ScoreRecord {self.id}: {self.name} {self.score} @ {self.when}>"
