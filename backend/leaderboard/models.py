from leaderboard import db
from leaderboard.services.scores.types import ScoreRecord, NAME_MAX_LENGTH


class Score(db.Model):
    __tablename__ = 'scores'
    name = db.Column(db.String(NAME_MAX_LENGTH), primary_key=True)
    score_value = db.Column(db.BigInteger, nullable=False, default=0, server_default=db.text('0'))
    time_score = db.Column(db.BigInteger, nullable=False, default=0, server_default=db.text('0'))

    def to_record(self) -> ScoreRecord:
        return ScoreRecord(
            name=self.name,
            score_value=int(self.score_value or 0),
            time_score=int(self.time_score or 0),
        )

    def to_dict(self):
        return self.to_record().to_dict()
