"""Modelo MatchSchedule"""
from sqlalchemy import Column, Integer, Date, Time, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from league_api.models.base import SoftDeleteModel


class MatchSchedule(SoftDeleteModel):
    """Modelo de Agenda de Partida"""
    __tablename__ = "match_schedules"

    date = Column(Date, nullable=False, index=True)
    time = Column(Time, nullable=True)
    home_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    away_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    # Relationships
    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])

    __table_args__ = (
        CheckConstraint("home_team_id <> away_team_id", name="ck_match_distinct_teams"),
    )

    def __repr__(self):
        return (
            f"<MatchSchedule(id={self.id}, date={self.date}, "
            f"home={self.home_team_id}, away={self.away_team_id})>"
        )
