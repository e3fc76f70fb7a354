"""Modelos MatchResult e PlayerScored"""
from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from league_api.models.base import BaseModel


class MatchResult(BaseModel):
    """Resultado final de uma partida (imutável depois de criado)"""
    __tablename__ = "match_results"

    match_id = Column(Integer, ForeignKey("match_schedules.id"), nullable=False, unique=True, index=True)
    home_score = Column(Integer, nullable=False, default=0)
    away_score = Column(Integer, nullable=False, default=0)
    # NULL = empate
    winner_team_id = Column(Integer, ForeignKey("teams.id"), nullable=True, index=True)

    # Relationships
    player_scored = relationship(
        "PlayerScored",
        back_populates="match_result",
        cascade="all, delete-orphan",
        order_by="PlayerScored.id",
    )

    def __repr__(self):
        return (
            f"<MatchResult(match_id={self.match_id}, {self.home_score}-{self.away_score}, "
            f"winner={self.winner_team_id})>"
        )


class PlayerScored(BaseModel):
    """Gol marcado por um jogador em uma partida"""
    __tablename__ = "player_scored"

    match_result_id = Column(Integer, ForeignKey("match_results.id"), nullable=False, index=True)
    match_id = Column(Integer, ForeignKey("match_schedules.id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    time_scored = Column(Integer, nullable=False)

    # Relationships
    match_result = relationship("MatchResult", back_populates="player_scored")

    def __repr__(self):
        return (
            f"<PlayerScored(match_id={self.match_id}, player_id={self.player_id}, "
            f"minute={self.time_scored})>"
        )
