"""Modelo Player"""
from sqlalchemy import Column, Integer, String, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from league_api.models.base import SoftDeleteModel


class Player(SoftDeleteModel):
    """Modelo de Jogador"""
    __tablename__ = "players"

    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    weight = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    position = Column(String(50), nullable=False)
    back_number = Column(Integer, nullable=False)

    # Relationships
    team = relationship("Team", backref="players")

    __table_args__ = (
        # Número da camisa único por time entre jogadores ativos
        Index(
            "uq_players_team_back_number_active",
            "team_id",
            "back_number",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    def __repr__(self):
        return (
            f"<Player(id={self.id}, name='{self.name}', team_id={self.team_id}, "
            f"back_number={self.back_number})>"
        )
