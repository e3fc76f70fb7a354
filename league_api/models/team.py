"""Modelo Team"""
from sqlalchemy import Column, String, Text
from league_api.models.base import SoftDeleteModel


class Team(SoftDeleteModel):
    """Modelo de Time"""
    __tablename__ = "teams"

    name = Column(String(255), nullable=False, index=True)
    logo = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}', city='{self.city}')>"
