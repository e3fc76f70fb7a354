"""Modelo User"""
from sqlalchemy import Column, String
from league_api.models.base import BaseModel


class User(BaseModel):
    """Modelo de Usuário"""
    __tablename__ = "users"

    user_id = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="user")
    status = Column(String(20), nullable=False, default="active")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
