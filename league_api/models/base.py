"""Modelo base para todos os models"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, DateTime, func
from league_api.core.database import Base


class BaseModel(Base):
    """Classe base abstrata para todos os modelos"""
    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class SoftDeleteModel(BaseModel):
    """Base para modelos com exclusão lógica"""
    __abstract__ = True

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    def soft_delete(self):
        self.deleted_at = datetime.now(timezone.utc)
