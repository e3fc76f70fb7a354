"""Schemas de Team"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class TeamBase(BaseModel):
    """Schema base de Team"""
    name: str = Field(..., min_length=1, max_length=255)
    logo: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)


class TeamCreate(TeamBase):
    """Schema para criação de Team"""


class TeamUpdate(BaseModel):
    """Schema para atualização de Team (apenas campos enviados são aplicados)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    logo: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)


class TeamResponse(TeamBase):
    """Schema de resposta de Team"""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
