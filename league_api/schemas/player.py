"""Schemas de Player"""
from pydantic import BaseModel, Field
from typing import Optional


class PlayerCreate(BaseModel):
    """Schema para criação de Player"""
    name: str = Field(..., min_length=1, max_length=255)
    weight: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)
    position: str
    back_number: int = Field(..., ge=0, le=999)
    team_id: int = Field(..., gt=0)


class PlayerUpdate(BaseModel):
    """Schema para atualização de Player"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    weight: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)
    position: Optional[str] = None
    back_number: Optional[int] = Field(None, ge=0, le=999)
    team_id: Optional[int] = Field(None, gt=0)


class PlayerResponse(BaseModel):
    """Schema de resposta de Player"""
    id: int
    name: str
    weight: Optional[int] = None
    height: Optional[int] = None
    position: str
    back_number: int
    team_id: int
    team_name: Optional[str] = None
