"""Schemas de MatchSchedule"""
from pydantic import BaseModel, Field, model_validator
from typing import Optional
import datetime as dt


class MatchScheduleCreate(BaseModel):
    """Schema para criação de MatchSchedule"""
    date: dt.date
    time: Optional[dt.time] = None
    home_team_id: int = Field(..., gt=0)
    away_team_id: int = Field(..., gt=0)


class MatchScheduleUpdate(BaseModel):
    """Schema para atualização de MatchSchedule"""
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    home_team_id: Optional[int] = Field(None, gt=0)
    away_team_id: Optional[int] = Field(None, gt=0)


class MatchScheduleResponse(BaseModel):
    """Schema de resposta de MatchSchedule com nomes dos times"""
    id: int
    date: dt.date
    time: Optional[dt.time] = None
    home_team_id: int
    away_team_id: int
    home_team_name: Optional[str] = None
    away_team_name: Optional[str] = None
