"""Schemas de MatchResult"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class PlayerScoredCreate(BaseModel):
    """Gol informado na criação do resultado"""
    player_id: int = Field(..., gt=0)
    team_id: int = Field(..., gt=0)
    time_scored: int = Field(..., ge=0, le=200)


class MatchResultCreate(BaseModel):
    """Schema para criação de MatchResult"""
    match_id: int = Field(..., gt=0)
    home_score: int = Field(0, ge=0)
    away_score: int = Field(0, ge=0)
    player_scored: List[PlayerScoredCreate] = Field(default_factory=list)


class PlayerScoredResponse(BaseModel):
    id: int
    match_id: int
    player_id: int
    team_id: int
    time_scored: int

    model_config = ConfigDict(from_attributes=True)


class MatchResultResponse(BaseModel):
    """Schema de resposta de MatchResult"""
    id: int
    match_id: int
    home_score: int
    away_score: int
    winner_team_id: Optional[int] = None
    created_at: datetime
    player_scored: List[PlayerScoredResponse] = []

    model_config = ConfigDict(from_attributes=True)


class MatchResultDetailResponse(MatchResultResponse):
    """Read-model do resultado: status, MVP e total de vitórias de cada time"""
    home_team_name: Optional[str] = None
    away_team_name: Optional[str] = None
    match_status: str
    mvp: Optional[str] = None
    home_team_total_wins: int
    away_team_total_wins: int
