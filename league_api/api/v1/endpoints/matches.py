"""Endpoints de Agenda de Partidas"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import datetime as dt
from league_api.api.v1.endpoints.deps import admin_only, authenticated
from league_api.core.cache import cache
from league_api.core.database import get_db
from league_api.schemas.common import MessageResponse, PaginatedResponse
from league_api.schemas.match import (
    MatchScheduleCreate,
    MatchScheduleResponse,
    MatchScheduleUpdate,
)
from league_api.services.match_service import MatchService

router = APIRouter(dependencies=authenticated)
admin_router = APIRouter(dependencies=admin_only)


@router.get("/", response_model=PaginatedResponse[MatchScheduleResponse])
async def list_matches(
    date: Optional[dt.date] = Query(None, description="Data da partida (YYYY-MM-DD)"),
    home_team_name: Optional[str] = Query(None),
    away_team_name: Optional[str] = Query(None),
    page: int = Query(1),
    limit: int = Query(10),
    db: AsyncSession = Depends(get_db)
):
    """Lista partidas agendadas com filtros e paginação"""
    return await MatchService(db).list_matches(
        date=date, home_team_name=home_team_name, away_team_name=away_team_name,
        page=page, limit=limit,
    )


@router.get("/{match_id}", response_model=MatchScheduleResponse)
async def get_match(match_id: int, db: AsyncSession = Depends(get_db)):
    """Obtém uma partida agendada por ID"""
    return await MatchService(db).get_match(match_id)


@admin_router.post("/", response_model=MatchScheduleResponse, status_code=status.HTTP_201_CREATED)
async def create_match(payload: MatchScheduleCreate, db: AsyncSession = Depends(get_db)):
    """Agenda uma partida"""
    return await MatchService(db).create_match(payload)


@admin_router.put("/{match_id}", response_model=MatchScheduleResponse)
async def update_match(match_id: int, payload: MatchScheduleUpdate, db: AsyncSession = Depends(get_db)):
    """Atualiza uma partida agendada (apenas campos enviados)"""
    match = await MatchService(db).update_match(match_id, payload)
    await cache.invalidate_match_details()
    return match


@admin_router.delete("/{match_id}", response_model=MessageResponse)
async def delete_match(match_id: int, db: AsyncSession = Depends(get_db)):
    """Remove uma partida agendada (exclusão lógica)"""
    await MatchService(db).delete_match(match_id)
    await cache.invalidate_match_details()
    return MessageResponse(message="Partida removida com sucesso")
