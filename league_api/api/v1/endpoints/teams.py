"""Endpoints de Times"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from league_api.api.v1.endpoints.deps import admin_only, authenticated
from league_api.core.cache import cache
from league_api.core.database import get_db
from league_api.schemas.common import MessageResponse, PaginatedResponse
from league_api.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from league_api.services.team_service import TeamService

router = APIRouter(dependencies=authenticated)
admin_router = APIRouter(dependencies=admin_only)


@router.get("/", response_model=PaginatedResponse[TeamResponse])
async def list_teams(
    name: Optional[str] = Query(None, description="Filtro parcial por nome"),
    location: Optional[str] = Query(None),
    city: Optional[str] = Query(None),
    page: int = Query(1),
    limit: int = Query(10),
    db: AsyncSession = Depends(get_db)
):
    """Lista times com filtros e paginação"""
    return await TeamService(db).list_teams(
        name=name, location=location, city=city, page=page, limit=limit
    )


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(team_id: int, db: AsyncSession = Depends(get_db)):
    """Obtém um time por ID"""
    team = await TeamService(db).get_team(team_id)
    return TeamResponse.model_validate(team)


@admin_router.post("/", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(payload: TeamCreate, db: AsyncSession = Depends(get_db)):
    """Cria um time"""
    team = await TeamService(db).create_team(payload)
    return TeamResponse.model_validate(team)


@admin_router.put("/{team_id}", response_model=TeamResponse)
async def update_team(team_id: int, payload: TeamUpdate, db: AsyncSession = Depends(get_db)):
    """Atualiza um time (apenas campos enviados)"""
    team = await TeamService(db).update_team(team_id, payload)
    await cache.invalidate_match_details()
    return TeamResponse.model_validate(team)


@admin_router.delete("/{team_id}", response_model=MessageResponse)
async def delete_team(team_id: int, db: AsyncSession = Depends(get_db)):
    """Remove um time (exclusão lógica)"""
    await TeamService(db).delete_team(team_id)
    return MessageResponse(message="Time removido com sucesso")
