"""Endpoints de Jogadores"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from league_api.api.v1.endpoints.deps import admin_only, authenticated
from league_api.core.cache import cache
from league_api.core.database import get_db
from league_api.schemas.common import MessageResponse, PaginatedResponse
from league_api.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate
from league_api.services.player_service import PlayerService

router = APIRouter(dependencies=authenticated)
admin_router = APIRouter(dependencies=admin_only)


@router.get("/", response_model=PaginatedResponse[PlayerResponse])
async def list_players(
    name: Optional[str] = Query(None),
    position: Optional[str] = Query(None),
    team_name: Optional[str] = Query(None),
    status: Optional[str] = Query(None, description="active (padrão) ou inactive"),
    page: int = Query(1),
    limit: int = Query(10),
    db: AsyncSession = Depends(get_db)
):
    """Lista jogadores com filtros e paginação"""
    return await PlayerService(db).list_players(
        name=name, position=position, team_name=team_name,
        status=status, page=page, limit=limit,
    )


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: int, db: AsyncSession = Depends(get_db)):
    """Obtém um jogador por ID"""
    return await PlayerService(db).get_player(player_id)


@admin_router.post("/", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
async def create_player(payload: PlayerCreate, db: AsyncSession = Depends(get_db)):
    """Cria um jogador"""
    return await PlayerService(db).create_player(payload)


@admin_router.put("/{player_id}", response_model=PlayerResponse)
async def update_player(player_id: int, payload: PlayerUpdate, db: AsyncSession = Depends(get_db)):
    """Atualiza um jogador (apenas campos enviados)"""
    player = await PlayerService(db).update_player(player_id, payload)
    # Nome do MVP aparece nos detalhes em cache
    await cache.invalidate_match_details()
    return player


@admin_router.delete("/{player_id}", response_model=MessageResponse)
async def delete_player(player_id: int, db: AsyncSession = Depends(get_db)):
    """Remove um jogador (exclusão lógica)"""
    await PlayerService(db).delete_player(player_id)
    await cache.invalidate_match_details()
    return MessageResponse(message="Jogador removido com sucesso")
