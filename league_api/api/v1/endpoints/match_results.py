"""Endpoints de Resultados de Partidas"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from league_api.api.v1.endpoints.deps import admin_only, authenticated
from league_api.core.cache import cache, match_detail_key
from league_api.core.database import get_db
from league_api.schemas.match_result import (
    MatchResultCreate,
    MatchResultDetailResponse,
    MatchResultResponse,
)
from league_api.services.match_result_detail_service import MatchResultDetailService
from league_api.services.match_result_service import MatchResultService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=authenticated)
admin_router = APIRouter(dependencies=admin_only)
detail_router = APIRouter(dependencies=authenticated)


@router.get("/{match_id}", response_model=MatchResultResponse)
async def get_match_result(match_id: int, db: AsyncSession = Depends(get_db)):
    """Obtém o resultado de uma partida"""
    result = await MatchResultService(db).get_result(match_id)
    return MatchResultResponse.model_validate(result)


@admin_router.post("/", response_model=MatchResultResponse, status_code=status.HTTP_201_CREATED)
async def create_match_result(payload: MatchResultCreate, db: AsyncSession = Depends(get_db)):
    """Registra o resultado de uma partida (uma única vez)"""
    result = await MatchResultService(db).create_result(payload)
    # Totais de vitórias de todos os detalhes mudam
    await cache.invalidate_match_details()
    return MatchResultResponse.model_validate(result)


@detail_router.get("/{match_id}", response_model=MatchResultDetailResponse)
async def get_match_result_detail(match_id: int, db: AsyncSession = Depends(get_db)):
    """Detalhe do resultado: status, MVP e total de vitórias dos times"""
    cache_key = match_detail_key(match_id)
    cached_result = await cache.get(cache_key)
    if cached_result:
        logger.debug(f"Cache hit: {cache_key}")
        return cached_result

    detail = await MatchResultDetailService(db).get_match_detail(match_id)
    await cache.set(cache_key, detail.model_dump(mode="json"))
    return detail
