"""Repository de MatchResult (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlalchemy import select, func
from typing import List, Optional
from league_api.models.match_result import MatchResult, PlayerScored
from league_api.models.player import Player


class MatchResultRepository:
    """Repository async para operações de banco com MatchResult"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_match_id(self, match_id: int) -> Optional[MatchResult]:
        """Obtém resultado pelo ID da partida, com os gols carregados"""
        result = await self.db.execute(
            select(MatchResult)
            .options(selectinload(MatchResult.player_scored))
            .filter(MatchResult.match_id == match_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists_for_match(self, match_id: int) -> bool:
        """Verifica se a partida já tem resultado"""
        count = await self.db.scalar(
            select(func.count(MatchResult.id)).filter(MatchResult.match_id == match_id)
        )
        return (count or 0) > 0

    async def create(self, result_data: dict, scored: List[dict]) -> MatchResult:
        """
        Cria o resultado e os gols numa única transação.

        A unicidade de match_id no banco garante um resultado por partida
        mesmo com requisições concorrentes (IntegrityError).
        """
        match_result = MatchResult(
            **result_data,
            player_scored=[
                PlayerScored(match_id=result_data["match_id"], **goal) for goal in scored
            ],
        )
        self.db.add(match_result)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        return await self.get_by_match_id(match_result.match_id)

    async def count_wins(self, team_id: int) -> int:
        """Total histórico de vitórias do time"""
        count = await self.db.scalar(
            select(func.count(MatchResult.id)).filter(MatchResult.winner_team_id == team_id)
        )
        return count or 0

    async def get_mvp_name(self, match_id: int) -> Optional[str]:
        """
        Jogador com mais gols na partida.

        Empates no número de gols são decididos pelo menor ID de jogador.
        """
        result = await self.db.execute(
            select(Player.name)
            .join(PlayerScored, PlayerScored.player_id == Player.id)
            .filter(PlayerScored.match_id == match_id)
            .group_by(Player.id, Player.name)
            .order_by(func.count(PlayerScored.id).desc(), Player.id.asc())
            .limit(1)
        )
        return result.scalars().first()
