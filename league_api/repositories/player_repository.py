"""Repository de Player (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, func
from typing import List, Optional, Tuple
from league_api.core.pagination import page_offset
from league_api.models.player import Player
from league_api.models.team import Team

PLAYER_STATUS_ACTIVE = "active"
PLAYER_STATUS_INACTIVE = "inactive"


class PlayerRepository:
    """Repository async para operações de banco com Player"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _with_team_name(self):
        return (
            select(Player, Team.name.label("team_name"))
            .join(Team, Player.team_id == Team.id, isouter=True)
        )

    async def get_by_id(self, player_id: int) -> Optional[Tuple[Player, Optional[str]]]:
        """Obtém jogador ativo por ID junto com o nome do time"""
        result = await self.db.execute(
            self._with_team_name().filter(Player.id == player_id, Player.deleted_at.is_(None))
        )
        row = result.first()
        return (row[0], row[1]) if row else None

    async def get_existing_ids(self, player_ids: List[int]) -> List[int]:
        """IDs de jogadores existentes (inclui inativos, que podem ter marcado no passado)"""
        result = await self.db.execute(select(Player.id).filter(Player.id.in_(player_ids)))
        return list(result.scalars().all())

    async def get_by_team_and_back_number(self, team_id: int, back_number: int) -> Optional[Player]:
        """Obtém jogador ativo do time com o número de camisa informado"""
        result = await self.db.execute(
            select(Player).filter(
                Player.team_id == team_id,
                Player.back_number == back_number,
                Player.deleted_at.is_(None),
            )
        )
        return result.scalars().first()

    async def get_by_filter(
        self,
        name: Optional[str] = None,
        position: Optional[str] = None,
        team_name: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Tuple[Player, Optional[str]]], int]:
        """Lista jogadores com filtros e paginação; retorna ([(jogador, nome_time)], total)"""
        query = self._with_team_name()
        if status == PLAYER_STATUS_INACTIVE:
            query = query.filter(Player.deleted_at.is_not(None))
        else:
            query = query.filter(Player.deleted_at.is_(None))
        if name:
            query = query.filter(Player.name.ilike(f"%{name}%"))
        if position:
            query = query.filter(Player.position == position)
        if team_name:
            query = query.filter(Team.name.ilike(f"%{team_name}%"))

        total = await self.db.scalar(select(func.count()).select_from(query.subquery()))

        result = await self.db.execute(
            query.order_by(Player.id).offset(page_offset(page, limit)).limit(limit)
        )
        return [(player, team) for player, team in result.all()], total or 0

    async def create(self, player_data: dict) -> Player:
        """Cria novo jogador"""
        player = Player(**player_data)
        self.db.add(player)
        await self._commit()
        await self.db.refresh(player)
        return player

    async def update(self, player: Player, player_data: dict) -> Player:
        """Atualiza jogador"""
        for key, value in player_data.items():
            setattr(player, key, value)
        await self._commit()
        await self.db.refresh(player)
        return player

    async def _commit(self):
        # Índice único parcial (team_id, back_number) é a garantia final
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise

    async def delete(self, player: Player) -> None:
        """Exclusão lógica do jogador"""
        player.soft_delete()
        await self.db.commit()
