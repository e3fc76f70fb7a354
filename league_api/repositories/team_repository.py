"""Repository de Team (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import List, Optional, Sequence, Tuple
from league_api.core.pagination import page_offset
from league_api.models.team import Team


class TeamRepository:
    """Repository async para operações de banco com Team"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _active(self):
        return select(Team).filter(Team.deleted_at.is_(None))

    async def get_by_id(self, team_id: int) -> Optional[Team]:
        """Obtém time ativo por ID"""
        result = await self.db.execute(self._active().filter(Team.id == team_id))
        return result.scalar_one_or_none()

    async def get_existing_ids(self, team_ids: Sequence[int]) -> List[int]:
        """Retorna, dentre os IDs informados, os que pertencem a times ativos"""
        result = await self.db.execute(
            select(Team.id).filter(Team.id.in_(list(team_ids)), Team.deleted_at.is_(None))
        )
        return list(result.scalars().all())

    async def get_by_filter(
        self,
        name: Optional[str] = None,
        location: Optional[str] = None,
        city: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Team], int]:
        """Lista times com filtros parciais e paginação; retorna (times, total)"""
        query = self._active()
        if name:
            query = query.filter(Team.name.ilike(f"%{name}%"))
        if location:
            query = query.filter(Team.location.ilike(f"%{location}%"))
        if city:
            query = query.filter(Team.city.ilike(f"%{city}%"))

        total = await self.db.scalar(select(func.count()).select_from(query.subquery()))

        result = await self.db.execute(
            query.order_by(Team.id).offset(page_offset(page, limit)).limit(limit)
        )
        return list(result.scalars().all()), total or 0

    async def create(self, team_data: dict) -> Team:
        """Cria novo time"""
        team = Team(**team_data)
        self.db.add(team)
        await self.db.commit()
        await self.db.refresh(team)
        return team

    async def update(self, team: Team, team_data: dict) -> Team:
        """Atualiza time"""
        for key, value in team_data.items():
            setattr(team, key, value)
        await self.db.commit()
        await self.db.refresh(team)
        return team

    async def delete(self, team: Team) -> None:
        """Exclusão lógica do time"""
        team.soft_delete()
        await self.db.commit()
