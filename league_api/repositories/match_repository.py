"""Repository de MatchSchedule (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from sqlalchemy.orm import aliased
from typing import List, Optional, Tuple
import datetime as dt
from league_api.core.pagination import page_offset
from league_api.models.match_schedule import MatchSchedule
from league_api.models.team import Team

# (agenda, nome do mandante, nome do visitante)
ScheduleRow = Tuple[MatchSchedule, Optional[str], Optional[str]]

HomeTeam = aliased(Team, name="home_team")
AwayTeam = aliased(Team, name="away_team")


class MatchRepository:
    """Repository async para operações de banco com MatchSchedule"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _with_team_names(self):
        return (
            select(
                MatchSchedule,
                HomeTeam.name.label("home_team_name"),
                AwayTeam.name.label("away_team_name"),
            )
            .join(HomeTeam, HomeTeam.id == MatchSchedule.home_team_id, isouter=True)
            .join(AwayTeam, AwayTeam.id == MatchSchedule.away_team_id, isouter=True)
            .filter(MatchSchedule.deleted_at.is_(None))
        )

    async def get_by_id(self, match_id: int) -> Optional[ScheduleRow]:
        """Obtém agenda ativa por ID com os nomes dos times"""
        result = await self.db.execute(
            self._with_team_names().filter(MatchSchedule.id == match_id)
        )
        row = result.first()
        return (row[0], row[1], row[2]) if row else None

    async def get_by_filter(
        self,
        date: Optional[dt.date] = None,
        home_team_name: Optional[str] = None,
        away_team_name: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[ScheduleRow], int]:
        """Lista agendas com filtros e paginação; retorna (linhas, total)"""
        query = self._with_team_names()
        if date:
            query = query.filter(MatchSchedule.date == date)
        if home_team_name:
            query = query.filter(HomeTeam.name.ilike(f"%{home_team_name}%"))
        if away_team_name:
            query = query.filter(AwayTeam.name.ilike(f"%{away_team_name}%"))

        total = await self.db.scalar(select(func.count()).select_from(query.subquery()))

        result = await self.db.execute(
            query.order_by(MatchSchedule.date, MatchSchedule.time, MatchSchedule.id)
            .offset(page_offset(page, limit))
            .limit(limit)
        )
        return [(m, home, away) for m, home, away in result.all()], total or 0

    async def has_team_conflict(
        self,
        team_id: int,
        date: dt.date,
        exclude_match_id: Optional[int] = None,
    ) -> bool:
        """
        Verifica se o time já tem partida agendada na data (como mandante ou visitante).

        exclude_match_id ignora a própria partida numa atualização; None ou 0
        não exclui nada.
        """
        query = select(func.count(MatchSchedule.id)).filter(
            MatchSchedule.deleted_at.is_(None),
            MatchSchedule.date == date,
            or_(
                MatchSchedule.home_team_id == team_id,
                MatchSchedule.away_team_id == team_id,
            ),
        )
        if exclude_match_id:
            query = query.filter(MatchSchedule.id != exclude_match_id)
        count = await self.db.scalar(query)
        return (count or 0) > 0

    async def create(self, match_data: dict) -> MatchSchedule:
        """Cria nova agenda"""
        match = MatchSchedule(**match_data)
        self.db.add(match)
        await self.db.commit()
        await self.db.refresh(match)
        return match

    async def update(self, match: MatchSchedule, match_data: dict) -> MatchSchedule:
        """Atualiza agenda"""
        for key, value in match_data.items():
            setattr(match, key, value)
        await self.db.commit()
        await self.db.refresh(match)
        return match

    async def delete(self, match: MatchSchedule) -> None:
        """Exclusão lógica da agenda"""
        match.soft_delete()
        await self.db.commit()
