"""Service de MatchSchedule (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import Iterable, Optional
import datetime as dt
import logging
from league_api.core.exceptions import (
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from league_api.core.pagination import normalize_pagination, paginated
from league_api.models.match_schedule import MatchSchedule
from league_api.repositories.match_repository import MatchRepository
from league_api.repositories.team_repository import TeamRepository
from league_api.schemas.match import (
    MatchScheduleCreate,
    MatchScheduleUpdate,
    MatchScheduleResponse,
)

logger = logging.getLogger(__name__)

SAME_TEAM_MESSAGE = "Mandante e visitante não podem ser o mesmo time"


def to_schedule_response(match: MatchSchedule, home_team_name: Optional[str],
                         away_team_name: Optional[str]) -> MatchScheduleResponse:
    return MatchScheduleResponse(
        id=match.id,
        date=match.date,
        time=match.time,
        home_team_id=match.home_team_id,
        away_team_id=match.away_team_id,
        home_team_name=home_team_name,
        away_team_name=away_team_name,
    )


class MatchService:
    """
    Service async para agendas de partidas.

    Toda escrita segue a mesma ordem: valida os times, confirma que existem,
    checa conflito de data para mandante e visitante e só então grava. Uma
    falha em qualquer etapa não deixa nada gravado.
    """

    def __init__(
        self,
        db: AsyncSession,
        repository: Optional[MatchRepository] = None,
        team_repository: Optional[TeamRepository] = None,
    ):
        self.db = db
        self.repository = repository or MatchRepository(db)
        self.team_repository = team_repository or TeamRepository(db)

    async def _ensure_teams_exist(self, team_ids: Iterable[int]):
        team_ids = list(team_ids)
        existing = set(await self.team_repository.get_existing_ids(team_ids))
        missing = [team_id for team_id in team_ids if team_id not in existing]
        if missing:
            raise NotFoundError(f"Time com ID {missing[0]} não encontrado")

    async def ensure_no_conflict(self, team_ids: Iterable[int], date: dt.date,
                                 exclude_match_id: Optional[int] = None):
        """Rejeita se algum dos times já joga na data (ignorando exclude_match_id)"""
        for team_id in team_ids:
            try:
                conflict = await self.repository.has_team_conflict(team_id, date, exclude_match_id)
            except SQLAlchemyError as e:
                logger.exception(f"Erro ao verificar agenda do time {team_id}: {e}")
                raise InfrastructureError("Falha ao validar a agenda do time")
            if conflict:
                logger.warning(f"Conflito de agenda: time {team_id} em {date}")
                raise ConflictError(
                    f"O time com ID {team_id} já tem partida agendada em {date.isoformat()}"
                )

    async def list_matches(
        self,
        date: Optional[dt.date] = None,
        home_team_name: Optional[str] = None,
        away_team_name: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> dict:
        page, limit = normalize_pagination(page, limit)
        rows, total = await self.repository.get_by_filter(
            date=date, home_team_name=home_team_name, away_team_name=away_team_name,
            page=page, limit=limit,
        )
        data = [to_schedule_response(*row) for row in rows]
        return paginated(data, total, page, limit)

    async def get_match(self, match_id: int) -> MatchScheduleResponse:
        row = await self.repository.get_by_id(match_id)
        if not row:
            raise NotFoundError("Agenda de partida não encontrada")
        return to_schedule_response(*row)

    async def create_match(self, data: MatchScheduleCreate) -> MatchScheduleResponse:
        """Agenda uma partida"""
        if data.home_team_id == data.away_team_id:
            raise ValidationError(SAME_TEAM_MESSAGE)

        await self._ensure_teams_exist([data.home_team_id, data.away_team_id])
        await self.ensure_no_conflict([data.home_team_id, data.away_team_id], data.date)

        match = await self.repository.create(data.model_dump())
        logger.info(
            f"Partida agendada: {match.id} ({match.home_team_id} x {match.away_team_id}) "
            f"em {match.date}"
        )
        return await self.get_match(match.id)

    async def update_match(self, match_id: int, data: MatchScheduleUpdate) -> MatchScheduleResponse:
        """Atualiza apenas os campos enviados, rechecando conflitos se data ou times mudarem"""
        row = await self.repository.get_by_id(match_id)
        if not row:
            raise NotFoundError("Agenda de partida não encontrada")
        match = row[0]

        changes = data.model_dump(exclude_unset=True)
        for field in ("date", "home_team_id", "away_team_id"):
            if changes.get(field, "") is None:
                changes.pop(field)

        new_date = changes.get("date", match.date)
        home_team_id = changes.get("home_team_id", match.home_team_id)
        away_team_id = changes.get("away_team_id", match.away_team_id)

        if home_team_id == away_team_id:
            raise ValidationError(SAME_TEAM_MESSAGE)

        changed_teams = [
            team_id
            for team_id, current in ((home_team_id, match.home_team_id), (away_team_id, match.away_team_id))
            if team_id != current
        ]
        if changed_teams:
            await self._ensure_teams_exist(changed_teams)

        if new_date != match.date or changed_teams:
            await self.ensure_no_conflict([home_team_id, away_team_id], new_date,
                                          exclude_match_id=match_id)

        if changes:
            await self.repository.update(match, changes)
            logger.info(f"Partida atualizada: {match_id} campos={sorted(changes)}")
        return await self.get_match(match_id)

    async def delete_match(self, match_id: int) -> None:
        row = await self.repository.get_by_id(match_id)
        if not row:
            raise NotFoundError("Agenda de partida não encontrada")
        await self.repository.delete(row[0])
        logger.info(f"Partida removida: {match_id}")
