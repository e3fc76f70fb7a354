"""Service de Team (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging
from league_api.core.exceptions import NotFoundError
from league_api.core.pagination import normalize_pagination, paginated
from league_api.models.team import Team
from league_api.repositories.team_repository import TeamRepository
from league_api.schemas.team import TeamCreate, TeamUpdate, TeamResponse

logger = logging.getLogger(__name__)


class TeamService:
    """Service async para operações com times"""

    def __init__(self, db: AsyncSession, repository: Optional[TeamRepository] = None):
        self.db = db
        self.repository = repository or TeamRepository(db)

    async def list_teams(
        self,
        name: Optional[str] = None,
        location: Optional[str] = None,
        city: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> dict:
        """Lista times paginados"""
        page, limit = normalize_pagination(page, limit)
        teams, total = await self.repository.get_by_filter(
            name=name, location=location, city=city, page=page, limit=limit
        )
        data = [TeamResponse.model_validate(team) for team in teams]
        return paginated(data, total, page, limit)

    async def get_team(self, team_id: int) -> Team:
        """Obtém time por ID"""
        team = await self.repository.get_by_id(team_id)
        if not team:
            raise NotFoundError("Time não encontrado")
        return team

    async def create_team(self, data: TeamCreate) -> Team:
        team = await self.repository.create(data.model_dump())
        logger.info(f"Time criado: {team.id} ({team.name})")
        return team

    async def update_team(self, team_id: int, data: TeamUpdate) -> Team:
        """Atualiza apenas os campos enviados; nome nulo é ignorado"""
        team = await self.get_team(team_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("name", "") is None:
            changes.pop("name")
        if not changes:
            return team
        team = await self.repository.update(team, changes)
        logger.info(f"Time atualizado: {team.id} campos={sorted(changes)}")
        return team

    async def delete_team(self, team_id: int) -> None:
        team = await self.get_team(team_id)
        await self.repository.delete(team)
        logger.info(f"Time removido: {team_id}")
