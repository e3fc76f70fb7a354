"""Service de MatchResult (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging
from league_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from league_api.models.match_result import MatchResult
from league_api.repositories.match_repository import MatchRepository
from league_api.repositories.match_result_repository import MatchResultRepository
from league_api.repositories.player_repository import PlayerRepository
from league_api.schemas.match_result import MatchResultCreate
from league_api.services.match_rules import resolve_winner

logger = logging.getLogger(__name__)

RESULT_EXISTS_MESSAGE = "Já existe um resultado para esta partida"


class MatchResultService:
    """
    Service async para resultados de partidas.

    Um resultado só é criado para uma agenda existente e uma única vez por
    partida; depois disso é imutável.
    """

    def __init__(
        self,
        db: AsyncSession,
        repository: Optional[MatchResultRepository] = None,
        match_repository: Optional[MatchRepository] = None,
        player_repository: Optional[PlayerRepository] = None,
    ):
        self.db = db
        self.repository = repository or MatchResultRepository(db)
        self.match_repository = match_repository or MatchRepository(db)
        self.player_repository = player_repository or PlayerRepository(db)

    async def get_result(self, match_id: int) -> MatchResult:
        result = await self.repository.get_by_match_id(match_id)
        if not result:
            raise NotFoundError("Resultado da partida não encontrado")
        return result

    async def create_result(self, data: MatchResultCreate) -> MatchResult:
        row = await self.match_repository.get_by_id(data.match_id)
        if not row:
            raise NotFoundError("Agenda de partida não encontrada")
        match = row[0]

        if await self.repository.exists_for_match(data.match_id):
            logger.warning(f"Resultado duplicado para a partida {data.match_id}")
            raise ConflictError(RESULT_EXISTS_MESSAGE)

        match_teams = {match.home_team_id, match.away_team_id}
        for goal in data.player_scored:
            if goal.team_id not in match_teams:
                raise ValidationError(
                    f"O time {goal.team_id} não participa da partida {data.match_id}"
                )
        player_ids = sorted({goal.player_id for goal in data.player_scored})
        if player_ids:
            existing = set(await self.player_repository.get_existing_ids(player_ids))
            missing = [player_id for player_id in player_ids if player_id not in existing]
            if missing:
                raise NotFoundError(f"Jogador com ID {missing[0]} não encontrado")

        winner_team_id = resolve_winner(
            data.home_score, data.away_score, match.home_team_id, match.away_team_id
        )
        try:
            result = await self.repository.create(
                {
                    "match_id": data.match_id,
                    "home_score": data.home_score,
                    "away_score": data.away_score,
                    "winner_team_id": winner_team_id,
                },
                [goal.model_dump() for goal in data.player_scored],
            )
        except IntegrityError:
            # Outra requisição gravou o resultado entre a checagem e o insert
            raise ConflictError(RESULT_EXISTS_MESSAGE)

        logger.info(
            f"Resultado registrado: partida {data.match_id} "
            f"{data.home_score}-{data.away_score} vencedor={winner_team_id}"
        )
        return result
