"""Service do detalhe de resultado (read-model)"""
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from league_api.core.exceptions import NotFoundError
from league_api.repositories.match_repository import MatchRepository
from league_api.repositories.match_result_repository import MatchResultRepository
from league_api.schemas.match_result import MatchResultDetailResponse, PlayerScoredResponse
from league_api.services.match_rules import determine_match_status


class MatchResultDetailService:
    """
    Compõe agenda, resultado e gols num detalhe da partida.

    São leituras independentes, sem atomicidade entre elas: com escritas
    concorrentes o total de vitórias pode vir ligeiramente defasado.
    """

    def __init__(
        self,
        db: AsyncSession,
        match_repository: Optional[MatchRepository] = None,
        result_repository: Optional[MatchResultRepository] = None,
    ):
        self.db = db
        self.match_repository = match_repository or MatchRepository(db)
        self.result_repository = result_repository or MatchResultRepository(db)

    async def get_match_detail(self, match_id: int) -> MatchResultDetailResponse:
        # Resultado cuja agenda foi removida é inconsistência: responde 404
        row = await self.match_repository.get_by_id(match_id)
        if not row:
            raise NotFoundError("Agenda de partida não encontrada")
        schedule, home_team_name, away_team_name = row

        result = await self.result_repository.get_by_match_id(match_id)
        if not result:
            raise NotFoundError("Resultado da partida não encontrado")

        mvp = await self.result_repository.get_mvp_name(match_id)
        home_wins = await self.result_repository.count_wins(schedule.home_team_id)
        away_wins = await self.result_repository.count_wins(schedule.away_team_id)

        return MatchResultDetailResponse(
            id=result.id,
            match_id=result.match_id,
            home_score=result.home_score,
            away_score=result.away_score,
            winner_team_id=result.winner_team_id,
            created_at=result.created_at,
            player_scored=[PlayerScoredResponse.model_validate(goal) for goal in result.player_scored],
            home_team_name=home_team_name,
            away_team_name=away_team_name,
            match_status=determine_match_status(
                result.winner_team_id, schedule.home_team_id, schedule.away_team_id
            ),
            mvp=mvp,
            home_team_total_wins=home_wins,
            away_team_total_wins=away_wins,
        )
