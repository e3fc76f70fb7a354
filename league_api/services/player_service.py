"""Service de Player (Async)"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging
from league_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from league_api.core.pagination import normalize_pagination, paginated
from league_api.core.validators import allowed_positions_message, normalize_player_position
from league_api.models.player import Player
from league_api.repositories.player_repository import (
    PLAYER_STATUS_ACTIVE,
    PLAYER_STATUS_INACTIVE,
    PlayerRepository,
)
from league_api.repositories.team_repository import TeamRepository
from league_api.schemas.player import PlayerCreate, PlayerUpdate, PlayerResponse

logger = logging.getLogger(__name__)

BACK_NUMBER_TAKEN = "Já existe um jogador com este número de camisa neste time"


def to_player_response(player: Player, team_name: Optional[str]) -> PlayerResponse:
    return PlayerResponse(
        id=player.id,
        name=player.name,
        weight=player.weight,
        height=player.height,
        position=player.position,
        back_number=player.back_number,
        team_id=player.team_id,
        team_name=team_name,
    )


class PlayerService:
    """Service async para operações com jogadores"""

    def __init__(
        self,
        db: AsyncSession,
        repository: Optional[PlayerRepository] = None,
        team_repository: Optional[TeamRepository] = None,
    ):
        self.db = db
        self.repository = repository or PlayerRepository(db)
        self.team_repository = team_repository or TeamRepository(db)

    @staticmethod
    def _canonical_position(position: str) -> str:
        canonical, ok = normalize_player_position(position)
        if not ok:
            raise ValidationError(allowed_positions_message())
        return canonical

    async def _ensure_team_exists(self, team_id: int):
        if not await self.team_repository.get_by_id(team_id):
            raise NotFoundError("Time não encontrado")

    async def _ensure_back_number_free(self, team_id: int, back_number: int,
                                       player_id: Optional[int] = None):
        existing = await self.repository.get_by_team_and_back_number(team_id, back_number)
        if existing and existing.id != player_id:
            logger.warning(
                f"Número de camisa {back_number} já usado no time {team_id} "
                f"(jogador {existing.id})"
            )
            raise ConflictError(BACK_NUMBER_TAKEN)

    async def list_players(
        self,
        name: Optional[str] = None,
        position: Optional[str] = None,
        team_name: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> dict:
        """Lista jogadores paginados (status=inactive lista os removidos)"""
        if status and status not in (PLAYER_STATUS_ACTIVE, PLAYER_STATUS_INACTIVE):
            raise ValidationError("Status inválido. Use 'active' ou 'inactive'")
        if position:
            position = self._canonical_position(position)

        page, limit = normalize_pagination(page, limit)
        rows, total = await self.repository.get_by_filter(
            name=name, position=position, team_name=team_name,
            status=status, page=page, limit=limit,
        )
        data = [to_player_response(player, team) for player, team in rows]
        return paginated(data, total, page, limit)

    async def get_player(self, player_id: int) -> PlayerResponse:
        row = await self.repository.get_by_id(player_id)
        if not row:
            raise NotFoundError("Jogador não encontrado")
        return to_player_response(*row)

    async def create_player(self, data: PlayerCreate) -> PlayerResponse:
        """Cria jogador validando posição, time e número de camisa"""
        position = self._canonical_position(data.position)
        await self._ensure_team_exists(data.team_id)
        await self._ensure_back_number_free(data.team_id, data.back_number)

        player_data = data.model_dump()
        player_data["position"] = position
        try:
            player = await self.repository.create(player_data)
        except IntegrityError:
            raise ConflictError(BACK_NUMBER_TAKEN)

        logger.info(f"Jogador criado: {player.id} ({player.name}) no time {player.team_id}")
        return await self.get_player(player.id)

    async def update_player(self, player_id: int, data: PlayerUpdate) -> PlayerResponse:
        """Atualiza apenas os campos enviados"""
        row = await self.repository.get_by_id(player_id)
        if not row:
            raise NotFoundError("Jogador não encontrado")
        player, _ = row

        changes = data.model_dump(exclude_unset=True)
        for field in ("name", "position", "back_number", "team_id"):
            if changes.get(field, "") is None:
                changes.pop(field)

        if "position" in changes:
            changes["position"] = self._canonical_position(changes["position"])

        team_id = changes.get("team_id", player.team_id)
        back_number = changes.get("back_number", player.back_number)
        if team_id != player.team_id:
            await self._ensure_team_exists(team_id)
        if team_id != player.team_id or back_number != player.back_number:
            await self._ensure_back_number_free(team_id, back_number, player_id=player.id)

        if changes:
            try:
                await self.repository.update(player, changes)
            except IntegrityError:
                raise ConflictError(BACK_NUMBER_TAKEN)
            logger.info(f"Jogador atualizado: {player_id} campos={sorted(changes)}")

        return await self.get_player(player_id)

    async def delete_player(self, player_id: int) -> None:
        row = await self.repository.get_by_id(player_id)
        if not row:
            raise NotFoundError("Jogador não encontrado")
        await self.repository.delete(row[0])
        logger.info(f"Jogador removido: {player_id}")
