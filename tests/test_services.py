"""Testes dos services com repositórios falsos"""
import datetime as dt

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from league_api.core.exceptions import (
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from league_api.models.match_result import MatchResult
from league_api.models.match_schedule import MatchSchedule
from league_api.schemas.match import MatchScheduleCreate, MatchScheduleUpdate
from league_api.schemas.match_result import MatchResultCreate
from league_api.services.match_result_service import MatchResultService
from league_api.services.match_service import MatchService

MATCH_DAY = dt.date(2024, 1, 1)


class FakeTeamRepository:
    def __init__(self, team_ids):
        self.team_ids = set(team_ids)

    async def get_existing_ids(self, team_ids):
        return [team_id for team_id in team_ids if team_id in self.team_ids]


class FakeMatchRepository:
    def __init__(self, schedules=(), fail_conflict_check=False):
        self.schedules = {m.id: m for m in schedules}
        self.conflict_calls = []
        self.fail_conflict_check = fail_conflict_check

    async def get_by_id(self, match_id):
        match = self.schedules.get(match_id)
        if not match:
            return None
        return match, f"Time {match.home_team_id}", f"Time {match.away_team_id}"

    async def has_team_conflict(self, team_id, date, exclude_match_id=None):
        self.conflict_calls.append((team_id, date, exclude_match_id))
        if self.fail_conflict_check:
            raise OperationalError("SELECT", {}, Exception("conexão perdida"))
        return any(
            m.date == date
            and team_id in (m.home_team_id, m.away_team_id)
            and m.id != exclude_match_id
            for m in self.schedules.values()
        )

    async def create(self, data):
        match = MatchSchedule(id=max(self.schedules, default=0) + 1, **data)
        self.schedules[match.id] = match
        return match

    async def update(self, match, data):
        for key, value in data.items():
            setattr(match, key, value)
        return match


class FakeResultRepository:
    def __init__(self, existing_match_ids=(), race=False):
        self.existing = set(existing_match_ids)
        self.race = race
        self.created = []

    async def exists_for_match(self, match_id):
        return match_id in self.existing

    async def create(self, result_data, scored):
        if self.race:
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        self.created.append((result_data, scored))
        return MatchResult(id=len(self.created), **result_data)


class FakePlayerRepository:
    def __init__(self, player_ids=()):
        self.player_ids = set(player_ids)

    async def get_existing_ids(self, player_ids):
        return [player_id for player_id in player_ids if player_id in self.player_ids]


def schedule(match_id, home, away, date=MATCH_DAY):
    return MatchSchedule(id=match_id, date=date, time=dt.time(19, 0),
                         home_team_id=home, away_team_id=away)


def match_service(repository):
    return MatchService(None, repository=repository, team_repository=FakeTeamRepository([1, 2, 3, 4]))


class TestMatchService:
    """Testes de agenda e conflito de datas"""

    @pytest.mark.asyncio
    async def test_same_team_rejected_before_conflict_check(self):
        repository = FakeMatchRepository()
        service = match_service(repository)
        with pytest.raises(ValidationError):
            await service.create_match(
                MatchScheduleCreate(date=MATCH_DAY, home_team_id=1, away_team_id=1)
            )
        assert repository.conflict_calls == []
        assert repository.schedules == {}

    @pytest.mark.asyncio
    async def test_create_checks_both_teams(self):
        repository = FakeMatchRepository()
        service = match_service(repository)
        created = await service.create_match(
            MatchScheduleCreate(date=MATCH_DAY, time=dt.time(19, 0), home_team_id=1, away_team_id=2)
        )
        assert created.home_team_name == "Time 1"
        assert repository.conflict_calls == [(1, MATCH_DAY, None), (2, MATCH_DAY, None)]

    @pytest.mark.asyncio
    async def test_create_conflict_writes_nothing(self):
        repository = FakeMatchRepository([schedule(1, 1, 2)])
        service = match_service(repository)
        with pytest.raises(ConflictError):
            await service.create_match(
                MatchScheduleCreate(date=MATCH_DAY, home_team_id=3, away_team_id=1)
            )
        assert list(repository.schedules) == [1]

    @pytest.mark.asyncio
    async def test_missing_team_is_not_found(self):
        repository = FakeMatchRepository()
        service = match_service(repository)
        with pytest.raises(NotFoundError):
            await service.create_match(
                MatchScheduleCreate(date=MATCH_DAY, home_team_id=1, away_team_id=99)
            )
        assert repository.conflict_calls == []

    @pytest.mark.asyncio
    async def test_conflict_query_failure_is_infrastructure_error(self):
        repository = FakeMatchRepository(fail_conflict_check=True)
        service = match_service(repository)
        with pytest.raises(InfrastructureError):
            await service.create_match(
                MatchScheduleCreate(date=MATCH_DAY, home_team_id=1, away_team_id=2)
            )
        assert repository.schedules == {}

    @pytest.mark.asyncio
    async def test_update_time_only_skips_conflict_check(self):
        repository = FakeMatchRepository([schedule(1, 1, 2)])
        service = match_service(repository)
        updated = await service.update_match(1, MatchScheduleUpdate(time=dt.time(20, 30)))
        assert updated.time == dt.time(20, 30)
        assert repository.conflict_calls == []

    @pytest.mark.asyncio
    async def test_update_date_excludes_own_match(self):
        new_day = dt.date(2024, 1, 8)
        repository = FakeMatchRepository([schedule(1, 1, 2)])
        service = match_service(repository)
        updated = await service.update_match(1, MatchScheduleUpdate(date=new_day))
        assert updated.date == new_day
        assert repository.conflict_calls == [(1, new_day, 1), (2, new_day, 1)]

    @pytest.mark.asyncio
    async def test_update_team_into_conflict(self):
        repository = FakeMatchRepository([schedule(1, 1, 2), schedule(2, 3, 4)])
        service = match_service(repository)
        with pytest.raises(ConflictError):
            await service.update_match(1, MatchScheduleUpdate(away_team_id=3))
        assert repository.schedules[1].away_team_id == 2

    @pytest.mark.asyncio
    async def test_update_to_same_team_rejected(self):
        repository = FakeMatchRepository([schedule(1, 1, 2)])
        service = match_service(repository)
        with pytest.raises(ValidationError):
            await service.update_match(1, MatchScheduleUpdate(home_team_id=2))
        assert repository.conflict_calls == []


class TestMatchResultService:
    """Testes de criação de resultado"""

    def service(self, result_repository, player_ids=(7, 8)):
        return MatchResultService(
            None,
            repository=result_repository,
            match_repository=FakeMatchRepository([schedule(1, 1, 2)]),
            player_repository=FakePlayerRepository(player_ids),
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("home_score,away_score", [(0, 0), (3, 1), (0, 2)])
    async def test_second_result_rejected(self, home_score, away_score):
        repository = FakeResultRepository(existing_match_ids=[1])
        with pytest.raises(ConflictError):
            await self.service(repository).create_result(
                MatchResultCreate(match_id=1, home_score=home_score, away_score=away_score)
            )
        assert repository.created == []

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_conflict(self):
        repository = FakeResultRepository(race=True)
        with pytest.raises(ConflictError):
            await self.service(repository).create_result(
                MatchResultCreate(match_id=1, home_score=1, away_score=0)
            )

    @pytest.mark.asyncio
    async def test_missing_schedule(self):
        repository = FakeResultRepository()
        with pytest.raises(NotFoundError):
            await self.service(repository).create_result(
                MatchResultCreate(match_id=42, home_score=1, away_score=0)
            )

    @pytest.mark.asyncio
    async def test_winner_resolved_before_persisting(self):
        repository = FakeResultRepository()
        result = await self.service(repository).create_result(
            MatchResultCreate(
                match_id=1,
                home_score=1,
                away_score=2,
                player_scored=[
                    {"player_id": 8, "team_id": 2, "time_scored": 10},
                    {"player_id": 8, "team_id": 2, "time_scored": 80},
                    {"player_id": 7, "team_id": 1, "time_scored": 55},
                ],
            )
        )
        assert result.winner_team_id == 2
        result_data, scored = repository.created[0]
        assert result_data["winner_team_id"] == 2
        assert len(scored) == 3

    @pytest.mark.asyncio
    async def test_draw_has_no_winner(self):
        repository = FakeResultRepository()
        result = await self.service(repository).create_result(
            MatchResultCreate(match_id=1, home_score=0, away_score=0)
        )
        assert result.winner_team_id is None

    @pytest.mark.asyncio
    async def test_goal_for_team_outside_match(self):
        repository = FakeResultRepository()
        with pytest.raises(ValidationError):
            await self.service(repository).create_result(
                MatchResultCreate(
                    match_id=1, home_score=1, away_score=0,
                    player_scored=[{"player_id": 7, "team_id": 3, "time_scored": 5}],
                )
            )
        assert repository.created == []

    @pytest.mark.asyncio
    async def test_goal_by_unknown_player(self):
        repository = FakeResultRepository()
        with pytest.raises(NotFoundError):
            await self.service(repository).create_result(
                MatchResultCreate(
                    match_id=1, home_score=1, away_score=0,
                    player_scored=[{"player_id": 99, "team_id": 1, "time_scored": 5}],
                )
            )
