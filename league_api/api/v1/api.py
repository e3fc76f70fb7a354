"""Router principal da API v1"""
from fastapi import APIRouter
from league_api.api.v1.endpoints import users, teams, players, matches, match_results

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
api_router.include_router(teams.admin_router, prefix="/teams/admin", tags=["teams"])
api_router.include_router(players.router, prefix="/players", tags=["players"])
api_router.include_router(players.admin_router, prefix="/players/admin", tags=["players"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
api_router.include_router(matches.admin_router, prefix="/matches/admin", tags=["matches"])
api_router.include_router(match_results.router, prefix="/match-results", tags=["match-results"])
api_router.include_router(match_results.admin_router, prefix="/match-results/admin", tags=["match-results"])
api_router.include_router(match_results.detail_router, prefix="/match-results-detail", tags=["match-results"])
