"""Regras derivadas do placar: vencedor e status da partida"""
from typing import Optional

# Empate: nenhum time vencedor (IDs de time nunca são nulos)
DRAW = None

MATCH_STATUS_DRAW = "Draw"
MATCH_STATUS_HOME_WIN = "Home team wins"
MATCH_STATUS_AWAY_WIN = "Away team wins"


def resolve_winner(home_score: int, away_score: int,
                   home_team_id: int, away_team_id: int) -> Optional[int]:
    """Retorna o ID do time vencedor, ou DRAW para placar igual"""
    if home_score > away_score:
        return home_team_id
    if away_score > home_score:
        return away_team_id
    return DRAW


def determine_match_status(winner_team_id: Optional[int],
                           home_team_id: int, away_team_id: int) -> str:
    if winner_team_id is not None and winner_team_id == home_team_id:
        return MATCH_STATUS_HOME_WIN
    if winner_team_id is not None and winner_team_id == away_team_id:
        return MATCH_STATUS_AWAY_WIN
    return MATCH_STATUS_DRAW
