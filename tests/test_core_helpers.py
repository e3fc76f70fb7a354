"""Testes das funções puras: paginação, posição e regras de resultado"""
import pytest

from league_api.core.pagination import calculate_total_pages, normalize_pagination, paginated
from league_api.core.validators import normalize_player_position
from league_api.services.match_rules import (
    DRAW,
    MATCH_STATUS_AWAY_WIN,
    MATCH_STATUS_DRAW,
    MATCH_STATUS_HOME_WIN,
    determine_match_status,
    resolve_winner,
)


class TestPagination:
    """Testes de paginação"""

    def test_normalize_defaults(self):
        assert normalize_pagination(0, 0) == (1, 10)
        assert normalize_pagination(-3, -1) == (1, 10)
        assert normalize_pagination(2, 25) == (2, 25)

    @pytest.mark.parametrize("limit", [1, 10, 50])
    def test_total_pages_without_records(self, limit):
        assert calculate_total_pages(0, limit) == 0

    def test_total_pages_rounds_up(self):
        assert calculate_total_pages(25, 10) == 3
        assert calculate_total_pages(20, 10) == 2
        assert calculate_total_pages(1, 10) == 1

    def test_paginated_envelope(self):
        body = paginated(["a", "b"], 12, 2, 5)
        assert body == {
            "data": ["a", "b"],
            "total_records": 12,
            "current_page": 2,
            "page_size": 5,
            "total_pages": 3,
        }


class TestPlayerPosition:
    """Testes da normalização de posição"""

    @pytest.mark.parametrize("value", ["penyerang", "PENYERANG", "Penyerang"])
    def test_case_insensitive(self, value):
        assert normalize_player_position(value) == ("Penyerang", True)

    def test_multi_word_position(self):
        assert normalize_player_position("penjaga GAWANG") == ("Penjaga Gawang", True)

    @pytest.mark.parametrize("value", ["striker", "", None, "penyerang gelandang", " penyerang "])
    def test_unknown_position_rejected(self, value):
        canonical, ok = normalize_player_position(value)
        assert ok is False
        assert canonical is None


class TestMatchRules:
    """Testes do vencedor e status da partida"""

    @pytest.mark.parametrize("home_score,away_score", [(1, 0), (5, 4), (3, 0)])
    def test_home_wins(self, home_score, away_score):
        assert resolve_winner(home_score, away_score, 10, 20) == 10

    @pytest.mark.parametrize("home_score,away_score", [(0, 1), (2, 7)])
    def test_away_wins(self, home_score, away_score):
        assert resolve_winner(home_score, away_score, 10, 20) == 20

    @pytest.mark.parametrize("score", [0, 1, 4])
    def test_draw(self, score):
        assert resolve_winner(score, score, 10, 20) is DRAW

    def test_status_from_winner(self):
        assert determine_match_status(10, 10, 20) == MATCH_STATUS_HOME_WIN
        assert determine_match_status(20, 10, 20) == MATCH_STATUS_AWAY_WIN
        assert determine_match_status(None, 10, 20) == MATCH_STATUS_DRAW

    def test_status_unknown_winner_is_draw(self):
        assert determine_match_status(99, 10, 20) == MATCH_STATUS_DRAW
