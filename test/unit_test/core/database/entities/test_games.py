"""Unit tests for game entity models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from youth_league.core.database.entities.games import Game, GameBase


class TestGameBase:
    """Tests for GameBase model validation."""

    def test_game_base_valid_data(self):
        game = GameBase(event_id="1", home_team_id="2", away_team_id="3")

        assert game.home_team_score is None
        assert game.away_team_score is None

    def test_game_base_rejects_same_team_on_both_sides(self):
        with pytest.raises(ValidationError) as exc_info:
            GameBase(event_id="1", home_team_id="2", away_team_id="2")

        assert "home and away team must differ" in str(exc_info.value)

    def test_game_base_scores_are_decimal(self):
        game = GameBase(event_id="1", home_team_id="2", away_team_id="3", home_team_score="3", away_team_score=1.5)

        assert game.home_team_score == Decimal("3")
        assert game.away_team_score == Decimal("1.5")


class TestGame:
    """Tests for Game entity model."""

    def test_game_table_name(self):
        assert Game.__tablename__ == "GAME"

    def test_game_model_validate_rejects_same_team(self):
        with pytest.raises(ValidationError):
            Game.model_validate({"event_id": "1", "home_team_id": "4", "away_team_id": "4"})

    def test_game_is_scored(self):
        game = Game(event_id="1", home_team_id="2", away_team_id="3")
        assert game.is_scored is False

        game.home_team_score = Decimal("2")
        game.away_team_score = Decimal("0")
        assert game.is_scored is True
