"""Unit tests for coach entity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from youth_league.core.database.entities.coaches import Coach, CoachBase


class TestCoachBase:
    """Tests for CoachBase model validation."""

    def test_coach_base_position_optional(self):
        coach = CoachBase(registrant_id="4", team_id="9")

        assert coach.position is None

    def test_coach_base_requires_registrant_and_team(self):
        with pytest.raises(ValidationError) as exc_info:
            CoachBase(position="head")

        error_fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert error_fields == {"registrant_id", "team_id"}


class TestCoach:
    """Tests for Coach entity model."""

    def test_coach_has_no_serial_id(self):
        assert "ID" not in Coach.__table__.columns

    def test_coach_identity_follows_key_order(self):
        coach = Coach(registrant_id="4", team_id="9", position="assistant")

        assert coach.identity == ("4", "9")
