"""Unit tests for registrant entity models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from youth_league.core.database.entities.registrants import Registrant, RegistrantBase


class TestRegistrantBase:
    """Tests for RegistrantBase model validation."""

    def test_registrant_base_valid_data(self, sample_registrant_data):
        registrant = RegistrantBase(**sample_registrant_data)

        assert registrant.first_name == "Maya"
        assert registrant.birth_date == datetime(2014, 5, 17)
        assert registrant.nick_name == "Mo"

    def test_registrant_base_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrantBase()

        error_fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert {"guardian_id", "first_name", "last_name", "birth_date", "sex"}.issubset(error_fields)
        assert "nick_name" not in error_fields

    def test_registrant_base_nick_name_optional(self, sample_registrant_data):
        data = sample_registrant_data.copy()
        del data["nick_name"]

        registrant = RegistrantBase(**data)

        assert registrant.nick_name is None

    def test_registrant_base_parses_iso_birth_date(self, sample_registrant_data):
        data = {**sample_registrant_data, "birth_date": "2014-05-17T00:00:00"}

        registrant = RegistrantBase(**data)

        assert registrant.birth_date == datetime(2014, 5, 17)


class TestRegistrant:
    """Tests for Registrant entity model."""

    def test_registrant_table_name(self):
        assert Registrant.__tablename__ == "REGISTRANT"

    def test_registrant_creation(self, sample_registrant_data):
        registrant = Registrant(**sample_registrant_data)

        assert registrant.id is None
        assert registrant.guardian_id == "guardian_001"

    def test_registrant_full_name(self, sample_registrant_data):
        registrant = Registrant(**sample_registrant_data)

        assert registrant.full_name == "Maya Okafor"

    def test_registrant_repr(self, sample_registrant_data):
        registrant = Registrant(id=7, **sample_registrant_data)

        assert repr(registrant) == "Registrant(id=7, first_name=Maya, last_name=Okafor)"
