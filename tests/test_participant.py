"""
Tests for the Participant model and normalization.
"""

import pytest

from domain.models.participant import Participant, normalize_participant


class TestNormalizeParticipant:
    """Tests for normalize_participant."""

    def test_full_record(self):
        p = normalize_participant(
            {"id": "x1", "name": "  Ana  ", "score": 7, "nickname": "La Pulga", "photo_url": "a.png"}
        )
        assert p == Participant(id="x1", name="Ana", score=7, nickname="La Pulga", photo_url="a.png")

    def test_legacy_keys(self):
        p = normalize_participant({"id": "x2", "nombre": "Beto", "puntaje": "4", "foto": "b.png"})
        assert p.name == "Beto"
        assert p.score == 4
        assert p.photo_url == "b.png"

    @pytest.mark.parametrize("raw_score", [0, -3, "abc", None])
    def test_score_clamped_to_one(self, raw_score):
        assert normalize_participant({"id": "x", "name": "C", "score": raw_score}).score == 1

    def test_missing_id_is_generated(self):
        first = normalize_participant({"name": "D"})
        second = normalize_participant({"name": "D"})
        assert first.id.startswith("_")
        assert first.id != second.id

    def test_empty_record(self):
        p = normalize_participant(None)
        assert p.name == ""
        assert p.score == 1
        assert p.nickname == ""
        assert p.photo_url is None


class TestParticipant:
    """Tests for Participant helpers."""

    def test_display_name_prefers_nickname(self):
        assert Participant(id="1", name="Ana", nickname="Pulga").display_name() == "Pulga"
        assert Participant(id="1", name="Ana").display_name() == "Ana"

    def test_is_hashable(self):
        p = Participant(id="1", name="Ana", score=3)
        assert {p, Participant(id="1", name="Ana", score=3)} == {p}
