"""
Tests for priority detection
"""
import pytest

from ticket_triage.classification.priority import detect_priority
from ticket_triage.models.schemas import Priority


@pytest.mark.parametrize("text, expected", [
    ("production down for everyone", Priority.URGENT),
    ("we have an outage", Priority.URGENT),
    ("i can't access anything", Priority.URGENT),
    ("this is blocking the release", Priority.HIGH),
    ("please fix asap", Priority.HIGH),
    ("a minor typo", Priority.LOW),
    ("fix it when you get a chance", Priority.LOW),
    ("the report looks odd", Priority.MEDIUM),
    ("", Priority.MEDIUM),
])
def test_detect_priority(lexicon, text, expected):
    assert detect_priority(text, lexicon) == expected


class TestPrecedence:

    def test_urgent_beats_low(self, lexicon):
        assert detect_priority("minor cosmetic thing but data loss", lexicon) == Priority.URGENT

    def test_urgent_beats_high(self, lexicon):
        assert detect_priority("important: security hole", lexicon) == Priority.URGENT

    def test_high_beats_low(self, lexicon):
        assert detect_priority("minor but blocking", lexicon) == Priority.HIGH

    def test_substring_match(self, lexicon):
        assert detect_priority("a securityflaw", lexicon) == Priority.URGENT
