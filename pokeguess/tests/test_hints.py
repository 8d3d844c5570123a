"""
Tests for hint disclosure.
"""

import pytest

from ..config import HINT_COUNT, MAX_ATTEMPTS
from ..engine_core.hints import HINTS, visible_hint_count, visible_hints
from ..engine_core.state import Subject


class TestVisibleHintCount:
    """Tests for the disclosure rule."""

    @pytest.mark.parametrize("attempts", range(MAX_ATTEMPTS))
    def test_one_more_than_attempts(self, attempts):
        assert visible_hint_count(attempts) == min(attempts + 1, MAX_ATTEMPTS)

    def test_first_hint_before_any_guess(self):
        assert visible_hint_count(0) == 1

    def test_capped(self):
        assert visible_hint_count(MAX_ATTEMPTS) == MAX_ATTEMPTS
        assert visible_hint_count(MAX_ATTEMPTS + 3) == MAX_ATTEMPTS

    def test_monotonic(self):
        counts = [visible_hint_count(a) for a in range(MAX_ATTEMPTS + 2)]
        assert counts == sorted(counts)


class TestVisibleHints:
    """Tests for rendered hints."""

    def test_hint_table_size(self):
        assert len(HINTS) == HINT_COUNT

    def test_no_subject(self):
        assert visible_hints(None, 0) == []

    def test_first_hint_is_types(self, ho_oh):
        assert visible_hints(ho_oh, 0) == ["Type: Fire / Flying"]

    def test_all_hints_in_order(self, pikachu):
        assert visible_hints(pikachu, 4) == [
            "Type: Electric",
            "Generation: Generation I",
            "Main colour: Yellow",
            "Species: Mouse Pokémon",
            "Cry: (Pokémon cry hint – audio not wired in yet)",
        ]

    def test_prefix_grows_with_attempts(self, pikachu):
        two = visible_hints(pikachu, 1)
        three = visible_hints(pikachu, 2)
        assert len(two) == 2
        assert three[:2] == two

    def test_cry_hint_with_audio(self):
        subject = Subject(subject_id=1, name="bulbasaur", cry_url="https://example.test/1.ogg")
        assert visible_hints(subject, 4)[-1] == "Cry: (play the sound!)"

    def test_defaults_render(self):
        subject = Subject(subject_id=1, name="missingno")
        hints = visible_hints(subject, 4)
        assert hints[0] == "Type: "
        assert hints[1] == "Generation: Generation UNKNOWN"
        assert hints[2] == "Main colour: Unknown"
        assert hints[3] == "Species: Unknown Pokémon"
