"""Tests for leveling curves and level derivation."""

from __future__ import annotations

import pytest

from party_manager.models.enums import LevelType
from party_manager.models.progression import build_level_requirements, level_from_exp


CURVE = (0, 100, 250, 500)


class TestBuildLevelRequirements:
    """Tests for growth rate curves."""

    @pytest.mark.parametrize("level_type", list(LevelType))
    def test_curve_shape(self, level_type: LevelType) -> None:
        """Test every curve starts at zero, never decreases and covers level 100."""
        curve = build_level_requirements(level_type)

        assert len(curve) == 101
        assert curve[0] == 0
        assert all(later >= earlier for earlier, later in zip(curve, curve[1:]))

    def test_medium_fast_is_cubic(self) -> None:
        """Test medium fast thresholds are level cubed."""
        curve = build_level_requirements(LevelType.MEDIUM_FAST)

        assert curve[1] == 8
        assert curve[9] == 1_000
        assert curve[99] == 1_000_000

    def test_custom_max_level(self) -> None:
        """Test a lower level cap gives a shorter curve."""
        assert len(build_level_requirements(LevelType.FAST, 50)) == 51


class TestLevelFromExp:
    """Tests for level_from_exp."""

    @pytest.mark.parametrize(
        ("exp", "expected"),
        [(0, 1), (99, 1), (100, 2), (110, 2), (249.5, 2), (250, 3)],
    )
    def test_levels(self, exp: float, expected: int) -> None:
        """Test the level is the highest threshold reached."""
        assert level_from_exp(CURVE, exp) == expected

    def test_resumes_from_current_level(self) -> None:
        """Test scanning from the current level gives the same answer."""
        assert level_from_exp(CURVE, 260, current_level=2) == 3

    @pytest.mark.parametrize("current_level", [1, 2, 3])
    @pytest.mark.parametrize("exp", [500, 10_000])
    def test_beyond_curve_gives_last_level(self, exp: float, current_level: int) -> None:
        """Test experience at or past the last threshold gives the top level."""
        assert level_from_exp(CURVE, exp, current_level=current_level) == 3

    def test_level_100_reachable(self) -> None:
        """Test the top of a standard curve reaches level 100."""
        curve = build_level_requirements(LevelType.MEDIUM_FAST)

        assert level_from_exp(curve, 1_000_000) == 100
        assert level_from_exp(curve, 5_000_000) == 100
