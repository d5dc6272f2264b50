"""Tests for the scale calculator."""

from __future__ import annotations

from giv.render.scale import Scale, calculate_scale, round_half_up


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(1.5) == 2
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(2.49) == 2

    def test_negative_halves_away_from_zero(self) -> None:
        assert round_half_up(-0.5) == -1
        assert round_half_up(-1.2) == -1


class TestScaleFromFactor:
    def test_small_factor_uses_ceil(self) -> None:
        scale = Scale.from_factor(0.3)
        assert scale.block_size == 1
        assert scale.factor == 0.3

    def test_rounds_at_or_above_one(self) -> None:
        assert Scale.from_factor(1.0).block_size == 1
        assert Scale.from_factor(1.49).block_size == 1
        assert Scale.from_factor(1.5).block_size == 2
        assert Scale.from_factor(2.4).block_size == 2

    def test_just_below_one_still_one(self) -> None:
        assert Scale.from_factor(0.99).block_size == 1


class TestCalculateScale:
    def test_image_smaller_than_viewport(self) -> None:
        scale = calculate_scale(10, 10, 20, 40)
        assert scale.block_size == 1
        assert scale.factor == 0.25

    def test_exact_fit(self) -> None:
        # 80 columns, 24 rows -> 48 source rows
        scale = calculate_scale(48, 80, 24, 80)
        assert scale.block_size == 1
        assert scale.factor == 1.0

    def test_width_bound(self) -> None:
        scale = calculate_scale(10, 250, 100, 100)
        assert scale.factor == 2.5
        assert scale.block_size == 3

    def test_height_counts_two_rows_per_cell(self) -> None:
        scale = calculate_scale(100, 10, 10, 100)
        assert scale.factor == 5.0
        assert scale.block_size == 5

    def test_fits_when_within_doubled_height(self) -> None:
        for image_w, image_h in [(1, 1), (40, 20), (80, 48), (79, 47)]:
            assert calculate_scale(image_h, image_w, 24, 80).block_size == 1

    def test_monotonic_in_image_size(self) -> None:
        previous = 0
        for size in range(1, 400, 7):
            block = calculate_scale(size, size, 12, 40).block_size
            assert block >= previous
            previous = block

    def test_monotonic_in_viewport_size(self) -> None:
        previous = None
        for cells in range(1, 120, 3):
            block = calculate_scale(300, 500, cells, cells).block_size
            if previous is not None:
                assert block <= previous
            previous = block
