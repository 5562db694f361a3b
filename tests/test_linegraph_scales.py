from __future__ import annotations

import math
import unittest

import numpy as np

from linegraph.scales import EMPTY_STEP_INFO, MAX_STEP_COUNT, MIN_STEP_COUNT, compute_step_info, format_step_label


WEIGHT_LOG = [58.0, 54.6, 53.7, 52.5, 53.8, 57.0, 60.0]


class ComputeStepInfoTests(unittest.TestCase):
    def test_empty_values_yield_degenerate_info(self) -> None:
        info = compute_step_info([], 200.0)
        self.assertEqual(info, EMPTY_STEP_INFO)
        self.assertTrue(info.is_empty)
        self.assertEqual(info.step_height_px, 0.0)

    def test_weight_log_scenario(self) -> None:
        info = compute_step_info(WEIGHT_LOG, 200.0)
        self.assertEqual(info.lower_bound, 52.0)
        self.assertEqual(info.step_count, 10)
        self.assertEqual(info.step_value, 1.0)
        self.assertEqual(info.upper_bound, 62.0)
        self.assertEqual(info.step_height_px, 20.0)

    def test_singleton_still_gets_nonzero_step(self) -> None:
        info = compute_step_info([5.0], 200.0)
        self.assertEqual(info.lower_bound, 4.0)
        self.assertEqual(info.step_count, 5)
        self.assertEqual(info.step_value, 1.0)
        self.assertEqual(info.upper_bound, 9.0)
        self.assertEqual(info.step_height_px, 40.0)

    def test_flat_series_pads_around_value(self) -> None:
        info = compute_step_info([10.0, 10.0, 10.0], 200.0)
        self.assertEqual(info.lower_bound, 9.0)
        self.assertEqual(info.step_count, 5)
        self.assertEqual(info.step_value, 1.0)
        self.assertEqual(info.upper_bound, 14.0)

    def test_wide_range_clamps_count_and_still_covers_max(self) -> None:
        info = compute_step_info([0.0, 100.0], 200.0)
        self.assertEqual(info.lower_bound, -1.0)
        self.assertEqual(info.step_count, MAX_STEP_COUNT)
        self.assertEqual(info.step_value, 11.0)
        self.assertEqual(info.upper_bound, 109.0)

    def test_negative_values_floor_lower_bound(self) -> None:
        info = compute_step_info([-3.2, -1.0], 200.0)
        self.assertEqual(info.lower_bound, -4.0)
        self.assertEqual(info.step_count, 5)
        self.assertEqual(info.step_value, 1.0)
        self.assertEqual(info.upper_bound, 1.0)

    def test_unit_range_uses_minimum_count(self) -> None:
        info = compute_step_info([1.0, 2.0], 200.0)
        self.assertEqual(info.lower_bound, 0.0)
        self.assertEqual(info.step_count, 5)
        self.assertEqual(info.step_value, 1.0)
        self.assertEqual(info.upper_bound, 5.0)

    def test_zero_plot_height_does_not_divide_by_zero(self) -> None:
        info = compute_step_info([1.0, 2.0, 3.0], 0.0)
        self.assertEqual(info.step_height_px, 0.0)
        self.assertEqual(info.step_count, 5)
        self.assertEqual(info.upper_bound, info.lower_bound + info.step_value * info.step_count)

    def test_negative_plot_height_is_treated_as_zero(self) -> None:
        self.assertEqual(compute_step_info([1.0, 2.0], -50.0), compute_step_info([1.0, 2.0], 0.0))

    def test_non_finite_values_are_ignored(self) -> None:
        self.assertEqual(compute_step_info([math.nan, 5.0, math.inf], 200.0), compute_step_info([5.0], 200.0))
        self.assertEqual(compute_step_info([math.nan], 200.0), EMPTY_STEP_INFO)

    def test_overflowing_range_degrades_to_empty(self) -> None:
        self.assertEqual(compute_step_info([-1e308, 1e308], 200.0), EMPTY_STEP_INFO)
        self.assertEqual(compute_step_info([1.7e308, -1.7e308, 0.0], 0.0), EMPTY_STEP_INFO)
        # Half-unit padding vanishes below float64 resolution at this magnitude.
        self.assertEqual(compute_step_info([1e17], 200.0), EMPTY_STEP_INFO)

    def test_accepts_numpy_arrays(self) -> None:
        arr = np.asarray(WEIGHT_LOG, dtype=np.float64)
        self.assertEqual(compute_step_info(arr, 200.0), compute_step_info(WEIGHT_LOG, 200.0))

    def test_repeated_calls_are_identical(self) -> None:
        first = compute_step_info(WEIGHT_LOG, 173.0)
        second = compute_step_info(WEIGHT_LOG, 173.0)
        self.assertEqual(first, second)

    def test_invariants_hold_for_random_series(self) -> None:
        rng = np.random.default_rng(20240418)
        for trial in range(400):
            size = int(rng.integers(1, 40))
            center = float(rng.uniform(-500.0, 500.0))
            spread = float(10 ** rng.uniform(-2, 3))
            values = center + spread * rng.standard_normal(size)
            plot_height = float(rng.choice([0.0, 1.0, 57.0, 200.0, 1000.0]))
            info = compute_step_info(values, plot_height)
            with self.subTest(trial=trial):
                self.assertGreaterEqual(info.step_count, MIN_STEP_COUNT)
                self.assertLessEqual(info.step_count, MAX_STEP_COUNT)
                self.assertLessEqual(info.lower_bound, float(np.min(values)))
                self.assertGreaterEqual(info.upper_bound, float(np.max(values)))
                self.assertGreater(info.step_value, 0.0)
                self.assertEqual(info.upper_bound, info.lower_bound + info.step_value * info.step_count)
                self.assertEqual(info.step_value, float(int(info.step_value)))


class FormatStepLabelTests(unittest.TestCase):
    def test_whole_numbers_have_no_decimals(self) -> None:
        self.assertEqual(format_step_label(52.0), "52")
        self.assertEqual(format_step_label(-4.0), "-4")

    def test_negative_zero_renders_as_zero(self) -> None:
        self.assertEqual(format_step_label(-0.0), "0")

    def test_fractional_values_use_one_decimal(self) -> None:
        self.assertEqual(format_step_label(52.5), "52.5")
        self.assertEqual(format_step_label(3.14), "3.1")


if __name__ == "__main__":
    unittest.main()
