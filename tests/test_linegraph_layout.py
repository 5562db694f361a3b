from __future__ import annotations

import unittest

from linegraph.geometry import PlotGeometry
from linegraph.layout import build_layout
from linegraph.scales import EMPTY_STEP_INFO


WEIGHT_LOG = [58.0, 54.6, 53.7, 52.5, 53.8, 57.0, 60.0]
LABELS = ["4.12", "4.17", "4.21", "4.22", "4.25", "4.27", "4.28"]


class BuildLayoutTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geometry = PlotGeometry(frame_width=340.0, frame_height=240.0)

    def test_weight_log_layout(self) -> None:
        layout = build_layout(WEIGHT_LOG, self.geometry, labels=LABELS)
        self.assertEqual(layout.step_info.step_count, 10)
        self.assertEqual(len(layout.points), 7)
        self.assertEqual(len(layout.grid_lines), 11)
        self.assertEqual([t.text for t in layout.tick_labels], LABELS)
        self.assertEqual(len(layout.tick_marks), 7)
        self.assertTrue(layout.has_line)
        self.assertEqual(len(layout.peak_line), 8)
        self.assertEqual(len(layout.fill_outline), 11)
        self.assertEqual(len(layout.dots), 7)

    def test_layout_is_deterministic(self) -> None:
        first = build_layout(WEIGHT_LOG, self.geometry, labels=LABELS)
        second = build_layout(WEIGHT_LOG, self.geometry, labels=LABELS)
        self.assertEqual(first, second)

    def test_empty_values(self) -> None:
        layout = build_layout([], self.geometry)
        self.assertEqual(layout.step_info, EMPTY_STEP_INFO)
        self.assertEqual(layout.points, ())
        self.assertEqual(layout.grid_lines, ())
        self.assertEqual(layout.tick_labels, ())
        self.assertEqual(layout.tick_marks, ())
        self.assertFalse(layout.has_line)
        self.assertEqual(layout.fill_outline, ())
        self.assertEqual(layout.dots, ())

    def test_singleton_draws_grid_but_no_line(self) -> None:
        layout = build_layout([5.0], self.geometry, labels=["4.12"])
        self.assertEqual(len(layout.points), 1)
        self.assertGreater(len(layout.grid_lines), 0)
        self.assertFalse(layout.has_line)
        self.assertEqual(layout.dots, ())

    def test_missing_labels_default_to_none(self) -> None:
        layout = build_layout([1.0, 2.0], self.geometry)
        self.assertEqual([t.text for t in layout.tick_labels], [None, None])

    def test_label_count_mismatch_follows_points(self) -> None:
        layout = build_layout([1.0, 2.0, 3.0], PlotGeometry(300.0, 240.0), labels=["a"])
        self.assertEqual(len(layout.points), 3)
        self.assertEqual(len(layout.tick_labels), 3)
        self.assertEqual(len(layout.tick_marks), 3)
        for mark, point in zip(layout.tick_marks, layout.points):
            self.assertAlmostEqual(mark.start.x, point.x)

    def test_logs_layout_summary(self) -> None:
        with self.assertLogs("linegraph.layout", level="DEBUG") as captured:
            build_layout(WEIGHT_LOG, self.geometry)
        self.assertIn("7 points", captured.output[0])


if __name__ == "__main__":
    unittest.main()
