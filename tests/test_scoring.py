import unittest
from datetime import datetime, timezone

from glidestats.config import DEFAULT_SCORING_CLASSES, ScoringClass
from glidestats.models import Fix, TaskPoint
from glidestats.scoring import RouteSolution, score_flight

TRACK = [
    Fix(46.0, 7.0, 1000.0, datetime(2024, 6, 15, 11, 0, tzinfo=timezone.utc)),
    Fix(46.5, 7.5, 1500.0, datetime(2024, 6, 15, 13, 0, tzinfo=timezone.utc)),
]


class TestScoreFlight(unittest.TestCase):

    def test_best_class_selected_by_recomputed_score(self):
        distances = {"free_flight": 100.0, "flat_triangle": 90.0, "fai_triangle": 70.0}

        def solver(track, scoring_class):
            return RouteSolution(distance=distances[scoring_class.name])

        result = score_flight(TRACK, solver)

        self.assertIsNotNone(result)
        # 90 * 1.2 beats 100 * 1.0 and 70 * 1.4
        self.assertEqual(result.best.scoring_class, "flat_triangle")
        self.assertAlmostEqual(result.best.score, 108.0)
        self.assertEqual(len(result.alternatives), 3)
        self.assertEqual(
            [r.scoring_class for r in result.alternatives],
            [c.name for c in DEFAULT_SCORING_CLASSES],
        )

    def test_failed_class_is_excluded(self):
        def solver(track, scoring_class):
            if scoring_class.closed:
                raise RuntimeError("no closed route found")
            return RouteSolution(distance=42.0)

        with self.assertLogs("glidestats.scoring", level="WARNING") as logs:
            result = score_flight(TRACK, solver)

        self.assertEqual(result.best.scoring_class, "free_flight")
        self.assertEqual(len(result.alternatives), 1)
        self.assertTrue(any("fai_triangle failed" in line for line in logs.output))

    def test_all_classes_failing_returns_none(self):
        def solver(track, scoring_class):
            raise ValueError("solver unavailable")

        with self.assertLogs("glidestats.scoring", level="WARNING"):
            self.assertIsNone(score_flight(TRACK, solver))

    def test_each_class_solved_independently(self):
        seen = []

        def solver(track, scoring_class):
            seen.append((track, scoring_class))
            return RouteSolution(distance=10.0)

        classes = (
            ScoringClass("free", 1.0),
            ScoringClass("triangle", 2.0, closing_distance=0.05),
        )
        result = score_flight(TRACK, solver, classes)

        self.assertEqual([c for _, c in seen], list(classes))
        self.assertTrue(all(t is TRACK for t, _ in seen))
        self.assertEqual(result.best.scoring_class, "triangle")
        self.assertEqual(result.best.multiplier, 2.0)

    def test_to_dict(self):
        def solver(track, scoring_class):
            return RouteSolution(
                distance=12.3456,
                turnpoints=[TaskPoint("TP1", 46.1, 7.1)],
            )

        result = score_flight(TRACK, solver, (ScoringClass("free_flight", 1.0),))
        data = result.to_dict()

        self.assertEqual(data["best"]["scoring_class"], "free_flight")
        self.assertEqual(data["best"]["distance"], 12.35)
        self.assertEqual(data["best"]["score"], 12.35)
        self.assertEqual(
            data["best"]["turnpoints"], [{"name": "TP1", "lat": 46.1, "lon": 7.1}]
        )
        self.assertEqual(len(data["alternatives"]), 1)


class TestScoringClass(unittest.TestCase):

    def test_default_rule_set(self):
        by_name = {c.name: c for c in DEFAULT_SCORING_CLASSES}

        self.assertEqual(by_name["free_flight"].multiplier, 1.0)
        self.assertFalse(by_name["free_flight"].closed)
        self.assertEqual(by_name["fai_triangle"].multiplier, 1.4)
        self.assertEqual(by_name["fai_triangle"].closing_distance, 0.2)
        self.assertTrue(by_name["flat_triangle"].closed)
