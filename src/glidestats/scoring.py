#!/usr/bin/env python3
"""
Cross-country scoring across the configured rule classes.

Route optimisation itself is delegated to an external solver; this module
feeds it one scoring class at a time and picks the best outcome.
"""

from typing import Callable, List, NamedTuple, Optional, Sequence
import logging

from .config import DEFAULT_SCORING_CLASSES, ScoringClass
from .models import Track, TaskPoint

logger = logging.getLogger(__name__)


class RouteSolution(NamedTuple):
    """Optimised route reported by a solver for one scoring class."""

    distance: float
    turnpoints: Sequence[TaskPoint] = ()


# Solves the optimal route of a track under one scoring class
RouteSolver = Callable[[Track, ScoringClass], RouteSolution]


class ScoreResult(NamedTuple):
    """Score obtained for a single scoring class."""

    scoring_class: str
    distance: float
    multiplier: float
    score: float
    turnpoints: Sequence[TaskPoint] = ()

    def to_dict(self) -> dict:
        return {
            "scoring_class": self.scoring_class,
            "distance": round(self.distance, 2),
            "multiplier": self.multiplier,
            "score": round(self.score, 2),
            "turnpoints": [
                {"name": p.name, "lat": p.latitude, "lon": p.longitude}
                for p in self.turnpoints
            ],
        }


class FlightScore(NamedTuple):
    """Best scoring result together with every class that could be solved."""

    best: ScoreResult
    alternatives: List[ScoreResult]

    def to_dict(self) -> dict:
        return {
            "best": self.best.to_dict(),
            "alternatives": [result.to_dict() for result in self.alternatives],
        }


def score_flight(
    track: Track,
    solver: RouteSolver,
    scoring_classes: Sequence[ScoringClass] = DEFAULT_SCORING_CLASSES,
) -> Optional[FlightScore]:
    """
    Solve every scoring class independently and select the highest score.

    The score of each class is recomputed as route distance times the class
    multiplier. A solver failure for one class only removes that class from
    the candidates.

    Args:
        track: Sequence of fixes in temporal order
        solver: Route optimiser called once per scoring class
        scoring_classes: Rule classes to evaluate

    Returns:
        FlightScore with the best result and all successful alternatives,
        or None if no class could be solved
    """
    results: List[ScoreResult] = []

    for scoring_class in scoring_classes:
        try:
            solution = solver(track, scoring_class)
        except Exception as e:
            logger.warning(f"Scoring class {scoring_class.name} failed: {e}")
            continue

        score = solution.distance * scoring_class.multiplier
        logger.debug(
            f"Scoring class {scoring_class.name}: {solution.distance:.2f} km x "
            f"{scoring_class.multiplier} = {score:.2f}"
        )
        results.append(
            ScoreResult(
                scoring_class=scoring_class.name,
                distance=solution.distance,
                multiplier=scoring_class.multiplier,
                score=score,
                turnpoints=tuple(solution.turnpoints),
            )
        )

    if not results:
        logger.warning("No scoring class could be solved")
        return None

    best = max(results, key=lambda result: result.score)
    return FlightScore(best=best, alternatives=results)
