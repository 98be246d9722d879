from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ScoringClass:
    """
    A named cross-country scoring rule.

    Attributes:
        name: Identifier of the rule class
        multiplier: Points awarded per kilometer of route distance
        closing_distance: For closed triangle classes, the allowed gap between
            start and finish as a fraction of the route distance
    """

    name: str
    multiplier: float
    closing_distance: Optional[float] = None

    @property
    def closed(self) -> bool:
        return self.closing_distance is not None


DEFAULT_SCORING_CLASSES: Tuple[ScoringClass, ...] = (
    ScoringClass(name="free_flight", multiplier=1.0),
    ScoringClass(name="flat_triangle", multiplier=1.2, closing_distance=0.2),
    ScoringClass(name="fai_triangle", multiplier=1.4, closing_distance=0.2),
)


@dataclass
class GlideStatsConfig:
    """Configuration for flight summary computation and the CLI."""

    max_speed_kmh: float = 300.0
    earth_radius_km: float = 6371.0
    fix_preview_limit: int = 100
    scoring_classes: Tuple[ScoringClass, ...] = field(
        default_factory=lambda: DEFAULT_SCORING_CLASSES
    )
    log_level: str = "WARNING"
