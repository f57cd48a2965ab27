import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MIN_RIVER_LIMIT = 3


class GenerationError(Exception):
    pass


@dataclass(frozen=True)
class GeneratorRules:
    # 0 behaves like breadth-first carving (short branches), 1 like depth-first (long corridors)
    river_factor: float = 0.1

    def __post_init__(self):
        value = self.river_factor
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise GenerationError(f"river_factor must be a number, got {value!r}")
        if not math.isfinite(value):
            raise GenerationError(f"river_factor must be finite, got {value!r}")
        if not 0 <= value <= 1:
            logger.warning("river_factor %s is outside [0, 1]; river limit is still at least %d", value, MIN_RIVER_LIMIT)

    def river_limit(self, width: int, height: int) -> int:
        """Longest corridor carved from one queue seed before it is re-queued."""
        return max(MIN_RIVER_LIMIT, math.floor(width * height * self.river_factor))
