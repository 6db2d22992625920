"""
Run Outcome - result of one playthrough
"""
import math
from dataclasses import asdict, dataclass

from qwop_ai.utils.time_utils import format_duration

@dataclass(frozen=True)
class RunOutcome:
    string: str
    success: bool
    aborted: bool
    duration_ms: int
    distance: float  # NaN when the distance could not be read

    @property
    def distance_known(self) -> bool:
        return not math.isnan(self.distance)

    def to_dict(self) -> dict:
        data = asdict(self)
        if not self.distance_known:
            data['distance'] = None
        return data

    def __str__(self) -> str:
        if self.aborted:
            status = "aborted"
        else:
            status = "success" if self.success else "failed"
        distance = f"{self.distance:.1f}m" if self.distance_known else "unknown distance"
        return (f"{status} after {format_duration(self.duration_ms / 1000.0)}, "
                f"{distance}: {self.string}")
