import math
import threading
from dataclasses import dataclass

from tracking_markers.config import DEFAULT_CONFIG
from tracking_markers.trajectory_presets import CurveSpec, curve_spec_for, is_known_preset


@dataclass(frozen=True)
class StartupParams:
    use_depth: int
    part_id: int
    alpha_id: int
    traj_id: int
    curve_spec: CurveSpec

    @property
    def known_trajectory(self):
        return is_known_preset(self.traj_id)


def resolve_startup(use_depth, part_id, alpha_id, traj_id):
    """Map the four startup integers onto the run's curve coefficients."""
    return StartupParams(
        use_depth=int(use_depth),
        part_id=int(part_id),
        alpha_id=int(alpha_id),
        traj_id=int(traj_id),
        curve_spec=curve_spec_for(int(traj_id), use_depth=int(use_depth) != 0),
    )


@dataclass(frozen=True)
class GuideReading:
    reference: tuple
    countdown: int


class GuideState:
    """
    Latest reference position and countdown, shared between the
    subscription callbacks and the marker timer.
    """

    def __init__(self, max_smoothing_time=DEFAULT_CONFIG.max_smoothing_time, countdown=5):
        self.max_smoothing_time = max_smoothing_time
        self.lock = threading.Lock()
        self._ref_pos = (0.0, 0.0, 0.0)
        self._countdown = countdown

    def update_reference(self, x, y, z):
        ref_pos = (float(x), float(y), float(z))
        with self.lock:
            self._ref_pos = ref_pos

    def update_elapsed(self, seconds):
        # Controller reports whole seconds; 0 keeps the last countdown.
        # NaN and inf are read as 0.
        controller_seconds = int(seconds) if math.isfinite(seconds) else 0
        with self.lock:
            if controller_seconds != 0:
                self._countdown = self.max_smoothing_time - controller_seconds
            return self._countdown

    def read(self):
        with self.lock:
            return GuideReading(reference=self._ref_pos, countdown=self._countdown)
