import math
from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class CurveSpec:
    """Coefficients of the sine-sum reference curve.

    z(t) = height * height_scale * (sin(pa(t+phase)) + sin(pb(t+phase)) + sin(pc(t+phase)))
    """
    pa: int = 0
    pb: int = 0
    pc: int = 0
    phase_shift: float = 0.0
    height_scale: float = 0.0
    use_depth: bool = False


class TrajectoryPreset(IntEnum):
    PRESET_0 = 0
    PRESET_1 = 1
    PRESET_2 = 2
    PRESET_3 = 3
    PRESET_4 = 4
    PRESET_5 = 5


# (pa, pb, pc, phase shift, height scale)
_PRESET_TABLE = {
    TrajectoryPreset.PRESET_0: (1, 1, 4, math.pi,         0.25),
    TrajectoryPreset.PRESET_1: (2, 3, 4, 4 * math.pi / 3, 0.25),
    TrajectoryPreset.PRESET_2: (1, 3, 4, math.pi,         0.25),
    TrajectoryPreset.PRESET_3: (2, 2, 5, math.pi,         0.2),
    TrajectoryPreset.PRESET_4: (2, 3, 5, 8 * math.pi / 5, 0.2),
    TrajectoryPreset.PRESET_5: (2, 4, 5, math.pi,         0.2),
}

_KNOWN_IDS = frozenset(preset.value for preset in TrajectoryPreset)


def is_known_preset(traj_id):
    return traj_id in _KNOWN_IDS


def curve_spec_for(traj_id, use_depth=False):
    """
    Resolve a trajectory id into its CurveSpec.

    Ids outside 0..5 are not rejected: they give all-zero coefficients,
    i.e. a flat line through the origin height.
    """
    use_depth = bool(use_depth)

    if not is_known_preset(traj_id):
        return CurveSpec(use_depth=use_depth)

    pa, pb, pc, ps, ph = _PRESET_TABLE[TrajectoryPreset(traj_id)]
    return CurveSpec(pa=pa, pb=pb, pc=pc, phase_shift=ps, height_scale=ph,
                     use_depth=use_depth)
