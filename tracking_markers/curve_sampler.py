import numpy as np


def sample_curve(spec, origin, max_points, height, width, depth):
    """
    Samples max_points + 1 points of the reference curve, parametrized in t ∈ [0, 2π].

    Returns a read-only (max_points + 1, 3) array in the frame of `origin`.
    """
    if max_points < 0:
        raise ValueError(f"max_points must be >= 0, got {max_points}")

    # -----------------------------------------------------
    # Parameter: t_i = i / N * 2π
    # N = 0 collapses to the single sample at t = 0
    # -----------------------------------------------------
    if max_points == 0:
        t = np.zeros(1)
    else:
        t = np.arange(max_points + 1) / max_points * 2 * np.pi

    # -----------------------------------------------------
    # Depth sweep (triangle): x = |t - π| / π * depth - depth / 2
    # -----------------------------------------------------
    x = np.zeros_like(t)
    if spec.use_depth:
        x = np.abs(t - np.pi) / np.pi * depth - (depth / 2)

    # Lateral sweep: y = t / 2π * width - width / 2
    y = t / (2 * np.pi) * width - (width / 2)

    # -----------------------------------------------------
    # Vertical sine sum:
    # z = (h_s * h) * (sin(pa(t+φ)) + sin(pb(t+φ)) + sin(pc(t+φ)))
    # -----------------------------------------------------
    ts = t + spec.phase_shift
    z = (spec.height_scale * height) * (np.sin(spec.pa * ts) + np.sin(spec.pb * ts) + np.sin(spec.pc * ts))

    points = np.column_stack((x, y, z)) + np.asarray(origin, dtype=float)
    points.setflags(write=False)
    return points
