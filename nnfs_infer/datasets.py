import math

import numpy as np

from nnfs_infer import config
from nnfs_infer.errors import AllocationFailure
from nnfs_infer.random_init import RandomInitializer


def _step(span: float, points: int) -> float:
    if points == 1:
        return math.inf
    # Steps are rounded to single precision, then accumulated in double
    return float(np.float32(span) / np.float32(points - 1))


def spiral_data(
    points: int,
    classes: int,
    *,
    rng: RandomInitializer,
    noise: float = config.SPIRAL_NOISE,
) -> tuple[np.ndarray, np.ndarray]:
    # An arm stops as soon as either radius or angle passes its bound
    if points < 1:
        raise AllocationFailure(f"points must be >= 1, got {points}")
    if classes < 0:
        raise AllocationFailure(f"classes must be >= 0, got {classes}")

    r_step = _step(1.0, points)
    t_step = _step(4.0, points)

    X, y = [], []
    for class_number in range(classes):
        r = 0.0
        t = float(class_number * 4)

        while r <= 1 and t <= (class_number + 1) * 4:
            theta = (t + rng.uniform(-1.0, 1.0) * noise) * 2.5
            X.append((r * math.sin(theta), r * math.cos(theta)))
            y.append(class_number)

            r += r_step
            t += t_step

    return np.array(X, dtype=np.float64).reshape(-1, 2), np.array(y, dtype=np.int64)
