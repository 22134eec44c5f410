import numpy as np

from nnfs_infer import config
from nnfs_infer.errors import InvalidRange


class RandomInitializer:
    def __init__(self, seed: int = config.SEED, range_divisor: int = config.RAND_MAX):
        if range_divisor < 1:
            raise InvalidRange(f"range_divisor must be >= 1, got {range_divisor}")

        self.seed = seed
        self.range_divisor = int(range_divisor)
        self._generator = np.random.default_rng(seed)

    def raw_sample(self) -> int:
        return int(self._generator.integers(0, self.range_divisor, endpoint=True))

    def next(self, low: float, high: float) -> float:
        _check_range(low, high)
        # raw is in [0, range_divisor], so the result stays in [low, high]
        div = self.range_divisor / (high - low)
        return low + self.raw_sample() / div

    def uniform(self, low: float, high: float) -> float:
        _check_range(low, high)
        return float(self._generator.uniform(low, high))

    def __repr__(self):
        return f"RandomInitializer(seed={self.seed}, range_divisor={self.range_divisor})"


def _check_range(low: float, high: float):
    if not high > low:
        raise InvalidRange(f"expected low < high, got low={low}, high={high}")
