import numpy as np

from nnfs_infer.errors import AllocationFailure


class RowMajorMatrix:
    # Row i occupies data[i * cols : (i + 1) * cols]; row() and as_array() are views
    def __init__(self, rows: int, cols: int, fill: float = 0.0):
        for name, size in (("rows", rows), ("cols", cols)):
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
                raise AllocationFailure(f"{name} must be a positive int, got {size!r}")

        self.rows, self.cols = int(rows), int(cols)
        try:
            self.data = np.full(self.rows * self.cols, fill, dtype=np.float64)
        except MemoryError as exc:
            raise AllocationFailure(
                f"cannot allocate a {self.rows}x{self.cols} matrix"
            ) from exc

    def __len__(self):
        return self.data.size

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check(self, i: int, j: int | None = None):
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range for {self.rows} rows")
        if j is not None and not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range for {self.cols} columns")

    def row(self, i: int) -> np.ndarray:
        self._check(i)
        return self.data[i * self.cols : (i + 1) * self.cols]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        self._check(i, j)
        return float(self.data[i * self.cols + j])

    def __setitem__(self, index: tuple[int, int], value: float):
        i, j = index
        self._check(i, j)
        self.data[i * self.cols + j] = value

    def as_array(self) -> np.ndarray:
        return self.data.reshape(self.rows, self.cols)

    def __repr__(self):
        return f"RowMajorMatrix({self.rows}, {self.cols})"
