from typing import Callable, Optional

import numpy as np

from nnfs_infer.activations import ActivationSoftMax
from nnfs_infer.errors import DimensionMismatch
from nnfs_infer.layers import Layer, LayerDense, LayerInput, forward

Report = Callable[[int, str, np.ndarray], None]


def print_report(batch: int, label: str, values: np.ndarray):
    print(f"batch: {batch} {label}: " + " ".join(f"{v:f}" for v in values))


class Model:
    def __init__(self):
        self.layers: list[LayerDense] = []
        self.input_layer = LayerInput()
        self.output_layer = None
        self.normalizer = None

    def add(self, layer: LayerDense):
        if self.layers:
            self.layers[-1].connect(layer)
        self.layers.append(layer)
        self.output_layer = None

    def set(self, *, normalizer: Optional[ActivationSoftMax] = None):
        self.normalizer = normalizer

    def finalize(self):
        if not self.layers:
            raise RuntimeError("Model has no layers to finalize.")

        self.input_layer.connect(self.layers[0])
        self.output_layer = self.layers[-1]

        for prev, layer in zip(self.layers, self.layers[1:]):
            if prev.output_size != layer.input_size:
                raise DimensionMismatch(
                    f"{prev} produces {prev.output_size} values "
                    f"but {layer} expects {layer.input_size}"
                )

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return self.layers[-1].output_size

    def forward(
        self, row: np.ndarray, *, batch: int = 0, report: Optional[Report] = None
    ) -> np.ndarray:
        if self.output_layer is None:
            self.finalize()

        self.input_layer.forward(row)

        for idx, layer in enumerate(self.layers, start=1):
            forward(layer.prev, layer)
            if report is not None:
                report(batch, _label(layer, idx, "output"), layer.output)

        if self.normalizer is not None:
            self.normalizer.apply(self.output_layer)
            if report is not None:
                report(batch, _label(self.output_layer, len(self.layers), "softmax"), self.output_layer.output)

        return self.output_layer.output.copy()

    def run(self, X, *, report: Optional[Report] = None) -> np.ndarray:
        if self.output_layer is None:
            self.finalize()

        X = np.asarray(X, dtype=np.float64)
        # A bare row is a batch of one, an empty sequence a batch of none
        if X.ndim == 1:
            X = X.reshape(1, -1) if X.size else X.reshape(0, self.input_size)
        if X.ndim != 2:
            raise DimensionMismatch(f"expected a batch of rows, got shape {X.shape}")

        result = np.empty((X.shape[0], self.output_size))
        for batch, row in enumerate(X):
            result[batch] = self.forward(row, batch=batch, report=report)
        return result

    def dump(self):
        if self.layers:
            print("Layers:", end=" ")
            head: Layer | None = self.input_layer if self.output_layer else self.layers[0]
            while head:
                print(head, end="")
                head = head.next
                print(" <-> ", end="") if head else print()
            if self.normalizer is not None:
                print("Normalizer:", self.normalizer)
        else:
            print("No layers added yet.")


def _label(layer: LayerDense, idx: int, kind: str) -> str:
    return f"{layer.name or f'layer{idx}'}_{kind}"
