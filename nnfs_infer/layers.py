import numpy as np

from nnfs_infer import config
from nnfs_infer.activations import ACTIVATIONS, ActivationBase
from nnfs_infer.errors import AllocationFailure, DimensionMismatch
from nnfs_infer.matrix import RowMajorMatrix
from nnfs_infer.random_init import RandomInitializer


class Layer:
    def __init__(self):
        self.next = self.prev = None

    def connect(self, other: "Layer"):
        self.next = other
        other.prev = self

    def __str__(self):
        return self.__class__.__name__


class LayerInput(Layer):
    # Output is a borrowed view of the bound row, never a copy
    def __init__(self):
        super().__init__()
        self.output = np.empty(0)

    @property
    def output_size(self) -> int:
        return self.output.size

    def forward(self, inputs):
        self.output = _as_row(inputs)


class LayerDense(Layer):
    def __init__(
        self,
        n_inputs: int,
        n_neurons: int,
        activation: ActivationBase | str | None = None,
        *,
        rng: RandomInitializer,
        low: float = config.RAND_MIN_RANGE,
        high: float = config.RAND_HIGH_RANGE,
        name: str | None = None,
    ):
        super().__init__()
        if isinstance(activation, str):
            try:
                activation = ACTIVATIONS[activation.lower()]()
            except KeyError:
                raise ValueError(
                    f"unknown activation {activation!r}, expected one of {sorted(ACTIVATIONS)}"
                ) from None

        # One row per neuron, so neuron i's weights are contiguous
        self.weights = RowMajorMatrix(n_neurons, n_inputs)
        try:
            self.biases = np.full(self.weights.rows, config.INIT_BIASES, dtype=np.float64)
            self.output = np.zeros(self.weights.rows, dtype=np.float64)
        except MemoryError as exc:
            raise AllocationFailure(f"cannot allocate buffers for {n_neurons} neurons") from exc

        self.input_size = self.weights.cols
        self.output_size = self.weights.rows
        self.activation = activation
        self.name = name

        for idx in range(len(self.weights)):
            self.weights.data[idx] = rng.next(low, high)

    def forward(self, inputs: np.ndarray):
        inputs = _as_row(inputs)
        if inputs.size != self.input_size:
            raise DimensionMismatch(
                f"{self} expects {self.input_size} inputs, got {inputs.size}"
            )

        values = np.dot(self.weights.as_array(), inputs)

        # The activation sees the raw weighted sum; the bias goes on afterwards
        if self.activation is not None:
            values = self.activation.apply(values)

        np.add(values, self.biases, out=self.output)

    def __str__(self):
        if self.name:
            return self.name
        act = f", {self.activation}" if self.activation is not None else ""
        return f"{self.__class__.__name__}({self.input_size} -> {self.output_size}{act})"


def create_layer(
    n_inputs: int,
    n_neurons: int,
    activation: ActivationBase | str | None = None,
    *,
    rng: RandomInitializer,
    **kwargs,
) -> LayerDense:
    return LayerDense(n_inputs, n_neurons, activation, rng=rng, **kwargs)


def forward(previous: Layer, following: LayerDense):
    if previous.output_size != following.input_size:
        raise DimensionMismatch(
            f"cannot feed {previous} ({previous.output_size} outputs) "
            f"into {following} ({following.input_size} inputs)"
        )
    following.forward(previous.output)


def dot_product(
    inputs,
    weights,
    bias: float,
    activation: ActivationBase | None = None,
) -> float:
    # Weighted sum, then the activation, then the bias
    inputs = np.asarray(inputs, dtype=np.float64)
    weights = np.asarray(weights, dtype=np.float64)
    if inputs.shape != weights.shape:
        raise DimensionMismatch(
            f"{inputs.size} inputs against {weights.size} weights"
        )

    output = float(np.dot(inputs, weights))
    if activation is not None:
        output = float(activation.apply(output))
    return output + bias


def _as_row(inputs) -> np.ndarray:
    inputs = np.asarray(inputs, dtype=np.float64)
    if inputs.ndim > 1:
        raise DimensionMismatch(f"expected a single row, got shape {inputs.shape}")
    return inputs.reshape(-1)
