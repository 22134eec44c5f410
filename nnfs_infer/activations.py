import numpy as np

from abc import ABC, abstractmethod

from nnfs_infer.errors import DimensionMismatch


class ActivationBase(ABC):
    @abstractmethod
    def apply(self, inputs: np.ndarray | float) -> np.ndarray | float:
        pass

    def __call__(self, inputs):
        return self.apply(inputs)

    def __str__(self):
        return self.__class__.__name__


class ActivationIdentity(ActivationBase):
    def apply(self, inputs):
        return inputs


class ActivationReLU(ActivationBase):
    def apply(self, inputs):
        return np.maximum(0, inputs)


class ActivationSigmoid(ActivationBase):
    def apply(self, inputs):
        # Split on sign so np.exp only ever sees non-positive arguments
        inputs = np.asarray(inputs, dtype=np.float64)
        exp = np.exp(-np.abs(inputs))
        output = np.where(inputs >= 0, 1 / (1 + exp), exp / (1 + exp))
        return output if output.ndim else float(output)


def softmax(values) -> np.ndarray:
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        raise DimensionMismatch("softmax needs at least one value")

    values = np.exp(values - np.max(values))
    return values / np.sum(values)


class ActivationSoftMax:
    # Runs once over the whole output of the last layer, not per neuron
    def apply(self, layer):
        output = layer.output
        if output.size == 0:
            raise DimensionMismatch("softmax needs at least one value")

        np.exp(output - np.max(output), out=output)
        output /= np.sum(output)

    @staticmethod
    def total(layer) -> float:
        return float(np.sum(layer.output))

    def __str__(self):
        return self.__class__.__name__


ACTIVATIONS = {
    "identity": ActivationIdentity,
    "relu": ActivationReLU,
    "sigmoid": ActivationSigmoid,
}
