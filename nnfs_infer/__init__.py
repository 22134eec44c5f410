from nnfs_infer.activations import (
    ActivationIdentity,
    ActivationReLU,
    ActivationSigmoid,
    ActivationSoftMax,
    softmax,
)
from nnfs_infer.datasets import spiral_data
from nnfs_infer.errors import (
    AllocationFailure,
    DimensionMismatch,
    InvalidRange,
    NetworkError,
)
from nnfs_infer.layers import LayerDense, LayerInput, create_layer, dot_product, forward
from nnfs_infer.model import Model, print_report
from nnfs_infer.random_init import RandomInitializer
from nnfs_infer import config

__version__ = "0.1.0"
