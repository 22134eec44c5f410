import numpy as np

from nnfs_infer import LayerDense, LayerInput, RandomInitializer, dot_product, forward

# A single neuron
inputs = [1.0, 2.0, 3.0]
weights = [3.1, 2.1, 8.7]
bias = 3.0

output = dot_product(inputs, weights, bias)
print(f"{output:f}")

# A layer of neurons
inputs = [1.0, 2.0, 3.0, 2.5]
weights = [[0.2, 0.8, -0.5, 1.0], [0.5, -0.91, 0.26, -0.5], [-0.26, -0.27, 0.17, 0.87]]
biases = [2.0, 3.0, 0.5]

x = LayerInput()
layer = LayerDense(4, 3, rng=RandomInitializer())
layer.weights.data[:] = np.ravel(weights)
layer.biases[:] = biases

x.forward(inputs)
forward(x, layer)
print(layer.output)
