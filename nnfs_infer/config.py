# Reproducibility
SEED = 0

# Weight initialization
RAND_MAX = 10
RAND_MAX_SOFTMAX = 5
RAND_MIN_RANGE = -0.10
RAND_HIGH_RANGE = 0.10
INIT_BIASES = 0.0

# Spiral data
SPIRAL_POINTS = 100
SPIRAL_CLASSES = 3
SPIRAL_NOISE = 0.2

# Layers & batches network
NET_BATCH = [
    [1.0, 2.0, 3.0, 2.5],
    [2.0, 5.0, -1.0, 2.0],
    [-1.5, 2.7, 3.3, -0.8],
]
NET_INPUT_SIZE = 4
NET_HIDDEN_SIZE = 5
NET_OUTPUT_SIZE = 2

# Softmax network
SOFTMAX_INPUT_SIZE = 2
SOFTMAX_HIDDEN_SIZE = 3
SOFTMAX_OUTPUT_SIZE = 3
