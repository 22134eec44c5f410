from nnfs_infer import (
    ActivationReLU,
    ActivationSoftMax,
    LayerDense,
    Model,
    RandomInitializer,
    config,
    print_report,
    spiral_data,
)

rng = RandomInitializer(seed=config.SEED, range_divisor=config.RAND_MAX_SOFTMAX)

x, y = spiral_data(config.SPIRAL_POINTS, config.SPIRAL_CLASSES, rng=rng)

softmax = ActivationSoftMax()

model = Model()
model.add(
    LayerDense(
        config.SOFTMAX_INPUT_SIZE, config.SOFTMAX_HIDDEN_SIZE, ActivationReLU(), rng=rng
    )
)
model.add(LayerDense(config.SOFTMAX_HIDDEN_SIZE, config.SOFTMAX_OUTPUT_SIZE, rng=rng))
model.set(normalizer=softmax)
model.finalize()
model.dump()


def report(batch, label, values):
    print_report(batch, label, values)
    if label.endswith("softmax"):
        print(f"batch: {batch} normalize_sum: {softmax.total(model.output_layer):f}")
        print("--")


output = model.run(x, report=report)
print(output[:5])
print(y[:5])
