from nnfs_infer import LayerDense, Model, RandomInitializer, config, print_report

rng = RandomInitializer(seed=config.SEED, range_divisor=config.RAND_MAX)

model = Model()
model.add(LayerDense(config.NET_INPUT_SIZE, config.NET_HIDDEN_SIZE, rng=rng, name="layerX"))
model.add(LayerDense(config.NET_HIDDEN_SIZE, config.NET_OUTPUT_SIZE, rng=rng, name="layerY"))
model.finalize()
model.dump()

model.run(config.NET_BATCH, report=print_report)
