# riskformer

Transformer building blocks for deep risk factor models, built on NumPy.
All weights are `float32` arrays. Every random initialiser takes an optional
`numpy.random.Generator` as `rng`, so results can be made reproducible.

## Installation

```
pip install riskformer
```

To run the test suite, install with the `test` extra and run `pytest`:

```
pip install "riskformer[test]"
pytest
```

## Components

| Module | Contents |
| --- | --- |
| `riskformer.config` | `TransformerConfig`, the abstract `TransformerComponent` interface, and the errors `ModelError`, `InvalidDimensionError` and `InitializationError` |
| `riskformer.utils` | `xavier_init(shape, rng)` and `compute_attention(query, key, value, d_k)` |
| `riskformer.attention` | `MultiHeadAttention` |
| `riskformer.position` | `PositionalEncoder` |
| `riskformer.layer` | `TransformerLayer` |
| `riskformer.temporal_fusion` | `TFTConfig`, `CheckpointConfig` and `GatingLayer` |

### Configuration and errors

`TransformerConfig` is a dataclass. A plain `TransformerConfig()` uses 8 heads,
`d_model` 512, `d_ff` 2048, dropout 0.1, 6 layers, `max_seq_len` 1024,
5 static and 10 temporal features and `hidden_size` 32.
`TransformerConfig.for_assets(n_assets, d_model, n_heads, d_ff, n_layers)`
sets dropout 0.1, `max_seq_len` 100, both feature counts to `n_assets`, and
`hidden_size` to `d_model // 2`.

`InvalidDimensionError` and `InitializationError` are subclasses of `ModelError`.

### Utilities

- `xavier_init(shape, rng=None)` draws a 2-D `float32` array from a normal
  distribution with mean 0 and standard deviation `sqrt(6 / (n_in + n_out))`.
  A shape that is not 2-D raises `InvalidDimensionError`.
- `compute_attention(query, key, value, d_k)` takes arrays of shape
  `(batch, heads, seq, dim)`, computes softmax attention scores from the first
  `int(d_k)` components of query and key, scaled by `sqrt(d_k)`, and returns
  the weighted values with shape `(batch, heads, seq, value_dim)`.

### Components

`MultiHeadAttention`, `PositionalEncoder` and `TransformerLayer` implement
`TransformerComponent`: their `forward(x)` takes a 2-D array of shape
`(batch, d_model)` and returns an array of the same shape. An input whose
feature dimension does not match raises `InvalidDimensionError`.

- `MultiHeadAttention(d_model, n_heads, rng=None)` projects the input with
  four square weight matrices (`w_q`, `w_k`, `w_v`, `w_o`) and weights the
  values by a sigmoid of the scaled query-key scores.
- `PositionalEncoder(d_model, max_seq_len)` builds a sinusoidal `encoding`
  table of shape `(max_seq_len, d_model)`; `forward` adds its first row to
  every input row.
- `TransformerLayer(d_model, n_heads, d_ff, dropout, rng=None)` applies layer
  normalisation, attention and a residual connection, then layer
  normalisation, a ReLU feed-forward network (`feed_forward`) and a second
  residual connection. `layer_norm` normalises each row; both normalisation
  steps use `norm1_scale` and `norm1_bias`. The `dropout` value is stored but
  not applied.
- `GatingLayer(input_size, hidden_size, rng=None)` works on 3-D arrays:
  `forward(x, context)` takes `x` of shape `(batch, seq, input_size)` and
  `context` of shape `(batch, seq, hidden_size)` and multiplies `x` by a
  sigmoid gate computed from `context`.

`TFTConfig` and `CheckpointConfig` are dataclasses holding settings for a
temporal fusion model and for gradient checkpointing.

## Example

```python
import numpy as np

from riskformer.config import TransformerConfig
from riskformer.layer import TransformerLayer

rng = np.random.default_rng(0)
config = TransformerConfig.for_assets(64, d_model=64, n_heads=8, d_ff=256, n_layers=2)
layers = [
    TransformerLayer(config.d_model, config.n_heads, config.d_ff, config.dropout, rng=rng)
    for _ in range(config.n_layers)
]

out = rng.standard_normal((20, 64)).astype(np.float32)
for layer in layers:
    out = layer.forward(out)
assert out.shape == (20, 64)
```

## What the package does not do

- There is no class that stacks layers into a complete transformer model;
  chain `TransformerLayer` instances yourself, as in the example.
- There is no temporal fusion model or variable selection network:
  `riskformer.temporal_fusion` holds only the two configuration classes and
  `GatingLayer`.
- Nothing is trained: weights are randomly initialised, there are no
  gradients, and nothing is saved to or loaded from disk.
- There is no command-line tool.