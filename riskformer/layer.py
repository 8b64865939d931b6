"""Transformer layer: attention and a feed-forward network with residuals."""

from __future__ import annotations

import math

import numpy as np

from .attention import MultiHeadAttention
from .config import InitializationError, InvalidDimensionError, TransformerComponent

_EPSILON = np.float32(1e-5)


def _normal_std(variance_numerator: float, fan: int) -> float:
    std = math.sqrt(variance_numerator / fan) if fan > 0 else math.inf
    if not math.isfinite(std):
        raise InitializationError(f"Invalid standard deviation for fan {fan}")
    return std


class TransformerLayer(TransformerComponent):
    """Pre-norm transformer block combining attention and a ReLU network."""

    def __init__(
        self,
        d_model: int,
        n_heads: int,
        d_ff: int,
        dropout: float,
        rng: np.random.Generator | None = None,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.d_model = d_model
        self.d_ff = d_ff
        self.dropout = dropout
        self.attention = MultiHeadAttention(d_model, n_heads, rng)

        w1_std = _normal_std(2.0, d_model)
        w2_std = _normal_std(2.0, d_ff)
        self.w1 = rng.normal(0.0, w1_std, size=(d_model, d_ff)).astype(np.float32)
        self.w2 = rng.normal(0.0, w2_std, size=(d_ff, d_model)).astype(np.float32)

        self.norm1_scale = np.ones(d_model, dtype=np.float32)
        self.norm1_bias = np.zeros(d_model, dtype=np.float32)
        self.norm2_scale = np.ones(d_model, dtype=np.float32)
        self.norm2_bias = np.zeros(d_model, dtype=np.float32)

    def feed_forward(self, x: np.ndarray) -> np.ndarray:
        """Apply ``relu(x @ w1) @ w2``."""
        x = np.asarray(x, dtype=np.float32)
        hidden = np.maximum(x @ self.w1, np.float32(0.0))
        return hidden @ self.w2

    def layer_norm(self, x: np.ndarray) -> np.ndarray:
        """Normalise each row to zero mean and unit variance, then scale and shift.

        Both normalisation steps of the layer use the first set of scale and
        bias parameters.
        """
        x = np.asarray(x, dtype=np.float32)
        if x.ndim != 2 or x.shape[1] != self.d_model:
            width = x.shape[1] if x.ndim == 2 else x.shape
            raise InvalidDimensionError(
                f"Expected d_model {self.d_model}, got {width}"
            )
        mean = x.mean(axis=1, keepdims=True, dtype=np.float32)
        mean_sq = (x * x).mean(axis=1, keepdims=True, dtype=np.float32)
        var = mean_sq - mean * mean
        normalized = (x - mean) / np.sqrt(var + _EPSILON)
        return (normalized * self.norm1_scale + self.norm1_bias).astype(np.float32)

    def forward(self, x: np.ndarray) -> np.ndarray:
        """Map ``x`` of shape (batch, d_model) to an array of the same shape."""
        x = np.asarray(x, dtype=np.float32)
        attended = self.attention.forward(self.layer_norm(x))
        residual = x + attended
        ff = self.feed_forward(self.layer_norm(residual))
        return residual + ff