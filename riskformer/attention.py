"""Multi-head attention block with sigmoid-scored attention weights."""

from __future__ import annotations

import math

import numpy as np

from .config import InitializationError, InvalidDimensionError, TransformerComponent


class MultiHeadAttention(TransformerComponent):
    """Attention with square query, key, value and output projections."""

    def __init__(
        self, d_model: int, n_heads: int, rng: np.random.Generator | None = None
    ) -> None:
        if n_heads <= 0:
            raise InvalidDimensionError(f"n_heads must be positive, got {n_heads}")
        self.d_model = d_model
        self.n_heads = n_heads
        self.d_k = d_model // n_heads

        if self.d_k <= 0:
            raise InitializationError(
                f"Head dimension must be positive, got {self.d_k}"
            )
        std = math.sqrt(1.0 / self.d_k)
        rng = rng if rng is not None else np.random.default_rng()
        shape = (d_model, d_model)
        self.w_q = rng.normal(0.0, std, size=shape).astype(np.float32)
        self.w_k = rng.normal(0.0, std, size=shape).astype(np.float32)
        self.w_v = rng.normal(0.0, std, size=shape).astype(np.float32)
        self.w_o = rng.normal(0.0, std, size=shape).astype(np.float32)

    def forward(self, x: np.ndarray) -> np.ndarray:
        """Map ``x`` of shape (batch, d_model) to an array of the same shape."""
        x = np.asarray(x, dtype=np.float32)
        if x.ndim != 2 or x.shape[1] != self.d_model:
            raise InvalidDimensionError(
                f"Expected input of shape (batch, {self.d_model}), got {x.shape}"
            )
        q = x @ self.w_q
        k = x @ self.w_k
        v = x @ self.w_v

        scores = (q @ k.T) / np.float32(math.sqrt(self.d_k))
        with np.errstate(over="ignore"):
            weights = 1.0 / (1.0 + np.exp(-scores))
        context = weights.astype(np.float32) @ v
        return context @ self.w_o