"""Sinusoidal positional encoding."""

from __future__ import annotations

import numpy as np

from .config import InvalidDimensionError, TransformerComponent


class PositionalEncoder(TransformerComponent):
    """Adds the position-zero sinusoidal encoding to every input row."""

    def __init__(self, d_model: int, max_seq_len: int) -> None:
        self.d_model = d_model
        self.max_seq_len = max_seq_len

        positions = np.arange(max_seq_len, dtype=np.float32)[:, None]
        dims = np.arange(d_model)
        div_term = np.exp(2.0 * (dims // 2).astype(np.float32) / np.float32(d_model))
        angles = positions / div_term.astype(np.float32)
        self.encoding = np.where(dims % 2 == 0, np.sin(angles), np.cos(angles)).astype(
            np.float32
        )

    def forward(self, x: np.ndarray) -> np.ndarray:
        """Return ``x`` with the first encoding row added to each row."""
        x = np.asarray(x, dtype=np.float32)
        if x.ndim != 2 or x.shape[1] != self.d_model:
            width = x.shape[1] if x.ndim == 2 else x.shape
            raise InvalidDimensionError(
                f"Expected d_model {self.d_model}, got {width}"
            )
        if self.max_seq_len == 0:
            raise InvalidDimensionError("Encoder has no positions to add")
        return x + self.encoding[0]