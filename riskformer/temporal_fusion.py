"""Configuration for temporal fusion models and the gating layer."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import InvalidDimensionError
from .utils import xavier_init


@dataclass
class TFTConfig:
    """Architecture parameters of a temporal fusion transformer."""

    d_model: int = 64
    n_heads: int = 8
    d_ff: int = 256
    dropout: float = 0.1
    n_layers: int = 3
    max_seq_len: int = 64
    num_static_features: int = 5
    num_temporal_features: int = 10
    hidden_size: int = 32


@dataclass(frozen=True)
class CheckpointConfig:
    """Settings for gradient checkpointing."""

    enabled: bool = False
    num_segments: int = 4
    checkpoint_vsn: bool = True
    checkpoint_attention: bool = True


class GatingLayer:
    """Scales each input feature by a sigmoid gate computed from a context."""

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.input_size = input_size
        self.hidden_size = hidden_size
        self.gate_weights = xavier_init((hidden_size, input_size), rng)
        self.gate_bias = np.zeros(input_size, dtype=np.float32)

    def forward(self, x: np.ndarray, context: np.ndarray) -> np.ndarray:
        """Gate ``x`` of shape (batch, seq, input_size).

        ``context`` has shape (batch, seq, hidden_size); the result has the
        shape of ``x``.
        """
        x = np.asarray(x, dtype=np.float32)
        context = np.asarray(context, dtype=np.float32)
        if x.ndim != 3 or x.shape[2] != self.input_size:
            raise InvalidDimensionError(
                f"Expected input of shape (batch, seq, {self.input_size}), "
                f"got {x.shape}"
            )
        if context.ndim != 3 or context.shape[2] != self.hidden_size:
            raise InvalidDimensionError(
                f"Expected context of shape (batch, seq, {self.hidden_size}), "
                f"got {context.shape}"
            )
        if context.shape[:2] != x.shape[:2]:
            raise InvalidDimensionError(
                f"Context leading shape {context.shape[:2]} does not match "
                f"input {x.shape[:2]}"
            )
        logits = context @ self.gate_weights + self.gate_bias
        with np.errstate(over="ignore"):
            gate = 1.0 / (1.0 + np.exp(-logits))
        return (gate * x).astype(np.float32)