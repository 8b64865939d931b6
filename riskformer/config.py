"""Shared configuration, error types and the component interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class ModelError(Exception):
    """Base class for every error raised by the model code."""


class InvalidDimensionError(ModelError):
    """An array does not have the shape the component expects."""


class InitializationError(ModelError):
    """Weights or parameters could not be initialised."""


class TransformerComponent(ABC):
    """A building block that maps a 2-D array to a 2-D array."""

    @abstractmethod
    def forward(self, x: np.ndarray) -> np.ndarray:
        """Run the forward pass on ``x`` of shape (batch, features)."""


@dataclass
class TransformerConfig:
    """Architecture parameters of a transformer-based risk model."""

    n_heads: int = 8
    d_model: int = 512
    d_ff: int = 2048
    dropout: float = 0.1
    n_layers: int = 6
    max_seq_len: int = 1024
    num_static_features: int = 5
    num_temporal_features: int = 10
    hidden_size: int = 32

    @classmethod
    def for_assets(
        cls, n_assets: int, d_model: int, n_heads: int, d_ff: int, n_layers: int
    ) -> "TransformerConfig":
        """Build a configuration sized for ``n_assets`` assets."""
        return cls(
            n_heads=n_heads,
            d_model=d_model,
            d_ff=d_ff,
            dropout=0.1,
            n_layers=n_layers,
            max_seq_len=100,
            num_static_features=n_assets,
            num_temporal_features=n_assets,
            hidden_size=d_model // 2,
        )