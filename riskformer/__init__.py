"""Transformer building blocks for deep risk factor models, built on NumPy."""

__version__ = "0.1.0"
__all__ = ["attention", "config", "layer", "position", "temporal_fusion", "utils"]